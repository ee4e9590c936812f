#!/usr/bin/env python3
"""Streaming example for mcoded7.

Splits a payload into fixed-size SysEx packets by handing the encoder a fresh
output window per packet, then reassembles it on the receiving side.
"""

from __future__ import annotations

from mcoded7 import ByteSink, ByteSource, Mcoded7Decoder, Mcoded7Encoder, Mcoded7Status

PACKET_DATA_SIZE = 20


def send(payload: bytes) -> list[bytes]:
    """Encode payload into SysEx packets."""
    encoder = Mcoded7Encoder(ByteSource(payload))
    packets = []

    while True:
        sink = ByteSink.allocate(PACKET_DATA_SIZE)
        encoder.rebind_output(sink)
        status = encoder.finalize()
        if sink.written:
            packets.append(b"\xf0" + sink.getvalue() + b"\xf7")
        print(f"   packet {len(packets):2d}: {status.name:<18} {encoder.stats().model_dump_json()}")
        if status is Mcoded7Status.FINISHED:
            return packets


def receive(packets: list[bytes]) -> bytes:
    """Decode SysEx packets back into the payload."""
    decoder = Mcoded7Decoder()
    out = bytearray()

    for packet in packets:
        # Staged bytes from the previous packet can complete an extra block
        sink = ByteSink.allocate(PACKET_DATA_SIZE + 8)
        decoder.bind(ByteSource(packet, 1, len(packet) - 1), sink)
        decoder.decode()
        out.extend(sink.getvalue())

    sink = ByteSink.allocate(8)
    decoder.rebind_output(sink)
    decoder.finalize()
    out.extend(sink.getvalue())
    return bytes(out)


def main() -> None:
    """Run the streaming example."""
    payload = bytes(range(0x60, 0xA0))

    print("1. Sending...")
    packets = send(payload)
    print()

    print("2. Receiving...")
    received = receive(packets)
    print(f"   {len(packets)} packets, {len(received)} bytes decoded")
    print(f"   Payload intact: {received[: len(payload)] == payload}")


if __name__ == "__main__":
    main()
