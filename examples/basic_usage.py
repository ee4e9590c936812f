#!/usr/bin/env python3
"""Basic usage example for mcoded7.

This example demonstrates:
1. One-shot encoding and decoding
2. Recovering the exact payload with an out-of-band length
3. Calculating encoded sizes
4. Working with single blocks
"""

from __future__ import annotations

from mcoded7 import decode, decode_block, encode, encode_block, encoded_size, padding_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("mcoded7 Basic Usage Example")
    print("=" * 60)
    print()

    payload = bytes([0xDE, 0xAD, 0xBE, 0xEF, 0x00, 0x7F, 0x80, 0xFF, 0x42])

    print("1. Encoding a binary payload...")
    print(f"   Raw ({len(payload)} bytes):     {payload.hex(' ')}")
    encoded = encode(payload)
    print(f"   Encoded ({len(encoded)} bytes): {encoded.hex(' ')}")
    print(f"   7-bit clean: {all(b < 0x80 for b in encoded)}")
    print()

    print("2. Decoding...")
    padded = decode(encoded)
    print(f"   Without length: {padded.hex(' ')}")
    print(f"   ({padding_size(len(payload))} padding bytes appended by the encoder)")
    exact = decode(encoded, length=len(payload))
    print(f"   With length:    {exact.hex(' ')}")
    assert exact == payload
    print()

    print("3. Sizes...")
    for size in (1, 7, 8, 64, 256):
        print(f"   {size:4d} raw bytes -> {encoded_size(size):4d} encoded bytes")
    print()

    print("4. Single block...")
    block = encode_block(b"\xc1\x00\x00\x00\x00\x00\x00")
    print(f"   encode_block(c1 00 00 00 00 00 00) = {block.hex(' ')}")
    print(f"   decode_block(...)                  = {decode_block(block).hex(' ')}")


if __name__ == "__main__":
    main()
