"""Main CLI entry point for mcoded7."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..cli.transcode import run_transcode
from ..config import StreamConfig
from ..exceptions import Mcoded7Error


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the mcoded7 CLI."""
    parser = argparse.ArgumentParser(
        prog="mcoded7",
        description="mcoded7: 7-bit-clean transcoder for MIDI SysEx payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mcoded7 encode firmware.bin -o firmware.m7     Encode a file
  mcoded7 decode firmware.m7 --length 1000       Decode and strip padding
  cat data.bin | mcoded7 encode --stats > out    Encode stdin, print stats
  mcoded7 --version                              Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"mcoded7 {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    for name, help_text in (
        ("encode", "Encode 8-bit data into 7-bit-clean Mcoded7 blocks"),
        ("decode", "Decode Mcoded7 blocks back into 8-bit data"),
    ):
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
        sub.add_argument(
            "-o",
            "--output",
            default="-",
            metavar="FILE",
            help="Output file (default: stdout)",
        )
        sub.add_argument(
            "--chunk-size",
            type=int,
            default=StreamConfig.read_chunk_size,
            metavar="N",
            help="Bytes read from the input per step (default: %(default)s)",
        )
        sub.add_argument(
            "--buffer-size",
            type=int,
            default=StreamConfig.output_buffer_size,
            metavar="N",
            help="Output window size in bytes (default: %(default)s)",
        )
        sub.add_argument(
            "--stats",
            action="store_true",
            help="Print coder statistics as JSON to stderr",
        )
        if name == "decode":
            sub.add_argument(
                "--length",
                type=_non_negative,
                metavar="N",
                help="Original payload length; trailing padding is stripped",
            )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the mcoded7 CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = StreamConfig(
            read_chunk_size=args.chunk_size,
            output_buffer_size=args.buffer_size,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        stats = run_transcode(
            args.command,
            args.input,
            args.output,
            config,
            length=getattr(args, "length", None),
        )
    except (Mcoded7Error, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.stats:
        print(stats.model_dump_json(), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
