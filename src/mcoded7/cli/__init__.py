"""Command line interface for mcoded7."""
