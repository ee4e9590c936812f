"""Utility functions for mcoded7.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import decoded_size, encoded_size, padding_size

__all__ = [
    "encoded_size",
    "decoded_size",
    "padding_size",
]
