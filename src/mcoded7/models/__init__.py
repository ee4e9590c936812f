"""Data models for mcoded7."""

from __future__ import annotations

from .stats import CoderStats

__all__ = ["CoderStats"]
