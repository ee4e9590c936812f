"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload spanning several blocks with high bits set."""
    return bytes(range(0x70, 0x70 + 40))


@pytest.fixture
def ascii_block() -> bytes:
    """Seven bytes with every high bit clear."""
    return bytes([0x41, 0x42, 0x43, 0x44, 0x45, 0x46, 0x47])
