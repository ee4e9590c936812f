"""Run the usage examples embedded in module docstrings."""

from __future__ import annotations

import doctest
from types import ModuleType

import pytest

import mcoded7
from mcoded7 import streaming
from mcoded7.codec import buffers, decoder, encoder, transform
from mcoded7.models import stats
from mcoded7.utils import sizing


@pytest.mark.parametrize(
    "module",
    [mcoded7, streaming, buffers, decoder, encoder, transform, stats, sizing],
    ids=lambda m: m.__name__,
)
def test_docstring_examples(module: ModuleType) -> None:
    """Test docstring examples produce the output they show."""
    result = doctest.testmod(module)

    assert result.attempted > 0
    assert result.failed == 0
