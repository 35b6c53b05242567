"""
Shared quantization helpers for the table generators.
License: GPL-3.0-or-later
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..errors import InvalidConfigurationError

TABLE_DTYPE = np.uint32


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round non-negative *values* to the nearest integer, halves away from zero.

    ``numpy.round`` rounds halves to even, which would put the sine midpoint
    of an 8-bit table at 127 instead of 128.
    """
    return np.floor(values + 0.5)


def quantize(values: np.ndarray, max_amplitude: int) -> np.ndarray:
    """Round *values* and freeze them as a read-only unsigned table."""
    table = np.clip(round_half_up(values), 0, max_amplitude).astype(TABLE_DTYPE)
    table.setflags(write=False)
    return table


def phases(size: int) -> np.ndarray:
    return np.arange(size, dtype=np.float64)


def validate_table_args(size: int, max_amplitude: int) -> None:
    errors: List[str] = []
    if size < 2:
        errors.append("table size must be at least 2")
    if size & (size - 1):
        errors.append("table size must be a power of two")
    if max_amplitude < 1:
        errors.append("max_amplitude must be positive")
    if max_amplitude > np.iinfo(TABLE_DTYPE).max:
        errors.append("max_amplitude does not fit a 32-bit table entry")
    if errors:
        raise InvalidConfigurationError("; ".join(errors))


__all__ = [
    "TABLE_DTYPE",
    "round_half_up",
    "quantize",
    "phases",
    "validate_table_args",
]
