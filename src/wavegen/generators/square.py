"""
Square waveform for wavegen.
License: GPL-3.0-or-later

The square wave carries one bit of information per phase, so it is computed
from the phase index instead of being stored as a table.
"""

from __future__ import annotations

import numpy as np

from .common import TABLE_DTYPE, validate_table_args


def square_sample(phase_index: int, size: int, max_amplitude: int) -> int:
    """High for the first half of the period (``phase_index <= (size - 1) // 2``)."""
    return max_amplitude if phase_index <= (size - 1) // 2 else 0


def build_square(size: int, max_amplitude: int) -> np.ndarray:
    """Materialize the square period, for export and plotting only."""
    validate_table_args(size, max_amplitude)
    table = np.zeros(size, dtype=TABLE_DTYPE)
    table[: (size - 1) // 2 + 1] = max_amplitude
    table.setflags(write=False)
    return table


__all__ = [
    "square_sample",
    "build_square",
]
