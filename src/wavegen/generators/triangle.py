"""
Triangle table generator for wavegen.
License: GPL-3.0-or-later
"""

from __future__ import annotations

import numpy as np

from .common import phases, quantize, validate_table_args


def build_triangle(size: int, max_amplitude: int) -> np.ndarray:
    """Return a unit triangle period scaled to ``[0, max_amplitude]``.

    Starts at 0, peaks at ``size // 2`` and falls back towards 0.
    """
    validate_table_args(size, max_amplitude)
    x = phases(size) / size
    unit = 2.0 * np.abs(x - np.floor(x + 0.5))
    return quantize(unit * max_amplitude, max_amplitude)


__all__ = ["build_triangle"]
