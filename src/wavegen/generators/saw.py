"""
Sawtooth table generator for wavegen.
License: GPL-3.0-or-later
"""

from __future__ import annotations

import numpy as np

from .common import phases, quantize, validate_table_args


def build_sawtooth(size: int, max_amplitude: int) -> np.ndarray:
    """Return a linear ramp from 0 at phase 0 to *max_amplitude* at ``size - 1``.

    Unlike sine and triangle the ramp spans ``size - 1`` steps, so the last
    address holds the full-scale value.
    """
    validate_table_args(size, max_amplitude)
    raw = phases(size) * max_amplitude / (size - 1)
    return quantize(raw, max_amplitude)


__all__ = ["build_sawtooth"]
