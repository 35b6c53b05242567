"""
Sine table generator for wavegen.
License: GPL-3.0-or-later
"""

from __future__ import annotations

import numpy as np

from .common import phases, quantize, validate_table_args


def build_sine(size: int, max_amplitude: int) -> np.ndarray:
    """Return one full sine period over *size* phases, offset into ``[0, max_amplitude]``.

    The period is *size* entries long, so ``table[0]`` is the midpoint and the
    peak sits at ``size // 4``.
    """
    validate_table_args(size, max_amplitude)
    angle = phases(size) * (2.0 * np.pi / size)
    raw = (1.0 + np.sin(angle)) * max_amplitude / 2.0
    return quantize(raw, max_amplitude)


__all__ = ["build_sine"]
