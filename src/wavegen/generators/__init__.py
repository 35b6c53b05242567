"""Waveform table generators for wavegen."""

from .saw import build_sawtooth
from .sine import build_sine
from .square import build_square, square_sample
from .triangle import build_triangle

__all__ = [
    "build_sine",
    "build_triangle",
    "build_sawtooth",
    "build_square",
    "square_sample",
]
