"""
Waveform selector codes for wavegen.
License: GPL-3.0-or-later
"""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Union

from .errors import SelectorCodeError

SelectorCode = Union["WaveformKind", int, str]


class WaveformKind(IntEnum):
    """The four waveforms, valued by their 2-bit selector code."""

    SINE = 0b00
    TRIANGLE = 0b01
    SAWTOOTH = 0b10
    SQUARE = 0b11

    @property
    def code(self) -> str:
        """Two-character binary form, e.g. ``"11"`` for SQUARE."""
        return format(int(self), "02b")

    @property
    def has_table(self) -> bool:
        return self is not WaveformKind.SQUARE


_CODE_STRINGS = {kind.code: kind for kind in WaveformKind}


def decode(selector: SelectorCode) -> WaveformKind:
    """Map a selector (kind, int 0..3 or ``"00"``..``"11"``) to a :class:`WaveformKind`."""
    if isinstance(selector, WaveformKind):
        return selector
    if isinstance(selector, str):
        try:
            return _CODE_STRINGS[selector.strip()]
        except KeyError:
            raise SelectorCodeError(f"selector code must be one of 00, 01, 10, 11, got {selector!r}") from None
    try:
        if isinstance(selector, bool):
            raise TypeError
        value = operator.index(selector)
    except TypeError:
        raise SelectorCodeError(f"selector code must be an int or a 2-bit string, got {type(selector).__name__}") from None
    try:
        return WaveformKind(value)
    except ValueError:
        raise SelectorCodeError(f"selector code must be between 0 and 3, got {selector}") from None


__all__ = [
    "SelectorCode",
    "WaveformKind",
    "decode",
]
