"""
Number formatting and parsing for wavegen exports.
License: GPL-3.0-or-later
"""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from si_prefix import si_parse

# SI prefixes understood by LTspice stimulus files; LTspice reads M as milli
SI_PREFIXES = {
    'f': 1e-15,
    'p': 1e-12,
    'n': 1e-9,
    'u': 1e-6,
    'm': 1e-3,
    '': 1.0,
    'k': 1e3,
    'Meg': 1e6,
    'G': 1e9,
}


def strip_trailing_zeros(s: str) -> str:
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s


def ltspice_si_parse(value: Union[str, float, int]) -> float:
    """Parse ``"10n"``, ``"1.5u"`` or ``"2e-3"`` style values into a float.

    LTspice writes micro as ``u`` and mega as ``Meg``, and reads ``M`` as milli.
    ``si_prefix`` disagrees on all three, so they are converted here.
    """
    if isinstance(value, (int, float)):
        return float(value)
    clean_str = value.strip().lstrip('+')
    if clean_str.endswith('s'):
        clean_str = clean_str[:-1]
    if clean_str.lower().endswith('meg'):
        return float(clean_str[:-3]) * 1e6
    if clean_str.endswith('u'):
        return float(clean_str[:-1]) * 1e-6
    if clean_str.endswith('M'):
        clean_str = clean_str[:-1] + 'm'
    try:
        return float(si_parse(clean_str))
    except (AttributeError, AssertionError):
        # si_parse fails on unmatched input instead of raising ValueError
        raise ValueError(f"cannot parse SI value {value!r}") from None


def _format_significant(value: float, digits: int = 12) -> str:
    if value == 0:
        return '0'
    formatted = f"{value:.{digits}g}"
    if 'e' in formatted or 'E' in formatted:
        return formatted.lower()
    return strip_trailing_zeros(formatted)


def _best_si_for(value: float) -> Tuple[str, float]:
    """Pick the SI prefix giving a mantissa in 1..999, closest to 1."""
    if value == 0:
        return '', 1.0
    best = None
    for prefix, mult in SI_PREFIXES.items():
        conv = abs(value / mult)
        if 1 <= conv < 1000:
            score = abs(conv - 1)
            if best is None or score < best[0]:
                best = (score, prefix, mult)
    if best is not None:
        return best[1], best[2]
    return '', 1.0


def format_si(value: float, target_prefix: Optional[str] = None) -> str:
    if value == 0:
        return '0'

    if target_prefix is not None and target_prefix in SI_PREFIXES:
        prefix, mult = target_prefix, SI_PREFIXES[target_prefix]
    else:
        prefix, mult = _best_si_for(value)
    converted = value / mult
    nearest = round(converted)
    if math.isclose(converted, nearest, rel_tol=0.0, abs_tol=1e-6):
        return f"{int(nearest)}{prefix}"
    return f"{_format_significant(converted)}{prefix}"


def format_plain(value: float, digits: int = 9) -> str:
    """Plain decimal with up to *digits* significant figures, no SI suffix."""
    if value == 0:
        return '0'
    return strip_trailing_zeros(f"{value:.{digits}g}")


class FormatService:
    """Formatting used when writing stimulus text."""

    def __init__(self, value_digits: int = 9):
        self.value_digits = value_digits

    def format_time(self, time_value: float) -> str:
        return format_si(time_value)

    def format_value(self, value: float) -> str:
        return format_plain(value, self.value_digits)

    def parse(self, text: Union[str, float, int]) -> float:
        return ltspice_si_parse(text)


__all__ = [
    'SI_PREFIXES',
    'strip_trailing_zeros',
    'ltspice_si_parse',
    'format_si',
    'format_plain',
    'FormatService',
]
