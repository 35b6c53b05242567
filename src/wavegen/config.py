"""
Core configuration for wavegen.
License: GPL-3.0-or-later
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .errors import InvalidConfigurationError

ADDRESS_BITS_RANGE = (1, 30)
DATA_BITS_RANGE = (1, 31)


@dataclass(frozen=True)
class CoreConfig:
    """Bit widths fixed for the lifetime of a table bank and its cores."""

    address_bits: int
    data_bits: int

    def __post_init__(self):
        errors = _validate_config(self)
        if errors:
            raise InvalidConfigurationError("; ".join(errors))

    @property
    def table_size(self) -> int:
        return 1 << self.address_bits

    @property
    def max_amplitude(self) -> int:
        return (1 << self.data_bits) - 1

    @property
    def boundary_index(self) -> int:
        """Last phase index of a period; the only tick where the selector latches."""
        return self.table_size - 1

    @property
    def square_threshold(self) -> int:
        """Highest phase index for which the square wave is high."""
        return (self.table_size - 1) // 2


# ---------------------------------------------------------------------------
# Internal helpers


def _check_bits(name: str, value: object, bounds: tuple[int, int]) -> List[str]:
    low, high = bounds
    # bool is an int subclass but never a bit width
    if isinstance(value, bool) or not isinstance(value, int):
        return [f"{name} must be an integer, got {type(value).__name__}"]
    if not low <= value <= high:
        return [f"{name} must be between {low} and {high} (inclusive), got {value}"]
    return []


def _validate_config(config: CoreConfig) -> List[str]:
    errors: List[str] = []
    errors.extend(_check_bits("address_bits", config.address_bits, ADDRESS_BITS_RANGE))
    errors.extend(_check_bits("data_bits", config.data_bits, DATA_BITS_RANGE))
    return errors


__all__ = [
    "ADDRESS_BITS_RANGE",
    "DATA_BITS_RANGE",
    "CoreConfig",
]
