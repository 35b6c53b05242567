"""
Exception types for wavegen.
License: GPL-3.0-or-later
"""


class WavegenError(Exception):
    """Base class for every error raised by wavegen."""


class InvalidConfigurationError(WavegenError, ValueError):
    """Raised when a core configuration (or a shared table bank) is unusable."""


class PhaseIndexError(WavegenError, IndexError):
    """Raised when a phase index falls outside ``[0, table_size - 1]``."""


class SelectorCodeError(WavegenError, ValueError):
    """Raised when a selector is not one of the four 2-bit waveform codes."""


class HarnessConfigError(WavegenError, ValueError):
    """Raised when tick driver settings cannot be used with a core."""


__all__ = [
    "WavegenError",
    "InvalidConfigurationError",
    "PhaseIndexError",
    "SelectorCodeError",
    "HarnessConfigError",
]
