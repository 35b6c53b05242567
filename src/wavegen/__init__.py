"""
wavegen - lookup-table waveform core with boundary-latched selection.
License: GPL-3.0-or-later
"""

from .config import CoreConfig
from .errors import (
    HarnessConfigError,
    InvalidConfigurationError,
    PhaseIndexError,
    SelectorCodeError,
    WavegenError,
)
from .kinds import WaveformKind, decode
from .table_bank import TableBank
from .version import __version__, get_version, get_version_info
from .waveform_core import CoreState, WaveformCore

__all__ = [
    "__version__",
    "get_version",
    "get_version_info",
    "CoreConfig",
    "CoreState",
    "TableBank",
    "WaveformCore",
    "WaveformKind",
    "decode",
    "WavegenError",
    "InvalidConfigurationError",
    "PhaseIndexError",
    "SelectorCodeError",
    "HarnessConfigError",
]
