"""Driver, export and preview services built around the wavegen core."""

from .formatting import FormatService
from .harness import HarnessConfig, TickDriver, Trace
from .pwl_export import trace_to_pwl, write_pwl
from .rom_export import format_rom, write_bank, write_rom

__all__ = [
    "FormatService",
    "HarnessConfig",
    "TickDriver",
    "Trace",
    "trace_to_pwl",
    "write_pwl",
    "format_rom",
    "write_rom",
    "write_bank",
]
