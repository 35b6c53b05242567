"""
Amplitude lookup tables for wavegen.
License: GPL-3.0-or-later
"""

from __future__ import annotations

import logging

import numpy as np

from .config import CoreConfig
from .errors import PhaseIndexError
from .generators import build_sawtooth, build_sine, build_triangle, square_sample
from .kinds import WaveformKind


class TableBank:
    """Sine, triangle and sawtooth tables for one :class:`CoreConfig`.

    The tables are built once and are read-only numpy arrays, so a single
    bank can back any number of cores with the same configuration.
    """

    def __init__(self, config: CoreConfig):
        self.config = config
        size = config.table_size
        max_amplitude = config.max_amplitude

        self._tables = {
            WaveformKind.SINE: build_sine(size, max_amplitude),
            WaveformKind.TRIANGLE: build_triangle(size, max_amplitude),
            WaveformKind.SAWTOOTH: build_sawtooth(size, max_amplitude),
        }
        logging.info(
            'TableBank: built 3 tables of %d entries, %d data bits',
            size, config.data_bits,
        )

    @property
    def sine(self) -> np.ndarray:
        return self._tables[WaveformKind.SINE]

    @property
    def triangle(self) -> np.ndarray:
        return self._tables[WaveformKind.TRIANGLE]

    @property
    def sawtooth(self) -> np.ndarray:
        return self._tables[WaveformKind.SAWTOOTH]

    def table_for(self, kind: WaveformKind) -> np.ndarray:
        """Return the table backing *kind*; SQUARE has none and raises ``KeyError``."""
        try:
            return self._tables[kind]
        except KeyError:
            raise KeyError(f"{WaveformKind(kind).name} is computed, not stored in a table") from None

    def lookup(self, kind: WaveformKind, phase_index: int) -> int:
        """Amplitude of *kind* at *phase_index*; SQUARE is computed from the phase."""
        if not 0 <= phase_index < self.config.table_size:
            raise PhaseIndexError(
                f"phase index {phase_index} outside [0, {self.config.boundary_index}]"
            )
        if kind is WaveformKind.SQUARE:
            return square_sample(phase_index, self.config.table_size, self.config.max_amplitude)
        return int(self.table_for(kind)[phase_index])

    def __len__(self):
        return self.config.table_size

    def __repr__(self):
        return (
            f"TableBank(address_bits={self.config.address_bits}, "
            f"data_bits={self.config.data_bits})"
        )


__all__ = ["TableBank"]
