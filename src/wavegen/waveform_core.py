"""
Synchronous waveform selection and output for wavegen.
License: GPL-3.0-or-later

Each call to :meth:`WaveformCore.step` is one clock edge. Two registers are
updated on that edge from the values they held before it:

* the selected waveform, which only takes the incoming selector when the
  phase index sits on the last entry of the table (the period boundary);
* the output sample, computed from the previously selected waveform and the
  incoming phase index.

So the waveform chosen on a boundary tick drives the output from the next
tick onwards, and every output appears one tick after its inputs.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import CoreConfig
from .errors import InvalidConfigurationError, PhaseIndexError
from .generators import square_sample
from .kinds import SelectorCode, WaveformKind, decode
from .table_bank import TableBank


@dataclass(frozen=True)
class CoreState:
    """Register contents between two ticks."""

    selected: WaveformKind = WaveformKind.SINE
    output: int = 0


class WaveformCore:
    def __init__(self, config: CoreConfig, bank: Optional[TableBank] = None):
        if bank is None:
            bank = TableBank(config)
        elif bank.config != config:
            raise InvalidConfigurationError(
                f"shared table bank was built for {bank.config}, core expects {config}"
            )
        self.config = config
        self.bank = bank
        self._state = CoreState()
        self._ticks = 0

    @property
    def state(self) -> CoreState:
        return self._state

    @property
    def selected(self) -> WaveformKind:
        return self._state.selected

    @property
    def output(self) -> int:
        return self._state.output

    @property
    def ticks(self) -> int:
        return self._ticks

    def step(self, selector_code: SelectorCode, phase_index: int) -> int:
        """Clock one tick and return the newly registered output sample."""
        phase = self._check_phase(phase_index)
        requested = decode(selector_code)

        previous = self._state
        sample = self._produce(previous.selected, phase)
        selected = previous.selected
        if phase == self.config.boundary_index:
            selected = requested
            if selected is not previous.selected:
                logging.debug(
                    'WaveformCore: %s -> %s at tick %d',
                    previous.selected.name, selected.name, self._ticks,
                )

        self._state = CoreState(selected=selected, output=sample)
        self._ticks += 1
        return sample

    def run(self, ticks: Iterable[Tuple[SelectorCode, int]]) -> List[int]:
        """Step through ``(selector_code, phase_index)`` pairs, returning every output."""
        return [self.step(selector_code, phase_index) for selector_code, phase_index in ticks]

    def _produce(self, kind: WaveformKind, phase: int) -> int:
        if kind is WaveformKind.SQUARE:
            return square_sample(phase, self.config.table_size, self.config.max_amplitude)
        return int(self.bank.table_for(kind)[phase])

    def _check_phase(self, phase_index: int) -> int:
        try:
            if isinstance(phase_index, bool):
                raise TypeError
            phase = operator.index(phase_index)
        except TypeError:
            raise PhaseIndexError(
                f"phase index must be an integer, got {type(phase_index).__name__}"
            ) from None
        if not 0 <= phase <= self.config.boundary_index:
            raise PhaseIndexError(
                f"phase index {phase} outside [0, {self.config.boundary_index}]"
            )
        return phase

    def __repr__(self):
        return (
            f"WaveformCore(address_bits={self.config.address_bits}, "
            f"data_bits={self.config.data_bits}, selected={self.selected.name}, "
            f"output={self.output})"
        )


__all__ = [
    "CoreState",
    "WaveformCore",
]
