"""
Tick driver for wavegen cores.
License: GPL-3.0-or-later

The core never generates its own phase. This module plays the part of the
surrounding pipeline: it owns a wrapping phase counter and the selector
input, clocks a :class:`~wavegen.waveform_core.WaveformCore` once per tick
and records what went in and what came out.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import numpy as np

from ..config import CoreConfig
from ..errors import HarnessConfigError
from ..kinds import SelectorCode, WaveformKind, decode
from ..waveform_core import WaveformCore
from .formatting import ltspice_si_parse


@dataclass(frozen=True)
class HarnessConfig:
    """Phase counter and clock settings for a :class:`TickDriver`."""

    phase_step: int = 1
    start_phase: int = 0
    clock_period: Union[str, float] = "1u"

    @property
    def period_seconds(self) -> float:
        return ltspice_si_parse(self.clock_period)


@dataclass
class Trace:
    """Inputs and outputs of every tick a driver has clocked.

    ``outputs[i]`` is the sample registered by tick ``ticks[i]``; it becomes
    visible one clock period later.
    """

    clock_period: float
    ticks: List[int] = field(default_factory=list)
    phases: List[int] = field(default_factory=list)
    selectors: List[WaveformKind] = field(default_factory=list)
    outputs: List[int] = field(default_factory=list)

    def record(self, tick: int, phase: int, selector: WaveformKind, output: int) -> None:
        self.ticks.append(tick)
        self.phases.append(phase)
        self.selectors.append(selector)
        self.outputs.append(output)

    def times(self) -> np.ndarray:
        """Time of the clock edge that sampled each tick's inputs."""
        return np.asarray(self.ticks, dtype=np.float64) * self.clock_period

    def output_times(self) -> np.ndarray:
        """Time from which each output is visible."""
        return (np.asarray(self.ticks, dtype=np.float64) + 1.0) * self.clock_period

    def as_array(self) -> np.ndarray:
        return np.asarray(self.outputs, dtype=np.int64)

    def __len__(self):
        return len(self.ticks)


class TickDriver:
    def __init__(self, core: WaveformCore, config: Optional[HarnessConfig] = None):
        config = config or HarnessConfig()
        errors = _validate_config(config, core.config)
        if errors:
            raise HarnessConfigError("; ".join(errors))

        self.core = core
        self.config = config
        self.trace = Trace(clock_period=config.period_seconds)
        self._phase = config.start_phase
        self._selector = core.selected
        self._tick = 0
        self._pending: Dict[int, WaveformKind] = {}

        if not _boundary_reachable(config, core.config):
            logging.warning(
                'Harness: phase step %d from %d never reaches index %d; the selector will not latch',
                config.phase_step, config.start_phase, core.config.boundary_index,
            )

    @property
    def phase(self) -> int:
        """Phase index presented on the next tick."""
        return self._phase

    @property
    def selector(self) -> WaveformKind:
        """Selector presented on the next tick."""
        return self._selector

    @property
    def tick_count(self) -> int:
        return self._tick

    def set_selector(self, selector_code: SelectorCode) -> None:
        self._selector = decode(selector_code)

    def schedule(self, tick: int, selector_code: SelectorCode) -> None:
        """Present *selector_code* from absolute tick number *tick* onwards."""
        if tick < self._tick:
            raise HarnessConfigError(f"tick {tick} is already past (now at {self._tick})")
        self._pending[tick] = decode(selector_code)

    def tick(self) -> int:
        if self._tick in self._pending:
            self._selector = self._pending.pop(self._tick)

        phase = self._phase
        output = self.core.step(self._selector, phase)
        self.trace.record(self._tick, phase, self._selector, output)

        self._phase = (phase + self.config.phase_step) % self.core.config.table_size
        self._tick += 1
        return output

    def run(self, count: int) -> Trace:
        for _ in range(count):
            self.tick()
        logging.debug('Harness: clocked %d ticks, %d total', count, self._tick)
        return self.trace

    def run_periods(self, periods: int) -> Trace:
        """Clock *periods* full cycles of the phase counter back to its current phase."""
        size = self.core.config.table_size
        ticks_per_cycle = size // math.gcd(self.config.phase_step, size)
        return self.run(periods * ticks_per_cycle)


# ---------------------------------------------------------------------------
# Internal helpers


def _validate_config(config: HarnessConfig, core_config: CoreConfig) -> List[str]:
    errors: List[str] = []
    size = core_config.table_size
    if not 1 <= config.phase_step < size:
        errors.append(f"phase_step must be between 1 and {size - 1}")
    if not 0 <= config.start_phase < size:
        errors.append(f"start_phase must be between 0 and {size - 1}")
    try:
        period = config.period_seconds
    except ValueError as exc:
        errors.append(f"clock_period: {exc}")
    else:
        if not period > 0:
            errors.append("clock_period must be positive")
    return errors


def _boundary_reachable(config: HarnessConfig, core_config: CoreConfig) -> bool:
    size = core_config.table_size
    distance = core_config.boundary_index - config.start_phase
    return distance % math.gcd(config.phase_step, size) == 0


__all__ = [
    "HarnessConfig",
    "Trace",
    "TickDriver",
]
