"""
LTspice PWL export of recorded wavegen traces.
License: GPL-3.0-or-later

Each output sample is treated as a DAC code held for one clock period. The
stimulus has a point where the sample becomes visible and a point just
before the next edge, so the simulator sees steps rather than ramps. The
stimulus starts at 0, the initial register value, until the first edge.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .formatting import FormatService, ltspice_si_parse
from .harness import Trace

# Fraction of a clock period used for each step edge
EDGE_FRACTION = 1e-3


def trace_to_pwl(
    trace: Trace,
    max_amplitude: int,
    *,
    full_scale: Union[str, float] = 1.0,
    use_relative_time: bool = False,
    format_service: Optional[FormatService] = None,
) -> str:
    """Render *trace* as PWL text scaled so *max_amplitude* maps to *full_scale*."""
    if max_amplitude < 1:
        raise ValueError("max_amplitude must be positive")
    if format_service is None:
        format_service = FormatService()
    scale = ltspice_si_parse(full_scale) / max_amplitude
    period = trace.clock_period
    edge = period * EDGE_FRACTION

    # the output register holds its initial 0 until the first clock edge
    points: List[tuple[float, float]] = [(0.0, 0.0), (period, 0.0)]
    for start, sample in zip(trace.output_times(), trace.outputs):
        level = sample * scale
        points.append((float(start) + edge, level))
        points.append((float(start) + period, level))

    lines: List[str] = []
    previous_time = 0.0
    for index, (absolute_time, value) in enumerate(points):
        value_str = format_service.format_value(value)
        if index == 0 or not use_relative_time:
            time_str = format_service.format_time(absolute_time)
        else:
            time_str = '+' + format_service.format_time(absolute_time - previous_time)
        lines.append(f"{time_str} {value_str}")
        previous_time = absolute_time
    return "\n".join(lines) + "\n"


def write_pwl(filename: str, trace: Trace, max_amplitude: int, **kwargs) -> None:
    content = trace_to_pwl(trace, max_amplitude, **kwargs)
    try:
        with open(filename, 'w') as f:
            f.write(content)
    except OSError as e:
        logging.error(f'PWL export: could not write {filename}: {e}')
        raise
    logging.info('PWL export: wrote %d samples to %s', len(trace), filename)


__all__ = [
    "EDGE_FRACTION",
    "trace_to_pwl",
    "write_pwl",
]
