"""
Matplotlib previews of wavegen tables and traces.
License: GPL-3.0-or-later
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .harness import Trace


def _axes(ax: Optional[Axes]) -> Axes:
    if ax is not None:
        return ax
    # Figure without pyplot keeps this usable without a GUI backend
    return Figure(figsize=(8, 3)).add_subplot(1, 1, 1)


def plot_table(table: Sequence[int], ax: Optional[Axes] = None, title: Optional[str] = None) -> Figure:
    ax = _axes(ax)
    values = np.asarray(table)
    ax.step(np.arange(values.size), values, where='post', linewidth=1.5)
    ax.set_xlabel('Phase index')
    ax.set_ylabel('Amplitude code')
    ax.grid(True, alpha=0.3)
    ax.set_title(title or f'Table ({values.size} entries)')
    return ax.figure


def plot_trace(trace: Trace, ax: Optional[Axes] = None) -> Figure:
    ax = _axes(ax)
    if len(trace):
        ax.step(trace.output_times(), trace.as_array(), where='post', linewidth=1.5)
        # mark ticks where the presented selector changed
        times = trace.times()
        for i in range(1, len(trace)):
            if trace.selectors[i] is not trace.selectors[i - 1]:
                ax.axvline(times[i], color='r', alpha=0.4, linestyle='--')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Amplitude code')
    ax.grid(True, alpha=0.3)
    ax.set_title(f'Waveform trace ({len(trace)} ticks)')
    return ax.figure


__all__ = [
    "plot_table",
    "plot_trace",
]
