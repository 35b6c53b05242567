"""
ROM init file export for wavegen tables.
License: GPL-3.0-or-later

Tables are written as ``$readmemh``-style text: one upper-case hex word per
line, zero padded to the data width.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Dict, Sequence

import numpy as np

from ..generators import build_square
from ..table_bank import TableBank


def word_width(data_bits: int) -> int:
    """Number of hex digits needed for a *data_bits* wide word."""
    return max(1, math.ceil(data_bits / 4))


def format_rom(table: Sequence[int], data_bits: int) -> str:
    width = word_width(data_bits)
    limit = (1 << data_bits) - 1
    values = np.asarray(table, dtype=np.int64)
    if values.size and (values.min() < 0 or values.max() > limit):
        raise ValueError(f"table values do not fit in {data_bits} bits")
    return "".join(f"{int(v):0{width}X}\n" for v in values)


def write_rom(filename: str, table: Sequence[int], data_bits: int) -> None:
    content = format_rom(table, data_bits)
    try:
        with open(filename, 'w') as f:
            f.write(content)
    except OSError as e:
        logging.error(f'ROM export: could not write {filename}: {e}')
        raise
    logging.info('ROM export: wrote %d words to %s', len(table), filename)


def write_bank(directory: str, bank: TableBank, include_square: bool = False) -> Dict[str, str]:
    """Write ``sine.mem``, ``triangle.mem`` and ``sawtooth.mem`` into *directory*.

    With *include_square* a materialized ``square.mem`` is written as well.
    Returns the written paths keyed by waveform name.
    """
    os.makedirs(directory, exist_ok=True)
    data_bits = bank.config.data_bits
    tables = {
        'sine': bank.sine,
        'triangle': bank.triangle,
        'sawtooth': bank.sawtooth,
    }
    if include_square:
        tables['square'] = build_square(bank.config.table_size, bank.config.max_amplitude)

    written: Dict[str, str] = {}
    for name, table in tables.items():
        path = os.path.join(directory, f'{name}.mem')
        write_rom(path, table, data_bits)
        written[name] = path
    return written


__all__ = [
    "word_width",
    "format_rom",
    "write_rom",
    "write_bank",
]
