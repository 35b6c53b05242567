import numpy as np
import pytest

from wavegen import InvalidConfigurationError
from wavegen.generators import build_sawtooth, build_sine, build_square, build_triangle, square_sample
from wavegen.generators.common import round_half_up


def test_sine_eight_entries():
    assert build_sine(8, 255).tolist() == [128, 218, 255, 218, 128, 37, 0, 37]


def test_triangle_eight_entries():
    assert build_triangle(8, 255).tolist() == [0, 64, 128, 191, 255, 191, 128, 64]


def test_sawtooth_eight_entries():
    assert build_sawtooth(8, 255).tolist() == [0, 36, 73, 109, 146, 182, 219, 255]


def test_square_eight_entries():
    assert [square_sample(p, 8, 255) for p in range(8)] == [255] * 4 + [0] * 4
    assert build_square(8, 255).tolist() == [255] * 4 + [0] * 4


def test_rounds_halves_up():
    assert round_half_up(np.array([0.5, 1.5, 2.5, 2.4999])).tolist() == [1.0, 2.0, 3.0, 2.0]


@pytest.mark.parametrize("builder", [build_sine, build_triangle, build_sawtooth])
@pytest.mark.parametrize("size, data_bits", [(2, 1), (16, 4), (1024, 12), (64, 31)])
def test_tables_stay_in_range(builder, size, data_bits):
    max_amplitude = 2 ** data_bits - 1
    table = builder(size, max_amplitude)
    assert table.shape == (size,)
    assert table.min() >= 0
    assert table.max() <= max_amplitude


@pytest.mark.parametrize("size, data_bits", [(2, 1), (256, 10), (4096, 16), (16, 31)])
def test_sawtooth_endpoints(size, data_bits):
    max_amplitude = 2 ** data_bits - 1
    table = build_sawtooth(size, max_amplitude)
    assert table[0] == 0
    assert table[-1] == max_amplitude


@pytest.mark.parametrize("data_bits", [1, 8, 12, 16])
def test_sine_starts_at_midpoint(data_bits):
    max_amplitude = 2 ** data_bits - 1
    assert build_sine(256, max_amplitude)[0] == (max_amplitude + 1) // 2


def test_sine_peak_and_trough():
    table = build_sine(1024, 4095)
    assert table[256] == 4095
    assert table[768] == 0


def test_triangle_peaks_mid_table():
    table = build_triangle(1024, 4095)
    assert table[0] == 0
    assert table[512] == 4095
    assert np.all(np.diff(table[:513].astype(np.int64)) >= 0)


def test_tables_are_read_only():
    table = build_sine(8, 255)
    with pytest.raises(ValueError):
        table[0] = 1


@pytest.mark.parametrize("size, max_amplitude", [(1, 255), (12, 255), (8, 0), (8, 2 ** 32)])
def test_rejects_bad_arguments(size, max_amplitude):
    with pytest.raises(InvalidConfigurationError):
        build_sine(size, max_amplitude)
