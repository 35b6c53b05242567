import pytest

from wavegen import CoreConfig, TableBank, WaveformCore


@pytest.fixture
def config8():
    """Eight-entry tables with 8-bit samples."""
    return CoreConfig(address_bits=3, data_bits=8)


@pytest.fixture
def bank8(config8):
    return TableBank(config8)


@pytest.fixture
def core8(config8, bank8):
    return WaveformCore(config8, bank8)
