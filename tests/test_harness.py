import logging

import numpy as np
import pytest

from wavegen import HarnessConfigError, WaveformCore, WaveformKind
from wavegen.services import HarnessConfig, TickDriver

SINE8 = [128, 218, 255, 218, 128, 37, 0, 37]
SQUARE8 = [255, 255, 255, 255, 0, 0, 0, 0]
TRIANGLE8 = [0, 64, 128, 191, 255, 191, 128, 64]


def test_square_scenario(core8):
    driver = TickDriver(core8)
    driver.set_selector("11")
    trace = driver.run(24)
    assert trace.outputs == SINE8 + SQUARE8 + SQUARE8
    assert trace.phases == list(range(8)) * 3
    assert trace.ticks == list(range(24))
    assert driver.phase == 0


def test_scheduled_change(core8):
    driver = TickDriver(core8)
    driver.schedule(3, WaveformKind.TRIANGLE)
    trace = driver.run(16)
    assert trace.selectors[:3] == [WaveformKind.SINE] * 3
    assert trace.selectors[3:] == [WaveformKind.TRIANGLE] * 13
    assert trace.outputs == SINE8 + TRIANGLE8


def test_schedule_in_past_rejected(core8):
    driver = TickDriver(core8)
    driver.run(4)
    with pytest.raises(HarnessConfigError):
        driver.schedule(2, "01")


def test_phase_step_and_start(core8):
    driver = TickDriver(core8, HarnessConfig(phase_step=3, start_phase=5))
    trace = driver.run(8)
    assert trace.phases == [5, 0, 3, 6, 1, 4, 7, 2]


def test_run_periods(core8):
    driver = TickDriver(core8, HarnessConfig(phase_step=3))
    assert len(driver.run_periods(2)) == 16


def test_unreachable_boundary_warns(core8, caplog):
    with caplog.at_level(logging.WARNING):
        driver = TickDriver(core8, HarnessConfig(phase_step=2))
    assert "never reaches index 7" in caplog.text

    driver.set_selector("11")
    trace = driver.run_periods(4)
    assert core8.selected is WaveformKind.SINE
    assert trace.outputs == [128, 255, 128, 0] * 4


def test_reachable_boundary_does_not_warn(core8, caplog):
    with caplog.at_level(logging.WARNING):
        TickDriver(core8, HarnessConfig(phase_step=2, start_phase=1))
    assert caplog.text == ""


@pytest.mark.parametrize(
    "config, field",
    [
        (HarnessConfig(phase_step=0), "phase_step"),
        (HarnessConfig(phase_step=8), "phase_step"),
        (HarnessConfig(start_phase=-1), "start_phase"),
        (HarnessConfig(start_phase=8), "start_phase"),
        (HarnessConfig(clock_period="abc"), "clock_period"),
        (HarnessConfig(clock_period="-1u"), "clock_period"),
        (HarnessConfig(clock_period=0.0), "clock_period"),
    ],
)
def test_rejects_bad_config(core8, config, field):
    with pytest.raises(HarnessConfigError, match=field):
        TickDriver(core8, config)


def test_trace_times(core8):
    driver = TickDriver(core8, HarnessConfig(clock_period="10n"))
    trace = driver.run(3)
    assert trace.clock_period == pytest.approx(1e-8)
    assert trace.times() == pytest.approx([0.0, 1e-8, 2e-8])
    assert trace.output_times() == pytest.approx([1e-8, 2e-8, 3e-8])
    assert trace.as_array().dtype == np.int64
    assert trace.as_array().tolist() == SINE8[:3]


def test_numeric_clock_period(config8):
    driver = TickDriver(WaveformCore(config8), HarnessConfig(clock_period=2e-6))
    assert driver.trace.clock_period == 2e-6


def test_driver_and_bare_core_agree(config8):
    driver = TickDriver(WaveformCore(config8), HarnessConfig(phase_step=5))
    driver.schedule(10, "10")
    driver.schedule(20, "11")
    trace = driver.run(40)

    replay = WaveformCore(config8).run(zip(trace.selectors, trace.phases))
    assert replay == trace.outputs
