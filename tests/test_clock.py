import pytest

from cartengine.clock import Clock


class FakeTimer:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_tick_measures_delta_and_elapsed():
    timer = FakeTimer(10.0)
    clock = Clock(timer=timer)
    clock.reset()
    timer.now = 12.5
    clock.tick()
    assert clock.delta_time == pytest.approx(2.5)
    assert clock.elapsed_time == pytest.approx(2.5)


def test_deltas_sum_to_elapsed():
    timer = FakeTimer(3.0)
    clock = Clock(timer=timer)
    clock.reset()
    total = 0.0
    for now in (3.25, 4.0, 4.1, 7.75):
        timer.now = now
        clock.tick()
        total += clock.delta_time
    assert clock.elapsed_time == pytest.approx(total)


def test_reset_restarts_elapsed():
    timer = FakeTimer(1.0)
    clock = Clock(timer=timer)
    timer.now = 5.0
    clock.tick()
    clock.reset()
    clock.tick()
    assert clock.elapsed_time == 0.0
    assert clock.delta_time == 0.0


def test_time_scale_default_and_set():
    clock = Clock(timer=FakeTimer())
    assert clock.time_scale == 1.0
    clock.time_scale = 0.5
    assert clock.time_scale == 0.5


def test_shared_instance_and_release():
    Clock.release()
    first = Clock.get()
    assert Clock.get() is first
    Clock.release()
    assert Clock.get() is not first
    Clock.release()


def test_real_clock_is_monotonic():
    clock = Clock()
    clock.reset()
    clock.tick()
    assert clock.delta_time >= 0.0
    assert clock.elapsed_time >= 0.0