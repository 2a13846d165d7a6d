from cellconnect.settings import TIME_LIMIT
from cellconnect.timer import Countdown


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_full_time_at_start():
    clock = FakeClock()
    countdown = Countdown(TIME_LIMIT, clock)
    countdown.start()
    assert countdown.time_left() == TIME_LIMIT


def test_partial_seconds_are_not_counted():
    clock = FakeClock()
    countdown = Countdown(TIME_LIMIT, clock)
    countdown.start()
    clock.now += 1.5
    assert countdown.time_left() == TIME_LIMIT - 1


def test_never_negative():
    clock = FakeClock()
    countdown = Countdown(TIME_LIMIT, clock)
    countdown.start()
    clock.now += TIME_LIMIT * 4
    assert countdown.time_left() == 0


def test_reset_restarts():
    clock = FakeClock()
    countdown = Countdown(TIME_LIMIT, clock)
    countdown.start()
    clock.now += 10
    assert countdown.time_left() < TIME_LIMIT
    countdown.reset()
    assert countdown.time_left() == TIME_LIMIT


def test_label():
    clock = FakeClock()
    countdown = Countdown(TIME_LIMIT, clock)
    countdown.start()
    assert countdown.label() == f"TIME: {TIME_LIMIT}S"