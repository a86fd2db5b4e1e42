import threading

from game.models import TimerState
from game.timer import AdaptiveTimer, CountdownTimer, is_warning

# -----------------------------
# ADAPTIVE TIMER
# -----------------------------

def test_two_correct_answers_shave_base_time():
    timer = AdaptiveTimer()
    assert timer.base_time == 7.0

    timer.record_correct()
    assert timer.base_time == 7.0
    assert timer.consecutive_correct == 1

    timer.record_correct()
    assert timer.base_time == 6.9
    assert timer.consecutive_correct == 0


def test_miss_adds_time_and_resets_streak():
    timer = AdaptiveTimer()
    timer.record_correct()
    timer.record_miss()
    assert timer.base_time == 7.1
    assert timer.consecutive_correct == 0

    # Streak restarts from zero
    timer.record_correct()
    assert timer.base_time == 7.1


def test_base_time_is_clamped():
    low = AdaptiveTimer(TimerState(base_time=2.0))
    for _ in range(10):
        low.record_correct()
    assert low.base_time == 2.0

    high = AdaptiveTimer(TimerState(base_time=14.95))
    high.record_miss()
    assert high.base_time == 15.0
    high.record_miss()
    assert high.base_time == 15.0


def test_long_streak_never_drops_below_floor():
    timer = AdaptiveTimer()
    for _ in range(200):
        timer.record_correct()
    assert timer.base_time == 2.0


def test_warning_threshold():
    assert is_warning(1.5)
    assert is_warning(0.0)
    assert not is_warning(1.6)


# -----------------------------
# COUNTDOWN
# -----------------------------

def test_countdown_expires_exactly_once():
    calls = []
    countdown = CountdownTimer(0.3, lambda: calls.append("timeout"))

    assert countdown.tick() is False
    assert countdown.tick() is False
    assert countdown.tick() is True
    assert countdown.tick() is False
    assert calls == ["timeout"]
    assert countdown.display_remaining() == 0.0


def test_countdown_counts_down_from_base_time():
    countdown = AdaptiveTimer().countdown(lambda: None)
    assert countdown.remaining == 7.0
    for _ in range(69):
        assert countdown.tick() is False
    assert countdown.remaining == 0.1
    assert countdown.tick() is True


def test_stop_is_idempotent_and_blocks_expiry():
    calls = []
    countdown = CountdownTimer(0.1, lambda: calls.append("timeout"))
    countdown.stop()
    countdown.stop()
    assert countdown.tick() is False
    assert calls == []


def test_scheduled_countdown_fires_on_its_own():
    fired = threading.Event()
    countdown = CountdownTimer(0.05, fired.set, interval=0.01)
    countdown.start()
    assert fired.wait(2.0)
    assert countdown.expired
    assert not countdown.running
    countdown.stop()


def test_stopped_countdown_does_not_fire():
    fired = threading.Event()
    countdown = CountdownTimer(0.3, fired.set, interval=0.05)
    countdown.start()
    countdown.stop()
    assert not fired.wait(0.6)
