import threading

from config import TimerConfig
from game.models import TimerState
from utils import log


class CountdownTimer:
    """
    One round's countdown, in 0.1s steps.

    Ticks run on a chain of daemon threading.Timer objects. When the time
    reaches zero the countdown stops itself and calls on_expire exactly once.
    stop() may be called any number of times.
    """

    def __init__(self, duration, on_expire, interval=TimerConfig.TICK_INTERVAL):
        self.remaining = round(duration, 2)
        self.on_expire = on_expire
        self.interval = interval
        self.running = False
        self.stopped = False
        self.expired = False
        self._handle = None
        self._lock = threading.Lock()

    def start(self):
        with self._lock:
            if self.running or self.stopped or self.expired:
                return
            self.running = True
            self._schedule()

    def _schedule(self):
        self._handle = threading.Timer(self.interval, self._on_tick)
        self._handle.daemon = True
        self._handle.start()

    def _on_tick(self):
        self.tick()
        with self._lock:
            if self.running:
                self._schedule()

    def tick(self):
        """Advance by one interval. Returns True if this tick expired the timer."""
        with self._lock:
            if self.stopped or self.expired:
                return False

            self.remaining = round(self.remaining - self.interval, 2)
            if self.remaining > 0:
                return False

            self.expired = True
            self._cancel()

        # Outside the lock: the callback may call stop()
        self.on_expire()
        return True

    def stop(self):
        with self._lock:
            if self.stopped:
                return
            self.stopped = True
            self._cancel()

    def _cancel(self):
        self.running = False
        if self._handle:
            self._handle.cancel()
            self._handle = None

    def display_remaining(self):
        return max(0.0, self.remaining)


class AdaptiveTimer:
    """
    Per-session time budget. Two correct answers in a row shave 0.1s off the
    base time; any miss or timeout adds 0.1s back.
    """

    def __init__(self, state=None):
        self.state = state or TimerState()

    @property
    def base_time(self):
        return self.state.base_time

    @property
    def consecutive_correct(self):
        return self.state.consecutive_correct

    def record_correct(self):
        self.state.consecutive_correct += 1
        if self.state.consecutive_correct >= TimerConfig.STREAK_LENGTH:
            self.state.base_time = round(
                max(TimerConfig.MIN_TIME, self.state.base_time - TimerConfig.STEP), 1
            )
            self.state.consecutive_correct = 0
            log("TIMER", f"Streak reached, base time now {self.state.base_time:.1f}s")

    def record_miss(self):
        self.state.base_time = round(
            min(TimerConfig.MAX_TIME, self.state.base_time + TimerConfig.STEP), 1
        )
        self.state.consecutive_correct = 0
        log("TIMER", f"Miss, base time now {self.state.base_time:.1f}s")

    def countdown(self, on_expire):
        return CountdownTimer(self.state.base_time, on_expire)


def is_warning(remaining):
    return remaining <= TimerConfig.WARNING_THRESHOLD
