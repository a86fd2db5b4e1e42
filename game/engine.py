import random
import threading

from config import GameConfig
from game.deck import new_shuffled_deck, deal_single, deal_pair, suit_counts, group_and_sort
from game.models import RoundState, SUITS, SUIT_DATA, SumOption
from game.options import generate_options, generate_sum_options
from game.rules import (
    select_round_type, select_hidden_suit, single_hand_target,
    remaining_target, is_two_hand_round,
)
from game.timer import AdaptiveTimer, is_warning
from utils import safe_print

ROUND_TYPES = (GameConfig.ROUND_SINGLE, GameConfig.ROUND_DOUBLE, GameConfig.ROUND_SUM)

'''
[**ROUND LIFECYCLE**]

start_round() deals fresh hands, picks the hidden suit, builds the answer
options and starts the countdown. The round then resolves exactly once, on
whichever comes first:

- submit_answer(v)  -> CORRECT or INCORRECT
- expire()          -> TIMEOUT (called by the countdown)

After resolution the round is inert: later answers and ticks return None.
Resolution adapts the base time, updates the score and records the hand
composition in the statistics.
'''


class QuizEngine:
    def __init__(self, stats=None, timer=None, rng=None, autostart=True):
        self.stats = stats
        self.timer = timer or AdaptiveTimer()
        self.rng = rng or random.Random()
        # False leaves the countdown to be driven by countdown.tick()
        self.autostart = autostart
        self.score = 0
        self.round = None
        self.countdown = None
        self.ui_log = []
        self._lock = threading.Lock()

    def _log(self, msg):
        safe_print(msg)
        self.ui_log.append(msg)

    # ---------------------
    # ROUND START
    # ---------------------

    def start_round(self, round_type=None, deck=None, hidden_suit=None):
        """
        Begin a new round, superseding the current one.
        deck and hidden_suit override the random draw (replays and tests).
        """
        self._stop_countdown()

        round_type = round_type or select_round_type(self.rng)
        if round_type not in ROUND_TYPES:
            raise ValueError(f"Unsupported round type: {round_type}")
        if hidden_suit is not None and hidden_suit not in SUITS:
            raise ValueError(f"Unknown suit: {hidden_suit}")
        if deck is None:
            deck = new_shuffled_deck(self.rng)
        hidden_suit = hidden_suit or select_hidden_suit(self.rng)

        if is_two_hand_round(round_type):
            hand_n, hand_s = deal_pair(deck)
            hands = {"north": hand_n, "south": hand_s}
            counts = {"north": suit_counts(hand_n), "south": suit_counts(hand_s)}
            correct = remaining_target(counts["north"], counts["south"], hidden_suit)
        else:
            hand = deal_single(deck)
            hands = {"hand": hand}
            counts = {"hand": suit_counts(hand)}
            correct = single_hand_target(counts["hand"], hidden_suit)

        if round_type == GameConfig.ROUND_SUM:
            options = generate_sum_options(correct, self.rng)
        else:
            options = generate_options(correct, self.rng)

        state = RoundState(
            round_type=round_type,
            hidden_suit=hidden_suit,
            correct_answer=correct,
            hands=hands,
            counts=counts,
            options=options,
            remaining=self.timer.base_time,
        )
        # Bound to this round: a late expiry must not resolve a newer one
        countdown = self.timer.countdown(lambda: self._expire_round(state))

        with self._lock:
            self.round = state
            self.countdown = countdown

        self._log(f"[ENGINE] New {round_type} round, hidden suit: {hidden_suit}")

        if self.autostart:
            countdown.start()

        return self.get_state()

    # ---------------------
    # RESOLUTION
    # ---------------------

    def submit_answer(self, value):
        """Resolve the round with the player's answer. None if already resolved."""
        with self._lock:
            if self.round is None or self.round.resolved:
                return None
            correct = value == self.round.correct_answer
            outcome = GameConfig.OUTCOME_CORRECT if correct else GameConfig.OUTCOME_INCORRECT
            self._resolve(outcome)

        self._stop_countdown()
        self._log(f"[ENGINE] Answer {value}: {outcome}")
        return outcome

    def expire(self):
        """Resolve the current round as a timeout. None if already resolved."""
        return self._expire_round(self.round)

    def _expire_round(self, state):
        with self._lock:
            if state is None or state is not self.round or state.resolved:
                return None
            self._resolve(GameConfig.OUTCOME_TIMEOUT)

        self._stop_countdown()
        self._log("[ENGINE] Time's up")
        return GameConfig.OUTCOME_TIMEOUT

    def _resolve(self, outcome):
        # Caller holds self._lock
        current = self.round
        current.active = False
        current.outcome = outcome
        if self.countdown:
            current.remaining = self.countdown.display_remaining()

        is_correct = outcome == GameConfig.OUTCOME_CORRECT
        if is_correct:
            self.timer.record_correct()
            self.score += 1
        else:
            self.timer.record_miss()

        if self.stats is not None:
            self.stats.record_game(current.stats_counts(), is_correct)

    def _stop_countdown(self):
        if self.countdown:
            self.countdown.stop()

    def end(self):
        """Stop the running countdown; the session is discarded after this."""
        self._stop_countdown()

    # ---------------------
    # STATE HELPERS
    # ---------------------

    def remaining_time(self):
        if self.round is None:
            return self.timer.base_time
        if self.round.active and self.countdown:
            return self.countdown.display_remaining()
        return self.round.remaining

    def get_state(self):
        current = self.round
        if current is None:
            return {
                "active": False,
                "round_type": None,
                "score": self.score,
                "base_time": self.timer.base_time,
            }

        hidden = current.hidden_suit
        hands = {}
        for name, counts in current.counts.items():
            shown = dict(counts)
            # A single hand's hidden tally is the answer itself
            if current.active and current.round_type == GameConfig.ROUND_SINGLE:
                shown[hidden] = None
            hands[name] = shown

        options = [
            o.to_dict() if isinstance(o, SumOption) else o
            for o in current.options
        ]

        remaining = self.remaining_time()
        state = {
            "active": current.active,
            "round_type": current.round_type,
            "hidden_suit": hidden,
            "hidden_suit_name": SUIT_DATA[hidden]["name"],
            "hidden_suit_symbol": SUIT_DATA[hidden]["symbol"],
            "options": options,
            "hands": hands,
            "remaining": round(remaining, 1),
            "warning": current.active and is_warning(remaining),
            "outcome": current.outcome,
            "score": self.score,
            "base_time": self.timer.base_time,
        }

        if current.round_type == GameConfig.ROUND_SINGLE:
            grouped = group_and_sort(current.hands["hand"])
            state["cards"] = {suit: [str(c) for c in cards] for suit, cards in grouped.items()}

        if current.resolved:
            state["correct_answer"] = current.correct_answer
            state["message"] = GameConfig.RESULT_MESSAGES[current.outcome]

        return state

    def consume_ui_log(self):
        data = list(self.ui_log)
        self.ui_log.clear()
        return data
