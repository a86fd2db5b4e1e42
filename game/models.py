from dataclasses import dataclass, field

from config import GameConfig, TimerConfig

# -----------------------------
# SUITS & RANKS
# -----------------------------

SUITS = ["spades", "hearts", "diamonds", "clubs"]

SUIT_DATA = {
    "spades": {"name": "Spades", "symbol": "♠"},
    "hearts": {"name": "Hearts", "symbol": "♥"},
    "diamonds": {"name": "Diamonds", "symbol": "♦"},
    "clubs": {"name": "Clubs", "symbol": "♣"},
}

RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]

# Display ordering only: Ace highest, 2 lowest
RANK_VALUES = {
    "A": 14, "K": 13, "Q": 12, "J": 11, "10": 10, "9": 9, "8": 8,
    "7": 7, "6": 6, "5": 5, "4": 4, "3": 3, "2": 2,
}


# -----------------------------
# CARD
# -----------------------------

@dataclass(frozen=True)
class Card:
    rank: str   # 'A','2'...'10','J','Q','K'
    suit: str   # spades, hearts, diamonds, clubs

    @property
    def value(self):
        return RANK_VALUES[self.rank]

    @property
    def symbol(self):
        return SUIT_DATA[self.suit]["symbol"]

    def __repr__(self):
        return f"{self.rank}{self.symbol}"


# -----------------------------
# SUM OPTION
# -----------------------------

@dataclass(frozen=True)
class SumOption:
    """An answer rendered as an addition: first + second == value"""
    first: int
    second: int
    value: int

    @property
    def display(self):
        return f"{self.first} + {self.second}"

    def to_dict(self):
        return {"display": self.display, "value": self.value}


# -----------------------------
# ROUND STATE
# -----------------------------

@dataclass
class RoundState:
    """
    Live context of one round. Superseded by the next start_round().
    """
    round_type: str
    hidden_suit: str
    correct_answer: int
    hands: dict                 # hand name -> list of Card
    counts: dict                # hand name -> SuitCounts
    options: list = field(default_factory=list)
    remaining: float = 0.0
    active: bool = True
    outcome: str = None

    @property
    def resolved(self):
        return not self.active

    def option_values(self):
        return [o.value if isinstance(o, SumOption) else o for o in self.options]

    def stats_counts(self):
        """Hand composition recorded against the round's outcome"""
        if self.round_type == GameConfig.ROUND_SINGLE:
            return self.counts["hand"]
        return self.counts["north"]


# -----------------------------
# TIMER STATE
# -----------------------------

@dataclass
class TimerState:
    base_time: float = TimerConfig.BASE_TIME
    consecutive_correct: int = 0
