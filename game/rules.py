import random

from config import GameConfig
from game.models import SUITS

'''
[**ROUND TYPES**]

1. SINGLE:
One 13-card hand is shown with all four suit tallies except one. The player
names the withheld tally, i.e. how many cards of the hidden suit the hand holds.

2. DOUBLE:
Two 13-card hands (N and S) are dealt from the same shuffle. The player names
how many cards of the hidden suit sit in the 26 cards neither hand holds:
13 - N - S.

3. SUM:
Same target as DOUBLE, but every answer option is shown as an addition (a + b).
'''


def select_round_type(rng=None):
    rng = rng or random
    r = rng.random()
    if r < GameConfig.SUM_ROUND_THRESHOLD:
        return GameConfig.ROUND_SUM
    if r < GameConfig.DOUBLE_ROUND_THRESHOLD:
        return GameConfig.ROUND_DOUBLE
    return GameConfig.ROUND_SINGLE


def select_hidden_suit(rng=None):
    rng = rng or random
    return rng.choice(SUITS)


def single_hand_target(counts, hidden_suit):
    return counts[hidden_suit]


def remaining_target(counts_n, counts_s, hidden_suit):
    # N + S for one suit never exceeds 13, so no clamp is needed
    return GameConfig.SUIT_SIZE - counts_n[hidden_suit] - counts_s[hidden_suit]


def is_two_hand_round(round_type):
    return round_type in (GameConfig.ROUND_DOUBLE, GameConfig.ROUND_SUM)


def combination_signature(counts):
    """
    Suit-identity-free key of a hand: counts sorted descending.
    {spades: 4, hearts: 3, diamonds: 3, clubs: 3} -> "4-3-3-3"
    """
    return "-".join(str(n) for n in sorted(counts.values(), reverse=True))
