import random

from config import GameConfig
from game.models import Card, SUITS, RANKS


def new_deck():
    """The 52 unique (rank, suit) cards in suit order."""
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def shuffle(cards, rng=None):
    """
    Fisher-Yates shuffle in place: walk from the last index down to 1 and
    swap with a uniformly chosen index in [0, i].
    """
    rng = rng or random
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


def new_shuffled_deck(rng=None):
    return shuffle(new_deck(), rng)


def deal_single(deck):
    return deck[:GameConfig.HAND_SIZE]


def deal_pair(deck):
    """Hands N and S; deck[26:] stays unseen."""
    size = GameConfig.HAND_SIZE
    return deck[:size], deck[size:2 * size]


def suit_counts(hand):
    counts = {suit: 0 for suit in SUITS}
    for card in hand:
        counts[card.suit] += 1
    return counts


def group_and_sort(hand):
    """
    Group cards by suit (spades, hearts, diamonds, clubs) and sort each
    group from Ace down to 2.
    """
    grouped = {suit: [] for suit in SUITS}
    for card in hand:
        grouped[card.suit].append(card)

    for suit in grouped:
        grouped[suit].sort(key=lambda c: c.value, reverse=True)

    return grouped
