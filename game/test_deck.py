import random
from collections import Counter
from itertools import permutations

from game.deck import new_deck, shuffle, new_shuffled_deck, deal_single, deal_pair, suit_counts, group_and_sort
from game.models import Card, SUITS

# -----------------------------
# DECK
# -----------------------------

def test_new_deck_has_52_unique_cards():
    deck = new_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert Counter(c.suit for c in deck) == {suit: 13 for suit in SUITS}


def test_shuffled_deck_is_a_permutation():
    deck = new_shuffled_deck(random.Random(1))
    assert sorted(deck, key=repr) == sorted(new_deck(), key=repr)


def test_shuffle_reaches_every_permutation_of_small_list():
    rng = random.Random(7)
    seen = {tuple(shuffle([1, 2, 3], rng)) for _ in range(600)}
    assert seen == set(permutations([1, 2, 3]))


def test_shuffle_positions_are_uniform():
    rng = random.Random(2024)
    trials = 20000
    ace_positions = Counter()
    first_cards = Counter()

    for _ in range(trials):
        deck = new_shuffled_deck(rng)
        ace_positions[deck.index(Card("A", "spades"))] += 1
        first_cards[deck[0]] += 1

    expected = trials / 52   # ~385, std ~19.4
    assert len(ace_positions) == 52
    assert len(first_cards) == 52
    for count in list(ace_positions.values()) + list(first_cards.values()):
        assert 0.65 * expected < count < 1.35 * expected


# -----------------------------
# DEALING
# -----------------------------

def test_deal_single_takes_first_13():
    deck = new_shuffled_deck(random.Random(3))
    hand = deal_single(deck)
    assert hand == deck[:13]
    assert sum(suit_counts(hand).values()) == 13


def test_deal_pair_hands_are_disjoint():
    deck = new_shuffled_deck(random.Random(4))
    hand_n, hand_s = deal_pair(deck)
    assert len(hand_n) == 13 and len(hand_s) == 13
    assert not set(hand_n) & set(hand_s)
    assert hand_s == deck[13:26]


def test_suit_counts_include_empty_suits():
    hand = [Card(rank, "spades") for rank in ["A", "K", "Q"]]
    assert suit_counts(hand) == {"spades": 3, "hearts": 0, "diamonds": 0, "clubs": 0}


def test_group_and_sort_orders_ace_to_two():
    hand = [Card("2", "hearts"), Card("A", "hearts"), Card("10", "hearts"), Card("K", "clubs")]
    grouped = group_and_sort(hand)
    assert list(grouped) == SUITS
    assert [c.rank for c in grouped["hearts"]] == ["A", "10", "2"]
    assert [c.rank for c in grouped["clubs"]] == ["K"]
    assert grouped["spades"] == []
