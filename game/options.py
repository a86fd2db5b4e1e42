import random

from config import GameConfig
from game.models import SumOption

clamp = GameConfig.clamp_answer


def generate_options(correct, rng=None):
    """
    Three close answers containing the correct one, in random order.

    Half of the rounds include a duplicated value. Clamping at 0 and 13 may
    produce extra duplicates; those are kept as-is.
    """
    rng = rng or random
    options = []

    include_duplicate = rng.random() > 0.5

    if include_duplicate:
        duplicate_offset = rng.choice(GameConfig.DUPLICATE_OFFSETS)
        duplicate_value = clamp(correct + duplicate_offset)

        options.append(duplicate_value)
        options.append(duplicate_value)

        if duplicate_offset == 0:
            # Correct answer is doubled, add a wrong neighbour
            other_offset = 1 if rng.random() > 0.5 else -1
            options.append(clamp(correct + other_offset))
        else:
            # A wrong neighbour is doubled, the correct answer is the odd one
            options.append(correct)
    else:
        options.append(correct)

        offsets = list(GameConfig.CLOSE_OFFSETS)
        rng.shuffle(offsets)
        for offset in offsets[:2]:
            options.append(clamp(correct + offset))

    rng.shuffle(options)
    return options


def split_value(value, rng=None):
    """Render value as first + second with first uniform in [0, value]."""
    rng = rng or random
    first = rng.randint(0, value)
    return SumOption(first, value - first, value)


def generate_sum_options(correct, rng=None):
    """
    Three distinct values (correct + two close wrong ones), each rendered as
    an addition, in random order.
    """
    rng = rng or random

    incorrect_values = []

    offsets = list(GameConfig.CLOSE_OFFSETS)
    rng.shuffle(offsets)
    for offset in offsets:
        value = correct + offset
        if GameConfig.MIN_ANSWER <= value <= GameConfig.MAX_ANSWER and len(incorrect_values) < 2:
            incorrect_values.append(value)

    # Not enough close values: take the lowest free ones
    if len(incorrect_values) < 2:
        for value in range(GameConfig.MIN_ANSWER, GameConfig.MAX_ANSWER + 1):
            if len(incorrect_values) >= 2:
                break
            if value != correct and value not in incorrect_values:
                incorrect_values.append(value)

    options = [split_value(correct, rng)]
    options.extend(split_value(v, rng) for v in incorrect_values)

    rng.shuffle(options)
    return options
