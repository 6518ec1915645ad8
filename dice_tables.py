"""
Score tables for every distinct roll of five dice

A roll's score never depends on dice order, so the 6^5 ordered rolls collapse
to 252 sorted ones. Each is scored once against the whole rule catalogue when
this module is imported, which turns score lookups and per-category odds into
table reads.

    ALL_COMBOS      sorted roll tuples, 252 of them
    COMBO_TO_INDEX  sorted roll -> row number
    COMBO_PROBS     chance of each sorted roll on one throw of fair dice
    SCORE_TABLE     one row per sorted roll, one column per category
"""
import itertools
import math

from dice_stats import MAX_FACE, MIN_FACE, NUM_DICE, frequency_counts, validate_roll
from rule_catalogue import CATEGORY_ORDER, RULES, category_by_name

FACES = range(MIN_FACE, MAX_FACE + 1)

ALL_COMBOS = list(itertools.combinations_with_replacement(FACES, NUM_DICE))

COMBO_TO_INDEX = {combo: i for i, combo in enumerate(ALL_COMBOS)}

ORDERED_ROLLS = len(FACES) ** NUM_DICE


def _orderings(combo):
    """Number of ordered throws that sort to combo, e.g. 20 for (1, 1, 1, 2, 3)"""
    ways = math.factorial(NUM_DICE)
    for count in frequency_counts(combo):
        ways //= math.factorial(count)
    return ways

COMBO_PROBS = [_orderings(combo) / ORDERED_ROLLS for combo in ALL_COMBOS]


_CAT_INDEX = {cat: i for i, cat in enumerate(CATEGORY_ORDER)}

def _build_score_table():
    """Build SCORE_TABLE[combo_idx][cat_idx] from the rule catalogue."""
    return [[RULES[cat].evaluate(combo) for cat in CATEGORY_ORDER]
            for combo in ALL_COMBOS]

SCORE_TABLE = _build_score_table()


# ── Lookups ──────────────────────────────────────────────────────────────────

def lookup_scores(roll):
    """Return every category's score for roll, read from SCORE_TABLE.

    Gives the same result as rule_catalogue.score_all() without
    re-evaluating the rules.

    Raises:
        InvalidRoll: if roll is not five dice in 1-6
    """
    combo = tuple(sorted(validate_roll(roll)))
    row = SCORE_TABLE[COMBO_TO_INDEX[combo]]
    return {cat: row[i] for i, cat in enumerate(CATEGORY_ORDER)}


def single_roll_expectation(category):
    """Expected score for category from a single roll of five fair dice."""
    col = _CAT_INDEX[category_by_name(category)]
    return sum(prob * SCORE_TABLE[i][col] for i, prob in enumerate(COMBO_PROBS))


def qualify_probability(category):
    """Probability that a single roll scores more than zero in category."""
    col = _CAT_INDEX[category_by_name(category)]
    return sum(prob for i, prob in enumerate(COMBO_PROBS) if SCORE_TABLE[i][col] > 0)
