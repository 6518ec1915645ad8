"""
Scoring Rules - The closed set of Yahtzee rule variants

Each variant is an immutable configuration record paired with one pure
evaluate() function. There is no shared base class: the variants only share
the primitives in dice_stats, and callers treat any of them as a Rule.
"""
from dataclasses import dataclass
from typing import Union

from dice_stats import (
    MAX_FACE, MIN_FACE, NUM_DICE,
    count_value, distinct_values, frequency_counts, total, validate_roll,
)


def _check_int(name, value):
    # bool is an int subclass but never a valid setting
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _check_flat_score(flat_score):
    _check_int("flat_score", flat_score)
    if flat_score < 0:
        raise ValueError(f"flat_score must be non-negative, got {flat_score}")


@dataclass(frozen=True)
class SingleValueTotal:
    """Sum of the dice showing target_value (ones through sixes)"""
    target_value: int  # 1-6
    description: str = ""

    def __post_init__(self):
        _check_int("target_value", self.target_value)
        if not (MIN_FACE <= self.target_value <= MAX_FACE):
            raise ValueError(f"target_value must be {MIN_FACE}-{MAX_FACE}, got {self.target_value}")

    def evaluate(self, roll) -> int:
        roll = validate_roll(roll)
        return self.target_value * count_value(roll, self.target_value)


@dataclass(frozen=True)
class ThresholdCountSum:
    """
    Sum of all dice when some value shows at least required_count times

    required_count=3 and 4 give three and four of a kind. required_count=0
    is always met, so the same variant doubles as chance.
    """
    required_count: int  # 0-5
    description: str = ""

    def __post_init__(self):
        _check_int("required_count", self.required_count)
        if not (0 <= self.required_count <= NUM_DICE):
            raise ValueError(f"required_count must be 0-{NUM_DICE}, got {self.required_count}")

    def evaluate(self, roll) -> int:
        roll = validate_roll(roll)
        if any(count >= self.required_count for count in frequency_counts(roll)):
            return total(roll)
        return 0


@dataclass(frozen=True)
class FullHouse:
    """
    flat_score for three of one value and two of another

    Five of a kind has no count of exactly 2, so it is not a full house.
    """
    flat_score: int
    description: str = ""

    def __post_init__(self):
        _check_flat_score(self.flat_score)

    def evaluate(self, roll) -> int:
        counts = frequency_counts(validate_roll(roll))
        return self.flat_score if 2 in counts and 3 in counts else 0


@dataclass(frozen=True)
class SmallStraight:
    """flat_score for four consecutive values anywhere in the roll"""
    flat_score: int
    description: str = ""

    def __post_init__(self):
        _check_flat_score(self.flat_score)

    def evaluate(self, roll) -> int:
        values = distinct_values(validate_roll(roll))
        # 1-2-3-4 or 2-3-4-5
        if {2, 3, 4} <= values and (1 in values or 5 in values):
            return self.flat_score
        # 2-3-4-5 or 3-4-5-6
        if {3, 4, 5} <= values and (2 in values or 6 in values):
            return self.flat_score
        return 0


@dataclass(frozen=True)
class LargeStraight:
    """flat_score for five consecutive values (1-5 or 2-6)"""
    flat_score: int
    description: str = ""

    def __post_init__(self):
        _check_flat_score(self.flat_score)

    def evaluate(self, roll) -> int:
        values = distinct_values(validate_roll(roll))
        # Five distinct faces out of six are consecutive unless both ends show
        if len(values) == NUM_DICE and not (1 in values and 6 in values):
            return self.flat_score
        return 0


@dataclass(frozen=True)
class Yahtzee:
    """flat_score when all five dice show the same value"""
    flat_score: int
    description: str = ""

    def __post_init__(self):
        _check_flat_score(self.flat_score)

    def evaluate(self, roll) -> int:
        counts = frequency_counts(validate_roll(roll))
        return self.flat_score if counts == (NUM_DICE,) else 0


Rule = Union[SingleValueTotal, ThresholdCountSum, FullHouse,
             SmallStraight, LargeStraight, Yahtzee]

RULE_VARIANTS = (SingleValueTotal, ThresholdCountSum, FullHouse,
                 SmallStraight, LargeStraight, Yahtzee)
