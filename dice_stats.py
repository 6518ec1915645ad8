"""
Dice Statistics - Pure helper computations over a five-die roll

Every scoring rule is built on these primitives. Nothing here keeps state,
and no function mutates the roll it is given.
"""
import logging
from collections import Counter

logger = logging.getLogger(__name__)

NUM_DICE = 5
MIN_FACE = 1
MAX_FACE = 6


class InvalidRoll(ValueError):
    """Raised when a roll is not five integers in the range 1-6."""

    def __init__(self, roll, reason):
        self.roll = roll
        self.reason = reason
        super().__init__(f"Invalid roll {roll!r}: {reason}")


def validate_roll(roll):
    """
    Check that roll is a well-formed Yahtzee roll

    Args:
        roll: Iterable of die values

    Returns:
        The roll as a tuple of ints

    Raises:
        InvalidRoll: if the roll does not have exactly five entries or
            any entry is not an int between 1 and 6
    """
    try:
        values = tuple(roll)
    except TypeError:
        logger.debug("Rejected non-iterable roll %r", roll)
        raise InvalidRoll(roll, "roll must be a sequence of dice") from None

    if len(values) != NUM_DICE:
        logger.debug("Rejected roll %r with %d dice", values, len(values))
        raise InvalidRoll(values, f"expected {NUM_DICE} dice, got {len(values)}")

    for value in values:
        # bool is an int subclass but never a die face
        if isinstance(value, bool) or not isinstance(value, int):
            logger.debug("Rejected roll %r: non-integer %r", values, value)
            raise InvalidRoll(values, f"die value {value!r} is not an integer")
        if not (MIN_FACE <= value <= MAX_FACE):
            logger.debug("Rejected roll %r: %d out of range", values, value)
            raise InvalidRoll(values, f"die value {value} is outside {MIN_FACE}-{MAX_FACE}")

    return values


def total(roll):
    """Sum of all dice"""
    return sum(roll)


def count_value(roll, value):
    """Number of dice showing value (0 if none do)"""
    return sum(1 for die in roll if die == value)


def frequency_counts(roll):
    """
    Occurrence count of each distinct value, with the values discarded

    (2, 2, 2, 5, 5) gives the counts 3 and 2. The order of the returned
    counts is unspecified; treat the result as an unordered collection.
    """
    return tuple(Counter(roll).values())


def distinct_values(roll):
    """Set of distinct values showing in the roll"""
    return frozenset(roll)
