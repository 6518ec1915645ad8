"""
Rule Catalogue - The thirteen pre-configured Yahtzee scoring rules

RULES maps each Category to its configured rule. It is built once at import
and exposed read-only; look rules up by Category, by catalogue key
("full_house") or by display name ("Full House").
"""
from enum import Enum
from types import MappingProxyType

from dice_stats import validate_roll
from scoring_rules import (
    FullHouse, LargeStraight, Rule, SingleValueTotal, SmallStraight,
    ThresholdCountSum, Yahtzee,
)


class Category(Enum):
    """Yahtzee score categories"""
    ONES = "Ones"
    TWOS = "Twos"
    THREES = "Threes"
    FOURS = "Fours"
    FIVES = "Fives"
    SIXES = "Sixes"
    THREE_OF_KIND = "3 of a Kind"
    FOUR_OF_KIND = "4 of a Kind"
    FULL_HOUSE = "Full House"
    SMALL_STRAIGHT = "Small Straight"
    LARGE_STRAIGHT = "Large Straight"
    YAHTZEE = "Yahtzee"
    CHANCE = "Chance"

    @property
    def key(self):
        """Catalogue name, e.g. "three_of_kind" """
        return self.name.lower()


class UnknownRule(KeyError):
    """Raised when a rule name matches no catalogue entry."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown rule: {name!r}")

    def __str__(self):
        # KeyError would otherwise quote the whole message
        return self.args[0]


CATEGORY_ORDER = [
    Category.ONES, Category.TWOS, Category.THREES,
    Category.FOURS, Category.FIVES, Category.SIXES,
    Category.THREE_OF_KIND, Category.FOUR_OF_KIND,
    Category.FULL_HOUSE, Category.SMALL_STRAIGHT,
    Category.LARGE_STRAIGHT, Category.YAHTZEE, Category.CHANCE,
]

RULES = MappingProxyType({
    # Upper section - sum of matching dice
    Category.ONES: SingleValueTotal(target_value=1, description="1 point for each one"),
    Category.TWOS: SingleValueTotal(target_value=2, description="2 points for each two"),
    Category.THREES: SingleValueTotal(target_value=3, description="3 points for each three"),
    Category.FOURS: SingleValueTotal(target_value=4, description="4 points for each four"),
    Category.FIVES: SingleValueTotal(target_value=5, description="5 points for each five"),
    Category.SIXES: SingleValueTotal(target_value=6, description="6 points for each six"),

    # Lower section
    Category.THREE_OF_KIND: ThresholdCountSum(required_count=3, description="Sum of all dice if 3 are same"),
    Category.FOUR_OF_KIND: ThresholdCountSum(required_count=4, description="Sum of all dice if 4 are same"),
    Category.FULL_HOUSE: FullHouse(flat_score=25, description="25 points for a full house"),
    Category.SMALL_STRAIGHT: SmallStraight(flat_score=30, description="4 consecutive dice score 30"),
    Category.LARGE_STRAIGHT: LargeStraight(flat_score=40, description="5 consecutive dice score 40"),
    Category.YAHTZEE: Yahtzee(flat_score=50, description="All dice the same score 50"),
    # Chance is a threshold sum that every roll meets
    Category.CHANCE: ThresholdCountSum(required_count=0, description="Sum of all dice"),
})


def _normalise_key(name):
    return name.strip().lower().replace("-", "_").replace(" ", "_")


_BY_NAME = {}
for _cat in Category:
    _BY_NAME[_cat.key] = _cat
    _BY_NAME[_normalise_key(_cat.value)] = _cat
del _cat


def category_by_name(name):
    """
    Look up a Category by catalogue key or display name

    Args:
        name: A Category, a catalogue key ("full_house") or a display
            name ("Full House"). Matching ignores case, and treats spaces
            and hyphens as underscores.

    Returns:
        The matching Category

    Raises:
        UnknownRule: if nothing matches
    """
    if isinstance(name, Category):
        return name
    if not isinstance(name, str):
        raise UnknownRule(name)
    try:
        return _BY_NAME[_normalise_key(name)]
    except KeyError:
        raise UnknownRule(name) from None


def get_rule(name) -> Rule:
    """Return the configured rule for a category name"""
    return RULES[category_by_name(name)]


def describe(name):
    """Return the human-readable description of a rule"""
    return get_rule(name).description


def score(name, roll):
    """Score roll under a single named rule"""
    return get_rule(name).evaluate(roll)


def score_all(roll):
    """
    Score roll under every rule in the catalogue

    Returns:
        Dict of Category -> score, in CATEGORY_ORDER
    """
    roll = validate_roll(roll)
    return {cat: RULES[cat].evaluate(roll) for cat in CATEGORY_ORDER}


def best_category(roll):
    """Highest scoring category for roll; ties go to the earliest category"""
    scores = score_all(roll)
    return max(CATEGORY_ORDER, key=lambda cat: scores[cat])
