#!/usr/bin/env python3
"""
Command-line entry point: score a five-die roll against the rule catalogue.

Usage:
    python yahtzee.py 2 2 2 6 6                     # full scoresheet
    python yahtzee.py 1 2 3 4 6 --rule small_straight
    python yahtzee.py 3 3 3 3 3 --sort score --hide-zero
    python yahtzee.py 5 5 5 5 5 --no-descriptions --save
"""
from __future__ import annotations

import argparse
import logging
import sys

from dice_stats import InvalidRoll
from rule_catalogue import (
    CATEGORY_ORDER, RULES, UnknownRule,
    best_category, category_by_name, score, score_all,
)
from settings import SORT_CHOICES, load_settings, save_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def format_scoresheet(scores, show_descriptions=True, hide_zero=False, sort_by="catalogue") -> list[str]:
    """Build the printable scoresheet lines for a dict of Category -> score.

    Args:
        scores: Scores keyed by Category (as returned by score_all)
        show_descriptions: Append each rule's description
        hide_zero: Leave out categories that score 0
        sort_by: "catalogue" keeps CATEGORY_ORDER, "score" puts the
            highest scores first (ties stay in catalogue order)

    Returns:
        List of lines, without trailing newlines
    """
    categories = [cat for cat in CATEGORY_ORDER if cat in scores]
    if sort_by == "score":
        categories.sort(key=lambda cat: scores[cat], reverse=True)

    lines = []
    for cat in categories:
        points = scores[cat]
        if hide_zero and points == 0:
            continue
        line = f"{cat.value:<15} {points:>3}"
        if show_descriptions:
            line += f"  {RULES[cat].description}"
        lines.append(line)
    return lines


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:] if None).

    Returns:
        Parsed argparse.Namespace.
    """
    parser = argparse.ArgumentParser(description="Score a Yahtzee roll")
    parser.add_argument("dice", nargs="+", type=int, metavar="DIE",
                        help="The five die values (1-6)")
    parser.add_argument("--rule", metavar="NAME",
                        help="Score only this rule (e.g. full_house or 'Full House')")
    parser.add_argument("--descriptions", action=argparse.BooleanOptionalAction, default=None,
                        help="Show rule descriptions")
    parser.add_argument("--hide-zero", action=argparse.BooleanOptionalAction, default=None,
                        help="Leave out categories scoring 0")
    parser.add_argument("--sort", choices=SORT_CHOICES, default=None,
                        help="Scoresheet order (default: catalogue)")
    parser.add_argument("--save", action="store_true",
                        help="Remember the display options given")
    parser.add_argument("--settings", metavar="PATH", default=None,
                        help="Settings file (default: ~/.yahtzee_scoring.json)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    prefs = load_settings(args.settings)
    overrides = {
        "show_descriptions": args.descriptions,
        "hide_zero": args.hide_zero,
        "sort_by": args.sort,
    }
    prefs.update({key: value for key, value in overrides.items() if value is not None})

    try:
        if args.rule is not None:
            cat = category_by_name(args.rule)
            lines = format_scoresheet({cat: score(cat, args.dice)},
                                      show_descriptions=prefs["show_descriptions"])
        else:
            scores = score_all(args.dice)
            lines = format_scoresheet(scores,
                                      show_descriptions=prefs["show_descriptions"],
                                      hide_zero=prefs["hide_zero"],
                                      sort_by=prefs["sort_by"])
            best = best_category(args.dice)
            lines.append("")
            lines.append(f"Best: {best.value} ({scores[best]})")
    except (InvalidRoll, UnknownRule) as e:
        logger.debug("Rejected input: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # Only a command that succeeded may change the saved preferences
    if args.save:
        save_settings(prefs, args.settings)

    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
