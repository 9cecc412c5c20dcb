"""
Pokémon Breeding Center – Command-Line Application
==================================================
Run with:  python app.py

Interactive menu for a small in-memory breeding center: list the
Pokémon, train them all, breed compatible pairs, and sort the roster.

Features:
  - Starter roster (Pikachu, Raichu, Charizard, Venusaur) or an empty center
  - Reproducible offspring genders with --seed
  - Session summary on exit
  - Optional roster level chart (matplotlib)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

# ── Ensure project root is importable ────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from breeding_center.breeding import BreedingCenter
from breeding_center.config import LOG_FORMAT, STARTER_ROSTER
from breeding_center.pokemon import from_labels
from breeding_center.shell import BreedingShell
from breeding_center.stats import StatsTracker, generate_level_chart

logger = logging.getLogger("app")


def build_center(
    empty: bool = False,
    seed: Optional[int] = None,
    stats: Optional[StatsTracker] = None,
) -> BreedingCenter:
    """Create the center, seeding it with the starter roster unless *empty*."""
    coin = None
    if seed is not None:
        rng = random.Random(seed)

        def coin() -> bool:
            return rng.random() < 0.5

    center = BreedingCenter(coin=coin, stats=stats)
    if not empty:
        for name, type_label, gender_label in STARTER_ROSTER:
            center.add_pokemon(from_labels(name, type_label, gender_label))
    return center


def print_summary(stats: StatsTracker, roster_size: int) -> None:
    summary = stats.get_summary()
    summary["roster_size"] = roster_size
    print("\n" + "=" * 60)
    print("  Breeding Center — Session Summary")
    print("=" * 60)
    for key, val in summary.items():
        print(f"  {key:.<40} {val}")
    print("=" * 60)


# ── CLI entry point ──────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Pokémon Breeding Center – interactive simulation",
    )
    parser.add_argument(
        "--seed",
        type=lambda x: int(x, 0),
        default=None,
        help="Seed for offspring gender rolls (default: unseeded)",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Start with an empty center instead of the starter roster",
    )
    parser.add_argument(
        "--chart",
        type=str,
        default=None,
        help="Write a roster level chart (PNG) to this path on exit",
    )
    parser.add_argument(
        "--no-summary",
        action="store_true",
        help="Do not print the session summary on exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    stats = StatsTracker()
    center = build_center(empty=args.empty, seed=args.seed, stats=stats)
    shell = BreedingShell(center)

    try:
        commands = shell.run()
    except EOFError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Session ended after %d commands", commands)

    if args.chart:
        path = generate_level_chart(center, Path(args.chart))
        if path is not None:
            print(f"Roster chart written to {path}")

    if not args.no_summary:
        print_summary(stats, len(center))
    return 0


if __name__ == "__main__":
    sys.exit(main())
