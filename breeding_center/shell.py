"""
shell – Interactive menu loop for the breeding center.

Reads one menu choice per line, plus a follow-up line for the train and
breed actions, and dispatches to :class:`BreedingCenter`. Bad input is
reported and the loop carries on; only the Exit choice or a closed input
stream ends it.
"""

from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import List, Optional, TextIO

from breeding_center.breeding import BreedingCenter
from breeding_center.config import MAX_INDEX_INPUT, MAX_XP_INPUT

logger = logging.getLogger(__name__)


class MenuChoice(IntEnum):
    DISPLAY = 1
    TRAIN = 2
    BREED = 3
    SORT_LEVEL = 4
    SORT_TYPE = 5
    EXIT = 6


MENU_LABELS = {
    MenuChoice.DISPLAY: "Display all Pokémon",
    MenuChoice.TRAIN: "Train all Pokémon",
    MenuChoice.BREED: "Attempt breeding",
    MenuChoice.SORT_LEVEL: "Sort Pokémon by level",
    MenuChoice.SORT_TYPE: "Sort Pokémon by type",
    MenuChoice.EXIT: "Exit",
}


# ── Input parsing ───────────────────────────────────────────────────────────

def parse_unsigned(text: str, limit: int = MAX_XP_INPUT) -> Optional[int]:
    """
    Parse a non-negative ASCII decimal integer, or return None.

    One leading ``+`` is allowed. Values above *limit* are rejected.
    """
    text = text.strip()
    if text.startswith("+"):
        text = text[1:]
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if value > limit:
        return None
    return value


def parse_choice(line: str) -> Optional[MenuChoice]:
    value = parse_unsigned(line)
    if value is None:
        return None
    try:
        return MenuChoice(value)
    except ValueError:
        return None


def parse_indices(line: str) -> List[int]:
    """Keep every whitespace-separated token that parses as an index."""
    indices = []
    for token in line.split():
        value = parse_unsigned(token, limit=MAX_INDEX_INPUT)
        if value is not None:
            indices.append(value)
    return indices


# ── Shell ───────────────────────────────────────────────────────────────────

class BreedingShell:
    """
    Blocking read-eval loop over the six menu actions.

    Streams default to stdin/stdout; pass ``io.StringIO`` objects to
    script a session.
    """

    def __init__(
        self,
        center: BreedingCenter,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.center = center
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError("Failed to read input: stream closed")
        return line

    def print_menu(self) -> None:
        self._print("\n=== Breeding Center Menu ===")
        for choice in MenuChoice:
            self._print(f"{choice.value}. {MENU_LABELS[choice]}")

    def run(self) -> int:
        """
        Run until the Exit choice is read.

        Returns:
            Number of menu lines processed, including invalid ones.

        Raises:
            EOFError: if the input stream ends before Exit.
        """
        commands = 0
        while True:
            self.print_menu()
            choice = parse_choice(self._read_line())
            commands += 1

            if choice is None:
                self._print("Invalid choice! Please try again.")
                continue

            logger.debug("Menu choice: %s", choice.name)
            if choice is MenuChoice.EXIT:
                self._print("Exiting the breeding center. Goodbye!")
                return commands
            self.dispatch(choice)

    def dispatch(self, choice: MenuChoice) -> None:
        if choice is MenuChoice.DISPLAY:
            self.center.display_all()
        elif choice is MenuChoice.TRAIN:
            self._train()
        elif choice is MenuChoice.BREED:
            self._breed()
        elif choice is MenuChoice.SORT_LEVEL:
            self.center.sort_by_level()
        elif choice is MenuChoice.SORT_TYPE:
            self.center.sort_by_type()

    def _train(self) -> None:
        self._print("Enter XP to train all Pokémon:")
        xp = parse_unsigned(self._read_line())
        if xp is None:
            self._print("Invalid XP value!")
            return
        self.center.train_all(xp)

    def _breed(self) -> None:
        self._print("Enter the indices of two Pokémon to breed (e.g., 0 1):")
        indices = parse_indices(self._read_line())
        if len(indices) != 2:
            self._print("Invalid indices!")
            return
        self.center.attempt_breeding(indices[0], indices[1])
