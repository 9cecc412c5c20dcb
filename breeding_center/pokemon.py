"""
pokemon – Creature records held by the breeding center.

Handles:
  - Elemental type and gender enumerations
  - Experience gain with multi-level roll-over
  - Breeding eligibility (same type, opposite genders, minimum level)
  - Offspring creation with an injectable gender coin
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from breeding_center.config import (
    BREEDING_MIN_LEVEL,
    DISPLAY_SEPARATOR,
    OFFSPRING_NAME,
    STARTING_LEVEL,
    XP_PER_LEVEL,
)

logger = logging.getLogger(__name__)

# Zero-argument callable returning True for a male offspring
GenderCoin = Callable[[], bool]


# ── Enumerations ────────────────────────────────────────────────────────────

class PokemonType(str, Enum):
    FIRE = "Fire"
    WATER = "Water"
    GRASS = "Grass"
    ELECTRIC = "Electric"
    NORMAL = "Normal"

    def __str__(self) -> str:
        return self.value


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    def __str__(self) -> str:
        return self.value

    @property
    def opposite(self) -> Gender:
        return Gender.FEMALE if self is Gender.MALE else Gender.MALE


def _default_coin() -> bool:
    return random.random() < 0.5


# ── Creature record ─────────────────────────────────────────────────────────

@dataclass
class Pokemon:
    """A single creature: fixed identity plus level/experience progression."""
    name: str
    pokemon_type: PokemonType
    gender: Gender
    level: int = STARTING_LEVEL
    experience: int = 0

    def gain_xp(self, xp: int) -> List[int]:
        """
        Add experience and convert every full ``XP_PER_LEVEL`` into a level.

        Returns:
            The levels reached, one entry per level gained, in order.
        """
        if xp < 0:
            raise ValueError(f"Experience must be non-negative, got {xp}")

        self.experience += xp
        reached = []
        while self.experience >= XP_PER_LEVEL:
            self.level += 1
            self.experience -= XP_PER_LEVEL
            reached.append(self.level)
            logger.debug("%s reached level %d", self.name, self.level)
        return reached

    def can_breed_with(self, other: Pokemon) -> bool:
        """Same type, opposite genders, and both at the minimum breeding level."""
        return (
            self.pokemon_type == other.pokemon_type
            and self.gender == other.gender.opposite
            and self.level >= BREEDING_MIN_LEVEL
            and other.level >= BREEDING_MIN_LEVEL
        )

    def breed_with(
        self,
        other: Pokemon,
        coin: Optional[GenderCoin] = None,
    ) -> Optional[Pokemon]:
        """
        Produce an offspring with *other*, or None if the pair is ineligible.

        The offspring inherits this creature's type and starts at level 1.
        Its gender comes from *coin* (True → Male).
        """
        if not self.can_breed_with(other):
            logger.debug("%s and %s are not eligible to breed", self.name, other.name)
            return None

        flip = coin if coin is not None else _default_coin
        return Pokemon(
            name=OFFSPRING_NAME,
            pokemon_type=self.pokemon_type,
            gender=Gender.MALE if flip() else Gender.FEMALE,
        )

    def describe(self) -> List[str]:
        return [
            f"Name: {self.name}",
            f"Type: {self.pokemon_type}",
            f"Level: {self.level}",
            f"Experience: {self.experience}/{XP_PER_LEVEL}",
            f"Gender: {self.gender}",
            DISPLAY_SEPARATOR,
        ]


def from_labels(name: str, type_label: str, gender_label: str) -> Pokemon:
    """Build a Pokemon from plain text labels such as ``("Pikachu", "Electric", "Male")``."""
    return Pokemon(name, PokemonType(type_label), Gender(gender_label))
