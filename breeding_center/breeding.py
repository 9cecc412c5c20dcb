"""
breeding – The breeding center registry.

Holds every Pokémon in insertion order and exposes the center's actions:
add, list, train, breed by position, and stable sorts by level or type.
Positions are the addressing scheme for breeding and display, so the
list only ever grows.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Iterator, List, Optional, Tuple

from breeding_center.pokemon import GenderCoin, Pokemon
from breeding_center.stats import StatsTracker

logger = logging.getLogger(__name__)


class BreedingCenter:
    """
    Ordered collection of Pokémon with the center's operations.

    Usage::

        center = BreedingCenter()
        center.add_pokemon(Pokemon("Pikachu", PokemonType.ELECTRIC, Gender.MALE))
        center.train_all(400)
        center.attempt_breeding(0, 1)
    """

    def __init__(
        self,
        echo: Callable[[str], None] = print,
        coin: Optional[GenderCoin] = None,
        stats: Optional[StatsTracker] = None,
    ) -> None:
        self._pokemon: List[Pokemon] = []
        self._echo = echo
        self._coin = coin
        self.stats = stats

    def __len__(self) -> int:
        return len(self._pokemon)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self._pokemon)

    @property
    def pokemon(self) -> Tuple[Pokemon, ...]:
        return tuple(self._pokemon)

    # ── Registry operations ──────────────────────────────────────────────

    def add_pokemon(self, pokemon: Pokemon) -> None:
        self._echo(f"{pokemon.name} was added to the breeding center!")
        self._pokemon.append(pokemon)
        logger.debug("Added %s at index %d", pokemon.name, len(self._pokemon) - 1)
        if self.stats is not None:
            self.stats.record_added()

    def display_all(self) -> None:
        self._echo(f"\n=== LIST OF POKÉMON IN THE BREEDING CENTER ({len(self._pokemon)}) ===")
        if not self._pokemon:
            self._echo("The breeding center is empty!")
            return

        for index, pokemon in enumerate(self._pokemon):
            self._echo(f"Pokémon #{index + 1}")
            for line in pokemon.describe():
                self._echo(line)

    def train_all(self, xp: int) -> int:
        """
        Give *xp* experience to every Pokémon in registry order.

        Returns:
            Total number of levels gained across the roster.
        """
        if xp < 0:
            raise ValueError(f"Experience must be non-negative, got {xp}")

        self._echo("\n=== TRAINING ALL POKÉMON ===")
        level_ups = 0
        for pokemon in self._pokemon:
            self._echo(f"{pokemon.name} gains {xp} XP!")
            for level in pokemon.gain_xp(xp):
                self._echo(f"{pokemon.name} leveled up to level {level}!")
                level_ups += 1

        logger.info("Trained %d Pokémon with %d XP (%d level-ups)",
                    len(self._pokemon), xp, level_ups)
        if self.stats is not None:
            self.stats.record_training(xp, len(self._pokemon), level_ups)
        return level_ups

    def attempt_breeding(self, index1: int, index2: int) -> bool:
        """
        Breed the Pokémon at two registry positions.

        Both parents are copied first, so breeding a Pokémon with itself is
        evaluated against an identical copy. The offspring is appended on
        success. Nothing changes when an index is out of range or the pair
        is ineligible.
        """
        size = len(self._pokemon)
        if not (0 <= index1 < size and 0 <= index2 < size):
            self._echo("Invalid Pokémon index!")
            logger.debug("Breeding rejected: indices (%d, %d) with %d Pokémon",
                         index1, index2, size)
            return False

        parent1 = copy.deepcopy(self._pokemon[index1])
        parent2 = copy.deepcopy(self._pokemon[index2])

        self._echo("\n=== BREEDING ATTEMPT ===")
        self._echo(f"Between {parent1.name} and {parent2.name}")

        baby = parent1.breed_with(parent2, coin=self._coin)
        if self.stats is not None:
            self.stats.record_breeding(baby)

        if baby is None:
            self._echo("These Pokémon cannot breed together.")
            return False

        self._echo(f"An egg hatched! A new {baby.pokemon_type} Pokémon was born!")
        logger.info("%s x %s produced a %s %s offspring",
                    parent1.name, parent2.name, baby.gender, baby.pokemon_type)
        self.add_pokemon(baby)
        return True

    def sort_by_level(self) -> None:
        # list.sort is stable, so equal levels keep their relative order
        self._pokemon.sort(key=lambda p: p.level, reverse=True)
        self._echo("Pokémon sorted by level!")

    def sort_by_type(self) -> None:
        self._pokemon.sort(key=lambda p: str(p.pokemon_type))
        self._echo("Pokémon sorted by type!")
