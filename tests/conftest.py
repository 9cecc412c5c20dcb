"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def output():
    """Collect every line the center prints."""
    return []


@pytest.fixture
def male_coin():
    """Gender coin that always lands on Male."""
    return lambda: True


@pytest.fixture
def center(output, male_coin):
    """An empty center writing into ``output`` with a fixed gender coin."""
    from breeding_center.breeding import BreedingCenter
    from breeding_center.stats import StatsTracker
    return BreedingCenter(echo=output.append, coin=male_coin, stats=StatsTracker())


@pytest.fixture
def starter_center(center):
    """The center populated with the starter roster."""
    from breeding_center.config import STARTER_ROSTER
    from breeding_center.pokemon import from_labels
    for name, type_label, gender_label in STARTER_ROSTER:
        center.add_pokemon(from_labels(name, type_label, gender_label))
    return center
