"""Unit tests for breeding_center.pokemon – XP gain, eligibility, offspring."""
import itertools

import pytest
from breeding_center.config import BREEDING_MIN_LEVEL, DISPLAY_SEPARATOR, OFFSPRING_NAME
from breeding_center.pokemon import Gender, Pokemon, PokemonType, from_labels


def _mon(name="Pikachu", ptype=PokemonType.ELECTRIC, gender=Gender.MALE, level=1, experience=0):
    return Pokemon(name, ptype, gender, level=level, experience=experience)


class TestCreate:
    def test_defaults(self):
        p = Pokemon("Pikachu", PokemonType.ELECTRIC, Gender.MALE)
        assert p.level == 1
        assert p.experience == 0

    def test_from_labels(self):
        p = from_labels("Venusaur", "Grass", "Female")
        assert p.pokemon_type is PokemonType.GRASS
        assert p.gender is Gender.FEMALE

    def test_from_labels_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            from_labels("Mew", "Psychic", "Male")

    def test_str_labels(self):
        assert str(PokemonType.ELECTRIC) == "Electric"
        assert str(Gender.FEMALE) == "Female"

    def test_opposite_gender(self):
        assert Gender.MALE.opposite is Gender.FEMALE
        assert Gender.FEMALE.opposite is Gender.MALE


class TestGainXp:
    def test_below_threshold(self):
        p = _mon()
        assert p.gain_xp(99) == []
        assert p.level == 1
        assert p.experience == 99

    def test_exact_threshold(self):
        p = _mon()
        assert p.gain_xp(100) == [2]
        assert p.level == 2
        assert p.experience == 0

    def test_multi_level_gain(self):
        p = _mon()
        reached = p.gain_xp(250)
        assert reached == [2, 3]
        assert p.level == 3
        assert p.experience == 50

    def test_carry_over_between_calls(self):
        p = _mon()
        p.gain_xp(60)
        assert p.gain_xp(60) == [2]
        assert p.experience == 20

    def test_zero_xp(self):
        p = _mon(level=4, experience=30)
        assert p.gain_xp(0) == []
        assert (p.level, p.experience) == (4, 30)

    def test_negative_xp_rejected(self):
        p = _mon(experience=10)
        with pytest.raises(ValueError):
            p.gain_xp(-1)
        assert p.experience == 10

    @pytest.mark.parametrize("k", [1, 3, 7])
    def test_multiples_of_100(self, k):
        p = _mon(level=2)
        p.gain_xp(100 * k)
        assert p.level == 2 + k
        assert p.experience == 0

    def test_invariants_hold_over_many_gains(self):
        p = _mon()
        last_level = p.level
        for amount in [0, 1, 37, 99, 100, 101, 250, 999, 3]:
            p.gain_xp(amount)
            assert 0 <= p.experience < 100
            assert p.level >= last_level
            last_level = p.level

    def test_four_hundred_reaches_breeding_level(self):
        p = _mon()
        p.gain_xp(400)
        assert p.level == BREEDING_MIN_LEVEL


class TestEligibility:
    def test_eligible_pair(self):
        a = _mon(gender=Gender.MALE, level=5)
        b = _mon(name="Raichu", gender=Gender.FEMALE, level=5)
        assert a.can_breed_with(b)

    def test_same_gender(self):
        a = _mon(gender=Gender.FEMALE, level=5)
        b = _mon(gender=Gender.FEMALE, level=5)
        assert not a.can_breed_with(b)

    def test_different_type(self):
        a = _mon(gender=Gender.MALE, level=9)
        b = _mon(ptype=PokemonType.FIRE, gender=Gender.FEMALE, level=9)
        assert not a.can_breed_with(b)

    def test_level_too_low(self):
        a = _mon(gender=Gender.MALE, level=5)
        b = _mon(gender=Gender.FEMALE, level=4)
        assert not a.can_breed_with(b)
        assert not b.can_breed_with(a)

    def test_with_itself(self):
        a = _mon(level=10)
        assert not a.can_breed_with(a)

    def test_symmetric(self):
        pool = [
            _mon(ptype=t, gender=g, level=lvl)
            for t in (PokemonType.FIRE, PokemonType.WATER)
            for g in Gender
            for lvl in (4, 5, 8)
        ]
        for a, b in itertools.product(pool, repeat=2):
            assert a.can_breed_with(b) == b.can_breed_with(a)


class TestBreedWith:
    def test_offspring_fields(self):
        a = _mon(ptype=PokemonType.WATER, gender=Gender.FEMALE, level=6)
        b = _mon(ptype=PokemonType.WATER, gender=Gender.MALE, level=5)
        baby = a.breed_with(b, coin=lambda: False)
        assert baby is not None
        assert baby.name == OFFSPRING_NAME
        assert baby.pokemon_type is PokemonType.WATER
        assert baby.level == 1
        assert baby.experience == 0
        assert baby.gender is Gender.FEMALE

    def test_coin_true_is_male(self):
        a = _mon(gender=Gender.MALE, level=5)
        b = _mon(gender=Gender.FEMALE, level=5)
        assert a.breed_with(b, coin=lambda: True).gender is Gender.MALE

    def test_ineligible_returns_none(self):
        a = _mon(gender=Gender.MALE, level=1)
        b = _mon(gender=Gender.FEMALE, level=1)
        assert a.breed_with(b, coin=lambda: True) is None

    def test_parents_untouched(self):
        a = _mon(gender=Gender.MALE, level=5, experience=12)
        b = _mon(gender=Gender.FEMALE, level=7, experience=3)
        a.breed_with(b, coin=lambda: True)
        assert (a.level, a.experience) == (5, 12)
        assert (b.level, b.experience) == (7, 3)

    def test_default_coin_gives_valid_gender(self):
        a = _mon(gender=Gender.MALE, level=5)
        b = _mon(gender=Gender.FEMALE, level=5)
        for _ in range(20):
            assert a.breed_with(b).gender in (Gender.MALE, Gender.FEMALE)


class TestDescribe:
    def test_lines(self):
        p = _mon(level=3, experience=50)
        assert p.describe() == [
            "Name: Pikachu",
            "Type: Electric",
            "Level: 3",
            "Experience: 50/100",
            "Gender: Male",
            DISPLAY_SEPARATOR,
        ]
