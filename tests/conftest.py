"""Shared test fixtures for conlang."""

import random

import pytest

from conlang.inventory.models import Inventory
from conlang.phone import Consonant, Vowel


@pytest.fixture
def full_inventory() -> Inventory:
    """Every catalog phoneme."""
    return Inventory.full()


@pytest.fixture
def small_inventory() -> Inventory:
    """A Hawaiian-like inventory: few consonants, five vowels."""
    return Inventory(
        consonants=[
            Consonant.P, Consonant.K, Consonant.GLOTTAL_STOP,
            Consonant.H, Consonant.M, Consonant.N, Consonant.L,
        ],
        vowels=[Vowel.A, Vowel.E, Vowel.I, Vowel.O, Vowel.U],
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)
