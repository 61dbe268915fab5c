"""Exhaustive enumeration of the simplest syllable shapes."""

from __future__ import annotations

from itertools import chain, product
from typing import Iterator

from conlang.inventory.models import Inventory
from conlang.phone.phoneme import Syllable


def enumerate_syllables(inventory: Inventory) -> Iterator[Syllable]:
    """Yield every V, VV and CV syllable the inventory allows.

    Order: single vowels, then ordered pairs of distinct vowels, then
    consonant-vowel pairs, each in inventory order.
    """
    vs = (Syllable([v]) for v in inventory.vowels)
    vvs = (
        Syllable([v1, v2])
        for v1, v2 in product(inventory.vowels, repeat=2)
        if v1 is not v2
    )
    cvs = (
        Syllable([c, v])
        for c, v in product(inventory.consonants, inventory.vowels)
    )
    return chain(vs, vvs, cvs)


def count_syllables(inventory: Inventory) -> int:
    """Number of syllables ``enumerate_syllables`` yields."""
    v = len(inventory.vowels)
    c = len(inventory.consonants)
    # Ordered pairs of distinct vowels; a repeated entry is not distinct
    vv = sum(1 for v1, v2 in product(inventory.vowels, repeat=2) if v1 is not v2)
    return v + vv + c * v
