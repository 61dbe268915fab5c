"""SyllableGenerator: the compiled form of one whitespace-free pattern segment."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from conlang.gen.phoneme import PhonemeGenerator
from conlang.inventory.models import Inventory
from conlang.phone.errors import NoInputError
from conlang.phone.phoneme import Syllable


@dataclass(frozen=True)
class SyllableGenerator:
    """An ordered run of slots producing one syllable per call.

    Attributes:
        phonemes: The compiled slots, in pattern order. Never empty.
    """

    phonemes: tuple[PhonemeGenerator, ...]

    def __init__(self, phonemes: Iterable[PhonemeGenerator]) -> None:
        object.__setattr__(self, "phonemes", tuple(phonemes))
        if not self.phonemes:
            raise NoInputError()

    @classmethod
    def parse(cls, src: str, inventory: Inventory) -> SyllableGenerator:
        """Compile one pattern segment, e.g. ``"CVC"``, slot by slot.

        Raises:
            NoInputError: If ``src`` is empty.
            ParseError: Whatever ``PhonemeGenerator.parse`` raises.
        """
        slots: list[PhonemeGenerator] = []
        rest = src
        while rest:
            slot, rest = PhonemeGenerator.parse(rest, inventory)
            slots.append(slot)
        return cls(slots)

    def generate(self, rng: random.Random) -> Syllable:
        """Draw one phoneme per slot."""
        return Syllable(slot.generate(rng) for slot in self.phonemes)

    def __len__(self) -> int:
        return len(self.phonemes)

    def __str__(self) -> str:
        return "".join(str(slot) for slot in self.phonemes)

    def __repr__(self) -> str:
        return f"SyllableGenerator({self})"
