"""WordGenerator: a compiled pattern, and Word, the value it produces."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable

from conlang.gen.syllable import SyllableGenerator
from conlang.inventory.models import Inventory
from conlang.phone.errors import NoInputError
from conlang.phone.phoneme import Syllable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Word:
    """One generated word: an ordered run of syllables.

    Renders with a single space between syllables.
    """

    syllables: tuple[Syllable, ...]

    def __init__(self, syllables: Iterable[Syllable]) -> None:
        object.__setattr__(self, "syllables", tuple(syllables))

    def __len__(self) -> int:
        return len(self.syllables)

    def __iter__(self):
        return iter(self.syllables)

    def __getitem__(self, index: int) -> Syllable:
        return self.syllables[index]

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.syllables)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"


@dataclass(frozen=True)
class WordGenerator:
    """A full pattern compiled against an inventory.

    Immutable once parsed, so a single instance can be sampled any number
    of times, including from several threads that each own their rng.

    Attributes:
        syllables: One SyllableGenerator per whitespace-delimited segment.
            Never empty.
    """

    syllables: tuple[SyllableGenerator, ...]

    def __init__(self, syllables: Iterable[SyllableGenerator]) -> None:
        object.__setattr__(self, "syllables", tuple(syllables))
        if not self.syllables:
            raise NoInputError()

    @classmethod
    def parse(cls, src: str, inventory: Inventory) -> WordGenerator:
        """Compile a pattern such as ``"CV CVC"``.

        Whitespace separates syllables; each remaining character becomes
        one slot resolved against ``inventory``.

        Args:
            src: Pattern text.
            inventory: Phoneme pool to resolve slots against.

        Returns:
            The compiled generator.

        Raises:
            NoInputError: If ``src`` holds no non-whitespace characters.
            EmptySlotError: If a slot matches nothing in ``inventory``.
            UnknownCharacterError: For an unrecognized pattern character.
            UnsupportedSyntaxError: For reserved ``[...]``/``(...)`` groups.
        """
        generator = cls(
            SyllableGenerator.parse(segment, inventory) for segment in src.split()
        )
        logger.debug(
            "Compiled pattern %r into %d syllable(s)", src, len(generator.syllables)
        )
        return generator

    def generate(self, rng: random.Random) -> Word:
        """Sample one word: one syllable per compiled segment."""
        return Word(syl.generate(rng) for syl in self.syllables)

    def __str__(self) -> str:
        return " ".join(str(syl) for syl in self.syllables)

    def __repr__(self) -> str:
        return f"WordGenerator({self})"
