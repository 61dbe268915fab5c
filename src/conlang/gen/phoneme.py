"""PhonemeGenerator: one compiled slot of a pattern."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable

from conlang.inventory.models import Inventory
from conlang.phone.articulation import Manner, Place
from conlang.phone.consonants import Consonant
from conlang.phone.errors import (
    EmptySlotError,
    NoInputError,
    UnknownCharacterError,
    UnsupportedSyntaxError,
)
from conlang.phone.phoneme import Phoneme

logger = logging.getLogger(__name__)

CONSONANT_CLASS = "C"
VOWEL_CLASS = "V"

# Reserved group openers and the construct each one starts
_RESERVED_GROUPS = {
    "[": "phoneme alternation group",
    "(": "optional group",
}


@dataclass(frozen=True, eq=False)
class PhonemeGenerator:
    """A pattern slot: a display glyph plus the phonemes it may produce.

    Attributes:
        display: The pattern character that produced this slot.
        choices: Candidate phonemes. Never empty.
        weights: Optional relative weight per candidate. Stored for future
            weighted sampling; ``generate`` currently ignores it.
    """

    display: str
    choices: tuple[Phoneme, ...]
    weights: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not self.choices:
            raise EmptySlotError(self.display)
        if self.weights and len(self.weights) != len(self.choices):
            raise ValueError(
                f"weights length ({len(self.weights)}) must match "
                f"choices length ({len(self.choices)})"
            )

    # --- Parsing ---

    @classmethod
    def parse(cls, src: str, inventory: Inventory) -> tuple[PhonemeGenerator, str]:
        """Compile the slot at the start of ``src``.

        Args:
            src: Remaining pattern text of one syllable.
            inventory: Phoneme pool the slot draws from.

        Returns:
            The compiled slot and the unconsumed rest of ``src``.

        Raises:
            NoInputError: If ``src`` is empty.
            EmptySlotError: If the slot matches nothing in ``inventory``.
            UnsupportedSyntaxError: For ``[...]`` and ``(...)`` groups.
            UnknownCharacterError: For any other unrecognized character.
        """
        if not src:
            raise NoInputError()

        first, rest = src[0], src[1:]

        if first == CONSONANT_CLASS:
            return cls.from_character_class(first, inventory.consonants), rest
        if first == VOWEL_CLASS:
            return cls.from_character_class(first, inventory.vowels), rest
        if first in _RESERVED_GROUPS:
            raise UnsupportedSyntaxError(first, _RESERVED_GROUPS[first])

        try:
            place = Place.from_char(first)
        except UnknownCharacterError:
            pass
        else:
            return cls.from_character_class_filtered(
                first, inventory.consonants, lambda c: c.place is place
            ), rest

        try:
            manner = Manner.from_char(first)
        except UnknownCharacterError:
            pass
        else:
            return cls.from_character_class_filtered(
                first, inventory.consonants, lambda c: c.manner is manner
            ), rest

        raise UnknownCharacterError(first)

    @classmethod
    def from_character_class(
        cls, display: str, options: Iterable[Phoneme]
    ) -> PhonemeGenerator:
        """Slot choosing among every phoneme in ``options``."""
        slot = cls(display=display, choices=tuple(options))
        logger.debug("Slot %r resolved to %d candidates", display, len(slot.choices))
        return slot

    @classmethod
    def from_character_class_filtered(
        cls,
        display: str,
        options: Iterable[Consonant],
        keep: Callable[[Consonant], bool],
    ) -> PhonemeGenerator:
        """Slot choosing among the members of ``options`` that pass ``keep``."""
        return cls.from_character_class(display, (o for o in options if keep(o)))

    def with_weights(self, weights: Iterable[int]) -> PhonemeGenerator:
        """Copy of this slot carrying per-candidate weights."""
        return PhonemeGenerator(self.display, self.choices, tuple(weights))

    # --- Sampling ---

    def generate(self, rng: random.Random) -> Phoneme:
        """Draw one candidate uniformly at random."""
        return self.choices[rng.getrandbits(64) % len(self.choices)]

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhonemeGenerator):
            return NotImplemented
        return self.choices == other.choices and self.weights == other.weights

    def __hash__(self) -> int:
        return hash((self.choices, self.weights))

    def __str__(self) -> str:
        return self.display

    def __repr__(self) -> str:
        return f"Phoneme({self.display})"
