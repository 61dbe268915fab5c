"""Phoneme: the union of the three phoneme families, and Syllable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from conlang.phone.consonants import Consonant
from conlang.phone.errors import (
    NoInputError,
    TooManyCharactersError,
    UnknownCharacterError,
    UnknownCharactersError,
)
from conlang.phone.non_pulmonic import NonPulmonicConsonant
from conlang.phone.vowels import Vowel

Phoneme = Union[Consonant, Vowel, NonPulmonicConsonant]

FAMILIES: tuple[type, ...] = (Consonant, Vowel, NonPulmonicConsonant)
"""Phoneme families, in lookup order."""


def all_phonemes() -> tuple[Phoneme, ...]:
    """Every catalog constant: consonants, then vowels, then non-pulmonics."""
    return Consonant.all() + Vowel.all() + NonPulmonicConsonant.all()


def phoneme_from_char(char: str) -> Phoneme:
    """Resolve one character against every phoneme family.

    Raises:
        UnknownCharacterError: If no family defines ``char``.
    """
    for family in FAMILIES:
        try:
            return family.from_char(char)
        except UnknownCharacterError:
            continue
    raise UnknownCharacterError(char)


def parse_phoneme(text: str) -> Phoneme:
    """Parse a string holding exactly one phoneme code of any family.

    Raises:
        NoInputError: If ``text`` is empty.
        TooManyCharactersError: If ``text`` has more than one character.
        UnknownCharacterError: If the character is not a phoneme code.
    """
    if not text:
        raise NoInputError()
    if len(text) > 1:
        raise TooManyCharactersError(text)
    return phoneme_from_char(text)


@dataclass(frozen=True)
class Syllable:
    """An ordered run of phonemes.

    Equality is element-wise. Renders as the concatenated phoneme codes.

    Attributes:
        phonemes: The phonemes in order.
    """

    phonemes: tuple[Phoneme, ...]

    def __init__(self, phonemes: Iterable[Phoneme]) -> None:
        object.__setattr__(self, "phonemes", tuple(phonemes))

    @classmethod
    def parse(cls, text: str) -> Syllable:
        """Read a syllable from concatenated phoneme codes.

        Raises:
            NoInputError: If ``text`` is empty.
            UnknownCharactersError: Listing every unrecognized character.
        """
        if not text:
            raise NoInputError()

        parsed: list[Phoneme] = []
        unknown: list[str] = []
        for char in text:
            try:
                parsed.append(phoneme_from_char(char))
            except UnknownCharacterError:
                unknown.append(char)

        if unknown:
            raise UnknownCharactersError(unknown, parsed)
        return cls(parsed)

    def __len__(self) -> int:
        return len(self.phonemes)

    def __iter__(self):
        return iter(self.phonemes)

    def __getitem__(self, index: int) -> Phoneme:
        return self.phonemes[index]

    def __str__(self) -> str:
        return "".join(p.code for p in self.phonemes)

    def __repr__(self) -> str:
        return f"Syllable({str(self)!r})"
