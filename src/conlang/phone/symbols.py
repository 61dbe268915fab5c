"""SymbolEnum: closed enumerations keyed by a single character."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from conlang.phone.errors import (
    NoInputError,
    TooManyCharactersError,
    UnknownCharacterError,
    UnknownCharactersError,
)

S = TypeVar("S", bound="SymbolEnum")


class SymbolEnum(Enum):
    """Enum whose member values are single characters.

    The character doubles as the wire format: it is what patterns and
    inventory strings contain, and what ``str()`` renders.
    """

    @property
    def code(self) -> str:
        """Canonical single-character code."""
        return self.value

    @classmethod
    def all(cls: type[S]) -> tuple[S, ...]:
        """Every member, in definition order."""
        return tuple(cls)

    @classmethod
    def from_char(cls: type[S], char: str) -> S:
        """Look up the member for one character.

        Raises:
            UnknownCharacterError: If no member uses ``char``.
        """
        try:
            return cls(char)
        except ValueError:
            raise UnknownCharacterError(char) from None

    @classmethod
    def parse(cls: type[S], text: str) -> S:
        """Parse a string holding exactly one symbol.

        Raises:
            NoInputError: If ``text`` is empty.
            TooManyCharactersError: If ``text`` has more than one character.
            UnknownCharacterError: If the character names no member.
        """
        if not text:
            raise NoInputError()
        if len(text) > 1:
            raise TooManyCharactersError(text)
        return cls.from_char(text)

    def __str__(self) -> str:
        return self.value


def parse_all(family: type[S], text: str) -> list[S]:
    """Parse every character of ``text`` as a member of ``family``.

    Unlike ``family.parse``, this reads a run of symbols and reports every
    unknown character at once.

    Args:
        family: A SymbolEnum subclass (e.g. ``Consonant``).
        text: Concatenated codes, e.g. ``"ptk"``.

    Returns:
        Parsed members in input order.

    Raises:
        UnknownCharactersError: If any character fails to parse.
    """
    parsed: list[S] = []
    unknown: list[str] = []
    for char in text:
        try:
            parsed.append(family.from_char(char))
        except UnknownCharacterError:
            unknown.append(char)

    if unknown:
        raise UnknownCharactersError(unknown, parsed)
    return parsed
