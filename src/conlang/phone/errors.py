"""Error types shared by every single-symbol and pattern parse."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for input-validation failures.

    Parse errors are a deterministic function of the input text: re-parsing
    the same text always raises the same error.
    """


class NoInputError(ParseError):
    """An expected symbol or segment was empty."""

    def __init__(self) -> None:
        super().__init__("no input")


class TooManyCharactersError(ParseError):
    """More than one character was supplied where one symbol was expected."""

    def __init__(self, text: str) -> None:
        super().__init__("too many characters in input")
        self.text = text


class UnknownCharacterError(ParseError):
    """A character matched no phoneme code or pattern trigger.

    Attributes:
        char: The offending character.
    """

    def __init__(self, char: str) -> None:
        super().__init__(f"unrecognized character '{char}'")
        self.char = char


class UnknownCharactersError(ParseError):
    """Several characters failed to parse while reading a symbol list.

    All offending characters are collected rather than stopping at the
    first one.

    Attributes:
        chars: Unknown characters in input order.
        parsed: Symbols that did parse, in input order.
    """

    def __init__(self, chars: list[str], parsed: list | None = None) -> None:
        if len(chars) == 1:
            message = f"unknown character: {chars[0]}"
        else:
            message = f"unknown characters: {', '.join(chars)}"
        super().__init__(message)
        self.chars = list(chars)
        self.parsed = list(parsed) if parsed is not None else []


class EmptySlotError(ParseError):
    """A pattern slot resolved to no candidates in the current inventory."""

    def __init__(self, glyph: str) -> None:
        super().__init__(f"no phonemes in inventory match '{glyph}'")
        self.glyph = glyph


class UnsupportedSyntaxError(NotImplementedError):
    """A reserved pattern construct that is not implemented yet."""

    def __init__(self, glyph: str, construct: str) -> None:
        super().__init__(f"{construct} '{glyph}' is not supported yet")
        self.glyph = glyph
        self.construct = construct
