"""Phoneme catalog: IPA consonants, vowels, non-pulmonics and their attributes."""

from conlang.phone.articulation import Manner, Place
from conlang.phone.consonants import Consonant
from conlang.phone.errors import (
    EmptySlotError,
    NoInputError,
    ParseError,
    TooManyCharactersError,
    UnknownCharacterError,
    UnknownCharactersError,
    UnsupportedSyntaxError,
)
from conlang.phone.non_pulmonic import NonPulmonicConsonant
from conlang.phone.phoneme import (
    Phoneme,
    Syllable,
    all_phonemes,
    parse_phoneme,
    phoneme_from_char,
)
from conlang.phone.symbols import SymbolEnum, parse_all
from conlang.phone.vowels import Vowel

__all__ = [
    "Consonant",
    "EmptySlotError",
    "Manner",
    "NoInputError",
    "NonPulmonicConsonant",
    "ParseError",
    "Phoneme",
    "Place",
    "Syllable",
    "SymbolEnum",
    "TooManyCharactersError",
    "UnknownCharacterError",
    "UnknownCharactersError",
    "UnsupportedSyntaxError",
    "Vowel",
    "all_phonemes",
    "parse_all",
    "parse_phoneme",
    "phoneme_from_char",
]
