"""Pattern compilation and random word generation."""

from conlang.gen.batch import (
    DEFAULT_WORD_COUNT,
    PatternError,
    compile_patterns,
    sample_words,
)
from conlang.gen.exhaustive import count_syllables, enumerate_syllables
from conlang.gen.phoneme import PhonemeGenerator
from conlang.gen.syllable import SyllableGenerator
from conlang.gen.word import Word, WordGenerator

__all__ = [
    "DEFAULT_WORD_COUNT",
    "PatternError",
    "PhonemeGenerator",
    "SyllableGenerator",
    "Word",
    "WordGenerator",
    "compile_patterns",
    "count_syllables",
    "enumerate_syllables",
    "sample_words",
]
