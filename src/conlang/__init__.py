"""conlang: phonotactic word generation for constructed languages."""

__version__ = "0.1.0"

from conlang.gen import WordGenerator, compile_patterns, sample_words
from conlang.inventory.models import Inventory
from conlang.phone import Consonant, NonPulmonicConsonant, Phoneme, Syllable, Vowel


def compile_pattern(pattern: str, inventory: Inventory | None = None) -> WordGenerator:
    """Compile a single pattern such as ``"CVC"``.

    Args:
        pattern: Pattern text. Whitespace separates syllables.
        inventory: Phoneme pool. Defaults to the full catalog.

    Returns:
        A reusable WordGenerator.

    Raises:
        ParseError: If the pattern is empty, contains an unknown character,
            or has a slot that matches nothing in the inventory.
    """
    if inventory is None:
        inventory = Inventory.full()
    return WordGenerator.parse(pattern, inventory)


__all__ = [
    "Consonant",
    "Inventory",
    "NonPulmonicConsonant",
    "Phoneme",
    "Syllable",
    "Vowel",
    "WordGenerator",
    "__version__",
    "compile_pattern",
    "compile_patterns",
    "sample_words",
]
