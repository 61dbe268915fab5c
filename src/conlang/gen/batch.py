"""Batch helpers: compile many patterns and sample words across them."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Iterator

from conlang.gen.word import Word, WordGenerator
from conlang.inventory.models import Inventory
from conlang.phone.errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_WORD_COUNT = 100
"""Number of words sampled when the caller does not say."""


class PatternError(ParseError):
    """A pattern in a batch failed to compile.

    Attributes:
        pattern: The offending pattern text.
        cause: The underlying parse failure.
    """

    def __init__(self, pattern: str, cause: Exception) -> None:
        super().__init__(f'could not parse pattern "{pattern}": {cause}')
        self.pattern = pattern
        self.cause = cause


def compile_patterns(
    patterns: Iterable[str],
    inventory: Inventory,
) -> list[WordGenerator]:
    """Compile every pattern against one inventory.

    Args:
        patterns: Pattern strings, e.g. ``["CV", "CVC"]``.
        inventory: Phoneme pool shared by all patterns.

    Returns:
        One WordGenerator per pattern, in input order.

    Raises:
        PatternError: For the first pattern that fails, naming it. Reserved
            group syntax is wrapped as well so callers see which pattern
            used it.
    """
    generators: list[WordGenerator] = []
    for pattern in patterns:
        try:
            generators.append(WordGenerator.parse(pattern, inventory))
        except (ParseError, NotImplementedError) as exc:
            raise PatternError(pattern, exc) from exc

    logger.info(
        "Compiled %d pattern(s) against %r", len(generators), inventory
    )
    return generators


def sample_words(
    generators: list[WordGenerator],
    count: int = DEFAULT_WORD_COUNT,
    rng: random.Random | None = None,
) -> Iterator[Word]:
    """Draw ``count`` words, each from a uniformly chosen generator.

    Args:
        generators: Compiled patterns to draw from.
        count: Number of words to produce.
        rng: Random source. A fresh unseeded ``random.Random`` if None.

    Returns:
        A lazy iterator of generated words. Arguments are checked
        before the first word is drawn.

    Raises:
        ValueError: If ``generators`` is empty or ``count`` is negative.
    """
    if not generators:
        raise ValueError("At least one compiled pattern is required")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    if rng is None:
        rng = random.Random()

    logger.info("Sampling %d word(s) from %d pattern(s)", count, len(generators))
    return _sample(generators, count, rng)


def _sample(
    generators: list[WordGenerator],
    count: int,
    rng: random.Random,
) -> Iterator[Word]:
    for _ in range(count):
        generator = generators[rng.randrange(len(generators))]
        yield generator.generate(rng)
