"""conlang generate — sample random words from phonotactic patterns."""

from __future__ import annotations

import json
import random
import sys

import click

from conlang.cli.options import build_inventory, inventory_options
from conlang.gen.batch import (
    DEFAULT_WORD_COUNT,
    PatternError,
    compile_patterns,
    sample_words,
)


@click.command()
@click.option(
    "--pattern", "-p",
    "patterns",
    multiple=True,
    required=True,
    help="A phonotactic pattern like CVC or VV. Repeat for multiple patterns.",
)
@inventory_options
@click.option(
    "--count", "-n",
    type=click.IntRange(min=0),
    default=DEFAULT_WORD_COUNT,
    show_default=True,
    help="Number of words to generate.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducible output.",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def generate_cmd(
    patterns: tuple[str, ...],
    consonants: str | None,
    vowels: str | None,
    non_pulmonics: str | None,
    count: int,
    seed: int | None,
    output_format: str,
) -> None:
    """Generate random words, each from a randomly chosen pattern.

    \b
    Pattern letters:
        C any consonant          V any vowel
        B F D A S R J K Q H G    consonants by place (bilabial ... glottal)
        P N T W Z X Y L          consonants by manner (plosive ... lateral approximant)
    Whitespace separates syllables.

    \b
    Examples:
        conlang generate --pattern CV --pattern CVC
        conlang generate -p "CV CVN" --consonants ptkmnsl --vowels aiu -n 20
        conlang generate -p PVN --seed 7 --format json
    """
    inv = build_inventory(consonants, vowels, non_pulmonics)

    try:
        generators = compile_patterns(patterns, inv)
    except PatternError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    rng = random.Random(seed)
    words = list(sample_words(generators, count=count, rng=rng))

    if output_format == "json":
        data = {
            "patterns": [str(g) for g in generators],
            "inventory": str(inv),
            "seed": seed,
            "words": [
                {"text": str(w), "syllables": [str(s) for s in w]}
                for w in words
            ],
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        for word in words:
            click.echo(str(word))
