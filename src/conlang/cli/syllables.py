"""conlang syllables — list every V, VV and CV syllable of an inventory."""

from __future__ import annotations

import json
from itertools import islice

import click

from conlang.cli.options import build_inventory, inventory_options
from conlang.gen.exhaustive import count_syllables, enumerate_syllables


@click.command()
@inventory_options
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Stop after this many syllables.",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def syllables_cmd(
    consonants: str | None,
    vowels: str | None,
    non_pulmonics: str | None,
    limit: int | None,
    output_format: str,
) -> None:
    """List every V, VV (distinct vowels) and CV syllable of the inventory."""
    inv = build_inventory(consonants, vowels, non_pulmonics)
    found = [str(s) for s in islice(enumerate_syllables(inv), limit)]

    if output_format == "json":
        data = {
            "inventory": str(inv),
            "total": count_syllables(inv),
            "syllables": found,
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        for syllable in found:
            click.echo(syllable)
