"""conlang inventory — show the phoneme inventory and its attributes."""

from __future__ import annotations

import json

import click

from conlang.cli.options import build_inventory, inventory_options


@click.command()
@inventory_options
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def inventory(
    consonants: str | None,
    vowels: str | None,
    non_pulmonics: str | None,
    output_format: str,
) -> None:
    """Show the selected phoneme inventory (the whole catalog by default)."""
    inv = build_inventory(consonants, vowels, non_pulmonics)

    if output_format == "json":
        click.echo(json.dumps(inv.to_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(f"Consonants ({len(inv.consonants)}):")
    for c in inv.consonants:
        click.echo(f"  {c.code}  {c.place.label} {c.manner.label}")
    click.echo(f"Vowels ({len(inv.vowels)}):")
    for v in inv.vowels:
        rounding = "rounded" if v.rounded else "unrounded"
        click.echo(
            f"  {v.code}  height={v.height} frontness={v.frontness} {rounding}"
        )
    if inv.non_pulmonics:
        click.echo(f"Non-pulmonic ({len(inv.non_pulmonics)}):")
        for n in inv.non_pulmonics:
            kind = "click" if n.is_click else "implosive"
            click.echo(f"  {n.code}  {kind}")
    click.echo(f"Total: {inv.size} phonemes")
