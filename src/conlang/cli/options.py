"""Options shared by the subcommands that build an inventory."""

from __future__ import annotations

import sys
from typing import Callable

import click

from conlang.inventory.models import Inventory, InventoryParseError


def inventory_options(func: Callable) -> Callable:
    """Attach --consonants, --vowels and --non-pulmonic to a command."""
    func = click.option(
        "--non-pulmonic",
        "non_pulmonics",
        default=None,
        help="Clicks and implosives to use, as concatenated IPA codes (e.g. ʘɓ). Default: all.",
    )(func)
    func = click.option(
        "--vowels",
        default=None,
        help="Vowels to use, as concatenated IPA codes (e.g. aiu). Default: all.",
    )(func)
    func = click.option(
        "--consonants",
        default=None,
        help="Consonants to use, as concatenated IPA codes (e.g. ptkmns). Default: all.",
    )(func)
    return func


def build_inventory(
    consonants: str | None,
    vowels: str | None,
    non_pulmonics: str | None,
) -> Inventory:
    """Build the inventory from option values, exiting with status 1 on bad codes."""
    try:
        return Inventory.from_codes(consonants, vowels, non_pulmonics)
    except InventoryParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
