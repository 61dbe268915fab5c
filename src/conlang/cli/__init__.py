"""Command-line interface for conlang."""

import logging

import click

from conlang.cli.generate import generate_cmd
from conlang.cli.inventory import inventory
from conlang.cli.syllables import syllables_cmd


@click.group()
@click.version_option()
@click.option(
    "--verbose", "-v",
    count=True,
    help="Log progress to stderr. Repeat for debug output.",
)
def main(verbose: int) -> None:
    """conlang: Generate words for constructed languages from phonotactic patterns."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


main.add_command(inventory)
main.add_command(generate_cmd, name="generate")
main.add_command(syllables_cmd, name="syllables")
