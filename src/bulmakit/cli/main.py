"""bulmakit CLI entry point: Click group with subcommands."""

import logging

import click

from bulmakit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="bulmakit")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """bulmakit - compose Bulma CSS class strings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from bulmakit.cli.compose import compose  # noqa: E402
from bulmakit.cli.vocab import vocab  # noqa: E402

cli.add_command(compose)
cli.add_command(vocab)
