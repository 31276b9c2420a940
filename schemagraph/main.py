"""CLI entry point for schemagraph."""

from __future__ import annotations

import logging

import click
from dotenv import load_dotenv

from schemagraph.commands.graph.cmd import build, inspect

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="schemagraph")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Turn GraphQL introspection results into a browsable type graph."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


cli.add_command(build)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()
