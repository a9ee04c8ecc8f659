"""
lifochain.cli — CLI entry point.

Commands:
  lifochain run -f script.yaml   — Replay a chain script
  lifochain drain -n 100000      — Build and tear down a long chain
"""

import logging

import click

from lifochain.cli.run_cmd import run_cmd
from lifochain.cli.drain_cmd import drain_cmd


@click.group()
@click.version_option(package_name="lifochain")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose):
    """lifochain — stack-ordered singly-linked chain."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(run_cmd, "run")
main.add_command(drain_cmd, "drain")
