"""
lifochain.cli.drain_cmd — lifochain drain command.

Builds a chain of N nodes and tears it down, reporting how many
nodes were released. Long chains exercise the iterative teardown.
"""

import click

from lifochain.core.chain import Chain


@click.command("drain")
@click.option("-n", "--count", type=click.IntRange(min=0), default=100_000,
              show_default=True, help="Number of nodes to push")
def drain_cmd(count):
    """Push COUNT integers, then tear the chain down."""
    chain: Chain[int] = Chain()
    for i in range(count):
        chain.push(i)

    released = chain.close()
    click.echo(f"Released {released} node(s)")
