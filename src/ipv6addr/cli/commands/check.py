"""Check command - validate an address and name its grammar."""

import sys

import click

from ...addressing import classify, parse
from ...context import pass_context
from ...errors import IPv6AddrError


@click.command()
@click.argument("address")
@click.option("--quiet", "-q", is_flag=True, help="Only set the exit status")
@pass_context
def check(ctx, address, quiet):
    """Check that ADDRESS is a valid IPv6 address.

    Prints the grammar the address is written in and exits 0, or
    reports the problem on stderr and exits 1.

    Examples:
        ipv6addr check 2001:db8::1          # compressed
        ipv6addr check ::ffff:10.0.0.1      # ipv4-compressed
        ipv6addr check -q not:an:address    # exit status 1
    """
    try:
        rule = classify(address, ctx.capabilities)
        parse(address, ctx.capabilities)
    except IPv6AddrError as e:
        if not quiet:
            click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not quiet:
        click.echo(rule.name)
