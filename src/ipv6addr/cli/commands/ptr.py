"""Ptr command - print the RFC1886 reverse lookup name."""

import sys

import click

from ...addressing import format_reverse_pointer, parse
from ...context import pass_context
from ...errors import IPv6AddrError


@click.command()
@click.argument("address")
@pass_context
def ptr(ctx, address):
    """Print the ip6.int. reverse pointer for ADDRESS.

    Example:
        ipv6addr ptr 2001:db8::1
    """
    try:
        output = format_reverse_pointer(parse(address, ctx.capabilities))
    except IPv6AddrError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(output)
