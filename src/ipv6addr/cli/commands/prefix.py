"""Prefix command - validate address[/prefix]."""

import sys

import click

from ...addressing import split_prefix
from ...context import pass_context
from ...errors import IPv6AddrError
from ...models import PrefixReport


@click.command()
@click.argument("address")
@click.option("--length", "-l", help="Prefix length, instead of ADDRESS/LEN")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@pass_context
def prefix(ctx, address, length, as_json):
    """Validate ADDRESS with an optional prefix length (0-64).

    Examples:
        ipv6addr prefix 2001:db8::/32           # 2001:db8::/32
        ipv6addr prefix 2001:db8:: -l 48        # 2001:db8::/48
        ipv6addr prefix 2001:db8::/32 --json
    """
    target = (address, length) if length is not None else address
    try:
        prefixed = split_prefix(target, ctx.capabilities)
    except IPv6AddrError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(PrefixReport.from_prefixed(prefixed).model_dump_json(indent=2))
    else:
        click.echo(str(prefixed))
