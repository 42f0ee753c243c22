"""Format command - render an address in one of the textual forms."""

import sys

import click

from ...addressing import (
    format_base85,
    format_compressed,
    format_ip6_int,
    format_ipv4,
    format_ipv4_compressed,
    format_preferred,
    parse,
)
from ...context import pass_context
from ...errors import IPv6AddrError

FORMS = {
    "preferred": format_preferred,
    "compressed": format_compressed,
    "ipv4": format_ipv4,
    "ipv4-compressed": format_ipv4_compressed,
    "ip6-int": format_ip6_int,
}


@click.command("format")
@click.argument("address")
@click.option(
    "--form",
    "-f",
    type=click.Choice([*FORMS, "base85"]),
    default="compressed",
    show_default=True,
    help="Output form",
)
@pass_context
def format_address(ctx, address, form):
    """Render ADDRESS in another textual form.

    Examples:
        ipv6addr format 2001:0db8:0:0:0:0:0:1              # 2001:db8::1
        ipv6addr format -f preferred ::1                   # 0:0:0:0:0:0:0:1
        ipv6addr format -f ipv4 ::ffff:10.0.0.1            # 0:0:0:0:0:ffff:10.0.0.1
        ipv6addr format -f base85 1080::8:800:200c:417a    # 4)+k&C#VzJ4br>0wv%Yp
    """
    try:
        parsed = parse(address, ctx.capabilities)
        if form == "base85":
            output = format_base85(parsed, capabilities=ctx.capabilities)
        else:
            output = FORMS[form](parsed)
    except IPv6AddrError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(output)
