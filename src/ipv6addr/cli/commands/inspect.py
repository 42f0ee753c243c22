"""Inspect command - show every rendering of an address."""

import sys

import click

from ...addressing import parse
from ...context import pass_context
from ...errors import IPv6AddrError
from ...models import AddressReport


@click.command()
@click.argument("address")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@pass_context
def inspect(ctx, address, as_json):
    """Show the grammar, hexadecets and every form of ADDRESS.

    Forms that do not apply are left out of the text output and are
    null in the JSON output.

    Examples:
        ipv6addr inspect ::ffff:192.168.1.1
        ipv6addr inspect dead:beef:cafe:babe::f0ad --json
    """
    try:
        report = AddressReport.from_address(
            address, parse(address, ctx.capabilities), ctx.capabilities
        )
    except IPv6AddrError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    hexadecets = " ".join(f"{h:04x}" for h in report.hexadecets)
    rows = [
        ("grammar", report.grammar),
        ("hexadecets", hexadecets),
        ("preferred", report.preferred),
        ("compressed", report.compressed),
        ("ipv4", report.ipv4),
        ("ipv4-compressed", report.ipv4_compressed),
        ("base85", report.base85),
        ("ip6.int", report.ip6_int),
    ]
    for label, value in rows:
        if value is not None:
            click.echo(f"{label + ':':<17}{value}")
