"""ipv6addr CLI main entry point with global options."""

import click

from .. import __version__
from ..context import IPv6AddrContext, resolve_capabilities


@click.group()
@click.version_option(__version__, prog_name="ipv6addr")
@click.option(
    "--base85/--no-base85",
    default=None,
    help="Enable or disable RFC1924 support (overrides $IPV6ADDR_BASE85)",
)
@click.pass_context
def cli(ctx, base85):
    """ipv6addr - validate, parse and format IPv6 addresses."""
    ctx.ensure_object(IPv6AddrContext)
    ctx.obj.capabilities = resolve_capabilities(base85)


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check
from .commands.format import format_address
from .commands.inspect import inspect
from .commands.prefix import prefix
from .commands.ptr import ptr

cli.add_command(check)
cli.add_command(format_address)
cli.add_command(ptr)
cli.add_command(prefix)
cli.add_command(inspect)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
