"""Capability resolution and CLI context."""

import os
from dataclasses import dataclass
from importlib import util
from typing import Optional

import click

BASE85_ENV_VAR = "IPV6ADDR_BASE85"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Capabilities:
    """Optional features available to the parser and formatter."""

    base85: bool = False


def netaddr_available() -> bool:
    """Return True when the netaddr distribution can be imported."""
    return util.find_spec("netaddr") is not None


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def resolve_capabilities(base85_option: Optional[bool] = None) -> Capabilities:
    """Resolve which optional capabilities are enabled.

    Resolution order:
    1. base85_option (explicit override, e.g. --base85/--no-base85)
    2. $IPV6ADDR_BASE85 environment variable
    3. netaddr detection

    Base-85 support can be switched off in every case, but switching it
    on has no effect when netaddr is not installed.

    Args:
        base85_option: Value of the --base85/--no-base85 CLI option, if given

    Returns:
        Frozen Capabilities instance
    """
    available = netaddr_available()

    # 1. Explicit option overrides all
    if base85_option is not None:
        return Capabilities(base85=base85_option and available)

    # 2. Environment variable
    env_value = _env_flag(BASE85_ENV_VAR)
    if env_value is not None:
        return Capabilities(base85=env_value and available)

    # 3. Whatever is installed
    return Capabilities(base85=available)


DEFAULT_CAPABILITIES = resolve_capabilities()


class IPv6AddrContext:
    def __init__(self):
        self.capabilities = DEFAULT_CAPABILITIES


pass_context = click.make_pass_decorator(IPv6AddrContext, ensure=True)
