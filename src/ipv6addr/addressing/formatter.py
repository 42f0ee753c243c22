"""Rendering of Address values into the RFC1884, RFC1924 and RFC1886 forms.

Every formatter takes an Address or any address string; strings are
parsed first and fail exactly as parse() does.
"""

import re
from typing import Optional, Union

from ..context import DEFAULT_CAPABILITIES, Capabilities
from ..errors import NotIPv4AddressError, UnsupportedFormatError
from ..ipv4 import hexadecets_to_dotted_quad
from .parser import parse
from .types import Address

AddressLike = Union[Address, str]

_COLON_RUN = re.compile(r":{3,7}")


def _coerce(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> Address:
    if isinstance(value, Address):
        return value
    return parse(value, capabilities)


def _hex_join(hexadecets) -> str:
    return ":".join(f"{h:x}" for h in hexadecets)


def format_preferred(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> str:
    """Render x:x:x:x:x:x:x:x, lowercase, without leading zeros."""
    return _hex_join(_coerce(value, capabilities).hexadecets)


def format_compressed(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> str:
    """Render the zero-compressed form.

    This is a plain textual collapse of the preferred form, not RFC5952:
    every ':0' loses its zero and the first run of 3-7 colons becomes
    '::'. Scattered zero groups can therefore yield more than one '::'
    or a dangling trailing colon.

    Examples:
        >>> format_compressed("dead:beef:cafe:babe:0:0:0:f0ad")
        'dead:beef:cafe:babe::f0ad'

        >>> format_compressed("1:0:2:0:0:3:4:5")
        '1::2::3:4:5'
    """
    expanded = format_preferred(value, capabilities)
    if expanded.startswith("0:"):
        expanded = ":" + expanded[2:]
    expanded = expanded.replace(":0", ":")
    return _COLON_RUN.sub("::", expanded, count=1)


def _require_ipv4(address: Address, operation: str) -> None:
    h = address.hexadecets
    if h[0] | h[1] | h[2] | h[3] | h[4] or h[5] not in (0, 0xFFFF):
        raise NotIPv4AddressError(
            f"{operation} -- {format_preferred(address)} "
            f"was not originally an IPv4 address"
        )


def format_ipv4(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> str:
    """Render 0:0:0:0:0:ffff:d.d.d.d (or 0:0:0:0:0:0:d.d.d.d).

    Raises:
        NotIPv4AddressError: Unless the address is IPv4-mapped or
            IPv4-compatible
    """
    address = _coerce(value, capabilities)
    _require_ipv4(address, "format_ipv4")
    h = address.hexadecets
    return f"{_hex_join(h[:6])}:{hexadecets_to_dotted_quad(h[6], h[7])}"


def format_ipv4_compressed(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> str:
    """Render ::ffff:d.d.d.d (or ::d.d.d.d).

    Raises:
        NotIPv4AddressError: Unless the address is IPv4-mapped or
            IPv4-compatible
    """
    address = _coerce(value, capabilities)
    _require_ipv4(address, "format_ipv4_compressed")
    h = address.hexadecets
    v6part = f"::{h[5]:x}" if h[5] else ":"
    return f"{v6part}:{hexadecets_to_dotted_quad(h[6], h[7])}"


def format_base85(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> str:
    """Render the 20-character RFC1924 form.

    Raises:
        UnsupportedFormatError: If base-85 support is disabled
    """
    capabilities = capabilities or DEFAULT_CAPABILITIES
    if not capabilities.base85:
        raise UnsupportedFormatError(
            "format_base85 -- base-85 support is not available "
            "(install netaddr)"
        )

    from .. import base85

    address = _coerce(value, capabilities)
    number = 0
    for hexadecet in address.hexadecets:
        number = number * 65536 + hexadecet
    return base85.encode(number)


def format_reverse_pointer(
    value: AddressLike, capabilities: Optional[Capabilities] = None
) -> str:
    """Render the RFC1886 reverse lookup name under ip6.int.

    Examples:
        >>> format_reverse_pointer("::1")[:8]
        '1.0.0.0.'
    """
    address = _coerce(value, capabilities)
    nibbles = "".join(f"{h:04x}" for h in address.hexadecets)
    labels = ["int", "ip6", *nibbles]
    return ".".join(reversed(labels)) + "."


format_ip6_int = format_reverse_pointer
