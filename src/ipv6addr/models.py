"""Pydantic models for machine-readable CLI output."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .addressing import (
    Address,
    PrefixedAddress,
    format_base85,
    format_compressed,
    format_ipv4,
    format_ipv4_compressed,
    format_preferred,
    format_reverse_pointer,
)
from .context import Capabilities
from .errors import NotIPv4AddressError


class AddressReport(BaseModel):
    """Every rendering of one parsed address.

    Forms that do not apply (IPv4 forms of a native IPv6 address,
    base-85 without netaddr) are None.
    """

    input: str
    grammar: Optional[str] = None
    hexadecets: List[int]
    preferred: str
    compressed: str
    ipv4: Optional[str] = None
    ipv4_compressed: Optional[str] = None
    base85: Optional[str] = None
    ip6_int: str

    @classmethod
    def from_address(
        cls, text: str, address: Address, capabilities: Capabilities
    ) -> AddressReport:
        try:
            ipv4 = format_ipv4(address)
            ipv4_compressed = format_ipv4_compressed(address)
        except NotIPv4AddressError:
            ipv4 = ipv4_compressed = None

        return cls(
            input=text,
            grammar=address.grammar.value if address.grammar else None,
            hexadecets=list(address.hexadecets),
            preferred=format_preferred(address),
            compressed=format_compressed(address),
            ipv4=ipv4,
            ipv4_compressed=ipv4_compressed,
            base85=(
                format_base85(address, capabilities=capabilities)
                if capabilities.base85
                else None
            ),
            ip6_int=format_reverse_pointer(address),
        )


class PrefixReport(BaseModel):
    """Validated address text and its optional prefix length."""

    address: str
    prefix: Optional[int] = None

    @classmethod
    def from_prefixed(cls, prefixed: PrefixedAddress) -> PrefixReport:
        return cls(address=prefixed.address, prefix=prefixed.prefix)


__all__ = ["AddressReport", "PrefixReport"]
