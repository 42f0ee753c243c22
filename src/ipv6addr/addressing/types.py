"""Address types for IPv6 parsing and formatting."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

HEXADECET_COUNT = 8
HEXADECET_MAX = 0xFFFF


class Grammar(Enum):
    """Textual grammars an IPv6 address can be written in."""

    PREFERRED = "preferred"  # x:x:x:x:x:x:x:x
    COMPRESSED = "compressed"  # x::x
    IPV4 = "ipv4"  # 0:0:0:0:0:ffff:d.d.d.d
    IPV4_COMPRESSED = "ipv4-compressed"  # ::ffff:d.d.d.d
    BASE85 = "base85"  # RFC1924


@dataclass(frozen=True)
class Address:
    """Canonical IPv6 address: eight 16-bit hexadecets, most significant first.

    Examples:
        Address.parse("::1") → Address(hexadecets=(0, 0, 0, 0, 0, 0, 0, 1))
        Address((0xdead, 0xbeef, 0xcafe, 0xbabe, 0, 0, 0, 0xf0ad))
    """

    hexadecets: Tuple[int, ...]
    """Exactly eight values in [0, 0xFFFF]."""

    grammar: Optional[Grammar] = field(default=None, compare=False)
    """Grammar the address was parsed from, None when built directly."""

    def __post_init__(self):
        hexadecets = tuple(self.hexadecets)
        if len(hexadecets) != HEXADECET_COUNT:
            raise ValueError(
                f"An IPv6 address has {HEXADECET_COUNT} hexadecets, "
                f"got {len(hexadecets)}"
            )
        for value in hexadecets:
            if not isinstance(value, int) or not 0 <= value <= HEXADECET_MAX:
                raise ValueError(f"Hexadecet out of range: {value!r}")
        object.__setattr__(self, "hexadecets", hexadecets)

    @classmethod
    def parse(cls, text: str) -> "Address":
        """Parse any supported textual form."""
        from .parser import parse

        return parse(text)

    def __int__(self) -> int:
        value = 0
        for hexadecet in self.hexadecets:
            value = (value << 16) | hexadecet
        return value

    def __str__(self) -> str:
        return self.to_preferred()

    def to_preferred(self) -> str:
        from .formatter import format_preferred

        return format_preferred(self)

    def to_compressed(self) -> str:
        from .formatter import format_compressed

        return format_compressed(self)

    def to_ipv4(self) -> str:
        from .formatter import format_ipv4

        return format_ipv4(self)

    def to_ipv4_compressed(self) -> str:
        from .formatter import format_ipv4_compressed

        return format_ipv4_compressed(self)

    def to_base85(self, capabilities=None) -> str:
        from .formatter import format_base85

        return format_base85(self, capabilities=capabilities)

    def to_ip6_int(self) -> str:
        from .formatter import format_reverse_pointer

        return format_reverse_pointer(self)


@dataclass(frozen=True)
class PrefixedAddress:
    """Validated address text with an advisory prefix length.

    The prefix is metadata only; it is never encoded into an Address.
    """

    address: str
    """Address text as supplied (surrounding whitespace removed)."""

    prefix: Optional[int] = None
    """Prefix length in [0, 64], or None when absent."""

    def __str__(self) -> str:
        if self.prefix is None:
            return self.address
        return f"{self.address}/{self.prefix}"

    def as_tuple(self) -> Tuple[str, Optional[int]]:
        return self.address, self.prefix
