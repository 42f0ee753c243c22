"""ipv6addr: RFC1884 / RFC1924 / RFC1886 IPv6 address parsing and formatting."""

from .addressing import (
    Address,
    Grammar,
    GrammarRule,
    PrefixedAddress,
    classify,
    format_base85,
    format_compressed,
    format_ip6_int,
    format_ipv4,
    format_ipv4_compressed,
    format_preferred,
    format_reverse_pointer,
    is_valid,
    parse,
    parse_with_prefix,
    split_prefix,
)
from .context import DEFAULT_CAPABILITIES, Capabilities, resolve_capabilities
from .errors import (
    InvalidAddressError,
    InvalidPrefixLengthError,
    IPv6AddrError,
    NotIPv4AddressError,
    PrefixOutOfRangeError,
    UnsupportedFormatError,
)

__all__ = [
    "__version__",
    "Address",
    "Capabilities",
    "DEFAULT_CAPABILITIES",
    "Grammar",
    "GrammarRule",
    "IPv6AddrError",
    "InvalidAddressError",
    "InvalidPrefixLengthError",
    "NotIPv4AddressError",
    "PrefixOutOfRangeError",
    "PrefixedAddress",
    "UnsupportedFormatError",
    "classify",
    "format_base85",
    "format_compressed",
    "format_ip6_int",
    "format_ipv4",
    "format_ipv4_compressed",
    "format_preferred",
    "format_reverse_pointer",
    "is_valid",
    "parse",
    "parse_with_prefix",
    "resolve_capabilities",
    "split_prefix",
]

__version__ = "0.1.0"
