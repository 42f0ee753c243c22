"""Exceptions raised by address parsing and formatting."""


class IPv6AddrError(ValueError):
    """Base class for every ipv6addr failure."""

    pass


class InvalidAddressError(IPv6AddrError):
    """No grammar matches the address text."""

    pass


class InvalidPrefixLengthError(IPv6AddrError):
    """Prefix length is not a decimal number."""

    pass


class PrefixOutOfRangeError(IPv6AddrError):
    """Prefix length is numeric but outside 0-64."""

    pass


class NotIPv4AddressError(IPv6AddrError):
    """Address was not originally IPv4-mapped or IPv4-compatible."""

    pass


class UnsupportedFormatError(IPv6AddrError):
    """Requested form needs an optional capability that is disabled."""

    pass


__all__ = [
    "IPv6AddrError",
    "InvalidAddressError",
    "InvalidPrefixLengthError",
    "NotIPv4AddressError",
    "PrefixOutOfRangeError",
    "UnsupportedFormatError",
]
