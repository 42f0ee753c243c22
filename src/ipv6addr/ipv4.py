"""Dotted-quad IPv4 validation for the IPv4-embedded grammars."""

import ipaddress
from typing import Tuple

from .errors import InvalidAddressError


def parse_ipv4(text: str) -> Tuple[int, int, int, int]:
    """Validate a dotted-quad IPv4 address and return its four octets.

    Raises:
        InvalidAddressError: If text is not four decimal octets in 0-255
    """
    try:
        packed = ipaddress.IPv4Address(text).packed
    except ipaddress.AddressValueError as e:
        raise InvalidAddressError(f"invalid IPv4 address {text!r}: {e}") from e
    return packed[0], packed[1], packed[2], packed[3]


def octets_to_hexadecets(octets: Tuple[int, int, int, int]) -> Tuple[int, int]:
    """Pack four IPv4 octets big-endian into two hexadecets."""
    return (octets[0] << 8) | octets[1], (octets[2] << 8) | octets[3]


def hexadecets_to_dotted_quad(high: int, low: int) -> str:
    """Render two hexadecets as a dotted-quad IPv4 address."""
    return ".".join(str(o) for o in (high >> 8, high & 0xFF, low >> 8, low & 0xFF))
