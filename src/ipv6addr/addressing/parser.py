"""IPv6 address parsing.

This module implements classification and parsing for the textual
forms of RFC1884, plus RFC1924 when base-85 support is available:

    x:x:x:x:x:x:x:x         preferred
    x::x                    compressed
    0:0:0:0:0:ffff:d.d.d.d  IPv4-mapped (or IPv4-compatible)
    ::ffff:d.d.d.d          IPv4-mapped, compressed
    4)+k&C#VzJ4br>0wv%Yp    base-85

and for an optional trailing /prefix length.
"""

import re
from typing import Optional, Tuple, Union

from ..context import DEFAULT_CAPABILITIES, Capabilities
from ..errors import (
    InvalidAddressError,
    InvalidPrefixLengthError,
    PrefixOutOfRangeError,
)
from .grammars import GrammarRule, build_grammar_table
from .types import Address, PrefixedAddress

MAX_PREFIX_LENGTH = 64

PrefixInput = Union[str, Tuple[str, Union[str, int, None]]]

_DECIMAL = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s+")


def _table(capabilities: Optional[Capabilities]):
    capabilities = capabilities or DEFAULT_CAPABILITIES
    return build_grammar_table(base85=capabilities.base85)


def classify(
    text: str, capabilities: Optional[Capabilities] = None
) -> GrammarRule:
    """Find the grammar an address string is written in.

    Args:
        text: Candidate address string
        capabilities: Overrides the process-wide capabilities

    Returns:
        The first GrammarRule whose patterns match the whole string

    Raises:
        InvalidAddressError: If no grammar matches

    Examples:
        >>> classify("::1").name
        'compressed'

        >>> classify("::ffff:10.0.0.1").name
        'ipv4-compressed'
    """
    if not isinstance(text, str):
        raise InvalidAddressError(f"invalid IPv6 address {text!r}")

    text = text.strip()
    for rule in _table(capabilities):
        if rule.matches(text):
            return rule

    raise InvalidAddressError(f"invalid IPv6 address {text!r}")


def parse(text: str, capabilities: Optional[Capabilities] = None) -> Address:
    """Parse an IPv6 address string in any supported form.

    Examples:
        >>> parse("::1").hexadecets
        (0, 0, 0, 0, 0, 0, 0, 1)

        >>> parse("dead:beef:cafe:babe::f0ad").hexadecets
        (57005, 48879, 51966, 47806, 0, 0, 0, 61613)
    """
    rule = classify(text, capabilities)
    return Address(tuple(rule.decode(text.strip())), grammar=rule.grammar)


def is_valid(text: str, capabilities: Optional[Capabilities] = None) -> bool:
    """Check an address string without raising."""
    try:
        parse(text, capabilities)
    except InvalidAddressError:
        return False
    return True


def _split(text_or_pair: PrefixInput) -> Tuple[str, Optional[str]]:
    if isinstance(text_or_pair, tuple):
        if len(text_or_pair) != 2:
            raise InvalidAddressError(
                f"expected (address, prefix), got {text_or_pair!r}"
            )
        address, prefix = text_or_pair
        return address, None if prefix is None else str(prefix)

    if not isinstance(text_or_pair, str):
        raise InvalidAddressError(f"invalid IPv6 address {text_or_pair!r}")

    if "/" in text_or_pair:
        address, prefix = text_or_pair.split("/", 1)
        return address, prefix
    return text_or_pair, None


def split_prefix(
    text_or_pair: PrefixInput, capabilities: Optional[Capabilities] = None
) -> PrefixedAddress:
    """Validate an address with an optional prefix length.

    Args:
        text_or_pair: "address/prefix", "address", or (address, prefix)
        capabilities: Overrides the process-wide capabilities

    Returns:
        PrefixedAddress with the stripped address text and the prefix

    Raises:
        InvalidAddressError: If the address part is invalid
        InvalidPrefixLengthError: If the prefix is not a decimal number
        PrefixOutOfRangeError: If the prefix is outside 0-64
    """
    address, prefix = _split(text_or_pair)

    # Step 1: The address has to parse on its own
    parse(address, capabilities)
    address = address.strip()

    if prefix is None:
        return PrefixedAddress(address)

    # Step 2: Prefix is digits only once whitespace is gone
    prefix = _WHITESPACE.sub("", prefix)
    if not _DECIMAL.fullmatch(prefix):
        raise InvalidPrefixLengthError(
            f"non-numeric prefix length {prefix!r} for {address}"
        )

    # Step 3: Range check
    length = int(prefix)
    if not 0 <= length <= MAX_PREFIX_LENGTH:
        raise PrefixOutOfRangeError(
            f"invalid prefix length {length} for {address}, "
            f"must be 0-{MAX_PREFIX_LENGTH}"
        )

    return PrefixedAddress(address, length)


def parse_with_prefix(
    text_or_pair: PrefixInput,
    as_pair: bool = False,
    capabilities: Optional[Capabilities] = None,
) -> Union[str, Tuple[str, int]]:
    """Validate "address/prefix" and give it back, more or less.

    Examples:
        >>> parse_with_prefix("2001:db8::1/64")
        '2001:db8::1/64'

        >>> parse_with_prefix("2001:db8::1/64", as_pair=True)
        ('2001:db8::1', 64)

        >>> parse_with_prefix(("2001:db8::1", None), as_pair=True)
        '2001:db8::1'
    """
    prefixed = split_prefix(text_or_pair, capabilities)
    if prefixed.prefix is None:
        return prefixed.address
    if as_pair:
        return prefixed.as_tuple()
    return str(prefixed)
