"""Grammar table for the RFC1884 and RFC1924 textual forms.

Each GrammarRule pairs one Grammar with the patterns that recognize it
and the decoder that turns matching text into eight hexadecets:

    preferred:        x:x:x:x:x:x:x:x
    compressed:       the double colon, in every legal position
    ipv4:             0:0:0:0:0:ffff:d.d.d.d or 0:0:0:0:0:0:d.d.d.d
    ipv4-compressed:  ::d.d.d.d or ::ffff:d.d.d.d
    base85:           twenty RFC1924 digits (only with netaddr)
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Tuple

from ..errors import InvalidAddressError
from ..ipv4 import octets_to_hexadecets, parse_ipv4
from .types import HEXADECET_COUNT, Grammar

Decoder = Callable[[str], List[int]]

_HEX = "[0-9a-f]"
_GROUP = f"{_HEX}{{1,4}}"
_DOTTED_QUAD = r"(?:[0-9]{1,3}\.){3}[0-9]{1,3}"


def _compile(pattern: str, flags: int = re.IGNORECASE) -> re.Pattern:
    return re.compile(pattern, flags)


PREFERRED_PATTERNS = (_compile(f"(?:{_GROUP}:){{7}}{_GROUP}"),)

COMPRESSED_PATTERNS = (
    _compile(f"{_HEX}{{0,4}}::"),
    _compile(f":(?::{_GROUP}){{1,6}}"),
    _compile(f"(?:{_GROUP}:){{1,6}}:"),
    # N leading groups, the double colon, then at most 7 - N trailing groups
    *(
        _compile(f"(?:{_GROUP}:){{{n}}}(?::{_GROUP}){{1,{7 - n}}}")
        for n in range(1, 7)
    ),
)

IPV4_PATTERNS = (
    _compile(f"(?:0:){{5}}ffff:{_DOTTED_QUAD}"),
    _compile(f"(?:0:){{6}}{_DOTTED_QUAD}", 0),
)

IPV4_COMPRESSED_PATTERNS = (_compile(f"::(?:ffff:)?{_DOTTED_QUAD}"),)


def _hex(field: str) -> int:
    return int(field, 16) if field else 0


def _expand(text: str, colons: int) -> str:
    """Replace the first '::' so the text holds exactly `colons` colons."""
    missing = colons + 2 - text.count(":")
    return text.replace("::", ":" * missing, 1)


def decode_preferred(text: str) -> List[int]:
    return [_hex(piece) for piece in text.split(":")[:HEXADECET_COUNT]]


def decode_compressed(text: str) -> List[int]:
    # 9 - colon_count colons stand in for the double colon
    expanded = _expand(text, 7)
    return [_hex(piece) for piece in expanded.split(":", HEXADECET_COUNT - 1)]


def _decode_embedded_ipv4(pieces: List[str]) -> List[int]:
    result = [_hex(piece) for piece in pieces[:6]]
    result.extend(octets_to_hexadecets(parse_ipv4(pieces[-1])))
    return result


def decode_ipv4(text: str) -> List[int]:
    return _decode_embedded_ipv4(text.split(":"))


def decode_ipv4_compressed(text: str) -> List[int]:
    # The dotted quad takes the place of the last two hexadecets
    expanded = _expand(text, 6)
    return _decode_embedded_ipv4(expanded.split(":", 6))


def decode_base85(text: str) -> List[int]:
    """Decode an RFC1924 address.

    Hexadecets are peeled off the low end until the value runs out, so
    addresses with leading zero groups yield fewer than eight values and
    are left-padded.
    """
    from .. import base85

    value = base85.decode(text)
    result: List[int] = []
    while value > 0:
        result.insert(0, value & 0xFFFF)
        value >>= 16
    return [0] * (HEXADECET_COUNT - len(result)) + result


@dataclass(frozen=True)
class GrammarRule:
    """A grammar, its recognizer patterns and its decoder."""

    grammar: Grammar
    patterns: Tuple[re.Pattern, ...]
    decoder: Decoder

    @property
    def name(self) -> str:
        return self.grammar.value

    def matches(self, text: str) -> bool:
        """Check whether any pattern matches the whole of text."""
        return any(p.fullmatch(text) for p in self.patterns)

    def decode(self, text: str) -> List[int]:
        """Decode text into eight hexadecets.

        Raises:
            InvalidAddressError: If text does not belong to this grammar,
                or an embedded part (IPv4, base-85 value) is out of range
        """
        if not self.matches(text):
            raise InvalidAddressError(
                f"invalid {self.name} IPv6 address {text!r}"
            )
        return self.decoder(text)


PREFERRED = GrammarRule(Grammar.PREFERRED, PREFERRED_PATTERNS, decode_preferred)
COMPRESSED = GrammarRule(
    Grammar.COMPRESSED, COMPRESSED_PATTERNS, decode_compressed
)
IPV4 = GrammarRule(Grammar.IPV4, IPV4_PATTERNS, decode_ipv4)
IPV4_COMPRESSED = GrammarRule(
    Grammar.IPV4_COMPRESSED, IPV4_COMPRESSED_PATTERNS, decode_ipv4_compressed
)


def _base85_rule() -> GrammarRule:
    from .. import base85

    return GrammarRule(Grammar.BASE85, (base85.PATTERN,), decode_base85)


@lru_cache(maxsize=None)
def build_grammar_table(base85: bool = False) -> Tuple[GrammarRule, ...]:
    """Build the ordered, immutable grammar table.

    Args:
        base85: Register the RFC1924 grammar (requires netaddr)

    Returns:
        Tuple of rules in the order they are tried
    """
    rules = [PREFERRED, COMPRESSED, IPV4, IPV4_COMPRESSED]
    if base85:
        rules.append(_base85_rule())
    return tuple(rules)
