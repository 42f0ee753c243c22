"""IPv6 address parsing and formatting.

Supported textual forms:
- Preferred (RFC1884): dead:beef:cafe:babe:0:0:0:f0ad
- Compressed (RFC1884): dead:beef:cafe:babe::f0ad
- IPv4-embedded (RFC1884): 0:0:0:0:0:ffff:192.168.1.1, ::ffff:192.168.1.1
- Base-85 (RFC1924, needs netaddr): 4)+k&C#VzJ4br>0wv%Yp
- Reverse pointer (RFC1886, output only): 1.0.0.0...ip6.int.

Syntax for prefix lengths:
    address[/prefix]
"""

from .formatter import (
    format_base85,
    format_compressed,
    format_ip6_int,
    format_ipv4,
    format_ipv4_compressed,
    format_preferred,
    format_reverse_pointer,
)
from .grammars import GrammarRule, build_grammar_table
from .parser import classify, is_valid, parse, parse_with_prefix, split_prefix
from .types import Address, Grammar, PrefixedAddress

__all__ = [
    "Address",
    "Grammar",
    "GrammarRule",
    "PrefixedAddress",
    "build_grammar_table",
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
    "split_prefix",
]
