"""RFC1924 base-85 conversion backed by netaddr.

Only imported once base-85 support has been resolved as available
(see ``ipv6addr.context``).
"""

import re

from netaddr import AddrFormatError, IPAddress
from netaddr.ip.rfc1924 import BASE_85, base85_to_ipv6, ipv6_to_base85

from .errors import InvalidAddressError

ENCODED_LENGTH = 20

# "-" goes last so it stays literal inside the character class
_DIGITS = "".join(re.escape(c) for c in BASE_85 if c != "-")
PATTERN = re.compile(f"[{_DIGITS}-]{{{ENCODED_LENGTH}}}")


def decode(text: str) -> int:
    """Interpret a 20-character base-85 string as a 128-bit integer."""
    try:
        return int(IPAddress(base85_to_ipv6(text), 6))
    except (AddrFormatError, KeyError, ValueError) as e:
        raise InvalidAddressError(f"invalid base-85 address {text!r}") from e


def encode(value: int) -> str:
    """Encode a 128-bit integer as a fixed-width base-85 string."""
    return ipv6_to_base85(value)
