"""ipv6addr CLI commands."""
