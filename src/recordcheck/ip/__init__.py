"""IPv4 allow-list matching and utilities."""

from recordcheck.ip.matcher import cidr_match, is_allowed, parse_range
from recordcheck.ip.utils import ip_to_int, prefix_mask

__all__ = [
    "cidr_match",
    "is_allowed",
    "parse_range",
    "ip_to_int",
    "prefix_mask",
]
