"""IPv4 integer and mask helpers."""

import ipaddress
from typing import Optional


def ip_to_int(ip_address: str) -> Optional[int]:
    """
    Convert a dotted-quad IPv4 address to a 32-bit unsigned integer.

    The text is not stripped or normalized first.

    Args:
        ip_address: IPv4 address string

    Returns:
        Integer value of the address, or None if it is not a valid IPv4 address
    """
    try:
        return int(ipaddress.IPv4Address(ip_address))
    except (ipaddress.AddressValueError, ValueError, TypeError):
        return None


def prefix_mask(prefix_length: int) -> int:
    """Return the 32-bit network mask for a prefix length in 0..32."""
    if prefix_length == 0:
        return 0
    return (0xFFFFFFFF << (32 - prefix_length)) & 0xFFFFFFFF
