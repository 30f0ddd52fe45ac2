"""
IPv4 allow-list matching.

An allow-list entry is one of:
- a single address, compared as raw text (e.g. 192.168.1.1)
- an inclusive range of addresses (e.g. 192.168.1.0-192.168.1.255)
- a CIDR block (e.g. 192.168.1.0/24)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from recordcheck.ip.utils import ip_to_int, prefix_mask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactRange:
    """A single address, matched by string equality."""

    text: str

    def contains(self, ip_address: str, ip_int: int) -> bool:
        """Compare the raw address text; the integer form is unused."""
        return ip_address == self.text


@dataclass(frozen=True)
class BoundedRange:
    """Inclusive numeric bounds. A reversed range matches nothing."""

    start: int
    end: int

    def contains(self, ip_address: str, ip_int: int) -> bool:
        return self.start <= ip_int <= self.end


@dataclass(frozen=True)
class CidrRange:
    """A network and prefix length (0..32)."""

    network: int
    prefix_length: int

    def contains(self, ip_address: str, ip_int: int) -> bool:
        mask = prefix_mask(self.prefix_length)
        return (ip_int & mask) == (self.network & mask)


AddressRange = Union[ExactRange, BoundedRange, CidrRange]


def _parse_cidr(text: str) -> Optional[CidrRange]:
    network_text, _, prefix_text = text.partition('/')
    network = ip_to_int(network_text)
    # Prefix must be plain ASCII decimal digits
    if network is None or not (prefix_text.isascii() and prefix_text.isdigit()):
        return None
    prefix_length = int(prefix_text)
    if not 0 <= prefix_length <= 32:
        return None
    return CidrRange(network, prefix_length)


def _parse_bounded(text: str) -> Optional[BoundedRange]:
    start_text, _, end_text = text.partition('-')
    start = ip_to_int(start_text)
    end = ip_to_int(end_text)
    if start is None or end is None:
        return None
    return BoundedRange(start, end)


def parse_range(text: str) -> Optional[AddressRange]:
    """
    Classify an allow-list entry by its syntax.

    Args:
        text: Range specifier as stored in the allow-list

    Returns:
        The parsed range, or None if its addresses or prefix do not parse
    """
    if '/' in text:
        return _parse_cidr(text)
    if '-' in text:
        return _parse_bounded(text)
    return ExactRange(text)


def cidr_match(ip_address: str, cidr: str) -> bool:
    """Check if an IPv4 address is within a CIDR block."""
    ip_int = ip_to_int(ip_address)
    block = _parse_cidr(cidr) if '/' in cidr else None
    if ip_int is None or block is None:
        return False
    return block.contains(ip_address, ip_int)


def is_allowed(ip_address: str, ranges: Iterable[str]) -> bool:
    """
    Check if an IPv4 address is within any of the allowed ranges.

    Entries that fail to parse are skipped. An address that is not valid
    IPv4 is never allowed.

    Args:
        ip_address: IPv4 address to check
        ranges: Allow-list entries, checked in order

    Returns:
        True on the first matching entry, False otherwise
    """
    ip_int = ip_to_int(ip_address)
    if ip_int is None:
        logger.debug(f"Invalid IP address: {ip_address!r}")
        return False

    for text in ranges:
        address_range = parse_range(text)
        if address_range is None:
            logger.debug(f"Skipping malformed range entry: {text!r}")
            continue
        if address_range.contains(ip_address, ip_int):
            logger.debug(f"{ip_address} matched range {text}")
            return True

    return False
