"""Anagram checking."""

import re

_WHITESPACE = re.compile(r"\s")


def _letters(text: str) -> str:
    return "".join(sorted(_WHITESPACE.sub("", text).lower()))


def is_anagram(first: str, second: str) -> bool:
    """
    Check if two strings are anagrams of each other.

    Whitespace and letter case are ignored, e.g. "Tom Marvolo Riddle" and
    "I am Lord Voldemort" are anagrams.

    Args:
        first: First string
        second: Second string

    Returns:
        True if both strings use the same characters with the same frequency
    """
    return _letters(first) == _letters(second)
