"""Text utilities."""

from recordcheck.text.anagram import is_anagram

__all__ = ["is_anagram"]
