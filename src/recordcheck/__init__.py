"""Small record-checking utilities: IP allow-lists, vehicle CSV imports, anagrams."""

__version__ = "1.0.0"
