"""Kernel naming – split CamelCase identifiers into lowercase words."""
from __future__ import annotations

import re

# "HTTPRequestSent" -> HTTP | Request | Sent ; "Item2Added" -> Item | 2 | Added
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z]|\d|\b)|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(name: str) -> list[str]:
    """Return the lowercase words of a CamelCase (or snake_case) *name*."""
    return [w.lower() for w in _WORD.findall(name)]


def to_kebab_case(name: str) -> str:
    return "-".join(split_words(name))


def to_snake_case(name: str) -> str:
    return "_".join(split_words(name))


__all__ = ["split_words", "to_kebab_case", "to_snake_case"]
