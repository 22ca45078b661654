"""NamingConvention — declared field name -> serialized key name."""

from __future__ import annotations

import re
from enum import Enum

_SEPARATOR_RE = re.compile(r"[_\-\s]+")


def _is_boundary(prev: str, cur: str, nxt: str) -> bool:
    if cur.isupper():
        # lower -> Upper, digit -> Upper, or the last capital of an acronym
        return not prev.isupper() or nxt.islower()
    # Digits stick to the preceding word; a letter after them starts a new one
    return cur.isalpha() and prev.isdigit()


def _split_case(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if _is_boundary(chunk[i - 1], chunk[i], nxt):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def split_words(name: str) -> list[str]:
    """
    Split a field name into words.

    Boundaries are ``_``, ``-``, whitespace, lower -> upper transitions
    and the end of an acronym. Case is judged with ``str.isupper`` /
    ``str.islower``, so non-ASCII letters behave like ASCII ones and no
    character other than a separator is ever dropped::

        split_words("page_size")   -> ["page", "size"]
        split_words("userId")      -> ["user", "Id"]
        split_words("HTTPServer")  -> ["HTTP", "Server"]
        split_words("größe_kg")    -> ["größe", "kg"]
    """
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(name):
        if chunk:
            words.extend(_split_case(chunk))
    return words


class NamingConvention(str, Enum):
    """Case conversion applied uniformly to every declared field name."""

    IDENTITY = "identity"
    CAMEL = "camelCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    PASCAL = "PascalCase"
    LOWER = "lowercase"
    UPPER = "UPPERCASE"
    SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
    SCREAMING_KEBAB = "SCREAMING-KEBAB-CASE"

    @classmethod
    def parse(cls, value: NamingConvention | str | None) -> NamingConvention:
        """Resolve a member, its value or its name (case-insensitive)."""
        if value is None:
            return cls.IDENTITY
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value.upper() == member.name:
                    return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown naming convention {value!r}. Valid: {valid}")

    def apply(self, name: str) -> str:
        """Return the serialized key for declared field *name*."""
        if self is NamingConvention.IDENTITY:
            return name
        if self is NamingConvention.LOWER:
            return name.lower()
        if self is NamingConvention.UPPER:
            return name.upper()

        words = split_words(name)
        if not words:
            return name
        if self is NamingConvention.CAMEL:
            return words[0].lower() + "".join(w.capitalize() for w in words[1:])
        if self is NamingConvention.PASCAL:
            return "".join(w.capitalize() for w in words)
        if self is NamingConvention.SNAKE:
            return "_".join(w.lower() for w in words)
        if self is NamingConvention.KEBAB:
            return "-".join(w.lower() for w in words)
        if self is NamingConvention.SCREAMING_SNAKE:
            return "_".join(w.upper() for w in words)
        return "-".join(w.upper() for w in words)
