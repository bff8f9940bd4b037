"""Immutable cookie header.

A ``Header`` is a (name, value) pair as received from or handed to the
transport. Rewrites produce a new ``Header``; the original may still be
held by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

SET_COOKIE = "Set-Cookie"
COOKIE = "Cookie"


@dataclass(frozen=True, slots=True)
class Header:
    """A single HTTP header carrying cookie text."""

    name: str
    value: str

    @classmethod
    def set_cookie(cls, value: str) -> Header:
        """Build a ``Set-Cookie`` response header."""
        return cls(SET_COOKIE, value)

    @classmethod
    def cookie(cls, value: str) -> Header:
        """Build a ``Cookie`` request header."""
        return cls(COOKIE, value)

    def is_named(self, name: str) -> bool:
        """Case-insensitive comparison against a header name."""
        return self.name.lower() == name.lower()

    def with_value(self, value: str) -> Header:
        """Return a new Header with the same name and a different value."""
        return Header(self.name, value)

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"
