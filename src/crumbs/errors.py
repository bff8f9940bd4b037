"""Crumbs exception hierarchy.

Shared across the tokenizer, the attribute handlers, and the cookie spec
so every module raises and catches the same types.
"""


class CrumbsError(Exception):
    """Base for all crumbs-specific errors."""


class MalformedCookieError(CrumbsError):
    """Raised when a cookie header or attribute cannot be accepted.

    Raised by attribute handlers on an unparseable value and by
    validation when a cookie violates a constraint relative to its
    origin. Quirk-mode leniency avoids raising in the first place;
    it never catches this error.
    """


class ExtensionNotInstalledError(CrumbsError):
    """Raised when an optional integration's library is not installed."""
