"""Cookie entities and the request origin they are evaluated against.

``Cookie`` is what ``BrowserCompatCookieSpec.parse`` produces and what an
external store keeps. ``CookieOrigin`` describes the exchange a header
came from (or is going to).
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import UTC, datetime
from urllib.parse import urlsplit

# Name given to cookies received without one ("foo", "=bar", ";path=/").
EMPTY_COOKIE_NAME = "HTMLUNIT_EMPTY_COOKIE"

# Domain used for cookies set by file:// documents.
LOCAL_FILESYSTEM_DOMAIN = "LOCAL_FILESYSTEM"

# An explicit expiry at this instant means "already expired".
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}
_SECURE_SCHEMES = frozenset({"https", "wss"})

_creation_counter = itertools.count()


@dataclass(slots=True)
class Cookie:
    """A cookie as parsed from a ``Set-Cookie`` header.

    Mutable: attribute handlers fill in fields one attribute at a time.
    Identity for store replacement is ``(name, domain, path)``;
    ``creation_order`` only breaks ties when ordering.
    """

    name: str
    value: str = ""
    domain: str | None = None
    path: str | None = None
    expiry: datetime | None = None
    secure: bool = False
    http_only: bool = False
    discard: bool = False
    comment: str | None = None
    version: int = 0
    attributes: dict[str, str | None] = field(default_factory=dict)
    creation_order: int = field(default_factory=lambda: next(_creation_counter))

    @property
    def identity(self) -> tuple[str, str | None, str | None]:
        """The ``(name, domain, path)`` key a store replaces on."""
        return (self.name, self.domain, self.path)

    @property
    def is_persistent(self) -> bool:
        """True when the cookie should outlive the session."""
        return self.expiry is not None and not self.discard

    def is_expired(self, now: datetime | None = None) -> bool:
        """True when the expiry is at or before *now* (UTC by default)."""
        if self.expiry is None:
            return False
        if now is None:
            now = datetime.now(UTC)
        return self.expiry <= now

    def has_attribute(self, name: str) -> bool:
        """True when the header carried attribute *name*."""
        return name.lower() in self.attributes

    def set_attribute(self, name: str, value: str | None) -> None:
        self.attributes[name.lower()] = value

    def to_header_value(self) -> str:
        """Serialize as a ``name=value`` pair for a ``Cookie`` header."""
        return f"{self.name}={self.value}"


@dataclass(frozen=True, slots=True)
class CookieOrigin:
    """Host, port, path and channel security of an HTTP exchange.

    The host is stored lowercased; an empty path becomes ``/``.
    """

    host: str
    port: int = 80
    path: str = "/"
    secure: bool = False

    def __post_init__(self) -> None:
        if not self.host or not self.host.strip():
            msg = "Cookie origin host may not be blank"
            raise ValueError(msg)
        if self.port < 0:
            msg = f"Invalid cookie origin port: {self.port}"
            raise ValueError(msg)
        object.__setattr__(self, "host", self.host.strip().lower())
        if not self.path:
            object.__setattr__(self, "path", "/")

    @classmethod
    def from_url(cls, url: str) -> CookieOrigin:
        """Build an origin from an absolute URL.

        ``file:`` URLs map to ``LOCAL_FILESYSTEM_DOMAIN`` so cookies set by
        local documents are visible to every other local document.
        """
        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        path = parts.path or "/"
        if scheme == "file":
            return cls(host=LOCAL_FILESYSTEM_DOMAIN, port=0, path=path)
        if not parts.hostname:
            msg = f"URL has no host: {url!r}"
            raise ValueError(msg)
        port = parts.port if parts.port is not None else _DEFAULT_PORTS.get(scheme, 80)
        return cls(
            host=parts.hostname,
            port=port,
            path=path,
            secure=scheme in _SECURE_SCHEMES,
        )
