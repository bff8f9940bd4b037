"""httpx integration — keep a cookie store in sync with an httpx client.

Requires: pip install crumbs[httpx]

Usage::

    from crumbs import BrowserCompatCookieSpec
    from crumbs.ext.httpx_hooks import cookie_client

    spec = BrowserCompatCookieSpec()
    with cookie_client(spec, store) as client:
        client.get("https://example.com/login")  # Set-Cookie -> store
        client.get("https://example.com/home")   # store -> Cookie

The store belongs to the caller: anything with ``add(cookie)`` and
``cookies()`` works. Replacement by identity, eviction, and persistence
are the store's business.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any, Protocol

from crumbs.errors import ExtensionNotInstalledError, MalformedCookieError
from crumbs.http.cookies import Cookie, CookieOrigin
from crumbs.http.headers import Header
from crumbs.spec.browser import BrowserCompatCookieSpec

logger = logging.getLogger("crumbs.ext")


class CookieStore(Protocol):
    """What the hooks need from a cookie store."""

    def add(self, cookie: Cookie) -> None: ...
    def cookies(self) -> Iterable[Cookie]: ...


def _get_httpx() -> Any:
    """Import httpx or raise a clear error."""
    try:
        import httpx

        return httpx
    except ImportError:
        msg = (
            "crumbs.ext.httpx_hooks requires 'httpx'. "
            "Install it with: pip install crumbs[httpx]"
        )
        raise ExtensionNotInstalledError(msg) from None


def store_response_cookies(
    spec: BrowserCompatCookieSpec,
    store: CookieStore,
    url: str,
    set_cookie_values: Iterable[str],
) -> list[Cookie]:
    """Parse and validate ``Set-Cookie`` values, adding accepted cookies to *store*.

    A malformed header or a cookie that fails validation is logged and
    skipped; its siblings are still stored. Returns the stored cookies.
    """
    origin = CookieOrigin.from_url(url)
    accepted: list[Cookie] = []
    for value in set_cookie_values:
        try:
            cookies = spec.parse(Header.set_cookie(value), origin)
        except MalformedCookieError as exc:
            logger.warning("Ignoring Set-Cookie %r from %s: %s", value, url, exc)
            continue
        for cookie in cookies:
            try:
                spec.validate(cookie, origin)
            except MalformedCookieError as exc:
                logger.warning("Rejected cookie %r from %s: %s", cookie.name, url, exc)
                continue
            store.add(cookie)
            accepted.append(cookie)
    return accepted


def request_cookie_headers(
    spec: BrowserCompatCookieSpec,
    store: CookieStore,
    url: str,
    now: datetime | None = None,
) -> list[Header]:
    """Format the unexpired stored cookies that match *url*."""
    origin = CookieOrigin.from_url(url)
    if now is None:
        now = datetime.now(UTC)
    selected = [
        cookie
        for cookie in store.cookies()
        if not cookie.is_expired(now) and spec.match(cookie, origin)
    ]
    return spec.format_cookies(selected)


def cookie_event_hooks(
    spec: BrowserCompatCookieSpec,
    store: CookieStore,
) -> dict[str, list[Callable[[Any], None]]]:
    """Event hooks for ``httpx.Client(event_hooks=...)``.

    The store is the only cookie source: a ``Cookie`` header already on
    the request (from httpx's own jar or the caller) is replaced.
    """

    def on_request(request: Any) -> None:
        if "cookie" in request.headers:
            del request.headers["cookie"]
        for header in request_cookie_headers(spec, store, str(request.url)):
            request.headers[header.name] = header.value

    def on_response(response: Any) -> None:
        values = response.headers.get_list("set-cookie")
        if values:
            store_response_cookies(spec, store, str(response.request.url), values)

    return {"request": [on_request], "response": [on_response]}


def async_cookie_event_hooks(
    spec: BrowserCompatCookieSpec,
    store: CookieStore,
) -> dict[str, list[Callable[[Any], Any]]]:
    """Event hooks for ``httpx.AsyncClient(event_hooks=...)``."""
    sync_hooks = cookie_event_hooks(spec, store)
    on_request = sync_hooks["request"][0]
    on_response = sync_hooks["response"][0]

    async def on_request_async(request: Any) -> None:
        on_request(request)

    async def on_response_async(response: Any) -> None:
        on_response(response)

    return {"request": [on_request_async], "response": [on_response_async]}


def cookie_client(spec: BrowserCompatCookieSpec, store: CookieStore, **kwargs: Any) -> Any:
    """Build an ``httpx.Client`` wired to *spec* and *store*.

    Extra keyword arguments go to ``httpx.Client``. Raises
    ``ExtensionNotInstalledError`` if httpx is missing.
    """
    httpx = _get_httpx()
    return httpx.Client(event_hooks=cookie_event_hooks(spec, store), **kwargs)


def async_cookie_client(spec: BrowserCompatCookieSpec, store: CookieStore, **kwargs: Any) -> Any:
    """Build an ``httpx.AsyncClient`` wired to *spec* and *store*."""
    httpx = _get_httpx()
    return httpx.AsyncClient(event_hooks=async_cookie_event_hooks(spec, store), **kwargs)
