"""Crumbs — browser-compatible cookie header parsing for HTTP clients.

Parses ``Set-Cookie`` headers the way real browsers do: nameless cookies,
quoted values containing ``;``, legacy expiry dates, lenient paths.

Basic usage::

    from crumbs import BrowserCompatCookieSpec, CookieOrigin, Header

    spec = BrowserCompatCookieSpec()
    origin = CookieOrigin.from_url("https://example.com/app/index.html")

    cookies = spec.parse(Header.set_cookie('id="abc"; Path=/; HttpOnly'), origin)
    headers = spec.format_cookies(cookies)  # [Header("Cookie", 'id="abc"')]

httpx integration (``pip install crumbs[httpx]``)::

    from crumbs.ext.httpx_hooks import cookie_event_hooks
    client = httpx.Client(event_hooks=cookie_event_hooks(spec, store))
"""

__version__ = "0.1.0-dev"
__all__ = [
    "EMPTY_COOKIE_NAME",
    "EPOCH",
    "LOCAL_FILESYSTEM_DOMAIN",
    "RFC_STRICT",
    "BrowserCompatCookieSpec",
    "BrowserQuirks",
    "Cookie",
    "CookieOrigin",
    "CrumbsError",
    "Header",
    "MalformedCookieError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumbs`` fast while providing a clean top-level API.
    """
    if name == "BrowserCompatCookieSpec":
        from crumbs.spec.browser import BrowserCompatCookieSpec

        return BrowserCompatCookieSpec

    if name in ("BrowserQuirks", "RFC_STRICT"):
        from crumbs import config as _config

        return getattr(_config, name)

    if name in ("Cookie", "CookieOrigin", "EMPTY_COOKIE_NAME", "EPOCH", "LOCAL_FILESYSTEM_DOMAIN"):
        from crumbs.http import cookies as _cookies

        return getattr(_cookies, name)

    if name == "Header":
        from crumbs.http.headers import Header

        return Header

    if name in ("CrumbsError", "MalformedCookieError"):
        from crumbs import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
