"""Cookie spec: normalization, tokenizing, attribute handlers, ordering.

``BrowserCompatCookieSpec`` is the entry point; the handlers and helpers
are exported for callers that assemble their own handler table.
"""

from crumbs.spec.browser import BrowserCompatCookieSpec, default_path
from crumbs.spec.handlers import (
    AttributeHandler,
    BaseHandler,
    CommentHandler,
    DiscardHandler,
    DomainHandler,
    ExpiresHandler,
    HttpOnlyHandler,
    MaxAgeHandler,
    PathHandler,
    SecureHandler,
    VersionHandler,
    domain_match,
)
from crumbs.spec.normalize import normalize_header
from crumbs.spec.ordering import path_specificity, sort_by_path

__all__ = [
    "AttributeHandler",
    "BaseHandler",
    "BrowserCompatCookieSpec",
    "CommentHandler",
    "DiscardHandler",
    "DomainHandler",
    "ExpiresHandler",
    "HttpOnlyHandler",
    "MaxAgeHandler",
    "PathHandler",
    "SecureHandler",
    "VersionHandler",
    "default_path",
    "domain_match",
    "normalize_header",
    "path_specificity",
    "sort_by_path",
]
