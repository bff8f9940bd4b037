"""Cookie expiry date parsing.

Browsers accept far more than the RFC1123 dates servers are supposed to
send. The trailing zone is split off first, then every run of spaces,
commas, colons, and dashes collapses to one space, so a single pattern
covers ``01-Jan-1970``, ``01 Jan 1970`` and ``Thu,01-Jan-1970`` alike::

    Thu, 01-Jan-1970 00:00:00 GMT  ->  Thu 01 Jan 1970 00 00 00  (+ GMT)

Patterns are ``strptime`` formats written against that normalized form,
without the zone. Zones are numeric offsets (``-0500``, ``GMT+0100``) or
the RFC822 names; the result is always converted to UTC.
"""

import logging
import re
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta, timezone, tzinfo

logger = logging.getLogger("crumbs.dates")

_SEPARATORS = re.compile(r"[ ,:\-]+")
_OFFSET = re.compile(r"(?:^|\s)(?:GMT|UTC|UT)?(?P<sign>[+-])(?P<hours>\d{2})(?P<minutes>\d{2})$", re.IGNORECASE)
_ZONE_NAME = re.compile(r"\s(?P<name>[A-Za-z]{1,5})$")
_CALENDAR_WORDS = frozenset(
    "jan feb mar apr may jun jul aug sep oct nov dec mon tue wed thu fri sat sun".split()
)

# RFC822 zone names plus the central European ones browsers commonly see.
ZONE_OFFSETS: dict[str, int] = {
    "GMT": 0,
    "UTC": 0,
    "UT": 0,
    "Z": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
    "CET": 1,
    "CEST": 2,
}

DEFAULT_DATE_PATTERNS: tuple[str, ...] = (
    "%a %d %b %Y %H %M %S",  # RFC1123, Netscape: Thu, 01 Jan 1970 00:00:00
    "%a %d %b %y %H %M %S",  # RFC1036: Thu, 01-Jan-70 00:00:00
    "%A %d %b %Y %H %M %S",  # RFC850: Thursday, 01-Jan-1970 00:00:00
    "%A %d %b %y %H %M %S",
    "%a %b %d %H %M %S %Y",  # asctime: Thu Jan  1 00:00:00 1970
    "%a %b %d %Y %H %M %S",  # Date.toString(): Thu Jan 01 1970 00:00:00
    "%a %b %d %y %H %M %S",  # Thu Jan 01 70 00:00:00
    "%a %d %m %Y %H %M %S",  # numeric month: Thu, 01 01 1970 00:00:00
    "%d %b %Y %H %M %S",  # no weekday
    "%d %b %y %H %M %S",
    "%d %m %Y %H %M %S",
)


def normalize_date(value: str) -> str:
    """Collapse date separators to single spaces."""
    return _SEPARATORS.sub(" ", value).strip()


def _is_calendar_word(token: str) -> bool:
    return token[:3].lower() in _CALENDAR_WORDS


def _pivot(year: int, start_1970: bool) -> int:
    """Place a two-digit year in [2000, 2100) or [1970, 2070)."""
    short = year % 100
    if start_1970 and short >= 70:
        return 1900 + short
    return 2000 + short


def split_zone(value: str) -> tuple[str, tzinfo | None]:
    """Split a trailing zone off *value*.

    Returns the remaining text and the zone, ``UTC`` when the date names
    none. The zone is None when the trailing token looks like a zone but is
    not one we know.
    """
    text = value.strip()
    if match := _OFFSET.search(text):
        hours, minutes = int(match["hours"]), int(match["minutes"])
        if hours > 23 or minutes > 59:
            return text, None
        offset = timedelta(hours=hours, minutes=minutes)
        if match["sign"] == "-":
            offset = -offset
        return text[: match.start()], timezone(offset) if offset else UTC
    if match := _ZONE_NAME.search(text):
        name = match["name"]
        if _is_calendar_word(name):
            return text, UTC
        hours = ZONE_OFFSETS.get(name.upper())
        if hours is None:
            return text, None
        return text[: match.start()], timezone(timedelta(hours=hours)) if hours else UTC
    return text, UTC


def parse_cookie_date(
    value: str,
    *,
    patterns: Iterable[str] = DEFAULT_DATE_PATTERNS,
    start_1970: bool = False,
) -> datetime | None:
    """Parse a cookie expiry date into an aware UTC datetime.

    Returns None when no pattern matches or the zone is unknown.
    """
    head, zone = split_zone(value)
    if zone is None:
        logger.debug("Unsupported time zone in cookie date %r", value)
        return None
    text = normalize_date(head)
    if not text:
        return None

    for pattern in patterns:
        try:
            parsed = datetime.strptime(text, pattern)
        except ValueError:
            continue
        if "%y" in pattern:
            parsed = parsed.replace(year=_pivot(parsed.year, start_1970))
        return parsed.replace(tzinfo=zone).astimezone(UTC)
    return None
