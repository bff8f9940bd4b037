"""Browser quirk configuration.

BrowserQuirks is a frozen dataclass — immutable after creation, read by
the attribute handlers when a cookie spec is constructed.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BrowserQuirks:
    """Behavior flags derived from the browser being simulated.

    The defaults follow what current browsers accept. Override what you
    need::

        quirks = BrowserQuirks(lenient_domain=True, start_date_1970=True)
    """

    # Domain
    lenient_domain: bool = False  # Accept a domain attribute the origin host does not match
    remove_dot_from_root_domains: bool = False  # ".localhost" -> "localhost"

    # Path
    lenient_path: bool = True  # Browser prefix matching; no path validation

    # Expires
    lenient_expires: bool = True  # Ignore a bad expires or max-age instead of rejecting the cookie
    start_date_1970: bool = False  # Two-digit years pivot at 1970 instead of 2000
    extra_date_patterns: tuple[str, ...] = ()  # strptime patterns tried after the built-ins

    # Values
    restore_value_quotes: bool = True  # Re-wrap values the tokenizer unquoted


# Every leniency disabled: RFC2109-style validation.
RFC_STRICT = BrowserQuirks(
    lenient_domain=False,
    remove_dot_from_root_domains=False,
    lenient_path=False,
    lenient_expires=False,
)
