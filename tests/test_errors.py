"""Tests for crumbs.errors — exception hierarchy."""

import pytest

from crumbs.errors import CrumbsError, ExtensionNotInstalledError, MalformedCookieError


class TestHierarchy:
    def test_malformed_cookie_is_crumbs_error(self) -> None:
        assert issubclass(MalformedCookieError, CrumbsError)

    def test_extension_not_installed_is_crumbs_error(self) -> None:
        assert issubclass(ExtensionNotInstalledError, CrumbsError)

    def test_message(self) -> None:
        with pytest.raises(CrumbsError, match="bad cookie"):
            raise MalformedCookieError("bad cookie")
