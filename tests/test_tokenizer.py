"""Tests for crumbs._internal.tokenizer — element and Netscape grammars."""

from crumbs._internal.tokenizer import HeaderElement, NameValuePair, parse_elements, parse_netscape


class TestParseNetscape:
    def test_name_value_and_attributes(self) -> None:
        element = parse_netscape("a=b; Path=/; HttpOnly")

        assert element == HeaderElement(
            "a",
            "b",
            (NameValuePair("Path", "/"), NameValuePair("HttpOnly")),
        )

    def test_quoted_value_keeps_semicolon(self) -> None:
        element = parse_netscape('id="v1;v2"; Path=/')

        assert element.value == "v1;v2"
        assert element.params == (NameValuePair("Path", "/"),)

    def test_commas_are_data(self) -> None:
        element = parse_netscape("a=b; expires=Thu, 01-Jan-1970 00:00:00 GMT")

        assert element.get_param("expires") == NameValuePair("expires", "Thu, 01-Jan-1970 00:00:00 GMT")

    def test_whitespace_collapses(self) -> None:
        element = parse_netscape(" a =  b   c ")

        assert element.name == "a"
        assert element.value == "b c"

    def test_backslash_escape_in_quotes(self) -> None:
        element = parse_netscape(r'a="x\"y"')
        assert element.value == 'x"y'

    def test_no_equals_means_no_value(self) -> None:
        element = parse_netscape("flag")

        assert element.name == "flag"
        assert element.value is None

    def test_empty_value(self) -> None:
        assert parse_netscape("a=").value == ""

    def test_empty_text(self) -> None:
        assert parse_netscape("") == HeaderElement("")

    def test_empty_attributes_skipped(self) -> None:
        element = parse_netscape("a=b;; ;Secure")
        assert element.params == (NameValuePair("Secure"),)


class TestParseElements:
    def test_comma_separated_elements(self) -> None:
        elements = parse_elements("a=1; version=1, b=2; version=1")

        assert [e.name for e in elements] == ["a", "b"]
        assert [e.value for e in elements] == ["1", "2"]
        assert all(e.get_param("version") == NameValuePair("version", "1") for e in elements)

    def test_empty_elements_dropped(self) -> None:
        elements = parse_elements("a=1,,b=2")
        assert [e.name for e in elements] == ["a", "b"]

    def test_quoted_comma_does_not_split(self) -> None:
        elements = parse_elements('a="1,2"; version=1')

        assert len(elements) == 1
        assert elements[0].value == "1,2"

    def test_empty_text(self) -> None:
        assert parse_elements("") == []


class TestHeaderElement:
    def test_get_param_case_insensitive(self) -> None:
        element = HeaderElement("a", "b", (NameValuePair("Expires", "x"),))

        assert element.get_param("EXPIRES") == NameValuePair("Expires", "x")
        assert element.get_param("path") is None

    def test_first_param_wins(self) -> None:
        element = HeaderElement("a", "b", (NameValuePair("path", "/1"), NameValuePair("path", "/2")))
        assert element.get_param("path").value == "/1"
