"""Header value tokenizer: splits cookie header text into elements.

Two grammars share one scanner:

- ``parse_elements`` splits on ``,`` into elements and on ``;`` into
  parameters (RFC2109/RFC2965 versioned headers).
- ``parse_netscape`` treats the whole text as one element and splits on
  ``;`` only, so commas inside ``expires`` dates survive.

Values may be quoted strings: the quotes are dropped, ``\\`` escapes the
next character, and delimiters inside quotes do not split. Runs of
whitespace outside quotes collapse to a single space; leading and
trailing whitespace is dropped.
"""

from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\r\n")
_ELEMENT_DELIMS = frozenset(";,")
_NETSCAPE_DELIMS = frozenset(";")


@dataclass(frozen=True, slots=True)
class NameValuePair:
    """A ``name=value`` token. ``value`` is None when there was no ``=``."""

    name: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class HeaderElement:
    """One cookie token plus the attribute tokens that followed it."""

    name: str
    value: str | None = None
    params: tuple[NameValuePair, ...] = ()

    def get_param(self, name: str) -> NameValuePair | None:
        """Return the first parameter named *name* (case-insensitive)."""
        name = name.lower()
        for param in self.params:
            if param.name.lower() == name:
                return param
        return None


def _scan(text: str, pos: int, delims: frozenset[str], *, quoted: bool) -> tuple[str, int]:
    """Read up to the next delimiter, returning (token, position of delimiter)."""
    out: list[str] = []
    pending_space = False
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch in delims:
            break
        if ch in _WHITESPACE:
            pending_space = True
            pos += 1
            continue
        if pending_space and out:
            out.append(" ")
        pending_space = False
        if quoted and ch == '"':
            pos += 1
            while pos < end:
                ch = text[pos]
                if ch == '"':
                    pos += 1
                    break
                if ch == "\\" and pos + 1 < end:
                    pos += 1
                    ch = text[pos]
                out.append(ch)
                pos += 1
            continue
        out.append(ch)
        pos += 1
    return "".join(out), pos


def _parse_pair(text: str, pos: int, delims: frozenset[str]) -> tuple[NameValuePair, int]:
    name, pos = _scan(text, pos, delims | {"="}, quoted=False)
    if pos >= len(text) or text[pos] != "=":
        return NameValuePair(name), pos
    value, pos = _scan(text, pos + 1, delims, quoted=True)
    return NameValuePair(name, value), pos


def _parse_element(text: str, pos: int) -> tuple[HeaderElement, int]:
    first, pos = _parse_pair(text, pos, _ELEMENT_DELIMS)
    params: list[NameValuePair] = []
    end = len(text)
    if pos < end and text[pos] == ";":
        pos += 1
        while pos < end:
            param, pos = _parse_pair(text, pos, _ELEMENT_DELIMS)
            if param.name:
                params.append(param)
            if pos < end:
                delim = text[pos]
                pos += 1
                if delim == ",":
                    break
    elif pos < end:
        pos += 1
    return HeaderElement(first.name, first.value, tuple(params)), pos


def parse_elements(text: str) -> list[HeaderElement]:
    """Split *text* into comma-separated elements with ``;`` parameters.

    Elements with neither a name nor a value (``a=1,,b=2``) are dropped.
    """
    elements: list[HeaderElement] = []
    pos = 0
    while pos < len(text):
        element, pos = _parse_element(text, pos)
        if element.name or element.value is not None:
            elements.append(element)
    return elements


def parse_netscape(text: str) -> HeaderElement:
    """Parse *text* as a single Netscape-draft cookie element."""
    first, pos = _parse_pair(text, 0, _NETSCAPE_DELIMS)
    params: list[NameValuePair] = []
    while pos < len(text):
        param, pos = _parse_pair(text, pos + 1, _NETSCAPE_DELIMS)
        if param.name:
            params.append(param)
    return HeaderElement(first.name, first.value, tuple(params))
