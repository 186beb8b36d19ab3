"""
Character classes deciding which characters may appear literally in an
encoded URI, and which must be percent-encoded.
"""
from __future__ import annotations

from typing_extensions import Final

from uriref.regexbuilder import (
    Choice,
    Literal,
    Repeat,
    Sequence,
    Set,
    ZeroOrMore,
)

__all__ = [
    "URI_SAFE",
    "COMPONENT_SAFE",
    "PCT_ENCODED",
    "is_uri_safe",
    "is_component_safe",
    "is_encoded",
]

ALPHA: Final = Set(("a", "z"), ("A", "Z"))
DIGIT: Final = Set(("0", "9"))
HEXDIG: Final = Set(("a", "f"), ("A", "F"), DIGIT)

# Characters which encode() leaves alone. This is unreserved + reserved from
# RFC 3986, minus the gen-delims "[" and "]".
URI_SAFE: Final = Set(ALPHA, DIGIT, *list("!#$&'()*+,-./:;=?@_~"))

# Characters which encode_component() leaves alone. Anything with a meaning
# as a delimiter somewhere in a URI is escaped.
COMPONENT_SAFE: Final = Set(ALPHA, DIGIT, *list("-_.!~*'()"))

PCT_ENCODED: Final = Sequence(Literal("%"), Repeat(HEXDIG, count=2))

_encoded_re: Final = ZeroOrMore(Choice(PCT_ENCODED, URI_SAFE)).compile()


def is_uri_safe(char: str) -> bool:
    """
    Check if ``char`` may appear unescaped in a URI.

    >>> is_uri_safe("/"), is_uri_safe(" ")
    (True, False)
    """
    return char in URI_SAFE


def is_component_safe(char: str) -> bool:
    """
    Check if ``char`` may appear unescaped inside a single URI component,
    e.g. a path segment or a query value.

    >>> is_component_safe("a"), is_component_safe("/")
    (True, False)
    """
    return char in COMPONENT_SAFE


def is_encoded(text: str) -> bool:
    """
    Check if ``text`` is made up only of URI-safe characters and well-formed
    ``%XX`` escapes, i.e. if it can be used as an already-encoded path or
    query.
    """
    return _encoded_re.fullmatch(text) is not None
