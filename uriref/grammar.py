"""
Decomposition of URI references into their components, using the regular
expression from `RFC 3986 Appendix B`_::

    ^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\\?([^#]*))?(#(.*))?
     12            3  4          5       6  7        8 9

The pattern matches any string, so it doesn't validate anything: it just
splits at the first delimiters of each kind. The components are returned
exactly as they appear in the input, still percent-encoded.

.. _RFC 3986 Appendix B: https://tools.ietf.org/html/rfc3986#appendix-B
"""
from __future__ import annotations

from typing import NamedTuple

from typing_extensions import Final

from uriref.charsets import DIGIT
from uriref.regexbuilder import (
    Anything,
    Capture,
    Literal,
    NotSet,
    OneOrMore,
    Optional,
    Sequence,
    Start,
    ZeroOrMore,
)

__all__ = [
    "URI_REFERENCE",
    "AUTHORITY",
    "RawComponents",
    "RawAuthority",
    "split",
    "split_authority",
]

# Group numbers are the same as in the RFC's pattern, the names are extra.
URI_REFERENCE: Final = Sequence(
    Start(),
    Optional(
        Capture(Capture(OneOrMore(NotSet(*":/?#")), name="scheme"), Literal(":"))
    ),
    Optional(
        Capture(Literal("//"), Capture(ZeroOrMore(NotSet(*"/?#")), name="authority"))
    ),
    Capture(ZeroOrMore(NotSet(*"?#")), name="path"),
    Optional(Capture(Literal("?"), Capture(ZeroOrMore(NotSet("#")), name="query"))),
    Optional(Capture(Literal("#"), Capture(ZeroOrMore(Anything()), name="fragment"))),
)

AUTHORITY: Final = Sequence(
    Optional(Sequence(Capture(OneOrMore(NotSet("@")), name="user_info"), Literal("@"))),
    Capture(ZeroOrMore(NotSet(":")), name="host"),
    Optional(Sequence(Literal(":"), Capture(OneOrMore(DIGIT), name="port"))),
)

_uri_reference_re: Final = URI_REFERENCE.compile()
_authority_re: Final = AUTHORITY.compile()


class RawComponents(NamedTuple):
    scheme: str | None
    authority: str | None
    path: str
    query: str | None
    fragment: str | None


class RawAuthority(NamedTuple):
    user_info: str | None
    host: str
    port: str | None


def split(text: str) -> RawComponents | None:
    """
    Split a URI reference into its five components.

    A component which is absent from text is None, while one whose
    delimiter is present but which is otherwise empty is ``""``. The path is
    always present.

    >>> split("http://a/b/c/d;p?q")  # doctest: +NORMALIZE_WHITESPACE
    RawComponents(scheme='http', authority='a', path='/b/c/d;p',
                  query='q', fragment=None)
    >>> split("//?")
    RawComponents(scheme=None, authority='', path='', query='', fragment=None)
    """
    match = _uri_reference_re.match(text)
    if match is None:
        return None
    return RawComponents(
        *match.group("scheme", "authority", "path", "query", "fragment")
    )


def split_authority(authority: str) -> RawAuthority:
    """
    Split an authority into user info, host and port.

    Anything after the port's digits is ignored, and a ``:`` which isn't
    followed by digits ends the authority.

    >>> split_authority("user@example.com:8080")
    RawAuthority(user_info='user', host='example.com', port='8080')
    >>> split_authority("")
    RawAuthority(user_info=None, host='', port=None)
    """
    match = _authority_re.match(authority)
    # AUTHORITY can match the empty string, so it matches anything
    assert match is not None
    return RawAuthority(*match.group("user_info", "host", "port"))
