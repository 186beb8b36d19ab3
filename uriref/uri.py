"""
This module contains the :class:`Uri` value type, and functions to parse and
resolve URI references according to `RFC 3986`_.

>>> base = parse("http://a/b/c/d;p?q")
>>> str(base.resolve("../g"))
'http://a/b/g'
>>> base.resolve("//g").authority
'g'

.. _RFC 3986: https://tools.ietf.org/html/rfc3986
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from typing_extensions import Final

from uriref import grammar
from uriref.charsets import is_encoded
from uriref.codec import encode, percent_decode
from uriref.exceptions import InvalidComponentError, UriError
from uriref.paths import merge_paths, remove_dot_segments

__all__ = ["Uri", "parse"]

MAX_PORT: Final = 0xFFFF

_NEEDS_ENCODING: Final = "contains characters which must be percent-encoded"


@dataclass(frozen=True)
class Uri:
    """
    A URI, or a relative reference if it has no scheme.

    Instances are immutable; methods which "modify" a URI return a new one.

    The path and query are held in their percent-encoded form, as the
    encoding of reserved characters like ``/`` is significant in them. All
    other components are held decoded, and encoded when the URI is turned
    back into a string with ``str()``.

    Raises:
        InvalidComponentError: If the path or query contain characters which
            should have been percent-encoded, the port is out of range, an
            authority is present along with a path which is neither empty nor
            absolute, or the path starts with // and there is no authority.
    """

    scheme: str | None = None
    user_info: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        if not is_encoded(self.path):
            raise InvalidComponentError.from_component(
                "path", self.path, _NEEDS_ENCODING
            )
        if self.query is not None and not is_encoded(self.query):
            raise InvalidComponentError.from_component(
                "query", self.query, _NEEDS_ENCODING
            )
        if self.port is not None and not 0 <= self.port <= MAX_PORT:
            raise InvalidComponentError.from_component(
                "port", self.port, "is not in the range 0-{0}".format(MAX_PORT)
            )
        # Refuse to construct a URI which would serialise as //hostpath
        if self.has_authority and self.path and not self.has_absolute_path:
            raise InvalidComponentError.from_component(
                "path", self.path, "must be empty or start with / after an authority"
            )
        # and one which would serialise as //path, read back as an authority
        if not self.has_authority and self.path.startswith("//"):
            raise InvalidComponentError.from_component(
                "path", self.path, "must not start with // without an authority"
            )

    @classmethod
    def parse(cls, text: str) -> Uri | None:
        return parse(text)

    @property
    def is_absolute(self) -> bool:
        """True if this is a URI with a scheme, rather than a relative reference."""
        return self.scheme is not None

    @property
    def has_absolute_path(self) -> bool:
        return self.path.startswith("/")

    @property
    def has_authority(self) -> bool:
        """
        True if any of the user info, host or port are present. Note that an
        empty host counts as present:

        >>> parse("file:///etc/hosts").has_authority
        True
        >>> parse("mailto:user@example.com").has_authority
        False
        """
        return any(
            component is not None
            for component in (self.user_info, self.host, self.port)
        )

    @property
    def authority(self) -> str | None:
        """The encoded ``user-info@host:port`` string, or None."""
        if not self.has_authority:
            return None
        out = []
        if self.user_info is not None:
            out.append(encode(self.user_info))
            out.append("@")
        if self.host is not None:
            out.append(encode(self.host))
        if self.port is not None:
            out.append(":")
            out.append(str(self.port))
        return "".join(out)

    @property
    def path_segments(self) -> list[str]:
        """
        The decoded segments of the path. An encoded ``/`` is part of a
        segment, not a separator.

        >>> parse("/a/b%2Fc/").path_segments
        ['a', 'b/c', '']
        """
        path = self.path[1:] if self.has_absolute_path else self.path
        return [percent_decode(segment) for segment in path.split("/")]

    @property
    def decoded_query(self) -> str | None:
        if self.query is None:
            return None
        return percent_decode(self.query)

    @property
    def base_path(self) -> Uri:
        """A copy of this URI without its query and fragment."""
        return self.replace(query=None, fragment=None)

    def replace(self, **changes: object) -> Uri:
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    def resolve(self, reference: str, strict: bool = True) -> Uri | None:
        """
        Parse reference and resolve it against this URI.

        Returns:
            The target URI, or None if reference could not be parsed.
        """
        other = parse(reference)
        if other is None:
            return None
        return self.resolve_uri(other, strict=strict)

    def resolve_uri(self, other: Uri, strict: bool = True) -> Uri:
        """
        Resolve a reference URI against this URI to form a target URI.

        Implements section 5.2.2 "Transform References" of RFC 3986. A
        reference with a scheme is returned as it is.

        Args:
            other: The reference to resolve.
            strict: If False, a reference with the same scheme as this URI is
                treated as if it had no scheme, for compatibility with older
                parsers.
        """
        if not strict and other.scheme == self.scheme:
            other = other.replace(scheme=None)

        if other.scheme is not None:
            return other

        if other.has_authority:
            return Uri(
                scheme=self.scheme,
                user_info=other.user_info,
                host=other.host,
                port=other.port,
                path=remove_dot_segments(other.path),
                query=other.query,
                fragment=other.fragment,
            )

        if other.path == "":
            path = self.path
            query = other.query if other.query is not None else self.query
        else:
            path = merge_paths(self, other)
            query = other.query

        # Keep a merged path like //g from being taken for an authority
        if not self.has_authority and path.startswith("//"):
            path = "/." + path

        return Uri(
            scheme=self.scheme,
            user_info=self.user_info,
            host=self.host,
            port=self.port,
            path=path,
            query=query,
            fragment=other.fragment,
        )

    def __str__(self) -> str:
        """
        Recombine the components into a URI string.

        Implements section 5.3 "Component Recomposition" of RFC 3986.
        """
        out = []

        if self.scheme is not None:
            out.append(encode(self.scheme))
            out.append(":")

        authority = self.authority
        if authority is not None:
            out.append("//")
            out.append(authority)

        out.append(self.path)

        if self.query is not None:
            out.append("?")
            out.append(self.query)

        if self.fragment is not None:
            out.append("#")
            out.append(encode(self.fragment))

        return "".join(out)


def _decoded(component: str | None) -> str | None:
    if component is None:
        return None
    return percent_decode(component)


def parse(text: str) -> Uri | None:
    """
    Parse a URI reference.

    The scheme, user info, host and fragment are percent-decoded, while the
    path and query are kept as they appear in text.

    >>> parse("https://user@example.com:8443/a%20b?q=1#top")
    Uri(scheme='https', user_info='user', host='example.com', port=8443, \
path='/a%20b', query='q=1', fragment='top')

    Returns:
        The parsed URI, or None if text is not a URI reference: its path or
        query contain characters which need percent-encoding, its port is out
        of range, or a component contains a malformed ``%`` escape.
    """
    parts = grammar.split(text)
    if parts is None:
        return None

    user_info, host, port = None, None, None
    if parts.authority is not None:
        authority = grammar.split_authority(parts.authority)
        user_info = authority.user_info
        host = authority.host
        port = None if authority.port is None else int(authority.port)

    try:
        return Uri(
            scheme=_decoded(parts.scheme),
            user_info=_decoded(user_info),
            host=_decoded(host),
            port=port,
            path=parts.path,
            query=parts.query,
            fragment=_decoded(parts.fragment),
        )
    except UriError:
        return None
