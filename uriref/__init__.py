"""
Parse, resolve and serialise URI references according to RFC 3986.
"""
from __future__ import annotations

from importlib_metadata import version

from uriref.codec import encode, encode_component, percent_decode, percent_encode
from uriref.exceptions import (
    InvalidComponentError,
    MalformedPercentSequenceError,
    UriError,
)
from uriref.paths import remove_dot_segments
from uriref.uri import Uri, parse

__version__ = version("uriref")

__all__ = [
    "Uri",
    "parse",
    "encode",
    "encode_component",
    "percent_encode",
    "percent_decode",
    "remove_dot_segments",
    "UriError",
    "MalformedPercentSequenceError",
    "InvalidComponentError",
]
