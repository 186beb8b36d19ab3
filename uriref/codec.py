"""
Percent-encoding and decoding of URI text.

Encoding works per code point: a character which isn't safe in the target
context is converted to its UTF-8 bytes, and each byte is written as an
uppercase ``%XX`` escape. Decoding reverses this, reassembling runs of
adjacent escapes into the code points they encode.

>>> encode("/docs/naïve café")
'/docs/na%C3%AFve%20caf%C3%A9'
>>> percent_decode("na%C3%AFve%20caf%C3%A9")
'naïve café'
"""
from __future__ import annotations

import re
from typing import Callable

from typing_extensions import Final

from uriref.charsets import PCT_ENCODED, is_component_safe, is_uri_safe
from uriref.exceptions import MalformedPercentSequenceError
from uriref.regexbuilder import Choice, Literal, OneOrMore

__all__ = [
    "utf8_encode",
    "utf8_decode",
    "percent_encode",
    "percent_decode",
    "encode",
    "encode_component",
]

MAX_CODE_POINT: Final = 0x10FFFF

# A run of one or more escapes, or a % which doesn't start a valid escape
_escapes_re: Final = Choice(OneOrMore(PCT_ENCODED), Literal("%")).compile()


def utf8_encode(code_point: int) -> bytes:
    """
    Get the 1-4 byte UTF-8 encoding of a code point.

    >>> utf8_encode(ord("€")).hex()
    'e282ac'
    """
    if code_point < 0 or code_point > MAX_CODE_POINT:
        raise ValueError("Not a Unicode code point: {0!r}".format(code_point))
    if code_point < 0x80:
        return bytes((code_point,))
    if code_point < 0x800:
        return bytes((0xC0 | code_point >> 6, 0x80 | code_point & 0x3F))
    if code_point < 0x10000:
        return bytes(
            (
                0xE0 | code_point >> 12,
                0x80 | code_point >> 6 & 0x3F,
                0x80 | code_point & 0x3F,
            )
        )
    return bytes(
        (
            0xF0 | code_point >> 18,
            0x80 | code_point >> 12 & 0x3F,
            0x80 | code_point >> 6 & 0x3F,
            0x80 | code_point & 0x3F,
        )
    )


def _escaped(data: bytes) -> str:
    return "".join("%{0:02X}".format(b) for b in data)


def _sequence_length(lead: int) -> tuple[int, int]:
    """Get the length of the sequence started by lead, and its payload mask."""
    if lead < 0x80:
        return 1, 0x7F
    if lead < 0xC0:
        return 0, 0
    if lead < 0xE0:
        return 2, 0x1F
    if lead < 0xF0:
        return 3, 0x0F
    if lead < 0xF8:
        return 4, 0x07
    return 0, 0


def utf8_decode(data: bytes) -> str:
    """
    Decode a sequence of UTF-8 bytes into the code points it encodes.

    Raises:
        MalformedPercentSequenceError: If data is not valid UTF-8. The error
            message shows the bytes in their escaped form.
    """
    chars = []
    pos = 0

    while pos < len(data):
        length, mask = _sequence_length(data[pos])
        if length == 0:
            raise MalformedPercentSequenceError.from_text(
                _escaped(data), "invalid UTF-8 lead byte %{0:02X}".format(data[pos])
            )
        sequence = data[pos : pos + length]
        if len(sequence) < length:
            raise MalformedPercentSequenceError.from_text(
                _escaped(data), "truncated UTF-8 sequence"
            )

        code_point = sequence[0] & mask
        for byte in sequence[1:]:
            if byte & 0xC0 != 0x80:
                raise MalformedPercentSequenceError.from_text(
                    _escaped(data),
                    "invalid UTF-8 continuation byte %{0:02X}".format(byte),
                )
            code_point = code_point << 6 | byte & 0x3F

        if code_point > MAX_CODE_POINT:
            raise MalformedPercentSequenceError.from_text(
                _escaped(data), "UTF-8 sequence is out of the Unicode range"
            )
        chars.append(chr(code_point))
        pos += length

    return "".join(chars)


def percent_encode(char: str) -> str:
    """
    Percent-encode a single character, regardless of whether it's safe.

    >>> percent_encode(" "), percent_encode("/")
    ('%20', '%2F')
    """
    return _escaped(utf8_encode(ord(char)))


def _decode_escapes(match: re.Match[str]) -> str:
    escapes = match.group(0)
    if escapes == "%":
        raise MalformedPercentSequenceError.from_text(
            match.string, "% not followed by two hex digits"
        )
    return utf8_decode(bytes.fromhex(escapes.replace("%", "")))


def percent_decode(text: str) -> str:
    """
    Replace each run of ``%XX`` escapes in text with the characters whose
    UTF-8 encoding it spells out. Multi-byte characters may be split over
    several adjacent escapes.

    >>> percent_decode("%E2%82%AC%201")
    '€ 1'

    Raises:
        MalformedPercentSequenceError: If a ``%`` is not followed by two hex
            digits, or the escaped bytes are not valid UTF-8.
    """
    if "%" not in text:
        return text
    return _escapes_re.sub(_decode_escapes, text)


def _encode_with(is_safe: Callable[[str], bool], text: str) -> str:
    return "".join(c if is_safe(c) else percent_encode(c) for c in text)


def encode(text: str) -> str:
    """
    Percent-encode the characters of text which can't appear in a URI.

    Reserved characters like ``/``, ``?`` and ``#`` are left as they are, so
    this is suitable for encoding whole URIs or paths, but not individual
    components that may contain delimiters.
    """
    return _encode_with(is_uri_safe, text)


def encode_component(text: str) -> str:
    """
    Percent-encode everything in text other than letters, digits and
    ``-_.!~*'()``.

    >>> encode_component("a/b c")
    'a%2Fb%20c'
    """
    return _encode_with(is_component_safe, text)
