from __future__ import annotations

import pytest

from uriref.charsets import URI_SAFE
from uriref.codec import (
    encode,
    encode_component,
    percent_decode,
    percent_encode,
    utf8_decode,
    utf8_encode,
)
from uriref.exceptions import MalformedPercentSequenceError, UriError


@pytest.mark.parametrize(
    "char,expected",
    [
        (" ", "%20"),
        ("/", "%2F"),
        ("%", "%25"),
        ("\x00", "%00"),
        ("é", "%C3%A9"),  # é
        ("€", "%E2%82%AC"),  # €
        ("\U0001f600", "%F0%9F%98%80"),  # 😀
    ],
)
def test_percent_encode(char: str, expected: str) -> None:
    assert percent_encode(char) == expected


@pytest.mark.parametrize(
    "code_point", [0x00, 0x7F, 0x80, 0x7FF, 0x800, 0xFFFF, 0x10000, 0x10FFFF]
)
def test_utf8_encode_matches_python_codec(code_point: int) -> None:
    assert utf8_encode(code_point) == chr(code_point).encode("utf-8")


@pytest.mark.parametrize("code_point", [-1, 0x110000])
def test_utf8_encode_rejects_non_code_points(code_point: int) -> None:
    with pytest.raises(ValueError):
        utf8_encode(code_point)


def test_utf8_decode_reads_sequences_of_every_length() -> None:
    text = "aé€\U0001f600z"
    assert utf8_decode(text.encode("utf-8")) == text


@pytest.mark.parametrize(
    "data",
    [
        b"\xc3",  # 2 byte sequence missing its continuation byte
        b"\xe2\x82",  # 3 byte sequence missing its last byte
        b"\xf0\x9f\x98",
        b"\x80",  # stray continuation byte
        b"\xc3\x41",  # lead byte followed by ASCII
        b"\xff",
        b"\xf7\xbf\xbf\xbf",  # beyond U+10FFFF
    ],
)
def test_utf8_decode_rejects_malformed_sequences(data: bytes) -> None:
    with pytest.raises(MalformedPercentSequenceError):
        utf8_decode(data)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", ""),
        ("abc", "abc"),
        ("a%20b", "a b"),
        ("%2f%2F", "//"),
        ("%E2%82%AC", "€"),
        ("price:%E2%82%AC5", "price:€5"),
        ("%F0%9F%98%80%F0%9F%98%80", "\U0001f600\U0001f600"),
        ("%C3%A9t%C3%A9", "été"),
        ("%25XX", "%XX"),
    ],
)
def test_percent_decode(text: str, expected: str) -> None:
    assert percent_decode(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "%",
        "abc%",
        "%2",
        "%zz",
        "%G0",
        "%C3",  # truncated multi-byte sequence
        "%C3x%A9",  # multi-byte sequence interrupted by a literal char
        "%A9",
    ],
)
def test_percent_decode_rejects_malformed_escapes(text: str) -> None:
    with pytest.raises(MalformedPercentSequenceError):
        percent_decode(text)


def test_malformed_percent_sequence_error_is_catchable_as_uri_error() -> None:
    with pytest.raises(UriError, match="%zz"):
        percent_decode("a%zz")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", ""),
        ("http://example.com/a b?x=1&y=2#top", "http://example.com/a%20b?x=1&y=2#top"),
        ("[::1]", "%5B::1%5D"),
        ("100%", "100%25"),
        ('<"{}|\\^`>', "%3C%22%7B%7D%7C%5C%5E%60%3E"),
        ("café", "caf%C3%A9"),
    ],
)
def test_encode(text: str, expected: str) -> None:
    assert encode(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a/b c", "a%2Fb%20c"),
        ("k=v&k2=v2", "k%3Dv%26k2%3Dv2"),
        ("-_.!~*'()", "-_.!~*'()"),
        ("?#[]@:$,;+", "%3F%23%5B%5D%40%3A%24%2C%3B%2B"),
        ("€", "%E2%82%AC"),
    ],
)
def test_encode_component(text: str, expected: str) -> None:
    assert encode_component(text) == expected


SAFE_TEXT = "".join(URI_SAFE.characters())
UNICODE_TEXT = "Hello, wörld! 50% off €\U0001f600 /a?b#c\n\t\x00\ud800"


@pytest.mark.parametrize("text", ["", SAFE_TEXT, SAFE_TEXT[::-1]])
def test_decode_inverts_encode_for_safe_text(text: str) -> None:
    assert encode(text) == text
    assert percent_decode(encode(text)) == text


@pytest.mark.parametrize("text", ["", SAFE_TEXT, UNICODE_TEXT, "%%%", "%41"])
def test_decode_inverts_encode_component(text: str) -> None:
    assert percent_decode(encode_component(text)) == text


def test_encoded_text_only_contains_safe_characters() -> None:
    encoded = encode(UNICODE_TEXT)
    assert all(c in URI_SAFE or c == "%" for c in encoded)
