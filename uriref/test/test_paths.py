from __future__ import annotations

import pytest

from uriref.paths import merge_paths, remove_dot_segments
from uriref.uri import Uri


@pytest.mark.parametrize(
    "path,expected",
    [
        ("", ""),
        ("/", "/"),
        ("a", "a"),
        ("/a/b/c/./../../g", "/a/g"),
        ("mid/content=5/../6", "mid/6"),
        ("/b/c/g/", "/b/c/g/"),
        ("/b/c/.", "/b/c/"),
        ("/b/c/..", "/b/"),
        ("/b/c/../..", "/"),
        (".", ""),
        ("..", ""),
        ("./", ""),
        ("/..", "/"),
        ("/../g", "/g"),
        # Excess .. segments stop at the root
        ("/b/c/../../../../g", "/g"),
        ("../../g", "g"),
        ("g.", "g."),
        ("..g/.g", "..g/.g"),
        # Empty segments are kept
        ("a//b", "a//b"),
        ("/a//../b", "/a/b"),
    ],
)
def test_remove_dot_segments(path: str, expected: str) -> None:
    assert remove_dot_segments(path) == expected


@pytest.mark.parametrize(
    "path",
    [
        "",
        "/",
        "/a/b/c/./../../g",
        "./a/../..",
        "..//x",
        ".//",
        "/a//.././/b/",
        "a/./b/../../../c/.",
    ],
)
def test_remove_dot_segments_is_idempotent(path: str) -> None:
    once = remove_dot_segments(path)
    assert remove_dot_segments(once) == once


@pytest.mark.parametrize(
    "base,other,expected",
    [
        # Absolute paths replace the base path
        (Uri(scheme="x", host="a", path="/b/c"), Uri(path="/d/./e"), "/d/e"),
        # A base with an authority but no path acts as if its path was /
        (Uri(scheme="x", host="a"), Uri(path="g"), "/g"),
        (Uri(scheme="x", host="a"), Uri(path="./g/.."), "/"),
        # Otherwise the last segment of the base path is replaced
        (Uri(scheme="x", host="a", path="/b/c/d;p"), Uri(path="g"), "/b/c/g"),
        (Uri(scheme="x", host="a", path="/b/c/"), Uri(path="../g"), "/b/g"),
        (Uri(scheme="x", path="b/c"), Uri(path="g"), "b/g"),
        # A base path without any / is treated as /
        (Uri(scheme="z", path="relpath"), Uri(path="g"), "/g"),
        (Uri(scheme="z"), Uri(path="g"), "/g"),
    ],
)
def test_merge_paths(base: Uri, other: Uri, expected: str) -> None:
    assert merge_paths(base, other) == expected
