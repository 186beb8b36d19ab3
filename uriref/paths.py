"""
Path manipulation used when resolving references, implementing sections
5.2.3 (Merge Paths) and 5.2.4 (Remove Dot Segments) of RFC 3986.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uriref.uri import Uri

__all__ = ["remove_dot_segments", "merge_paths"]


def remove_dot_segments(path: str) -> str:
    """
    Remove ``.`` and ``..`` segments from path.

    Works over the ``/`` separated segments of the path: ``.`` is dropped,
    ``..`` drops itself and the segment before it (if any). A leading ``/``
    is never removed, so ``..`` can't climb above the root, and a path ending
    in a dot segment keeps a trailing ``/``.

    >>> remove_dot_segments("/a/b/c/./../../g")
    '/a/g'
    >>> remove_dot_segments("mid/content=5/../6")
    'mid/6'
    >>> remove_dot_segments("/b/c/..")
    '/b/'
    """
    is_absolute = path.startswith("/")
    segments = (path[1:] if is_absolute else path).split("/")
    output: list[str] = []

    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if output:
                output.pop()
        else:
            output.append(segment)

    # "a/b/." is the directory a/b/, not the file a/b
    if segments[-1] in (".", ".."):
        output.append("")

    return ("/" if is_absolute else "") + "/".join(output)


def merge_paths(base: Uri, other: Uri) -> str:
    """
    Combine the path of a relative reference with the path of the base URI
    it's being resolved against, and normalise the result.
    """
    if other.has_absolute_path:
        path = other.path
    elif base.has_authority and base.path == "":
        path = "/" + other.path
    else:
        directory = base.path[: base.path.rfind("/") + 1] or "/"
        path = directory + other.path
    return remove_dot_segments(path)
