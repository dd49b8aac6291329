"""
Path Canonicalizer

Collapses "." and ".." segments of a joined path without touching the
filesystem. The path is split on the separator and rebuilt segment by
segment:

- "." after a separator is dropped, including at the end ("/a/." -> "/a")
- ".." between two separators deletes the preceding segment
- one trailing separator is stripped (the root stays "/")

A ".." that ends the path has no separator after it and is kept as is
("/a/b/.." stays "/a/b/..", "/.." stays "/.."). Segments with no
separator in front of them ("./a", "../a") are kept verbatim, and so is a
".." with no preceding segment left to delete ("a/../../b" -> "../b").
At the root, "/../a" collapses to "/a". Doubled separators are preserved.

Relative input keeps its relative form: "a/../b" -> "b", never "/b".
A relative path that collapses to nothing becomes ".".
"""

from typing import List

from .platform import PathPolicy, DEFAULT_POLICY
from ..utils.config import CURRENT_DIR, PARENT_DIR


def canonicalize(path: str, policy: PathPolicy = DEFAULT_POLICY) -> str:
    """Return path with "." and ".." segments resolved. Idempotent, never raises."""
    sep = policy.separator
    segments = path.split(sep)
    rooted = policy.is_absolute(path)
    out: List[str] = [segments[0]]
    last = len(segments) - 1

    for index, segment in enumerate(segments[1:], start=1):
        if segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR and index < last:
            _pop_segment(out, rooted)
        else:
            out.append(segment)

    if len(out) > 1 and out[-1] == "":
        out.pop()

    result = sep.join(out)
    if not result and path:
        return sep if rooted else CURRENT_DIR
    return result


def _pop_segment(out: List[str], rooted: bool) -> None:
    """Delete the segment a ".." refers to, or keep the ".." when there is none."""
    if rooted and len(out) == 1:
        # ".." of the root is the root
        return
    if not out or out[-1] == PARENT_DIR or (len(out) == 1 and out[0] == CURRENT_DIR):
        out.append(PARENT_DIR)
        return
    out.pop()
