"""
Path segment resolution for the ``{% path %}`` tag.

A page URL such as ``/services/web-design/`` explodes into its slugs,
optionally led by an imaginary ``home`` slug when the site root has the
slug ``/``. Callers either get all slugs joined by spaces (handy as a list
of HTML classes) or a single slug selected with ``at``.
"""

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+(?:_\d+)*)")


def to_int(value) -> int:
    """
    Loosely convert a value to an integer.

    Integers pass through. Strings yield their leading integer prefix
    ("3rd" -> 3, " -2" -> -2); anything without one yields 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1).replace("_", ""))


def split_path(url_path) -> list[str]:
    """Split a URL path on ``/``, dropping empty pieces."""
    return [part for part in str(url_path or "").split("/") if part]


def normalize_index(n: int) -> int:
    # Levels are 1-based, but 0 also grabs the root. Negative counts from the end.
    if n > 0:
        return n - 1
    return n


def segment_at(segments: list[str], at) -> str:
    """Return the segment selected by ``at``, or "" when out of range."""
    index = normalize_index(to_int(at))
    try:
        return segments[index]
    except IndexError:
        return ""


def resolve(url_path, root_slug_is_slash: bool, at=None, home: str = "home") -> str:
    """
    Resolve the ``{% path %}`` output for a URL.

    Args:
        url_path: Slash-delimited page URL
        root_slug_is_slash: Whether the site root's slug is ``/``; if so the
            ``home`` segment is prepended
        at: Optional selector. ``None`` returns every segment joined by a
            space; otherwise the 1-based (or negative) segment is returned
        home: Name of the implicit root segment

    Returns:
        The joined segments, the selected segment, or "" when out of range
    """
    segments = split_path(url_path)
    if root_slug_is_slash:
        segments.insert(0, home)

    if at is None:
        return " ".join(segments)
    return segment_at(segments, at)
