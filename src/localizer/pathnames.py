"""Helpers for manipulating the segments of URL pathnames."""

from __future__ import annotations

from typing import List, Optional

SEPARATOR = "/"
ROOT = "/"


def split_pathname(pathname: str) -> List[str]:
    """Split ``pathname`` on ``/``; a leading slash yields an empty first segment."""

    return pathname.split(SEPARATOR)


def join_segments(segments: List[str]) -> str:
    return SEPARATOR.join(segments)


def first_segment(pathname: str) -> Optional[str]:
    """Return the segment right after the leading ``/`` or ``None`` when there is none."""

    segments = split_pathname(pathname)
    if len(segments) < 2:
        return None
    return segments[1]


def remove_first_segment(pathname: str) -> str:
    """Drop the first path component, keeping ``/`` as the result for a single-segment path."""

    segments = split_pathname(pathname)
    if len(segments) < 2:
        return pathname
    del segments[1]
    return join_segments(segments) or ROOT


def insert_first_segment(pathname: str, segment: str) -> str:
    segments = split_pathname(pathname)
    segments.insert(1, segment)
    return join_segments(segments)


__all__ = [
    "ROOT",
    "SEPARATOR",
    "first_segment",
    "insert_first_segment",
    "join_segments",
    "remove_first_segment",
    "split_pathname",
]
