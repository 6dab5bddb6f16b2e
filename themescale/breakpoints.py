"""Render content only when the viewport falls inside a themed breakpoint range.

A breakpoint alias resolves through the theme registry to a ``(lower, upper)``
pixel range. ``upper`` is None for an open-ended range. The caller supplies
``matches_media``, which reports whether a CSS media query currently matches.
Content is passed as a callable and is called only when it is to be shown.
When it is hidden, the functions return None.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Optional, TypeVar

from themescale.registry import ThemeRegistry, app_themes
from themescale.theme import BreakpointPair

T = TypeVar("T")

MediaMatcher = Callable[[str], bool]


def _pair(bp: Hashable, registry: Optional[ThemeRegistry]) -> BreakpointPair:
    return (registry if registry is not None else app_themes()).breakpoint_pair(bp)


def _min_width(px: int) -> str:
    return f"(min-width: {px}px)"


def _max_width(px: int) -> str:
    return f"(max-width: {px}px)"


def only_and_below(
    bp: Hashable,
    content: Callable[[], T],
    matches_media: MediaMatcher,
    registry: Optional[ThemeRegistry] = None,
) -> Optional[T]:
    """Show ``content`` at breakpoint ``bp`` and at every narrower width."""
    _lower, higher = _pair(bp, registry)
    if higher is None or matches_media(_max_width(higher)):
        return content()
    return None


def at_breakpoint_and_above(
    bp: Hashable,
    matches_media: MediaMatcher,
    registry: Optional[ThemeRegistry] = None,
) -> bool:
    """Report whether the viewport is at least as wide as breakpoint ``bp`` starts."""
    lower, _higher = _pair(bp, registry)
    return bool(matches_media(_min_width(lower)))


def only_and_above(
    bp: Hashable,
    content: Callable[[], T],
    matches_media: MediaMatcher,
    registry: Optional[ThemeRegistry] = None,
) -> Optional[T]:
    """Show ``content`` at breakpoint ``bp`` and at every wider width."""
    lower, _higher = _pair(bp, registry)
    if matches_media(_min_width(lower)):
        return content()
    return None


def only(
    bp: Hashable,
    content: Callable[[], T],
    matches_media: MediaMatcher,
    registry: Optional[ThemeRegistry] = None,
) -> Optional[T]:
    """Show ``content`` only while the viewport lies within breakpoint ``bp``."""
    lower, higher = _pair(bp, registry)
    if higher is None:
        query = _min_width(lower)
    else:
        query = f"{_min_width(lower)} and {_max_width(higher)}"
    if matches_media(query):
        return content()
    return None


def except_(
    bp: Hashable,
    content: Callable[[], T],
    matches_media: MediaMatcher,
    registry: Optional[ThemeRegistry] = None,
) -> Optional[T]:
    """Show ``content`` outside breakpoint ``bp``.

    An open-ended breakpoint always shows the content.
    """
    lower, higher = _pair(bp, registry)
    if higher is None:
        return content()
    if matches_media(f"{_max_width(lower)} and {_max_width(higher)}") or matches_media(
        _min_width(higher)
    ):
        return content()
    return None