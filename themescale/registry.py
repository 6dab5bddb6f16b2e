"""The application's loaded themes and lookups that search across them in order."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, TypeVar

from themescale.kinds import ValueKind
from themescale.theme import BreakpointPair, Theme

R = TypeVar("R")


class ThemeNotFoundError(LookupError):
    """Raised when no loaded theme carries the requested name."""


class ThemeValueNotFoundError(LookupError):
    """Raised when no loaded theme binds an alias for the requested kind."""


class ThemeRegistry:
    """An ordered collection of themes; earlier themes take precedence in lookups."""

    def __init__(self, themes: Iterable[Theme] = ()) -> None:
        self._themes: list[Theme] = list(themes)

    def __iter__(self) -> Iterator[Theme]:
        return iter(tuple(self._themes))

    def __len__(self) -> int:
        return len(self._themes)

    def __repr__(self) -> str:
        names = ", ".join(repr(t.name) for t in self._themes)
        return f"{type(self).__name__}([{names}])"

    @property
    def themes(self) -> tuple[Theme, ...]:
        """The loaded themes, in precedence order."""
        return tuple(self._themes)

    def load_app_themes(self, factories: Iterable[Callable[[], Theme]]) -> None:
        """Build a theme from each factory and append it, in order."""
        for factory in factories:
            self._themes.append(factory())

    def change_theme_with_name(self, name: str, theme: Theme) -> Theme:
        """Replace the first theme called ``name`` with ``theme`` and return the old one.

        Raises ThemeNotFoundError when no loaded theme has that name.
        """
        for position, existing in enumerate(self._themes):
            if existing.name == name:
                self._themes[position] = theme
                return existing
        raise ThemeNotFoundError(f"no loaded theme is named {name!r}")

    def with_themes(self, action: Callable[[tuple[Theme, ...]], R]) -> R:
        """Call ``action`` with the loaded themes, in order, and return its result."""
        return action(tuple(self._themes))

    def find_value(self, alias: Hashable, kind: ValueKind | str) -> Any:
        """Return the value bound to ``alias`` in the first theme that defines it.

        Raises ThemeValueNotFoundError when no theme binds the alias for ``kind``.
        """
        for theme in self._themes:
            value = theme.get(alias, kind)
            if value is not None:
                return value
        kind_name = kind.value if isinstance(kind, ValueKind) else kind
        raise ThemeValueNotFoundError(
            f"no loaded theme defines a {kind_name} value for alias {alias!r}"
        )

    def style(self, alias: Hashable) -> Any:
        """Return the style bound to ``alias`` in the first theme that defines it."""
        return self.find_value(alias, ValueKind.STYLE)

    def breakpoint_pair(self, alias: Hashable) -> BreakpointPair:
        """Return the ``(lower, upper)`` pixel range bound to a breakpoint alias."""
        return self.find_value(alias, ValueKind.BREAKPOINT)


_APP_THEMES = ThemeRegistry()


def app_themes() -> ThemeRegistry:
    """Return the application-wide theme registry."""
    return _APP_THEMES


def load_app_themes(factories: Iterable[Callable[[], Theme]]) -> None:
    """Build and append themes to the application-wide registry."""
    _APP_THEMES.load_app_themes(factories)


def change_theme_with_name(name: str, theme: Theme) -> Theme:
    """Replace a named theme in the application-wide registry."""
    return _APP_THEMES.change_theme_with_name(name, theme)


def with_themes(action: Callable[[tuple[Theme, ...]], R]) -> R:
    """Call ``action`` with the application-wide themes and return its result."""
    return _APP_THEMES.with_themes(action)