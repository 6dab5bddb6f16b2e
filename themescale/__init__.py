"""Theme aliases, value scales, a theme registry and breakpoint helpers for CSS-style properties."""

__version__ = "0.1.0"
__all__ = ["kinds", "theme", "registry", "breakpoints"]