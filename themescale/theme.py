"""A named theme: ordered value scales plus alias lookups keyed by value kind."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from themescale.kinds import ValueKind, scale_name_for_property

BreakpointPair = Tuple[int, Optional[int]]


def _as_kind(kind: ValueKind | str) -> ValueKind:
    return kind if isinstance(kind, ValueKind) else ValueKind(kind)


@dataclass
class Theme:
    """Scales of CSS values and aliased values, grouped by the kind of value they hold.

    Builder methods change the theme in place and return it so calls can be chained.
    """

    name: str = ""
    spaces_scale: list[Any] = field(default_factory=list)
    font_sizes_scale: list[Any] = field(default_factory=list)
    fonts_scale: list[Any] = field(default_factory=list)
    font_weights_scale: list[Any] = field(default_factory=list)
    line_heights_scale: list[Any] = field(default_factory=list)
    letter_spacings_scale: list[Any] = field(default_factory=list)
    sizes_scale: list[Any] = field(default_factory=list)
    borders_scale: list[Any] = field(default_factory=list)
    border_styles_scale: list[Any] = field(default_factory=list)
    border_widths_scale: list[Any] = field(default_factory=list)
    breakpoints_scale: list[int] = field(default_factory=list)
    media_bp_scale: list[str] = field(default_factory=list)
    media_bp_pairs: list[BreakpointPair] = field(default_factory=list)
    radii_scale: list[Any] = field(default_factory=list)
    colors_scale: list[Any] = field(default_factory=list)
    shadows_scale: list[Any] = field(default_factory=list)
    aliases: dict[Hashable, dict[Hashable, Any]] = field(default_factory=dict, repr=False)

    # -- scales ---------------------------------------------------------

    def space_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the space scale."""
        self.spaces_scale = list(scale)
        return self

    def border_width_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the border width scale."""
        self.border_widths_scale = list(scale)
        return self

    def font_size_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the font size scale."""
        self.font_sizes_scale = list(scale)
        return self

    def font_weight_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the font weight scale."""
        self.font_weights_scale = list(scale)
        return self

    def size_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the size scale."""
        self.sizes_scale = list(scale)
        return self

    def line_height_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the line height scale."""
        self.line_heights_scale = list(scale)
        return self

    def letter_spacing_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the letter spacing scale."""
        self.letter_spacings_scale = list(scale)
        return self

    def border_scale(self, scale: Iterable[Any]) -> Theme:
        """Replace the border scale."""
        self.borders_scale = list(scale)
        return self

    def breakpoint_scale(self, scale: Iterable[int]) -> Theme:
        """Set the breakpoints and derive the width ranges and media queries between them.

        Each breakpoint starts a new range; the range before it ends one pixel earlier.
        The last range is open at the top.
        """
        breakpoints = [int(bp) for bp in scale]
        if any(bp < 1 for bp in breakpoints):
            raise ValueError("breakpoints must be positive pixel widths")

        pairs: list[BreakpointPair] = []
        lower = 0
        for bp in breakpoints:
            pairs.append((lower, bp - 1))
            lower = bp
        pairs.append((lower, None))

        self.breakpoints_scale = breakpoints
        self.media_bp_pairs = pairs
        self.media_bp_scale = [
            f"@media (min-width: {low}px) and (max-width: {high}px)"
            if high is not None
            else f"@media (min-width: {low}px)"
            for low, high in pairs
        ]
        return self

    def scale_value(self, property_name: str, index: int) -> Any:
        """Return entry ``index`` of the scale that ``property_name`` draws from.

        Raises KeyError for a property without a themed scale and IndexError
        when the scale is too short.
        """
        scale = getattr(self, scale_name_for_property(property_name))
        if not 0 <= index < len(scale):
            raise IndexError(
                f"theme {self.name!r} has no entry {index} for property {property_name!r}"
            )
        return scale[index]

    # -- aliases --------------------------------------------------------

    def general_get(self, alias: Hashable, kind: Hashable) -> Any | None:
        """Return the value bound to ``alias`` under any lookup key, or None."""
        return self.aliases.get(kind, {}).get(alias)

    def get(self, alias: Hashable, kind: ValueKind | str) -> Any | None:
        """Return the value of the given kind bound to ``alias``, or None."""
        return self.general_get(alias, _as_kind(kind))

    def set(self, kind: ValueKind | str, alias: Hashable, value: Any) -> Theme:
        """Bind ``alias`` to ``value`` for the given kind, replacing any earlier binding."""
        self.aliases.setdefault(_as_kind(kind), {})[alias] = value
        return self

    def set_size(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.SIZE, alias, value)

    def set_shadow(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.SHADOW, alias, value)

    def set_color(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.COLOR, alias, value)

    def set_space(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.SPACE, alias, value)

    def set_font_size(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.FONT_SIZE, alias, value)

    def set_border(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.BORDER, alias, value)

    def set_border_width(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.BORDER_WIDTH, alias, value)

    def set_border_style(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.BORDER_STYLE, alias, value)

    def set_border_radius(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.BORDER_RADIUS, alias, value)

    def set_transition(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.TRANSITION, alias, value)

    def set_style(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.STYLE, alias, value)

    def set_breakpoint(self, alias: Hashable, value: tuple[int, int | None]) -> Theme:
        """Bind ``alias`` to a ``(lower, upper)`` pixel range; ``upper`` may be None."""
        lower, upper = value
        pair: BreakpointPair = (int(lower), None if upper is None else int(upper))
        return self.set(ValueKind.BREAKPOINT, alias, pair)

    def set_line_height(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.LINE_HEIGHT, alias, value)

    def set_letter_spacing(self, alias: Hashable, value: Any) -> Theme:
        return self.set(ValueKind.LETTER_SPACING, alias, value)