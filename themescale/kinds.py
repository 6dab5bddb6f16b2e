"""Kinds of themed values and the CSS properties that draw on each of them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class ValueKind(Enum):
    """A family of theme values that aliases can be bound to."""

    BORDER = "border"
    BORDER_WIDTH = "border_width"
    BORDER_STYLE = "border_style"
    SPACE = "space"
    LINE_HEIGHT = "line_height"
    LETTER_SPACING = "letter_spacing"
    BORDER_RADIUS = "border_radius"
    FONT = "font"
    FONT_SIZE = "font_size"
    SIZE = "size"
    TRANSITION = "transition"
    Z_INDEX = "z_index"
    DISPLAY = "display"
    COLOR = "color"
    SHADOW = "shadow"
    STYLE = "style"
    BREAKPOINT = "breakpoint"


@dataclass(frozen=True)
class PropertyBinding:
    """Ties a CSS property to the kind of value it takes and the theme scale it indexes."""

    property_name: str
    kind: ValueKind
    scale_name: str


def _bindings(kind: ValueKind, scale_name: str, *names: str) -> list[PropertyBinding]:
    return [PropertyBinding(name, kind, scale_name) for name in names]


_BINDINGS: tuple[PropertyBinding, ...] = tuple(
    _bindings(ValueKind.FONT_SIZE, "font_sizes_scale", "font-size")
    + _bindings(
        ValueKind.SIZE,
        "sizes_scale",
        "width",
        "min-width",
        "max-width",
        "height",
        "min-height",
        "max-height",
    )
    + _bindings(
        ValueKind.SPACE,
        "spaces_scale",
        "padding",
        "padding-left",
        "padding-right",
        "padding-top",
        "padding-bottom",
        "margin",
        "margin-left",
        "margin-right",
        "margin-top",
        "margin-bottom",
        "grid-gap",
        "grid-column-gap",
        "grid-row-gap",
        "gap",
        "column-gap",
        "row-gap",
    )
    + _bindings(
        ValueKind.BORDER,
        "borders_scale",
        "border",
        "border-left",
        "border-right",
        "border-top",
        "border-bottom",
        "outline",
        "outline-left",
        "outline-right",
        "outline-top",
        "outline-bottom",
    )
    + _bindings(
        ValueKind.BORDER_STYLE,
        "border_styles_scale",
        "border-left-style",
        "border-right-style",
        "border-top-style",
        "border-bottom-style",
        "outline-style",
        "outline-left-style",
        "outline-right-style",
        "outline-top-style",
        "outline-bottom-style",
    )
    + _bindings(
        ValueKind.BORDER_WIDTH,
        "border_widths_scale",
        "border-left-width",
        "border-right-width",
        "border-top-width",
        "border-bottom-width",
        "outline-width",
        "outline-left-width",
        "border-width",
        "outline-right-width",
        "outline-top-width",
        "outline-bottom-width",
    )
    + _bindings(
        ValueKind.BORDER_RADIUS,
        "radii_scale",
        "border-top-right-radius",
        "border-top-left-radius",
        "border-bottom-right-radius",
        "border-bottom-left-radius",
    )
    + _bindings(
        ValueKind.COLOR,
        "colors_scale",
        "color",
        "background-color",
        "text-decoration-color",
        "border-color",
        "border-top-color",
        "border-bottom-color",
        "border-right-color",
        "border-left-color",
        "outline-color",
        "outline-top-color",
        "outline-bottom-color",
        "outline-right-color",
        "outline-left-color",
        "fill",
        "stroke",
    )
    + _bindings(ValueKind.SHADOW, "shadows_scale", "box-shadow", "text-shadow")
)

_BY_NAME: dict[str, PropertyBinding] = {b.property_name: b for b in _BINDINGS}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


@lru_cache(maxsize=None)
def _normalise(property_name: str) -> str:
    name = property_name.strip()
    if name.startswith("Css") and len(name) > 3 and name[3].isupper():
        name = name[3:]
    name = _CAMEL_BOUNDARY.sub("-", name)
    return name.replace("_", "-").lower()


def binding_for_property(property_name: str) -> PropertyBinding:
    """Return the binding of a property given in kebab, snake or camel case.

    Raises KeyError when the property takes no themed value.
    """
    try:
        return _BY_NAME[_normalise(property_name)]
    except KeyError:
        raise KeyError(f"property {property_name!r} has no themed value") from None


def kind_for_property(property_name: str) -> ValueKind:
    """Return the kind of theme value a property takes."""
    return binding_for_property(property_name).kind


def scale_name_for_property(property_name: str) -> str:
    """Return the name of the theme scale a property indexes into."""
    return binding_for_property(property_name).scale_name


def properties_for_kind(kind: ValueKind | str) -> tuple[str, ...]:
    """Return, in declaration order, the properties that take values of ``kind``."""
    kind = ValueKind(kind)
    return tuple(b.property_name for b in _BINDINGS if b.kind is kind)