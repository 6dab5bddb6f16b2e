from enum import Enum

import pytest

from themescale.kinds import ValueKind
from themescale.theme import Theme


class Color(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class Space(Enum):
    PRIMARY = "primary"


class Bp(Enum):
    SMALL = "small"
    LARGE = "large"


def test_new_theme_is_empty():
    theme = Theme("dark")
    assert theme.name == "dark"
    assert theme.spaces_scale == []
    assert theme.media_bp_pairs == []
    assert theme.get(Color.PRIMARY, ValueKind.COLOR) is None


def test_default_name_is_empty_string():
    assert Theme().name == ""


@pytest.mark.parametrize(
    "method, attribute",
    [
        ("space_scale", "spaces_scale"),
        ("border_width_scale", "border_widths_scale"),
        ("font_size_scale", "font_sizes_scale"),
        ("font_weight_scale", "font_weights_scale"),
        ("size_scale", "sizes_scale"),
        ("line_height_scale", "line_heights_scale"),
        ("letter_spacing_scale", "letter_spacings_scale"),
        ("border_scale", "borders_scale"),
    ],
)
def test_scale_setters_store_values_in_order(method, attribute):
    values = ["a", "b", "c"]
    theme = Theme("t")
    result = getattr(theme, method)(iter(values))
    assert result is theme
    assert getattr(theme, attribute) == values


def test_scale_setter_replaces_previous_scale():
    theme = Theme("t").space_scale(["1px", "2px"]).space_scale(["8px"])
    assert theme.spaces_scale == ["8px"]


def test_breakpoint_scale_pairs_and_media_queries():
    theme = Theme("t").breakpoint_scale([600])
    assert theme.breakpoints_scale == [600]
    assert theme.media_bp_pairs == [(0, 599), (600, None)]
    assert theme.media_bp_scale == [
        "@media (min-width: 0px) and (max-width: 599px)",
        "@media (min-width: 600px)",
    ]


def test_breakpoint_scale_ranges_are_contiguous():
    bps = [320, 768, 1024, 1440]
    theme = Theme("t").breakpoint_scale(bps)
    pairs = theme.media_bp_pairs
    assert len(pairs) == len(bps) + 1
    assert len(theme.media_bp_scale) == len(pairs)
    assert pairs[0][0] == 0
    assert pairs[-1] == (1440, None)
    for (low, high), (next_low, _) in zip(pairs, pairs[1:]):
        assert high is not None and high + 1 == next_low
        assert low <= high


def test_breakpoint_scale_empty_gives_single_open_range():
    theme = Theme("t").breakpoint_scale([])
    assert theme.media_bp_pairs == [(0, None)]
    assert theme.media_bp_scale == ["@media (min-width: 0px)"]


def test_breakpoint_scale_rejects_zero():
    with pytest.raises(ValueError):
        Theme("t").breakpoint_scale([0, 100])


def test_set_and_get_color():
    theme = Theme("t").set_color(Color.PRIMARY, "#ff0000")
    assert theme.get(Color.PRIMARY, ValueKind.COLOR) == "#ff0000"
    assert theme.get(Color.SECONDARY, ValueKind.COLOR) is None


def test_kinds_are_kept_apart():
    theme = Theme("t").set_color(Color.PRIMARY, "red").set_space(Space.PRIMARY, "4px")
    assert theme.get(Color.PRIMARY, ValueKind.SPACE) is None
    assert theme.get(Space.PRIMARY, ValueKind.SPACE) == "4px"
    assert theme.get(Space.PRIMARY, ValueKind.COLOR) is None


def test_aliases_of_different_types_do_not_collide():
    theme = Theme("t").set_color(Color.PRIMARY, "red").set_color(Space.PRIMARY, "blue")
    assert theme.get(Color.PRIMARY, ValueKind.COLOR) == "red"
    assert theme.get(Space.PRIMARY, ValueKind.COLOR) == "blue"


def test_setting_again_replaces_value():
    theme = Theme("t").set_size(Color.PRIMARY, "10px").set_size(Color.PRIMARY, "20px")
    assert theme.get(Color.PRIMARY, ValueKind.SIZE) == "20px"


@pytest.mark.parametrize(
    "method, kind",
    [
        ("set_size", ValueKind.SIZE),
        ("set_shadow", ValueKind.SHADOW),
        ("set_color", ValueKind.COLOR),
        ("set_space", ValueKind.SPACE),
        ("set_font_size", ValueKind.FONT_SIZE),
        ("set_border", ValueKind.BORDER),
        ("set_border_width", ValueKind.BORDER_WIDTH),
        ("set_border_style", ValueKind.BORDER_STYLE),
        ("set_border_radius", ValueKind.BORDER_RADIUS),
        ("set_transition", ValueKind.TRANSITION),
        ("set_style", ValueKind.STYLE),
        ("set_line_height", ValueKind.LINE_HEIGHT),
        ("set_letter_spacing", ValueKind.LETTER_SPACING),
    ],
)
def test_typed_setters_bind_to_their_kind(method, kind):
    theme = Theme("t")
    assert getattr(theme, method)(Color.PRIMARY, "value") is theme
    assert theme.get(Color.PRIMARY, kind) == "value"
    assert theme.get(Color.PRIMARY, kind.value) == "value"


def test_set_breakpoint_normalises_pair():
    theme = Theme("t").set_breakpoint(Bp.SMALL, [0, 599]).set_breakpoint(Bp.LARGE, (600, None))
    assert theme.get(Bp.SMALL, ValueKind.BREAKPOINT) == (0, 599)
    assert theme.get(Bp.LARGE, ValueKind.BREAKPOINT) == (600, None)


def test_set_breakpoint_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Theme("t").set_breakpoint(Bp.SMALL, (1, 2, 3))


def test_generic_set_accepts_kind_name():
    theme = Theme("t").set("z_index", Color.PRIMARY, 5)
    assert theme.get(Color.PRIMARY, ValueKind.Z_INDEX) == 5


def test_unknown_kind_name_raises():
    with pytest.raises(ValueError):
        Theme("t").set("no-such-kind", Color.PRIMARY, 1)


def test_general_get_with_arbitrary_key():
    theme = Theme("t")
    theme.aliases.setdefault("custom", {})[Color.PRIMARY] = 42
    assert theme.general_get(Color.PRIMARY, "custom") == 42
    assert theme.general_get(Color.SECONDARY, "custom") is None
    assert theme.general_get(Color.PRIMARY, "other") is None


def test_general_get_sees_typed_values():
    theme = Theme("t").set_color(Color.PRIMARY, "red")
    assert theme.general_get(Color.PRIMARY, ValueKind.COLOR) == "red"


def test_scale_value_uses_property_scale():
    theme = Theme("t").space_scale(["0", "4px", "8px"]).size_scale(["10%", "50%"])
    assert theme.scale_value("padding-left", 2) == "8px"
    assert theme.scale_value("CssMarginTop", 1) == "4px"
    assert theme.scale_value("max_width", 0) == "10%"


def test_scale_value_colors_and_shadows():
    theme = Theme("t")
    theme.colors_scale = ["red", "blue"]
    theme.shadows_scale = ["none"]
    assert theme.scale_value("background-color", 1) == "blue"
    assert theme.scale_value("box-shadow", 0) == "none"


def test_scale_value_out_of_range():
    theme = Theme("t").space_scale(["0"])
    with pytest.raises(IndexError):
        theme.scale_value("padding", 1)
    with pytest.raises(IndexError):
        theme.scale_value("padding", -1)


def test_scale_value_unknown_property():
    with pytest.raises(KeyError):
        Theme("t").scale_value("display", 0)