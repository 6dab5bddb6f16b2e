# themescale

Themes for CSS-style values. A theme holds named aliases, ordered scales and
responsive breakpoints, and a registry keeps the list of active themes.

## Install

```
pip install themescale
```

## Themes

A `Theme` (from `themescale.theme`) is a dataclass with a `name` and two kinds of content.

- **Aliases.** These are named values grouped by kind (`ValueKind` from `themescale.kinds`). The kinds include colour, space, size, border, border width, border style, border radius, shadow, font size, line height, letter spacing, transition, style and breakpoint.
  - You bind them with `set_color`, `set_space`, `set_size` and the other `set_*` methods, or with the general `set(kind, alias, value)`.
  - Binding an alias again replaces the earlier value.
  - `get(alias, kind)` returns the bound value, or `None` if there is none.
  - `set_breakpoint` takes a `(lower, upper)` pixel pair. `upper` may be `None`.
- **Scales.** These are ordered lists of values that you reach by position.
  - You set them with `space_scale`, `size_scale`, `font_size_scale`, `font_weight_scale`, `line_height_scale`, `letter_spacing_scale`, `border_scale` and `border_width_scale`.
  - `breakpoint_scale` also derives each breakpoint's pixel range into `media_bp_pairs` and its `@media` query into `media_bp_scale`. Breakpoints must be positive, otherwise it raises `ValueError`.

Builder methods change the theme in place and return it, so calls chain:

```python
from themescale.kinds import ValueKind
from themescale.theme import Theme

theme = (
    Theme("light")
    .set_color("primary", "#0055ff")
    .set_space("gutter", "16px")
    .space_scale(["0", "4px", "8px", "16px"])
    .breakpoint_scale([600, 960])
)

theme.get("primary", ValueKind.COLOR)      # "#0055ff"
theme.scale_value("padding_left", 2)       # "8px", taken from the space scale
theme.media_bp_pairs                       # [(0, 599), (600, 959), (960, None)]
```

`scale_value` raises `KeyError` for a property that has no themed scale. It raises `IndexError` when the scale is too short.

## Which scale a property uses

`themescale.kinds` maps CSS property names to the kind of value they take and to the scale they read from. Property names may be written in kebab, snake or camel case.

- `kind_for_property` returns the kind of value.
- `scale_name_for_property` returns the scale name.
- `binding_for_property` returns both as a `PropertyBinding`.
- `properties_for_kind` lists every property that takes a given kind.

An unknown property raises `KeyError`.

## Registry

`themescale.registry` provides `ThemeRegistry`, an ordered collection of themes in which earlier themes take precedence. A shared instance is returned by `app_themes()`. These module-level functions act on the shared instance:

- `load_app_themes(factories)` calls each factory and appends the theme it returns.
- `change_theme_with_name(name, theme)` replaces the first theme with that name and returns the old one. If no loaded theme has the name, it raises `ThemeNotFoundError`.
- `with_themes(action)` calls `action` with the tuple of loaded themes and returns its result.

A `ThemeRegistry` also has three lookup methods:

- `find_value(alias, kind)`
- `style(alias)`
- `breakpoint_pair(alias)`

Each returns the value from the first theme that binds the alias. If no theme binds it, each raises `ThemeValueNotFoundError`.

## Breakpoints

`themescale.breakpoints` decides whether content is shown at the current viewport. Each helper resolves a breakpoint alias to its `(lower, upper)` range and asks a `matches_media` callable whether a media query matches. The callable takes the query string and returns a bool. Content is a callable, and it is only called when it is shown. When the content is hidden, the helpers return `None`.

The helpers use the shared registry unless you pass `registry=`:

- `only` shows the content within the range.
- `only_and_above` shows it from the range's lower bound up.
- `only_and_below` shows it up to the range's upper bound. It always shows the content for an open-ended range.
- `except_` shows it outside the range. It always shows the content for an open-ended range.
- `at_breakpoint_and_above` returns a bool.

```python
from themescale.breakpoints import only_and_above

shown = only_and_above("tablet", lambda: "sidebar", matches_media=my_matcher)
```

## What it does not do

The package does not parse, validate or render CSS. Alias and scale values are stored as given. It does not turn themes into stylesheets. It has no view of a browser, so media queries are answered only by the `matches_media` callable you supply.

## Tests

```
pip install -e .[test]
pytest
```