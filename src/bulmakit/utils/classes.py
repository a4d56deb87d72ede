"""CSS class composition for Bulma helpers and custom classes.

:class:`ClassBuilder` holds every helper modifier an element can carry and
turns them into an ordered list of class tokens with :meth:`ClassBuilder.build`.
The builder is immutable: every ``with_*``/``without_*``/``is_*`` call returns
an updated copy, so a partially configured builder can be shared and extended.

Example::

    tokens = (
        ClassBuilder()
        .with_text_color(TextColor.PRIMARY)
        .with_display(Display.FLEX)
        .with_viewport_display(Display.FLEX, Viewport.DESKTOP)
        .is_relative(True)
        .build()
    )
    class_attr(tokens)  # "has-text-primary is-flex is-flex-desktop is-relative"

Set-valued fields (viewport pairs, decorations, margins, paddings) keep their
members in insertion order and ignore duplicates. The order of tokens inside
one such segment is not guaranteed beyond that; use
``ComposeConfig(token_order=TokenOrder.SORTED)`` for byte-stable output.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from enum import StrEnum
from typing import Any, TypeVar

from bulmakit.config import DEFAULT_CONFIG, ComposeConfig, TokenOrder
from bulmakit.errors import ConfigError
from bulmakit.helpers import (
    AlignContent,
    AlignItems,
    AlignSelf,
    BackgroundColor,
    Color,
    Direction,
    Display,
    FlexDirection,
    FlexShrinkGrowFactor,
    FlexWrap,
    FontFamily,
    JustifyContent,
    Spacing,
    TextAlignment,
    TextColor,
    TextDecoration,
    TextSize,
    TextWeight,
    Viewport,
    parse_variant,
)
from bulmakit.utils.constants import (
    HAS_BACKGROUND_PREFIX,
    HAS_TEXT_PREFIX,
    HAS_TEXT_WEIGHT_PREFIX,
    IS_ALIGN_CONTENT_PREFIX,
    IS_ALIGN_ITEMS_PREFIX,
    IS_ALIGN_SELF_PREFIX,
    IS_CLEARFIX,
    IS_CLICKABLE,
    IS_CLIPPED,
    IS_FLEX_DIRECTION_PREFIX,
    IS_FLEX_GROW_PREFIX,
    IS_FLEX_SHRINK_PREFIX,
    IS_FLEX_WRAP_PREFIX,
    IS_FONT_FAMILY_PREFIX,
    IS_JUSTIFY_CONTENT_PREFIX,
    IS_LIGHT,
    IS_OVERLAY,
    IS_PREFIX,
    IS_PULLED_LEFT,
    IS_PULLED_RIGHT,
    IS_RADIUSLESS,
    IS_RELATIVE,
    IS_SHADOWLESS,
    IS_SIZE_PREFIX,
    IS_UNSELECTABLE,
    MARGIN_PREFIX,
    PADDING_PREFIX,
)

__all__ = [
    "AlignmentModifiers",
    "ClassBuilder",
    "OtherModifiers",
    "TextModifiers",
    "class_attr",
]

logger = logging.getLogger("bulmakit.classes")

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Token formatting
# ---------------------------------------------------------------------------


def _prefixed(prefix: str, value: StrEnum | None) -> list[str]:
    """``prefix-value``, or nothing when the field is unset."""
    if value is None:
        return []
    return [f"{prefix}-{value}"]


def _scoped(prefix: str, pairs: Iterable[tuple[StrEnum, Viewport]]) -> list[str]:
    """``prefix-value-viewport`` for every pair."""
    return [f"{prefix}-{value}-{viewport}" for value, viewport in pairs]


def _spacing(prefix: str, pairs: Iterable[tuple[Direction, Spacing]]) -> list[str]:
    """``{prefix}{direction}-{spacing}``: no hyphen between prefix and direction."""
    return [f"{prefix}{direction}-{spacing}" for direction, spacing in pairs]


def _ordered(tokens: list[str], config: ComposeConfig) -> list[str]:
    if config.token_order is TokenOrder.SORTED:
        return sorted(tokens)
    return tokens


def _with(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    if item in items:
        return items
    return (*items, item)


def _without(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    return tuple(i for i in items if i != item)


def class_attr(tokens: Iterable[str]) -> str:
    """Join class tokens into an HTML ``class`` attribute value."""
    return " ".join(tokens)


# ---------------------------------------------------------------------------
# Modifier groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextModifiers:
    """Text helpers: color, size, alignment, decorations, weight and family."""

    color: TextColor | None = None
    size: TextSize | None = None
    viewport_sizes: tuple[tuple[TextSize, Viewport], ...] = ()
    alignment: TextAlignment | None = None
    viewport_alignments: tuple[tuple[TextAlignment, Viewport], ...] = ()
    decorations: tuple[TextDecoration, ...] = ()
    weight: TextWeight | None = None
    font_family: FontFamily | None = None

    def classes(self, config: ComposeConfig = DEFAULT_CONFIG) -> list[str]:
        return [
            *_prefixed(HAS_TEXT_PREFIX, self.color),
            *_prefixed(IS_SIZE_PREFIX, self.size),
            *_ordered(_scoped(IS_SIZE_PREFIX, self.viewport_sizes), config),
            *_prefixed(HAS_TEXT_PREFIX, self.alignment),
            *_ordered(_scoped(HAS_TEXT_PREFIX, self.viewport_alignments), config),
            *_ordered([f"{IS_PREFIX}-{d}" for d in self.decorations], config),
            *_prefixed(HAS_TEXT_WEIGHT_PREFIX, self.weight),
            *_prefixed(IS_FONT_FAMILY_PREFIX, self.font_family),
        ]


@dataclass(frozen=True)
class AlignmentModifiers:
    """Flexbox helpers, each an optional single value."""

    flex_direction: FlexDirection | None = None
    flex_wrap: FlexWrap | None = None
    justify_content: JustifyContent | None = None
    align_content: AlignContent | None = None
    align_items: AlignItems | None = None
    align_self: AlignSelf | None = None
    flex_grow: FlexShrinkGrowFactor | None = None
    flex_shrink: FlexShrinkGrowFactor | None = None

    def classes(self, config: ComposeConfig = DEFAULT_CONFIG) -> list[str]:
        return [
            *_prefixed(IS_FLEX_DIRECTION_PREFIX, self.flex_direction),
            *_prefixed(IS_FLEX_WRAP_PREFIX, self.flex_wrap),
            *_prefixed(IS_JUSTIFY_CONTENT_PREFIX, self.justify_content),
            *_prefixed(IS_ALIGN_CONTENT_PREFIX, self.align_content),
            *_prefixed(IS_ALIGN_ITEMS_PREFIX, self.align_items),
            *_prefixed(IS_ALIGN_SELF_PREFIX, self.align_self),
            *_prefixed(IS_FLEX_GROW_PREFIX, self.flex_grow),
            *_prefixed(IS_FLEX_SHRINK_PREFIX, self.flex_shrink),
        ]


# Field name -> class emitted when the flag is True, in emission order.
_OTHER_CLASSES: dict[str, str] = {
    "clearfix": IS_CLEARFIX,
    "pulled_left": IS_PULLED_LEFT,
    "pulled_right": IS_PULLED_RIGHT,
    "overlay": IS_OVERLAY,
    "clipped": IS_CLIPPED,
    "radiusless": IS_RADIUSLESS,
    "shadowless": IS_SHADOWLESS,
    "unselectable": IS_UNSELECTABLE,
    "clickable": IS_CLICKABLE,
    "relative": IS_RELATIVE,
}


@dataclass(frozen=True)
class OtherModifiers:
    """Boolean helpers. ``None`` and ``False`` both emit nothing."""

    clearfix: bool | None = None
    pulled_left: bool | None = None
    pulled_right: bool | None = None
    overlay: bool | None = None
    clipped: bool | None = None
    radiusless: bool | None = None
    shadowless: bool | None = None
    unselectable: bool | None = None
    clickable: bool | None = None
    relative: bool | None = None

    def classes(self, config: ComposeConfig = DEFAULT_CONFIG) -> list[str]:
        return [
            class_name
            for name, class_name in _OTHER_CLASSES.items()
            if getattr(self, name) is True
        ]


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassBuilder:
    """Immutable configuration of Bulma helpers plus custom classes.

    Tokens are emitted in a fixed segment order: text helpers, background
    color, element color and light flag, display and viewport displays, flexbox
    helpers, margins, paddings, boolean helpers, then custom classes.
    """

    custom_classes: tuple[str, ...] = ()
    text_modifiers: TextModifiers = field(default_factory=TextModifiers)
    background_color: BackgroundColor | None = None
    color: Color | None = None
    light: bool | None = None
    display: Display | None = None
    viewport_displays: tuple[tuple[Display, Viewport], ...] = ()
    alignment_modifiers: AlignmentModifiers = field(default_factory=AlignmentModifiers)
    margins: tuple[tuple[Direction, Spacing], ...] = ()
    paddings: tuple[tuple[Direction, Spacing], ...] = ()
    other_modifiers: OtherModifiers = field(default_factory=OtherModifiers)

    # --- custom classes -----------------------------------------------------

    def with_custom_class(self, custom_class: str) -> ClassBuilder:
        """Append a custom class fragment; blank fragments are ignored.

        The fragment is not validated and may hold several space-separated
        classes that must travel together. Adding the same fragment twice
        keeps a single copy.
        """
        if not custom_class or not custom_class.strip():
            return self
        return replace(self, custom_classes=_with(self.custom_classes, custom_class))

    def without_custom_class(self, custom_class: str) -> ClassBuilder:
        return replace(self, custom_classes=_without(self.custom_classes, custom_class))

    # --- text -----------------------------------------------------------------

    def _text(self, **changes: Any) -> ClassBuilder:
        return replace(self, text_modifiers=replace(self.text_modifiers, **changes))

    def with_text_color(self, color: TextColor | None) -> ClassBuilder:
        return self._text(color=color)

    def with_text_size(self, text_size: TextSize | None) -> ClassBuilder:
        return self._text(size=text_size)

    def with_text_viewport_size(
        self, text_size: TextSize, viewport: Viewport
    ) -> ClassBuilder:
        pairs = _with(self.text_modifiers.viewport_sizes, (text_size, viewport))
        return self._text(viewport_sizes=pairs)

    def without_text_viewport_size(
        self, text_size: TextSize, viewport: Viewport
    ) -> ClassBuilder:
        pairs = _without(self.text_modifiers.viewport_sizes, (text_size, viewport))
        return self._text(viewport_sizes=pairs)

    def with_text_alignment(self, alignment: TextAlignment | None) -> ClassBuilder:
        return self._text(alignment=alignment)

    def with_text_viewport_alignment(
        self, alignment: TextAlignment, viewport: Viewport
    ) -> ClassBuilder:
        pairs = _with(self.text_modifiers.viewport_alignments, (alignment, viewport))
        return self._text(viewport_alignments=pairs)

    def without_text_viewport_alignment(
        self, alignment: TextAlignment, viewport: Viewport
    ) -> ClassBuilder:
        pairs = _without(self.text_modifiers.viewport_alignments, (alignment, viewport))
        return self._text(viewport_alignments=pairs)

    def with_text_decoration(self, decoration: TextDecoration) -> ClassBuilder:
        return self._text(decorations=_with(self.text_modifiers.decorations, decoration))

    def without_text_decoration(self, decoration: TextDecoration) -> ClassBuilder:
        return self._text(
            decorations=_without(self.text_modifiers.decorations, decoration)
        )

    def with_text_weight(self, weight: TextWeight | None) -> ClassBuilder:
        return self._text(weight=weight)

    def with_font_family(self, font_family: FontFamily | None) -> ClassBuilder:
        return self._text(font_family=font_family)

    # --- color ----------------------------------------------------------------

    def with_background_color(self, color: BackgroundColor | None) -> ClassBuilder:
        return replace(self, background_color=color)

    def with_color(self, color: Color | None) -> ClassBuilder:
        return replace(self, color=color)

    def is_light(self, light: bool | None) -> ClassBuilder:
        return replace(self, light=light)

    # --- visibility -----------------------------------------------------------

    def with_display(self, display: Display | None) -> ClassBuilder:
        return replace(self, display=display)

    def with_viewport_display(self, display: Display, viewport: Viewport) -> ClassBuilder:
        return replace(
            self, viewport_displays=_with(self.viewport_displays, (display, viewport))
        )

    def without_viewport_display(
        self, display: Display, viewport: Viewport
    ) -> ClassBuilder:
        return replace(
            self, viewport_displays=_without(self.viewport_displays, (display, viewport))
        )

    # --- flexbox --------------------------------------------------------------

    def _alignment(self, **changes: Any) -> ClassBuilder:
        return replace(
            self, alignment_modifiers=replace(self.alignment_modifiers, **changes)
        )

    def with_flex_direction(self, flex_direction: FlexDirection | None) -> ClassBuilder:
        return self._alignment(flex_direction=flex_direction)

    def with_flex_wrap(self, flex_wrap: FlexWrap | None) -> ClassBuilder:
        return self._alignment(flex_wrap=flex_wrap)

    def with_justify_content(
        self, justify_content: JustifyContent | None
    ) -> ClassBuilder:
        return self._alignment(justify_content=justify_content)

    def with_align_content(self, align_content: AlignContent | None) -> ClassBuilder:
        return self._alignment(align_content=align_content)

    def with_align_items(self, align_items: AlignItems | None) -> ClassBuilder:
        return self._alignment(align_items=align_items)

    def with_align_self(self, align_self: AlignSelf | None) -> ClassBuilder:
        return self._alignment(align_self=align_self)

    def with_flex_grow(self, flex_grow: FlexShrinkGrowFactor | None) -> ClassBuilder:
        return self._alignment(flex_grow=flex_grow)

    def with_flex_shrink(self, flex_shrink: FlexShrinkGrowFactor | None) -> ClassBuilder:
        return self._alignment(flex_shrink=flex_shrink)

    # --- spacing --------------------------------------------------------------

    def with_margin(self, direction: Direction, spacing: Spacing) -> ClassBuilder:
        return replace(self, margins=_with(self.margins, (direction, spacing)))

    def without_margin(self, direction: Direction, spacing: Spacing) -> ClassBuilder:
        return replace(self, margins=_without(self.margins, (direction, spacing)))

    def with_padding(self, direction: Direction, spacing: Spacing) -> ClassBuilder:
        return replace(self, paddings=_with(self.paddings, (direction, spacing)))

    def without_padding(self, direction: Direction, spacing: Spacing) -> ClassBuilder:
        return replace(self, paddings=_without(self.paddings, (direction, spacing)))

    # --- other helpers --------------------------------------------------------

    def _other(self, **changes: bool | None) -> ClassBuilder:
        return replace(self, other_modifiers=replace(self.other_modifiers, **changes))

    def is_clearfix(self, value: bool | None) -> ClassBuilder:
        return self._other(clearfix=value)

    def is_pulled_left(self, value: bool | None) -> ClassBuilder:
        return self._other(pulled_left=value)

    def is_pulled_right(self, value: bool | None) -> ClassBuilder:
        return self._other(pulled_right=value)

    def is_overlay(self, value: bool | None) -> ClassBuilder:
        return self._other(overlay=value)

    def is_clipped(self, value: bool | None) -> ClassBuilder:
        return self._other(clipped=value)

    def is_radiusless(self, value: bool | None) -> ClassBuilder:
        return self._other(radiusless=value)

    def is_shadowless(self, value: bool | None) -> ClassBuilder:
        return self._other(shadowless=value)

    def is_unselectable(self, value: bool | None) -> ClassBuilder:
        return self._other(unselectable=value)

    def is_clickable(self, value: bool | None) -> ClassBuilder:
        return self._other(clickable=value)

    def is_relative(self, value: bool | None) -> ClassBuilder:
        return self._other(relative=value)

    # --- composition ----------------------------------------------------------

    def build(self, config: ComposeConfig | None = None) -> list[str]:
        """Compose the ordered list of class tokens. Never fails."""
        config = config or DEFAULT_CONFIG
        tokens = [
            *self.text_modifiers.classes(config),
            *_prefixed(HAS_BACKGROUND_PREFIX, self.background_color),
            *_prefixed(IS_PREFIX, self.color),
            *([IS_LIGHT] if self.light is True else []),
            *_prefixed(IS_PREFIX, self.display),
            *_ordered(_scoped(IS_PREFIX, self.viewport_displays), config),
            *self.alignment_modifiers.classes(config),
            *_ordered(_spacing(MARGIN_PREFIX, self.margins), config),
            *_ordered(_spacing(PADDING_PREFIX, self.paddings), config),
            *self.other_modifiers.classes(config),
            *self.custom_classes,
        ]
        logger.debug("Composed %d class token(s)", len(tokens))
        return tokens

    # --- mapping construction -------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ClassBuilder:
        """Build a configuration from a JSON-style mapping.

        Keys are the builder's field names (see ``MAPPING_KEYS``). Scalar
        values are fragments or member names; pair values are either a
        two-item list or a ``"value:qualifier"`` string (``"flex:desktop"``,
        ``"x:2"``); boolean helpers take ``true``/``false``/``null``.

        Raises:
            ConfigError: on unknown keys or malformed values.
            UnknownVariantError: when a value names no vocabulary member.
        """
        if not isinstance(data, Mapping):
            raise ConfigError("Class configuration must be a mapping")

        builder = cls()
        for key, raw in data.items():
            if key in _SCALAR_KEYS:
                method, vocabulary = _SCALAR_KEYS[key]
                value = None if raw is None else parse_variant(vocabulary, str(raw))
                builder = getattr(builder, method)(value)
            elif key in _PAIR_KEYS:
                method, first, second = _PAIR_KEYS[key]
                for item in _as_list(key, raw):
                    a, b = _split_pair(key, item)
                    builder = getattr(builder, method)(
                        parse_variant(first, a), parse_variant(second, b)
                    )
            elif key in _FLAG_KEYS:
                if raw is not None and not isinstance(raw, bool):
                    raise ConfigError(f"{key} must be true, false or null", key=key)
                builder = getattr(builder, _FLAG_KEYS[key])(raw)
            elif key == "text_decorations":
                for item in _as_list(key, raw):
                    builder = builder.with_text_decoration(
                        parse_variant(TextDecoration, str(item))
                    )
            elif key == "custom_classes":
                for item in _as_list(key, raw):
                    builder = builder.with_custom_class(str(item))
            else:
                raise ConfigError(f"Unknown class configuration key: {key!r}", key=key)
        return builder


def _as_list(key: str, raw: Any) -> list[Any]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raise ConfigError(f"{key} must be a list", key=key)
    return list(raw)


def _split_pair(key: str, item: Any) -> tuple[str, str]:
    if isinstance(item, str):
        first, sep, second = item.partition(":")
        if sep:
            return first, second
    elif isinstance(item, (list, tuple)) and len(item) == 2:
        return str(item[0]), str(item[1])
    raise ConfigError(
        f"{key} entries must be 'value:qualifier' or a two-item list, got {item!r}",
        key=key,
    )


_SCALAR_KEYS: dict[str, tuple[str, type[StrEnum]]] = {
    "text_color": ("with_text_color", TextColor),
    "text_size": ("with_text_size", TextSize),
    "text_alignment": ("with_text_alignment", TextAlignment),
    "text_weight": ("with_text_weight", TextWeight),
    "font_family": ("with_font_family", FontFamily),
    "background_color": ("with_background_color", BackgroundColor),
    "color": ("with_color", Color),
    "display": ("with_display", Display),
    "flex_direction": ("with_flex_direction", FlexDirection),
    "flex_wrap": ("with_flex_wrap", FlexWrap),
    "justify_content": ("with_justify_content", JustifyContent),
    "align_content": ("with_align_content", AlignContent),
    "align_items": ("with_align_items", AlignItems),
    "align_self": ("with_align_self", AlignSelf),
    "flex_grow": ("with_flex_grow", FlexShrinkGrowFactor),
    "flex_shrink": ("with_flex_shrink", FlexShrinkGrowFactor),
}

_PAIR_KEYS: dict[str, tuple[str, type[StrEnum], type[StrEnum]]] = {
    "text_viewport_sizes": ("with_text_viewport_size", TextSize, Viewport),
    "text_viewport_alignments": ("with_text_viewport_alignment", TextAlignment, Viewport),
    "viewport_displays": ("with_viewport_display", Display, Viewport),
    "margins": ("with_margin", Direction, Spacing),
    "paddings": ("with_padding", Direction, Spacing),
}

_FLAG_KEYS: dict[str, str] = {
    "light": "is_light",
    **{name: f"is_{name}" for name in (f.name for f in fields(OtherModifiers))},
}

MAPPING_KEYS: tuple[str, ...] = (
    *_SCALAR_KEYS,
    *_PAIR_KEYS,
    *_FLAG_KEYS,
    "text_decorations",
    "custom_classes",
)
