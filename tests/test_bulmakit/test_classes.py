"""Tests for ClassBuilder composition."""
from __future__ import annotations

import pytest

from bulmakit.config import ComposeConfig, TokenOrder
from bulmakit.errors import ConfigError, UnknownVariantError
from bulmakit.helpers import (
    AlignItems,
    BackgroundColor,
    Color,
    Direction,
    Display,
    FlexDirection,
    FlexShrinkGrowFactor,
    FontFamily,
    JustifyContent,
    Spacing,
    TextAlignment,
    TextColor,
    TextDecoration,
    TextSize,
    TextWeight,
    Viewport,
)
from bulmakit.utils.classes import (
    MAPPING_KEYS,
    AlignmentModifiers,
    ClassBuilder,
    OtherModifiers,
    TextModifiers,
    class_attr,
)

SORTED = ComposeConfig(token_order=TokenOrder.SORTED)


# ---------------------------------------------------------------------------
# Basics
# ---------------------------------------------------------------------------


class TestEmpty:
    def test_empty_builder(self) -> None:
        assert ClassBuilder().build() == []

    def test_empty_groups(self) -> None:
        assert TextModifiers().classes() == []
        assert AlignmentModifiers().classes() == []
        assert OtherModifiers().classes() == []

    def test_class_attr(self) -> None:
        assert class_attr([]) == ""
        assert class_attr(["a", "b"]) == "a b"


class TestImmutability:
    def test_with_returns_copy(self) -> None:
        base = ClassBuilder()
        colored = base.with_text_color(TextColor.PRIMARY)
        assert base.build() == []
        assert colored.build() == ["has-text-primary"]

    def test_shared_prefix(self) -> None:
        base = ClassBuilder().with_display(Display.FLEX)
        a = base.with_margin(Direction.TOP, Spacing.ONE)
        b = base.with_padding(Direction.TOP, Spacing.ONE)
        assert a.build() == ["is-flex", "mt-1"]
        assert b.build() == ["is-flex", "pt-1"]

    def test_equality(self) -> None:
        a = ClassBuilder().with_color(Color.INFO)
        b = ClassBuilder().with_color(Color.INFO)
        assert a == b


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class TestText:
    def test_color(self) -> None:
        assert ClassBuilder().with_text_color(TextColor.GREY_DARK).build() == [
            "has-text-grey-dark"
        ]

    def test_size(self) -> None:
        assert ClassBuilder().with_text_size(TextSize.THREE).build() == ["is-size-3"]

    def test_viewport_size(self) -> None:
        builder = ClassBuilder().with_text_viewport_size(TextSize.THREE, Viewport.DESKTOP)
        assert builder.build() == ["is-size-3-desktop"]

    def test_viewport_size_independent_of_base_size(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_size(TextSize.ONE)
            .with_text_viewport_size(TextSize.THREE, Viewport.DESKTOP)
            .with_text_viewport_size(TextSize.FIVE, Viewport.MOBILE)
        )
        assert builder.build() == [
            "is-size-1",
            "is-size-3-desktop",
            "is-size-5-mobile",
        ]

    def test_same_viewport_different_sizes(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_viewport_size(TextSize.ONE, Viewport.TABLET)
            .with_text_viewport_size(TextSize.TWO, Viewport.TABLET)
        )
        assert builder.build() == ["is-size-1-tablet", "is-size-2-tablet"]

    def test_without_viewport_size(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_viewport_size(TextSize.ONE, Viewport.TABLET)
            .without_text_viewport_size(TextSize.ONE, Viewport.TABLET)
        )
        assert builder.build() == []

    def test_alignment(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_alignment(TextAlignment.CENTERED)
            .with_text_viewport_alignment(TextAlignment.LEFT, Viewport.MOBILE)
        )
        assert builder.build() == ["has-text-centered", "has-text-left-mobile"]

    def test_without_viewport_alignment(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_viewport_alignment(TextAlignment.LEFT, Viewport.MOBILE)
            .without_text_viewport_alignment(TextAlignment.LEFT, Viewport.MOBILE)
        )
        assert builder.build() == []

    def test_decorations(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_decoration(TextDecoration.ITALIC)
            .with_text_decoration(TextDecoration.UPPERCASE)
            .with_text_decoration(TextDecoration.ITALIC)
        )
        assert builder.build() == ["is-italic", "is-uppercase"]

    def test_without_decoration(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_decoration(TextDecoration.ITALIC)
            .without_text_decoration(TextDecoration.ITALIC)
        )
        assert builder.build() == []

    def test_weight_and_family(self) -> None:
        builder = (
            ClassBuilder()
            .with_text_weight(TextWeight.SEMI_BOLD)
            .with_font_family(FontFamily.MONOSPACE)
        )
        assert builder.build() == ["has-text-weight-semibold", "is-family-monospace"]

    def test_clear_scalar(self) -> None:
        builder = ClassBuilder().with_text_color(TextColor.INFO).with_text_color(None)
        assert builder.build() == []

    def test_text_segment_order(self) -> None:
        builder = (
            ClassBuilder()
            .with_font_family(FontFamily.CODE)
            .with_text_weight(TextWeight.BOLD)
            .with_text_decoration(TextDecoration.UNDERLINED)
            .with_text_viewport_alignment(TextAlignment.RIGHT, Viewport.TOUCH)
            .with_text_alignment(TextAlignment.JUSTIFIED)
            .with_text_viewport_size(TextSize.TWO, Viewport.WIDESCREEN)
            .with_text_size(TextSize.FOUR)
            .with_text_color(TextColor.DANGER)
        )
        assert builder.build() == [
            "has-text-danger",
            "is-size-4",
            "is-size-2-widescreen",
            "has-text-justified",
            "has-text-right-touch",
            "is-underlined",
            "has-text-weight-bold",
            "is-family-code",
        ]


# ---------------------------------------------------------------------------
# Color and visibility
# ---------------------------------------------------------------------------


class TestColor:
    def test_background(self) -> None:
        builder = ClassBuilder().with_background_color(BackgroundColor.INFO_LIGHT)
        assert builder.build() == ["has-background-info-light"]

    def test_element_color_light(self) -> None:
        builder = ClassBuilder().with_color(Color.PRIMARY).is_light(True)
        assert builder.build() == ["is-primary", "is-light"]

    @pytest.mark.parametrize("value", [False, None])
    def test_light_off(self, value: bool | None) -> None:
        assert ClassBuilder().is_light(value).build() == []


class TestDisplay:
    def test_display(self) -> None:
        assert ClassBuilder().with_display(Display.INLINE_FLEX).build() == [
            "is-inline-flex"
        ]

    def test_viewport_display(self) -> None:
        builder = ClassBuilder().with_viewport_display(Display.HIDDEN, Viewport.MOBILE)
        assert builder.build() == ["is-hidden-mobile"]

    def test_viewport_display_dedupe(self) -> None:
        builder = (
            ClassBuilder()
            .with_viewport_display(Display.FLEX, Viewport.DESKTOP)
            .with_viewport_display(Display.FLEX, Viewport.DESKTOP)
        )
        assert builder.build() == ["is-flex-desktop"]

    def test_without_missing_pair_is_noop(self) -> None:
        builder = ClassBuilder().with_viewport_display(Display.FLEX, Viewport.DESKTOP)
        assert (
            builder.without_viewport_display(Display.BLOCK, Viewport.DESKTOP) == builder
        )


# ---------------------------------------------------------------------------
# Flexbox and spacing
# ---------------------------------------------------------------------------


class TestFlexbox:
    def test_all_fields(self) -> None:
        builder = (
            ClassBuilder()
            .with_flex_shrink(FlexShrinkGrowFactor.ZERO)
            .with_flex_grow(FlexShrinkGrowFactor.ONE)
            .with_align_items(AlignItems.CENTER)
            .with_justify_content(JustifyContent.SPACE_BETWEEN)
            .with_flex_direction(FlexDirection.ROW_REVERSE)
        )
        assert builder.build() == [
            "is-flex-direction-row-reverse",
            "is-justify-content-space-between",
            "is-align-items-center",
            "is-flex-grow-1",
            "is-flex-shrink-0",
        ]


class TestSpacing:
    def test_horizontal_margin(self) -> None:
        assert ClassBuilder().with_margin(Direction.HORIZONTAL, Spacing.TWO).build() == [
            "mx-2"
        ]

    def test_all_directions_margin(self) -> None:
        assert ClassBuilder().with_margin(Direction.ALL, Spacing.TWO).build() == ["m-2"]

    def test_padding(self) -> None:
        assert ClassBuilder().with_padding(Direction.TOP, Spacing.ZERO).build() == [
            "pt-0"
        ]

    def test_margins_before_paddings(self) -> None:
        builder = (
            ClassBuilder()
            .with_padding(Direction.ALL, Spacing.ONE)
            .with_margin(Direction.BOTTOM, Spacing.SIX)
        )
        assert builder.build() == ["mb-6", "p-1"]

    def test_same_direction_different_spacing(self) -> None:
        builder = (
            ClassBuilder()
            .with_margin(Direction.LEFT, Spacing.ONE)
            .with_margin(Direction.LEFT, Spacing.TWO)
        )
        assert builder.build() == ["ml-1", "ml-2"]

    def test_removal_idempotent(self) -> None:
        builder = ClassBuilder().with_margin(Direction.TOP, Spacing.ONE)
        once = builder.without_margin(Direction.TOP, Spacing.ONE)
        twice = once.without_margin(Direction.TOP, Spacing.ONE)
        assert once == twice == ClassBuilder()

    def test_without_padding(self) -> None:
        builder = (
            ClassBuilder()
            .with_padding(Direction.VERTICAL, Spacing.THREE)
            .without_padding(Direction.VERTICAL, Spacing.THREE)
        )
        assert builder.build() == []


# ---------------------------------------------------------------------------
# Boolean helpers
# ---------------------------------------------------------------------------


class TestOtherHelpers:
    @pytest.mark.parametrize(
        "method, expected",
        [
            ("is_clearfix", "is-clearfix"),
            ("is_pulled_left", "is-pulled-left"),
            ("is_pulled_right", "is-pulled-right"),
            ("is_overlay", "is-overlay"),
            ("is_clipped", "is-clipped"),
            ("is_radiusless", "is-radiusless"),
            ("is_shadowless", "is-shadowless"),
            ("is_unselectable", "is-unselectable"),
            ("is_clickable", "is-clickable"),
            ("is_relative", "is-relative"),
        ],
    )
    def test_true_emits(self, method: str, expected: str) -> None:
        assert getattr(ClassBuilder(), method)(True).build() == [expected]

    @pytest.mark.parametrize("value", [False, None])
    def test_false_and_unset_emit_nothing(self, value: bool | None) -> None:
        assert ClassBuilder().is_relative(value).build() == []

    def test_turn_off(self) -> None:
        builder = ClassBuilder().is_clipped(True).is_clipped(False)
        assert builder.build() == []

    def test_fixed_order(self) -> None:
        builder = ClassBuilder().is_relative(True).is_clearfix(True)
        assert builder.build() == ["is-clearfix", "is-relative"]


# ---------------------------------------------------------------------------
# Custom classes
# ---------------------------------------------------------------------------


class TestCustomClasses:
    def test_appended_last(self) -> None:
        builder = ClassBuilder().with_custom_class("card").is_relative(True)
        assert builder.build() == ["is-relative", "card"]

    def test_dedupe(self) -> None:
        builder = ClassBuilder().with_custom_class("card").with_custom_class("card")
        assert builder.build() == ["card"]

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_ignored(self, blank: str) -> None:
        assert ClassBuilder().with_custom_class(blank) == ClassBuilder()

    def test_multi_class_fragment_kept_whole(self) -> None:
        builder = ClassBuilder().with_custom_class("is-inverted is-outlined")
        assert builder.build() == ["is-inverted is-outlined"]

    def test_remove(self) -> None:
        builder = (
            ClassBuilder()
            .with_custom_class("a")
            .with_custom_class("b")
            .without_custom_class("a")
        )
        assert builder.build() == ["b"]


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_segment_order(self) -> None:
        builder = (
            ClassBuilder()
            .with_custom_class("custom")
            .is_clickable(True)
            .with_padding(Direction.ALL, Spacing.ONE)
            .with_margin(Direction.ALL, Spacing.TWO)
            .with_align_self(None)
            .with_flex_direction(FlexDirection.COLUMN)
            .with_viewport_display(Display.BLOCK, Viewport.TABLET)
            .with_display(Display.FLEX)
            .is_light(True)
            .with_color(Color.WARNING)
            .with_background_color(BackgroundColor.DARK)
            .with_text_color(TextColor.WHITE)
        )
        assert builder.build() == [
            "has-text-white",
            "has-background-dark",
            "is-warning",
            "is-light",
            "is-flex",
            "is-block-tablet",
            "is-flex-direction-column",
            "m-2",
            "p-1",
            "is-clickable",
            "custom",
        ]

    def test_insertion_order(self) -> None:
        builder = (
            ClassBuilder()
            .with_margin(Direction.VERTICAL, Spacing.ONE)
            .with_margin(Direction.HORIZONTAL, Spacing.TWO)
        )
        assert builder.build() == ["my-1", "mx-2"]

    def test_sorted_order(self) -> None:
        builder = (
            ClassBuilder()
            .with_margin(Direction.VERTICAL, Spacing.ONE)
            .with_margin(Direction.HORIZONTAL, Spacing.TWO)
            .with_viewport_display(Display.HIDDEN, Viewport.TOUCH)
            .with_viewport_display(Display.BLOCK, Viewport.TOUCH)
        )
        assert builder.build(SORTED) == [
            "is-block-touch",
            "is-hidden-touch",
            "mx-2",
            "my-1",
        ]

    def test_sorted_keeps_segment_order(self) -> None:
        builder = (
            ClassBuilder()
            .with_padding(Direction.ALL, Spacing.ONE)
            .with_margin(Direction.ALL, Spacing.SIX)
        )
        assert builder.build(SORTED) == ["m-6", "p-1"]

    def test_sorted_does_not_touch_custom_classes(self) -> None:
        builder = ClassBuilder().with_custom_class("zeta").with_custom_class("alpha")
        assert builder.build(SORTED) == ["zeta", "alpha"]

    def test_end_to_end(self) -> None:
        tokens = (
            ClassBuilder()
            .with_text_color(TextColor.PRIMARY)
            .with_display(Display.FLEX)
            .with_viewport_display(Display.FLEX, Viewport.DESKTOP)
            .is_relative(True)
            .build()
        )
        assert class_attr(tokens) == "has-text-primary is-flex is-flex-desktop is-relative"


# ---------------------------------------------------------------------------
# from_mapping
# ---------------------------------------------------------------------------


class TestFromMapping:
    def test_empty(self) -> None:
        assert ClassBuilder.from_mapping({}) == ClassBuilder()

    def test_end_to_end(self) -> None:
        builder = ClassBuilder.from_mapping(
            {
                "text_color": "primary",
                "display": "flex",
                "viewport_displays": ["flex:desktop"],
                "relative": True,
            }
        )
        assert class_attr(builder.build()) == (
            "has-text-primary is-flex is-flex-desktop is-relative"
        )

    def test_member_names_accepted(self) -> None:
        builder = ClassBuilder.from_mapping({"text_color": "BLACK_BIS"})
        assert builder.build() == ["has-text-black-bis"]

    def test_pair_as_list(self) -> None:
        builder = ClassBuilder.from_mapping({"margins": [["x", "2"], ["all", "0"]]})
        assert builder.build() == ["mx-2", "m-0"]

    def test_pair_as_string(self) -> None:
        builder = ClassBuilder.from_mapping({"paddings": ["t:3"]})
        assert builder.build() == ["pt-3"]

    def test_text_decorations_and_custom(self) -> None:
        builder = ClassBuilder.from_mapping(
            {"text_decorations": ["italic"], "custom_classes": ["card", "card"]}
        )
        assert builder.build() == ["is-italic", "card"]

    def test_null_scalar(self) -> None:
        assert ClassBuilder.from_mapping({"text_color": None}) == ClassBuilder()

    def test_light_flag(self) -> None:
        builder = ClassBuilder.from_mapping({"color": "danger", "light": True})
        assert builder.build() == ["is-danger", "is-light"]

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ClassBuilder.from_mapping({"colour": "primary"})
        assert exc_info.value.key == "colour"

    def test_unknown_value(self) -> None:
        with pytest.raises(UnknownVariantError):
            ClassBuilder.from_mapping({"text_color": "purple"})

    def test_list_required(self) -> None:
        with pytest.raises(ConfigError):
            ClassBuilder.from_mapping({"margins": "x:2"})

    def test_malformed_pair(self) -> None:
        with pytest.raises(ConfigError):
            ClassBuilder.from_mapping({"margins": ["x2"]})

    def test_flag_must_be_bool(self) -> None:
        with pytest.raises(ConfigError):
            ClassBuilder.from_mapping({"relative": "yes"})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigError):
            ClassBuilder.from_mapping(["text_color"])  # type: ignore[arg-type]

    def test_mapping_keys(self) -> None:
        for key in ("text_color", "margins", "light", "relative", "custom_classes"):
            assert key in MAPPING_KEYS
        assert len(MAPPING_KEYS) == len(set(MAPPING_KEYS))
