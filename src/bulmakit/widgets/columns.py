"""Bulma columns: the responsive flexbox grid."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bulmakit.helpers.visibility import Viewport
from bulmakit.utils.classes import ClassBuilder
from bulmakit.utils.constants import IS_NARROW, IS_OFFSET_PREFIX, IS_PREFIX
from bulmakit.widgets.base import BaseProperties
from bulmakit.widgets.policy import flag_class


class GapSize(StrEnum):
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"


class ColumnSize(StrEnum):
    """Column widths: named fractions or twelfths of the row."""

    FOUR_FIFTHS = "four-fifths"
    THREE_QUARTERS = "three-quarters"
    TWO_THIRDS = "two-thirds"
    THREE_FIFTHS = "three-fifths"
    HALF = "half"
    TWO_FIFTHS = "two-fifths"
    ONE_THIRD = "one-third"
    ONE_QUARTER = "one-quarter"
    ONE_FIFTH = "one-fifth"
    FULL = "full"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    ELEVEN = "11"
    TWELVE = "12"


@dataclass(frozen=True, kw_only=True)
class Columns(BaseProperties):
    """A row of columns.

    ``viewport`` is the breakpoint from which columns stop stacking.
    Any gap size, global or per viewport, also adds ``is-variable``.
    """

    viewport: Viewport | None = None
    gap_size: GapSize | None = None
    viewport_gap_sizes: tuple[tuple[GapSize, Viewport], ...] = ()
    gapless: bool = False
    center_vertically: bool = False
    centered: bool = False
    multiline: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        viewport_gaps = [
            f"{IS_PREFIX}-{gap}-{viewport}"
            for gap, viewport in self.viewport_gap_sizes
        ]
        variable = self.gap_size is not None or bool(viewport_gaps)

        builder = (
            builder.with_custom_class("columns")
            .with_custom_class(f"{IS_PREFIX}-{self.viewport}" if self.viewport else "")
            .with_custom_class(flag_class(self.multiline, "is-multiline"))
            .with_custom_class(flag_class(self.gapless, "is-gapless"))
            .with_custom_class(flag_class(variable, "is-variable"))
            .with_custom_class(
                f"{IS_PREFIX}-{self.gap_size}" if self.gap_size is not None else ""
            )
        )
        for token in viewport_gaps:
            builder = builder.with_custom_class(token)
        return builder.with_custom_class(
            flag_class(self.center_vertically, "is-vcentered")
        ).with_custom_class(flag_class(self.centered, "is-centered"))


@dataclass(frozen=True, kw_only=True)
class Column(BaseProperties):
    size: ColumnSize | None = None
    viewport_sizes: tuple[tuple[ColumnSize, Viewport], ...] = ()
    offset: ColumnSize | None = None
    narrow: bool = False
    narrow_viewports: frozenset[Viewport] = frozenset()

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        builder = (
            builder.with_custom_class("column")
            .with_custom_class(f"{IS_PREFIX}-{self.size}" if self.size else "")
            .with_custom_class(
                f"{IS_OFFSET_PREFIX}-{self.offset}" if self.offset else ""
            )
            .with_custom_class(flag_class(self.narrow, IS_NARROW))
        )
        for size, viewport in self.viewport_sizes:
            builder = builder.with_custom_class(f"{IS_PREFIX}-{size}-{viewport}")
        for viewport in sorted(self.narrow_viewports):
            builder = builder.with_custom_class(f"{IS_NARROW}-{viewport}")
        return builder
