"""Flexbox vocabularies for the ``is-flex-*``, ``is-justify-*`` and ``is-align-*`` helpers."""
from __future__ import annotations

from enum import StrEnum


class FlexDirection(StrEnum):
    ROW = "row"
    ROW_REVERSE = "row-reverse"
    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"


class FlexWrap(StrEnum):
    NO_WRAP = "no-wrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


class JustifyContent(StrEnum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"
    START = "start"
    END = "end"
    LEFT = "left"
    RIGHT = "right"


class AlignContent(StrEnum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"
    STRETCH = "stretch"
    START = "start"
    END = "end"
    BASELINE = "baseline"


class AlignItems(StrEnum):
    STRETCH = "stretch"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    START = "start"
    END = "end"
    SELF_START = "self-start"
    SELF_END = "self-end"


class AlignSelf(StrEnum):
    AUTO = "auto"
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class FlexShrinkGrowFactor(StrEnum):
    """Factor used by both ``is-flex-grow-*`` and ``is-flex-shrink-*``."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
