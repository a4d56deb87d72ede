"""Bulma layout: container, hero, level, media, section, tile and footer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bulmakit.helpers.color import Color
from bulmakit.utils.classes import ClassBuilder
from bulmakit.utils.constants import IS_PREFIX
from bulmakit.utils.size import Size
from bulmakit.widgets.base import BaseProperties, Part, apply_colors
from bulmakit.widgets.policy import flag_class, size_class


def _is(value: StrEnum | None) -> str:
    return f"{IS_PREFIX}-{value}" if value is not None else ""


class Width(StrEnum):
    """Maximum width of a container at large viewports."""

    WIDESCREEN = "widescreen"
    FULL_HD = "fullhd"
    MAX_DESKTOP = "max-desktop"
    MAX_WIDESCREEN = "max-widescreen"


@dataclass(frozen=True, kw_only=True)
class Container(BaseProperties):
    width: Width | None = None
    fluid: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("container")
            .with_custom_class(_is(self.width))
            .with_custom_class(flag_class(self.fluid, "is-fluid"))
        )


class HeroSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HALF_HEIGHT = "halfheight"
    FULL_HEIGHT = "fullheight"
    FULL_HEIGHT_WITH_NAVBAR = "fullheight-with-navbar"


@dataclass(frozen=True, kw_only=True)
class Hero(BaseProperties):
    color: Color | None = None
    size: HeroSize | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            apply_colors(builder, self.color)
            .with_custom_class("hero")
            .with_custom_class(_is(self.size))
        )


@dataclass(frozen=True, kw_only=True)
class Level(BaseProperties):
    """Horizontal level; ``mobile`` keeps it horizontal on small screens."""

    mobile: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("level").with_custom_class(
            flag_class(self.mobile, "is-mobile")
        )


@dataclass(frozen=True, kw_only=True)
class Media(Part):
    """Media object: left, content and right parts side by side."""

    base_class = "media"


@dataclass(frozen=True, kw_only=True)
class MediaLeft(Part):
    base_class = "media-left"


@dataclass(frozen=True, kw_only=True)
class MediaContent(Part):
    base_class = "media-content"


@dataclass(frozen=True, kw_only=True)
class MediaRight(Part):
    base_class = "media-right"


@dataclass(frozen=True, kw_only=True)
class Section(BaseProperties):
    """Page section. Only medium and large change its spacing."""

    size: Size | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("section").with_custom_class(
            size_class("section", self.size)
        )


class Relation(StrEnum):
    ANCESTOR = "ancestor"
    PARENT = "parent"
    CHILD = "child"


class TileSize(StrEnum):
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
class Tile(BaseProperties):
    relation: Relation | None = None
    vertical: bool = False
    size: TileSize | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("tile")
            .with_custom_class(_is(self.relation))
            .with_custom_class(flag_class(self.vertical, "is-vertical"))
            .with_custom_class(_is(self.size))
        )


@dataclass(frozen=True, kw_only=True)
class Footer(Part):
    base_class = "footer"

