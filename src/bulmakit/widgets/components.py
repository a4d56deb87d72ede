"""Bulma components: breadcrumb, dropdown, menu, message, modal, pagination, panel, tabs."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bulmakit.helpers.color import Color
from bulmakit.utils.classes import ClassBuilder
from bulmakit.utils.size import Size
from bulmakit.widgets.base import BaseProperties, Part, apply_colors
from bulmakit.widgets.policy import (
    Align,
    Separator,
    align_class,
    flag_class,
    separator_class,
    size_class,
)


@dataclass(frozen=True, kw_only=True)
class Breadcrumb(BaseProperties):
    size: Size | None = None
    align: Align = Align.LEFT
    separator: Separator = Separator.DIV

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("breadcrumb")
            .with_custom_class(size_class("breadcrumb", self.size))
            .with_custom_class(align_class(self.align))
            .with_custom_class(separator_class(self.separator))
        )


# ---------------------------------------------------------------------------
# Dropdown
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Dropdown(BaseProperties):
    active: bool = False
    hoverable: bool = False
    up: bool = False
    align: Align = Align.LEFT

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("dropdown")
            .with_custom_class(flag_class(self.active, "is-active"))
            .with_custom_class(flag_class(self.hoverable, "is-hoverable"))
            .with_custom_class(flag_class(self.up, "is-up"))
            .with_custom_class(align_class(self.align))
        )


@dataclass(frozen=True, kw_only=True)
class DropdownItem(BaseProperties):
    active: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("dropdown-item").with_custom_class(
            flag_class(self.active, "is-active")
        )


@dataclass(frozen=True, kw_only=True)
class DropdownTrigger(Part):
    base_class = "dropdown-trigger"


@dataclass(frozen=True, kw_only=True)
class DropdownMenu(Part):
    base_class = "dropdown-menu"


@dataclass(frozen=True, kw_only=True)
class DropdownContent(Part):
    base_class = "dropdown-content"


@dataclass(frozen=True, kw_only=True)
class DropdownDivider(Part):
    base_class = "dropdown-divider"
    tag_name = "hr"


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Message(BaseProperties):
    size: Size | None = None
    color: Color | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            apply_colors(builder, self.color)
            .with_custom_class("message")
            .with_custom_class(size_class("message", self.size))
        )


@dataclass(frozen=True, kw_only=True)
class MessageHeader(Part):
    base_class = "message-header"


@dataclass(frozen=True, kw_only=True)
class MessageBody(Part):
    base_class = "message-body"


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Menu(Part):
    base_class = "menu"
    tag_name = "aside"


@dataclass(frozen=True, kw_only=True)
class MenuLabel(Part):
    base_class = "menu-label"
    tag_name = "p"


@dataclass(frozen=True, kw_only=True)
class MenuList(Part):
    """A list of menu links; each child goes in its own ``li``."""

    base_class = "menu-list"
    tag_name = "ul"


# ---------------------------------------------------------------------------
# Modal
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Modal(BaseProperties):
    active: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("modal").with_custom_class(
            flag_class(self.active, "is-active")
        )


@dataclass(frozen=True, kw_only=True)
class ModalClose(BaseProperties):
    size: Size | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("modal-close").with_custom_class(
            size_class("modal-close", self.size)
        )


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Pagination(BaseProperties):
    size: Size | None = None
    align: Align = Align.LEFT
    rounded: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return (
            builder.with_custom_class("pagination")
            .with_custom_class(size_class("pagination", self.size))
            .with_custom_class(align_class(self.align))
            .with_custom_class(flag_class(self.rounded, "is-rounded"))
        )


@dataclass(frozen=True, kw_only=True)
class PaginationLink(BaseProperties):
    current: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("pagination-link").with_custom_class(
            flag_class(self.current, "is-current")
        )


@dataclass(frozen=True, kw_only=True)
class PaginationPrevious(BaseProperties):
    disabled: bool = False

    base_class = "pagination-previous"

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class(self.base_class).with_custom_class(
            flag_class(self.disabled, "is-disabled")
        )


@dataclass(frozen=True, kw_only=True)
class PaginationNext(PaginationPrevious):
    base_class = "pagination-next"


@dataclass(frozen=True, kw_only=True)
class PaginationList(Part):
    base_class = "pagination-list"
    tag_name = "ul"


@dataclass(frozen=True, kw_only=True)
class PaginationEllipsis(Part):
    """The gap marker between page links; renders an ellipsis by default."""

    base_class = "pagination-ellipsis"
    tag_name = "span"


# ---------------------------------------------------------------------------
# Panel
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class Panel(BaseProperties):
    color: Color | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return apply_colors(builder, self.color).with_custom_class("panel")


@dataclass(frozen=True, kw_only=True)
class PanelBlock(BaseProperties):
    active: bool = False

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class("panel-block").with_custom_class(
            flag_class(self.active, "is-active")
        )


# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------


class TabsStyle(StrEnum):
    BOXED = "boxed"
    TOGGLE = "toggle"
    TOGGLE_ROUNDED = "toggle-rounded"


# Rounded toggles need the toggle class too; they travel as one token.
_TABS_STYLE_CLASSES: dict[TabsStyle, str] = {
    TabsStyle.BOXED: "is-boxed",
    TabsStyle.TOGGLE: "is-toggle",
    TabsStyle.TOGGLE_ROUNDED: "is-toggle is-toggle-rounded",
}


@dataclass(frozen=True, kw_only=True)
class Tabs(BaseProperties):
    size: Size | None = None
    align: Align = Align.LEFT
    fullwidth: bool = False
    style: TabsStyle | None = None

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        style = _TABS_STYLE_CLASSES[self.style] if self.style else ""
        return (
            builder.with_custom_class("tabs")
            .with_custom_class(size_class("tabs", self.size))
            .with_custom_class(align_class(self.align))
            .with_custom_class(flag_class(self.fullwidth, "is-fullwidth"))
            .with_custom_class(style)
        )
