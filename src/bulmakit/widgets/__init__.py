"""Component configurations that compose their Bulma classes."""
from bulmakit.widgets.base import BaseProperties, Part, apply_colors
from bulmakit.widgets.columns import Column, Columns, ColumnSize, GapSize
from bulmakit.widgets.components import (
    Breadcrumb,
    Dropdown,
    DropdownContent,
    DropdownDivider,
    DropdownItem,
    DropdownMenu,
    DropdownTrigger,
    Menu,
    MenuLabel,
    MenuList,
    Message,
    MessageBody,
    MessageHeader,
    Modal,
    ModalClose,
    Pagination,
    PaginationEllipsis,
    PaginationLink,
    PaginationList,
    PaginationNext,
    PaginationPrevious,
    Panel,
    PanelBlock,
    Tabs,
    TabsStyle,
)
from bulmakit.widgets.elements import (
    Block,
    Box,
    Button,
    Buttons,
    ButtonState,
    ButtonStyle,
    Content,
    Delete,
    Figure,
    HeadingSize,
    Icon,
    IconText,
    Image,
    ImageSize,
    Notification,
    ProgressBar,
    Subtitle,
    Table,
    TableRow,
    Tag,
    Tags,
    Title,
)
from bulmakit.widgets.layout import (
    Container,
    Footer,
    Hero,
    HeroSize,
    Level,
    Media,
    MediaContent,
    MediaLeft,
    MediaRight,
    Relation,
    Section,
    Tile,
    TileSize,
    Width,
)
from bulmakit.widgets.policy import SIZE_POLICIES, Align, Separator, SizePolicy, size_class

__all__ = [
    "Align",
    "BaseProperties",
    "Block",
    "Box",
    "Breadcrumb",
    "Button",
    "ButtonState",
    "ButtonStyle",
    "Buttons",
    "Column",
    "ColumnSize",
    "Columns",
    "Container",
    "Content",
    "Delete",
    "Dropdown",
    "DropdownContent",
    "DropdownDivider",
    "DropdownItem",
    "DropdownMenu",
    "DropdownTrigger",
    "Figure",
    "Footer",
    "GapSize",
    "HeadingSize",
    "Hero",
    "HeroSize",
    "Icon",
    "IconText",
    "Image",
    "ImageSize",
    "Level",
    "Media",
    "MediaContent",
    "MediaLeft",
    "MediaRight",
    "Menu",
    "MenuLabel",
    "MenuList",
    "Message",
    "MessageBody",
    "MessageHeader",
    "Modal",
    "ModalClose",
    "Notification",
    "Pagination",
    "PaginationEllipsis",
    "PaginationLink",
    "PaginationList",
    "PaginationNext",
    "PaginationPrevious",
    "Panel",
    "PanelBlock",
    "Part",
    "ProgressBar",
    "Relation",
    "SIZE_POLICIES",
    "Section",
    "Separator",
    "SizePolicy",
    "Subtitle",
    "Table",
    "TableRow",
    "Tabs",
    "TabsStyle",
    "Tag",
    "Tags",
    "Tile",
    "TileSize",
    "Title",
    "Width",
    "apply_colors",
    "size_class",
]
