"""Color vocabularies for the Bulma color helpers."""
from __future__ import annotations

from enum import StrEnum


class TextColor(StrEnum):
    """Colors accepted by the ``has-text-*`` helpers."""

    WHITE = "white"
    BLACK = "black"
    LIGHT = "light"
    DARK = "dark"
    PRIMARY = "primary"
    LINK = "link"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    BLACK_BIS = "black-bis"
    BLACK_TER = "black-ter"
    GREY_DARKER = "grey-darker"
    GREY_DARK = "grey-dark"
    GREY = "grey"
    GREY_LIGHT = "grey-light"
    GREY_LIGHTER = "grey-lighter"
    WHITE_TER = "white-ter"
    WHITE_BIS = "white-bis"


class BackgroundColor(StrEnum):
    """Colors accepted by the ``has-background-*`` helpers.

    Adds the light and dark shades of the main colors to the text palette.
    """

    WHITE = "white"
    BLACK = "black"
    LIGHT = "light"
    DARK = "dark"
    PRIMARY = "primary"
    LINK = "link"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    BLACK_BIS = "black-bis"
    BLACK_TER = "black-ter"
    GREY_DARKER = "grey-darker"
    GREY_DARK = "grey-dark"
    GREY = "grey"
    GREY_LIGHT = "grey-light"
    GREY_LIGHTER = "grey-lighter"
    WHITE_TER = "white-ter"
    WHITE_BIS = "white-bis"
    PRIMARY_LIGHT = "primary-light"
    LINK_LIGHT = "link-light"
    INFO_LIGHT = "info-light"
    SUCCESS_LIGHT = "success-light"
    WARNING_LIGHT = "warning-light"
    DANGER_LIGHT = "danger-light"
    PRIMARY_DARK = "primary-dark"
    LINK_DARK = "link-dark"
    INFO_DARK = "info-dark"
    SUCCESS_DARK = "success-dark"
    WARNING_DARK = "warning-dark"
    DANGER_DARK = "danger-dark"


class Color(StrEnum):
    """Element colors, rendered as ``is-*`` (buttons, tags, notifications...)."""

    WHITE = "white"
    BLACK = "black"
    LIGHT = "light"
    DARK = "dark"
    TEXT = "text"
    GHOST = "ghost"
    PRIMARY = "primary"
    LINK = "link"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
