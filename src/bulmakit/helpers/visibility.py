"""Display and responsive breakpoint vocabularies."""
from __future__ import annotations

from enum import StrEnum


class Display(StrEnum):
    BLOCK = "block"
    FLEX = "flex"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    INLINE_FLEX = "inline-flex"
    HIDDEN = "hidden"
    INVISIBLE = "invisible"
    SCREEN_READER_ONLY = "sr-only"


class Viewport(StrEnum):
    """Bulma breakpoints.

    The ``*_ONLY`` variants target a single range; the others apply from the
    breakpoint upwards (``MOBILE`` and ``TOUCH`` apply downwards).
    """

    MOBILE = "mobile"
    TOUCH = "touch"
    TABLET_ONLY = "tablet-only"
    TABLET = "tablet"
    DESKTOP_ONLY = "desktop-only"
    DESKTOP = "desktop"
    WIDESCREEN_ONLY = "widescreen-only"
    WIDESCREEN = "widescreen"
    FULL_HD = "fullhd"
