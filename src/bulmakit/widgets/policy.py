"""Per-component rules for values that must not produce a class.

Bulma already styles an element at its default size (``normal`` for most
elements, ``small`` for tags), so emitting ``is-normal`` would be redundant.
Which variant counts as the default differs per component; the table below
records it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bulmakit.utils.constants import ARE_PREFIX, HAS_PREFIX, IS_PREFIX
from bulmakit.utils.size import Size


@dataclass(frozen=True)
class SizePolicy:
    """How a component turns its ``size`` into a class."""

    prefix: str = IS_PREFIX
    suppressed: frozenset[Size] = frozenset()

    def size_class(self, size: Size | None) -> str:
        """Return the size class, or ``""`` when unset or suppressed."""
        if size is None or size in self.suppressed:
            return ""
        return f"{self.prefix}-{size}"


_NORMAL = frozenset({Size.NORMAL})
_SMALL = frozenset({Size.SMALL})

SIZE_POLICIES: dict[str, SizePolicy] = {
    "button": SizePolicy(suppressed=_NORMAL),
    "buttons": SizePolicy(prefix=ARE_PREFIX, suppressed=_NORMAL),
    "tag": SizePolicy(suppressed=_SMALL),
    "tags": SizePolicy(prefix=ARE_PREFIX, suppressed=_SMALL),
    "delete": SizePolicy(suppressed=_NORMAL),
    "icon": SizePolicy(suppressed=_NORMAL),
    "content": SizePolicy(),
    "progress": SizePolicy(),
    "breadcrumb": SizePolicy(suppressed=_NORMAL),
    "message": SizePolicy(suppressed=_NORMAL),
    "modal-close": SizePolicy(suppressed=_NORMAL),
    "pagination": SizePolicy(suppressed=_NORMAL),
    "tabs": SizePolicy(suppressed=_NORMAL),
    # Sections only have medium and large variants.
    "section": SizePolicy(suppressed=frozenset({Size.SMALL, Size.NORMAL})),
}


def size_class(component: str, size: Size | None) -> str:
    """Size class for *component*; ``""`` when the size adds nothing."""
    return SIZE_POLICIES[component].size_class(size)


class Align(StrEnum):
    """Horizontal alignment of a group (buttons, tabs, breadcrumb...)."""

    LEFT = "left"
    CENTER = "centered"
    RIGHT = "right"


def align_class(align: Align | None) -> str:
    """``is-centered``/``is-right``; left is the default and emits nothing."""
    if align is None or align is Align.LEFT:
        return ""
    return f"{IS_PREFIX}-{align}"


class Separator(StrEnum):
    DIV = "div"
    ARROW = "arrow"
    BULLET = "bullet"
    DOT = "dot"
    SUCCEEDS = "succeeds"


def separator_class(separator: Separator | None) -> str:
    """``has-*-separator``; the plain ``div`` separator emits nothing."""
    if separator is None or separator is Separator.DIV:
        return ""
    return f"{HAS_PREFIX}-{separator}-separator"


def flag_class(enabled: bool, class_name: str) -> str:
    return class_name if enabled else ""
