"""The size scale shared by most Bulma elements and components."""
from __future__ import annotations

from enum import StrEnum


class Size(StrEnum):
    SMALL = "small"
    NORMAL = "normal"
    MEDIUM = "medium"
    LARGE = "large"
