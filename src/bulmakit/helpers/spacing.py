"""Spacing vocabularies for the margin (``m*``) and padding (``p*``) helpers."""
from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Side(s) a spacing helper applies to.

    ``ALL`` has an empty fragment so that ``m`` + ``""`` + ``-2`` gives ``m-2``.
    """

    ALL = ""
    TOP = "t"
    RIGHT = "r"
    BOTTOM = "b"
    LEFT = "l"
    HORIZONTAL = "x"
    VERTICAL = "y"


class Spacing(StrEnum):
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
