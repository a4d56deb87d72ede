"""Resolve vocabulary members from loose text (CLI options, JSON values)."""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import TypeVar

from bulmakit.errors import UnknownVariantError

logger = logging.getLogger("bulmakit.helpers")

E = TypeVar("E", bound=StrEnum)


def _normalize(text: str) -> str:
    return text.strip().lower().replace("_", "-")


def parse_variant(vocabulary: type[E], text: str) -> E:
    """Return the member of *vocabulary* named by *text*.

    Accepts either the member's fragment (``"black-bis"``, ``"fullhd"``,
    ``"2"``) or its name (``"BLACK_BIS"``, ``"full-hd"``), case-insensitively
    and with ``-``/``_`` treated alike. Fragments win over names when both
    could match.
    """
    for member in vocabulary:
        if member.value == text:
            return member

    wanted = _normalize(text)
    for member in vocabulary:
        if _normalize(member.value) == wanted:
            return member
    for member in vocabulary:
        if _normalize(member.name) == wanted:
            return member

    logger.debug("Rejected %r for %s", text, vocabulary.__name__)
    raise UnknownVariantError(
        vocabulary.__name__,
        text,
        [member.value or member.name.lower() for member in vocabulary],
    )
