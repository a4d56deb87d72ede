"""Composition settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum

from bulmakit.errors import ConfigError


class TokenOrder(StrEnum):
    """Order of tokens inside a multi-valued segment (viewport pairs, spacing)."""

    INSERTION = "insertion"
    SORTED = "sorted"


@dataclass(frozen=True)
class ComposeConfig:
    token_order: TokenOrder = TokenOrder.INSERTION

    @classmethod
    def from_env(cls) -> ComposeConfig:
        """Build a config from ``BULMAKIT_TOKEN_ORDER`` (defaults to insertion)."""
        raw = os.environ.get("BULMAKIT_TOKEN_ORDER", "").strip().lower()
        if not raw:
            return cls()
        try:
            return cls(token_order=TokenOrder(raw))
        except ValueError:
            raise ConfigError(
                f"BULMAKIT_TOKEN_ORDER must be one of "
                f"{', '.join(o.value for o in TokenOrder)}, got {raw!r}",
                key="BULMAKIT_TOKEN_ORDER",
            ) from None


DEFAULT_CONFIG = ComposeConfig()
