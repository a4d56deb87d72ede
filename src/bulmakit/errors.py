"""Error hierarchy for bulmakit.

Class composition itself never fails. These errors are raised only by the
layers that turn loose input (command-line options, JSON mappings) into
typed configurations.
"""
from __future__ import annotations


class BulmakitError(Exception):
    """Base error for all bulmakit errors."""


class UnknownVariantError(BulmakitError, ValueError):
    """Raised when text does not name a member of a vocabulary."""

    def __init__(
        self, vocabulary: str, value: str, choices: list[str] | None = None
    ) -> None:
        self.vocabulary = vocabulary
        self.value = value
        self.choices = choices or []
        message = f"Unknown {vocabulary} value: {value!r}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message)


class ConfigError(BulmakitError):
    """Raised when a configuration mapping has an unknown key or a bad shape."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)
