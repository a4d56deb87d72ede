"""bulmakit: typed Bulma CSS class composition."""
from __future__ import annotations

__version__ = "0.4.0"

from bulmakit.config import ComposeConfig, TokenOrder
from bulmakit.errors import BulmakitError, ConfigError, UnknownVariantError
from bulmakit.utils.classes import ClassBuilder, class_attr

__all__ = [
    "BulmakitError",
    "ClassBuilder",
    "ComposeConfig",
    "ConfigError",
    "TokenOrder",
    "UnknownVariantError",
    "__version__",
    "class_attr",
]
