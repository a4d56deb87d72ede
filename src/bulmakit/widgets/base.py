"""Shared base for component configurations."""
from __future__ import annotations

from dataclasses import dataclass, field

from bulmakit.config import ComposeConfig
from bulmakit.helpers.color import Color, TextColor
from bulmakit.utils.classes import ClassBuilder, class_attr


@dataclass(frozen=True, kw_only=True)
class BaseProperties:
    """Fields every component configuration carries.

    ``modifiers`` holds general Bulma helpers (text color, spacing, flexbox...)
    that apply on top of the component's own classes. ``class_`` is a raw
    class fragment supplied by the caller and always comes last.
    """

    id: str | None = None
    class_: str = ""
    modifiers: ClassBuilder = field(default_factory=ClassBuilder)

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        """Add the component's own classes. Subclasses override this."""
        return builder

    def class_builder(self) -> ClassBuilder:
        return self.configure(self.modifiers).with_custom_class(self.class_)

    def classes(self, config: ComposeConfig | None = None) -> list[str]:
        return self.class_builder().build(config)

    def attributes(self, config: ComposeConfig | None = None) -> dict[str, str]:
        """The ``id``/``class`` attributes to hand to a markup renderer."""
        attrs: dict[str, str] = {}
        if self.id:
            attrs["id"] = self.id
        tokens = self.classes(config)
        if tokens:
            attrs["class"] = class_attr(tokens)
        return attrs


@dataclass(frozen=True, kw_only=True)
class Part(BaseProperties):
    """A component part whose only own class is ``base_class``."""

    base_class = ""
    tag_name = "div"

    def configure(self, builder: ClassBuilder) -> ClassBuilder:
        return builder.with_custom_class(self.base_class)


def apply_colors(
    builder: ClassBuilder,
    color: Color | None = None,
    light: bool | None = None,
    text_color: TextColor | None = None,
) -> ClassBuilder:
    """Apply a component's own color fields on top of its modifiers.

    Unset fields leave whatever the caller put in ``modifiers`` untouched.
    """
    if color is not None:
        builder = builder.with_color(color)
    if light is not None:
        builder = builder.is_light(light)
    if text_color is not None:
        builder = builder.with_text_color(text_color)
    return builder
