"""Class composition utilities: prefixes, the common size scale and the builder."""
from bulmakit.utils.classes import (
    AlignmentModifiers,
    ClassBuilder,
    OtherModifiers,
    TextModifiers,
    class_attr,
)
from bulmakit.utils.size import Size

__all__ = [
    "AlignmentModifiers",
    "ClassBuilder",
    "OtherModifiers",
    "Size",
    "TextModifiers",
    "class_attr",
]
