"""Bulma class name prefixes and fixed helper class names."""
from __future__ import annotations

# Prefixes, joined to a fragment with "-".
HAS_PREFIX = "has"
HAS_TEXT_PREFIX = "has-text"
HAS_TEXT_WEIGHT_PREFIX = "has-text-weight"
HAS_BACKGROUND_PREFIX = "has-background"
IS_PREFIX = "is"
ARE_PREFIX = "are"
IS_SIZE_PREFIX = "is-size"
IS_FONT_FAMILY_PREFIX = "is-family"
IS_OFFSET_PREFIX = "is-offset"
IS_FLEX_DIRECTION_PREFIX = "is-flex-direction"
IS_FLEX_WRAP_PREFIX = "is-flex-wrap"
IS_JUSTIFY_CONTENT_PREFIX = "is-justify-content"
IS_ALIGN_CONTENT_PREFIX = "is-align-content"
IS_ALIGN_ITEMS_PREFIX = "is-align-items"
IS_ALIGN_SELF_PREFIX = "is-align-self"
IS_FLEX_GROW_PREFIX = "is-flex-grow"
IS_FLEX_SHRINK_PREFIX = "is-flex-shrink"

# Spacing prefixes take the direction fragment with no separator: "mx-2".
MARGIN_PREFIX = "m"
PADDING_PREFIX = "p"

# Fixed helper classes.
IS_CLEARFIX = "is-clearfix"
IS_PULLED_LEFT = "is-pulled-left"
IS_PULLED_RIGHT = "is-pulled-right"
IS_OVERLAY = "is-overlay"
IS_CLIPPED = "is-clipped"
IS_RADIUSLESS = "is-radiusless"
IS_SHADOWLESS = "is-shadowless"
IS_UNSELECTABLE = "is-unselectable"
IS_CLICKABLE = "is-clickable"
IS_RELATIVE = "is-relative"
IS_LIGHT = "is-light"
IS_NARROW = "is-narrow"
