"""Hidden-element detection and head-element usefulness checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from condense.tables import USEFUL_LINK_RELS, USEFUL_META_NAMES
from condense.tree import attr

if TYPE_CHECKING:
    from bs4 import Tag

    from models.options import CondenseOptions

# Matched verbatim against the raw style text; this is not a CSS parser.
_HIDDEN_STYLE_MARKERS = (
    "display:none",
    "display: none",
    "visibility:hidden",
    "visibility: hidden",
)


def is_hidden(el: Tag, options: CondenseOptions) -> bool:
    """Check if an element should be dropped as hidden.

    1. ``hidden`` attribute present (value ignored)
    2. ``aria-hidden="true"``, unless ``keep_aria_hidden`` is set
    3. inline ``style`` containing one of the literal hiding declarations
    """
    if "hidden" in el.attrs:
        return True
    if not options.keep_aria_hidden and attr(el, "aria-hidden") == "true":
        return True
    style = attr(el, "style")
    return any(marker in style for marker in _HIDDEN_STYLE_MARKERS)


def is_useful_meta(el: Tag) -> bool:
    """Check if a ``<meta>`` carries content worth keeping.

    Descriptive names, Open Graph / Twitter card properties, charset and
    content-type declarations survive; everything else is dropped.
    """
    name = attr(el, "name").lower()
    prop = attr(el, "property").lower()

    if name in USEFUL_META_NAMES:
        return True
    if prop.startswith("og:"):
        return True
    if name.startswith("twitter:"):
        return True
    if "charset" in el.attrs:
        return True
    return attr(el, "http-equiv").lower() == "content-type"


def is_useful_link(el: Tag) -> bool:
    """Only canonical and alternate ``<link>`` elements survive."""
    return attr(el, "rel").lower() in USEFUL_LINK_RELS
