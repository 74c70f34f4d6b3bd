"""Per-element attribute allow-listing.

Event handlers and ``style`` always go.  ``class``, ``id`` and ``data-*``
are governed by the keep flags on ``CondenseOptions``; anything else must
appear in ``CONTENT_ATTRIBUTES``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from condense.tables import CONTENT_ATTRIBUTES

if TYPE_CHECKING:
    from bs4 import Tag

    from models.options import CondenseOptions


def is_event_attribute(name: str) -> bool:
    """``on`` followed by at least one character (``onclick``, ``onload``)."""
    return name.lower().startswith("on") and len(name) > 2


def is_data_attribute(name: str) -> bool:
    return name.lower().startswith("data-")


def _keep_attribute(name: str, options: CondenseOptions) -> bool:
    key = name.lower()
    if is_event_attribute(key) or key == "style":
        return False
    if key == "class":
        return options.keep_classes
    if key == "id":
        return options.keep_ids
    if is_data_attribute(key):
        return options.keep_data_attributes
    return key in CONTENT_ATTRIBUTES


def sanitize_attributes(el: Tag, options: CondenseOptions) -> None:
    """Rebuild ``el.attrs`` keeping only allowed attributes.

    Each attribute is judged on its own.  Mutates *el* in place.
    """
    el.attrs = {
        name: value
        for name, value in el.attrs.items()
        if _keep_attribute(name, options)
    }


def has_content_attributes(el: Tag, options: CondenseOptions) -> bool:
    """True when *el* still carries an attribute worth preserving the
    element for (blocks unwrapping)."""
    for name in el.attrs:
        key = name.lower()
        if key in CONTENT_ATTRIBUTES:
            return True
        if key == "id" and options.keep_ids:
            return True
        if key == "class" and options.keep_classes:
            return True
        if is_data_attribute(key) and options.keep_data_attributes:
            return True
    return False
