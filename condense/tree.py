"""Parse/serialize boundary and small tree helpers shared by every pass.

The tree is a ``BeautifulSoup`` document.  bs4 keeps parent and sibling
links consistent on ``extract()``, ``decompose()``, ``unwrap()``,
``insert()`` and ``replace_with()``, so passes only mutate through those.
"""

from __future__ import annotations

from typing import Callable, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from condense.tables import MEANINGFUL_VOID_TAGS


def parse_html(raw_html: str) -> BeautifulSoup:
    """Parse *raw_html* with the lxml builder.

    ``multi_valued_attributes=None`` keeps ``class``/``rel`` etc. as plain
    strings instead of token lists.
    """
    return BeautifulSoup(raw_html, "lxml", multi_valued_attributes=None)


def serialize_html(soup: BeautifulSoup) -> str:
    """Render *soup* with ``&``, ``<`` and ``>`` escaped in text."""
    return soup.decode(formatter="minimal")


def is_text(node: PageElement) -> bool:
    """True for plain text nodes (not comments, doctypes, CDATA...)."""
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def tag_name(el: Tag) -> str:
    return (el.name or "").lower()


def attr(el: Tag, name: str) -> str:
    """Return attribute *name* as a string, ``""`` when absent."""
    value = el.attrs.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


def text_content(node: PageElement) -> str:
    """Concatenate every text node under *node*, in document order."""
    if is_text(node):
        return str(node)
    if isinstance(node, Tag):
        return "".join(str(s) for s in node.descendants if is_text(s))
    return ""


def has_meaningful_content(node: PageElement) -> bool:
    """Non-blank text, an intrinsically meaningful void element, or any
    descendant that is one of those."""
    if is_text(node):
        return bool(node.strip())
    if not isinstance(node, Tag):
        return False
    if tag_name(node) in MEANINGFUL_VOID_TAGS:
        return True
    for el in node.descendants:
        if is_text(el):
            if el.strip():
                return True
        elif isinstance(el, Tag) and tag_name(el) in MEANINGFUL_VOID_TAGS:
            return True
    return False


def find_first(
    root: Tag, predicate: Callable[[Tag], bool]
) -> Optional[Tag]:
    """Depth-first search for the first element under *root* matching
    *predicate*."""
    for el in root.descendants:
        if isinstance(el, Tag) and predicate(el):
            return el
    return None


def find_by_id(root: Tag, element_id: str) -> Optional[Tag]:
    return find_first(root, lambda el: attr(el, "id") == element_id)


def replace_with_text(el: Tag, text: str) -> NavigableString:
    """Swap *el* (and its subtree) for a single text node."""
    node = NavigableString(text)
    el.replace_with(node)
    return node
