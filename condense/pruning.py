"""Bottom-up structural pruning of the parsed document.

Each element is judged only after all of its children have been
processed, so a wrapper emptied by its children's removal is itself
swept.  Children are always iterated from a snapshot of ``contents``
because unwrapping and removal splice the live list.

Per element, in order:
    1. comments are dropped
    2. ``REMOVE_TAGS`` subtrees are dropped (canonical/alternate links survive)
    3. hidden elements are dropped
    4. ``<meta>`` without useful content is dropped
    5. children are pruned, then the element's attributes are sanitized
    6. tags outside ``KEEP_TAGS`` are unwrapped, dropped when empty, or kept
    7. any remaining non-void element with no meaningful content is dropped
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import Comment, Tag

from condense.attributes import has_content_attributes, sanitize_attributes
from condense.filtering import is_hidden, is_useful_link, is_useful_meta
from condense.tables import (
    HEAD_STRUCTURAL_TAGS,
    KEEP_TAGS,
    REMOVE_TAGS,
    VOID_TAGS,
)
from condense.tree import has_meaningful_content, tag_name

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import PageElement

    from models.options import CondenseOptions


def unwrap_element(el: Tag) -> None:
    """Replace *el* with its children, in order, dropping its attributes."""
    if el.parent is None:
        return
    if not el.contents:
        el.decompose()
        return
    el.unwrap()


def _prune_before_children(node: PageElement, options: CondenseOptions) -> bool:
    """Steps 1-4.  Returns True when *node* survives and its children
    should be visited."""
    if isinstance(node, Comment):
        node.extract()
        return False

    if not isinstance(node, Tag):
        return False

    tag = tag_name(node)

    if tag in REMOVE_TAGS:
        if tag == "link" and is_useful_link(node):
            sanitize_attributes(node, options)
            return False
        node.decompose()
        return False

    if is_hidden(node, options):
        node.decompose()
        return False

    if tag == "meta" and not is_useful_meta(node):
        node.decompose()
        return False

    return True


def prune_node(
    node: PageElement,
    options: CondenseOptions,
    unwrap_tags: frozenset[str],
) -> None:
    """Prune *node* and its subtree in place.

    Walks the subtree with an explicit stack so nesting depth is not bound
    by the interpreter's recursion limit.  Children are finished, in
    document order, before their parent is judged.

    Args:
        node: Any node of the parsed document.
        options: Resolved per-call options.
        unwrap_tags: The effective unwrap set (see
            ``tables.effective_unwrap_tags``).
    """
    stack: list[tuple[PageElement, bool]] = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if children_done:
            _prune_after_children(current, options, unwrap_tags)
            continue
        if not _prune_before_children(current, options):
            continue
        stack.append((current, True))
        for child in reversed(list(current.contents)):
            stack.append((child, False))


def _prune_after_children(
    node: Tag,
    options: CondenseOptions,
    unwrap_tags: frozenset[str],
) -> None:
    """Steps 5-7, run once every child of *node* has been pruned."""
    tag = tag_name(node)

    sanitize_attributes(node, options)

    if tag not in KEEP_TAGS:
        if tag in unwrap_tags and not has_content_attributes(node, options):
            unwrap_element(node)
            return
        if not has_meaningful_content(node):
            node.decompose()
            return
        # Unknown tag with real content (custom elements etc.): kept as-is.

    if (
        tag not in VOID_TAGS
        and tag not in HEAD_STRUCTURAL_TAGS
        and not has_meaningful_content(node)
    ):
        node.decompose()


def prune_document(
    soup: BeautifulSoup,
    options: CondenseOptions,
    unwrap_tags: frozenset[str],
) -> None:
    """Run ``prune_node`` over every original top-level node of *soup*."""
    for node in list(soup.contents):
        prune_node(node, options, unwrap_tags)


def remove_document_wrappers(soup: BeautifulSoup) -> None:
    """Drop ``<head>`` and unwrap ``<body>`` and ``<html>``.

    Fragments without an ``<html>`` element are left untouched.
    """
    html = soup.find("html")
    if html is None:
        return

    head = html.find("head")
    if head is not None:
        head.decompose()

    body = html.find("body")
    if body is not None:
        unwrap_element(body)

    # Re-find: the tree changed under us.
    html = soup.find("html")
    if html is not None:
        unwrap_element(html)
