"""Chrome stripping and main-content isolation (``core`` mode).

Removes navigational/peripheral regions anywhere in the tree.  An explicit
``<main>`` or ``role="main"`` region is authoritative; without one the
document is narrowed to the first fallback match:

    1. the first ``<article>``
    2. the target of a "skip to content" fragment link
    3. the first element whose id is in ``WELL_KNOWN_CONTENT_IDS``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from bs4 import Tag

from condense.tables import CHROME_ROLES, CHROME_TAGS, WELL_KNOWN_CONTENT_IDS
from condense.tree import attr, find_by_id, find_first, tag_name, text_content

if TYPE_CHECKING:
    from bs4 import BeautifulSoup


def is_chrome(el: Tag) -> bool:
    return (
        tag_name(el) in CHROME_TAGS
        or attr(el, "role").lower() in CHROME_ROLES
    )


def remove_chrome_elements(node: Tag) -> None:
    """Drop every chrome element under *node*, at any depth."""
    stack = [node]
    while stack:
        current = stack.pop()
        for child in list(current.contents):
            if not isinstance(child, Tag):
                continue
            if is_chrome(child):
                child.decompose()
            else:
                stack.append(child)


def _is_main(el: Tag) -> bool:
    return tag_name(el) == "main" or attr(el, "role").lower() == "main"


def _is_skip_link(el: Tag) -> bool:
    if tag_name(el) != "a" or not attr(el, "href").startswith("#"):
        return False
    return "skip" in text_content(el).lower()


def find_core_content(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the element to use as the content root, or ``None``."""
    article = find_first(soup, lambda el: tag_name(el) == "article")
    if article is not None:
        return article

    skip_links = [
        el for el in soup.descendants
        if isinstance(el, Tag) and _is_skip_link(el)
    ]
    for link in skip_links:
        target_id = attr(link, "href")[1:]
        if not target_id:
            continue
        target = find_by_id(soup, target_id)
        if target is not None:
            return target

    for content_id in WELL_KNOWN_CONTENT_IDS:
        el = find_by_id(soup, content_id)
        if el is not None:
            return el

    return None


def strip_chrome(soup: BeautifulSoup) -> None:
    """Remove chrome, then isolate the core content if no main region exists.

    When a fallback match is found the document's children are replaced
    by exactly that element.  This function **mutates** *soup* in place.
    """
    remove_chrome_elements(soup)

    if find_first(soup, _is_main) is not None:
        return

    core = find_core_content(soup)
    if core is None:
        return

    core.extract()
    for child in list(soup.contents):
        child.extract()
    soup.append(core)
