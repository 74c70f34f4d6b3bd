"""Text-node whitespace cleanup.

Both passes are purely local to each text node and know nothing about the
surrounding markup (``<pre>`` included).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bs4 import NavigableString

from condense.tree import is_text

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

_LINE_BREAKS_RE = re.compile(r"[\t\n\r]+")
_SPACES_RE = re.compile(r" {2,}")


def _text_nodes(soup: BeautifulSoup) -> list[NavigableString]:
    # Snapshot: replace_with() rewires the descendants chain.
    return [node for node in soup.descendants if is_text(node)]


def collapse_whitespace(text: str) -> str:
    """Tabs/newlines to one space, then runs of spaces to one space."""
    return _SPACES_RE.sub(" ", _LINE_BREAKS_RE.sub(" ", text))


def normalize_whitespace(soup: BeautifulSoup) -> None:
    for node in _text_nodes(soup):
        collapsed = collapse_whitespace(str(node))
        if collapsed != node:
            node.replace_with(NavigableString(collapsed))


def clean_text_nodes(soup: BeautifulSoup) -> None:
    """Shrink whitespace-only text nodes longer than one char to ``" "``.

    Single-character whitespace nodes are left alone so inline elements
    keep their separating space.
    """
    for node in _text_nodes(soup):
        if not node.strip() and len(node) > 1:
            node.replace_with(NavigableString(" "))
