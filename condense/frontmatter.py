"""Frontmatter extraction from ``<head>`` and YAML-style serialization.

``extract_frontmatter()`` must run before any pruning: the pruner strips
``rel`` and drops most ``<link>``/``<meta>`` elements, which are exactly
what is read here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from condense.tree import attr, tag_name, text_content

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

# Any of these forces the value into double quotes.
_YAML_SPECIAL = (
    ": ", "\n", '"', "'", "[", "]", "{", "}", "#", "&", "*", "!", "|", ">",
    "%", "@", "`",
)

FIELD_ORDER = ("title", "description", "url", "image")


@dataclass(frozen=True)
class Frontmatter:
    """Page metadata captured from ``<head>``."""

    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None

    def as_dict(self) -> dict[str, str]:
        """Only the captured fields, in output order."""
        return {k: v for k, v in asdict(self).items() if v}


def _first_value(
    elements: Iterable[Tag], key: str, expected: str, value_attr: str
) -> Optional[str]:
    """Return the trimmed *value_attr* of the first element whose *key*
    equals *expected* (case-insensitive) and whose raw value is non-empty.

    That element wins even when its value trims to nothing, in which case
    ``None`` is returned.
    """
    for el in elements:
        if attr(el, key).lower() != expected:
            continue
        value = attr(el, value_attr)
        if value:
            return value.strip() or None
    return None


def extract_frontmatter(soup: BeautifulSoup) -> Frontmatter:
    """Read title, description, url and image from the first ``<head>``.

    A missing ``<head>`` yields an empty record.  The url prefers
    ``link[rel=canonical]`` and only falls back to ``og:url`` when no
    canonical link carries an href.
    """
    head = soup.find("head")
    if head is None:
        return Frontmatter()

    title = None
    title_el = head.find("title")
    if title_el is not None:
        title = text_content(title_el).strip() or None

    metas = [el for el in head.find_all(True) if tag_name(el) == "meta"]
    links = [el for el in head.find_all(True) if tag_name(el) == "link"]

    url = _first_value(links, "rel", "canonical", "href")
    if url is None:
        url = _first_value(metas, "property", "og:url", "content")

    return Frontmatter(
        title=title,
        description=_first_value(metas, "name", "description", "content"),
        url=url,
        image=_first_value(metas, "property", "og:image", "content"),
    )


def yaml_escape(value: str) -> str:
    """Double-quote *value* when it contains YAML-significant characters."""
    if not any(token in value for token in _YAML_SPECIAL):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def serialize_frontmatter(frontmatter: Frontmatter) -> str:
    """Render a ``---`` delimited block, or ``""`` when nothing was captured."""
    fields = frontmatter.as_dict()
    lines = [f"{key}: {yaml_escape(fields[key])}" for key in FIELD_ORDER if key in fields]
    if not lines:
        return ""
    return "---\n" + "\n".join(lines) + "\n---"
