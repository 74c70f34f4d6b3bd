"""Condensing pipeline called from the /condense endpoint and the library API.

Orchestrates parsing, frontmatter capture, structural pruning, wrapper
removal, optional chrome stripping, whitespace cleanup, optional markdown
rewriting and serialization into a single ``condense_html()`` call.  Each
pass runs exactly once, in this order; frontmatter is read first because
later passes delete what it needs.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from condense.chrome import strip_chrome
from condense.frontmatter import (
    Frontmatter,
    extract_frontmatter,
    serialize_frontmatter,
)
from condense.markdown import rewrite_markdown
from condense.pruning import prune_document, remove_document_wrappers
from condense.tables import effective_unwrap_tags
from condense.tree import parse_html, serialize_html
from condense.whitespace import clean_text_nodes, normalize_whitespace
from models.options import CondenseOptions

logger = logging.getLogger("wwwaxe")

_DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def condense(
    raw_html: str, options: Optional[CondenseOptions] = None
) -> tuple[str, Frontmatter]:
    """Condense *raw_html* and also return the captured frontmatter record.

    Args:
        raw_html: Markup text; fragments and full documents are both accepted.
        options: Per-call flags; ``None`` means all defaults.

    Returns:
        ``(content, frontmatter)`` where *content* already carries the
        serialized frontmatter block when one was captured.
    """
    options = options or CondenseOptions()

    soup = parse_html(raw_html)
    frontmatter = extract_frontmatter(soup)

    prune_document(soup, options, effective_unwrap_tags(options.markdown))
    remove_document_wrappers(soup)

    if options.core:
        strip_chrome(soup)

    normalize_whitespace(soup)
    clean_text_nodes(soup)

    if options.markdown:
        rewrite_markdown(soup)

    result = serialize_html(soup)

    # The serializer escapes the blockquote marker.
    if options.markdown:
        result = result.replace("&gt; ", "> ")

    result = _DOCTYPE_RE.sub("", result)
    result = _BLANK_LINES_RE.sub("\n", result).strip()

    block = serialize_frontmatter(frontmatter)
    if block:
        result = f"{block}\n{result}"

    logger.debug(
        "condensed %d -> %d chars (core=%s, markdown=%s)",
        len(raw_html),
        len(result),
        options.core,
        options.markdown,
    )
    return result, frontmatter


def condense_html(raw_html: str, options: Optional[CondenseOptions] = None) -> str:
    """Strip non-content markup from *raw_html* and return condensed text.

    Scripts, styles, hidden elements, presentational wrappers and
    non-content attributes are removed; document structure is kept.  With
    ``markdown`` on, a fixed set of tags becomes inline markdown; with
    ``core`` on, chrome is removed and the main content isolated.
    """
    content, _ = condense(raw_html, options)
    return content
