"""HTML condensing pipeline for text-oriented agents."""

from condense.frontmatter import (
    Frontmatter,
    extract_frontmatter,
    serialize_frontmatter,
)
from condense.pipeline import condense, condense_html

__all__ = [
    "Frontmatter",
    "condense",
    "condense_html",
    "extract_frontmatter",
    "serialize_frontmatter",
]
