"""Static tag and attribute classification tables.

All names are stored lowercase; callers lowercase before lookup.
"""

from __future__ import annotations

# Removed wholesale (tag + all descendants).
REMOVE_TAGS = frozenset({
    "script", "style", "noscript", "svg", "link", "iframe", "template",
})

# Presentational wrappers: replaced by their children.
UNWRAP_TAGS = frozenset({
    "span", "div", "font", "center", "b", "i", "u", "em", "strong", "small",
    "big", "mark", "sub", "sup", "abbr", "cite", "code", "kbd", "samp", "var",
    "del", "ins", "s", "strike", "wbr", "bdi", "bdo",
})

# Must survive pruning so the markdown rewriter can still convert them.
MARKDOWN_PRESERVE_TAGS = frozenset({
    "strong", "b", "em", "i", "code", "del", "s", "strike",
})

KEEP_TAGS = frozenset({
    # Document
    "html", "head", "body",
    # Meta
    "title", "meta", "base",
    # Sectioning
    "header", "footer", "main", "nav", "article", "section", "aside",
    "hgroup", "search", "address",
    # Headings
    "h1", "h2", "h3", "h4", "h5", "h6",
    # Content
    "p", "blockquote", "pre", "figure", "figcaption", "hr", "br",
    # Lists
    "ul", "ol", "li", "dl", "dt", "dd", "menu",
    # Tables
    "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption",
    "colgroup", "col",
    # Forms
    "form", "fieldset", "legend", "label", "input", "textarea", "select",
    "option", "optgroup", "button", "output", "datalist",
    # Media
    "img", "picture", "source", "video", "audio", "track",
    # Links
    "a",
    # Other semantic
    "details", "summary", "dialog", "time",
})

# Allow-list; everything not listed here (or governed by a keep flag) is dropped.
CONTENT_ATTRIBUTES = frozenset({
    # Links & media
    "href", "src", "srcset", "alt", "poster",
    # Semantics
    "role", "aria-label", "aria-labelledby", "aria-describedby",
    "title", "lang", "dir", "translate",
    # Forms
    "type", "name", "value", "placeholder", "for", "action", "method",
    "required", "disabled", "checked", "selected", "readonly",
    "min", "max", "step", "pattern", "maxlength", "minlength",
    "multiple", "rows", "cols",
    # Tables
    "colspan", "rowspan", "scope", "headers",
    # Meta
    "content", "property", "charset", "http-equiv",
    # Media
    "width", "height", "controls", "autoplay", "loop", "muted",
    # Misc
    "datetime", "open", "start", "reversed",
})

CHROME_TAGS = frozenset({"header", "nav", "footer", "aside", "dialog"})

CHROME_ROLES = frozenset({
    "banner", "navigation", "complementary", "contentinfo", "search",
})

# Ordered: first id found wins.
WELL_KNOWN_CONTENT_IDS = (
    "main-content", "content", "main", "page-content", "site-content",
)

# Never swept as empty.
VOID_TAGS = frozenset({
    "br", "hr", "img", "input", "meta", "source", "track", "col", "base",
})
HEAD_STRUCTURAL_TAGS = frozenset({"head", "html", "body", "title"})

# Childless elements that still count as content.
MEANINGFUL_VOID_TAGS = frozenset({
    "img", "input", "br", "hr", "video", "audio", "source", "track",
})

USEFUL_META_NAMES = frozenset({
    "description", "author", "keywords", "robots", "viewport",
})
USEFUL_LINK_RELS = frozenset({"canonical", "alternate"})


def effective_unwrap_tags(markdown: bool) -> frozenset[str]:
    """Return the unwrap set, minus the tags the markdown pass still needs."""
    if not markdown:
        return UNWRAP_TAGS
    return UNWRAP_TAGS - MARKDOWN_PRESERVE_TAGS
