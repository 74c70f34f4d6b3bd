"""Bottom-up rewrite of a fixed set of tags into inline markdown text.

Children are rewritten before their parent, so a parent's template sees
the already-converted markdown of its descendants.  A matched element is
replaced by a single text node; unmatched tags are left as markup.
"""

from __future__ import annotations

from typing import Callable, Optional

from bs4 import BeautifulSoup, Tag

from condense.tree import attr, replace_with_text, tag_name, text_content

FENCE = "```"

# Returning None leaves the element untouched.
Rewriter = Callable[[Tag], Optional[str]]


def _wrap(marker: str) -> Rewriter:
    def rewrite(el: Tag) -> str:
        return f"{marker}{text_content(el)}{marker}"

    return rewrite


def _link(el: Tag) -> str:
    return f"[{text_content(el)}]({attr(el, 'href')})"


def _image(el: Tag) -> str:
    return f"![{attr(el, 'alt')}]({attr(el, 'src')})"


def _inline_code(el: Tag) -> Optional[str]:
    # Inside <pre> the code block template does the wrapping.
    if isinstance(el.parent, Tag) and tag_name(el.parent) == "pre":
        return None
    return f"`{text_content(el)}`"


def _code_block(el: Tag) -> str:
    children = el.contents
    if (
        len(children) == 1
        and isinstance(children[0], Tag)
        and tag_name(children[0]) == "code"
    ):
        text = text_content(children[0])
    else:
        text = text_content(el)
    return f"\n{FENCE}\n{text}\n{FENCE}\n"


def _heading(el: Tag) -> str:
    level = int(tag_name(el)[1])
    return f"\n{'#' * level} {text_content(el)}\n"


def _blockquote(el: Tag) -> str:
    lines = text_content(el).strip().split("\n")
    return "\n".join(f"> {line}" for line in lines)


def _list_items(el: Tag) -> list[str]:
    return [
        text_content(child).strip()
        for child in el.contents
        if isinstance(child, Tag) and tag_name(child) == "li"
    ]


def _bullet_list(el: Tag) -> str:
    return "\n".join(f"- {item}" for item in _list_items(el)) + "\n"


def _ordered_list(el: Tag) -> str:
    lines = [f"{i}. {item}" for i, item in enumerate(_list_items(el), start=1)]
    return "\n".join(lines) + "\n"


REWRITERS: dict[str, Rewriter] = {
    "strong": _wrap("**"),
    "b": _wrap("**"),
    "em": _wrap("*"),
    "i": _wrap("*"),
    "del": _wrap("~~"),
    "s": _wrap("~~"),
    "strike": _wrap("~~"),
    "a": _link,
    "img": _image,
    "code": _inline_code,
    "pre": _code_block,
    **{f"h{level}": _heading for level in range(1, 7)},
    "blockquote": _blockquote,
    "ul": _bullet_list,
    "ol": _ordered_list,
    "hr": lambda el: "\n---\n",
    "br": lambda el: "\n",
}


def _rewrite_element(el: Tag) -> None:
    if isinstance(el, BeautifulSoup):
        return
    rewriter = REWRITERS.get(tag_name(el))
    if rewriter is None:
        return
    text = rewriter(el)
    if text is not None:
        replace_with_text(el, text)


def rewrite_markdown(node: Tag) -> None:
    """Rewrite *node*'s subtree, then *node* itself, in place.

    Post-order walk on an explicit stack; deep documents do not recurse.
    """
    stack: list[tuple[Tag, bool]] = [(node, False)]
    while stack:
        el, children_done = stack.pop()
        if children_done:
            _rewrite_element(el)
            continue
        stack.append((el, True))
        for child in reversed(list(el.contents)):
            if isinstance(child, Tag):
                stack.append((child, False))
