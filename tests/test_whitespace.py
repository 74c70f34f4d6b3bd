"""Tests for condense.whitespace — text-node normalization."""

from bs4 import BeautifulSoup

from condense.pruning import remove_document_wrappers
from condense.tree import parse_html
from condense.whitespace import clean_text_nodes, collapse_whitespace, normalize_whitespace


def _parse(html: str) -> BeautifulSoup:
    soup = parse_html(html)
    remove_document_wrappers(soup)
    return soup


def test_collapse_whitespace():
    assert collapse_whitespace("Hello     world\n\n\n\nfoo") == "Hello world foo"
    assert collapse_whitespace("a\t\r\n  b") == "a b"
    assert collapse_whitespace("plain") == "plain"


def test_normalize_whitespace_rewrites_every_text_node():
    soup = _parse("<div><p>a\n\n  b</p><pre>x\t\ty</pre></div>")
    normalize_whitespace(soup)
    assert str(soup) == "<div><p>a b</p><pre>x y</pre></div>"


def test_clean_text_nodes_shrinks_long_blank_nodes_only():
    soup = _parse("<p><b>a</b> <i>b</i>\n\n   <em>c</em></p>")
    clean_text_nodes(soup)
    p = soup.find("p")
    assert [str(node) for node in p.contents if isinstance(node, str)] == [" ", " "]


def test_clean_text_nodes_leaves_content_alone():
    soup = _parse("<p>  keep  me  </p>")
    clean_text_nodes(soup)
    assert str(soup) == "<p>  keep  me  </p>"
