# site_mirror/crawler/link_extractor.py
"""
Link and resource extraction for SiteMirror.
"""
from __future__ import annotations

from typing import Dict, Iterator, NamedTuple, Sequence, Tuple

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from site_mirror.logger import logger


class TagAttr(NamedTuple):
    """(tag, attribute) pair naming one category of reference inside a document."""

    tag: str
    attr: str


RESOURCE_TAGS: Tuple[TagAttr, ...] = (
    TagAttr("a", "href"),
    TagAttr("img", "src"),
    TagAttr("script", "src"),
    TagAttr("link", "href"),
)


def extract_links(html: str, tags: Sequence[TagAttr] = RESOURCE_TAGS) -> Iterator[Tuple[TagAttr, str]]:
    """
    Yield ``(category, raw value)`` for every reference in *html*, in document order.

    Values are returned unresolved. Markup the parser rejects yields nothing.
    """
    by_tag: Dict[str, TagAttr] = {category.tag: category for category in tags}
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse document, no links extracted: %s", exc)
        return
    for node in soup.find_all(list(by_tag)):
        if not isinstance(node, Tag):
            continue
        category = by_tag[node.name]
        value = node.get(category.attr)
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value:
            yield category, value
