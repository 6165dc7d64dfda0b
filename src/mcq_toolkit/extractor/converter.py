"""
Module: extractor.converter

Purpose:
    Convert a (possibly sentinel-marked) .docx package into an ordered
    sequence of block-level text elements. Wraps mammoth for the
    docx -> HTML step and BeautifulSoup for walking the resulting markup.

Contract:
    - Paragraph order of the document is preserved.
    - Text inside a block is concatenated exactly as emitted by mammoth,
      so sentinel tokens and their surrounding whitespace survive verbatim.
    - Lists contribute one block per <li>; tables one block per cell
      paragraph; <br> becomes a single space.

Key Functions:
    - convert_to_blocks(): Package bytes -> ConversionResult
    - html_to_blocks(): HTML -> ordered block texts

Dependencies:
    - mammoth: docx -> HTML conversion
    - bs4 (BeautifulSoup): HTML traversal

Used By:
    - extractor.pipeline: Second stage of parse_document()
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import mammoth
from bs4 import BeautifulSoup, NavigableString, Tag

from .errors import DocumentConversionError

logger = logging.getLogger(__name__)

LIST_TAGS = ("ul", "ol")
PARAGRAPH_TAGS = ("p", "h1", "h2", "h3", "h4", "h5", "h6")


@dataclass(frozen=True)
class ConversionResult:
    """
    Converter output.

    Attributes:
        html: Markup produced by mammoth
        blocks: Block texts in document order (unstripped)
        messages: Converter warnings, e.g. unrecognised styles
    """
    html: str
    blocks: Tuple[str, ...]
    messages: Tuple[str, ...] = ()


def convert_to_blocks(package: bytes) -> ConversionResult:
    """
    Convert .docx bytes to ordered block texts.

    Args:
        package: .docx package bytes (sentinel-marked or not)

    Returns:
        ConversionResult with HTML and block texts

    Raises:
        DocumentConversionError: If mammoth cannot read the package

    Example:
        >>> result = convert_to_blocks(marked.package)
        >>> result.blocks[0]
        'Câu 1: 2+2=?'
    """
    try:
        result = mammoth.convert_to_html(io.BytesIO(package), include_default_style_map=True)
    except Exception as e:
        raise DocumentConversionError(f"Document conversion failed: {e}") from e

    html = result.value
    messages = tuple(f"{m.type}: {m.message}" for m in result.messages)
    for message in messages:
        logger.debug(f"mammoth {message}")

    blocks = tuple(html_to_blocks(html))
    logger.debug(f"Converted document to {len(blocks)} blocks ({len(html)} chars of HTML)")
    return ConversionResult(html=html, blocks=blocks, messages=messages)


def html_to_blocks(html: str) -> List[str]:
    """
    Flatten HTML into block-level texts in document order.

    Args:
        html: HTML fragment (mammoth output)

    Returns:
        List of block texts, whitespace untouched
    """
    soup = BeautifulSoup(html, "html.parser")
    return list(_iter_blocks(soup))


def _iter_blocks(parent: Tag) -> Iterator[str]:
    for node in parent.children:
        if isinstance(node, NavigableString):
            if node.strip():
                yield str(node)
            continue
        if not isinstance(node, Tag):
            continue

        if node.name in LIST_TAGS:
            yield from _list_blocks(node)
        elif node.name == "table":
            yield from _table_blocks(node)
        else:
            yield _element_text(node)


def _list_blocks(list_el: Tag) -> Iterator[str]:
    for item in list_el.find_all("li", recursive=False):
        yield _element_text(item)
        # Nested lists follow their parent item
        for nested in item.find_all(LIST_TAGS, recursive=False):
            yield from _list_blocks(nested)


def _table_blocks(table: Tag) -> Iterator[str]:
    for row in table.find_all("tr"):
        for cell in row.find_all(["td", "th"], recursive=False):
            paragraphs = cell.find_all(PARAGRAPH_TAGS, recursive=False)
            if paragraphs:
                for paragraph in paragraphs:
                    yield _element_text(paragraph)
            else:
                yield _element_text(cell)


def _element_text(element: Tag) -> str:
    """Concatenate inline text, skipping nested lists."""
    parts: List[str] = []
    for node in element.children:
        if isinstance(node, NavigableString):
            parts.append(str(node))
        elif isinstance(node, Tag):
            if node.name == "br":
                parts.append(" ")
            elif node.name in LIST_TAGS:
                continue
            else:
                parts.append(_element_text(node))
    return "".join(parts)
