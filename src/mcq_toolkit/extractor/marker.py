"""
Module: extractor.marker

Purpose:
    Rewrite a .docx package so that every text run styled as "correct
    answer" (red-dominant color or active underline) carries the sentinel
    token in its visible text. The token survives the lossy docx -> HTML
    conversion, where run formatting is otherwise dropped.

Key Functions:
    - mark_package(): Inject the sentinel into answer-styled runs
    - is_answer_run(): Formatting predicate for a w:rPr element
    - detect_colors(): Distinct run colors for diagnostics

Key Classes:
    - MarkResult: Marked package bytes plus the rewritten body XML

Dependencies:
    - zipfile (std): Package access
    - lxml: Body XML parsing/serialization
    - docx.oxml.ns.qn: WordprocessingML qualified names

Used By:
    - extractor.pipeline: First stage of parse_document()
"""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from dataclasses import dataclass
from typing import List, Optional

from docx.oxml.ns import qn
from lxml import etree

from .config import ExtractionConfig
from .diagnostics import DiagnosticsLog
from .redness import is_redish

logger = logging.getLogger(__name__)

# Underline values that mean "no underline"
_UNDERLINE_OFF = frozenset({"none", "false"})

# Raised by zipfile while decompressing a damaged member
_MEMBER_ERRORS = (zlib.error, EOFError, OSError)

_W_R = qn("w:r")
_W_RPR = qn("w:rPr")
_W_T = qn("w:t")
_W_COLOR = qn("w:color")
_W_U = qn("w:u")
_W_VAL = qn("w:val")
_XML_SPACE = qn("xml:space")


class PackageError(Exception):
    """The package or its body part cannot be read."""
    pass


@dataclass(frozen=True)
class MarkResult:
    """
    Result of marking a package.

    Attributes:
        package: Package bytes to convert (the original bytes if ok is False)
        document_xml: Rewritten body XML ("" if marking failed)
        marked_runs: Number of text nodes that received the sentinel
        ok: False when the package could not be read and was passed through
    """
    package: bytes
    document_xml: str
    marked_runs: int
    ok: bool = True


def is_answer_run(rpr: Optional[etree._Element]) -> bool:
    """
    Check whether run properties mark a correct answer.

    A run qualifies if its w:color value is red-dominant, or it declares a
    w:u underline whose value is present and not "none"/"false".

    Args:
        rpr: The run's w:rPr element (None if the run has no properties)

    Returns:
        True if the run is styled as a correct answer
    """
    if rpr is None:
        return False

    color = rpr.find(_W_COLOR)
    if color is not None and is_redish(color.get(_W_VAL)):
        return True

    underline = rpr.find(_W_U)
    if underline is not None:
        value = underline.get(_W_VAL)
        if value and value.lower() not in _UNDERLINE_OFF:
            return True

    return False


def mark_package(
    package: bytes,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsLog] = None,
) -> MarkResult:
    """
    Inject the sentinel token into every answer-styled run.

    Each non-empty w:t inside a qualifying run becomes
    " " + sentinel + original_text, with xml:space="preserve" so the
    boundary space is kept by the converter. All other package parts are
    copied through unchanged.

    Failure to read the package is NOT fatal: the original bytes are
    returned with ok=False and a diagnostic is recorded, so downstream
    stages simply detect no answers.

    Args:
        package: Raw .docx bytes
        config: Extraction config (sentinel, body part path)
        diagnostics: Optional log to record stage messages into

    Returns:
        MarkResult with the marked package

    Example:
        >>> result = mark_package(Path("exam.docx").read_bytes())
        >>> result.marked_runs
        12
    """
    config = config or ExtractionConfig()
    diagnostics = diagnostics if diagnostics is not None else DiagnosticsLog()

    try:
        root = _read_document(package, config.document_part)
    except PackageError as e:
        diagnostics.warning("marker", f"Could not read {config.document_part}: {e}")
        return MarkResult(package=package, document_xml="", marked_runs=0, ok=False)

    marked = 0
    for run in root.iter(_W_R):
        if not is_answer_run(run.find(_W_RPR)):
            continue
        for text_el in run.iter(_W_T):
            if not text_el.text:
                continue
            text_el.text = f" {config.sentinel}{text_el.text}"
            text_el.set(_XML_SPACE, "preserve")
            marked += 1

    diagnostics.record("marker", f"Injected marker into {marked} text runs.")

    new_xml = etree.tostring(root, xml_declaration=True, encoding="UTF-8", standalone=True)
    try:
        new_package = _replace_part(package, config.document_part, new_xml)
    except PackageError as e:
        diagnostics.warning("marker", f"Could not rewrite package: {e}")
        return MarkResult(package=package, document_xml="", marked_runs=0, ok=False)

    return MarkResult(
        package=new_package,
        document_xml=new_xml.decode("utf-8"),
        marked_runs=marked,
    )


def detect_colors(package: bytes, config: Optional[ExtractionConfig] = None) -> List[str]:
    """
    List the distinct RRGGBB run colors used in the body part.

    Used for diagnostics only; unreadable packages yield an empty list.

    Returns:
        Upper-cased color values in first-seen order
    """
    config = config or ExtractionConfig()
    try:
        root = _read_document(package, config.document_part)
    except PackageError as e:
        logger.debug(f"Color scan skipped: {e}")
        return []

    colors: List[str] = []
    for color in root.iter(_W_COLOR):
        value = (color.get(_W_VAL) or "").upper()
        if len(value) == 6 and all(c in "0123456789ABCDEF" for c in value) and value not in colors:
            colors.append(value)
    return colors


def _read_document(package: bytes, part: str) -> etree._Element:
    """Parse the body part of a package."""
    try:
        with zipfile.ZipFile(io.BytesIO(package)) as zf:
            data = zf.read(part)
    except zipfile.BadZipFile as e:
        raise PackageError(f"not a zip package ({e})") from e
    except KeyError as e:
        raise PackageError(f"missing part {part}") from e
    except _MEMBER_ERRORS as e:
        raise PackageError(f"corrupt part {part} ({e})") from e

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise PackageError(f"malformed XML ({e})") from e


def _replace_part(package: bytes, part: str, data: bytes) -> bytes:
    """
    Copy a package, swapping the content of one part.

    Raises:
        PackageError: If any other member cannot be read back
    """
    out = io.BytesIO()
    try:
        with zipfile.ZipFile(io.BytesIO(package)) as src, \
                zipfile.ZipFile(out, "w", zipfile.ZIP_DEFLATED) as dst:
            for info in src.infolist():
                payload = data if info.filename == part else src.read(info.filename)
                dst.writestr(info, payload)
    except (zipfile.BadZipFile, *_MEMBER_ERRORS) as e:
        raise PackageError(f"unreadable member ({e})") from e
    return out.getvalue()
