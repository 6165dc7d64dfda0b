"""
Module: extractor.tokenizer

Purpose:
    Turn one converted block of text into structured segmentation events.
    Correctness travels as a flag on each event, so the state machine in
    extractor.segmenter never has to look at sentinel text itself.

Events:
    - QuestionStart(number, body): block opens a new question
    - OptionLabel(letter, flagged): an option label occurrence ("B.")
    - TextSpan(content, flagged, after_label): cleaned text; after_label is
      True when the span is the body of the preceding OptionLabel

    In a block that holds labels, any text before the first label is
    dropped together with its sentinels.

Grammar:
    Question start (checked on sentinel-free text):
        ^(?:Câu|Question|Bài|Số)?\\s*(\\d+)[.:)]\\s+(.+)
    Option label (searched on raw, sentinel-inclusive text):
        (?:^|\\s)((?:SENTINEL|[\\s.])*[LABELS][.:)])
    The label group consumes sentinels greedily, so a sentinel sitting
    between two labels belongs to the following label. Answer marking can
    leave several sentinels adjacent across run boundaries.

Key Functions:
    - tokenize_block(): Block text -> tuple of events
    - strip_sentinel(): Remove every sentinel occurrence

Used By:
    - extractor.segmenter
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Pattern, Tuple, Union

from .config import ExtractionConfig


@dataclass(frozen=True)
class QuestionStart:
    """A block that begins a new question."""
    number: Optional[int]  # None when the printed number parses to 0
    body: str


@dataclass(frozen=True)
class OptionLabel:
    """An option label occurrence such as "B." or "[[CORRECT_ANS]]C)"."""
    letter: str
    flagged: bool


@dataclass(frozen=True)
class TextSpan:
    """Sentinel-free text with its correctness flag."""
    content: str
    flagged: bool
    after_label: bool = False


Event = Union[QuestionStart, OptionLabel, TextSpan]


@dataclass(frozen=True)
class _Grammar:
    question_start: Pattern[str]
    option_label: Pattern[str]
    label_letter: Pattern[str]


@lru_cache(maxsize=16)
def _grammar(config: ExtractionConfig) -> _Grammar:
    keywords = "|".join(re.escape(kw) for kw in config.question_keywords)
    keyword_group = f"(?:{keywords})?" if keywords else ""
    labels = re.escape(config.option_labels)
    sentinel = re.escape(config.sentinel)
    return _Grammar(
        question_start=re.compile(
            rf"^{keyword_group}\s*(\d+)[.:)]\s+(.+)", re.IGNORECASE | re.DOTALL
        ),
        option_label=re.compile(rf"(?:^|\s)((?:{sentinel}|[\s.])*[{labels}][.:)])"),
        label_letter=re.compile(rf"([{labels}])[.:)]"),
    )


def strip_sentinel(text: str, config: ExtractionConfig) -> str:
    """Remove every occurrence of the sentinel token."""
    return text.replace(config.sentinel, "")


def tokenize_block(text: str, config: Optional[ExtractionConfig] = None) -> Tuple[Event, ...]:
    """
    Tokenize one block of converted text.

    Args:
        text: Raw block text (may contain sentinel tokens anywhere)
        config: Extraction config (sentinel, labels, keywords)

    Returns:
        Tuple of events. Empty for blank blocks.

    Example:
        >>> tokenize_block("[[CORRECT_ANS]]B. 4")
        (OptionLabel(letter='B', flagged=True), TextSpan(content='4', flagged=False, after_label=True))
    """
    config = config or ExtractionConfig()
    grammar = _grammar(config)

    raw = text.strip()
    if not raw:
        return ()

    question = grammar.question_start.match(strip_sentinel(raw, config))
    if question:
        number = int(question.group(1))
        return (QuestionStart(number=number or None, body=question.group(2).strip()),)

    matches = list(grammar.option_label.finditer(raw))
    if not matches:
        return (_span(raw, config),)

    # Text ahead of the first label belongs to no option and is discarded
    events: list = []
    for index, match in enumerate(matches):
        label_text = match.group(1)
        body_end = matches[index + 1].start(1) if index + 1 < len(matches) else len(raw)
        body = raw[match.end(1):body_end]

        letter_match = grammar.label_letter.search(strip_sentinel(label_text, config))
        letter = letter_match.group(1) if letter_match else "?"

        events.append(OptionLabel(letter=letter, flagged=config.sentinel in label_text))
        events.append(_span(body, config, after_label=True))

    return tuple(events)


def _span(raw: str, config: ExtractionConfig, *, after_label: bool = False) -> TextSpan:
    return TextSpan(
        content=strip_sentinel(raw, config).strip(),
        flagged=config.sentinel in raw,
        after_label=after_label,
    )
