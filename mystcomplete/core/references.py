"""Reference definition index and link-label completion.

A link reference definition looks like::

    [label]: destination "optional title"

The index is rebuilt for every request: one scan extracts the labels of all
definitions, a second per-line scan counts bracketed spans that look like
reference usages. Labels compare case-insensitively and the first definition
in the document wins, matching how Markdown resolves duplicate definitions.
"""

from __future__ import annotations

import logging
import re

from mystcomplete.core.cancellation import CancellationToken
from mystcomplete.core.document import Document
from mystcomplete.core.types import (
    CandidateItem,
    CandidateKind,
    CompletionContext,
    Position,
    Range,
    ReferenceDefinition,
)

logger = logging.getLogger(__name__)

# Whitespace as enumerated by CommonMark; kept explicit rather than \s.
_WS = r"[ \t\r\n\f\v]"

# Line start, optional blockquote marker, at most 3 spaces, open bracket.
_RX_PREFIX = rf"^>? {{0,3}}\[{_WS}*"
# Label body; escaped closing brackets are allowed.
_RX_LINK_LABEL = r"(?P<linklabel>(?:[^\]]|\\\])*)"
# Destination, either <dest> or a run without blanks.
_RX_LINK = r"(?P<link>(?:<[^>]*>)|(?:[^< \t\r\n\f\v]+))"
# Optional title in double or single quotes, then end of line.
_RX_LINK_TITLE = (
    rf"(?P<title>{_WS}+(?:\"(?:[^\"]|\\\")*\"|'(?:[^']|\\')*'))?\r?$"
)
_RX_SUFFIX = rf"(?=\]:{_WS}*{_RX_LINK}{_RX_LINK_TITLE})"

LINK_LABEL_PATTERN = re.compile(
    _RX_PREFIX + _RX_LINK_LABEL + _RX_SUFFIX, re.MULTILINE
)

# Something that may be a reference link: [label] not followed by ( : or [.
REFERENCE_USAGE_PATTERN = re.compile(r"\[([^\[\]]+?)\](?![(:\[])")

_LEADING_WS_RE = re.compile(rf"^{_WS}+")
_TRAILING_WS_RE = re.compile(rf"{_WS}+$")
_LINE_BREAK_RE = re.compile(r"\r?\n")


def _trim(label: str) -> str:
    return _TRAILING_WS_RE.sub("", _LEADING_WS_RE.sub("", label))


def build_reference_index(text: str) -> dict[str, ReferenceDefinition]:
    """Map upper-cased labels to their first definition in ``text``."""
    definitions: dict[str, ReferenceDefinition] = {}
    for match in LINK_LABEL_PATTERN.finditer(text):
        label = _trim(match.group("linklabel"))
        if not label:
            continue
        normalized = label.upper()
        if normalized not in definitions:
            definitions[normalized] = ReferenceDefinition(label=label)
    return definitions


def count_reference_usages(
    text: str, definitions: dict[str, ReferenceDefinition]
) -> None:
    """Increment ``usage_count`` for every usage of a known label."""
    for line in _LINE_BREAK_RE.split(text):
        for match in REFERENCE_USAGE_PATTERN.finditer(line):
            record = definitions.get(match.group(1).upper())
            if record is not None:
                record.usage_count += 1


def usage_detail(usage_count: int) -> str:
    return "1 usage" if usage_count == 1 else f"{usage_count} usages"


def reference_sort_text(record: ReferenceDefinition) -> str:
    # Unused definitions first, they are the likely targets of a new link.
    prefix = "0" if record.usage_count == 0 else "1"
    return f"{prefix}-{record.label}"


def complete_reference_labels(
    document: Document,
    position: Position,
    context: CompletionContext,
    token: CancellationToken,
) -> list[CandidateItem]:
    text = document.text
    definitions = build_reference_index(text)
    if not definitions or token.is_cancellation_requested:
        return []

    count_reference_usages(text, definitions)

    start = context.start
    if start < 0:
        start = document.text_before(position).rfind("[") + 1
    replace_range = Range(start=position.with_character(start), end=position)

    if token.is_cancellation_requested:
        return []

    logger.debug("Indexed %d reference definitions", len(definitions))
    return [
        CandidateItem(
            label=record.label,
            kind=CandidateKind.REFERENCE,
            documentation=record.label,
            detail=usage_detail(record.usage_count),
            sort_text=reference_sort_text(record),
            range=replace_range,
        )
        for record in definitions.values()
    ]
