"""Completion of links to headings of the current document.

The same completion both starts a new link, ``[text](#`` and retargets an
existing one, ``[text](#old-slug)``. When a closing parenthesis already
follows the cursor the whole old target up to it is replaced and nothing is
appended; otherwise the word after the cursor is replaced and ``)`` is
appended, except on reference definition lines (``[label]: #slug``) which
take no parenthesis.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from mystcomplete.core.document import Document
from mystcomplete.core.types import (
    CandidateItem,
    CandidateKind,
    CompletionContext,
    Position,
    Range,
)
from mystcomplete.services.protocols import OutlineService

logger = logging.getLogger(__name__)

# ... <cursor> target <blanks> )   or   ... <cursor> <blanks> )
_EXISTING_CLOSE_PAREN_RE = re.compile(r"(?:[^) ]+\s*|\s*)\)")
_LEADING_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True, slots=True)
class HeadingEdit:
    """Where a heading link is written and whether ``)`` must be added."""

    range: Range
    add_closing_paren: bool


def compute_heading_edit(
    position: Position,
    context: CompletionContext,
    text_before: str,
    text_after: str,
) -> HeadingEdit:
    start = context.start if context.start >= 0 else text_before.rfind("#")

    if _EXISTING_CLOSE_PAREN_RE.match(text_after):
        end = position.character + text_after.index(")")
        add_closing_paren = False
    else:
        word = _LEADING_WORD_RE.match(text_after)
        end = position.character + (word.end() if word else 0)
        add_closing_paren = not context.is_definition

    return HeadingEdit(
        range=Range(start=position.with_character(start), end=position.with_character(end)),
        add_closing_paren=add_closing_paren,
    )


def complete_heading_links(
    document: Document,
    position: Position,
    context: CompletionContext,
    outline: OutlineService,
) -> list[CandidateItem]:
    edit = compute_heading_edit(
        position,
        context,
        document.text_before(position),
        document.text_after(position),
    )
    headings = outline.get_headings(
        document,
        respect_magic_comment_omit=False,
        respect_project_level_omit=False,
    )
    logger.debug(
        "Completing %d headings (closing paren: %s)",
        len(headings),
        edit.add_closing_paren,
    )

    items: list[CandidateItem] = []
    for heading in headings:
        label = f"#{heading.slug}"
        items.append(
            CandidateItem(
                label=label,
                kind=CandidateKind.REFERENCE,
                insert_text=f"{label})" if edit.add_closing_paren else None,
                documentation=heading.raw_content,
                range=edit.range,
            )
        )
    return items
