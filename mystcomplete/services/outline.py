"""Document outline built with markdown-it-py.

Only headings are extracted; the rest of the token stream is ignored.
Fenced and indented code is handled by the parser, so ``# comment`` lines
inside code blocks never become headings.
"""

from __future__ import annotations

from pathlib import Path
import logging
import re

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mystcomplete.core.config import CompletionSettings
from mystcomplete.core.document import Document
from mystcomplete.core.types import TocHeading

logger = logging.getLogger(__name__)

OMIT_COMMENT_RE = re.compile(r"<!--\s*omit\s+(?:in|from)\s+toc\s*-->", re.IGNORECASE)
_SLUG_DROP_RE = re.compile(r"[^\w\- ]", re.UNICODE)
_PLAIN_TEXT_TOKENS = frozenset({"text", "code_inline"})


def slugify(text: str) -> str:
    """GitHub style anchor for a heading's plain text."""
    return _SLUG_DROP_RE.sub("", text.strip().lower()).replace(" ", "-")


def _plain_text(inline: Token) -> str:
    parts: list[str] = []
    for child in inline.children or []:
        if child.type in _PLAIN_TEXT_TOKENS:
            parts.append(child.content)
        elif child.type in {"softbreak", "hardbreak"}:
            parts.append(" ")
    return "".join(parts)


class MarkdownOutline:
    """Heading provider for the heading-link resolver and the table of contents."""

    def __init__(
        self,
        settings: CompletionSettings | None = None,
        workspace_root: Path | None = None,
    ) -> None:
        self.settings = settings or CompletionSettings()
        self.workspace_root = workspace_root
        self._md = MarkdownIt("commonmark")

    def _project_omissions(self, document: Document) -> list[str]:
        if document.path is None or self.workspace_root is None:
            return []
        try:
            relative = document.path.relative_to(self.workspace_root).as_posix()
        except ValueError:
            return []
        return self.settings.toc.omitted_from_toc.get(relative, [])

    @staticmethod
    def _is_omitted_by_project(heading: TocHeading, omissions: list[str]) -> bool:
        for entry in omissions:
            entry = entry.strip()
            if entry.startswith("#"):
                level = len(entry) - len(entry.lstrip("#"))
                if level == heading.level and entry[level:].strip() == heading.raw_content:
                    return True
            elif entry == heading.raw_content:
                return True
        return False

    def _has_magic_comment(self, document: Document, token: Token, inline: Token) -> bool:
        if OMIT_COMMENT_RE.search(inline.content):
            return True
        if token.map is None:
            return False
        previous = document.line_at(token.map[0] - 1)
        return OMIT_COMMENT_RE.fullmatch(previous.strip()) is not None

    def get_headings(
        self,
        document: Document,
        *,
        respect_magic_comment_omit: bool = False,
        respect_project_level_omit: bool = False,
    ) -> list[TocHeading]:
        tokens = self._md.parse(document.text)
        omissions = self._project_omissions(document) if respect_project_level_omit else []

        headings: list[TocHeading] = []
        slug_counts: dict[str, int] = {}
        for index, token in enumerate(tokens):
            if token.type != "heading_open" or index + 1 >= len(tokens):
                continue
            inline = tokens[index + 1]
            raw_content = OMIT_COMMENT_RE.sub("", inline.content).strip()
            base_slug = slugify(_plain_text(inline))

            # Anchors stay unique even for omitted headings.
            seen = slug_counts.get(base_slug, 0)
            slug_counts[base_slug] = seen + 1
            slug = base_slug if seen == 0 else f"{base_slug}-{seen}"

            heading = TocHeading(
                slug=slug,
                raw_content=raw_content,
                level=int(token.tag[1]),
                line=token.map[0] if token.map else 0,
            )
            if respect_magic_comment_omit and self._has_magic_comment(document, token, inline):
                continue
            if omissions and self._is_omitted_by_project(heading, omissions):
                continue
            headings.append(heading)

        logger.debug("Outline has %d headings", len(headings))
        return headings
