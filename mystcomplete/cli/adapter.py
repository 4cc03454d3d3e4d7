from __future__ import annotations

from collections.abc import AsyncGenerator, Iterable
import asyncio
import re

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document as PromptDocument

from mystcomplete.core.document import Document
from mystcomplete.core.engine import CompletionEngine
from mystcomplete.core.types import CandidateItem, InsertTextFormat, Position

_PLACEHOLDER_RE = re.compile(
    r"\$\{\d+:(?P<default>[^}]*)\}|\$\{\d+\|(?P<choice>[^,|]*)[^}]*\}|\$\d+"
)
_WORD_BEFORE_RE = re.compile(r"[\w\-]*$")


def snippet_to_plain(text: str) -> str:
    """Expand snippet placeholders to their defaults (first choice, or empty)."""

    def _expand(match: re.Match[str]) -> str:
        if match.group("default") is not None:
            return match.group("default")
        if match.group("choice") is not None:
            return match.group("choice")
        return ""

    return _PLACEHOLDER_RE.sub(_expand, text).replace("\\}", "}").replace("\\$", "$")


def candidate_text(item: CandidateItem) -> str:
    text = item.effective_insert_text
    if item.insert_text_format is InsertTextFormat.SNIPPET:
        return snippet_to_plain(text)
    return text


class PromptToolkitCompleter(Completer):
    """Adapter that feeds engine candidates to a prompt_toolkit prompt.

    The prompt line is appended to ``base`` as a new last line, so reference
    labels and headings of the base document are offered while typing.
    The engine is asked at the start of the word being typed, the way an
    editor keeps a completion session open, and candidates are then
    narrowed down to the typed fragment.
    """

    def __init__(self, engine: CompletionEngine, base: Document | None = None) -> None:
        self.engine = engine
        self.base = base or Document("")

    def _document_for(self, line: str) -> Document:
        text = f"{self.base.text}\n{line}" if self.base.text else line
        return Document(text, self.base.path)

    def _completions(
        self, items: list[CandidateItem], before: str, anchor: int
    ) -> Iterable[Completion]:
        cursor = len(before)
        for item in sorted(items, key=lambda i: i.effective_sort_text):
            start = item.range.start.character if item.range is not None else anchor
            text = candidate_text(item)
            fragment = before[start:cursor]
            if not text.lower().startswith(fragment.lower()):
                continue

            # prompt_toolkit expects start_position to be negative
            yield Completion(
                text=text,
                start_position=start - cursor,
                display=item.label,
                display_meta=item.detail or "",
            )

    async def get_completions_async(
        self, document: PromptDocument, complete_event: CompleteEvent
    ) -> AsyncGenerator[Completion, None]:
        line = document.current_line
        before = line[: document.cursor_position_col]
        word = _WORD_BEFORE_RE.search(before)
        anchor = word.start() if word else len(before)

        doc = self._document_for(line)
        position = Position(line=doc.line_count - 1, character=anchor)
        items = await self.engine.provide_completions(doc, position)
        if not items:
            return
        for completion in self._completions(items, before, anchor):
            yield completion

    def get_completions(
        self, document: PromptDocument, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        async def _collect() -> list[Completion]:
            return [c async for c in self.get_completions_async(document, complete_event)]

        return asyncio.run(_collect())
