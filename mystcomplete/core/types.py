"""Type definitions for the completion engine.

Positions and ranges are zero-based, like the editors that host the engine.
Candidate items are immutable once built; the reference definition record is
the only mutable type and lives for a single request.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A cursor position inside a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(default=0, ge=0)
    character: int = Field(default=0, ge=0)

    def with_character(self, character: int) -> Position:
        return Position(line=self.line, character=max(0, character))


class Range(BaseModel):
    """A span of text to be replaced by a completion."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class CandidateKind(StrEnum):
    """What a completion candidate stands for."""

    FUNCTION = "function"
    SNIPPET = "snippet"
    REFERENCE = "reference"
    FILE = "file"


class InsertTextFormat(StrEnum):
    PLAIN = "plain"
    SNIPPET = "snippet"


class CandidateItem(BaseModel):
    """A single completion candidate.

    Attributes:
        label: Text shown in the completion list.
        kind: Category of the candidate.
        insert_text: Text to insert; the label is used when unset.
        insert_text_format: Whether ``insert_text`` contains placeholders
            such as ``$1`` or ``${1:default}``.
        documentation: Markdown shown next to the list.
        detail: Short one-line detail.
        sort_text: Key used to order candidates; the label is used when unset.
        range: Text replaced on acceptance; the host's default word range
            applies when unset.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    kind: CandidateKind
    insert_text: str | None = None
    insert_text_format: InsertTextFormat = InsertTextFormat.PLAIN
    documentation: str | None = None
    detail: str | None = None
    sort_text: str | None = None
    range: Range | None = None

    @property
    def effective_insert_text(self) -> str:
        return self.insert_text if self.insert_text is not None else self.label

    @property
    def effective_sort_text(self) -> str:
        return self.sort_text if self.sort_text is not None else self.label


class ContextKind(StrEnum):
    """Completion contexts recognised by the classifier."""

    NONE = "none"
    MATH_COMMAND = "math_command"
    DIRECTIVE = "directive"
    ROLE = "role"
    REFERENCE_LABEL = "reference_label"
    IMAGE_PATH = "image_path"
    HEADING_LINK = "heading_link"
    FILE_PATH = "file_path"


@dataclass(frozen=True, slots=True)
class CompletionContext:
    """Result of classifying the text around the cursor.

    ``typed`` holds the partially typed identifier or path captured by the
    matching rule. ``start`` is the character index on the cursor line where
    the replacement range begins, or -1 when the resolver does not need it.
    """

    kind: ContextKind
    typed: str = ""
    start: int = -1
    is_definition: bool = False

    @property
    def applicable(self) -> bool:
        return self.kind is not ContextKind.NONE


NO_COMPLETION = CompletionContext(ContextKind.NONE)


@dataclass(slots=True)
class ReferenceDefinition:
    """A link reference definition found in the document.

    ``label`` keeps the case of the first definition in document order.
    """

    label: str
    usage_count: int = 0


@dataclass(frozen=True, slots=True)
class TocHeading:
    slug: str
    raw_content: str
    level: int = 1
    line: int = 0


@dataclass(frozen=True, slots=True)
class MacroSpec:
    """A user defined math macro such as ``\\RR -> \\mathbb{R}``."""

    command_name: str
    expansion: str
    arg_count: int


class MathEnvironment(StrEnum):
    NONE = ""
    INLINE = "inline"
    DISPLAY = "display"
