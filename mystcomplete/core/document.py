"""Read-only document access used by the resolvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
import re

from mystcomplete.core.types import Position

_LINE_BREAK_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class Document:
    """Full text of a document plus its location on disk, if any."""

    text: str
    path: Path | None = field(default=None)

    @classmethod
    def from_path(cls, path: str | Path, encoding: str = "utf-8") -> Document:
        resolved = Path(path).resolve()
        return cls(resolved.read_text(encoding=encoding), resolved)

    @cached_property
    def lines(self) -> list[str]:
        return _LINE_BREAK_RE.split(self.text)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def directory(self) -> Path | None:
        return self.path.parent if self.path is not None else None

    def line_at(self, line: int) -> str:
        if line < 0 or line >= len(self.lines):
            return ""
        return self.lines[line]

    def clamp(self, position: Position) -> Position:
        line = min(position.line, len(self.lines) - 1)
        character = min(position.character, len(self.lines[line]))
        return Position(line=line, character=character)

    def text_before(self, position: Position) -> str:
        """Text on the cursor line strictly before the cursor."""
        position = self.clamp(position)
        return self.lines[position.line][: position.character]

    def text_after(self, position: Position) -> str:
        """Text on the cursor line strictly after the cursor."""
        position = self.clamp(position)
        return self.lines[position.line][position.character :]

    def offset_at(self, position: Position) -> int:
        position = self.clamp(position)
        offset = 0
        for match_index, match in enumerate(_LINE_BREAK_RE.finditer(self.text)):
            if match_index == position.line:
                break
            offset = match.end()
        return offset + position.character

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        line = 0
        line_start = 0
        for match in _LINE_BREAK_RE.finditer(self.text):
            if match.end() > offset:
                break
            line += 1
            line_start = match.end()
        character = min(offset - line_start, len(self.lines[line]))
        return Position(line=line, character=character)
