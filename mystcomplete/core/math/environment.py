from __future__ import annotations

import re

from mystcomplete.core.document import Document
from mystcomplete.core.types import MathEnvironment, Position

# An opening "$" (not part of "$$") followed by the span so far and the
# command being typed.
_INLINE_OPEN_RE = re.compile(r"(?:^|[^$])\$(?:[^ $].*)??\\\w*$")
_DISPLAY_DELIMITER = "$$"
_MATH_FENCE_OPEN_RE = re.compile(r"^[ \t]*(`{3,}|:{3,})\{math\}")


def _in_math_fence(document: Document, position: Position) -> bool:
    fence: str | None = None
    for line in document.lines[: position.line]:
        stripped = line.strip()
        if fence is None:
            match = _MATH_FENCE_OPEN_RE.match(line)
            if match:
                fence = match.group(1)
        elif stripped.startswith(fence[0] * len(fence)) and not stripped.strip(fence[0]):
            fence = None
    return fence is not None


def math_environment_at(document: Document, position: Position) -> MathEnvironment:
    """Math environment enclosing ``position``.

    Inline math is recognised on the cursor line only; display math spans
    lines, both as ``$$ ... $$`` and as a ``{math}`` directive fence.
    """
    position = document.clamp(position)
    before = document.text_before(position)
    after = document.text_after(position)
    if _INLINE_OPEN_RE.search(before) and "$" in after:
        return MathEnvironment.INLINE

    offset = document.offset_at(position)
    text_before = document.text[:offset]
    text_after = document.text[offset:]
    if text_before.count(_DISPLAY_DELIMITER) % 2 == 1 and _DISPLAY_DELIMITER in text_after:
        return MathEnvironment.DISPLAY

    if _in_math_fence(document, position):
        return MathEnvironment.DISPLAY
    return MathEnvironment.NONE
