"""Completion context classification.

The classifier looks only at the cursor line: the text strictly before the
cursor and, for heading links, the text after it. Rules are evaluated in a
fixed order and the first match commits; later rules are never consulted,
so overlapping patterns (``{`` after a code fence, ``](#`` versus ``](``)
resolve by position in ``_RULES``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re

from mystcomplete.core.types import (
    NO_COMPLETION,
    CompletionContext,
    ContextKind,
    MathEnvironment,
)

MathEnvironmentCheck = Callable[[], MathEnvironment]

_TRAILING_BACKSLASHES_RE = re.compile(r"\\+$")
DIRECTIVE_OPENER_RE = re.compile(r"^[ \t]*`{3,}\{([a-zA-Z\-]*)$")
ROLE_OPENER_RE = re.compile(r"\{([a-zA-Z\-]*)$")
_OPEN_BRACKET_RE = re.compile(r"\[[^\[\]]*$")
_IMAGE_MARKUP_RE = re.compile(r"!\[[^\]]*?\]\([^)]*$")
_IMAGE_TAG_RE = re.compile(r'<img [^>]*src="[^"]*$')
_HEADING_INLINE_LINK_RE = re.compile(r"\[[^\[\]]*?\]\(#[^#)]*$")
HEADING_DEFINITION_RE = re.compile(r"^>? {0,3}\[[^\[\]]+?\]:[ \t\f\v]*#[^#]*$")
_LINK_TARGET_RE = re.compile(r"\[[^\[\]]*?\](?:\([^)]*|:[ \t\f\v]*\S*)$")
_TYPED_LINK_TARGET_RE = re.compile(r"(?:\]\(|\]:)[ \t\f\v]*(\S*)$")


@dataclass(frozen=True, slots=True)
class _Request:
    before: str
    after: str
    enabled: bool
    math_environment: MathEnvironmentCheck | None


Rule = Callable[[_Request], CompletionContext | None]


def _math_command(request: _Request) -> CompletionContext | None:
    match = _TRAILING_BACKSLASHES_RE.search(request.before)
    if match is None or len(match.group(0)) % 2 == 0:
        return None
    if request.math_environment is not None:
        if request.math_environment() is MathEnvironment.NONE:
            return NO_COMPLETION
    return CompletionContext(ContextKind.MATH_COMMAND)


def _directive(request: _Request) -> CompletionContext | None:
    match = DIRECTIVE_OPENER_RE.search(request.before)
    if match is None:
        return None
    return CompletionContext(ContextKind.DIRECTIVE, typed=match.group(1))


def _role(request: _Request) -> CompletionContext | None:
    match = ROLE_OPENER_RE.search(request.before)
    if match is None:
        return None
    return CompletionContext(ContextKind.ROLE, typed=match.group(1))


def _reference_label(request: _Request) -> CompletionContext | None:
    if _OPEN_BRACKET_RE.search(request.before) is None:
        return None
    start = request.before.rfind("[") + 1
    return CompletionContext(
        ContextKind.REFERENCE_LABEL, typed=request.before[start:], start=start
    )


def _enabled_gate(request: _Request) -> CompletionContext | None:
    return None if request.enabled else NO_COMPLETION


def _image_path(request: _Request) -> CompletionContext | None:
    before = request.before
    if _IMAGE_MARKUP_RE.search(before):
        start = before.rfind("](") + 2
    elif _IMAGE_TAG_RE.search(before):
        start = before.rfind('="') + 2
    else:
        return None
    return CompletionContext(ContextKind.IMAGE_PATH, typed=before[start:], start=start)


def _heading_link(request: _Request) -> CompletionContext | None:
    before = request.before
    is_definition = HEADING_DEFINITION_RE.search(before) is not None
    if not is_definition and _HEADING_INLINE_LINK_RE.search(before) is None:
        return None
    start = before.rfind("#")
    return CompletionContext(
        ContextKind.HEADING_LINK,
        typed=before[start:],
        start=start,
        is_definition=is_definition,
    )


def _file_path(request: _Request) -> CompletionContext | None:
    if _LINK_TARGET_RE.search(request.before) is None:
        return None
    typed = _TYPED_LINK_TARGET_RE.search(request.before)
    if typed is None:
        # A blank inside the link target: nothing path-like left to complete.
        return NO_COMPLETION
    return CompletionContext(
        ContextKind.FILE_PATH, typed=typed.group(1), start=typed.start(1)
    )


_RULES: tuple[tuple[ContextKind, Rule], ...] = (
    (ContextKind.MATH_COMMAND, _math_command),
    (ContextKind.DIRECTIVE, _directive),
    (ContextKind.ROLE, _role),
    (ContextKind.REFERENCE_LABEL, _reference_label),
    (ContextKind.NONE, _enabled_gate),
    (ContextKind.IMAGE_PATH, _image_path),
    (ContextKind.HEADING_LINK, _heading_link),
    (ContextKind.FILE_PATH, _file_path),
)


def classify_context(
    text_before: str,
    text_after: str = "",
    *,
    enabled: bool = True,
    math_environment: MathEnvironmentCheck | None = None,
) -> CompletionContext:
    """Classify the completion request at the cursor.

    Args:
        text_before: Cursor line text strictly before the cursor.
        text_after: Cursor line text strictly after the cursor.
        enabled: Whether image, heading-link and file-path completion are
            switched on. Math, directive, role and reference completion
            ignore this flag.
        math_environment: Lazily evaluated check for the math environment
            around the cursor; only consulted when a command is being typed.
            When omitted the cursor is assumed to be inside math.

    Returns:
        The context of the first matching rule, or a ``none`` context.
    """
    request = _Request(text_before, text_after, enabled, math_environment)
    for _kind, rule in _RULES:
        context = rule(request)
        if context is not None:
            return context
    return NO_COMPLETION
