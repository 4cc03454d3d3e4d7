"""Completion engine for MyST Markdown documents.

Suggests math commands inside ``$...$`` and ``$$...$$``, MyST directives
and roles after ``{``, reference labels inside ``[...]``, headings after
``](#`` and image or file paths inside links.
"""

from __future__ import annotations

from mystcomplete.core.cancellation import CancellationToken
from mystcomplete.core.config import CompletionSettings, load_settings
from mystcomplete.core.context import classify_context
from mystcomplete.core.document import Document
from mystcomplete.core.engine import CompletionEngine
from mystcomplete.core.exceptions import (
    ConfigError,
    ImageProbeError,
    MystCompleteError,
    SnippetError,
)
from mystcomplete.core.types import (
    CandidateItem,
    CandidateKind,
    CompletionContext,
    ContextKind,
    InsertTextFormat,
    Position,
    Range,
)

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "CandidateItem",
    "CandidateKind",
    "CompletionContext",
    "CompletionEngine",
    "CompletionSettings",
    "ConfigError",
    "ContextKind",
    "Document",
    "ImageProbeError",
    "InsertTextFormat",
    "MystCompleteError",
    "Position",
    "Range",
    "SnippetError",
    "__version__",
    "classify_context",
    "load_settings",
]
