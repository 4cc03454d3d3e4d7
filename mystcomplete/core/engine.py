"""Completion engine.

Classifies the cursor context and dispatches to the matching resolver.
Everything derived from configuration is computed once at construction;
everything derived from the document is rebuilt for every request.
"""

from __future__ import annotations

from pathlib import Path
import logging

from mystcomplete.core.cancellation import CancellationToken
from mystcomplete.core.catalog import complete_directives, complete_roles
from mystcomplete.core.config import CompletionSettings, build_exclude_patterns
from mystcomplete.core.context import classify_context
from mystcomplete.core.document import Document
from mystcomplete.core.headings import complete_heading_links
from mystcomplete.core.math import build_math_catalog, math_environment_at, parse_macros
from mystcomplete.core.paths import complete_file_paths, complete_image_paths
from mystcomplete.core.references import complete_reference_labels
from mystcomplete.core.types import (
    CandidateItem,
    CompletionContext,
    ContextKind,
    Position,
)
from mystcomplete.services.file_finder import WorkspaceFileFinder
from mystcomplete.services.image_probe import PillowImageProber
from mystcomplete.services.outline import MarkdownOutline
from mystcomplete.services.protocols import FileFinder, ImageProber, OutlineService

logger = logging.getLogger(__name__)


class CompletionEngine:
    """Produces completion candidates for MyST Markdown documents.

    Args:
        settings: Configuration snapshot; later changes to the object are
            not observed.
        workspace_root: Root folder of the workspace. Path completion needs
            it and returns nothing without one.
        outline: Heading provider; a ``MarkdownOutline`` by default.
        file_finder: Workspace file enumerator; a ``WorkspaceFileFinder``
            rooted at ``workspace_root`` by default.
        image_prober: Image dimension reader; a ``PillowImageProber`` by
            default.
    """

    def __init__(
        self,
        settings: CompletionSettings | None = None,
        *,
        workspace_root: Path | None = None,
        outline: OutlineService | None = None,
        file_finder: FileFinder | None = None,
        image_prober: ImageProber | None = None,
    ) -> None:
        self.settings = (settings or CompletionSettings()).model_copy(deep=True)
        self.workspace_root = workspace_root.resolve() if workspace_root else None

        self.outline = outline or MarkdownOutline(self.settings, self.workspace_root)
        if file_finder is None and self.workspace_root is not None:
            file_finder = WorkspaceFileFinder(self.workspace_root)
        self.file_finder = file_finder
        self.image_prober = image_prober or PillowImageProber()

        self.math_catalog = build_math_catalog(parse_macros(self.settings.math_macros))
        self.exclude_patterns = build_exclude_patterns(self.settings)

    def classify(self, document: Document, position: Position) -> CompletionContext:
        return classify_context(
            document.text_before(position),
            document.text_after(position),
            enabled=self.settings.enabled,
            math_environment=lambda: math_environment_at(document, position),
        )

    async def provide_completions(
        self,
        document: Document,
        position: Position,
        token: CancellationToken | None = None,
    ) -> list[CandidateItem] | None:
        """Completion candidates at ``position``.

        Returns:
            ``None`` when no completion applies at the cursor, otherwise the
            candidates of the matching resolver, which may be empty.
        """
        token = token or CancellationToken.none()
        position = document.clamp(position)
        context = self.classify(document, position)
        logger.debug(
            "Completion at %d:%d classified as %s (typed=%r)",
            position.line,
            position.character,
            context.kind,
            context.typed,
        )

        match context.kind:
            case ContextKind.NONE:
                return None
            case ContextKind.MATH_COMMAND:
                return list(self.math_catalog)
            case ContextKind.DIRECTIVE:
                return complete_directives(context.typed)
            case ContextKind.ROLE:
                return complete_roles(context.typed)
            case ContextKind.REFERENCE_LABEL:
                return complete_reference_labels(document, position, context, token)
            case ContextKind.HEADING_LINK:
                return complete_heading_links(document, position, context, self.outline)
            case ContextKind.IMAGE_PATH:
                if self.file_finder is None:
                    return []
                return await complete_image_paths(
                    document,
                    context,
                    workspace_root=self.workspace_root,
                    root_override=self.settings.root,
                    finder=self.file_finder,
                    prober=self.image_prober,
                    exclude=self.exclude_patterns,
                    token=token,
                )
            case ContextKind.FILE_PATH:
                if self.file_finder is None:
                    return []
                return await complete_file_paths(
                    document,
                    context,
                    workspace_root=self.workspace_root,
                    root_override=self.settings.root,
                    finder=self.file_finder,
                    exclude=self.exclude_patterns,
                    token=token,
                )
        return None

    async def provide_completions_for_text(
        self, text: str, position: Position, path: Path | None = None
    ) -> list[CandidateItem] | None:
        document = Document(text, path.resolve() if path else None)
        return await self.provide_completions(document, position)
