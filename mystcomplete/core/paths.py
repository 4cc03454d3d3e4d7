"""Path completion for image sources and link targets.

The typed path prefix decides the base directory candidates are made
relative to:

- ``images/fig`` (relative): the document's directory joined with
  ``images/``.
- ``/images/fig`` (rooted): the project root joined with ``images/``. The
  project root is the configured ``root`` directory inside the workspace, or
  the workspace itself. Files outside it are never suggested.
"""

from __future__ import annotations

from collections.abc import Sequence
import asyncio
import logging
import os
from pathlib import Path

from mystcomplete.core.cancellation import CancellationToken
from mystcomplete.core.document import Document
from mystcomplete.core.types import CandidateItem, CandidateKind, CompletionContext
from mystcomplete.services.protocols import FileFinder, ImageProber

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "svg", "gif", "webp")
IMAGE_GLOBS: tuple[str, ...] = tuple(f"**/*.{ext}" for ext in IMAGE_EXTENSIONS)
ALL_FILES_GLOBS: tuple[str, ...] = ("**/*",)

# Width of the hover preview, in pixels.
PREVIEW_MAX_WIDTH = 318

# Sorts before digits and letters, and never occurs in an encoded label.
_EXTENSION_SORT_CHAR = " "


def typed_directory(typed: str) -> str:
    """Directory part of a typed path, including the trailing slash."""
    if "/" not in typed:
        return ""
    return typed[: typed.rfind("/") + 1]


def resolve_project_root(workspace_root: Path, root_override: str = "") -> Path:
    if root_override:
        candidate = workspace_root / root_override
        if candidate.exists():
            return candidate
        logger.debug("Configured root %s does not exist, using workspace", candidate)
    return workspace_root


def resolve_base_directory(document_path: Path, typed: str, project_root: Path) -> Path:
    """Absolute directory that candidates for ``typed`` are relative to."""
    directory = typed_directory(typed)
    if directory.startswith("/"):
        base = os.path.join(project_root, directory.lstrip("/"))
    else:
        base = os.path.join(document_path.parent, directory)
    return Path(os.path.normpath(base))


def relative_label(path: Path, base: Path) -> str:
    return os.path.relpath(path, base).replace("\\", "/")


def encode_label(label: str) -> str:
    return label.replace(" ", "%20")


def path_sort_text(label: str) -> str:
    # "a/" and "a" rank ahead of "a.md", "a.md" ahead of "ab.md".
    return label.replace(".", _EXTENSION_SORT_CHAR)


def _format_pixels(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def image_preview(label: str, path: Path, width: float, height: float) -> str:
    if width > PREVIEW_MAX_WIDTH:
        height = height * PREVIEW_MAX_WIDTH / width
        width = PREVIEW_MAX_WIDTH
    source = encode_label(str(path))
    return (
        f"![{label}]({source}|width={_format_pixels(width)},"
        f"height={_format_pixels(height)})"
    )


async def _enumerate(
    finder: FileFinder,
    include: Sequence[str],
    exclude: Sequence[str],
    token: CancellationToken,
) -> list[Path]:
    if token.is_cancellation_requested:
        return []
    try:
        files = await finder.find_files(include, exclude)
    except Exception as e:
        logger.warning("File enumeration failed: %s", e)
        return []
    if token.is_cancellation_requested:
        return []
    return files


def _base_for(
    document: Document,
    context: CompletionContext,
    workspace_root: Path | None,
    root_override: str,
) -> Path | None:
    if document.path is None or workspace_root is None:
        return None
    project_root = resolve_project_root(workspace_root, root_override)
    return resolve_base_directory(document.path, context.typed, project_root)


async def complete_image_paths(
    document: Document,
    context: CompletionContext,
    *,
    workspace_root: Path | None,
    root_override: str,
    finder: FileFinder,
    prober: ImageProber,
    exclude: Sequence[str],
    token: CancellationToken,
) -> list[CandidateItem]:
    base = _base_for(document, context, workspace_root, root_override)
    if base is None:
        return []
    is_rooted = context.typed.startswith("/")

    items: list[CandidateItem] = []
    for image_path in await _enumerate(finder, IMAGE_GLOBS, exclude, token):
        label = relative_label(image_path, base)
        if is_rooted and label.startswith(".."):
            continue

        try:
            dimensions = await asyncio.to_thread(prober.probe, image_path)
        except Exception as e:
            logger.warning("Skipping image %s: %s", image_path, e)
            continue

        encoded = encode_label(label)
        items.append(
            CandidateItem(
                label=encoded,
                kind=CandidateKind.FILE,
                documentation=image_preview(
                    label, image_path, dimensions.width, dimensions.height
                ),
                sort_text=path_sort_text(encoded),
            )
        )
    return items


async def complete_file_paths(
    document: Document,
    context: CompletionContext,
    *,
    workspace_root: Path | None,
    root_override: str,
    finder: FileFinder,
    exclude: Sequence[str],
    token: CancellationToken,
) -> list[CandidateItem]:
    base = _base_for(document, context, workspace_root, root_override)
    if base is None:
        return []
    is_rooted = context.typed.startswith("/")

    items: list[CandidateItem] = []
    for file_path in await _enumerate(finder, ALL_FILES_GLOBS, exclude, token):
        label = encode_label(relative_label(file_path, base))
        if is_rooted and label.startswith(".."):
            continue
        items.append(
            CandidateItem(
                label=label,
                kind=CandidateKind.FILE,
                sort_text=path_sort_text(label),
            )
        )
    return items
