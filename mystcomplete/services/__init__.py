"""Default collaborators for the completion engine."""

from __future__ import annotations

from mystcomplete.services.file_finder import WorkspaceFileFinder
from mystcomplete.services.image_probe import PillowImageProber
from mystcomplete.services.outline import MarkdownOutline
from mystcomplete.services.protocols import (
    FileFinder,
    ImageDimensions,
    ImageProber,
    OutlineService,
)

__all__ = [
    "FileFinder",
    "ImageDimensions",
    "ImageProber",
    "MarkdownOutline",
    "OutlineService",
    "PillowImageProber",
    "WorkspaceFileFinder",
]
