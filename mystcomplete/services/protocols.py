"""Interfaces of the collaborators the completion engine consumes.

The engine never walks the file system, decodes images or parses headings
itself. Hosts may pass their own implementations; ``mystcomplete.services``
provides defaults for standalone use.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mystcomplete.core.document import Document
    from mystcomplete.core.types import TocHeading


@dataclass(frozen=True, slots=True)
class ImageDimensions:
    width: float
    height: float


@runtime_checkable
class OutlineService(Protocol):
    def get_headings(
        self,
        document: Document,
        *,
        respect_magic_comment_omit: bool = False,
        respect_project_level_omit: bool = False,
    ) -> list[TocHeading]: ...


@runtime_checkable
class FileFinder(Protocol):
    async def find_files(
        self, include: Sequence[str], exclude: Sequence[str]
    ) -> list[Path]:
        """Return absolute paths matching ``include`` and none of ``exclude``.

        Both arguments are gitignore-style glob patterns relative to the
        workspace root, e.g. ``**/*.png`` or ``**/node_modules``.
        """
        ...


@runtime_checkable
class ImageProber(Protocol):
    def probe(self, path: Path) -> ImageDimensions:
        """Return the pixel size of an image.

        Raises:
            ImageProbeError: If the file is not a readable image.
        """
        ...
