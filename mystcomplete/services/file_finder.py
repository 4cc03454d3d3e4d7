"""Workspace file enumeration with gitignore-style patterns."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
import asyncio
import logging
import os

import pathspec

logger = logging.getLogger(__name__)


@dataclass
class WalkResult:
    """Files found by one walk, with skip statistics for debugging."""

    files: list[Path] = field(default_factory=list)
    skipped_by_exclude: int = 0
    skipped_symlinks: int = 0


def compile_patterns(patterns: Sequence[str]) -> pathspec.GitIgnoreSpec | None:
    lines = [pattern.strip() for pattern in patterns if pattern.strip()]
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def walk_workspace(
    root: Path,
    include: pathspec.GitIgnoreSpec | None,
    exclude: pathspec.GitIgnoreSpec | None,
) -> WalkResult:
    """Walk ``root`` collecting files that match ``include`` but not ``exclude``.

    Excluded directories are pruned so their contents are never visited.
    Symbolic links, to files or directories, are skipped.
    """
    result = WalkResult()
    if include is None:
        return result

    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        current = Path(dirpath)

        kept_dirs = []
        for d in dirnames:
            subdir = current / d
            if subdir.is_symlink():
                result.skipped_symlinks += 1
                continue
            rel_path = subdir.relative_to(root).as_posix()
            # Trailing slash for directory-only patterns
            if exclude is not None and exclude.match_file(rel_path + "/"):
                result.skipped_by_exclude += 1
                continue
            kept_dirs.append(d)
        dirnames[:] = sorted(kept_dirs)

        for fname in filenames:
            fpath = current / fname
            if fpath.is_symlink():
                result.skipped_symlinks += 1
                continue
            rel_path = fpath.relative_to(root).as_posix()
            if not include.match_file(rel_path):
                continue
            if exclude is not None and exclude.match_file(rel_path):
                result.skipped_by_exclude += 1
                continue
            result.files.append(fpath)

    result.files.sort()
    return result


class WorkspaceFileFinder:
    """Finds files below a workspace root.

    Patterns are gitignore-style globs relative to the root, e.g.
    ``**/*.png`` or ``**/node_modules``.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    async def find_files(
        self, include: Sequence[str], exclude: Sequence[str]
    ) -> list[Path]:
        include_spec = compile_patterns(include)
        exclude_spec = compile_patterns(exclude)
        result = await asyncio.to_thread(
            walk_workspace, self.root, include_spec, exclude_spec
        )
        logger.debug(
            "Found %d files under %s (%d excluded, %d symlinks skipped)",
            len(result.files),
            self.root,
            result.skipped_by_exclude,
            result.skipped_symlinks,
        )
        return result.files
