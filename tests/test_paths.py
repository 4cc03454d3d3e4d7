from __future__ import annotations

from pathlib import Path
import threading

import pytest

from mystcomplete.core.cancellation import CancellationToken
from mystcomplete.core.document import Document
from mystcomplete.core.paths import (
    ALL_FILES_GLOBS,
    IMAGE_GLOBS,
    PREVIEW_MAX_WIDTH,
    complete_file_paths,
    complete_image_paths,
    encode_label,
    image_preview,
    path_sort_text,
    resolve_base_directory,
    resolve_project_root,
    typed_directory,
)
from mystcomplete.core.types import CandidateKind, CompletionContext, ContextKind
from tests.fakes import FakeFinder, FakeProber


class TestBaseDirectory:
    def test_typed_directory(self) -> None:
        assert typed_directory("fig") == ""
        assert typed_directory("images/fi") == "images/"
        assert typed_directory("/a/b/c") == "/a/b/"

    def test_relative_to_document(self) -> None:
        base = resolve_base_directory(
            Path("/proj/docs/a.md"), "images/fig.png", Path("/proj")
        )
        assert base == Path("/proj/docs/images")

    def test_rooted_uses_project_root(self) -> None:
        base = resolve_base_directory(Path("/proj/docs/a.md"), "/images/x", Path("/proj/site"))
        assert base == Path("/proj/site/images")

    def test_parent_segments_are_normalised(self) -> None:
        base = resolve_base_directory(Path("/proj/docs/a.md"), "../assets/", Path("/proj"))
        assert base == Path("/proj/assets")

    def test_project_root_override(self, tmp_path: Path) -> None:
        (tmp_path / "site").mkdir()
        assert resolve_project_root(tmp_path, "site") == tmp_path / "site"
        assert resolve_project_root(tmp_path, "missing") == tmp_path
        assert resolve_project_root(tmp_path, "") == tmp_path


class TestLabels:
    def test_spaces_are_encoded(self) -> None:
        assert encode_label("my images/a b.png") == "my%20images/a%20b.png"

    def test_sort_text_ranks_names_before_extensions(self) -> None:
        assert path_sort_text("a.md") < path_sort_text("ab.md")
        assert path_sort_text("a.md") == "a md"

    def test_preview_keeps_small_images(self) -> None:
        preview = image_preview("fig.png", Path("/p/fig.png"), 100, 50)
        assert preview == "![fig.png](/p/fig.png|width=100,height=50)"

    def test_preview_scales_wide_images(self) -> None:
        preview = image_preview("wide.png", Path("/p/wide.png"), 636, 200)
        assert f"width={PREVIEW_MAX_WIDTH}," in preview
        assert "height=100)" in preview


def _context(typed: str, kind: ContextKind = ContextKind.IMAGE_PATH) -> CompletionContext:
    return CompletionContext(kind, typed=typed, start=0)


class TestCompleteImagePaths:
    @pytest.mark.asyncio
    async def test_labels_are_relative_to_base(self, tmp_path: Path) -> None:
        doc_path = tmp_path / "docs" / "a.md"
        figure = tmp_path / "docs" / "images" / "fig one.png"
        logo = tmp_path / "logo.svg"
        finder = FakeFinder([figure, logo])
        prober = FakeProber({figure: (640, 480)})

        items = await complete_image_paths(
            Document("", doc_path),
            _context("images/"),
            workspace_root=tmp_path,
            root_override="",
            finder=finder,
            prober=prober,
            exclude=("**/node_modules",),
            token=CancellationToken.none(),
        )

        assert [item.label for item in items] == ["fig%20one.png", "../../logo.svg"]
        first = items[0]
        assert first.kind is CandidateKind.FILE
        assert first.sort_text == "fig%20one png"
        assert first.documentation is not None
        assert "width=318" in first.documentation
        assert finder.calls == [(IMAGE_GLOBS, ("**/node_modules",))]

    @pytest.mark.asyncio
    async def test_rooted_prefix_skips_files_outside_root(self, tmp_path: Path) -> None:
        (tmp_path / "site").mkdir()
        inside = tmp_path / "site" / "img" / "a.png"
        outside = tmp_path / "other" / "b.png"

        items = await complete_image_paths(
            Document("", tmp_path / "site" / "docs" / "page.md"),
            _context("/"),
            workspace_root=tmp_path,
            root_override="site",
            finder=FakeFinder([inside, outside]),
            prober=FakeProber(),
            exclude=(),
            token=CancellationToken.none(),
        )

        assert [item.label for item in items] == ["img/a.png"]

    @pytest.mark.asyncio
    async def test_probe_failure_skips_only_that_image(self, tmp_path: Path) -> None:
        good = tmp_path / "good.png"
        bad = tmp_path / "bad.png"

        items = await complete_image_paths(
            Document("", tmp_path / "a.md"),
            _context(""),
            workspace_root=tmp_path,
            root_override="",
            finder=FakeFinder([bad, good]),
            prober=FakeProber(broken={bad}),
            exclude=(),
            token=CancellationToken.none(),
        )

        assert [item.label for item in items] == ["good.png"]

    @pytest.mark.asyncio
    async def test_probing_runs_off_the_event_loop_thread(self, tmp_path: Path) -> None:
        prober = FakeProber()

        items = await complete_image_paths(
            Document("", tmp_path / "a.md"),
            _context(""),
            workspace_root=tmp_path,
            root_override="",
            finder=FakeFinder([tmp_path / "a.png", tmp_path / "b.png"]),
            prober=prober,
            exclude=(),
            token=CancellationToken.none(),
        )

        assert len(items) == 2
        assert prober.probed == [tmp_path / "a.png", tmp_path / "b.png"]
        assert threading.get_ident() not in prober.threads

    @pytest.mark.asyncio
    async def test_enumeration_failure_gives_empty_list(self, tmp_path: Path) -> None:
        items = await complete_image_paths(
            Document("", tmp_path / "a.md"),
            _context(""),
            workspace_root=tmp_path,
            root_override="",
            finder=FakeFinder(error=OSError("disk gone")),
            prober=FakeProber(),
            exclude=(),
            token=CancellationToken.none(),
        )
        assert items == []

    @pytest.mark.asyncio
    async def test_untitled_document(self, tmp_path: Path) -> None:
        finder = FakeFinder([tmp_path / "a.png"])
        items = await complete_image_paths(
            Document(""),
            _context(""),
            workspace_root=tmp_path,
            root_override="",
            finder=finder,
            prober=FakeProber(),
            exclude=(),
            token=CancellationToken.none(),
        )
        assert items == []
        assert finder.calls == []

    @pytest.mark.asyncio
    async def test_cancelled_before_enumeration(self, tmp_path: Path) -> None:
        token = CancellationToken()
        token.cancel()
        finder = FakeFinder([tmp_path / "a.png"])
        items = await complete_image_paths(
            Document("", tmp_path / "a.md"),
            _context(""),
            workspace_root=tmp_path,
            root_override="",
            finder=finder,
            prober=FakeProber(),
            exclude=(),
            token=token,
        )
        assert items == []
        assert finder.calls == []


class TestCompleteFilePaths:
    @pytest.mark.asyncio
    async def test_all_files(self, tmp_path: Path) -> None:
        finder = FakeFinder([tmp_path / "docs" / "b.md", tmp_path / "notes" / "my note.md"])

        items = await complete_file_paths(
            Document("", tmp_path / "docs" / "a.md"),
            _context("", ContextKind.FILE_PATH),
            workspace_root=tmp_path,
            root_override="",
            finder=finder,
            exclude=(),
            token=CancellationToken.none(),
        )

        assert [item.label for item in items] == ["b.md", "../notes/my%20note.md"]
        assert all(item.documentation is None for item in items)
        assert finder.calls[0][0] == ALL_FILES_GLOBS

    @pytest.mark.asyncio
    async def test_rooted_prefix(self, tmp_path: Path) -> None:
        items = await complete_file_paths(
            Document("", tmp_path / "docs" / "a.md"),
            _context("/docs/", ContextKind.FILE_PATH),
            workspace_root=tmp_path,
            root_override="",
            finder=FakeFinder([tmp_path / "docs" / "b.md", tmp_path / "README.md"]),
            exclude=(),
            token=CancellationToken.none(),
        )
        assert [item.label for item in items] == ["b.md"]
