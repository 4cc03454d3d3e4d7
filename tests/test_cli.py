from __future__ import annotations

import json
from pathlib import Path

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document as PromptDocument
import pytest

from mystcomplete.cli.adapter import PromptToolkitCompleter, snippet_to_plain
from mystcomplete.cli.main import build_parser, main
from mystcomplete.core.config import CompletionSettings
from mystcomplete.core.document import Document
from mystcomplete.core.engine import CompletionEngine
from tests.fakes import FakeFinder, FakeOutline, FakeProber


class TestParser:
    def test_complete_arguments(self) -> None:
        args = build_parser().parse_args(["complete", "doc.md", "3", "5", "--enable", "--json"])
        assert args.command == "complete"
        assert args.file == Path("doc.md")
        assert (args.line, args.column) == (3, 5)
        assert args.enable is True

    def test_snippet_choices_are_validated(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["snippet", "citation", "key", "--style", "nope"])


class TestCompleteCommand:
    def test_json_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("[home]: /index.md\n\nGo [h\n", encoding="utf-8")

        code = main(["complete", str(doc), "3", "6", "--workspace", str(tmp_path), "--json"])

        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert [item["label"] for item in payload] == ["home"]
        assert payload[0]["kind"] == "reference"

    def test_not_applicable(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("plain\n", encoding="utf-8")

        code = main(["complete", str(doc), "1", "6", "--json"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) is None

    def test_workspace_defaults_to_document_folder(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        docs = tmp_path / "docs"
        docs.mkdir()
        doc = docs / "a.md"
        doc.write_text("[see](\n", encoding="utf-8")
        (docs / "b.md").write_text("b\n", encoding="utf-8")
        (tmp_path / "other.md").write_text("o\n", encoding="utf-8")

        assert main(["complete", str(doc), "1", "7", "--json"]) == 0

        labels = [item["label"] for item in json.loads(capsys.readouterr().out)]
        assert "b.md" in labels
        assert "../other.md" not in labels

    def test_not_applicable_warning(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("plain\n", encoding="utf-8")

        assert main(["complete", str(doc), "1", "6"]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No completion applies" in captured.err

    def test_table_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("```{gloss\n", encoding="utf-8")

        assert main(["complete", str(doc), "1", "10"]) == 0
        assert "glossary" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["complete", str(tmp_path / "nope.md"), "1", "1"]) == 1
        assert "Complete failed" in capsys.readouterr().err

    def test_broken_explicit_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("x\n", encoding="utf-8")
        config = tmp_path / "broken.toml"
        config.write_text("[completion\n", encoding="utf-8")

        code = main(["complete", str(doc), "1", "1", "--config", str(config)])

        assert code == 1
        assert "ConfigError" in capsys.readouterr().err


class TestContextCommand:
    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["context", "![alt](img/", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "kind": "image_path",
            "typed": "img/",
            "start": 7,
            "is_definition": False,
        }

    def test_disabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["context", "![alt](img/", "--disabled", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "none"


class TestSnippetCommand:
    def test_citation(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["snippet", "citation", "knuth1984", "--style", "cite:t"]) == 0
        assert capsys.readouterr().out.strip() == "{cite:t}`knuth1984`"

    def test_code_cell(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["snippet", "code-cell", "r", "--tags"]) == 0
        assert "```{code-cell} r" in capsys.readouterr().out

    def test_invalid_directive(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["snippet", "directive", "not valid"]) == 1
        assert "SnippetError" in capsys.readouterr().err


class TestPromptToolkitCompleter:
    def _completer(self, tmp_path: Path, base: str = "") -> PromptToolkitCompleter:
        engine = CompletionEngine(
            CompletionSettings(enabled=True),
            workspace_root=tmp_path,
            outline=FakeOutline(),
            file_finder=FakeFinder(),
            image_prober=FakeProber(),
        )
        return PromptToolkitCompleter(engine, Document(base))

    def _complete(self, completer: PromptToolkitCompleter, line: str, cursor: int | None = None):
        cursor = len(line) if cursor is None else cursor
        return list(completer.get_completions(PromptDocument(line, cursor), CompleteEvent()))

    def test_directive_completion(self, tmp_path: Path) -> None:
        completions = self._complete(self._completer(tmp_path), "```{no")
        assert [c.display_text for c in completions] == ["note"]
        assert completions[0].text == "note}\n\n```"
        assert completions[0].start_position == -2

    def test_references_from_base_document(self, tmp_path: Path) -> None:
        completer = self._completer(tmp_path, "[alpha]: /a\n[beta]: /b\n")
        completions = self._complete(completer, "see [al")
        assert [c.text for c in completions] == ["alpha"]
        assert completions[0].start_position == -2

    def test_math_commands_are_filtered(self, tmp_path: Path) -> None:
        completer = self._completer(tmp_path)
        completions = self._complete(completer, "$x + \\sqr$", cursor=9)

        assert "sqrt{}" in [c.text for c in completions]
        assert all(c.text.startswith("sqr") for c in completions)
        assert completions[0].start_position == -3

    def test_math_commands_need_math(self, tmp_path: Path) -> None:
        assert self._complete(self._completer(tmp_path), "no math \\sqr") == []

    def test_directive_while_typing(self, tmp_path: Path) -> None:
        completions = self._complete(self._completer(tmp_path), "```{code-c")
        assert [c.display_text for c in completions] == ["code-cell"]

    def test_nothing_applicable(self, tmp_path: Path) -> None:
        assert self._complete(self._completer(tmp_path), "plain") == []


def test_snippet_to_plain() -> None:
    assert snippet_to_plain("ref}`${1:label-name}`") == "ref}`label-name`"
    assert snippet_to_plain("begin{${1|matrix,array|}}\n\t$2\n\\end{$1}") == (
        "begin{matrix}\n\t\n\\end{}"
    )
