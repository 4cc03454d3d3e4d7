from __future__ import annotations

from mystcomplete.core.context import classify_context
from mystcomplete.core.document import Document
from mystcomplete.core.headings import complete_heading_links, compute_heading_edit
from mystcomplete.core.types import CandidateKind, Position
from tests.fakes import FakeOutline


def _edit(line: str, cursor: int):
    position = Position(line=0, character=cursor)
    context = classify_context(line[:cursor], line[cursor:])
    return compute_heading_edit(position, context, line[:cursor], line[cursor:])


class TestComputeHeadingEdit:
    def test_new_link_appends_paren(self) -> None:
        edit = _edit("[text](#", 8)
        assert edit.add_closing_paren is True
        assert edit.range.start.character == 7
        assert edit.range.end.character == 8

    def test_existing_target_is_replaced_up_to_paren(self) -> None:
        line = "[text](#old-slug) more"
        edit = _edit(line, 10)
        assert edit.add_closing_paren is False
        assert edit.range.start.character == 7
        assert edit.range.end.character == line.index(")")

    def test_cursor_right_before_paren(self) -> None:
        edit = _edit("[x](#)", 5)
        assert edit.add_closing_paren is False
        assert edit.range.start.character == 4
        assert edit.range.end.character == 5

    def test_blanks_before_paren(self) -> None:
        line = "[text](#  )"
        edit = _edit(line, 8)
        assert edit.add_closing_paren is False
        assert edit.range.end.character == 10

    def test_word_after_cursor_without_paren(self) -> None:
        line = "[text](#intro rest"
        edit = _edit(line, 10)
        assert edit.add_closing_paren is True
        assert edit.range.end.character == 13

    def test_definition_takes_no_paren(self) -> None:
        edit = _edit("[label]: #", 10)
        assert edit.add_closing_paren is False
        assert edit.range.start.character == 9
        assert edit.range.end.character == 10


class TestCompleteHeadingLinks:
    def test_items_from_outline(self, fake_outline: FakeOutline) -> None:
        document = Document("# Introduction\n\nSee [here](#")
        position = Position(line=2, character=12)
        context = classify_context(document.text_before(position))

        items = complete_heading_links(document, position, context, fake_outline)

        assert [item.label for item in items] == ["#introduction", "#getting-started"]
        first = items[0]
        assert first.kind is CandidateKind.REFERENCE
        assert first.insert_text == "#introduction)"
        assert first.documentation == "Introduction"
        assert first.range is not None
        assert first.range.start == Position(line=2, character=11)
        assert items[1].documentation == "Getting *started*"

    def test_all_headings_are_requested(self, fake_outline: FakeOutline) -> None:
        document = Document("[x](#")
        position = Position(line=0, character=5)
        context = classify_context(document.text_before(position))

        complete_heading_links(document, position, context, fake_outline)

        assert fake_outline.calls == [
            {"respect_magic_comment_omit": False, "respect_project_level_omit": False}
        ]

    def test_existing_paren_keeps_label_as_insert_text(self, fake_outline: FakeOutline) -> None:
        document = Document("[x](#intro)")
        position = Position(line=0, character=7)
        context = classify_context(document.text_before(position))

        items = complete_heading_links(document, position, context, fake_outline)

        assert items[0].insert_text is None
        assert items[0].effective_insert_text == "#introduction"
        assert items[0].range is not None
        assert items[0].range.end.character == 10
