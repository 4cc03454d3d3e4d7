from __future__ import annotations

import pytest

from mystcomplete.core.document import Document
from mystcomplete.core.math import (
    build_math_catalog,
    infer_macro_arg_count,
    math_environment_at,
    math_sort_text,
    parse_macros,
)
from mystcomplete.core.types import CandidateKind, InsertTextFormat, MathEnvironment, Position


class TestMacros:
    @pytest.mark.parametrize(
        ("expansion", "expected"),
        [
            ("#1 + #2", 2),
            ("\\mathbb{R}", 0),
            ("#1 ... #3", 1),
            ("#2 only", 0),
            ("#1#2#3#4#5#6#7#8#9", 9),
        ],
    )
    def test_infer_arg_count(self, expansion: str, expected: int) -> None:
        assert infer_macro_arg_count(expansion) == expected

    def test_parse_macros_keeps_order(self) -> None:
        specs = parse_macros({"\\RR": "\\mathbb{R}", "\\norm": "\\lVert #1 \\rVert"})
        assert [(s.command_name, s.arg_count) for s in specs] == [("\\RR", 0), ("\\norm", 1)]


class TestSortText:
    def test_lowercase_before_uppercase(self) -> None:
        assert math_sort_text("\\alpha") < math_sort_text("\\Alpha")
        assert math_sort_text("\\beta") < math_sort_text("\\Gamma")

    def test_non_letters_are_kept(self) -> None:
        assert math_sort_text("\\a1") == "\\0a1"
        assert math_sort_text("\\B") == "\\1b"


class TestBuildMathCatalog:
    def _by_label(self, items, label):
        return [item for item in items if item.label == label]

    def test_arities(self) -> None:
        items = build_math_catalog()

        (alpha,) = self._by_label(items, "\\alpha")
        assert alpha.insert_text == "alpha"
        assert alpha.insert_text_format is InsertTextFormat.PLAIN
        assert alpha.kind is CandidateKind.FUNCTION

        (sqrt,) = self._by_label(items, "\\sqrt")
        assert sqrt.insert_text == "sqrt{$1}"
        assert sqrt.insert_text_format is InsertTextFormat.SNIPPET

        assert any(item.insert_text == "frac{$1}{$2}" for item in self._by_label(items, "\\frac"))

    def test_begin_environment_snippet(self) -> None:
        (begin,) = self._by_label(build_math_catalog(), "\\begin")
        assert begin.kind is CandidateKind.SNIPPET
        assert begin.insert_text is not None
        assert begin.insert_text.startswith("begin{${1|matrix,array,")
        assert begin.insert_text.endswith("|}}\n\t$2\n\\end{$1}")

    def test_arity_groups_are_deduplicated(self) -> None:
        items = build_math_catalog()
        keys = [(item.label, item.insert_text) for item in items]
        assert len(keys) == len(set(keys))

    def test_user_macros(self) -> None:
        items = build_math_catalog(
            parse_macros({"\\RR": "\\mathbb{R}", "\\norm": "\\left\\lVert #1 \\right\\rVert"})
        )
        (rr,) = self._by_label(items, "\\RR")
        (norm,) = self._by_label(items, "\\norm")
        assert rr.insert_text == "RR"
        assert rr.documentation == "\\mathbb{R}"
        assert norm.insert_text == "norm{$1}"

    def test_every_item_carries_sort_text(self) -> None:
        for item in build_math_catalog():
            assert item.sort_text == math_sort_text(item.label)


class TestMathEnvironment:
    def _at(self, text: str, line: int, character: int) -> MathEnvironment:
        return math_environment_at(Document(text), Position(line=line, character=character))

    def test_inline(self) -> None:
        text = "Euler: $e^{i\\pi} + \\fr$ done"
        assert self._at(text, 0, text.index("$ done")) is MathEnvironment.INLINE

    def test_inline_needs_closing_dollar(self) -> None:
        text = "costs $5 and \\al"
        assert self._at(text, 0, len(text)) is MathEnvironment.NONE

    def test_display(self) -> None:
        text = "$$\nx = \\fr\n$$\n"
        assert self._at(text, 1, 7) is MathEnvironment.DISPLAY

    def test_after_closed_display_block(self) -> None:
        text = "$$\nx\n$$\n\\al\n"
        assert self._at(text, 3, 3) is MathEnvironment.NONE

    def test_math_directive(self) -> None:
        text = "```{math}\n:label: eq\n\\fr\n```\n\\al"
        assert self._at(text, 2, 3) is MathEnvironment.DISPLAY
        assert self._at(text, 4, 3) is MathEnvironment.NONE

    def test_plain_text(self) -> None:
        assert self._at("\\alpha", 0, 6) is MathEnvironment.NONE
