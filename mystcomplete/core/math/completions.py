"""Math command catalog.

Built once per engine from the KaTeX tables and the user's macro
definitions, then shared read-only by every request.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re

from mystcomplete.core.math import katex_funcs as kf
from mystcomplete.core.types import (
    CandidateItem,
    CandidateKind,
    InsertTextFormat,
    MacroSpec,
)

# TeX macros take at most nine parameters.
MAX_MACRO_ARGS = 9

_ARITY_0 = (
    kf.DELIMITERS_0, kf.DELIMITER_SIZING_0, kf.GREEK_LETTERS_0,
    kf.OTHER_LETTERS_0, kf.SPACING_0, kf.VERTICAL_LAYOUT_0,
    kf.LOGIC_AND_SET_THEORY_0, kf.MACROS_0, kf.BIG_OPERATORS_0,
    kf.BINARY_OPERATORS_0, kf.BINOMIAL_COEFFICIENTS_0, kf.FRACTIONS_0,
    kf.MATH_OPERATORS_0, kf.RELATIONS_0, kf.NEGATED_RELATIONS_0,
    kf.ARROWS_0, kf.FONT_0, kf.SIZE_0, kf.STYLE_0,
    kf.SYMBOLS_AND_PUNCTUATION_0, kf.DEBUGGING_0,
)
_ARITY_1 = (
    kf.ACCENTS_1, kf.ANNOTATION_1, kf.VERTICAL_LAYOUT_1, kf.OVERLAP_1,
    kf.SPACING_1, kf.LOGIC_AND_SET_THEORY_1, kf.MATH_OPERATORS_1, kf.SQRT_1,
    kf.EXTENSIBLE_ARROWS_1, kf.FONT_1, kf.BRAKET_NOTATION_1,
    kf.CLASS_ASSIGNMENT_1,
)
_ARITY_2 = (
    kf.VERTICAL_LAYOUT_2, kf.BINOMIAL_COEFFICIENTS_2, kf.FRACTIONS_2,
    kf.COLOR_2,
)

_LETTER_RE = re.compile(r"[a-zA-Z]")


def _unique(groups: Iterable[Iterable[str]]) -> list[str]:
    """Flatten ``groups`` keeping the first occurrence of every name."""
    return list(dict.fromkeys(name for group in groups for name in group))


def infer_macro_arg_count(expansion: str) -> int:
    """Number of arguments a macro expansion uses.

    Counts consecutive placeholders from ``#1`` and stops at the first
    missing one, so ``"#1 + #3"`` takes a single argument.
    """
    for index in range(1, MAX_MACRO_ARGS + 1):
        if f"#{index}" not in expansion:
            return index - 1
    return MAX_MACRO_ARGS


def parse_macros(macros: Mapping[str, str]) -> tuple[MacroSpec, ...]:
    return tuple(
        MacroSpec(
            command_name=command,
            expansion=expansion,
            arg_count=infer_macro_arg_count(expansion),
        )
        for command, expansion in macros.items()
    )


def math_sort_text(label: str) -> str:
    """Case-insensitive sort key that ranks ``\\alpha`` before ``\\Alpha``."""

    def _rewrite(match: re.Match[str]) -> str:
        char = match.group(0)
        return f"0{char}" if char.islower() else f"1{char.lower()}"

    return _LETTER_RE.sub(_rewrite, label)


def _command_item(name: str, arity: int) -> CandidateItem:
    if arity == 0:
        return CandidateItem(label=f"\\{name}", kind=CandidateKind.FUNCTION, insert_text=name)
    arguments = "".join(f"{{${index}}}" for index in range(1, arity + 1))
    return CandidateItem(
        label=f"\\{name}",
        kind=CandidateKind.FUNCTION,
        insert_text=f"{name}{arguments}",
        insert_text_format=InsertTextFormat.SNIPPET,
    )


def _environment_item() -> CandidateItem:
    choices = ",".join(kf.ENVIRONMENTS)
    return CandidateItem(
        label="\\begin",
        kind=CandidateKind.SNIPPET,
        insert_text=f"begin{{${{1|{choices}|}}}}\n\t$2\n\\end{{$1}}",
        insert_text_format=InsertTextFormat.SNIPPET,
    )


def _macro_item(macro: MacroSpec) -> CandidateItem:
    arguments = "".join(f"{{${index}}}" for index in range(1, macro.arg_count + 1))
    return CandidateItem(
        label=macro.command_name,
        kind=CandidateKind.FUNCTION,
        insert_text=f"{macro.command_name[1:]}{arguments}",
        insert_text_format=InsertTextFormat.SNIPPET,
        documentation=macro.expansion,
    )


def build_math_catalog(macros: Iterable[MacroSpec] = ()) -> tuple[CandidateItem, ...]:
    items: list[CandidateItem] = []
    items.extend(_command_item(name, 0) for name in _unique(_ARITY_0))
    items.extend(_command_item(name, 1) for name in _unique(_ARITY_1))
    items.extend(_command_item(name, 2) for name in _unique(_ARITY_2))
    items.append(_environment_item())
    items.extend(_macro_item(macro) for macro in macros)
    return tuple(
        item.model_copy(update={"sort_text": math_sort_text(item.label)})
        for item in items
    )
