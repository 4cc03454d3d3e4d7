"""Insertable MyST blocks.

Each builder returns snippet text with ``$1``/``${1:default}`` placeholders
ready for a snippet-aware editor. Values the user typed are escaped so that
``$``, ``}`` and ``\\`` in them are inserted literally.
"""

from __future__ import annotations

from pathlib import PurePosixPath
import re

from mystcomplete.core.exceptions import SnippetError

FENCE = "```"

ADMONITIONS = ("note", "tip", "warning", "danger", "important")

DIRECTIVE_CHOICES: dict[str, str] = {
    "note": "Information note",
    "tip": "Helpful tip",
    "warning": "Warning message",
    "danger": "Danger/error message",
    "important": "Important information",
    "admonition": "Custom admonition",
    "figure": "Figure with caption",
    "table": "Table with caption",
    "code-block": "Code block with syntax highlighting",
    "code-cell": "Executable code cell",
    "math": "Mathematical equation block",
    "bibliography": "Bibliography section",
    "contents": "Table of contents",
    "glossary": "Glossary of terms",
}

CITATION_STYLES: dict[str, str] = {
    "cite": "Standard citation",
    "cite:p": "Parenthetical citation",
    "cite:t": "Text citation",
    "cite:year": "Year only",
    "cite:author": "Author only",
}

REFERENCE_KINDS: dict[str, str] = {
    "ref": "Generic reference",
    "numref": "Numbered reference",
    "eq": "Equation reference",
    "doc": "Document reference",
}

CODE_CELL_LANGUAGES: dict[str, str] = {
    "python": "Python code",
    "jupyter": "Jupyter notebook style",
    "r": "R code",
    "julia": "Julia code",
    "bash": "Bash script",
}

_DIRECTIVE_BODIES: dict[str, str] = {
    "admonition": "{admonition} ${1:Title}\n:class: ${2:note}\n\n${3:Your content here}",
    "figure": (
        "{figure} ${1:path/to/image.png}\n:name: ${2:fig-label}\n:width: ${3:400px}\n"
        ":alt: ${4:Alternative text}\n\n${5:Caption text}"
    ),
    "table": (
        "{table} ${1:Table title}\n:name: ${2:tbl-label}\n\n"
        "| ${3:Header 1} | ${4:Header 2} | ${5:Header 3} |\n"
        "|-------------|-------------|-------------|\n"
        "| ${6:Row 1}    | ${7:Data}     | ${8:Data}     |\n"
        "| ${9:Row 2}    | ${10:Data}    | ${11:Data}    |"
    ),
    "code-block": (
        "{code-block} ${1:python}\n:linenos:\n:caption: ${2:Code example}\n\n"
        '${3:# Your code here}\nprint("Hello, World!")'
    ),
    "code-cell": (
        "{code-cell}\n:tags: [${1:hide-input, hide-output}]\n\n"
        "${2:# Executable Python code}\nimport numpy as np\nimport matplotlib.pyplot as plt"
    ),
    "math": "{math}\n:label: ${1:eq-label}\n\n${2:E = mc^2}",
    "bibliography": "{bibliography}\n:filter: docname in docnames",
    "contents": "{contents}\n:depth: ${1:2}\n:local:",
    "glossary": (
        "{glossary}\n\n${1:term}\n  ${2:Definition of the term}\n\n"
        "${3:another term}\n  ${4:Another definition}"
    ),
}

_DIRECTIVE_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z\-]*$")
_SNIPPET_SPECIAL_RE = re.compile(r"([$}\\])")


def escape_snippet_text(value: str) -> str:
    return _SNIPPET_SPECIAL_RE.sub(r"\\\1", value)


def _fenced(body: str) -> str:
    return f"{FENCE}{body}\n{FENCE}"


def _require(value: str | None, what: str) -> str:
    if value is None or not value.strip():
        raise SnippetError(f"{what} must not be empty")
    return value.strip()


def _check_choice(value: str, choices: dict[str, str], what: str) -> None:
    if value not in choices:
        allowed = ", ".join(choices)
        raise SnippetError(f"Unknown {what} '{value}' (expected one of: {allowed})")


def directive_snippet(name: str) -> str:
    """Snippet for a whole directive block.

    Names outside ``DIRECTIVE_CHOICES`` get a generic block with a single
    content placeholder.
    """
    name = _require(name, "Directive name")
    if not _DIRECTIVE_NAME_RE.match(name):
        raise SnippetError(f"Invalid directive name '{name}'")
    if name in ADMONITIONS:
        return _fenced(f"{{{name}}}\n${{1:Your {name} content here}}")
    if name in _DIRECTIVE_BODIES:
        return _fenced(_DIRECTIVE_BODIES[name])
    return _fenced(f"{{{name}}}\n${{1:Content}}")


def default_figure_label(image_path: str) -> str:
    stem = PurePosixPath(image_path).name.split(".")[0]
    return f"fig-{stem or 'fig'}"


def figure_snippet(
    image_path: str, label: str | None = None, caption: str | None = None
) -> str:
    image_path = _require(image_path, "Image path")
    label = label.strip() if label and label.strip() else default_figure_label(image_path)
    caption_text = (
        escape_snippet_text(caption.strip())
        if caption and caption.strip()
        else "${3:Figure caption}"
    )
    return _fenced(
        f"{{figure}} {escape_snippet_text(image_path)}\n"
        f":name: {escape_snippet_text(label)}\n"
        ":width: ${1:400px}\n"
        ":alt: ${2:Alternative text for accessibility}\n\n"
        f"{caption_text}"
    )


def citation_snippet(key: str, style: str = "cite") -> str:
    key = _require(key, "Citation key")
    _check_choice(style, CITATION_STYLES, "citation style")
    return f"{{{style}}}`{escape_snippet_text(key)}`"


def cross_reference_snippet(kind: str, label: str) -> str:
    _check_choice(kind, REFERENCE_KINDS, "reference kind")
    label = _require(label, "Reference label")
    return f"{{{kind}}}`{escape_snippet_text(label)}`"


def equation_snippet(label: str) -> str:
    label = _require(label, "Equation label")
    return _fenced(f"{{math}}\n:label: {escape_snippet_text(label)}\n\n${{1:E = mc^2}}")


def code_cell_snippet(language: str, with_tags: bool = False) -> str:
    _check_choice(language, CODE_CELL_LANGUAGES, "code cell language")
    if with_tags:
        return _fenced(
            f"{{code-cell}} {language}\n"
            ":tags: [${1:hide-input, hide-output, remove-stderr}]\n\n"
            f"${{2:# Your {language} code here}}"
        )
    return _fenced(f"{{code-cell}} {language}\n\n${{1:# Your {language} code here}}")
