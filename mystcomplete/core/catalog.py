"""MyST directive and role catalogs.

Completion is triggered after ``{``: at the start of a code fence
(```` ```{note ````) it offers directives, anywhere else (``{ref``) roles.
Snippets insert everything after the brace.
"""

from __future__ import annotations

from dataclasses import dataclass

from mystcomplete.core.types import CandidateItem, CandidateKind, InsertTextFormat


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    name: str
    description: str
    snippet: str


DIRECTIVES: tuple[CatalogEntry, ...] = (
    CatalogEntry("note", "Create a note admonition", "note}\n$1\n```"),
    CatalogEntry("tip", "Create a tip admonition", "tip}\n$1\n```"),
    CatalogEntry("warning", "Create a warning admonition", "warning}\n$1\n```"),
    CatalogEntry("important", "Create an important admonition", "important}\n$1\n```"),
    CatalogEntry("danger", "Create a danger admonition", "danger}\n$1\n```"),
    CatalogEntry("error", "Create an error admonition", "error}\n$1\n```"),
    CatalogEntry(
        "figure",
        "Create a figure",
        "figure} ${1:image.png}\n:name: ${2:fig-label}\n:width: ${3:300px}\n\n${4:Caption text}\n```",
    ),
    CatalogEntry(
        "code-block",
        "Create a code block",
        "code-block} ${1:python}\n:linenos:\n:caption: ${2:Code caption}\n\n${3:# Your code here}\n```",
    ),
    CatalogEntry(
        "code-cell",
        "Create an executable code cell",
        "code-cell}\n:tags: [${1:tag1, tag2}]\n\n${2:# Your code here}\n```",
    ),
    CatalogEntry(
        "math",
        "Create a math block",
        "math}\n:label: ${1:eq-label}\n\n${2:E = mc^2}\n```",
    ),
    CatalogEntry(
        "table",
        "Create a table",
        "table} ${1:Table title}\n:name: ${2:tbl-label}\n\n"
        "| ${3:Column 1} | ${4:Column 2} |\n| --- | --- |\n| ${5:Data 1} | ${6:Data 2} |\n```",
    ),
    CatalogEntry("bibliography", "Create a bibliography", "bibliography}\n```"),
    CatalogEntry(
        "glossary",
        "Create a glossary",
        "glossary}\n\n${1:term}\n  ${2:Definition of the term}\n```",
    ),
    CatalogEntry(
        "contents",
        "Create a table of contents",
        "contents}\n:depth: ${1:2}\n:local:\n```",
    ),
    CatalogEntry("include", "Include another file", "include} ${1:path/to/file.md}\n```"),
    CatalogEntry(
        "literalinclude",
        "Include a code file",
        "literalinclude} ${1:path/to/file.py}\n:language: ${2:python}\n:lines: ${3:1-10}\n```",
    ),
    CatalogEntry("card", "Create a card layout", "card} ${1:Card title}\n\n${2:Card content}\n```"),
    CatalogEntry("grid", "Create a grid layout", "grid} ${1:2}\n\n${2:Grid content}\n```"),
    CatalogEntry(
        "tab-set",
        "Create tabbed content",
        "tab-set}\n\n:::{tab-item} ${1:Tab 1}\n${2:Content for tab 1}\n:::\n\n"
        ":::{tab-item} ${3:Tab 2}\n${4:Content for tab 2}\n:::\n```",
    ),
)

ROLES: tuple[CatalogEntry, ...] = (
    CatalogEntry("ref", "Cross-reference to a label", "ref}`${1:label-name}`"),
    CatalogEntry("doc", "Link to another document", "doc}`${1:path/to/document}`"),
    CatalogEntry("download", "Download link", "download}`${1:path/to/file}`"),
    CatalogEntry("cite", "Citation reference", "cite}`${1:citation-key}`"),
    CatalogEntry("math", "Inline math", "math}`${1:x^2 + y^2}`"),
    CatalogEntry("eq", "Reference to equation", "eq}`${1:equation-label}`"),
    CatalogEntry("numref", "Numbered reference", "numref}`${1:figure-label}`"),
    CatalogEntry("code", "Inline code with language", 'code}`${1:python} ${2:print("hello")}`'),
    CatalogEntry("kbd", "Keyboard input", "kbd}`${1:Ctrl+C}`"),
    CatalogEntry("guilabel", "GUI label", "guilabel}`${1:File > Open}`"),
    CatalogEntry("menuselection", "Menu selection", "menuselection}`${1:File --> Open}`"),
    CatalogEntry("file", "File path", "file}`${1:path/to/file}`"),
    CatalogEntry("term", "Glossary term", "term}`${1:terminology}`"),
    CatalogEntry("abbr", "Abbreviation", "abbr}`${1:abbreviation (full form)}`"),
    CatalogEntry("sup", "Superscript", "sup}`${1:text}`"),
    CatalogEntry("sub", "Subscript", "sub}`${1:text}`"),
)


def match_catalog(catalog: tuple[CatalogEntry, ...], typed: str) -> list[CatalogEntry]:
    """Entries whose name starts with ``typed`` (case-sensitive)."""
    return [entry for entry in catalog if entry.name.startswith(typed)]


def complete_directives(typed: str) -> list[CandidateItem]:
    return [
        CandidateItem(
            label=entry.name,
            kind=CandidateKind.SNIPPET,
            insert_text=entry.snippet,
            insert_text_format=InsertTextFormat.SNIPPET,
            documentation=entry.description,
            detail=f"MyST Directive: {entry.name}",
        )
        for entry in match_catalog(DIRECTIVES, typed)
    ]


def complete_roles(typed: str) -> list[CandidateItem]:
    return [
        CandidateItem(
            label=entry.name,
            kind=CandidateKind.FUNCTION,
            insert_text=entry.snippet,
            insert_text_format=InsertTextFormat.SNIPPET,
            documentation=entry.description,
            detail=f"MyST Role: {entry.name}",
        )
        for entry in match_catalog(ROLES, typed)
    ]
