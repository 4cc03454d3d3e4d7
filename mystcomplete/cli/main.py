"""mystcomplete command line.

Runs the completion engine outside an editor: one-shot completion at a
position of a file, context classification of a line fragment, MyST snippet
generation and an interactive prompt with live completion.
"""

from __future__ import annotations

from pathlib import Path
import argparse
import asyncio
import json
import logging
import sys

from rich import print as rprint
from rich.console import Console
from rich.table import Table

from mystcomplete import __version__
from mystcomplete.cli.error_handler import ErrorDisplay
from mystcomplete.core.config import CompletionSettings, load_settings, read_config_file
from mystcomplete.core.context import classify_context
from mystcomplete.core.document import Document
from mystcomplete.core.engine import CompletionEngine
from mystcomplete.core.exceptions import MystCompleteError
from mystcomplete.core.snippets import (
    CITATION_STYLES,
    CODE_CELL_LANGUAGES,
    REFERENCE_KINDS,
    citation_snippet,
    code_cell_snippet,
    cross_reference_snippet,
    directive_snippet,
    equation_snippet,
    figure_snippet,
)
from mystcomplete.core.types import CandidateItem, Position

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mystcomplete",
        description="Completion engine for MyST Markdown documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mystcomplete complete docs/intro.md 12 8 --workspace .
  mystcomplete context '![fig](images/' --json
  mystcomplete snippet figure images/plot.png --caption "A plot"
  mystcomplete repl docs/intro.md --enable
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose debug output"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    complete = subparsers.add_parser("complete", help="Complete at a position in a file")
    complete.add_argument("file", type=Path, help="Markdown document")
    complete.add_argument("line", type=int, help="Line number, 1-based")
    complete.add_argument("column", type=int, help="Column number, 1-based")
    _add_engine_arguments(complete)
    complete.add_argument("--json", action="store_true", help="Print candidates as JSON")

    context = subparsers.add_parser("context", help="Classify the text before a cursor")
    context.add_argument("before", help="Line text before the cursor")
    context.add_argument("after", nargs="?", default="", help="Line text after the cursor")
    context.add_argument(
        "--disabled",
        action="store_true",
        help="Classify as if image, heading and file completion were switched off",
    )
    context.add_argument("--json", action="store_true", help="Print the context as JSON")

    snippet = subparsers.add_parser("snippet", help="Print a MyST snippet")
    kinds = snippet.add_subparsers(dest="kind", required=True)
    directive = kinds.add_parser("directive", help="Directive block")
    directive.add_argument("name")
    figure = kinds.add_parser("figure", help="Figure directive for an image")
    figure.add_argument("image_path")
    figure.add_argument("--label", default=None)
    figure.add_argument("--caption", default=None)
    citation = kinds.add_parser("citation", help="Citation role")
    citation.add_argument("key")
    citation.add_argument("--style", default="cite", choices=list(CITATION_STYLES))
    xref = kinds.add_parser("xref", help="Cross-reference role")
    xref.add_argument("reference_kind", choices=list(REFERENCE_KINDS))
    xref.add_argument("label")
    equation = kinds.add_parser("equation", help="Labelled math block")
    equation.add_argument("label")
    code_cell = kinds.add_parser("code-cell", help="Executable code cell")
    code_cell.add_argument("language", choices=list(CODE_CELL_LANGUAGES))
    code_cell.add_argument("--tags", action="store_true", help="Include execution tags")

    repl = subparsers.add_parser("repl", help="Interactive prompt with completion")
    repl.add_argument("file", type=Path, nargs="?", default=None, help="Context document")
    _add_engine_arguments(repl)

    return parser


def _add_engine_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--workspace", type=Path, default=None, help="Workspace root (default: file's folder)"
    )
    parser.add_argument("--config", type=Path, default=None, help="Configuration file")
    parser.add_argument(
        "--enable",
        action="store_true",
        help="Enable image, heading and file completion regardless of configuration",
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _settings_for(args: argparse.Namespace, workspace: Path) -> CompletionSettings:
    if args.config is not None:
        # Explicit files must exist and parse; discovered ones degrade quietly.
        read_config_file(args.config)
    overrides = {"enabled": True} if args.enable else None
    return load_settings(
        workspace_root=workspace, config_path=args.config, overrides=overrides
    )


def _engine_for(args: argparse.Namespace, document: Document) -> CompletionEngine:
    workspace = args.workspace or document.directory or Path.cwd()
    workspace = workspace.resolve()
    return CompletionEngine(_settings_for(args, workspace), workspace_root=workspace)


def render_candidates(items: list[CandidateItem], console: Console | None = None) -> None:
    table = Table(title=f"{len(items)} candidates", show_lines=False)
    table.add_column("Label", style="bold")
    table.add_column("Kind")
    table.add_column("Insert")
    table.add_column("Detail", style="dim")
    for item in sorted(items, key=lambda i: i.effective_sort_text):
        table.add_row(
            item.label,
            str(item.kind),
            item.effective_insert_text.replace("\n", "\\n"),
            item.detail or "",
        )
    (console or Console()).print(table)


def run_complete(args: argparse.Namespace) -> int:
    document = Document.from_path(args.file)
    engine = _engine_for(args, document)
    position = Position(line=max(0, args.line - 1), character=max(0, args.column - 1))
    items = asyncio.run(engine.provide_completions(document, position))

    if args.json:
        payload = (
            None
            if items is None
            else [item.model_dump(mode="json", exclude_none=True) for item in items]
        )
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif items is None:
        ErrorDisplay.display_warning("No completion applies at this position", context="Complete")
    else:
        render_candidates(items)
    return 0


def run_context(args: argparse.Namespace) -> int:
    context = classify_context(args.before, args.after, enabled=not args.disabled)
    if args.json:
        print(
            json.dumps(
                {
                    "kind": str(context.kind),
                    "typed": context.typed,
                    "start": context.start,
                    "is_definition": context.is_definition,
                }
            )
        )
    else:
        rprint(
            f"[bold]{context.kind}[/] typed={context.typed!r} start={context.start}"
            f" definition={context.is_definition}"
        )
    return 0


def run_snippet(args: argparse.Namespace) -> int:
    match args.kind:
        case "directive":
            text = directive_snippet(args.name)
        case "figure":
            text = figure_snippet(args.image_path, args.label, args.caption)
        case "citation":
            text = citation_snippet(args.key, args.style)
        case "xref":
            text = cross_reference_snippet(args.reference_kind, args.label)
        case "equation":
            text = equation_snippet(args.label)
        case _:
            text = code_cell_snippet(args.language, with_tags=args.tags)
    print(text)
    return 0


def run_repl(args: argparse.Namespace) -> int:
    from prompt_toolkit import PromptSession

    from mystcomplete.cli.adapter import PromptToolkitCompleter

    document = Document.from_path(args.file) if args.file else Document("")
    engine = _engine_for(args, document)
    session: PromptSession[str] = PromptSession(
        completer=PromptToolkitCompleter(engine, document),
        complete_while_typing=True,
    )
    rprint("[dim]Type MyST text; Tab completes, Ctrl-D exits.[/]")
    while True:
        try:
            session.prompt("myst> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
    return 0


_COMMANDS = {
    "complete": run_complete,
    "context": run_context,
    "snippet": run_snippet,
    "repl": run_repl,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return _COMMANDS[args.command](args)
    except (MystCompleteError, OSError) as e:
        logger.debug(ErrorDisplay.format_error_message(e, args.command))
        ErrorDisplay.display_error(e, context=args.command.capitalize(), show_traceback=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
