"""Rich-formatted error reporting for the command line.

Usage:
    from mystcomplete.cli.error_handler import ErrorDisplay

    try:
        settings = load_settings(config_path=path)
    except MystCompleteError as e:
        ErrorDisplay.display_error(e, context="Configuration")
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.traceback import Traceback

from mystcomplete.core.exceptions import ConfigError, ImageProbeError

_console = Console(stderr=True)

COLORS = {
    "error": "#FF4444",
    "warning": "#FFB800",
    "info": "#00D26A",
    "muted": "#666666",
}


class ErrorDisplay:
    """Error, warning and info panels shared by all subcommands."""

    @staticmethod
    def display_error(
        error: BaseException,
        context: str = "Operation",
        show_traceback: bool = False,
        console: Console | None = None,
    ) -> None:
        """Display a formatted error panel.

        Args:
            error: The exception that occurred
            context: What was being done, e.g. "Completion" or "Configuration"
            show_traceback: Whether to print the traceback below the panel
            console: Console to print to; stderr by default
        """
        con = console or _console

        content = Text()
        content.append(f"{type(error).__name__}\n", style=f"bold {COLORS['error']}")
        if isinstance(error, (ConfigError, ImageProbeError)):
            content.append("File: ", style=COLORS["muted"])
            content.append(f"{error.path}\n", style="bold")
        content.append(str(error), style=COLORS["muted"])

        con.print()
        con.print(
            Panel(
                content,
                title=f"[{COLORS['error']}]{context} failed[/{COLORS['error']}]",
                border_style=COLORS["error"],
                padding=(1, 2),
            )
        )

        if show_traceback and error.__traceback__:
            con.print()
            con.print(
                Traceback.from_exception(
                    type(error),
                    error,
                    error.__traceback__,
                    show_locals=False,
                    max_frames=10,
                )
            )

    @staticmethod
    def display_warning(
        message: str, context: str = "Warning", console: Console | None = None
    ) -> None:
        con = console or _console
        con.print(
            Panel(
                Text(message, style=COLORS["muted"]),
                title=f"[{COLORS['warning']}]{context}[/{COLORS['warning']}]",
                border_style=COLORS["warning"],
                padding=(0, 2),
            )
        )

    @staticmethod
    def format_error_message(error: BaseException, context: str = "Error") -> str:
        """Plain text variant for logs."""
        return f"[{context}] {type(error).__name__}: {error}"


__all__ = ["COLORS", "ErrorDisplay"]
