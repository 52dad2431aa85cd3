"""Rich-based display functions for Maildir Monitor."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .models import MonitorState, ScanResult, Severity

console = Console()
err_console = Console(stderr=True)


def _severity_style(state: Severity) -> str:
    """Return a Rich style for a severity."""
    if state is Severity.WARNING:
        return "bold yellow"
    return "dim"


def render_summary(state: MonitorState) -> Text:
    """Render the last summary as styled text; an empty one renders as "no mail"."""
    return Text(state.display_text or "no mail", style=_severity_style(state.severity))


def display_entries(scan_result: ScanResult) -> None:
    """Display every mail found by a scan, in scan order."""
    table = Table(title="Maildir")
    table.add_column("#", justify="right", style="dim")
    table.add_column("File")
    table.add_column("Sender")

    for idx, entry in enumerate(scan_result.entries, start=1):
        table.add_row(str(idx), entry.path.name, entry.sender)

    console.print(table)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
