import os
import json
from typing import List, Any, Dict, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Unknown values are ignored and the current mode stays

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def build_books_table(books: List[Any], title: str = "📚 Books") -> Table:
    """Rich table with 1-based row numbers, as shown on the screen."""
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("#", style="magenta", no_wrap=True, justify="right")
    table.add_column("Title", style="white")
    table.add_column("Author", style="dim")
    for row, b in enumerate(books, 1):
        table.add_row(str(row), escape(b.title), escape(b.author))
    return table

def empty_list_message(query: Optional[str] = None) -> str:
    if query and query.strip():
        return f"No books match '{query}'."
    return "No books in library."

def print_list_result(books: List[Any], query: Optional[str] = None) -> None:
    """Print the book list in the current output mode.
    - plain: '<row>. Title by Author' lines, or an empty-state message
    - json: JSON array of book records
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        # Same message in every mode so the empty state stays predictable
        print(empty_list_message(query))
        return

    if mode == "json":
        payload = [b.to_dict() for b in books]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        _console.print(build_books_table(books))
    else:
        for row, b in enumerate(books, 1):
            print(f"{row}. {b.title} by {b.author}")

def print_detail_result(detail: Any) -> None:
    """Print one book's read-only details in the current output mode."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(detail.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        _console.print(Panel.fit(
            f"[bold]{escape(detail.title)}[/]\n[dim]{escape(detail.byline)}[/]",
            title="Details",
            border_style="green",
        ))
    else:
        print(f"Title: {detail.title}")
        print(detail.byline)

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode.
    - plain: one 'Label: value' line per metric
    - json: JSON object
    - rich: Panel with the main metrics
    """
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    shown = stats.get("shown_books", total)
    authors = stats.get("unique_authors", 0)

    if mode == "json":
        print(json.dumps({"total_books": total, "shown_books": shown, "unique_authors": authors}, ensure_ascii=False))
    elif mode == "rich":
        content = f"[bold]Total Books:[/] {total}\n[bold]Shown Books:[/] {shown}\n[bold]Unique Authors:[/] {authors}"
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Shown Books: {shown}")
        print(f"Unique Authors: {authors}")
