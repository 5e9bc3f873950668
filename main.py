import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.markup import escape
from rich.text import Text
from rich import box

from config import settings
from mylibrary.library import Library
from mylibrary.screen import LibraryScreen
from utils.ui_helpers import (
    set_output_mode,
    print_list_result,
    print_detail_result,
    print_stats_result,
    build_books_table,
    empty_list_message,
)
from utils.validators import RowSelection

def _log_level() -> int:
    # getLevelName() gives back a string for names that are not levels
    level = logging.getLevelName(settings.effective_log_level)
    return level if isinstance(level, int) else logging.WARNING

logging.basicConfig(level=_log_level())
logger = logging.getLogger(__name__)

console = Console()


def new_session() -> LibraryScreen:
    """Start a screen session with its own, freshly seeded Library."""
    library = Library.with_sample_data() if settings.seed_sample_data else Library()
    logger.debug(f"Session started with {len(library)} book(s)")
    return LibraryScreen(library)

# --- Typer CLI application ---
app = typer.Typer(help=f"{settings.app_name} CLI")

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    if output:
        set_output_mode(output)

@app.command("list")
def cli_list(query: Optional[str] = typer.Option(None, "--query", "-q", help="Filter by title or author")):
    """List the books of a new session, optionally filtered."""
    screen = new_session()
    books = screen.search(query)
    print_list_result(books, query)

@app.command("show")
def cli_show(
    row: int = typer.Argument(..., help="Row number as listed (1-based)"),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Filter applied before picking the row"),
):
    """Show the read-only details of one listed book."""
    screen = new_session()
    screen.search(query)
    detail = screen.open_detail(row - 1)
    if detail is None:
        print(f"No book at row {row}.")
        return
    print_detail_result(detail)

@app.command("stats")
def cli_stats(query: Optional[str] = typer.Option(None, "--query", "-q", help="Filter used for the shown count")):
    """Show library statistics."""
    screen = new_session()
    screen.search(query)
    print_stats_result(screen.statistics())

@app.command("screen")
def cli_screen():
    """Open the interactive library screen."""
    run_menu(new_session())

# --- Interactive screen ---
def render_screen(screen: LibraryScreen) -> None:
    books = screen.filtered_books
    if books:
        body = build_books_table(books, title=f"{len(books)} of {len(screen.library)} books")
    else:
        body = Text(empty_list_message(screen.search_text), style="yellow")

    subtitle = None
    if screen.search_text.strip():
        subtitle = f"🔎 {escape(screen.search_text)}"

    console.print(Panel(body, title=escape(settings.app_name), subtitle=subtitle, border_style="cyan", box=box.HEAVY))

def search_books(screen: LibraryScreen) -> None:
    """Set or clear the search text."""
    query = Prompt.ask("🔍 Search title or author (empty clears)", default="", show_default=False)
    books = screen.search(query)
    if query:
        console.print(f"[dim]📊 {len(books)} result(s) for '{escape(query)}'[/]")

def _ask_field(label: str, current: str) -> str:
    # An empty answer always means an empty field; the old value is only a hint
    hint = f" [dim](was: {escape(current)})[/]" if current else ""
    return Prompt.ask(f"{label}{hint}", default="", show_default=False)

def add_book(screen: LibraryScreen) -> None:
    """Fill in the Add Book form; Save is only offered once a title is set."""
    form = screen.present_add_form()
    while True:
        form.title = _ask_field("Title", form.title)
        form.author = _ask_field("Author", form.author)
        form.summary = _ask_field("Summary", form.summary)

        if form.can_save:
            choice = Prompt.ask("Save or cancel?", choices=["save", "cancel"], default="save")
        else:
            console.print("[yellow]⚠️ A title is required; Save is disabled.[/]")
            choice = Prompt.ask("Edit again or cancel?", choices=["edit", "cancel"], default="edit")

        if choice == "save":
            book = form.save()
            console.print(Panel.fit(
                f"[green]Added:[/] [bold]{escape(book.title)}[/] - {escape(book.author)}",
                title="✅ Saved",
                border_style="green",
            ))
            return
        if choice == "cancel":
            form.cancel()
            console.print("[blue]🚫 Add cancelled.[/]")
            return

def delete_books(screen: LibraryScreen) -> None:
    """Delete rows of the list as it is currently shown - with confirmation."""
    if not screen.filtered_books:
        console.print("[yellow]Nothing to delete.[/]")
        return

    raw = Prompt.ask("🗑️ Rows to delete (e.g. 1,3)")
    positions = RowSelection.parse(raw)
    targets = []
    for position in sorted(positions):
        book = screen.book_at(position)
        if book:
            targets.append(book)
    if not targets:
        console.print("[yellow]⚠️ No listed rows selected.[/]")
        return

    console.print(Panel(
        "\n".join(f"[bold]{escape(b.title)}[/] - {escape(b.author)}" for b in targets),
        title="📚 To Delete",
        border_style="yellow",
    ))
    if settings.confirm_deletions and not Confirm.ask("Delete these books?", default=False):
        console.print("[blue]🚫 Delete cancelled.[/]")
        return

    removed = screen.delete_rows(positions)
    console.print(f"[green]✅ Deleted {len(removed)} book(s).[/]")

def show_details(screen: LibraryScreen) -> None:
    """Open the read-only details of one row."""
    raw = Prompt.ask("🔎 Row to open")
    position = RowSelection.parse_one(raw)
    detail = screen.open_detail(position) if position is not None else None
    if detail is None:
        console.print(f"[yellow]⚠️ No book at row {escape(raw)}.[/]")
        return
    console.print(Panel.fit(
        f"[bold]{escape(detail.title)}[/]\n[dim]{escape(detail.byline)}[/]",
        title="Details",
        border_style="green",
    ))

def show_stats(screen: LibraryScreen) -> None:
    stats = screen.statistics()
    console.print(Panel.fit(
        f"[bold]Total Books:[/] {stats['total_books']}\n"
        f"[bold]Shown Books:[/] {stats['shown_books']}\n"
        f"[bold]Unique Authors:[/] {stats['unique_authors']}",
        title="📊 Statistics",
        border_style="blue",
    ))

def run_menu(screen: LibraryScreen) -> None:
    """Simple interactive menu for the library screen."""
    def render_menu() -> None:
        menu_items = [
            ("1", "Search", "🔍"),
            ("2", "Add book", "➕"),
            ("3", "Delete books", "🗑️"),
            ("4", "Book details", "📖"),
            ("5", "Statistics", "📊"),
            ("0", "Exit", "🚪"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
        console.print(table)

    actions = {
        "1": search_books,
        "2": add_book,
        "3": delete_books,
        "4": show_details,
        "5": show_stats,
    }

    while True:
        render_screen(screen)
        render_menu()
        try:
            choice = Prompt.ask("Choose an option", choices=["1", "2", "3", "4", "5", "0"], default="1")
            if choice == "0":
                console.print("[green]Goodbye![/]")
                break
            actions[choice](screen)
        except ValueError as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
        except (EOFError, KeyboardInterrupt):
            # Input closed; leave the screen like Exit would
            console.print("\n[green]Goodbye![/]")
            break
        console.print()

def main() -> None:
    if len(sys.argv) > 1:
        app()
    else:
        run_menu(new_session())

if __name__ == "__main__":
    main()
