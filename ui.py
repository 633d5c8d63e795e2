"""ui.py — Interactive terminal reader built on rich."""

from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from errors import InvalidChapterReference, PersistenceFailure
from models import BookMetadata
from position import ReadingSession

KEY_HELP = "Enter/n: next  p/b: previous  g/G: first/last  l: chapters  q: quit"


def render_page(console: Console, session: ReadingSession, metadata: BookMetadata,
                status: str = "") -> None:
    console.clear()
    console.print(Text(metadata.title, style="bold magenta"))
    if session.page_count == 0:
        console.print("No pages found.")
        return

    chapter = session.chapter
    console.print(Text(chapter.title if chapter else "", style="dim cyan"))
    console.print(
        Text(f"Page {session.page + 1}/{session.page_count}", style="dim white")
    )
    console.print(Panel(
        Text(session.current_page),
        width=session.line_width + 4,
        padding=(0, 1),
    ))
    console.print(Text(status or KEY_HELP, style="yellow" if status else "dim white"))


def choose_chapter(console: Console, session: ReadingSession) -> str:
    """Show the chapter table and jump to the selected one. Returns a status line."""
    table = Table(title="Chapters", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Page", justify="right", style="dim")
    for i, ch in enumerate(session.chapters, start=1):
        table.add_row(str(i), Text(ch.title), str(ch.start_page + 1))
    console.clear()
    console.print(table)

    number = IntPrompt.ask("Chapter (0 to cancel)", console=console, default=0)
    if number == 0:
        return ""
    try:
        session.goto_chapter(number)
    except InvalidChapterReference as e:
        return str(e)
    return ""


def run_reader(session: ReadingSession, metadata: BookMetadata,
               console: Console | None = None) -> None:
    """Main loop: fit pages to the terminal, render, act on one command."""
    console = console or Console()
    status = ""

    while True:
        try:
            width, height = console.size
            session.resize(width, height)
        except PersistenceFailure as e:
            status = f"Could not save position: {e}"

        render_page(console, session, metadata, status)
        status = ""

        command = Prompt.ask(">", console=console, default="", show_default=False).strip()
        try:
            if command in ("", "n"):
                session.next_page()
            elif command in ("p", "b"):
                session.prev_page()
            elif command == "g":
                session.first_page()
            elif command == "G":
                session.last_page()
            elif command == "l":
                status = choose_chapter(console, session)
            elif command in ("q", "quit"):
                return
            else:
                status = f"Unknown command: {command!r}"
        except PersistenceFailure as e:
            status = f"Could not save position: {e}"
