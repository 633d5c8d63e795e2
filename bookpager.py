#!/usr/bin/env python3
"""
bookpager — Read an HTML book in the terminal, one page at a time.

Chapters are taken from <h3><a name="..."></a>Title</h3> headers, the text
is reflowed to the terminal size and your page is remembered between runs.

Quick start:
  1. python bookpager.py --book quijote.html --remember list
  2. python bookpager.py                # interactive reader
  3. python bookpager.py read -n 3      # print the next three pages
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from config import Config, load_config, save_book_path
from errors import BookpagerError, InvalidChapterReference
from models import ReadingPosition
from state import JsonStateStore

PAGE_SEPARATOR = "\n---\n"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Read an HTML book in the terminal with a remembered position",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive reader (default):
  python bookpager.py --book quijote.html

  # Remember the book in .env so --book can be omitted later:
  python bookpager.py --book quijote.html --remember list

  # Print the next two pages and advance:
  python bookpager.py read -n 2

  # Jump to chapter 12:
  python bookpager.py goto 12
        """,
    )
    parser.add_argument(
        "--book", type=Path, default=None, metavar="FILE",
        help="HTML book to read (default: $BOOKPAGER_BOOK or book.html)",
    )
    parser.add_argument(
        "--state", type=Path, default=None, metavar="FILE",
        help="Position file (default: $BOOKPAGER_STATE or .bookpager_state.json)",
    )
    parser.add_argument(
        "--remember", action="store_true", default=False,
        help="Save --book to .env for future runs",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=False,
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("ui", help="Interactive reader (default)")
    sub.add_parser("list", help="List chapters")
    read = sub.add_parser("read", help="Print pages from the saved position and advance")
    read.add_argument("-n", type=int, default=1, dest="pages", metavar="N",
                      help="Number of pages to print (default: 1)")
    sub.add_parser("status", help="Show the current chapter and page")
    goto = sub.add_parser("goto", help="Move to the first page of a chapter")
    goto.add_argument("chapter", type=int, help="Chapter number (1-based)")
    sub.add_parser("reset", help="Go back to the first page")

    args = parser.parse_args(argv)
    if args.remember and args.book is None:
        parser.error("--remember requires --book")
    return args


def fail(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def open_session(cfg: Config):
    """Parse the book and restore the saved position. Exits on failure."""
    from parsers import parse_file
    from position import ReadingSession

    try:
        result = parse_file(cfg.book_path)
    except FileNotFoundError:
        fail(f"Book not found: {cfg.book_path}")
    except OSError as e:
        fail(f"Cannot read book {cfg.book_path}: {e}")
    except (BookpagerError, ValueError) as e:
        fail(str(e))

    store = JsonStateStore(cfg.state_path)
    session = ReadingSession(
        result.chapters,
        load_position=store.load,
        save_position=store.save,
        line_width=cfg.line_width,
        lines_per_page=cfg.lines_per_page,
    )
    return session, result.metadata


def chapter_heading(session) -> str:
    idx = session.chapter_index
    return f"Chapter {idx + 1}/{len(session.chapters)}: {session.chapters[idx].title}"


def cmd_list(cfg: Config) -> None:
    session, _ = open_session(cfg)
    for i, ch in enumerate(session.chapters, start=1):
        print(f"{i:3d}. {ch.title}")


def cmd_status(cfg: Config) -> None:
    session, _ = open_session(cfg)
    if session.page_count == 0:
        print("No pages found.")
        return
    print(chapter_heading(session))
    print(f"Page {session.page + 1}/{session.page_count}")


def cmd_read(cfg: Config, pages: int) -> None:
    if pages < 1:
        fail("pages must be at least 1")
    session, _ = open_session(cfg)
    if session.page_count == 0:
        print("No pages found.")
        return

    for printed in range(pages):
        if printed > 0:
            print(PAGE_SEPARATOR, end="")
        print(chapter_heading(session))
        print(f"Page {session.page + 1}/{session.page_count}\n")
        print(session.current_page)
        if not session.next_page():
            print("\nEnd of book. Use 'bookpager.py reset' to start over.")
            break


def cmd_goto(cfg: Config, number: int) -> None:
    session, _ = open_session(cfg)
    try:
        if not session.goto_chapter(number):
            session.save()
    except InvalidChapterReference as e:
        fail(str(e))
    print(f"Chapter set to {number}: {session.chapters[number - 1].title}")


def cmd_reset(cfg: Config) -> None:
    JsonStateStore(cfg.state_path).save(ReadingPosition(page=0, chapter=0))
    print("Progress reset to the beginning.")


def cmd_ui(cfg: Config) -> None:
    from ui import run_reader

    session, metadata = open_session(cfg)
    run_reader(session, metadata)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    cfg = load_config()
    if args.book:
        cfg.book_path = args.book
        if args.remember:
            save_book_path(args.book)
    if args.state:
        cfg.state_path = args.state

    command = args.command or "ui"
    try:
        if command == "list":
            cmd_list(cfg)
        elif command == "read":
            cmd_read(cfg, args.pages)
        elif command == "status":
            cmd_status(cfg)
        elif command == "goto":
            cmd_goto(cfg, args.chapter)
        elif command == "reset":
            cmd_reset(cfg)
        else:
            cmd_ui(cfg)
    except BookpagerError as e:
        fail(str(e))


if __name__ == "__main__":
    main()
