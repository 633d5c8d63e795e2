"""pagination.py — Word-wrap chapter text and slice it into fixed-size pages."""

import dataclasses
import logging

from models import Chapter
from parsers.base import PARAGRAPH_BREAK

logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH = 80
DEFAULT_PAGE_LINES = 25

MIN_LINE_WIDTH = 20
MIN_PAGE_LINES = 5

# Screen rows/columns taken by the reader's header, footer and border.
CHROME_COLUMNS = 4
CHROME_ROWS = 8
MIN_LAYOUT_WIDTH = 40
MIN_LAYOUT_LINES = 10


def wrap_paragraph(text: str, width: int) -> str:
    """
    Greedy word wrap. A word longer than width is never split; it gets a
    line of its own.
    """
    lines = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        else:
            current += " " + word
    if current:
        lines.append(current)
    return "\n".join(lines)


def wrap_text(text: str, width: int) -> str:
    """Wrap each paragraph separately, keeping paragraph breaks."""
    paragraphs = [p.strip() for p in text.split(PARAGRAPH_BREAK)]
    return PARAGRAPH_BREAK.join(wrap_paragraph(p, width) for p in paragraphs if p)


def paginate(text: str, lines_per_page: int, line_width: int) -> list[str]:
    """Wrap text and group the lines into pages of at most lines_per_page."""
    if not text.strip():
        return []

    lines = wrap_text(text, line_width).split("\n")
    return [
        "\n".join(lines[i:i + lines_per_page]).strip()
        for i in range(0, len(lines), lines_per_page)
    ]


def chapter_source(chapter: Chapter) -> str:
    """Text that gets paginated for a chapter: its title, a blank line, the body."""
    return f"{chapter.title}{PARAGRAPH_BREAK}{chapter.text}".strip()


def paginate_book(
    chapters: list[Chapter],
    line_width: int = DEFAULT_LINE_WIDTH,
    lines_per_page: int = DEFAULT_PAGE_LINES,
) -> tuple[list[str], list[Chapter]]:
    """
    Paginate every chapter and flatten the result into one page list.
    Returns (pages, chapters) where chapters are fresh copies with
    start_page set; the input chapters are left untouched.
    """
    line_width = max(line_width, MIN_LINE_WIDTH)
    lines_per_page = max(lines_per_page, MIN_PAGE_LINES)

    pages: list[str] = []
    stamped = []
    for chapter in chapters:
        stamped.append(dataclasses.replace(chapter, start_page=len(pages)))
        pages.extend(paginate(chapter_source(chapter), lines_per_page, line_width))

    logger.debug(
        "Paginated %d chapters into %d pages at %dx%d",
        len(chapters), len(pages), line_width, lines_per_page,
    )
    return pages, stamped


def compute_page_layout(width: int, height: int) -> tuple[int, int]:
    """Derive (line_width, lines_per_page) from a terminal size."""
    line_width = DEFAULT_LINE_WIDTH
    if width > 0:
        line_width = max(width - CHROME_COLUMNS, MIN_LAYOUT_WIDTH)

    lines_per_page = DEFAULT_PAGE_LINES
    if height > 0:
        lines_per_page = max(height - CHROME_ROWS, MIN_LAYOUT_LINES)

    return line_width, lines_per_page
