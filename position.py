"""position.py — Track the reader's page across navigation and re-pagination."""

import logging
from typing import Callable

from errors import InvalidChapterReference, PersistenceFailure
from models import Book, Chapter, ReadingPosition
from pagination import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_PAGE_LINES,
    compute_page_layout,
    paginate_book,
)

logger = logging.getLogger(__name__)


def chapter_for_page(chapters: list[Chapter], page: int) -> int:
    """Index of the last chapter starting at or before page (0 if none)."""
    idx = 0
    for i, chapter in enumerate(chapters):
        if chapter.start_page > page:
            break
        idx = i
    return idx


def remap_page(old_page: int, old_total: int, new_total: int) -> int:
    """Move a page to the same fraction of the book under a new page count."""
    if old_total <= 0 or new_total <= 0:
        return 0
    # Integer floor keeps remap_page(p, n, n) == p exact.
    new_page = old_page * new_total // old_total
    return min(max(new_page, 0), new_total - 1)


def clamp_page(page: int, page_count: int) -> int:
    if page_count <= 0:
        return 0
    return min(max(page, 0), page_count - 1)


class ReadingSession:
    """
    A book paginated for one geometry plus the reader's position in it.

    Persistence is injected as a (load, save) pair so the session never
    touches storage itself. Navigation methods return True when the
    position changed and was saved, False when they were a no-op.
    """

    def __init__(
        self,
        chapters: list[Chapter],
        load_position: Callable[[], ReadingPosition] | None = None,
        save_position: Callable[[ReadingPosition], None] | None = None,
        line_width: int = DEFAULT_LINE_WIDTH,
        lines_per_page: int = DEFAULT_PAGE_LINES,
    ):
        self._chapters = list(chapters)
        self._save_position = save_position
        self.line_width = line_width
        self.lines_per_page = lines_per_page
        self.book = self._paginate()
        self.position = self._restore(load_position)

    def _paginate(self) -> Book:
        pages, chapters = paginate_book(self._chapters, self.line_width, self.lines_per_page)
        return Book(chapters=chapters, pages=pages)

    def _restore(self, load_position) -> ReadingPosition:
        position = ReadingPosition()
        if load_position is not None:
            try:
                position = load_position()
            except PersistenceFailure as e:
                logger.warning("Could not read saved position, starting over: %s", e)
        return ReadingPosition(page=clamp_page(position.page, self.page_count))

    # --- queries ---

    @property
    def page(self) -> int:
        return self.position.page

    @property
    def page_count(self) -> int:
        return len(self.book.pages)

    @property
    def chapters(self) -> list[Chapter]:
        return self.book.chapters

    @property
    def chapter_index(self) -> int:
        return chapter_for_page(self.book.chapters, self.position.page)

    @property
    def chapter(self) -> Chapter | None:
        if not self.book.chapters:
            return None
        return self.book.chapters[self.chapter_index]

    @property
    def current_page(self) -> str:
        if not self.book.pages:
            return ""
        return self.book.pages[self.position.page]

    # --- navigation ---

    def _move_to(self, page: int) -> bool:
        page = clamp_page(page, self.page_count)
        if page == self.position.page:
            return False
        self.position = ReadingPosition(page=page)
        self.save()
        return True

    def save(self) -> None:
        """Persist the current position. PersistenceFailure propagates."""
        self.position.chapter = self.chapter_index
        if self._save_position is not None:
            self._save_position(self.position)

    def next_page(self) -> bool:
        return self._move_to(self.position.page + 1)

    def prev_page(self) -> bool:
        return self._move_to(self.position.page - 1)

    def first_page(self) -> bool:
        return self._move_to(0)

    def last_page(self) -> bool:
        return self._move_to(self.page_count - 1)

    def goto_chapter(self, number: int) -> bool:
        """Jump to the first page of chapter `number` (1-based)."""
        if number < 1 or number > len(self.book.chapters):
            raise InvalidChapterReference(number, len(self.book.chapters))
        return self._move_to(self.book.chapters[number - 1].start_page)

    # --- geometry ---

    def set_geometry(self, line_width: int, lines_per_page: int) -> bool:
        """Re-paginate for a new geometry, keeping the proportional position."""
        if (line_width, lines_per_page) == (self.line_width, self.lines_per_page):
            return False

        old_page, old_total = self.position.page, self.page_count
        self.line_width = line_width
        self.lines_per_page = lines_per_page
        self.book = self._paginate()

        if old_total > 0 and self.page_count > 0:
            new_page = remap_page(old_page, old_total, self.page_count)
        else:
            new_page = clamp_page(old_page, self.page_count)
        logger.debug(
            "Geometry %dx%d: page %d/%d -> %d/%d",
            line_width, lines_per_page, old_page, old_total, new_page, self.page_count,
        )
        self.position = ReadingPosition(page=new_page)
        self.save()
        return True

    def resize(self, width: int, height: int) -> bool:
        """Apply a terminal size; re-paginates only if the page layout changes."""
        return self.set_geometry(*compute_page_layout(width, height))
