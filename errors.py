"""errors.py — Exception types raised by bookpager."""


class BookpagerError(Exception):
    """Base class for all bookpager errors."""


class NoChaptersFound(BookpagerError, ValueError):
    """The document contains no recognizable chapter headers."""


class InvalidChapterReference(BookpagerError, IndexError):
    """A chapter number outside 1..chapter_count was requested."""

    def __init__(self, number: int, chapter_count: int):
        self.number = number
        self.chapter_count = chapter_count
        super().__init__(
            f"Chapter number out of range: {number} (valid: 1-{chapter_count})"
        )


class PersistenceFailure(BookpagerError, OSError):
    """Reading or writing the position record failed."""
