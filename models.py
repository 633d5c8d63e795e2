"""models.py — Shared data types for bookpager."""

from dataclasses import dataclass, field


@dataclass
class Chapter:
    title: str           # Cleaned display title, e.g. "Capítulo primero"
    anchor: str          # Opaque id from the source markup, e.g. "2HCH0001"
    text: str            # Cleaned body text, paragraphs separated by "\n\n"
    start_page: int = 0  # First page of this chapter in Book.pages


@dataclass
class Book:
    chapters: list[Chapter]
    pages: list[str] = field(default_factory=list)


@dataclass
class ReadingPosition:
    page: int = 0
    chapter: int | None = None      # Legacy field, page is authoritative


@dataclass
class BookMetadata:
    title: str
    author: str
    source_format: str = ""         # "html"
