"""parsers/html_parser.py — Parse a single-file HTML book into chapters."""

import logging
import re
from pathlib import Path

from bs4 import BeautifulSoup

from errors import NoChaptersFound
from models import BookMetadata, Chapter
from parsers.base import ParseResult, clean_html, clean_inline

logger = logging.getLogger(__name__)

# <h3><a name="ANCHOR"></a>TITLE</h3>, tag names are case-sensitive.
CHAPTER_HEADER = re.compile(r'<h3><a name="([^"]+)"></a>(.*?)</h3>', re.DOTALL)

_HEAD_END = re.compile(r"</head\s*>", re.IGNORECASE)

TITLE_META_NAMES = ("dc.title", "title")
AUTHOR_META_NAMES = ("dc.creator", "author")


def extract_chapters(document: str) -> list[Chapter]:
    """
    Split a document into chapters at each chapter header.
    The body of a chapter runs from the end of its header to the start of
    the next header, or to the end of the document.
    """
    matches = list(CHAPTER_HEADER.finditer(document))
    if not matches:
        raise NoChaptersFound("No chapters found in the HTML document")

    chapters = []
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(document)
        chapters.append(Chapter(
            title=clean_inline(m.group(2)),
            anchor=m.group(1),
            text=clean_html(document[m.end():end]),
        ))

    logger.debug("Extracted %d chapters", len(chapters))
    return chapters


def _meta_content(soup: BeautifulSoup, names: tuple[str, ...]) -> str:
    for tag in soup.find_all("meta"):
        name = (tag.get("name") or "").strip().lower()
        if name in names and tag.get("content"):
            return tag["content"].strip()
    return ""


def extract_metadata(document: str, fallback_title: str = "Untitled") -> BookMetadata:
    """Read title and author from the document <head>."""
    head_end = _HEAD_END.search(document)
    head = document[:head_end.end()] if head_end else ""
    soup = BeautifulSoup(head, features="lxml")

    title = _meta_content(soup, TITLE_META_NAMES)
    if not title and soup.title and soup.title.string:
        title = " ".join(soup.title.string.split())
    author = _meta_content(soup, AUTHOR_META_NAMES)

    return BookMetadata(
        title=title or fallback_title,
        author=author or "Unknown",
        source_format="html",
    )


def parse_html(file_path: Path) -> ParseResult:
    """Main entry point. Returns ParseResult with chapters and metadata."""
    file_path = Path(file_path)
    document = file_path.read_text(encoding="utf-8", errors="replace")

    chapters = extract_chapters(document)
    fallback_title = file_path.stem.replace("_", " ").replace("-", " ").title()
    metadata = extract_metadata(document, fallback_title)

    return ParseResult(chapters=chapters, metadata=metadata)
