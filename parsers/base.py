"""parsers/base.py — Shared parser utilities and types."""

import html
import re
from dataclasses import dataclass

from models import BookMetadata, Chapter

PARAGRAPH_BREAK = "\n\n"

# (tag, replacement) applied in order before tags are stripped.
_BREAK_TAGS = [
    ("br", "\n"),
    ("/p", PARAGRAPH_BREAK),
    ("p", ""),
    ("hr", "\n"),
]

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


@dataclass
class ParseResult:
    """Standard return type for all parsers."""
    chapters: list[Chapter]
    metadata: BookMetadata


def _tag_pattern(tag: str) -> re.Pattern:
    return re.compile(r"<\s*" + re.escape(tag) + r"\b[^>]*>", re.IGNORECASE)


_BREAK_PATTERNS = [(_tag_pattern(tag), repl) for tag, repl in _BREAK_TAGS]


def strip_tags(text: str) -> str:
    """Drop everything between '<' and '>'. No nesting is tracked."""
    out = []
    in_tag = False
    for ch in text:
        if ch == "<":
            in_tag = True
        elif ch == ">":
            in_tag = False
        elif not in_tag:
            out.append(ch)
    return "".join(out)


def normalize_whitespace(text: str) -> str:
    """Collapse spaces within lines and blank-line runs to one paragraph break."""
    lines = [" ".join(line.split()) for line in text.split("\n")]
    text = "\n".join(lines)
    text = _EXCESS_BLANK_LINES.sub(PARAGRAPH_BREAK, text)
    return text.strip()


def clean_html(fragment: str) -> str:
    """
    Convert an HTML fragment into plain text.
    <br> and <hr> become line breaks, </p> becomes a paragraph break,
    every other tag is dropped and entities are decoded.
    """
    text = fragment.replace("\r\n", "\n").replace("\r", "\n")
    for pattern, replacement in _BREAK_PATTERNS:
        text = pattern.sub(replacement, text)
    text = strip_tags(text)
    text = html.unescape(text)
    return normalize_whitespace(text)


def clean_inline(fragment: str) -> str:
    """Clean a single-line fragment such as a chapter title."""
    return html.unescape(strip_tags(fragment)).strip()
