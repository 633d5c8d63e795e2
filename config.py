"""config.py — Settings from the environment and .env, and persisting them."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv, set_key

from pagination import DEFAULT_LINE_WIDTH, DEFAULT_PAGE_LINES
from state import DEFAULT_STATE_FILE

logger = logging.getLogger(__name__)

ENV_FILE = Path(".env")

DEFAULT_BOOK_FILE = Path("book.html")


@dataclass
class Config:
    book_path: Path = DEFAULT_BOOK_FILE
    state_path: Path = DEFAULT_STATE_FILE
    line_width: int = DEFAULT_LINE_WIDTH
    lines_per_page: int = DEFAULT_PAGE_LINES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %d", name, raw, default)
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name, "").strip()
    return Path(raw).expanduser() if raw else default


def load_config() -> Config:
    """Load Config from .env and the process environment."""
    load_dotenv(ENV_FILE)
    return Config(
        book_path=_env_path("BOOKPAGER_BOOK", DEFAULT_BOOK_FILE),
        state_path=_env_path("BOOKPAGER_STATE", DEFAULT_STATE_FILE),
        line_width=_env_int("BOOKPAGER_LINE_WIDTH", DEFAULT_LINE_WIDTH),
        lines_per_page=_env_int("BOOKPAGER_PAGE_LINES", DEFAULT_PAGE_LINES),
    )


def save_book_path(book_path: Path, env_file: Path = ENV_FILE) -> None:
    """Persist the book path to .env for future runs."""
    env_file.touch(exist_ok=True)
    set_key(str(env_file), "BOOKPAGER_BOOK", str(book_path))
    print(f"  Saved BOOKPAGER_BOOK={book_path} to {env_file}")
