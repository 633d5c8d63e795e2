"""state.py — JSON file store for the reader's position."""

import json
from pathlib import Path

from errors import PersistenceFailure
from models import ReadingPosition

DEFAULT_STATE_FILE = Path(".bookpager_state.json")


def load_position(path: Path) -> ReadingPosition:
    """Read the saved position. A missing file means page 0."""
    path = Path(path)
    if not path.exists():
        return ReadingPosition()
    try:
        data = json.loads(path.read_text())
        chapter = data.get("chapter")
        return ReadingPosition(
            page=int(data.get("page", 0)),
            chapter=int(chapter) if chapter is not None else None,
        )
    except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
        raise PersistenceFailure(f"Cannot read position from {path}: {e}") from e


def save_position(position: ReadingPosition, path: Path) -> None:
    path = Path(path)
    data = {"page": position.page}
    if position.chapter is not None:
        data["chapter"] = position.chapter
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2))
    except OSError as e:
        raise PersistenceFailure(f"Cannot save position to {path}: {e}") from e


class JsonStateStore:
    """Binds a state file path to the (load, save) pair a session expects."""

    def __init__(self, path: Path = DEFAULT_STATE_FILE):
        self.path = Path(path)

    def load(self) -> ReadingPosition:
        return load_position(self.path)

    def save(self, position: ReadingPosition) -> None:
        save_position(position, self.path)
