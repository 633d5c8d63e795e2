"""parsers/ — Document parser package."""

from pathlib import Path

from parsers.base import ParseResult

SUPPORTED_EXTENSIONS = {".html", ".htm", ".xhtml"}


def parse_file(file_path: Path) -> ParseResult:
    """Dispatch to the appropriate parser based on file extension."""
    file_path = Path(file_path)
    suffix = file_path.suffix.lower()

    if suffix in SUPPORTED_EXTENSIONS:
        from parsers.html_parser import parse_html
        return parse_html(file_path)
    else:
        raise ValueError(
            f"Unsupported file format: '{suffix}'. "
            f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )
