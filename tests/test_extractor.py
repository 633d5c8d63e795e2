"""
Unit tests for parsers.html_parser chapter extraction.
"""
import pytest

from errors import NoChaptersFound
from parsers import parse_file
from parsers.html_parser import extract_chapters, extract_metadata, parse_html


class TestExtractChapters:
    """Tests for extract_chapters function."""

    def test_two_markers(self):
        """Test bodies run from one header to the next."""
        doc = ('<h3><a name="c1"></a>One</h3>Hello   world.'
               '<h3><a name="c2"></a>Two</h3>Bye.')

        chapters = extract_chapters(doc)

        assert [(c.title, c.anchor, c.text) for c in chapters] == [
            ("One", "c1", "Hello world."),
            ("Two", "c2", "Bye."),
        ]

    def test_start_pages_unset(self):
        """Test freshly extracted chapters have no page offset yet."""
        doc = '<h3><a name="c1"></a>One</h3>Hello.'

        assert extract_chapters(doc)[0].start_page == 0

    def test_no_markers_raises(self):
        """Test a document without headers is rejected."""
        with pytest.raises(NoChaptersFound):
            extract_chapters("<html><body><p>No chapters</p></body></html>")

    def test_no_chapters_is_value_error(self):
        """Test NoChaptersFound can be caught as ValueError."""
        with pytest.raises(ValueError):
            extract_chapters("")

    def test_tag_names_case_sensitive(self):
        """Test upper-case headers are not chapter markers."""
        with pytest.raises(NoChaptersFound):
            extract_chapters('<H3><A name="x"></A>Title</H3>text')

    def test_title_may_span_lines(self):
        """Test titles broken across source lines are matched."""
        doc = '<h3><a name="a"></a>Part\nOne</h3>Body'

        chapters = extract_chapters(doc)

        assert chapters[0].title == "Part\nOne"
        assert chapters[0].text == "Body"

    def test_empty_body(self):
        """Test back-to-back headers give an empty body."""
        doc = '<h3><a name="a"></a>A</h3><h3><a name="b"></a>B</h3>text'

        chapters = extract_chapters(doc)

        assert chapters[0].text == ""
        assert chapters[1].text == "text"

    def test_sample_document(self, sample_html):
        """Test a full document with front matter and mixed markup."""
        chapters = extract_chapters(sample_html)

        assert [c.anchor for c in chapters] == ["ch1", "ch2", "ch3"]
        assert [c.title for c in chapters] == [
            "Chapter One", "Chapter Two & More", "Chapter Three",
        ]
        assert chapters[0].text == (
            "It was a bright cold day\nin April.\n\n"
            "The clocks were striking thirteen."
        )
        assert chapters[1].text == "First line\nsecond line\n\nAfter the rule."
        assert chapters[2].text == "The end."

    def test_front_matter_excluded(self, sample_html):
        """Test text before the first header belongs to no chapter."""
        chapters = extract_chapters(sample_html)

        assert all("Front matter" not in c.text for c in chapters)


class TestExtractMetadata:
    """Tests for extract_metadata function."""

    def test_dublin_core_meta(self, sample_html):
        """Test dc.title and dc.creator are preferred."""
        meta = extract_metadata(sample_html)

        assert meta.title == "Sample Book"
        assert meta.author == "A. Writer"
        assert meta.source_format == "html"

    def test_title_element_fallback(self):
        """Test <title> is used when no title meta exists."""
        doc = "<html><head><title>  My\n  Title </title></head><body></body></html>"

        meta = extract_metadata(doc)

        assert meta.title == "My Title"
        assert meta.author == "Unknown"

    def test_no_head(self):
        """Test documents without a head use the fallback title."""
        meta = extract_metadata('<h3><a name="a"></a>A</h3>', fallback_title="Quijote")

        assert meta.title == "Quijote"
        assert meta.author == "Unknown"


class TestParseFile:
    """Tests for parse_html and parse_file dispatch."""

    def test_parse_html(self, sample_book_path):
        """Test parsing a file from disk."""
        result = parse_html(sample_book_path)

        assert len(result.chapters) == 3
        assert result.metadata.title == "Sample Book"

    def test_dispatch_by_extension(self, sample_book_path):
        """Test .html files go to the HTML parser."""
        result = parse_file(sample_book_path)

        assert result.chapters[0].anchor == "ch1"

    def test_fallback_title_from_filename(self, tmp_path):
        """Test the file stem names books without metadata."""
        path = tmp_path / "don_quijote.html"
        path.write_text('<h3><a name="a"></a>A</h3>text', encoding="utf-8")

        assert parse_file(path).metadata.title == "Don Quijote"

    def test_unsupported_extension(self, tmp_path):
        """Test unknown formats are rejected."""
        with pytest.raises(ValueError, match="Unsupported file format"):
            parse_file(tmp_path / "book.txt")

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "missing.html")
