"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Chapter


SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head>
<title>The Project Gutenberg eBook of Sample Book</title>
<meta name="dc.title" content="Sample Book">
<meta name="dc.creator" content="A. Writer">
</head>
<body>
<h1>Sample Book</h1>
<p>Front matter that belongs to no chapter.</p>
<h3><a name="ch1"></a>Chapter <i>One</i></h3>
<p>It was a   bright cold day
in April.</p>
<p>The clocks were striking thirteen.</p>
<h3><a name="ch2"></a>Chapter Two &amp; More</h3>
<p>First line<br/>second line</p>
<hr>
<p>After the rule.</p>
<h3><a name="ch3"></a>Chapter Three</h3>
<p>The end.</p>
</body>
</html>
"""


@pytest.fixture
def sample_html():
    """Provide a small multi-chapter HTML document."""
    return SAMPLE_HTML


@pytest.fixture
def sample_book_path(tmp_path):
    """Write the sample document to a temporary .html file."""
    path = tmp_path / "sample.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def state_path(tmp_path):
    """Location for a temporary position file."""
    return tmp_path / "state.json"


def _build_chapters(*word_counts):
    return [
        Chapter(
            title=f"Chapter {i}",
            anchor=f"ch{i}",
            text=" ".join(f"word{n}" for n in range(count)),
        )
        for i, count in enumerate(word_counts, start=1)
    ]


@pytest.fixture
def make_chapters():
    """Factory building chapters whose bodies contain the given number of words."""
    return _build_chapters


@pytest.fixture
def long_chapters():
    """Three chapters long enough to span several pages each."""
    return _build_chapters(1200, 800, 1500)
