"""Tests for directory listing rendering."""

from datetime import datetime, timedelta, timezone

import pytest

from rangeserve import __version__
from rangeserve.core.model import ResourceDescriptor
from rangeserve.core.util import LISTING_DATE_FORMAT, format_size
from rangeserve.listing import FILE_CATEGORIES, category_for, render_listing

WHEN = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def entry(name, size=0, is_directory=False):
    return ResourceDescriptor(name=name, mod_time=WHEN, size=size, is_directory=is_directory)


class TestCategoryFor:
    """Test the extension to icon category mapping."""

    @pytest.mark.parametrize("name,expected", [
        ("photo.JPG", "image"),
        ("song.mp3", "audio"),
        ("clip.mkv", "video"),
        ("paper.pdf", "document"),
        ("index.htm", "web"),
        ("main.go", "develop"),
        ("archive.tar.gz", "file"),
        ("Makefile", "file"),
    ])
    def test_categories(self, name, expected):
        """Known extensions map to their category, anything else is a file."""
        assert category_for(name) == expected

    def test_table_is_read_only(self):
        """The category table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            FILE_CATEGORIES[".xyz"] = "image"


class TestFormatSize:
    """Test human readable sizes."""

    @pytest.mark.parametrize("size,expected", [
        (0, "0.00 B"),
        (1023, "1023.00 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (5 * 1024 ** 3, "5.00 GB"),
        (1024 ** 5, "1024.00 TB"),
    ])
    def test_format_size(self, size, expected):
        assert format_size(size) == expected


class TestRenderListing:
    """Test the HTML listing page."""

    def test_directories_first_then_files(self):
        """Folders are listed before files, each sorted by name."""
        page = render_listing("root", [entry("b.txt", 10), entry("zdir", is_directory=True),
                                       entry("a.txt", 2048), entry("adir", is_directory=True)])
        positions = [page.index(name) for name in (">adir<", ">zdir<", ">a.txt<", ">b.txt<")]
        assert positions == sorted(positions)

    def test_item_fields(self):
        """Rows carry icon class, link, target, size and date."""
        page = render_listing("root", [entry("song.mp3", 1536), entry("docs", is_directory=True)])
        assert '<div class="audio icon">' in page
        assert '<a href="song.mp3" target="_blank">song.mp3</a>' in page
        assert "1.50 KB" in page
        assert '<div class="directory icon">' in page
        assert '<a href="docs/" target="_self">docs</a>' in page
        assert WHEN.astimezone().strftime("%Y-%m-%d %H:%M:%S") in page

    def test_dates_in_server_local_time(self):
        """Modification times are shown in the server's local zone."""
        when = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=5)))
        page = render_listing("root", [ResourceDescriptor(name="a.txt", mod_time=when, size=1)])
        assert when.astimezone().strftime(LISTING_DATE_FORMAT) in page

    def test_escaping(self):
        """Names are HTML-escaped and hrefs percent-encoded."""
        page = render_listing("<root>", [entry("<b> & c.txt")])
        assert "<title>&lt;root&gt;</title>" in page
        assert "&lt;b&gt; &amp; c.txt" in page
        assert 'href="%3Cb%3E%20%26%20c.txt"' in page

    def test_injected_categorizer(self):
        """The icon lookup is a dependency of the renderer."""
        page = render_listing("root", [entry("x.txt")], categorize=lambda name: "custom")
        assert '<div class="custom icon">' in page

    def test_footer_version(self):
        """The footer names the server version."""
        assert f"rangeserve v{__version__}" in render_listing("root", [])
