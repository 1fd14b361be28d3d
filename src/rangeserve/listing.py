"""HTML directory listings."""

from __future__ import annotations

import html
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Callable, Iterable
from urllib.parse import quote

from . import __version__
from .core.model import ResourceDescriptor
from .core.util import LISTING_DATE_FORMAT, as_utc, format_size

FILE_CATEGORIES = MappingProxyType({
    ".jpg": "image", ".jpeg": "image", ".png": "image", ".bmp": "image", ".gif": "image",
    ".mp3": "audio", ".wav": "audio", ".wma": "audio",
    ".mp4": "video", ".mpg": "video", ".mpeg": "video", ".avi": "video", ".mkv": "video",
    ".pdf": "document", ".doc": "document", ".docx": "document", ".text": "document",
    ".ppt": "document", ".pptx": "document", ".xml": "document",
    ".html": "web", ".htm": "web", ".css": "web", ".js": "web",
    ".c": "develop", ".cpp": "develop", ".java": "develop", ".cs": "develop", ".go": "develop",
    ".sh": "develop", ".rb": "develop", ".php": "develop", ".py": "develop",
})


def category_for(name: str) -> str:
    """Icon category for a file name, by extension."""
    return FILE_CATEGORIES.get(PurePosixPath(name).suffix.lower(), "file")


_PAGE_BEGIN = """<html>
<head>
<title>{title}</title>
<style>
body {{margin: 0; padding-top: 10px; background-color: #edece4; font-family: Tahoma, Geneva, sans-serif; color: #4d4d4d}}
.contents {{margin: 0 auto;}}
a:link, a:visited, a:active {{color: #333333; text-decoration: none;}}
table {{margin: 0 auto; background-color: #fff; padding: 40px; border: solid 1px #d9d8d4;}}
tr:hover {{background-color: rgba(243, 243, 243, 0.85);}}
td {{padding: 3px 20px 3px 0;}}
th {{text-align: left; border-bottom: 1px solid #4d4d4d;}}
.footer {{background-color: #fff; border-top: solid 1px #d9d8d4; border-bottom: solid 1px #d9d8d4; padding: 15px 0; margin: 10px 0; text-align: center;}}
.icon {{width: 16px; height: 16px; border-radius: 3px; background-color: #b8b8b0;}}
.directory {{background-color: #e0a84a;}} .image {{background-color: #6aa0d8;}}
.audio {{background-color: #9a7ad0;}} .video {{background-color: #404040;}}
.document {{background-color: #8a8a8a;}} .web {{background-color: #4aa36a;}}
.develop {{background-color: #2c2c2c;}}
</style>
</head>
<body><div class="contents">
<a href="/">Home</a> | <a href="../">Back</a>
<table>
<thead><th></th><th>Name</th><th>Size</th><th>Last Modified</th></thead>
"""

_ITEM = """<tr>
<td class="icons"><div class="{icon} icon"></div></td>
<td><a href="{href}" target="{target}">{name}</a></td>
<td>{size}</td>
<td>{modified}</td>
</tr>
"""

_PAGE_END = """</table>
</div><div class="footer"><em>Powered by rangeserve v{version}</em></div>
</body>
</html>
"""

NOT_FOUND_PAGE = """<html>
<head><title>404 | Not Found</title></head>
<body><div class="contents"><h1>404</h1><h2>Not Found</h2></div></body>
</html>
"""


def _item(entry: ResourceDescriptor, categorize: Callable[[str], str]) -> str:
    # server local time
    modified = as_utc(entry.mod_time).astimezone().strftime(LISTING_DATE_FORMAT) if entry.mod_time else "-"
    if entry.is_directory:
        icon, href, size, target = "directory", quote(entry.name, safe="") + "/", "-", "_self"
    else:
        icon, href, size, target = categorize(entry.name), quote(entry.name, safe=""), format_size(entry.size), "_blank"
    return _ITEM.format(
        icon=icon,
        href=html.escape(href),
        target=target,
        name=html.escape(entry.name),
        size=size,
        modified=modified,
    )


def render_listing(
    title: str,
    entries: Iterable[ResourceDescriptor],
    categorize: Callable[[str], str] = category_for,
) -> str:
    """Render a listing page: directories first, then files, each by name."""
    ordered = sorted(entries, key=lambda e: (not e.is_directory, e.name))
    parts = [_PAGE_BEGIN.format(title=html.escape(title))]
    parts.extend(_item(entry, categorize) for entry in ordered)
    parts.append(_PAGE_END.format(version=__version__))
    return "".join(parts)
