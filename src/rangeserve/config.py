from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4545


@dataclass(slots=True, frozen=True)
class ServerConfig:
    root: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    show_hidden: bool = False      # list and serve dot files
    etags: bool = True             # derive an Etag from mtime and size
    lenient_ranges: bool = True    # overlong range sets get the full body instead of 416
