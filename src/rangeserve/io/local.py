"""Local file access below a served root directory."""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from werkzeug.security import safe_join

from ..core.model import ResourceDescriptor, ResourceNotFoundError

logger = logging.getLogger(__name__)


class LocalContentHandle:
    """Seekable handle on a local file with read accounting."""

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self.bytes_read = 0
        self.reads_made = 0
        self._should_close_file = False

        if hasattr(source, 'read'):
            # BinaryIO object, owned by the caller
            self._file = source
        else:
            # Path or str
            self._file = open(source, 'rb')
            self._should_close_file = True

    @property
    def closed(self) -> bool:
        return self._file is None

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        if self._file is None:
            raise OSError("seek on closed handle")
        return self._file.seek(offset, whence)

    def read(self, size: int = -1) -> bytes:
        if self._file is None:
            raise OSError("read from closed handle")
        self.reads_made += 1
        data = self._file.read(size)
        self.bytes_read += len(data)
        return data

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the file if we opened it."""
        if self._should_close_file and self._file is not None:
            self._file.close()
        self._file = None


def make_etag(st: os.stat_result) -> str:
    return f'"{st.st_mtime_ns:x}-{st.st_size:x}"'


class LocalFileSystem:
    """Resolve URL paths below `root` and describe or open what they name."""

    def __init__(self, root: Union[Path, str], *, show_hidden: bool = False, etags: bool = True):
        self.root = os.path.abspath(root)
        self.show_hidden = show_hidden
        self.etags = etags

    def _resolve(self, path: str) -> str:
        relative = path.strip("/")
        if not relative:
            return self.root
        full = safe_join(self.root, relative)
        if full is None:
            logger.debug("Rejected path outside root: %r", path)
            raise ResourceNotFoundError(path)
        if not self.show_hidden and any(p.startswith(".") for p in relative.split("/") if p):
            raise ResourceNotFoundError(path)
        return full

    def _describe(self, name: str, st: os.stat_result, is_directory: bool) -> ResourceDescriptor:
        etag = make_etag(st) if self.etags and not is_directory else None
        return ResourceDescriptor(
            name=name,
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            size=st.st_size,
            etag=etag,
            is_directory=is_directory,
        )

    def stat(self, path: str) -> ResourceDescriptor:
        full = self._resolve(path)
        try:
            st = os.stat(full)
        except OSError as e:
            raise ResourceNotFoundError(path) from e
        name = os.path.basename(full.rstrip(os.sep)) or "/"
        return self._describe(name, st, os.path.isdir(full))

    def open(self, path: str) -> LocalContentHandle:
        full = self._resolve(path)
        try:
            return LocalContentHandle(full)
        except OSError as e:
            raise ResourceNotFoundError(path) from e

    def list_directory(self, path: str) -> Iterator[ResourceDescriptor]:
        full = self._resolve(path)
        try:
            entries = list(os.scandir(full))
        except OSError as e:
            raise ResourceNotFoundError(path) from e
        for entry in entries:
            if not self.show_hidden and entry.name.startswith("."):
                continue
            try:
                st = entry.stat()
                is_dir = entry.is_dir()
            except OSError as e:
                # dangling symlink or an entry removed while listing
                logger.debug("Skipping %s: %s", entry.path, e)
                continue
            yield self._describe(entry.name, st, is_dir)


def open_local_filesystem(root: Union[Path, str], **options) -> LocalFileSystem:
    """Create a file system rooted at `root`."""
    if not os.path.isdir(root):
        raise ResourceNotFoundError(f"not a directory: {root}")
    return LocalFileSystem(root, **options)
