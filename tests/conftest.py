import os
from datetime import datetime, timezone

import pytest

from rangeserve.config import ServerConfig

MOD_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
MOD_TIME_HTTP = "Tue, 02 Jan 2024 03:04:05 GMT"
PAYLOAD = bytes(range(256)) * 4  # 1024 bytes


@pytest.fixture
def served_root(tmp_path):
    """A directory tree to serve, with fixed modification times."""
    (tmp_path / "hello.txt").write_bytes(b"hello world")
    (tmp_path / "payload.bin").write_bytes(PAYLOAD)
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.txt").write_bytes(b"nested")
    (tmp_path / ".hidden").write_bytes(b"secret")
    stamp = MOD_TIME.timestamp()
    for name in ("hello.txt", "payload.bin"):
        os.utime(tmp_path / name, (stamp, stamp))
    return tmp_path


@pytest.fixture
def config(served_root):
    return ServerConfig(root=served_root)
