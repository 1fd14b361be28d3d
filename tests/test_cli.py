"""Tests for the CLI implementation."""

import pytest
from typer.testing import CliRunner

from rangeserve import __version__
from rangeserve import cli
from rangeserve.cli import app
from rangeserve.config import DEFAULT_PORT
from rangeserve.io.local import LocalFileSystem


class FakeServer:
    """Stands in for the werkzeug server; stops on the first serve call."""

    def __init__(self, host, port, application, threaded=False):
        self.host = host
        self.server_port = port
        self.application = application
        self.threaded = threaded
        self.closed = False

    def serve_forever(self):
        raise KeyboardInterrupt

    def server_close(self):
        self.closed = True


class TestCLI:
    """Test the CLI functionality."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def servers(self, monkeypatch):
        """Capture the servers the CLI would start."""
        started = []

        def fake_make_server(*args, **kwargs):
            server = FakeServer(*args, **kwargs)
            started.append(server)
            return server

        monkeypatch.setattr(cli, "make_server", fake_make_server)
        return started

    def test_version(self, runner):
        """Test -v prints the version and exits."""
        result = runner.invoke(app, ["-v"])

        assert result.exit_code == 0
        assert f"rangeserve {__version__}" in result.stdout

    def test_invalid_directory(self, runner, tmp_path):
        """Test a missing root directory is an error."""
        result = runner.invoke(app, ["-d", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Invalid path" in result.output

    def test_file_is_not_a_directory(self, runner, tmp_path):
        """Test a file given as root is rejected."""
        path = tmp_path / "file.txt"
        path.write_text("x")
        result = runner.invoke(app, ["-d", str(path)])

        assert result.exit_code == 1

    def test_serve_and_stop(self, runner, tmp_path, servers):
        """Test the server starts, stops on interrupt and is closed."""
        result = runner.invoke(app, ["-d", str(tmp_path), "-p", "8123"])

        assert result.exit_code == 0
        assert "on port 8123" in result.stdout
        assert "rangeserve stopped." in result.stdout

        (server,) = servers
        assert server.host == "0.0.0.0"
        assert server.server_port == 8123
        assert server.threaded
        assert server.closed

    def test_defaults(self, runner, tmp_path, servers):
        """Test default port and options reach the application config."""
        result = runner.invoke(app, ["-d", str(tmp_path)])

        assert result.exit_code == 0
        config = servers[0].application.app.config
        assert config.port == DEFAULT_PORT
        assert config.root == tmp_path.resolve()
        assert not config.show_hidden
        assert config.etags
        assert config.lenient_ranges

    def test_flags(self, runner, tmp_path, servers):
        """Test flags are mapped onto the config."""
        result = runner.invoke(app, [
            "-d", str(tmp_path), "--host", "127.0.0.1",
            "--show-hidden", "--no-etags", "--strict-ranges", "--log-level", "debug",
        ])

        assert result.exit_code == 0
        config = servers[0].application.app.config
        assert config.host == "127.0.0.1"
        assert config.show_hidden
        assert not config.etags
        assert not config.lenient_ranges
        filesystem = servers[0].application.app.filesystem
        assert isinstance(filesystem, LocalFileSystem)
        assert filesystem.show_hidden
        assert not filesystem.etags

    def test_environment(self, runner, tmp_path, servers):
        """Test directory and port can come from the environment."""
        result = runner.invoke(app, [], env={
            "RANGESERVE_DIRECTORY": str(tmp_path),
            "RANGESERVE_PORT": "9000",
        })

        assert result.exit_code == 0
        config = servers[0].application.app.config
        assert config.root == tmp_path.resolve()
        assert config.port == 9000

    def test_port_out_of_range(self, runner, tmp_path):
        """Test ports outside 0-65535 are refused by option parsing."""
        result = runner.invoke(app, ["-d", str(tmp_path), "-p", "70000"])

        assert result.exit_code == 2
