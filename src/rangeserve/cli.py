"""CLI implementation for rangeserve."""

import logging
from pathlib import Path
from typing import Optional

import typer
from werkzeug.serving import make_server

from . import __version__
from .app import make_app
from .config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig
from .core.model import ResourceNotFoundError
from .io.local import open_local_filesystem

NAME = "rangeserve"

app = typer.Typer(add_completion=False, help="Serve a directory over HTTP with Range support.")


def _version_callback(value: bool):
    if value:
        typer.echo(f"{NAME} {__version__}")
        typer.echo("This is free software and comes with NO warranty.")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # access lines come from our own middleware
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


@app.command()
def main(
    directory: Path = typer.Option(
        Path("."), "-d", "--directory", envvar="RANGESERVE_DIRECTORY",
        help="The root directory for the file server.",
    ),
    port: int = typer.Option(
        DEFAULT_PORT, "-p", "--port", envvar="RANGESERVE_PORT", min=0, max=65535,
        help="The port on which the file server should run.",
    ),
    host: str = typer.Option(DEFAULT_HOST, "--host", help="Interface to bind."),
    show_hidden: bool = typer.Option(False, "--show-hidden", help="List and serve dot files."),
    no_etags: bool = typer.Option(False, "--no-etags", help="Do not send Etag headers."),
    strict_ranges: bool = typer.Option(
        False, "--strict-ranges", help="Answer 416 to range sets larger than the file instead of sending it whole.",
    ),
    log_level: str = typer.Option("info", "--log-level", help="Logging level."),
    version: Optional[bool] = typer.Option(
        None, "-v", "--version", callback=_version_callback, is_eager=True,
        help="Print the version number.",
    ),
):
    """Serve DIRECTORY read-only on HOST:PORT."""
    try:
        filesystem = open_local_filesystem(directory, show_hidden=show_hidden, etags=not no_etags)
    except ResourceNotFoundError:
        typer.echo(f"Invalid path `{directory}`. Please specify a valid directory.", err=True)
        raise typer.Exit(code=1)

    configure_logging(log_level)
    config = ServerConfig(
        root=directory.resolve(),
        host=host,
        port=port,
        show_hidden=show_hidden,
        etags=not no_etags,
        lenient_ranges=not strict_ranges,
    )
    server = make_server(config.host, config.port, make_app(config, filesystem=filesystem), threaded=True)
    typer.echo(
        f"Starting {NAME} with root {config.root} on port {server.server_port}.\n"
        "Press ctrl + c to exit."
    )
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        typer.echo(f"\n{NAME} stopped.")
    finally:
        server.server_close()


if __name__ == "__main__":
    app()
