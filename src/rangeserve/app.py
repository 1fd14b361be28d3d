"""WSGI application serving files and directory listings below a root."""

from __future__ import annotations

import logging
import posixpath
from typing import Callable

from werkzeug.datastructures import Headers
from werkzeug.exceptions import HTTPException, InternalServerError, NotFound, RequestedRangeNotSatisfiable
from werkzeug.utils import redirect
from werkzeug.wrappers import Request, Response

from .config import ServerConfig
from .core.model import (
    InvalidRangeError,
    RangeServeError,
    ResourceNotFoundError,
    SeekFailedError,
    SizeUnavailableError,
)
from .io.base import FileSystem
from .io.local import LocalFileSystem
from .listing import NOT_FOUND_PAGE, category_for, render_listing
from .responder import serve_content

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("rangeserve.access")


class StatusRecorder:
    """Wrap a WSGI start_response and remember the status it was given."""

    def __init__(self, start_response):
        self._start_response = start_response
        self.status_code: int | None = None

    def __call__(self, status: str, headers, exc_info=None):
        self.status_code = int(status.split(" ", 1)[0])
        return self._start_response(status, headers, exc_info)


class RequestLogMiddleware:
    """Log one line per request with the status the application sent."""

    def __init__(self, app, logger: logging.Logger = access_logger):
        self.app = app
        self.logger = logger

    def __call__(self, environ, start_response):
        recorder = StatusRecorder(start_response)
        result = self.app(environ, recorder)
        url = environ.get("PATH_INFO", "")
        if environ.get("QUERY_STRING"):
            url += "?" + environ["QUERY_STRING"]
        fields = [
            environ.get("REMOTE_ADDR", "-"),
            environ.get("SERVER_PROTOCOL", "-"),
            recorder.status_code if recorder.status_code is not None else -1,
            environ.get("REQUEST_METHOD", "-"),
            url,
        ]
        length = environ.get("CONTENT_LENGTH")
        if environ.get("REQUEST_METHOD") != "HEAD" and length and length.isdigit() and int(length) > 0:
            fields.append(int(length))
        self.logger.info(" ".join(str(f) for f in fields))
        return result


def determine_http_error(e: Exception) -> HTTPException:
    """Map a serving error to the HTTP error response it stands for."""
    if isinstance(e, ResourceNotFoundError):
        return NotFound()
    if isinstance(e, InvalidRangeError):
        return RequestedRangeNotSatisfiable(length=e.size, description=str(e))
    if isinstance(e, (SeekFailedError, SizeUnavailableError)):
        return InternalServerError(description=str(e))
    return InternalServerError()


class FileServerApp:
    """Serve `config.root` read-only: files with range support, directories as HTML."""

    def __init__(
        self,
        config: ServerConfig,
        filesystem: FileSystem | None = None,
        categorize: Callable[[str], str] = category_for,
    ):
        self.config = config
        self.filesystem = filesystem or LocalFileSystem(
            config.root, show_hidden=config.show_hidden, etags=config.etags
        )
        self.categorize = categorize

    @staticmethod
    def _not_found() -> Response:
        return Response(NOT_FOUND_PAGE, status=404, mimetype="text/html")

    @staticmethod
    def _local_redirect(request: Request, target: str) -> Response:
        if request.query_string:
            target += "?" + request.query_string.decode("latin-1")
        return redirect(target, code=301)

    def dispatch(self, request: Request):
        url = request.path
        clean = posixpath.normpath("/" + url.lstrip("/"))
        try:
            desc = self.filesystem.stat(clean)
        except ResourceNotFoundError:
            return self._not_found()

        # canonical paths: directories end in '/', files never do
        if desc.is_directory and not url.endswith("/"):
            return self._local_redirect(request, posixpath.basename(url) + "/")
        if not desc.is_directory and url.endswith("/"):
            return self._local_redirect(request, "../" + posixpath.basename(url.rstrip("/")))

        if desc.is_directory:
            try:
                entries = list(self.filesystem.list_directory(clean))
            except ResourceNotFoundError:
                return self._not_found()
            page = render_listing(desc.name, entries, self.categorize)
            return Response(page, mimetype="text/html")

        try:
            handle = self.filesystem.open(clean)
        except ResourceNotFoundError:
            return self._not_found()
        headers = Headers()
        if desc.etag:
            headers["Etag"] = desc.etag
        try:
            response = serve_content(
                request, desc.name, desc.mod_time, lambda: desc.size, handle, headers,
                lenient_ranges=self.config.lenient_ranges,
            )
        except (RangeServeError, OSError) as e:
            handle.close()
            error = determine_http_error(e)
            if error.code >= 500:
                logger.error("Failed to serve %s: %s", clean, e, exc_info=True)
            else:
                logger.debug("Rejected request for %s: %s", clean, e)
            return error
        except BaseException:
            handle.close()
            raise
        response.call_on_close(handle.close)
        return response

    def wsgi_app(self, environ, start_response):
        request = Request(environ)
        response = self.dispatch(request)
        return response(environ, start_response)

    def __call__(self, environ, start_response):
        return self.wsgi_app(environ, start_response)


def make_app(config: ServerConfig, **options) -> RequestLogMiddleware:
    """Build the logged WSGI application for `config`."""
    return RequestLogMiddleware(FileServerApp(config, **options))
