"""rangeserve - a read-only HTTP file server with Range and conditional request support."""

__version__ = "1.0.0"

from .core.model import (                                             # re-export
    ByteRange, ResourceDescriptor, ConditionalOutcome,
    RangeServeError, InvalidRangeError, SeekFailedError, SizeUnavailableError,
    StreamAbortedError, ResourceNotFoundError,
)
from .core.ranges import parse_range
from .core.conditional import check_conditional, check_last_modified
from .core.multipart import MultipartRangeEncoder
from .config import ServerConfig
from .responder import serve_content
from .app import FileServerApp, make_app

# Import sniffers to trigger registration
from . import sniffers  # noqa: F401


__all__ = [
    "__version__",
    "ByteRange", "ResourceDescriptor", "ConditionalOutcome",
    "RangeServeError", "InvalidRangeError", "SeekFailedError", "SizeUnavailableError",
    "StreamAbortedError", "ResourceNotFoundError",
    "parse_range", "check_conditional", "check_last_modified", "MultipartRangeEncoder",
    "ServerConfig", "serve_content", "FileServerApp", "make_app",
]
