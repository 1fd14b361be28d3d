"""Magic-number sniffers used when a file extension gives no media type."""

from .archive import GzipSniffer, ZipSniffer
from .document import HTMLSniffer, PDFSniffer, XMLSniffer
from .image import GIFSniffer, JPEGSniffer, PNGSniffer
from .media import MP3Sniffer, OggSniffer, WAVSniffer
