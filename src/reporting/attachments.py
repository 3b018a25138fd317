"""
Image attachments for report uploads
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List
from urllib.parse import unquote, urlparse

from src.backend.client import FilePart
from src.core.constants import IMAGE_FIELD
from src.core.exceptions import AttachmentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attachment:
    """A locally referenced image, either a plain path or a file:// URI."""
    uri: str

    @property
    def filename(self) -> str:
        return self.uri.split("/")[-1]

    @property
    def mime_type(self) -> str:
        """MIME type taken verbatim from the file extension, e.g. image/jpg."""
        return f"image/{self.filename.split('.')[-1]}"

    @property
    def path(self) -> Path:
        parsed = urlparse(self.uri)
        if parsed.scheme == "file":
            return Path(unquote(parsed.path))
        if parsed.scheme and len(parsed.scheme) > 1:
            raise AttachmentError(self.uri, f"unsupported scheme {parsed.scheme!r}")
        return Path(self.uri)

    def read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise AttachmentError(self.uri, str(e)) from e

    def to_file_part(self) -> FilePart:
        return (IMAGE_FIELD, (self.filename, self.read(), self.mime_type))


def build_file_parts(uris: Iterable[str]) -> List[FilePart]:
    """
    Read every attachment into a multipart file part.

    Raises:
        AttachmentError: if any image cannot be read
    """
    parts = [Attachment(uri).to_file_part() for uri in uris]
    logger.debug(f"Prepared {len(parts)} file part(s)")
    return parts
