"""
Image capture for report attachments
Camera and gallery access behind a permission check
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ImageSource(str, Enum):
    """Where a new attachment comes from."""
    CAMERA = "camera"
    GALLERY = "gallery"


# Dialog buttons as (label, source); None is the cancel button
IMAGE_SOURCE_OPTIONS: List[Tuple[str, Optional[ImageSource]]] = [
    ("Take a Photo", ImageSource.CAMERA),
    ("Choose from Gallery", ImageSource.GALLERY),
    ("Cancel", None),
]

PERMISSION_MESSAGES = {
    ImageSource.CAMERA: "Permission to access the camera is required!",
    ImageSource.GALLERY: "Permission to access the media library is required!",
}


class PermissionDeniedError(Exception):
    """The user refused access to the requested image source."""

    def __init__(self, source: ImageSource):
        super().__init__(PERMISSION_MESSAGES[source])
        self.source = source


@dataclass
class PickResult:
    """Outcome of one camera or gallery session."""
    canceled: bool
    uri: Optional[str] = None


class ImagePicker(ABC):
    """Device media access used by the report form."""

    @abstractmethod
    async def request_permission(self, source: ImageSource) -> bool:
        """Ask for runtime permission to use source."""

    @abstractmethod
    async def launch(self, source: ImageSource) -> PickResult:
        """Open the camera or gallery and wait for the user."""


async def acquire_image(picker: ImagePicker, source: ImageSource) -> Optional[str]:
    """
    Run one capture session.

    Args:
        picker: Device media access
        source: Camera or gallery

    Returns:
        URI of the chosen image, or None if the user cancelled

    Raises:
        PermissionDeniedError: permission was not granted
    """
    if not await picker.request_permission(source):
        logger.info(f"Permission denied for {source.value}")
        raise PermissionDeniedError(source)

    result = await picker.launch(source)
    if result.canceled or not result.uri:
        logger.debug(f"{source.value} session cancelled")
        return None

    logger.info(f"Image acquired from {source.value}: {result.uri}")
    return result.uri


class FileSystemImagePicker(ImagePicker):
    """
    Picker that hands out local image files in order.

    The gallery serves queued paths; there is no camera, so camera permission
    is never granted. An exhausted queue behaves like a cancelled session.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._queue = deque(str(Path(p).resolve()) for p in paths)

    @property
    def remaining(self) -> int:
        return len(self._queue)

    async def request_permission(self, source: ImageSource) -> bool:
        return source == ImageSource.GALLERY

    async def launch(self, source: ImageSource) -> PickResult:
        if source != ImageSource.GALLERY or not self._queue:
            return PickResult(canceled=True)
        return PickResult(canceled=False, uri=Path(self._queue.popleft()).as_uri())
