"""
Disaster Reporter - Media Module
Camera and gallery access for report attachments.
"""

from src.media.image_picker import (
    ImageSource,
    ImagePicker,
    PickResult,
    PermissionDeniedError,
    FileSystemImagePicker,
    IMAGE_SOURCE_OPTIONS,
    PERMISSION_MESSAGES,
    acquire_image,
)

__all__ = [
    "ImageSource",
    "ImagePicker",
    "PickResult",
    "PermissionDeniedError",
    "FileSystemImagePicker",
    "IMAGE_SOURCE_OPTIONS",
    "PERMISSION_MESSAGES",
    "acquire_image",
]
