"""
Error Taxonomy
==============
Every failure an image operation can report derives from WatermarkError.

- SourceNotFoundError: an input or watermark file is missing (validation)
- ImageReadError / ImageWriteError: the filesystem refused a read or write
- ImageCodecError: Pillow could not decode, process or encode the image
"""

from pathlib import Path
from typing import Union


class WatermarkError(Exception):
    """Base class for failures reported by an image operation."""

    kind = "error"

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class SourceNotFoundError(WatermarkError):
    """An input file does not exist."""

    kind = "validation"

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"The file {path} doesn't exist.", path)


class ImageReadError(WatermarkError):
    kind = "io"


class ImageWriteError(WatermarkError):
    kind = "io"


class ImageCodecError(WatermarkError):
    kind = "codec"
