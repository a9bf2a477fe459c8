"""
Core Module - Image Operations
==============================
This module contains no terminal or prompt dependencies.
All file naming and image processing lives here.
"""

from .errors import (
    ImageCodecError,
    ImageReadError,
    ImageWriteError,
    SourceNotFoundError,
    WatermarkError,
)
from .naming import prepare_file_path, prepare_output_filename
from .transforms import ImageTransformer

__all__ = [
    "ImageTransformer",
    "prepare_file_path",
    "prepare_output_filename",
    "WatermarkError",
    "SourceNotFoundError",
    "ImageReadError",
    "ImageWriteError",
    "ImageCodecError",
]
