"""
Watermark Manager Package
=========================
An interactive terminal tool that watermarks and edits images in ./img.

Modules:
    - core: File naming and image operations (no terminal dependencies)
    - jobs: Operation catalogue and the runner that reports outcomes
    - ui: rich-based terminal prompts
    - controller: The interactive session loop

Usage:
    from watermark_manager.core import ImageTransformer
    from watermark_manager.controller import WatermarkController
"""

__version__ = "1.0.0"
__app_name__ = "Watermark manager"

from .config import AppConfig
from .core import (
    ImageTransformer,
    WatermarkError,
    SourceNotFoundError,
    ImageReadError,
    ImageWriteError,
    ImageCodecError,
    prepare_file_path,
    prepare_output_filename,
)
from .jobs import Operation, EditResult, run_operation
from .ui import Prompter
from .controller import WatermarkController, main

__all__ = [
    # Version info
    "__version__",
    "__app_name__",

    # Config
    "AppConfig",

    # Core
    "ImageTransformer",
    "prepare_file_path",
    "prepare_output_filename",
    "WatermarkError",
    "SourceNotFoundError",
    "ImageReadError",
    "ImageWriteError",
    "ImageCodecError",

    # Jobs
    "Operation",
    "EditResult",
    "run_operation",

    # UI / controller
    "Prompter",
    "WatermarkController",
    "main",
]
