"""
Application Configuration
=========================
Defaults for the interactive session and the image operations.

Environment overrides (read once at startup, never written back):
    WATERMARK_MANAGER_IMG_DIR    directory holding input and output images
    WATERMARK_MANAGER_FONT       path to a TTF/OTF font for text watermarks
    WATERMARK_MANAGER_LOG_LEVEL  logging level name (default: WARNING)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


@dataclass
class AppConfig:
    """Settings shared by the controller and the image transformer."""
    image_dir: str = "./img"
    default_input: str = "test.jpg"
    default_watermark: str = "logo.png"

    # Text watermark
    font_path: Optional[str] = None
    font_size: int = 32
    text_color: Tuple[int, int, int] = (255, 255, 255)

    # Image watermark opacity, 0.0-1.0
    watermark_opacity: float = 0.5

    # Encoder quality for lossy formats
    quality: int = 100

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from defaults plus any environment overrides."""
        if environ is None:
            environ = os.environ

        config = cls()
        if environ.get("WATERMARK_MANAGER_IMG_DIR"):
            config.image_dir = environ["WATERMARK_MANAGER_IMG_DIR"]
        if environ.get("WATERMARK_MANAGER_FONT"):
            config.font_path = environ["WATERMARK_MANAGER_FONT"]
        if environ.get("WATERMARK_MANAGER_LOG_LEVEL"):
            config.log_level = environ["WATERMARK_MANAGER_LOG_LEVEL"].upper()
        return config
