"""
File Naming
===========
Paths are plain strings of the form "<image_dir>/<name>", so messages
show them exactly as the user would type them (e.g. "./img/test.jpg").

Output names insert a per-operation suffix before the extension:
    photo.jpg -> photo-with-watermark.jpg

Only the first two dot-separated segments are used:
    archive.tar.gz -> archive-inverted.tar
    photo.         -> photo-inverted.
    photo          -> photo-inverted   (no extension, saving will fail)
"""

DEFAULT_IMAGE_DIR = "./img"

SUFFIX_WITH_WATERMARK = "with-watermark"
SUFFIX_BRIGHTNESS = "modified-brightness"
SUFFIX_CONTRAST = "modified-contrast"
SUFFIX_BLACK_AND_WHITE = "b-and-w"
SUFFIX_INVERTED = "inverted"


def prepare_file_path(filename: str, image_dir: str = DEFAULT_IMAGE_DIR) -> str:
    """Return the path of ``filename`` inside the image directory."""
    return f"{image_dir.rstrip('/')}/{filename}"


def prepare_output_filename(filename: str, suffix: str) -> str:
    """
    Derive an output filename by inserting ``suffix`` before the extension.

    Args:
        filename: Base filename, e.g. "photo.jpg".
        suffix: Operation suffix token, e.g. "b-and-w".

    Returns:
        The derived name, e.g. "photo-b-and-w.jpg".
    """
    parts = filename.split(".")
    name = parts[0]
    if len(parts) < 2:
        return f"{name}-{suffix}"
    return f"{name}-{suffix}.{parts[1]}"
