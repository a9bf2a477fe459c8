"""
Image Transformer
=================
Single-file image operations built on PIL/Pillow.

Every operation follows the same template:
1. Decode the source image(s) from the image directory
2. Apply exactly one effect
3. Encode at maximum quality to the derived output name
4. Return the output filename

Technical Notes:
- EXIF orientation is applied on load, so phone photos keep their rotation
- RGBA is used while compositing; JPEG output is flattened onto white
- Failures raise the typed errors from core.errors, never a bare OSError
"""

import logging
import math
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageEnhance, ImageFont, ImageOps, UnidentifiedImageError

from watermark_manager.config import AppConfig
from watermark_manager.core.errors import (
    ImageCodecError,
    ImageReadError,
    ImageWriteError,
    SourceNotFoundError,
)
from watermark_manager.core.naming import (
    SUFFIX_BLACK_AND_WHITE,
    SUFFIX_BRIGHTNESS,
    SUFFIX_CONTRAST,
    SUFFIX_INVERTED,
    SUFFIX_WITH_WATERMARK,
    prepare_file_path,
    prepare_output_filename,
)

logger = logging.getLogger(__name__)

_FALLBACK_FONTS = (
    # Linux
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "DejaVuSans.ttf",
    # Windows
    "arial.ttf",
    # macOS
    "/System/Library/Fonts/Helvetica.ttc",
)

_JPEG_SUFFIXES = (".jpg", ".jpeg", ".jpe", ".jfif")


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or (
        image.mode == "P" and "transparency" in image.info
    )


def _to_color(image: Image.Image) -> Image.Image:
    """Convert to RGB, or RGBA when the image carries transparency."""
    target = "RGBA" if _has_alpha(image) else "RGB"
    if image.mode == target:
        return image
    return image.convert(target)


def _flatten_for_jpeg(image: Image.Image) -> Image.Image:
    """JPEG has no alpha channel: composite onto white and drop it."""
    if _has_alpha(image):
        rgba = image.convert("RGBA")
        flat = Image.new("RGB", rgba.size, (255, 255, 255))
        flat.paste(rgba, mask=rgba.getchannel("A"))
        if image.mode == "LA":
            flat = flat.convert("L")
        return flat
    if image.mode not in ("RGB", "L", "CMYK"):
        return image.convert("RGB")
    return image


def _wrap_text(text: str, font: ImageFont.FreeTypeFont, max_width: float) -> str:
    """
    Word-wrap ``text`` so each line fits in ``max_width`` pixels.

    Explicit newlines are kept. A single word wider than ``max_width``
    stays on its own line.
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and font.getlength(candidate) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return "\n".join(lines)


def _check_finite(value: float, path: str):
    if not math.isfinite(value):
        raise ImageCodecError(f"Cannot adjust {path} by {value}", path)


class ImageTransformer:
    """
    Applies one visual effect per call to an image in the image directory.

    The transformer holds no per-image state: each method opens its
    source, writes a new file next to it and returns the new name.
    Only fonts are cached between calls.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the ImageTransformer.

        Args:
            config: Application settings. Defaults to AppConfig().
        """
        self.config = config or AppConfig()
        self._cached_fonts: dict[int, ImageFont.FreeTypeFont] = {}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def path_for(self, filename: str) -> str:
        """Path of ``filename`` inside the configured image directory."""
        return prepare_file_path(filename, self.config.image_dir)

    def _get_font(self, size: int) -> ImageFont.FreeTypeFont:
        """
        Get or create a cached font object for the given size.

        Args:
            size: Font size in pixels.

        Returns:
            ImageFont object for drawing text.
        """
        if size not in self._cached_fonts:
            candidates = _FALLBACK_FONTS
            if self.config.font_path and Path(self.config.font_path).exists():
                candidates = (self.config.font_path,) + candidates

            font = None
            for candidate in candidates:
                try:
                    font = ImageFont.truetype(candidate, size)
                    break
                except OSError:
                    continue
            if font is None:
                font = ImageFont.load_default(size=size)
            self._cached_fonts[size] = font

        return self._cached_fonts[size]

    def _open(self, filename: str) -> Image.Image:
        """
        Decode an image from the image directory.

        Raises:
            SourceNotFoundError: If the file does not exist.
            ImageReadError: If the file cannot be read.
            ImageCodecError: If the file is not a decodable image.
        """
        path = self.path_for(filename)
        if not Path(path).exists():
            raise SourceNotFoundError(path)

        try:
            with Image.open(path) as img:
                img.load()
                return ImageOps.exif_transpose(img)
        except UnidentifiedImageError as exc:
            raise ImageCodecError(f"Cannot identify image file {path}", path) from exc
        except (Image.DecompressionBombError, ValueError, SyntaxError) as exc:
            raise ImageCodecError(f"Cannot decode {path}: {exc}", path) from exc
        except OSError as exc:
            # Pillow reports decoder problems as OSError without an errno
            if exc.errno is None:
                raise ImageCodecError(f"Cannot decode {path}: {exc}", path) from exc
            raise ImageReadError(f"Cannot read {path}: {exc}", path) from exc

    def _save(self, image: Image.Image, output_name: str) -> str:
        """
        Encode ``image`` at maximum quality into the image directory.

        Raises:
            ImageWriteError: If the filesystem refuses the write.
            ImageCodecError: If no encoder fits the output name or mode.
        """
        path = self.path_for(output_name)
        if Path(path).suffix.lower() in _JPEG_SUFFIXES:
            image = _flatten_for_jpeg(image)

        try:
            image.save(path, quality=self.config.quality)
        except (ValueError, KeyError) as exc:
            raise ImageCodecError(f"Cannot encode {path}: {exc}", path) from exc
        except OSError as exc:
            if exc.errno is None:
                raise ImageCodecError(f"Cannot encode {path}: {exc}", path) from exc
            raise ImageWriteError(f"Cannot write {path}: {exc}", path) from exc

        logger.info("Saved %s", path)
        return output_name

    def _apply(
            self,
            filename: str,
            suffix: str,
            effect: Callable[[Image.Image], Image.Image]
    ) -> str:
        """Open ``filename``, run ``effect`` on it and save under ``suffix``."""
        image = self._open(filename)
        try:
            result = effect(image)
        except (ValueError, OSError, TypeError) as exc:
            raise ImageCodecError(
                f"Cannot process {self.path_for(filename)}: {exc}",
                self.path_for(filename)
            ) from exc
        finally:
            image.close()

        try:
            return self._save(result, prepare_output_filename(filename, suffix))
        finally:
            result.close()

    # ------------------------------------------------------------------
    # Watermarks
    # ------------------------------------------------------------------

    def add_text_watermark(self, filename: str, text: str) -> str:
        """
        Print ``text`` centred over the whole image, wrapped to its width.

        Args:
            filename: Source image name inside the image directory.
            text: Watermark text. Words wrap at the image width and
                newlines start a new centred line.

        Returns:
            Name of the written file ("<name>-with-watermark.<ext>").
        """
        font = self._get_font(self.config.font_size)
        color: Tuple[int, int, int] = tuple(self.config.text_color)

        def draw_text(image: Image.Image) -> Image.Image:
            canvas = image.convert("RGBA")
            if not text:
                return canvas
            width, height = canvas.size
            draw = ImageDraw.Draw(canvas)
            draw.multiline_text(
                (width / 2, height / 2),
                _wrap_text(text, font, width),
                font=font,
                fill=(*color, 255),
                anchor="mm",
                align="center",
            )
            return canvas

        return self._apply(filename, SUFFIX_WITH_WATERMARK, draw_text)

    def add_image_watermark(self, filename: str, watermark_filename: str) -> str:
        """
        Overlay a second image, centred and at reduced opacity.

        Args:
            filename: Source image name inside the image directory.
            watermark_filename: Watermark image name inside the image directory.

        Returns:
            Name of the written file ("<name>-with-watermark.<ext>").
        """
        source_path = self.path_for(filename)
        if not Path(source_path).exists():
            raise SourceNotFoundError(source_path)

        watermark = self._open(watermark_filename)
        opacity = self.config.watermark_opacity

        def composite(image: Image.Image) -> Image.Image:
            base = image.convert("RGBA")
            mark = watermark.convert("RGBA")

            alpha = mark.getchannel("A").point(lambda a: int(round(a * opacity)))
            mark.putalpha(alpha)

            # Centre the watermark; negative offsets are clipped by paste
            x = (base.width - mark.width) // 2
            y = (base.height - mark.height) // 2
            layer = Image.new("RGBA", base.size, (0, 0, 0, 0))
            layer.paste(mark, (x, y))

            return Image.alpha_composite(base, layer)

        try:
            return self._apply(filename, SUFFIX_WITH_WATERMARK, composite)
        finally:
            watermark.close()

    # ------------------------------------------------------------------
    # Adjustments
    # ------------------------------------------------------------------

    def brighten(self, filename: str, value: float) -> str:
        """
        Change brightness. ``value`` is expected in [-1, 1]: -1 is black,
        0 leaves the image unchanged. Values outside the range are not
        clamped; NaN and infinity raise ImageCodecError.
        """
        _check_finite(value, self.path_for(filename))

        def adjust(image: Image.Image) -> Image.Image:
            return ImageEnhance.Brightness(_to_color(image)).enhance(1 + value)

        return self._apply(filename, SUFFIX_BRIGHTNESS, adjust)

    def increase_contrast(self, filename: str, value: float) -> str:
        """
        Change contrast. ``value`` is expected in [-1, 1]: -1 is flat grey,
        0 leaves the image unchanged. Values outside the range are not
        clamped; NaN and infinity raise ImageCodecError.
        """
        _check_finite(value, self.path_for(filename))

        def adjust(image: Image.Image) -> Image.Image:
            return ImageEnhance.Contrast(_to_color(image)).enhance(1 + value)

        return self._apply(filename, SUFFIX_CONTRAST, adjust)

    def make_black_and_white(self, filename: str) -> str:
        """Remove colour information, keeping luminance and alpha."""
        def grayscale(image: Image.Image) -> Image.Image:
            color = _to_color(image)
            gray = ImageOps.grayscale(color)
            if color.mode == "RGBA":
                return Image.merge("LA", (gray, color.getchannel("A")))
            return gray

        return self._apply(filename, SUFFIX_BLACK_AND_WHITE, grayscale)

    def invert(self, filename: str) -> str:
        """Complement every colour channel, keeping alpha."""
        def invert_colors(image: Image.Image) -> Image.Image:
            color = _to_color(image)
            if color.mode == "RGBA":
                inverted = ImageOps.invert(color.convert("RGB"))
                inverted.putalpha(color.getchannel("A"))
                return inverted
            return ImageOps.invert(color)

        return self._apply(filename, SUFFIX_INVERTED, invert_colors)
