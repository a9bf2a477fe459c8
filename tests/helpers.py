"""Shared helpers for building test images and scripting sessions."""

import io
import struct
import zlib
from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image
from rich.console import Console


def create_test_image(
        path: Path,
        width: int = 200,
        height: int = 120,
        mode: str = "RGB"
) -> Path:
    """Create a simple gradient test image at ``path``."""
    xs = np.linspace(0, 255, width, dtype=np.uint8)
    ys = np.linspace(0, 255, height, dtype=np.uint8)
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :, 0] = xs[np.newaxis, :]
    arr[:, :, 1] = ys[:, np.newaxis]
    arr[:, :, 2] = 128

    img = Image.fromarray(arr, mode="RGB")
    if mode != "RGB":
        img = img.convert(mode)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
    img.close()
    return path


def create_solid_image(
        path: Path,
        color: Tuple[int, ...],
        size: Tuple[int, int] = (100, 100),
        mode: str = "RGB"
) -> Path:
    """Create a single-colour image at ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with Image.new(mode, size, color) as img:
        img.save(path)
    return path


def pixel(path: Path, xy: Tuple[int, int] = (0, 0), mode: str = "RGB"):
    with Image.open(path) as img:
        return img.convert(mode).getpixel(xy)


def recording_console() -> Console:
    """A console that writes to memory; read it back with console_output()."""
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


def console_output(console: Console) -> str:
    return console.file.getvalue()


class ScriptedPrompter:
    """
    Stand-in for ui.prompts.Prompter that answers from a fixed script.

    ``choose`` answers are the chosen labels. An empty string answer to
    ``text`` returns the prompt's default, as the terminal prompt does.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self, message):
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message!r}")
        return self.answers.pop(0)

    def confirm(self, message, default=True):
        return self._next(message)

    def text(self, message, default=None):
        answer = self._next(message)
        if answer == "" and default is not None:
            return default
        return answer

    def choose(self, message, choices):
        answer = self._next(message)
        assert answer in choices, f"{answer!r} not offered in {choices!r}"
        return answer

    def number(self, message):
        return self._next(message)


def write_png_header(path: Path, width: int, height: int) -> Path:
    """Write a PNG holding only a header that declares ``width`` x ``height``."""
    def chunk(kind: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(kind + data) & 0xFFFFFFFF
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IEND", b""))
    return path
