"""
Operation Runner
================
Runs one image operation and reports its outcome on the console.

Each Operation carries the menu label the user picks, the transformer
method that implements it and the line printed on success. Failures from
the transformer are caught here, at the operation boundary, so the
interactive session always continues.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console

from watermark_manager.core.errors import WatermarkError
from watermark_manager.core.transforms import ImageTransformer

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Something went wrong... Try again!"


class Operation(enum.Enum):
    """Image operations offered by the session, keyed by menu label."""

    TEXT_WATERMARK = ("Text watermark", "add_text_watermark",
                      "Text watermark has been added.")
    IMAGE_WATERMARK = ("Image watermark", "add_image_watermark",
                       "Image watermark has been added.")
    BRIGHTEN = ("Make image brighter", "brighten",
                "Image brightness has been increased.")
    CONTRAST = ("Increase contrast", "increase_contrast",
                "Image contrast has been increased.")
    BLACK_AND_WHITE = ("Make image b&w", "make_black_and_white",
                       "Image colors were removed.")
    INVERT = ("Invert image", "invert",
              "Image has been inverted.")

    def __init__(self, label: str, method_name: str, success_message: str):
        self.label = label
        self.method_name = method_name
        self.success_message = success_message

    @classmethod
    def from_label(cls, label: str) -> "Operation":
        for operation in cls:
            if operation.label == label:
                return operation
        raise ValueError(f"Unknown operation: {label!r}")


WATERMARK_OPERATIONS = (Operation.TEXT_WATERMARK, Operation.IMAGE_WATERMARK)
EDIT_OPERATIONS = (
    Operation.BRIGHTEN,
    Operation.CONTRAST,
    Operation.BLACK_AND_WHITE,
    Operation.INVERT,
)


@dataclass
class EditResult:
    """Result of running one operation on one file."""
    operation: Operation
    source_name: str
    output_name: Optional[str] = None
    success: bool = False
    error_message: str = ""
    error: Optional[WatermarkError] = None


def run_operation(
        transformer: ImageTransformer,
        console: Console,
        operation: Operation,
        source_name: str,
        *args: Any
) -> EditResult:
    """
    Run ``operation`` on ``source_name`` and print its outcome.

    Args:
        transformer: The ImageTransformer that does the work.
        console: Where the success or failure line is printed.
        operation: Which operation to run.
        source_name: Input filename inside the image directory.
        *args: Extra arguments for the operation (text, watermark name, value).

    Returns:
        EditResult describing the outcome. Never raises WatermarkError.
    """
    result = EditResult(operation=operation, source_name=source_name)
    method = getattr(transformer, operation.method_name)

    try:
        result.output_name = method(source_name, *args)
        result.success = True
    except WatermarkError as e:
        result.error = e
        result.error_message = str(e)
        logger.warning("%s failed (%s error): %s", operation.label, e.kind, e)
        logger.debug("Traceback for %s", operation.label, exc_info=True)
        console.print(FAILURE_MESSAGE, markup=False, highlight=False)
        return result

    console.print(operation.success_message, markup=False, highlight=False)
    return result
