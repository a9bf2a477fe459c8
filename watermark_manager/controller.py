"""
Session Controller
==================
Drives the interactive session: asks the questions, checks that the
named files exist, runs one watermark operation and optionally one
follow-up edit, then starts over.

Each turn:
1. Confirm the user is ready ("no" ends the session)
2. Pick an input file and a watermark type
3. Add a text or image watermark
4. Optionally brighten, add contrast, remove colours or invert
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from watermark_manager.config import AppConfig
from watermark_manager.core.naming import (
    SUFFIX_WITH_WATERMARK,
    prepare_file_path,
    prepare_output_filename,
)
from watermark_manager.core.transforms import ImageTransformer
from watermark_manager.jobs import (
    EDIT_OPERATIONS,
    WATERMARK_OPERATIONS,
    EditResult,
    Operation,
    run_operation,
)
from watermark_manager.ui.prompts import Prompter

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    'Hi! Welcome to "Watermark manager". Copy your image files to `/img` '
    "folder. Then you'll be able to use them in the app. Are you ready?"
)
INPUT_FILE_MESSAGE = "What file do you want to mark?"
WATERMARK_TYPE_MESSAGE = "Choose watermark type:"
WATERMARK_TEXT_MESSAGE = "Type your watermark text:"
WATERMARK_FILE_MESSAGE = "Type your watermark name:"
EDIT_MORE_MESSAGE = "Do you want to edit file?"
EDIT_OPTION_MESSAGE = "What do you want to do?"
BRIGHTNESS_VALUE_MESSAGE = "Enter value from -1 to 1 to change brightness"
CONTRAST_VALUE_MESSAGE = "Enter value from -1 to 1 to change contrast"
RANGE_WARNING = "The value must be from -1 to 1. Try again."

ADJUSTMENT_RANGE = (-1.0, 1.0)


def missing_file_message(path: str) -> str:
    return f"The file {path} doesn't exist."


def resolve_log_level(name: str) -> int:
    """Map a level name such as "DEBUG" to its number; unknown names give WARNING."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def is_in_adjustment_range(value: float) -> bool:
    """Whether a brightness/contrast value lies in [-1, 1]."""
    low, high = ADJUSTMENT_RANGE
    return low <= value <= high


class WatermarkController:
    """
    Controller that connects terminal prompts to image operations.

    Responsibilities:
    - Ask the session questions in order
    - Validate that input files exist before any operation runs
    - Run each operation to completion before the next prompt
    - Keep the working filename so an edit applies to the watermarked file
    """

    def __init__(
            self,
            config: Optional[AppConfig] = None,
            prompter: Optional[Prompter] = None,
            transformer: Optional[ImageTransformer] = None,
            console: Optional[Console] = None
    ):
        """
        Initialize the controller.

        Args:
            config: Application settings. Defaults to AppConfig().
            prompter: Source of answers. Defaults to a terminal Prompter.
            transformer: Image operations. Defaults to one built from config.
            console: Where messages are printed.
        """
        self.config = config or AppConfig()
        self.console = console or Console(highlight=False)
        self.prompter = prompter or Prompter(self.console)
        self.transformer = transformer or ImageTransformer(self.config)

    def _say(self, message: str):
        self.console.print(message, markup=False, highlight=False)

    def _path(self, filename: str) -> str:
        return prepare_file_path(filename, self.config.image_dir)

    def _check_exists(self, filename: str) -> bool:
        """Print the missing-file message and return False if absent."""
        path = self._path(filename)
        if Path(path).exists():
            return True
        self._say(missing_file_message(path))
        return False

    def _run(self, operation: Operation, source_name: str, *args) -> EditResult:
        return run_operation(self.transformer, self.console, operation, source_name, *args)

    # ------------------------------------------------------------------
    # Session steps
    # ------------------------------------------------------------------

    def add_watermark(self, input_name: str, operation: Operation) -> str:
        """
        Ask the watermark-specific question and apply the watermark.

        Returns:
            The working filename: the watermarked output name once the
            watermark has been attempted, even if it failed, otherwise
            ``input_name`` unchanged.
        """
        if operation is Operation.TEXT_WATERMARK:
            text = self.prompter.text(WATERMARK_TEXT_MESSAGE)
            if not self._check_exists(input_name):
                return input_name
            self._run(operation, input_name, text)
        else:
            watermark_name = self.prompter.text(
                WATERMARK_FILE_MESSAGE, default=self.config.default_watermark
            )
            if not self._check_exists(input_name):
                return input_name
            if not self._check_exists(watermark_name):
                return input_name
            self._run(operation, input_name, watermark_name)

        return prepare_output_filename(input_name, SUFFIX_WITH_WATERMARK)

    def edit(self, working_name: str) -> Optional[EditResult]:
        """Offer one follow-up edit on ``working_name``."""
        if not self.prompter.confirm(EDIT_MORE_MESSAGE):
            return None

        label = self.prompter.choose(
            EDIT_OPTION_MESSAGE, [op.label for op in EDIT_OPERATIONS]
        )
        operation = Operation.from_label(label)

        if operation in (Operation.BRIGHTEN, Operation.CONTRAST):
            message = (BRIGHTNESS_VALUE_MESSAGE if operation is Operation.BRIGHTEN
                       else CONTRAST_VALUE_MESSAGE)
            value = self.prompter.number(message)
            if not is_in_adjustment_range(value):
                # Out-of-range values are reported but still applied
                self._say(RANGE_WARNING)
            return self._run(operation, working_name, value)

        return self._run(operation, working_name)

    def run_turn(self) -> bool:
        """
        Run one full pass of the session.

        Returns:
            False when the user is not ready and the session should end.
        """
        if not self.prompter.confirm(WELCOME_MESSAGE):
            return False

        input_name = self.prompter.text(
            INPUT_FILE_MESSAGE, default=self.config.default_input
        )
        label = self.prompter.choose(
            WATERMARK_TYPE_MESSAGE, [op.label for op in WATERMARK_OPERATIONS]
        )

        working_name = self.add_watermark(input_name, Operation.from_label(label))
        self.edit(working_name)
        return True

    def run(self):
        """Run turns until the user says they are not ready."""
        while self.run_turn():
            pass
        logger.info("Session finished")


def main() -> int:
    """Application entry point."""
    config = AppConfig.from_env()
    logging.basicConfig(
        level=resolve_log_level(config.log_level),
        format="%(levelname)s:%(message)s",
    )

    controller = WatermarkController(config)
    try:
        controller.run()
    except (KeyboardInterrupt, EOFError):
        controller.console.print()
        logger.info("Session interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
