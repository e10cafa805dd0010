"""
Terminal implementation of the TypeSelector contract.

Prompt layout:

    Type of "inputs.repo":
      1) string
      2) number
      3) bool
    > _

The answer may be the option number or the option text. An empty line,
EOF or Ctrl-C cancels the question.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO

from describe_action.core.logger import get_logger

logger = get_logger(__name__)

PROMPT_MARKER = "> "


class ConsoleSelector:
    """Ask single-choice questions on the terminal.

    The question is written to ``out`` (stderr by default) so that redirecting
    stdout captures only the tables.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        read_line: Optional[Callable[[], str]] = None,
    ):
        self.out = out
        self.read_line = read_line if read_line is not None else input

    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stderr

    def format_prompt(self, message: str, options: Sequence[str]) -> str:
        lines = [message]
        lines.extend(f"  {i}) {option}" for i, option in enumerate(options, start=1))
        return "\n".join(lines) + "\n"

    def parse_response(self, answer: str, options: Sequence[str]) -> Optional[str]:
        """Map an answer to an option; None when it matches nothing."""
        answer = answer.strip()
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(options):
                return options[index - 1]
            return None
        for option in options:
            if answer.lower() == option.lower():
                return option
        return None

    def select_one(self, message: str, options: Sequence[str]) -> Optional[str]:
        stream = self._stream()
        stream.write(self.format_prompt(message, options))
        while True:
            stream.write(PROMPT_MARKER)
            stream.flush()
            try:
                answer = self.read_line()
            except (EOFError, KeyboardInterrupt):
                stream.write("\n")
                logger.debug(f"Prompt cancelled: {message}")
                return None

            if not answer.strip():
                logger.debug(f"Prompt skipped: {message}")
                return None

            choice = self.parse_response(answer, options)
            if choice is not None:
                return choice
            stream.write(f"Please choose one of: {', '.join(options)}\n")
