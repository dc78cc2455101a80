"""
TO-DO APP - Terminal Prompts
============================
Blocking, line-oriented select / text / confirm prompts.

Input-device failures (EOFError, OSError) are left to the caller.
"""

import sys
from typing import Callable, List, Optional, TextIO

from .presentation import Theme

CURSOR = "❯"

Validator = Callable[[str], Optional[str]]


class Prompter:
    """Reads answers from `input_func` and writes to `output`"""

    def __init__(
        self,
        theme: Theme,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None
    ):
        self.theme = theme
        self._input = input_func if input_func is not None else input
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def echo(self, text: str = "") -> None:
        print(text, file=self.output)

    def _error(self, message: str) -> None:
        self.echo(self.theme.paint(f"✘ {message}", "error"))

    def _ask(self, label: str) -> str:
        # input() writes its prompt to stdout, keep both streams in step
        self.output.flush()
        return self._input(label)

    def select(
        self,
        options: List[str],
        default: int = 0,
        prompt: Optional[str] = None
    ) -> int:
        """
        Show numbered options and return the chosen index.

        Enter picks `default`; a number picks that option (1-based on
        screen, 0-based on return). Anything else is rejected and the
        question is asked again.
        """
        if not options:
            raise ValueError("select() needs at least one option")

        count = len(options)
        default = min(max(default, 0), count - 1)

        while True:
            if prompt:
                self.echo(self.theme.paint("? ", "prompt") + prompt)
            for index, option in enumerate(options):
                marker = self.theme.paint(CURSOR, "prompt") if index == default else " "
                self.echo(f"{marker} {index + 1}. {option}")

            answer = self._ask(
                self.theme.paint(f"Select [1-{count}] ({default + 1}): ", "prompt")
            ).strip()
            if not answer:
                return default
            if answer.isdigit() and 1 <= int(answer) <= count:
                return int(answer) - 1

            self._error(f"Please enter a number between 1 and {count}")

    def text(self, prompt: str, validate: Optional[Validator] = None) -> str:
        """Read one line, repeating while `validate` returns an error"""
        while True:
            answer = self._ask(self.theme.paint("? ", "prompt") + f"{prompt}: ")
            if validate is not None:
                error = validate(answer)
                if error:
                    self._error(error)
                    continue
            return answer

    def confirm(self, prompt: str, default: bool = False) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._ask(
                self.theme.paint("? ", "prompt") + f"{prompt} {hint} "
            ).strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

            self._error("Please answer yes or no")
