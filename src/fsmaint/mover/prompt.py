"""Overwrite confirmation prompt."""

import sys
from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

ACCEPT_CHARACTERS = ("y", "Y")


class OverwritePrompt(Prompt):
    """Prompt that ends the question with a newline instead of ": "."""

    prompt_suffix = "\n"


class ConfirmationPrompt:
    """
    Line-oriented yes/no question.

    One whole line is read per question, so whatever follows the first
    character of an answer is consumed with it and never reaches a later
    prompt. Only an answer whose first significant character is y or Y
    counts as a yes; end of input counts as a no.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None):
        self.console = console or Console(soft_wrap=True, highlight=False, emoji=False)
        self.stream = stream

    def __call__(self, path: str) -> bool:
        stream = self.stream or sys.stdin
        # Plain Text: the path is shown as given, never as markup or emoji
        question = Text(f"mv: overwrite '{path}'? (y/Y to confirm)")
        try:
            answer = OverwritePrompt.ask(question, console=self.console, stream=stream)
        except EOFError:
            return False
        answer = answer.strip()
        return bool(answer) and answer[0] in ACCEPT_CHARACTERS
