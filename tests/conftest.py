import io

import pytest

from todo_app.manager import ItemStore
from todo_app.menu import MenuController
from todo_app.presentation import Theme
from todo_app.prompts import Prompter


class ScriptedInput:
    """Feeds canned answers to a Prompter; EOFError once they run out"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def theme():
    return Theme(enabled=False)


@pytest.fixture
def make_prompter(theme):
    def _make(*answers):
        output = io.StringIO()
        return Prompter(theme, input_func=ScriptedInput(answers), output=output), output
    return _make


@pytest.fixture
def make_controller(theme):
    def _make(*answers, items=()):
        output = io.StringIO()
        prompter = Prompter(theme, input_func=ScriptedInput(answers), output=output)
        store = ItemStore()
        for text in items:
            store.add(text)
        return MenuController(prompter, theme, store=store), output
    return _make
