"""
TO-DO APP - Menu Controller
===========================
Drives the top-level menu and its view / add / remove / exit sub-loops.

The controller runs as an explicit state loop: every state handler does
its work and returns the next state, until TERMINATED.
"""

import logging
from enum import Enum
from typing import Optional

from .manager import ItemStore
from .presentation import (
    BANNER,
    EMPTY,
    FAREWELL,
    LIST_HEADING,
    Theme,
    format_items,
    format_removed,
)
from .prompts import Prompter

logger = logging.getLogger("todo_app")


class MenuState(str, Enum):
    """Interaction states"""
    MAIN_MENU = "main_menu"
    VIEW_LIST = "view_list"
    ADD_ITEM = "add_item"
    REMOVE_ITEM = "remove_item"
    CONFIRM_EXIT = "confirm_exit"
    TERMINATED = "terminated"     # Only terminal state


class MenuConsistencyError(RuntimeError):
    """A selection fell outside the options that were presented"""


class MenuController:
    """
    Menu-driven to-do session

    Owns the ItemStore for the whole session. `run()` loops until the
    user confirms exit and returns the process exit status.
    """

    MAIN_OPTIONS = ["View To-Do List", "Add item", "Remove item"]

    def __init__(
        self,
        prompter: Prompter,
        theme: Theme,
        store: Optional[ItemStore] = None
    ):
        self.prompter = prompter
        self.theme = theme
        self.store = store if store is not None else ItemStore()

        self._handlers = {
            MenuState.MAIN_MENU: self.main_menu,
            MenuState.VIEW_LIST: self.view_list,
            MenuState.ADD_ITEM: self.add_items,
            MenuState.REMOVE_ITEM: self.remove_items,
            MenuState.CONFIRM_EXIT: self.confirm_exit,
        }

    def run(self) -> int:
        self.prompter.echo(self.theme.paint(BANNER, "header"))

        state = MenuState.MAIN_MENU
        while state is not MenuState.TERMINATED:
            state = self.step(state)

        todo_list = self.store.todo_list
        logger.info(
            f"👋 Session ended: {len(self.store)} items, "
            f"{todo_list.progress_pct}% complete {todo_list.status_summary}"
        )
        return 0

    def step(self, state: MenuState) -> MenuState:
        """Run one state and return the next one"""
        handler = self._handlers.get(state)
        if handler is None:
            raise MenuConsistencyError(f"No handler for state: {state}")
        logger.debug(f"➡️ Entering state: {state.value}")
        return handler()

    # ========================================
    # STATES
    # ========================================

    def main_menu(self) -> MenuState:
        options = self.MAIN_OPTIONS + [self.theme.paint("Exit", "sentinel")]
        option = self.prompter.select(
            options,
            default=0,
            prompt="Please select an option"
        )

        transitions = {
            0: MenuState.VIEW_LIST,
            1: MenuState.ADD_ITEM,
            2: MenuState.REMOVE_ITEM,
            3: MenuState.CONFIRM_EXIT,
        }
        if option not in transitions:
            raise MenuConsistencyError(
                f"Invalid option choice {option} - should've been between 0 through 3"
            )
        return transitions[option]

    def view_list(self) -> MenuState:
        """Show all items; picking one toggles it, Exit goes back"""
        self.prompter.echo(self.theme.paint(LIST_HEADING, "heading"))
        if self.store.is_empty:
            self.prompter.echo(self.theme.paint(EMPTY, "empty"))
            return MenuState.MAIN_MENU

        last_modified = 0
        while True:
            option = self._select_item("Exit", default=last_modified)
            if option == len(self.store):
                return MenuState.MAIN_MENU

            last_modified = option
            self.store.toggle(option)

    def add_items(self) -> MenuState:
        """Keep asking for new items until an empty line is entered"""
        while True:
            text = self.prompter.text("Item to add", validate=self._validate_new_item).strip()
            if not text:
                return MenuState.MAIN_MENU
            self.store.add(text)

    def remove_items(self) -> MenuState:
        last_modified = 0
        while True:
            if self.store.is_empty:
                self.prompter.echo(self.theme.paint(EMPTY, "empty"))
                return MenuState.MAIN_MENU

            option = self._select_item("Cancel", default=max(last_modified, 1) - 1)
            if option == len(self.store):
                return MenuState.MAIN_MENU

            last_modified = option
            removed = self.store.remove(option)
            self.prompter.echo(format_removed(removed, self.theme))

    def confirm_exit(self) -> MenuState:
        confirmed = self.prompter.confirm(
            "Are you sure you would like to exit?",
            default=False
        )
        if not confirmed:
            return MenuState.MAIN_MENU

        self.prompter.echo(self.theme.paint(FAREWELL, "farewell"))
        return MenuState.TERMINATED

    # ========================================
    # HELPER METHODS
    # ========================================

    def _select_item(self, sentinel: str, default: int) -> int:
        """Present every item plus a trailing sentinel entry"""
        options = format_items(self.store.items, self.theme)
        options.append(self.theme.paint(sentinel, "sentinel"))

        option = self.prompter.select(options, default=default)
        if not 0 <= option <= len(self.store):
            raise MenuConsistencyError(
                f"Selection {option} outside 0..{len(self.store)}"
            )
        return option

    def _validate_new_item(self, text: str) -> Optional[str]:
        existing = self.store.find_case_insensitive(text)
        if existing is not None:
            return f"That item ({existing.text}) already exists"
        return None
