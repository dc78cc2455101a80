"""
TO-DO APP - Interactive To-Do List Manager
==========================================

Menu-driven, terminal to-do list. Items live in process memory only;
restarting starts with an empty list.

Usage:
    from todo_app import ItemStore

    store = ItemStore()
    store.add("Buy milk")
    store.toggle(0)
    removed = store.remove(0)
"""

from .schema import (
    ToDoItem,
    TodoList,
    ItemStatus
)

from .manager import ItemStore, DuplicateItemError
from .menu import MenuController, MenuState, MenuConsistencyError
from .presentation import Theme
from .prompts import Prompter

__version__ = "1.0.0"
__all__ = [
    "ItemStore",
    "DuplicateItemError",
    "MenuController",
    "MenuState",
    "MenuConsistencyError",
    "Prompter",
    "Theme",
    "ToDoItem",
    "TodoList",
    "ItemStatus"
]
