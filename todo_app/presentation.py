"""
TO-DO APP - Presentation
========================
Maps items to display strings. The Theme is built once by the entry point
and handed to whatever renders output.
"""

from typing import List

from colorama import Fore, Style
from pydantic import BaseModel

from .schema import ToDoItem

BANNER = "===============    To-Do App    ==============="
LIST_HEADING = "To-Do List Items:"
EMPTY = "Empty!"
FAREWELL = "Bye!"

COMPLETED_MARKER = "[x]"
PENDING_MARKER = "[ ]"


class Theme(BaseModel):
    """Terminal styling, one colorama style string per role"""
    enabled: bool = True

    header: str = Fore.CYAN + Style.BRIGHT
    heading: str = Fore.MAGENTA + Style.BRIGHT
    completed: str = Fore.GREEN
    pending: str = ""
    sentinel: str = Fore.RED + Style.BRIGHT
    removed_label: str = Fore.YELLOW
    removed_pending: str = Fore.RED
    error: str = Fore.RED
    prompt: str = Fore.CYAN
    farewell: str = Fore.YELLOW + Style.BRIGHT
    empty: str = Fore.GREEN

    def paint(self, text: str, role: str) -> str:
        style = getattr(self, role)
        if not self.enabled or not style:
            return text
        return f"{style}{text}{Style.RESET_ALL}"


def format_item(item: ToDoItem, theme: Theme) -> str:
    if item.completed:
        return theme.paint(f"{COMPLETED_MARKER} {item.text}", "completed")
    return theme.paint(f"{PENDING_MARKER} {item.text}", "pending")


def format_items(items: List[ToDoItem], theme: Theme) -> List[str]:
    return [format_item(item, theme) for item in items]


def format_removed(item: ToDoItem, theme: Theme) -> str:
    """Removal confirmation, coloured by the removed item's state"""
    role = "completed" if item.completed else "removed_pending"
    return f"{theme.paint('Removed item:', 'removed_label')} {theme.paint(item.text, role)}"
