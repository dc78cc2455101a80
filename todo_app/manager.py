"""
TO-DO APP - Item Store
======================
Owns the ordered list of to-do items for the lifetime of the process.
Insert-at-end, toggle-at-index, remove-at-index and duplicate lookup.
"""

import logging
from typing import List, Optional

from .schema import ToDoItem, TodoList

logger = logging.getLogger("todo_app")


class DuplicateItemError(ValueError):
    """Raised when an added item collides with an existing one"""

    def __init__(self, existing: ToDoItem):
        self.existing = existing
        super().__init__(f"That item ({existing.text}) already exists")


class ItemStore:
    """
    In-memory Item Store

    Items keep insertion order. Texts are unique ignoring case; the
    check happens when adding, toggling and removing never break it.
    """

    def __init__(self, todo_list: Optional[TodoList] = None):
        self.todo_list = todo_list if todo_list is not None else TodoList()

    def __len__(self) -> int:
        return len(self.todo_list.items)

    @property
    def items(self) -> List[ToDoItem]:
        """Snapshot of the current items, in order"""
        return list(self.todo_list.items)

    @property
    def is_empty(self) -> bool:
        return not self.todo_list.items

    # ========================================
    # LOOKUP
    # ========================================

    def find_case_insensitive(self, text: str) -> Optional[ToDoItem]:
        """Get the item whose text equals `text` ignoring case"""
        for item in self.todo_list.items:
            if item.matches(text):
                return item
        return None

    def exists_case_insensitive(self, text: str) -> bool:
        return self.find_case_insensitive(text) is not None

    # ========================================
    # MUTATIONS
    # ========================================

    def add(self, text: str) -> ToDoItem:
        """Append a new pending item (callers check for duplicates first)"""
        item = ToDoItem(text=text)

        existing = self.find_case_insensitive(item.text)
        if existing is not None:
            raise DuplicateItemError(existing)

        self.todo_list.items.append(item)
        logger.info(f"✅ Added item: {item.text} ({len(self)} total)")
        return item

    def toggle(self, index: int) -> ToDoItem:
        """Flip the completed flag at `index`, keeping its position"""
        self._check_index(index)
        item = self.todo_list.items[index]
        item.completed = not item.completed

        logger.debug(f"🔁 Toggled item {index}: {item.text} -> {item.status.value}")
        return item

    def remove(self, index: int) -> ToDoItem:
        """Remove and return the item at `index`"""
        self._check_index(index)
        item = self.todo_list.items.pop(index)
        logger.info(f"🗑️ Removed item: {item.text} ({len(self)} left)")
        return item

    # ========================================
    # HELPER METHODS
    # ========================================

    def _check_index(self, index: int) -> None:
        """Reject anything outside 0..len-1, negative indexes included"""
        if not 0 <= index < len(self):
            raise IndexError(f"Item index {index} out of range")
