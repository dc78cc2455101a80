"""
TO-DO APP - Item Schema Definition
==================================
In-memory to-do items and the ordered list that holds them.
Nothing here is ever written to disk.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator


class ItemStatus(str, Enum):
    """Item lifecycle states"""
    PENDING = "pending"       # Not done yet
    COMPLETED = "completed"   # Ticked off in the view menu


class ToDoItem(BaseModel):
    """Single to-do entry"""
    text: str                       # Trimmed, never empty
    completed: bool = False

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("item text must not be empty")
        return value

    @property
    def status(self) -> ItemStatus:
        return ItemStatus.COMPLETED if self.completed else ItemStatus.PENDING

    def matches(self, text: str) -> bool:
        """Case-insensitive comparison against another item text"""
        return self.text.casefold() == text.strip().casefold()


class TodoList(BaseModel):
    """Ordered to-do list, insertion order"""
    items: List[ToDoItem] = Field(default_factory=list)

    # Completion tracking
    @property
    def progress_pct(self) -> int:
        if not self.items:
            return 0
        completed = sum(1 for item in self.items if item.completed)
        return int((completed / len(self.items)) * 100)

    @property
    def status_summary(self) -> Dict[str, int]:
        summary = {status.value: 0 for status in ItemStatus}
        for item in self.items:
            summary[item.status.value] += 1
        return summary
