"""Selection state: which single task (if any) is open in the detail view."""
from typing import Optional

from .schema import Task


class SelectionState:
    """Holds at most one selected task, by id."""

    def __init__(self):
        self.task_id: Optional[str] = None

    def select(self, task: Task) -> None:
        self.task_id = task.id

    def clear(self) -> None:
        self.task_id = None

    def is_selected(self, task_id: str) -> bool:
        return self.task_id is not None and self.task_id == task_id

    def __bool__(self) -> bool:
        return self.task_id is not None
