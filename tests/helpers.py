"""Test helpers shared across task board tests."""

from taskboard.store import TaskStore


def make_task(store: TaskStore, title: str = "A", **overrides):
    """Create a task with sensible defaults."""
    fields = {
        "title": title,
        "due_date": "2024-01-01",
        "status": "todo",
        "priority": "Low",
        "assignee": "u1",
    }
    fields.update(overrides)
    return store.create(**fields)
