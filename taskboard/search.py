"""Free-text search over the task list."""
from typing import Iterable, List

from .schema import Task


def filter_tasks(tasks: Iterable[Task], query: str) -> List[Task]:
    """
    Return the tasks whose title or description contains ``query``
    (case-insensitive), in their original order.

    An empty query returns every task unchanged.
    """
    if not query:
        return list(tasks)
    return [t for t in tasks if t.matches(query)]
