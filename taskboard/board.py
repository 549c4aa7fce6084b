"""
Board projection: tasks partitioned by column, plus text summaries.

Nothing here is stored; every view is derived from the task list on read.
"""
from typing import Dict, Iterable, List, Optional

from .catalog import Catalog
from .schema import Priority, Task

PRIORITY_MARKS = {
    Priority.LOW: "▽",
    Priority.MEDIUM: "◇",
    Priority.HIGH: "▲",
}


def partition(tasks: Iterable[Task], catalog: Catalog) -> Dict[str, List[Task]]:
    """
    One bucket per catalog column, in catalog order (empty buckets kept).

    Tasks whose status is not a catalog column are not rendered.
    """
    buckets: Dict[str, List[Task]] = {cid: [] for cid in catalog.column_ids}
    for task in tasks:
        if task.status in buckets:
            buckets[task.status].append(task)
    return buckets


def column_counts(tasks: Iterable[Task], catalog: Catalog) -> Dict[str, int]:
    """Task count per column (the column header badge)."""
    return {cid: len(bucket) for cid, bucket in partition(tasks, catalog).items()}


def task_summary(task: Task) -> str:
    """Format a task as a multi-line detail summary."""
    lines = [
        f"{task.id}: {task.title}",
        f"Status: {task.status}",
        f"Priority: {task.priority.value}",
        f"Due: {task.due_date}",
    ]
    if task.assignee:
        lines.append(f"Assignee: {task.assignee.name}")
    if task.description:
        lines.append(f"Description: {task.description}")
    lines.append(f"Comments: {task.comments_count}  Attachments: {task.attachments_count}")
    for comment in task.comments:
        lines.append(f"  [{comment.timestamp}] {comment.author.name}: {comment.text}")
    return "\n".join(lines)


def board_summary(
    tasks: Iterable[Task],
    catalog: Catalog,
    highlight: Optional[str] = None,
) -> str:
    """Format the whole board, column by column."""
    buckets = partition(tasks, catalog)
    lines: List[str] = []
    for column in catalog.columns:
        bucket = buckets[column.id]
        marker = " *" if column.id == highlight else ""
        lines.append(f"{column.title} ({len(bucket)}){marker}")
        if not bucket:
            lines.append("  (empty)")
        for task in bucket:
            mark = PRIORITY_MARKS.get(task.priority, "?")
            owner = task.assignee.name if task.assignee else "-"
            lines.append(f"  {mark} {task.id}: {task.title} [{owner}, due {task.due_date}]")
    return "\n".join(lines)
