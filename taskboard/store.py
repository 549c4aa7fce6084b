"""
Task store: the authoritative in-memory collection of tasks.

Ordering is most-recent-first; create() inserts at the head.
Mutations on an id that no longer exists (set_status, append_comment,
remove) are silent no-ops: they can race with a delete from another
gesture and must never raise.
"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from .catalog import Catalog, CatalogError
from .ids import TimestampIdGenerator
from .schema import Assignee, Comment, Priority, Task, normalize_due_date

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised by TaskStore.create when a field is missing or invalid."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"{field} is required")


class TaskStore:
    """In-memory store for board tasks."""

    def __init__(
        self,
        catalog: Catalog,
        ids=None,
        tasks: Optional[Iterable[Task]] = None,
        id_prefix: str = "task",
    ):
        """Initialize with a catalog, an id generator and optional seed tasks."""
        self.catalog = catalog
        self.ids = ids or TimestampIdGenerator()
        self.id_prefix = id_prefix
        self._tasks: List[Task] = []
        # Every comment id handed out this session, including deleted tasks' threads
        self._comment_ids: Set[str] = set()
        for task in tasks or []:
            if self.get(task.id) is not None:
                raise ValueError(f"Duplicate task id in seed data: {task.id}")
            task.comments_count = len(task.comments)
            self._comment_ids.update(c.id for c in task.comments)
            self._tasks.append(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and self.get(task_id) is not None

    # ── queries ──────────────────────────────────

    def list(self) -> List[Task]:
        """Snapshot of all tasks, most recent first."""
        return list(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ── mutations ────────────────────────────────

    def create(
        self,
        title: Optional[str] = None,
        due_date: Union[str, date, None] = None,
        status: Optional[str] = None,
        assignee: Union[str, Assignee, None] = None,
        priority: Union[str, Priority] = Priority.MEDIUM,
        description: str = "",
    ) -> Task:
        """
        Create a task and insert it at the head of the collection.

        Raises:
            ValidationError: title is empty after trimming, due_date is missing,
                or priority is a non-empty string that names no Priority.
            CatalogError: status or assignee is not in the catalog.

        Neither failure mutates the store.
        """
        if not title or not title.strip():
            raise ValidationError("title", "Title is required")
        due = normalize_due_date(due_date)
        if not due:
            raise ValidationError("due_date", "Due date is required")
        if (
            isinstance(priority, str)
            and priority.strip()
            and priority.strip().upper() not in Priority.__members__
        ):
            raise ValidationError("priority", f"Unknown priority: {priority}")

        if status is None:
            status = self.catalog.column_ids[0]
        column = self.catalog.column(status)

        if assignee is None:
            users = list(self.catalog.assignees.values())
            if not users:
                raise CatalogError("Catalog has no assignees to default to")
            owner = users[0]
        else:
            owner = self.catalog.resolve_assignee(assignee)

        task = Task(
            id=self._fresh_id(),
            title=title,
            description=description or "",
            status=column.id,
            priority=Priority.from_str(priority),
            due_date=due,
            assignee=owner,
        )
        self._tasks.insert(0, task)
        logger.info(f"Created task {task.id} in '{task.status}': {task.title}")
        return task

    def set_status(self, task_id: str, column_id: str) -> None:
        """Move a task to another column. Unknown task ids are ignored."""
        task = self.get(task_id)
        if task is None:
            logger.debug(f"set_status: task {task_id} not found, ignoring")
            return
        if task.status == column_id:
            return
        old = task.status
        task.status = column_id
        logger.info(f"Moved task {task_id}: '{old}' -> '{column_id}'")

    def append_comment(self, task_id: str, comment: Comment) -> None:
        """Append a comment to a task's thread. Unknown task ids are ignored."""
        task = self.get(task_id)
        if task is None:
            logger.debug(f"append_comment: task {task_id} not found, ignoring")
            return
        task.append_comment(comment)
        self._comment_ids.add(comment.id)
        logger.info(f"Comment {comment.id} added to task {task_id} by {comment.author.id}")

    def remove(self, task_id: str) -> None:
        """Delete a task. Idempotent."""
        task = self.get(task_id)
        if task is None:
            logger.debug(f"remove: task {task_id} not found, ignoring")
            return
        self._tasks.remove(task)
        logger.info(f"Removed task {task_id}")

    # ── id management ────────────────────────────

    def _fresh_id(self) -> str:
        while True:
            candidate = self.ids.next_id(self.id_prefix)
            if self.get(candidate) is None:
                return candidate

    def fresh_comment_id(self, prefix: str = "comment") -> str:
        """Next comment id not yet used by any comment this session."""
        while True:
            candidate = self.ids.next_id(prefix)
            if candidate not in self._comment_ids:
                return candidate


def hydrate_task(data: Dict[str, Any], catalog: Catalog) -> Task:
    """
    Build a Task from seed data where people may be given by id.

    ``assignee`` and each comment ``author`` may be an assignee id or a
    full mapping; ids are resolved against the catalog.
    """
    data = dict(data)
    assignee = data.get("assignee")
    if isinstance(assignee, str):
        data["assignee"] = catalog.assignee(assignee).to_dict()
    comments = []
    for raw in data.get("comments") or []:
        raw = dict(raw)
        if isinstance(raw.get("author"), str):
            raw["author"] = catalog.assignee(raw["author"]).to_dict()
        comments.append(raw)
    data["comments"] = comments
    task = Task.from_dict(data)
    catalog.column(task.status)
    return task
