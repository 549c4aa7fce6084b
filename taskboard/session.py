"""
Board session: the single orchestration context a front-end talks to.

Owns the task store, catalog, id generator, selection, drag session,
search query and change subscribers. Every user gesture maps to one
method call here; cross-component rules (e.g. deleting the selected task
clears the selection) are enforced in that one place.

Events emitted to subscribers:
    task_created      task=Task
    task_moved        task_id=str, column_id=str
    comment_added     task_id=str, comment=Comment
    task_deleted      task_id=str
    selection_changed task_id=str|None
    query_changed     query=str
"""
import logging
from typing import Callable, Dict, List, Optional

from .board import partition
from .catalog import Catalog, read_catalog_file
from .config import BoardConfig
from .dragdrop import DragDropSession, DragOutcome
from .ids import SequentialIdGenerator, TimestampIdGenerator
from .schema import Comment, Task, utc_now
from .search import filter_tasks
from .selection import SelectionState
from .store import TaskStore, hydrate_task

logger = logging.getLogger(__name__)


class BoardSession:
    """Explicit application state for one running board."""

    def __init__(
        self,
        catalog: Catalog,
        store: Optional[TaskStore] = None,
        ids=None,
        config: Optional[BoardConfig] = None,
    ):
        self.config = config or BoardConfig()
        self.catalog = catalog
        self.ids = ids or (store.ids if store else TimestampIdGenerator())
        self.store = store or TaskStore(
            catalog, ids=self.ids, id_prefix=self.config.id_prefix_task
        )
        self.selection = SelectionState()
        self.drag = DragDropSession(self.store, catalog)
        self.query = ""
        self.subscribers: Dict[str, list] = {}  # event_type -> list of callbacks

    @classmethod
    def from_config(cls, config: Optional[BoardConfig] = None) -> "BoardSession":
        """Build catalog, seed tasks and id generator from configuration."""
        config = config or BoardConfig.load()
        config.resolve_paths()
        raw = read_catalog_file(config.catalog_path)
        catalog = Catalog.from_dict(raw)

        seeds: List[Task] = []
        if config.seed_tasks:
            seeds = [hydrate_task(t, catalog) for t in raw.get("tasks") or []]

        ids = SequentialIdGenerator() if config.sequential_ids else TimestampIdGenerator()
        store = TaskStore(catalog, ids=ids, tasks=seeds, id_prefix=config.id_prefix_task)
        logger.info(
            f"Board session ready: {len(catalog.columns)} columns, {len(store)} tasks"
        )
        return cls(catalog, store=store, ids=ids, config=config)

    # ── subscriptions ────────────────────────────

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for an event type."""
        if event_type not in self.subscribers:
            self.subscribers[event_type] = []
        self.subscribers[event_type].append(callback)

    def _emit(self, event_type: str, **kwargs) -> None:
        """Emit an event to all subscribers. A failing callback never aborts a mutation."""
        for callback in self.subscribers.get(event_type, []):
            try:
                callback(**kwargs)
            except Exception:
                logger.exception(f"Error in {event_type} callback")

    # ── tasks ────────────────────────────────────

    def add_task(self, **fields) -> Task:
        """Create a task (raises ValidationError on missing title/due date)."""
        task = self.store.create(**fields)
        self._emit("task_created", task=task)
        return task

    def move_task(self, task_id: str, column_id: str) -> None:
        """
        Move a task to a column (permissive unless strict_columns is set).

        Notifies task_moved only when the status actually changed.
        """
        if self.config.strict_columns:
            self.catalog.column(column_id)
        task = self.store.get(task_id)
        if task is None:
            logger.debug(f"move_task: task {task_id} not found, ignoring")
            return
        if task.status == column_id:
            return
        self.store.set_status(task_id, column_id)
        self._emit("task_moved", task_id=task_id, column_id=column_id)

    def add_comment(
        self,
        task_id: str,
        text: str,
        author_id: Optional[str] = None,
    ) -> Optional[Comment]:
        """
        Post a comment on a task.

        Blank text is ignored. The author defaults to the configured current
        user. Returns the new comment, or None if nothing was posted.
        """
        if not text or not text.strip():
            return None
        if task_id not in self.store:
            logger.debug(f"add_comment: task {task_id} not found, ignoring")
            return None
        author = self.catalog.assignee(author_id or self.config.current_user_id)
        comment = Comment(
            id=self.store.fresh_comment_id(self.config.id_prefix_comment),
            author=author,
            text=text,
            timestamp=utc_now(),
        )
        self.store.append_comment(task_id, comment)
        self._emit("comment_added", task_id=task_id, comment=comment)
        return comment

    def delete_task(self, task_id: str) -> None:
        """
        Delete a task and drop it from the selection in the same step.

        The caller is responsible for confirming with the user first.
        """
        existed = task_id in self.store
        self.store.remove(task_id)
        if self.selection.is_selected(task_id):
            self.selection.clear()
            self._emit("selection_changed", task_id=None)
        if existed:
            self._emit("task_deleted", task_id=task_id)

    # ── selection ────────────────────────────────

    def select_task(self, task_id: str) -> Optional[Task]:
        """Open a task in the detail view. Unknown ids leave selection unchanged."""
        task = self.store.get(task_id)
        if task is None:
            return None
        self.selection.select(task)
        self._emit("selection_changed", task_id=task.id)
        return task

    def close_task(self) -> None:
        if not self.selection:
            return
        self.selection.clear()
        self._emit("selection_changed", task_id=None)

    @property
    def selected_task(self) -> Optional[Task]:
        """The selected task as currently stored (latest comments included)."""
        if not self.selection:
            return None
        return self.store.get(self.selection.task_id)

    # ── search & views ───────────────────────────

    def set_query(self, query: str) -> None:
        self.query = query or ""
        self._emit("query_changed", query=self.query)

    def visible_tasks(self) -> List[Task]:
        """Tasks matching the current search query, most recent first."""
        return filter_tasks(self.store.list(), self.query)

    def board(self) -> Dict[str, List[Task]]:
        """Visible tasks partitioned by column, in catalog order."""
        return partition(self.visible_tasks(), self.catalog)

    # ── drag and drop ────────────────────────────

    def begin_drag(self, task_id: str) -> None:
        self.drag.begin_drag(task_id)

    def hover_column(self, column_id: str) -> None:
        self.drag.hover_column(column_id)

    def leave_column(self) -> None:
        self.drag.leave_column()

    def drop(self, column_id: Optional[str]) -> Optional[DragOutcome]:
        """Release the dragged card; a completed drop notifies task_moved."""
        task = self.store.get(self.drag.source_task_id) if self.drag.active else None
        old_status = task.status if task else None
        task_id = self.drag.source_task_id
        outcome = self.drag.drop(column_id)
        if outcome == DragOutcome.DROPPED and task is not None and old_status != column_id:
            self._emit("task_moved", task_id=task_id, column_id=column_id)
        return outcome

    def cancel_drag(self) -> Optional[DragOutcome]:
        return self.drag.cancel_drag()
