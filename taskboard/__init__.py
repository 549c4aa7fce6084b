# Task board: in-memory board state, drag-and-drop moves and search
#
# Components:
#   ids.py       - Task/comment id generators
#   schema.py    - Data model (Task, Comment, Assignee, Column, Priority)
#   catalog.py   - Static columns + assignees, loaded from YAML
#   store.py     - Authoritative task collection and its mutations
#   dragdrop.py  - Drag gesture state machine driving column moves
#   search.py    - Free-text task filter
#   selection.py - Currently opened task
#   board.py     - Column partition and text summaries
#   session.py   - Orchestration context wiring all of the above
#   config.py    - YAML configuration and logging setup

from .catalog import Catalog, CatalogError, load_catalog
from .config import BoardConfig, ConfigError
from .dragdrop import DragDropSession, DragOutcome, DragState
from .schema import Assignee, Column, Comment, Priority, Task
from .search import filter_tasks
from .selection import SelectionState
from .session import BoardSession
from .store import TaskStore, ValidationError

__all__ = [
    "Assignee",
    "BoardConfig",
    "BoardSession",
    "Catalog",
    "CatalogError",
    "Column",
    "Comment",
    "ConfigError",
    "DragDropSession",
    "DragOutcome",
    "DragState",
    "Priority",
    "SelectionState",
    "Task",
    "TaskStore",
    "ValidationError",
    "filter_tasks",
    "load_catalog",
]
