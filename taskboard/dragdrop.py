"""
Drag-and-drop session: the state machine behind moving a card between columns.

Gesture lifecycle:
  IDLE → DRAGGING → HOVERING ⇄ DRAGGING → (DROPPED | CANCELLED) → IDLE

Only the dragged task's id is recorded; the drop column alone decides the
new status. Hovering drives the highlight affordance and never mutates
the store. A completed drop calls TaskStore.set_status exactly once.
"""
import logging
from enum import Enum
from typing import Optional

from .catalog import Catalog
from .store import TaskStore

logger = logging.getLogger(__name__)


class DragState(Enum):
    """Live states of a drag gesture."""
    IDLE = "idle"
    DRAGGING = "dragging"
    HOVERING = "hovering"


class DragOutcome(Enum):
    """How a finished gesture ended."""
    DROPPED = "dropped"
    CANCELLED = "cancelled"


class DragDropSession:
    """Coordinates one move gesture at a time against a TaskStore."""

    def __init__(self, store: TaskStore, catalog: Optional[Catalog] = None):
        """
        Args:
            store: store receiving set_status on a completed drop
            catalog: when given, only its columns count as drop surfaces
        """
        self.store = store
        self.catalog = catalog
        self.state = DragState.IDLE
        self.source_task_id: Optional[str] = None
        self.candidate_column_id: Optional[str] = None
        self.last_outcome: Optional[DragOutcome] = None

    @property
    def active(self) -> bool:
        return self.state != DragState.IDLE

    @property
    def highlighted_column(self) -> Optional[str]:
        """Column whose drop surface should be highlighted, if any."""
        if self.state == DragState.HOVERING:
            return self.candidate_column_id
        return None

    def begin_drag(self, task_id: str) -> None:
        """User picked up a card."""
        if self.active:
            # A second pickup replaces the in-flight gesture; nothing was dropped.
            logger.debug(f"Drag of {self.source_task_id} replaced by {task_id}")
        self.state = DragState.DRAGGING
        self.source_task_id = task_id
        self.candidate_column_id = None

    def hover_column(self, column_id: str) -> None:
        """Pointer entered a column's drop surface."""
        if not self.active:
            return
        self.state = DragState.HOVERING
        self.candidate_column_id = column_id

    def leave_column(self) -> None:
        """Pointer left the drop surface; the gesture keeps its task id."""
        if self.state != DragState.HOVERING:
            return
        self.state = DragState.DRAGGING
        self.candidate_column_id = None

    def drop(self, column_id: Optional[str]) -> Optional[DragOutcome]:
        """
        User released the card.

        Returns the outcome, or None when no gesture was in flight.
        Releasing outside any valid drop surface cancels the gesture.
        """
        if not self.active:
            return None
        if not self._is_drop_surface(column_id):
            return self._finish(DragOutcome.CANCELLED)

        task_id = self.source_task_id
        self.store.set_status(task_id, column_id)
        return self._finish(DragOutcome.DROPPED, column_id)

    def cancel_drag(self) -> Optional[DragOutcome]:
        """Gesture ended without a drop target."""
        if not self.active:
            return None
        return self._finish(DragOutcome.CANCELLED)

    # ── internals ────────────────────────────────

    def _is_drop_surface(self, column_id: Optional[str]) -> bool:
        if not column_id:
            return False
        if self.catalog is None:
            return True
        return self.catalog.has_column(column_id)

    def _finish(self, outcome: DragOutcome, column_id: Optional[str] = None) -> DragOutcome:
        if outcome == DragOutcome.DROPPED:
            logger.debug(f"Drag of {self.source_task_id} dropped on '{column_id}'")
        else:
            logger.debug(f"Drag of {self.source_task_id} cancelled")
        self.state = DragState.IDLE
        self.source_task_id = None
        self.candidate_column_id = None
        self.last_outcome = outcome
        return outcome
