"""Tests for the drag-and-drop session state machine."""

from unittest.mock import MagicMock

import pytest

from taskboard.dragdrop import DragDropSession, DragOutcome, DragState

from .helpers import make_task


class TestDragDropSession:

    @pytest.fixture()
    def drag(self, store, catalog):
        return DragDropSession(store, catalog)

    def test_starts_idle(self, drag):
        assert drag.state == DragState.IDLE
        assert not drag.active
        assert drag.highlighted_column is None

    def test_completed_drag_moves_task(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        drag.hover_column("doing")
        outcome = drag.drop("doing")

        assert outcome == DragOutcome.DROPPED
        assert task.status == "doing"
        assert drag.state == DragState.IDLE
        assert drag.source_task_id is None
        assert drag.last_outcome == DragOutcome.DROPPED

    def test_cancelled_drag_leaves_status(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        outcome = drag.cancel_drag()

        assert outcome == DragOutcome.CANCELLED
        assert task.status == "todo"
        assert drag.state == DragState.IDLE

    def test_hover_sets_highlight_without_mutation(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        drag.hover_column("done")

        assert drag.state == DragState.HOVERING
        assert drag.highlighted_column == "done"
        assert task.status == "todo"

    def test_leave_returns_to_dragging_with_same_task(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        drag.hover_column("done")
        drag.leave_column()

        assert drag.state == DragState.DRAGGING
        assert drag.source_task_id == task.id
        assert drag.highlighted_column is None

    def test_drop_outside_columns_cancels(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        assert drag.drop(None) == DragOutcome.CANCELLED
        assert task.status == "todo"

    def test_drop_on_unknown_surface_cancels(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        assert drag.drop("trash") == DragOutcome.CANCELLED
        assert task.status == "todo"

    def test_drop_without_catalog_accepts_any_column(self, store):
        drag = DragDropSession(store)
        task = make_task(store)

        drag.begin_drag(task.id)
        assert drag.drop("anything") == DragOutcome.DROPPED
        assert task.status == "anything"

    def test_idle_transitions_are_ignored(self, drag):
        drag.hover_column("doing")
        drag.leave_column()

        assert drag.state == DragState.IDLE
        assert drag.drop("doing") is None
        assert drag.cancel_drag() is None
        assert drag.last_outcome is None

    def test_set_status_called_once_per_drop(self, catalog):
        store = MagicMock()
        drag = DragDropSession(store, catalog)

        drag.begin_drag("t1")
        drag.hover_column("doing")
        drag.leave_column()
        drag.hover_column("done")
        drag.drop("done")
        drag.drop("done")  # Session is idle again: no second move

        store.set_status.assert_called_once_with("t1", "done")

    def test_drop_after_task_deleted_is_harmless(self, drag, store):
        task = make_task(store)

        drag.begin_drag(task.id)
        store.remove(task.id)

        assert drag.drop("done") == DragOutcome.DROPPED
        assert len(store) == 0

    def test_new_drag_replaces_in_flight_gesture(self, drag, store):
        a = make_task(store, title="A")
        b = make_task(store, title="B")

        drag.begin_drag(a.id)
        drag.hover_column("done")
        drag.begin_drag(b.id)

        assert drag.state == DragState.DRAGGING
        assert drag.source_task_id == b.id
        drag.drop("done")
        assert a.status == "todo"
        assert b.status == "done"
