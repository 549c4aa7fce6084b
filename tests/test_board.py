"""Tests for the board projection and text summaries."""

from taskboard.board import board_summary, column_counts, partition, task_summary
from taskboard.schema import Comment

from .helpers import make_task


def test_partition_keeps_every_column_in_order(store, catalog):
    make_task(store, title="A", status="done")

    buckets = partition(store.list(), catalog)

    assert list(buckets) == ["todo", "doing", "done"]
    assert buckets["todo"] == []
    assert [t.title for t in buckets["done"]] == ["A"]


def test_partition_preserves_store_order(store, catalog):
    make_task(store, title="Older")
    make_task(store, title="Newer")

    assert [t.title for t in partition(store.list(), catalog)["todo"]] == ["Newer", "Older"]


def test_partition_skips_unknown_status(store, catalog):
    task = make_task(store)
    store.set_status(task.id, "Limbo")

    buckets = partition(store.list(), catalog)
    assert all(task not in bucket for bucket in buckets.values())


def test_column_counts(store, catalog):
    make_task(store, title="A")
    make_task(store, title="B")
    make_task(store, title="C", status="doing")

    assert column_counts(store.list(), catalog) == {"todo": 2, "doing": 1, "done": 0}


def test_task_summary_lists_comments(store, catalog):
    task = make_task(store, title="Survey", description="Measure the site")
    store.append_comment(
        task.id,
        Comment(id="c1", author=catalog.assignee("u2"), text="Booked", timestamp="2024-01-02T10:00:00Z"),
    )

    summary = task_summary(task)

    assert "Survey" in summary
    assert "Status: todo" in summary
    assert "Assignee: Ada" in summary
    assert "Comments: 1" in summary
    assert "Grace: Booked" in summary


def test_board_summary_marks_highlight(store, catalog):
    make_task(store, title="Survey")

    text = board_summary(store.list(), catalog, highlight="doing")

    assert "To Do (1)" in text
    assert "Doing (0) *" in text
    assert "(empty)" in text
    assert "Survey" in text
