"""Tests for the free-text task filter."""

from taskboard.schema import Task
from taskboard.search import filter_tasks


def _tasks():
    return [
        Task(id="1", title="Flux capacitor", description=""),
        Task(id="2", title="Other", description="nothing to see"),
        Task(id="3", title="Wiring", description="Route the FLUX lines"),
    ]


def test_empty_query_returns_everything_in_order():
    tasks = _tasks()
    assert filter_tasks(tasks, "") == tasks


def test_match_is_case_insensitive_on_title():
    tasks = [Task(id="1", title="Flux capacitor"), Task(id="2", title="Other")]
    result = filter_tasks(tasks, "FLUX")
    assert [t.title for t in result] == ["Flux capacitor"]


def test_match_includes_description_and_keeps_order():
    result = filter_tasks(_tasks(), "flux")
    assert [t.id for t in result] == ["1", "3"]


def test_no_match_returns_empty():
    assert filter_tasks(_tasks(), "zebra") == []


def test_filter_has_no_side_effects():
    tasks = _tasks()
    before = [t.to_dict() for t in tasks]

    filter_tasks(tasks, "flux")
    filter_tasks(tasks, "flux")

    assert [t.to_dict() for t in tasks] == before
    assert len(tasks) == 3


def test_accepts_any_iterable():
    result = filter_tasks(iter(_tasks()), "wiring")
    assert [t.id for t in result] == ["3"]
