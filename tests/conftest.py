"""Shared test fixtures for task board tests."""

import pytest

from taskboard.catalog import Catalog
from taskboard.config import BoardConfig
from taskboard.ids import SequentialIdGenerator
from taskboard.schema import Assignee, Column
from taskboard.session import BoardSession
from taskboard.store import TaskStore


@pytest.fixture()
def catalog() -> Catalog:
    """Small three-column catalog with two users."""
    return Catalog(
        columns=[
            Column(id="todo", title="To Do", color="bg-purple-500"),
            Column(id="doing", title="Doing", color="bg-blue-500"),
            Column(id="done", title="Done", color="bg-green-500"),
        ],
        assignees=[
            Assignee(id="u1", name="Ada", avatar_url="https://example.test/ada.png"),
            Assignee(id="u2", name="Grace", avatar_url="https://example.test/grace.png"),
        ],
    )


@pytest.fixture()
def store(catalog: Catalog) -> TaskStore:
    return TaskStore(catalog, ids=SequentialIdGenerator())


@pytest.fixture()
def session(catalog: Catalog) -> BoardSession:
    config = BoardConfig(current_user_id="u2")
    return BoardSession(catalog, ids=SequentialIdGenerator(), config=config)
