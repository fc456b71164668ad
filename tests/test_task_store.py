from buddy.adapters.memory.task_store import TaskStore
from buddy.domain.task import Todo, Deadline
from buddy.domain.errors import TaskIndexError, TaskValidationError
import pytest


@pytest.fixture
def store():
    """Lista z trzema zadaniami w znanej kolejności."""
    return TaskStore([Todo("Buy milk"), Deadline("Submit report"), Todo("buy MILK again")])


def test_add_returns_new_size():
    s = TaskStore()

    assert s.add(Todo("A")) == 1
    assert s.add(Todo("B")) == 2
    assert len(s) == 2


def test_get_by_position(store):
    assert store.get(1).description == "Submit report"


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_get_out_of_range_raises(store, index):
    with pytest.raises(TaskIndexError):
        store.get(index)


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_out_of_range_does_not_mutate(store, index):
    before = store.tasks

    with pytest.raises(TaskIndexError):
        store.remove(index)

    assert store.tasks == before


def test_remove_returns_task_and_keeps_order(store):
    removed = store.remove(0)

    assert removed == Todo("Buy milk")
    assert [t.description for t in store] == ["Submit report", "buy MILK again"]


def test_search_is_case_insensitive_and_ordered(store):
    results = store.search("Milk")

    assert [t.description for t in results] == ["Buy milk", "buy MILK again"]


def test_search_without_hits_is_empty(store):
    assert store.search("dentist") == []


@pytest.mark.parametrize("keyword", ["", "   "])
def test_search_rejects_empty_keyword(store, keyword):
    with pytest.raises(TaskValidationError):
        store.search(keyword)


def test_tasks_is_a_copy(store):
    snapshot = store.tasks
    snapshot.clear()

    assert len(store) == 3
