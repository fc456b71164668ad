from buddy.adapters.memory.task_store import TaskStore
from buddy.services.task_service import TaskService
from buddy.domain.task import Todo, Event
from buddy.domain.errors import TaskIndexError, TaskValidationError
import pytest


def format_task(task) -> str:
    return f"✅ {task.description} | done={task.done}"


def test_add_task():
    # Arrange
    service = TaskService(TaskStore())

    # Act
    size = service.add_task(Todo("Buy milk"))

    # Assert
    items = service.list_tasks()
    assert size == 1
    assert len(items) == 1
    assert "Buy milk" in format_task(items[0])


def test_list_empty_after_remove():
    # Arrange
    service = TaskService(TaskStore())

    # Act
    service.add_task(Todo("Buy milk"))
    service.remove_task("1")

    # Assert
    assert service.list_tasks() == []
    assert service.count() == 0


def test_done_marks_as_completed():
    service = TaskService(TaskStore([Todo("A"), Todo("B")]))

    t = service.mark_done("2")

    assert t.done is True
    assert service.list_tasks()[1].done is True
    assert service.list_tasks()[0].done is False


def test_done_is_idempotent():
    service = TaskService(TaskStore([Todo("A")]))

    t1 = service.mark_done("1")
    t2 = service.mark_done("1")

    assert t1 is t2
    assert t2.done is True


def test_undone_restores_open_state():
    service = TaskService(TaskStore([Event("A", done=True)]))

    t = service.mark_undone("1")

    assert t.done is False


@pytest.mark.parametrize("position", ["0", "2", "-1", "x", ""])
def test_bad_position_raises_without_mutation(position):
    # Arrange
    service = TaskService(TaskStore([Todo("A")]))

    # Assert
    with pytest.raises(TaskIndexError):
        service.mark_done(position)
    with pytest.raises(TaskIndexError):
        service.mark_undone(position)
    with pytest.raises(TaskIndexError):
        service.remove_task(position)

    assert service.list_tasks() == [Todo("A")]


def test_find_delegates_to_store():
    service = TaskService(TaskStore([Todo("Buy milk"), Todo("Walk dog")]))

    assert service.find_tasks("DOG") == [Todo("Walk dog")]
    with pytest.raises(TaskValidationError):
        service.find_tasks(" ")
