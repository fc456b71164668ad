from buddy.domain.task import Todo, Deadline, Event, kind_of
from buddy.domain.enums import TaskKind
from datetime import datetime
import pytest


def test_new_tasks_are_not_done():
    assert Todo("A").done is False
    assert Deadline("B").done is False
    assert Event("C").done is False


@pytest.mark.parametrize("task", [Todo("A"), Deadline("B", by=datetime(2024, 10, 10, 15, 30)), Event("C")])
def test_mark_then_unmark_restores_not_done(task):
    # Act
    task.mark_done()
    task.mark_undone()

    # Assert
    assert task.done is False


def test_mark_done_is_idempotent():
    t = Todo("A")

    t.mark_done()
    t.mark_done()

    assert t.done is True


def test_mark_undone_is_idempotent():
    t = Deadline("A")

    t.mark_undone()
    t.mark_undone()

    assert t.done is False


def test_kind_of_returns_type_tag():
    assert kind_of(Todo("A")) == TaskKind.TODO
    assert kind_of(Deadline("A")) == TaskKind.DEADLINE
    assert kind_of(Event("A")) == TaskKind.EVENT
    assert str(TaskKind.EVENT) == "E"


def test_variants_with_same_description_are_not_equal():
    assert Todo("A") != Deadline("A")
