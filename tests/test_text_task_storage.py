import pytest
from datetime import datetime
from buddy.adapters.file.task_storage import TextFileTaskStorage
from buddy.domain.task import Todo, Deadline, Event
from buddy.domain.errors import StorageError


@pytest.fixture
def task_file(tmp_path):
    return tmp_path / "data" / "TaskInfo.txt"


def make_tasks():
    return [
        Todo("Buy milk", done=True),
        Deadline("Submit report", by=datetime(2024, 10, 10, 15, 30)),
        Event("Team sync", start=datetime(2024, 10, 10, 9, 0), end=datetime(2024, 10, 10, 11, 0)),
    ]


def test_missing_file_loads_empty(task_file):
    assert TextFileTaskStorage(task_file).load() == []


def test_save_writes_one_record_per_line(task_file):
    TextFileTaskStorage(task_file).save(make_tasks())

    assert task_file.read_text(encoding="utf-8") == (
        "T | 1 | Buy milk\n"
        "D | 0 | Submit report | 10/10/2024 1530\n"
        "E | 0 | Team sync | 10/10/2024 0900 | 10/10/2024 1100\n"
    )
    assert not task_file.with_suffix(".txt.swap").exists()


def test_save_and_load_round_trip(task_file):
    storage = TextFileTaskStorage(task_file)
    storage.save(make_tasks())

    assert storage.load() == make_tasks()


def test_save_replaces_previous_content(task_file):
    storage = TextFileTaskStorage(task_file)
    storage.save(make_tasks())

    storage.save([Todo("Only one")])

    assert storage.load() == [Todo("Only one")]


def test_blank_lines_are_skipped(task_file):
    task_file.parent.mkdir(parents=True)
    task_file.write_text("T | 0 | A\n\n   \nT | 1 | B\n", encoding="utf-8")

    assert TextFileTaskStorage(task_file).load() == [Todo("A"), Todo("B", done=True)]


def test_bad_date_loads_with_field_unset(task_file):
    task_file.parent.mkdir(parents=True)
    task_file.write_text("D | 0 | Submit report | not a date\n", encoding="utf-8")

    assert TextFileTaskStorage(task_file).load() == [Deadline("Submit report")]


def test_unreadable_record_fails_whole_load(task_file):
    task_file.parent.mkdir(parents=True)
    task_file.write_text("T | 0 | A\nQ | 0 | ???\n", encoding="utf-8")

    with pytest.raises(StorageError) as exc:
        TextFileTaskStorage(task_file).load()

    assert "TaskInfo.txt:2" in str(exc.value)


def test_directory_in_place_of_file_is_storage_error(tmp_path):
    with pytest.raises(StorageError):
        TextFileTaskStorage(tmp_path).load()
