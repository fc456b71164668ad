from buddy.config import DEFAULT_EXIT_GRACE_SECONDS, load_settings
from pathlib import Path
import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["BUDDY_DATA_FILE", "BUDDY_BACKEND", "BUDDY_EXIT_GRACE_SECONDS", "BUDDY_LOG_LEVEL", "BUDDY_LOG_FILE"]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = load_settings()

    assert s.data_file.name == "TaskInfo.txt"
    assert s.backend == "text"
    assert s.exit_grace_seconds == DEFAULT_EXIT_GRACE_SECONDS
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_environment_is_read(monkeypatch, tmp_path):
    monkeypatch.setenv("BUDDY_DATA_FILE", str(tmp_path / "tasks.db"))
    monkeypatch.setenv("BUDDY_BACKEND", "SQL")
    monkeypatch.setenv("BUDDY_EXIT_GRACE_SECONDS", "0.5")
    monkeypatch.setenv("BUDDY_LOG_LEVEL", "debug")

    s = load_settings()

    assert s.data_file == tmp_path / "tasks.db"
    assert s.backend == "sql"
    assert s.exit_grace_seconds == 0.5
    assert s.log_level == "DEBUG"


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("BUDDY_BACKEND", "sql")

    s = load_settings(data_file=Path("x.txt"), backend=None)

    assert s.data_file == Path("x.txt")
    assert s.backend == "sql"


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_bad_grace_period_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("BUDDY_EXIT_GRACE_SECONDS", raw)

    assert load_settings().exit_grace_seconds == DEFAULT_EXIT_GRACE_SECONDS


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        load_settings(backend="csv")
