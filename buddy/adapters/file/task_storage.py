from buddy.ports.task_storage import TaskStorage
from buddy.domain.task import Task
from buddy.domain.errors import RecordFormatError, StorageError
from buddy.adapters.text.codec import parse_record, to_record
from pathlib import Path
from typing import Iterable
import logging
import os

logger = logging.getLogger(__name__)


class TextFileTaskStorage(TaskStorage):
    def __init__(self, path: Path) -> None:
        """Inicjalizuje magazyn w pliku tekstowym (jeden rekord na linię, UTF-8)."""
        self.path = Path(path)

    def load(self) -> list[Task]:
        """Wczytuje wszystkie zadania z pliku.
        Brak pliku → pusta lista. Puste linie są pomijane.
        Nieczytelny rekord przerywa odczyt (StorageError z numerem linii)."""

        tasks: list[Task] = []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue
                    try:
                        tasks.append(parse_record(line))
                    except RecordFormatError as e:
                        raise StorageError(f"{self.path.name}:{lineno}: {e}") from e
        except FileNotFoundError:
            logger.info("No task file at %s, starting with an empty list", self.path)
            return []
        except OSError as e:
            logger.error("Cannot read task file %s: %s", self.path, e)
            raise StorageError(str(e)) from e
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Zapisuje pełną listę atomowo: plik tymczasowy → fsync → os.replace."""

        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        count = 0
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for t in tasks:
                    f.write(to_record(t))
                    f.write("\n")
                    count += 1
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Cannot write task file %s: %s", self.path, e)
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                logger.warning("Could not remove swap file %s", tmp)
            raise StorageError(str(e)) from e
        logger.debug("Saved %d tasks to %s", count, self.path)
