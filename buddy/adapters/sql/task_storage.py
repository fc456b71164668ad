from __future__ import annotations
from typing import Iterable
import logging
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from pathlib import Path
from datetime import datetime
from buddy.ports.task_storage import TaskStorage
from buddy.domain.task import Task, Todo, Deadline, Event, kind_of
from buddy.domain.enums import TaskKind
from buddy.domain.errors import DateFormatError, StorageError
from buddy.adapters.text.codec import format_date, parse_date

logger = logging.getLogger(__name__)


class SqlTaskStorage(TaskStorage):
    def __init__(self, url: str | Path) -> None:
        """
        url: np. 'sqlite:///data/tasks.db' lub Path do pliku (zostanie zrobiony URL)
        """
        if isinstance(url, Path):
            url.parent.mkdir(parents=True, exist_ok=True)
            db_url = f"sqlite:///{url}"
        else:
            db_url = url

        self.engine = db.create_engine(db_url, future=True)
        self.meta = db.MetaData()

        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("position", db.Integer, primary_key=True),
            db.Column("kind", db.String(1), nullable=False),          # 'T'/'D'/'E'
            db.Column("done", db.Boolean, nullable=False),
            db.Column("description", db.String, nullable=False),
            db.Column("first_at", db.String, nullable=True),          # by / from, 'dd/MM/yyyy HHmm'
            db.Column("second_at", db.String, nullable=True),         # to
        )

        try:
            self.meta.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def _decode_dt(self, value: str | None, position: int) -> datetime | None:
        if not value:
            return None
        try:
            return parse_date(value)
        except DateFormatError as e:
            logger.warning("Warning: %s Field left unset for stored task #%d.", e, position)
            return None

    def _to_row(self, position: int, task: Task) -> dict:
        first_at = second_at = None
        match task:
            case Deadline(by=by):
                first_at = format_date(by) if by else None
            case Event(start=start, end=end):
                first_at = format_date(start) if start else None
                second_at = format_date(end) if end else None
        return {
            "position": position,
            "kind": kind_of(task).value,
            "done": task.done,
            "description": task.description,
            "first_at": first_at,
            "second_at": second_at,
        }

    def _from_row(self, row) -> Task:
        try:
            kind = TaskKind(row["kind"])
        except ValueError as e:
            raise StorageError(f"Unknown task type '{row['kind']}' at position {row['position']}") from e

        match kind:
            case TaskKind.TODO:
                return Todo(row["description"], done=bool(row["done"]))
            case TaskKind.DEADLINE:
                return Deadline(
                    row["description"],
                    done=bool(row["done"]),
                    by=self._decode_dt(row["first_at"], row["position"]),
                )
            case TaskKind.EVENT:
                return Event(
                    row["description"],
                    done=bool(row["done"]),
                    start=self._decode_dt(row["first_at"], row["position"]),
                    end=self._decode_dt(row["second_at"], row["position"]),
                )

    def load(self) -> list[Task]:
        stmt = db.select(self.tasks).order_by(self.tasks.c.position.asc())
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            logger.error("Cannot read tasks from %s: %s", self.engine.url, e)
            raise StorageError(str(e)) from e
        tasks = [self._from_row(r) for r in rows]
        logger.debug("Loaded %d tasks from %s", len(tasks), self.engine.url)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        # pełna podmiana w jednej transakcji: stary stan albo nowy
        rows = [self._to_row(i, t) for i, t in enumerate(tasks)]
        try:
            with self.engine.begin() as conn:
                conn.execute(db.delete(self.tasks))
                if rows:
                    conn.execute(db.insert(self.tasks), rows)
        except SQLAlchemyError as e:
            logger.error("Cannot write tasks to %s: %s", self.engine.url, e)
            raise StorageError(str(e)) from e
        logger.debug("Saved %d tasks to %s", len(rows), self.engine.url)
