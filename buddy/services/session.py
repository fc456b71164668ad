from __future__ import annotations
import logging
from dataclasses import dataclass
from buddy.config import Settings
from buddy.domain.task import Task
from buddy.domain.errors import TaskIndexError, TaskValidationError
from buddy.ports.task_storage import TaskStorage
from buddy.adapters.memory.task_store import TaskStore
from buddy.adapters.text.codec import to_display
from buddy.services.task_service import TaskService
from buddy.services.command_parser import (
    AddTask, DeleteTask, ExitSession, FindTasks, ListTasks, MarkTask, UnmarkTask,
    error_message, parse_command,
)


### COMMENTS
# ==========================================================
# Sesja (services/session.py) - dispatch komend i teksty odpowiedzi.
# ==========================================================
# Rola:
# - linia od użytkownika → parse_command → TaskService → gotowy tekst odpowiedzi.
# - Jedyny efekt uboczny poza zmianą listy: `bye` zapisuje całą listę przez TaskStorage.
#
# Zasady:
# - Błędy odwracalne (walidacja, zła pozycja) → Response(ok=False), lista bez zmian.
# - StorageError (odczyt przy starcie, zapis przy `bye`) przechodzi dalej - to błąd krytyczny.
# - Pauza przed zamknięciem (settings.exit_grace_seconds) należy do interfejsu, nie do sesji.

logger = logging.getLogger(__name__)

INVALID_INDEX_MESSAGE = "Invalid task index."
EMPTY_KEYWORD_MESSAGE = "Please enter your search keyword."
NO_RESULTS_MESSAGE = "No tasks found matching the search keyword."
GOODBYE_MESSAGE = "Goodbye. Take care and see you again!"


@dataclass(frozen=True)
class Response:
    text: str
    ok: bool = True
    exit: bool = False


def _numbered(header: str, tasks: list[Task]) -> str:
    lines = [header + "\n"]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}. {to_display(task)}\n")
    return "".join(lines)


class SessionController:
    """
    Obsługuje jedną sesję rozmowy z użytkownikiem.

    :param settings: Konfiguracja sesji.
    :param storage: Magazyn, do którego `bye` zapisuje listę.
    :param store: Lista zadań; domyślnie pusta.
    """
    def __init__(self, settings: Settings, storage: TaskStorage, store: TaskStore | None = None) -> None:
        self.settings = settings
        self.storage = storage
        self.store = store if store is not None else TaskStore()
        self.service = TaskService(self.store)

    @classmethod
    def open(cls, settings: Settings, storage: TaskStorage) -> "SessionController":
        """Tworzy sesję z zadaniami wczytanymi z `storage` (wszystkie albo StorageError)."""
        tasks = storage.load()
        logger.info("Session opened with %d tasks", len(tasks))
        return cls(settings, storage, TaskStore(tasks))

    def handle(self, line: str) -> Response:
        """
        Wykonuje jedną komendę i zwraca tekst odpowiedzi.

        :raises StorageError: Gdy zapis przy `bye` się nie powiódł.
        """
        try:
            command = parse_command(line)
        except TaskValidationError as e:
            logger.debug("Rejected command %r: %s", line, e)
            return Response(error_message(e.field), ok=False)

        try:
            match command:
                case AddTask(task=task):
                    size = self.service.add_task(task)
                    return Response(
                        f"Got it. I've added this task: {to_display(task)}"
                        f"\nNow you have {size} tasks in the list."
                    )
                case ListTasks():
                    return Response(_numbered("Here are the tasks in your list:", self.service.list_tasks()))
                case MarkTask(index=index):
                    task = self.service.mark_done(index)
                    return Response(f"Nice! I've marked this task as done: {to_display(task)}")
                case UnmarkTask(index=index):
                    task = self.service.mark_undone(index)
                    return Response(f"OK, I've marked this task as not done yet: {to_display(task)}")
                case DeleteTask(index=index):
                    task = self.service.remove_task(index)
                    return Response(
                        f"Noted. I've removed this task: {to_display(task)}"
                        f"\nNow you have {self.service.count()} tasks in the list."
                    )
                case FindTasks(keyword=keyword):
                    return self._find(keyword)
                case ExitSession():
                    self.save()
                    return Response(GOODBYE_MESSAGE, exit=True)
        except TaskIndexError as e:
            logger.debug("Rejected command %r: %s", line, e)
            return Response(INVALID_INDEX_MESSAGE, ok=False)
        raise TypeError(f"Unsupported command: {command!r}")

    def _find(self, keyword: str) -> Response:
        try:
            results = self.service.find_tasks(keyword)
        except TaskValidationError:
            return Response(EMPTY_KEYWORD_MESSAGE, ok=False)
        if not results:
            return Response(NO_RESULTS_MESSAGE)
        return Response(_numbered("Search results:", results))

    def save(self) -> None:
        """Zapisuje całą listę przez magazyn (StorageError przechodzi dalej)."""
        self.storage.save(self.store.tasks)
        logger.info("Session saved %d tasks", len(self.store))
