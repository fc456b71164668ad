from buddy.adapters.memory.task_store import TaskStore
from buddy.domain.task import Task
from buddy.services.command_parser import parse_index


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_service.py) - przypadki użycia.
# ==========================================================
# Rola:
# - Operacje na liście zadań sesji: dodaj, listuj, oznacz, odznacz, usuń, szukaj.
# - Zamiana numerów pozycji użytkownika (1-based, tekst) na indeksy listy.
#
# Zasady:
# - Serwis nie formatuje odpowiedzi - to robi sesja.
# - Błędy domenowe przechodzą dalej bez zmian:
#     * zła pozycja → `TaskIndexError` (lista bez zmian),
#     * puste słowo kluczowe → `TaskValidationError`.



class TaskService:
    """
    Serwis przypadków użycia dla listy zadań.

    :param store: Lista zadań bieżącej sesji.
    """
    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def add_task(self, task: Task) -> int:
        """
            Dodaje zbudowane przez parser zadanie na koniec listy.

            :return: Liczba zadań po dodaniu.
        """
        return self.store.add(task)

    def list_tasks(self) -> list[Task]:
        return self.store.tasks

    def mark_done(self, position: str) -> Task:
        """
            Marks the task at a 1-based `position` as done.

            - Already done: no-op, the same task is returned.

            :raises TaskIndexError: If the position is missing, not a number or out of range.
            :return: The marked `Task`.
        """
        task = self.store.get(parse_index(position))
        task.mark_done()
        return task

    def mark_undone(self, position: str) -> Task:
        """
            Marks the task at a 1-based `position` as not done.

            :raises TaskIndexError: If the position is missing, not a number or out of range.
            :return: The unmarked `Task`.
        """
        task = self.store.get(parse_index(position))
        task.mark_undone()
        return task

    def remove_task(self, position: str) -> Task:
        """
            Usuwa zadanie z pozycji `position` (1-based).

            :raises TaskIndexError: Gdy pozycja jest zła.
            :return: Usunięty `Task`.
        """
        return self.store.remove(parse_index(position))

    def find_tasks(self, keyword: str) -> list[Task]:
        return self.store.search(keyword)

    def count(self) -> int:
        return len(self.store)
