from buddy.domain.task import Task
from buddy.domain.errors import TaskIndexError, TaskValidationError
from typing import Iterable, Iterator

### COMMENTS
# ==========================================================
# Lista zadań w pamięci (adapters/memory/task_store.py).
# ==========================================================
# - Jedyny właściciel obiektów Task w czasie trwania sesji.
# - Kolejność = kolejność dodawania; usuwanie po pozycji.
# - Pozycje są 0-based; zamianę z numerów użytkownika (1-based) robi serwis.
# - Zasady:
#     * `get` / `remove` → TaskIndexError dla pozycji spoza zakresu (bez zmian na liście),
#     * `search` → TaskValidationError dla pustego słowa kluczowego,
#     * `tasks` → kopia listy (do zapisu), nie widok na wnętrze.



class TaskStore:
    """
        Uporządkowana lista zadań bieżącej sesji.
        :param initial: Iterable z obiektami Task do wstępnego załadowania
        (np. wynik `TaskStorage.load()`), w tej samej kolejności.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(initial or [])

    def add(self, task: Task) -> int:
        """
            Dodaje zadanie na koniec listy.

            :param task: Obiekt Task do dodania.
            :return: Liczba zadań po dodaniu.
        """
        self._tasks.append(task)
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index)

    def get(self, index: int) -> Task:
        """
            Zwraca zadanie z pozycji `index` (0-based).

            :raises TaskIndexError: Gdy pozycja jest poza zakresem.
        """
        self._check_index(index)
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        """
            Usuwa i zwraca zadanie z pozycji `index` (0-based).

            - Przy błędnej pozycji lista pozostaje bez zmian.

            :raises TaskIndexError: Gdy pozycja jest poza zakresem.
            :return: Usunięty obiekt Task.
        """
        self._check_index(index)
        return self._tasks.pop(index)

    def search(self, keyword: str) -> list[Task]:
        """
            Zwraca zadania, których opis zawiera `keyword` (bez rozróżniania
            wielkości liter), w oryginalnej kolejności.

            - Pusty wynik to poprawny rezultat.
            - Puste słowo kluczowe (po strip) nie pasuje do wszystkiego - to błąd.

            :raises TaskValidationError: Gdy `keyword` jest pusty.
        """
        needle = keyword.strip().lower()
        if not needle:
            raise TaskValidationError("keyword", "Search keyword cannot be empty")
        return [t for t in self._tasks if needle in t.description.lower()]

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
