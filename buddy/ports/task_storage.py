from typing import Protocol, Iterable
from buddy.domain.task import Task


### COMMENTS
# ==========================================================
# Kontrakt trwałości zadań (ports/task_storage.py).
# ==========================================================
# Ten moduł definiuje interfejs (Protocol) dla zapisu/odczytu całej listy zadań.
# - Jest niezależny od technologii (plik tekstowy, baza SQL).
# - Odczyt i zapis są „wszystko albo nic” - nigdy częściowa lista.
# - Adaptery mapują błędy technologiczne na StorageError.
# - Magazyn nie zawiera logiki biznesowej - tylko trwałość.


class TaskStorage(Protocol):
    """Interfejs magazynu, który wczytuje i zapisuje pełną listę `Task`.

    Adaptery (implementacje) muszą:
    - zachować kolejność zadań,
    - zapewnić atomowość zapisu (stary stan albo nowy, nic pomiędzy),
    - mapować błędy technologiczne na `StorageError`.
    """

    def load(self) -> list[Task]:
        """Wczytuje wszystkie zadania w zapisanej kolejności.

        Zwraca:
            list[Task]: Pełna lista; brak danych → pusta lista.

        Wyjątki domenowe:
            StorageError: Gdy danych nie da się odczytać lub któryś rekord jest
            nieczytelny jako zadanie.
        """

    def save(self, tasks: Iterable[Task]) -> None:
        """Zastępuje zapisane dane pełną listą `tasks`.

        Wyjątki domenowe:
            StorageError: Gdy zapis się nie powiódł; poprzedni stan pozostaje.
        """
