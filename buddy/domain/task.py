from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import TypeAlias
from buddy.domain.enums import TaskKind


### COMMENTS
# ==========================================================
# Model domenowy zadań (domain/task.py).
# ==========================================================
# - Trzy warianty: Todo, Deadline, Event; zamknięty zestaw bez wspólnej klasy bazowej.
# - Kod korzystający z modelu rozróżnia warianty przez `match`, nie przez nadpisywanie metod.
# - Jedyna mutacja to flaga `done` (mark_done / mark_undone, obie idempotentne).
# - Walidacja opisu i dat NIE należy do modelu - robi ją parser komend i codec.


class _Completion:
    """Wspólne operacje na fladze `done` dla wszystkich wariantów."""

    done: bool

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False


@dataclass
class Todo(_Completion):
    """Zwykłe zadanie do zrobienia - tylko opis i stan wykonania."""
    description: str
    done: bool = False


@dataclass
class Deadline(_Completion):
    """Zadanie z terminem `by`; termin może być nieustawiony (None)."""
    description: str
    done: bool = False
    by: datetime | None = None


@dataclass
class Event(_Completion):
    """
    Wydarzenie w przedziale czasu `start` ("from") – `end` ("to").
    Oba końce są opcjonalne i niezależne. Gdy oba są ustawione, `start`
    nie powinien być po `end` - to jest udokumentowane, ale nie wymuszane.
    """
    description: str
    done: bool = False
    start: datetime | None = None
    end: datetime | None = None


Task: TypeAlias = Todo | Deadline | Event


def kind_of(task: Task) -> TaskKind:
    """Zwraca znacznik typu (T/D/E) dla wariantu zadania."""
    match task:
        case Todo():
            return TaskKind.TODO
        case Deadline():
            return TaskKind.DEADLINE
        case Event():
            return TaskKind.EVENT
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")
