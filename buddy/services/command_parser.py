from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import TypeAlias
from buddy.domain.task import Task, Todo, Deadline, Event
from buddy.domain.errors import DateFormatError, TaskIndexError, TaskValidationError
from buddy.adapters.text.codec import parse_date


### COMMENTS
# ==========================================================
# Parser komend (services/command_parser.py).
# ==========================================================
# Rola:
# - Zamienia jedną linię tekstu od użytkownika na komendę (dataclass).
# - Dla todo/deadline/event buduje gotowy obiekt Task.
# - Niczego nie wykonuje - wykonanie należy do sesji.
#
# Zasady:
# - Słowo kluczowe = pierwszy token linii, wielkość liter ma znaczenie.
# - Błędy → TaskValidationError(field=<słowo kluczowe>), gdzie dla nieznanej komendy field="command".
# - Event z `from` po `to` jest akceptowany (tylko warning w logu).

logger = logging.getLogger(__name__)

DATE_HINT = "dd/MM/yyyy HHmm"

ERROR_MESSAGES = {
    "todo": "Sorry! The todo task description cannot be empty.",
    "deadline": (
        "Sorry! The deadline task description cannot be empty.\n"
        f"The deadline timing should be in {DATE_HINT} format."
    ),
    "event": (
        "Sorry! The event task description cannot be empty.\n"
        f"The event from and to timings should be in {DATE_HINT} format."
    ),
}
USAGE_MESSAGE = (
    "Invalid command. Please use 'find', 'todo', 'deadline', 'event', 'delete',"
    " 'mark', 'unmark', 'list' or 'bye'. Thank you for understanding!"
)


@dataclass(frozen=True)
class AddTask:
    task: Task

@dataclass(frozen=True)
class ListTasks:
    pass

@dataclass(frozen=True)
class MarkTask:
    index: str

@dataclass(frozen=True)
class UnmarkTask:
    index: str

@dataclass(frozen=True)
class DeleteTask:
    index: str

@dataclass(frozen=True)
class FindTasks:
    keyword: str

@dataclass(frozen=True)
class ExitSession:
    pass


Command: TypeAlias = AddTask | ListTasks | MarkTask | UnmarkTask | DeleteTask | FindTasks | ExitSession


# znacznik jako osobny token: "/bypass" czy "/fromage" to część opisu
_BY = re.compile(r"(?:^|\s)/by(?:\s|$)")
_FROM = re.compile(r"(?:^|\s)/from(?:\s|$)")
_TO = re.compile(r"(?:^|\s)/to(?:\s|$)")

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def _split_at(marker: re.Pattern, text: str) -> tuple[str, str] | None:
    """Dzieli tekst na części przed i po pierwszym znaczniku; brak znacznika → None."""
    parts = marker.split(text, maxsplit=1)
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


def error_message(keyword: str) -> str:
    """Zwraca stały komunikat błędu dla słowa kluczowego komendy."""
    return ERROR_MESSAGES.get(keyword, USAGE_MESSAGE)


def parse_index(raw: str) -> int:
    """
    Zamienia numer pozycji podany przez użytkownika (1-based) na indeks 0-based.

    - Nie sprawdza zakresu - to robi TaskStore.
    - Akceptowane są tylko cyfry ASCII (bez "1_0" czy cyfr z innych alfabetów).

    :raises TaskIndexError: Gdy numeru brak albo nie jest liczbą całkowitą.
    """
    if not isinstance(raw, str) or not _INDEX_RE.fullmatch(raw):
        raise TaskIndexError(raw)
    return int(raw) - 1


def _required_date(keyword: str, text: str) -> datetime:
    if not text.strip():
        raise TaskValidationError(keyword, "Date is required")
    try:
        return parse_date(text)
    except DateFormatError as e:
        raise TaskValidationError(keyword, str(e))


def _description(keyword: str, text: str) -> str:
    description = text.strip()
    if not description:
        raise TaskValidationError(keyword, "Description cannot be empty")
    # "|" rozdziela pola rekordu zapisu
    if "|" in description:
        raise TaskValidationError(keyword, "Description cannot contain '|'")
    return description


def _parse_todo(rest: str) -> Task:
    return Todo(_description("todo", rest))


def _parse_deadline(rest: str) -> Task:
    split = _split_at(_BY, rest)
    if split is None:
        _description("deadline", rest)
        raise TaskValidationError("deadline", "Missing /by")
    body, when = split
    description = _description("deadline", body)
    return Deadline(description, by=_required_date("deadline", when))


def _parse_event(rest: str) -> Task:
    split = _split_at(_FROM, rest)
    if split is None:
        _description("event", rest)
        raise TaskValidationError("event", "Missing /from")
    body, span = split
    description = _description("event", body)
    split = _split_at(_TO, span)
    if split is None:
        raise TaskValidationError("event", "Missing /to")
    start_text, end_text = split
    start = _required_date("event", start_text)
    end = _required_date("event", end_text)
    if start > end:
        logger.warning("Event '%s' starts after it ends (%s > %s)", description, start, end)
    return Event(description, start=start, end=end)


_TASK_PARSERS = {
    "todo": _parse_todo,
    "deadline": _parse_deadline,
    "event": _parse_event,
}


def parse_command(line: str) -> Command:
    """
    Parsuje jedną linię od użytkownika.

    Flow:
    - keyword, reszta = pierwszy token i pozostały tekst
    - todo/deadline/event → AddTask(gotowy Task)
    - list/bye → ListTasks()/ExitSession() (tylko dokładnie to słowo)
    - mark/unmark/delete → komenda z surowym numerem (walidacja: parse_index)
    - find → FindTasks(słowo kluczowe po strip, może być puste)

    :raises TaskValidationError: Pusty opis, brak/zła data, nieznana komenda.
    """
    text = line.strip()
    parts = text.split(maxsplit=1)
    keyword = parts[0] if parts else ""
    rest = parts[1].strip() if len(parts) > 1 else ""

    if keyword in _TASK_PARSERS:
        return AddTask(_TASK_PARSERS[keyword](rest))

    match keyword:
        case "list" if not rest:
            return ListTasks()
        case "bye" if not rest:
            return ExitSession()
        case "mark":
            return MarkTask(rest.split()[0] if rest else "")
        case "unmark":
            return UnmarkTask(rest.split()[0] if rest else "")
        case "delete":
            return DeleteTask(rest.split()[0] if rest else "")
        case "find":
            return FindTasks(rest)
    raise TaskValidationError("command", f"Unknown command '{text}'")
