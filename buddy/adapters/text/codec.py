from __future__ import annotations
import logging
import re
from datetime import datetime
from buddy.domain.task import Task, Todo, Deadline, Event, kind_of
from buddy.domain.enums import TaskKind
from buddy.domain.errors import DateFormatError, RecordFormatError


### COMMENTS
# ==========================================================
# Codec zadań (adapters/text/codec.py).
# ==========================================================
# Dwa niezależne kierunki:
# - display: jednolinijkowy tekst dla użytkownika, np. "[D][ ] Submit report (by: Oct 10 2024 15:30)"
# - record: linia zapisu rozdzielana " | ", np. "D | 0 | Submit report | 10/10/2024 1530"
#
# Zasady odczytu rekordu:
# - brak pola opcjonalnego (lub puste miejsce na datę) → pole None, bez ostrzeżenia
# - zła data → pole None + warning (logger + opcjonalna lista `warnings`), reszta rekordu zostaje
# - brak opisu albo nieznany znacznik → RecordFormatError (linii nie da się odczytać)

logger = logging.getLogger(__name__)

SEPARATOR = " | "
RECORD_DATE_FORMAT = "%d/%m/%Y %H%M"       # dd/MM/yyyy HHmm
# MMM dd yyyy HH:mm; nazwy miesięcy zawsze po angielsku, niezależnie od locale (%b)
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# strptime akceptuje jednocyfrowe dni/godziny, format zapisu wymaga pełnych pól
_RECORD_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4} \d{4}")


def parse_date(text: str) -> datetime:
    """Parsuje datę w formacie `dd/MM/yyyy HHmm`.

    :raises DateFormatError: Gdy tekst nie pasuje do formatu albo data nie istnieje.
    """
    value = text.strip()
    if not _RECORD_DATE_RE.fullmatch(value):
        raise DateFormatError(text)
    try:
        return datetime.strptime(value, RECORD_DATE_FORMAT)
    except ValueError:
        raise DateFormatError(text)


def format_date(dt: datetime) -> str:
    return dt.strftime(RECORD_DATE_FORMAT)


def format_display_date(dt: datetime) -> str:
    return f"{_MONTHS[dt.month - 1]} {dt:%d %Y %H:%M}"


def _status_box(task: Task) -> str:
    return "[X]" if task.done else "[ ]"


def to_display(task: Task) -> str:
    """
    Zwraca czytelny opis zadania w jednej linii.

    - Todo:     "[T][ ] opis"
    - Deadline: "[D][X] opis (by: Oct 10 2024 15:30)" - nawias tylko gdy `by` jest ustawione
    - Event:    "[E][ ] opis (from: ... to: ...)" - każda część pomijana niezależnie,
                nawias tylko gdy jest choć jedna
    """
    head = f"[{kind_of(task)}]{_status_box(task)} {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(by=by):
            if by is None:
                return head
            return f"{head} (by: {format_display_date(by)})"
        case Event(start=start, end=end):
            clauses = []
            if start is not None:
                clauses.append(f"from: {format_display_date(start)}")
            if end is not None:
                clauses.append(f"to: {format_display_date(end)}")
            if not clauses:
                return head
            return f"{head} ({' '.join(clauses)})"
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")


def to_record(task: Task) -> str:
    """
    Zwraca linię zapisu: "<Tag> | <0|1> | <opis>" + daty w kolejności kodowania.

    Dla Event z samym `end` miejsce na `start` zostaje puste, żeby `end`
    nie przesunął się na pozycję "from" przy odczycie.
    """
    fields = [str(kind_of(task)), "1" if task.done else "0", task.description]
    match task:
        case Todo():
            pass
        case Deadline(by=by):
            if by is not None:
                fields.append(format_date(by))
        case Event(start=start, end=end):
            if start is not None or end is not None:
                fields.append(format_date(start) if start is not None else "")
            if end is not None:
                fields.append(format_date(end))
    return SEPARATOR.join(fields)


def _optional_date(
    fields: list[str], index: int, line: str, warnings: list[str] | None
) -> datetime | None:
    """Odczytuje opcjonalną datę z pola `index`; zła data → None + warning."""
    if index >= len(fields) or not fields[index].strip():
        return None
    try:
        return parse_date(fields[index])
    except DateFormatError as e:
        message = f"Warning: {e} Field left unset in record '{line}'."
        logger.warning(message)
        if warnings is not None:
            warnings.append(message)
        return None


def parse_record(line: str, warnings: list[str] | None = None) -> Task:
    """
    Odtwarza zadanie z linii zapisu.

    :param line: Linia w formacie "<Tag> | <0|1> | <opis>[ | data[ | data]]".
    :param warnings: Opcjonalna lista, do której trafiają ostrzeżenia o złych datach.
    :raises RecordFormatError: Gdy brakuje opisu albo znacznik typu jest nieznany.
    :return: Todo, Deadline albo Event.
    """
    fields = line.split(SEPARATOR)
    while fields and fields[-1] == "":
        fields.pop()
    if len(fields) < 3:
        raise RecordFormatError(line, "missing description")

    try:
        kind = TaskKind(fields[0].strip())
    except ValueError:
        raise RecordFormatError(line, f"unknown task type '{fields[0]}'")

    done = fields[1].strip() == "1"
    description = fields[2]

    match kind:
        case TaskKind.TODO:
            return Todo(description, done=done)
        case TaskKind.DEADLINE:
            return Deadline(description, done=done, by=_optional_date(fields, 3, line, warnings))
        case TaskKind.EVENT:
            return Event(
                description,
                done=done,
                start=_optional_date(fields, 3, line, warnings),
                end=_optional_date(fields, 4, line, warnings),
            )
