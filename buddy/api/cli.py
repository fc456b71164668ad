from buddy.config import Settings, load_settings
from buddy.logging_setup import setup_logging
from buddy.domain.errors import DomainError
from buddy.ports.task_storage import TaskStorage
from buddy.adapters.file.task_storage import TextFileTaskStorage
from buddy.adapters.sql.task_storage import SqlTaskStorage
from buddy.services.session import Response, SessionController
from buddy.api.colors import PanelColor, response_color
from typer import Argument, BadParameter, Context, Exit, Option, Typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from pathlib import Path
from typing import Optional
import time


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) - terminalowy interfejs HelperBuddy.
# ==========================================================
# Rola:
# - `chat`: pętla REPL - linia od użytkownika → SessionController.handle → panel z odpowiedzią.
# - `run`: wykonuje komendy podane jako argumenty, potem zapisuje listę.
# - Łapie DomainError przy odczycie/zapisie i drukuje czerwony panel (exit code 1).
#
# Zasady:
# - Zero logiki biznesowej - deleguj do SessionController.
# - Settings budowane raz w callbacku i przekazywane przez ctx.obj.
# - Odpowiedzi drukowane jako Text (bez Rich-markup), bo "[T][X]" wygląda jak tag.


app = Typer(help="HelperBuddy: personal task assistant")
console = Console()

GREETING = "Hello! I'm YourHelperBuddy.\nWhat can I do for you?"


def build_storage(settings: Settings) -> TaskStorage:
    """Tworzy magazyn na bazie wybranego backendu.
    - text -> plik tekstowy, jeden rekord na linię
    - sql  -> SQLite (SQLAlchemy) w pliku data_file
    """
    if settings.backend == "sql":
        return SqlTaskStorage(settings.data_file)
    return TextFileTaskStorage(settings.data_file)


def render(response: Response) -> None:
    """Drukuje odpowiedź sesji w panelu; kolor ramki zależy od wyniku."""
    console.print(Panel.fit(
        Text(response.text.rstrip("\n")),
        border_style=str(response_color(response.ok, response.exit)),
    ))


def render_failure(e: DomainError) -> None:
    console.print(Panel.fit(
        Text(f"❌ {e}"),
        title="Storage error",
        border_style=str(PanelColor.ERROR),
    ))


def open_session(settings: Settings) -> SessionController:
    """Wczytuje listę zadań; przy błędzie drukuje panel i kończy z kodem 1."""
    try:
        return SessionController.open(settings, build_storage(settings))
    except DomainError as e:
        render_failure(e)
        raise Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    file: Optional[Path] = Option(
        None,
        "--file",
        "-f",
        help="Path to the task file (overrides BUDDY_DATA_FILE)",
    ),
    backend: Optional[str] = Option(
        None,
        "--backend",
        "-b",
        help="Storage backend: text or sql (overrides BUDDY_BACKEND)",
    ),
    log_level: Optional[str] = Option(
        None,
        "--log-level",
        help="Console log level (overrides BUDDY_LOG_LEVEL)",
    ),
) -> None:
    """Bootstrap konfiguracji i logowania na starcie procesu CLI."""
    try:
        settings = load_settings(
            data_file=file,
            backend=backend.lower() if backend else None,
            log_level=log_level.upper() if log_level else None,
        )
    except ValueError as e:
        raise BadParameter(str(e))

    setup_logging(settings.log_level, settings.log_file)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat, ctx)


@app.command("chat")
def chat(ctx: Context) -> None:
    """
    Interaktywna rozmowa z asystentem.

    Flow:
    - Wczytaj listę (open_session), pokaż powitanie.
    - Pętla: linia → session.handle(line) → render(response).
    - `bye` (albo koniec wejścia): zapis, pauza exit_grace_seconds, koniec.
    """
    settings: Settings = ctx.obj
    session = open_session(settings)
    console.print(Panel.fit(GREETING, border_style=str(PanelColor.GREETING)))

    while True:
        try:
            line = console.input("> ")
        except EOFError:
            line = "bye"
        if not line.strip():
            continue
        try:
            response = session.handle(line)
        except DomainError as e:
            render_failure(e)
            raise Exit(code=1)
        render(response)
        if response.exit:
            time.sleep(settings.exit_grace_seconds)
            return


@app.command("run")
def run(
    ctx: Context,
    commands: list[str] = Argument(..., help="Commands to execute in order, e.g. 'todo Buy milk'"),
) -> None:
    """
    Wykonuje podane komendy w jednej sesji i zapisuje listę.

    - Zatrzymuje się na `bye` (który sam zapisuje listę).
    - Bez `bye` lista i tak jest zapisywana na końcu.
    """
    session = open_session(ctx.obj)
    try:
        for line in commands:
            response = session.handle(line)
            render(response)
            if response.exit:
                return
        session.save()
    except DomainError as e:
        render_failure(e)
        raise Exit(code=1)


if __name__ == "__main__":
    app()
