from notgpt.services.task_service import TaskService
from notgpt.adapters.textfile.task_repo import TextFileTaskRepository
from notgpt.api.dispatcher import Dispatcher, GOODBYE
from notgpt.api.colors import ReplyColor
from notgpt.config import get_settings
from notgpt.logging_setup import setup_logging
from typer import Argument, Option, Typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from pathlib import Path
from typing import Optional


### COMMENTS
# ==========================================================
# CLI (Typer + Rich): interfejs użytkownika dla listy zadań.
# ==========================================================
# Rola:
# - Mapuje komendy na Dispatcher (a ten na TaskService / number_command).
# - Tryb `chat`: pętla czytająca linie "komenda reszta" aż do "bye".
# - Wyświetla odpowiedzi w panelach Rich.
#
# Zasady:
# - Zero logiki biznesowej, deleguj do Dispatchera.
# - Jednorazowy bootstrap zależności (repo + service) w callbacku.


app = Typer(help="notgpt, a tiny task tracker")
console = Console()

dispatcher: Dispatcher | None = None  # ustawimy w callbacku
repo: TextFileTaskRepository | None = None

LOGO = r"""
 _   _       _                 _
| \ | | ___ | |_ __ _ _ __ | |_
|  \| |/ _ \| __/ _` | '_ \| __|
| |\  | (_) | || (_| | |_) | |_
|_| \_|\___/ \__\__, | .__/ \__|
                |___/|_|
"""


def build_dispatcher(file: Optional[Path]) -> tuple[Dispatcher, TextFileTaskRepository]:
    """Tworzy repozytorium plikowe, serwis i dispatcher.
    - Brak `--file` -> ścieżka z ustawień (NOTGPT_DATA_FILE, domyślnie data/data.txt)
    """
    repo = TextFileTaskRepository(file or get_settings().data_file)
    return Dispatcher(TaskService(repo)), repo


@app.callback()
def main(
    file: Optional[Path] = Option(
        None,
        "--file",
        "-f",
        help="Ścieżka do pliku z zadaniami (domyślnie z NOTGPT_DATA_FILE)",
    )
) -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    global dispatcher, repo
    setup_logging(get_settings().log_level)
    dispatcher, repo = build_dispatcher(file)


def reply(text: str, color: ReplyColor = ReplyColor.INFO) -> None:
    """Drukuje odpowiedź w panelu; tekst użytkownika nie jest interpretowany jako markup."""
    console.print(Panel.fit(escape(text), title="notgpt", border_style=str(color)))


def run(command: str, words: Optional[list[str]]) -> None:
    reply(dispatcher.handle(command, " ".join(words or [])))


@app.command("todo")
def todo(words: Optional[list[str]] = Argument(None, help="Opis zadania")) -> None:
    """Dodaje TODO, np. `notgpt todo read book`."""
    run("todo", words)


@app.command("deadline")
def deadline(words: Optional[list[str]] = Argument(None, help="opis /by rrrr.mm.dd")) -> None:
    """Dodaje DEADLINE, np. `notgpt deadline return book /by 2020.11.11`."""
    run("deadline", words)


@app.command("event")
def event(words: Optional[list[str]] = Argument(None, help="opis /from start /to koniec")) -> None:
    """Dodaje EVENT, np. `notgpt event meeting /from 2020.11.11 /to 2020.11.12`."""
    run("event", words)


@app.command("mark")
def mark(index: str = Argument(..., help="Numer zadania z `list`")) -> None:
    """Oznacza zadanie jako zrobione."""
    run("mark", [index])


@app.command("unmark")
def unmark(index: str = Argument(..., help="Numer zadania z `list`")) -> None:
    """Oznacza zadanie jako niezrobione."""
    run("unmark", [index])


@app.command("delete")
def delete(index: str = Argument(..., help="Numer zadania z `list`")) -> None:
    """Usuwa zadanie; kolejne zadania przesuwają się o jeden numer w górę."""
    run("delete", [index])


@app.command("find")
def find(words: Optional[list[str]] = Argument(None, help="Fragment opisu")) -> None:
    """Szuka zadań po fragmencie opisu (wielkość liter ma znaczenie)."""
    run("find", words)


@app.command("list")
def list_cmd() -> None:
    """Listuje wszystkie zadania w kolejności dodania."""
    run("list", None)


@app.command("clear")
def clear() -> None:
    """Usuwa wszystkie zadania."""
    run("clear", None)


@app.command("chat")
def chat() -> None:
    """
    Tryb rozmowy: każda linia to `komenda reszta`, aż do `bye` albo Ctrl-D.

    Pierwsze słowo zawsze jest traktowane jako komenda.
    """
    where = "New data file created at" if repo.created else "Data loaded from"
    console.print(f"[dim]{where}: {escape(str(repo.path))}[/]")
    console.print(Panel.fit(
        escape(LOGO) + "\nhi, I'm Not-gpt,\ndo you really need me to do sth for you?",
        border_style=str(ReplyColor.OK),
    ))
    while True:
        try:
            line = console.input("[bold]> [/]").strip()
        except (EOFError, KeyboardInterrupt):
            reply(GOODBYE)
            return
        if not line:
            continue
        parts = line.split(maxsplit=1)
        command, text = parts[0], (parts[1] if len(parts) > 1 else "")
        answer = dispatcher.handle(command, text)
        reply(answer)
        if answer == GOODBYE:
            return


if __name__ == "__main__":
    app()
