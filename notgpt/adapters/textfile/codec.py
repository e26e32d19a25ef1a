import logging
from typing import Iterable
from notgpt.domain.task import Task
from notgpt.domain.enums import TaskKind
from notgpt.domain.errors import TaskDecodeError

logger = logging.getLogger(__name__)

UNESCAPE = {"n": "\n", "r": "\r"}

FIELD_COUNT = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


### COMMENTS
# ==========================================================
# Kodek pliku tekstowego (adapters/textfile/codec.py).
# ==========================================================
# - Zapis: każda linia to Task.encode(), linie łączone "\n", bez "\n" na końcu.
# - Odczyt: linia -> Task albo TaskDecodeError (także bajty, które nie są UTF-8).
# - W polach `\n` i `\r` są zapisywane jako `\\n` i `\\r`, więc jedno zadanie = jedna linia.
# - decode_all nigdy nie przerywa wczytywania przez jedną złą linię:
#   loguje ostrzeżenie z numerem linii i idzie dalej.


def _split_fields(line: str) -> list[str]:
    """Dzieli linię po nieescapowanym `|` i zdejmuje spacje należące do separatora."""
    fields: list[str] = []
    current: list[str] = []
    chars = iter(line)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            if nxt is None:
                raise TaskDecodeError(line, "dangling escape at end of line")
            current.append(UNESCAPE.get(nxt, nxt))
        elif ch == "|":
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))

    last = len(fields) - 1
    for i, field in enumerate(fields):
        if i > 0 and field.startswith(" "):
            field = field[1:]
        if i < last and field.endswith(" "):
            field = field[:-1]
        fields[i] = field
    return fields


def decode_line(line: str | bytes) -> Task:
    """
    Odtwarza Task z jednej linii pliku (str albo surowe bajty UTF-8).

    :raises TaskDecodeError: Nieznany typ, zła liczba pól, flaga inna niż 0/1 albo pusty opis.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TaskDecodeError(line, f"not valid UTF-8: {e.reason}")
    fields = _split_fields(line.rstrip("\r\n"))
    try:
        kind = TaskKind(fields[0])
    except ValueError:
        raise TaskDecodeError(line, f"unknown task type {fields[0]!r}")

    if len(fields) != FIELD_COUNT[kind]:
        raise TaskDecodeError(line, f"expected {FIELD_COUNT[kind]} fields for {kind.name}, got {len(fields)}")

    flag = fields[1]
    if flag not in ("0", "1"):
        raise TaskDecodeError(line, f"completion flag must be 0 or 1, got {flag!r}")

    description = fields[2]
    if not description:
        raise TaskDecodeError(line, "empty description")

    match kind:
        case TaskKind.DEADLINE:
            return Task(kind=kind, description=description, completed=flag == "1", by=fields[3])
        case TaskKind.EVENT:
            return Task(kind=kind, description=description, completed=flag == "1",
                        start=fields[3], end=fields[4])
        case _:
            return Task(kind=kind, description=description, completed=flag == "1")


def decode_all(lines: Iterable[str | bytes], source: str = "<data>") -> list[Task]:
    """Dekoduje wszystkie linie; puste pomija, uszkodzone loguje i pomija."""
    tasks: list[Task] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            tasks.append(decode_line(line))
        except TaskDecodeError as e:
            logger.warning("%s:%d: skipping line: %s", source, lineno, e)
    return tasks


def encode_all(tasks: Iterable[Task]) -> str:
    return "\n".join(t.encode() for t in tasks)
