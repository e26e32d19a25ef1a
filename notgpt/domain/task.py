from dataclasses import dataclass, replace
import re
from notgpt.domain.enums import TaskKind
from notgpt.domain.errors import TaskValidationError
from notgpt.domain.dates import parse_date

FIELD_SEP = " | "
BY = "/by"
FROM = "/from"
TO = "/to"


@dataclass(frozen=True)
class Task():
    """
    Model domenowy pojedynczego zadania; niemutowalny; wariant wskazuje `kind`.

    - TODO: tylko opis.
    - DEADLINE: opis + `by`.
    - EVENT: opis + `start` i `end`.

    Pola z datami trzymają datę kanoniczną ("11 Nov 2020") albo surowy tekst,
    jeśli parser dat go nie rozpoznał.
    """
    kind: TaskKind
    description: str
    completed: bool = False
    by: str | None = None
    start: str | None = None
    end: str | None = None

    def complete(self) -> "Task":
        if self.completed:
            return self
        return replace(self, completed=True)

    def uncomplete(self) -> "Task":
        if not self.completed:
            return self
        return replace(self, completed=False)

    def matches(self, keyword: str) -> bool:
        """Sprawdza, czy `keyword` występuje w opisie (wielkość liter ma znaczenie)."""
        return keyword in self.description

    def encode(self) -> str:
        """Zwraca jedną linię do pliku danych, np. `D | 1 | return book | 11 Nov 2020`."""
        fields = [self.kind.value, "1" if self.completed else "0", self.description]
        match self.kind:
            case TaskKind.DEADLINE:
                fields.append(self.by)
            case TaskKind.EVENT:
                fields.extend([self.start, self.end])
        return FIELD_SEP.join(escape_field(f) for f in fields)

    def display(self) -> str:
        mark = "[X]" if self.completed else "[ ]"
        text = f"[{self.kind.value}]{mark} {self.description}"
        match self.kind:
            case TaskKind.DEADLINE:
                return f"{text} (by: {self.by})"
            case TaskKind.EVENT:
                return f"{text} (from: {self.start} to: {self.end})"
            case _:
                return text


def escape_field(value: str) -> str:
    return (value.replace("\\", "\\\\").replace("|", "\\|")
            .replace("\n", "\\n").replace("\r", "\\r"))


def _date_or_raw(raw: str) -> str:
    return parse_date(raw) or raw


def _split_on(raw: str, delimiter: str) -> tuple[str, bool, str]:
    """Jak `str.partition`, ale `delimiter` musi być osobnym słowem (`/bytes` to nie `/by`)."""
    m = re.search(rf"(?:^|\s){re.escape(delimiter)}(?:\s|$)", raw)
    if m is None:
        return raw, False, ""
    return raw[:m.start()], True, raw[m.end():]


def _require(value: str, field: str, message: str) -> str:
    value = value.strip()
    if not value:
        raise TaskValidationError(field, message)
    return value


def new_todo(description: str) -> Task:
    """
    Tworzy zadanie TODO.

    :raises TaskValidationError: Gdy opis jest pusty.
    """
    description = _require(description, "description",
                           "the description of a todo cannot be empty\ntry: todo read book")
    return Task(kind=TaskKind.TODO, description=description)


def new_deadline(raw: str) -> Task:
    """
    Tworzy DEADLINE z tekstu `opis /by data`.

    Data przechodzi przez `parse_date`; jeśli się nie uda, zapisywany jest surowy tekst.

    :raises TaskValidationError: Gdy brakuje `/by`, opisu albo daty.
    """
    hint = "try: deadline return book /by 2020.11.11"
    description, sep, due = _split_on(raw, BY)
    if not sep:
        raise TaskValidationError("by", f"a deadline needs a {BY} part\n{hint}")
    description = _require(description, "description", f"the description of a deadline cannot be empty\n{hint}")
    due = _require(due, "by", f"u forgot to say when it's due\n{hint}")
    return Task(kind=TaskKind.DEADLINE, description=description, by=_date_or_raw(due))


def new_event(raw: str) -> Task:
    """
    Tworzy EVENT z tekstu `opis /from start /to koniec`.

    Obie daty niezależnie przechodzą przez `parse_date` (z fallbackiem na surowy tekst).

    :raises TaskValidationError: Gdy brakuje `/from` lub `/to`, opisu albo którejś daty.
    """
    hint = "try: event project meeting /from 2020.11.11 /to 2020.11.12"
    description, sep, rest = _split_on(raw, FROM)
    if not sep:
        raise TaskValidationError("from", f"an event needs a {FROM} part\n{hint}")
    start, sep, end = _split_on(rest, TO)
    if not sep:
        raise TaskValidationError("to", f"an event needs a {TO} part after {FROM}\n{hint}")
    description = _require(description, "description", f"the description of an event cannot be empty\n{hint}")
    start = _require(start, "from", f"u forgot to say when it starts\n{hint}")
    end = _require(end, "to", f"u forgot to say when it ends\n{hint}")
    return Task(kind=TaskKind.EVENT, description=description,
                start=_date_or_raw(start), end=_date_or_raw(end))



### COMMENTS
# ======================================
# Jeden typ zamiast hierarchii klas
# ======================================
# Todo/Deadline/Event to warianty tego samego rekordu, rozróżniane polem `kind`.
# encode()/display() wybierają zachowanie przez `match self.kind`, zamiast
# nadpisywać metody w podklasach.
#
# Pola, których wariant nie używa, zostają `None`.

# ======================================
# frozen=True i complete()/uncomplete()
# ======================================
# Obiekt po utworzeniu jest niemutowalny. complete() zwraca nową instancję
# z completed=True (dataclasses.replace), a repozytorium podmienia element
# na tej samej pozycji. Gdy flaga już ma żądaną wartość, zwracany jest ten
# sam obiekt (idempotencja).

# ======================================
# Format linii w pliku
# ======================================
#   T | 0 | read book
#   D | 1 | return book | 11 Nov 2020
#   E | 0 | meeting | 11 Nov 2020 | 12 Nov 2020
# Znaki `|` i `\` wewnątrz pola są poprzedzane `\`, a końce linii zapisywane
# jako `\n` i `\r`, więc każdy opis wraca
# z pliku w identycznej postaci. Odczyt jest w adapters/textfile/codec.py.
