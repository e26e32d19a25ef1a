from notgpt.services.task_service import TaskService
from notgpt.domain.errors import NotANumberError, TaskIndexError, StorageError
import logging
import re

logger = logging.getLogger(__name__)

CONFIRMATIONS = {
    "mark": "marked {i} as completed",
    "unmark": "marked {i} as uncompleted",
    "delete": "deleted {i}",
}
SEE_CHANGES = 'use "list" to see changes'


### COMMENTS
# ==========================================================
# Komendy z numerem zadania: mark / unmark / delete.
# ==========================================================
# Kolejność walidacji:
#   1. tekst musi być liczbą całkowitą     -> NotANumberError
#   2. liczba musi być w [1, service.size()] -> TaskIndexError
#   3. wywołanie operacji i potwierdzenie (StorageError -> komunikat, nie wyjątek)
# Treść komunikatów jest stała co do bajtu (UI pokazuje je bez zmian).


def parse_index(text: str) -> int:
    """
    Zamienia tekst numeru zadania na int (same cyfry ASCII, opcjonalny znak; bez `_`).

    :raises NotANumberError: Gdy tekst nie jest liczbą całkowitą.
    """
    text = text.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        raise NotANumberError(text)
    return int(text)


def execute(service: TaskService, index_text: str, operation: str) -> str:
    """
    Waliduje numer zadania, wykonuje operację i zwraca komunikat dla użytkownika.

    :param service: Serwis z listą zadań.
    :param index_text: Numer zadania w postaci tekstu (od 1).
    :param operation: "mark", "unmark" albo "delete".
    :raises ValueError: Dla nieznanej nazwy operacji (błąd programisty, nie użytkownika).
    :return: Potwierdzenie albo komunikat błędu (także gdy zapis pliku się nie powiódł).
    """
    if operation not in CONFIRMATIONS:
        raise ValueError(f"unknown index operation: {operation!r}")

    try:
        index = parse_index(index_text)
        size = service.size()
        if not 1 <= index <= size:
            raise TaskIndexError(index, size)
        getattr(service, operation)(index)
    except (NotANumberError, TaskIndexError) as e:
        return str(e)
    except StorageError as e:
        logger.error("%s %s: could not save: %s", operation, index_text, e)
        return f"something went wrong: {e}"

    return f"{CONFIRMATIONS[operation].format(i=index)}\n{SEE_CHANGES}"
