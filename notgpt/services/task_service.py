from notgpt.ports.task_repository import TaskRepository
from notgpt.domain.task import Task, new_todo, new_deadline, new_event
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_service.py): przypadki użycia.
# ==========================================================
# Rola:
# - Orkiestracja operacji na liście zadań nad portem `TaskRepository`.
# - Budowa zadań z tekstu komendy (todo/deadline/event).
# - Renderowanie listy i wyników wyszukiwania ("1. [T][ ] ...").
#
# Zasady:
# - Serwis korzysta wyłącznie z portów (repozytoriów); nie dotyka adapterów.
# - Numery zadań liczone od 1; zakres sprawdza repozytorium (`TaskIndexError`).
# - Modele domenowe są niemutowalne (`frozen=True`), zmiana = nowa instancja i `repo.replace`.
# - Trwałość (przepisanie pliku po zmianie) jest sprawą adaptera.


def render_numbered(tasks: list[Task]) -> str:
    """Zwraca linie `"<n>. <display>"` numerowane od 1, złączone "\\n"; pusta lista -> ""."""
    return "\n".join(f"{n}. {t.display()}" for n, t in enumerate(tasks, start=1))


class TaskService:
    """
    Serwis przypadków użycia dla listy zadań.

    :param repo: Implementacja portu TaskRepository.
    """
    def __init__(self, repo: TaskRepository) -> None:
        self.repo = repo

    def add(self, task: Task) -> Task:
        """Dodaje gotowe zadanie na koniec listy."""
        self.repo.add(task)
        logger.debug("added %s", task.encode())
        return task

    def todo(self, text: str) -> Task:
        """
            Tworzy TODO z opisu i zapisuje je.

            :raises TaskValidationError: Gdy opis jest pusty.
        """
        return self.add(new_todo(text))

    def deadline(self, text: str) -> Task:
        """
            Tworzy DEADLINE z tekstu `opis /by data` i zapisuje je.

            :raises TaskValidationError: Gdy brakuje `/by`.
        """
        return self.add(new_deadline(text))

    def event(self, text: str) -> Task:
        """
            Tworzy EVENT z tekstu `opis /from start /to koniec` i zapisuje je.

            :raises TaskValidationError: Gdy brakuje `/from` lub `/to`.
        """
        return self.add(new_event(text))

    def mark(self, index: int) -> Task:
        """
            Oznacza zadanie o numerze `index` (od 1) jako zrobione.

            - Idempotentne: ponowne oznaczenie zrobionego zadania nie jest błędem.
            - Zmiana trafia do repozytorium przez `repo.replace(index, task)`.

            :raises TaskIndexError: Gdy `index` jest poza `[1, size()]`.
            :return: Zaktualizowany `Task`.
        """
        task = self.repo.get(index).complete()
        self.repo.replace(index, task)
        return task

    def unmark(self, index: int) -> Task:
        """
            Oznacza zadanie o numerze `index` (od 1) jako niezrobione.

            :raises TaskIndexError: Gdy `index` jest poza `[1, size()]`.
            :return: Zaktualizowany `Task`.
        """
        task = self.repo.get(index).uncomplete()
        self.repo.replace(index, task)
        return task

    def delete(self, index: int) -> Task:
        """
            Usuwa zadanie o numerze `index`; kolejne zadania przesuwają się w górę.

            :raises TaskIndexError: Gdy numer jest poza zakresem.
            :return: Usunięte zadanie.
        """
        return self.repo.remove(index)

    def find(self, keyword: str) -> str:
        """
            Zwraca listę zadań, których opis zawiera `keyword` (wielkość liter ma znaczenie).

            - Numeracja od 1, tylko wśród znalezionych.
            - Brak dopasowań -> "".
        """
        return render_numbered([t for t in self.repo.list_all() if t.matches(keyword)])

    def list_all(self) -> str:
        return render_numbered(self.repo.list_all())

    def clear(self) -> None:
        """Czyści listę i plik danych. Na pustej liście nic się nie psuje."""
        self.repo.clear()

    def size(self) -> int:
        return self.repo.count_all()
