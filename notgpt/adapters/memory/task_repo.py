from notgpt.domain.task import Task
from notgpt.domain.errors import TaskIndexError
from typing import Iterable

### COMMENTS
# ==========================================================
# Adapter pamięciowy dla repozytorium zadań (adapters/memory/task_repo.py).
# ==========================================================
# Ten moduł zawiera implementację portu `TaskRepository` w pamięci.
#
# - Służy do testów i jako baza dla adaptera plikowego.
# - Dane przechowywane są w liście `_tasks: list[Task]`; pozycja = numer - 1.
# - Każda udana zmiana kończy się wywołaniem `_flush()`:
#     * tutaj to no-op,
#     * TextFileTaskRepository nadpisuje go zapisem całego pliku.
# - Zasady zgodne z kontraktem portu:
#     * `get/replace/remove` -> `TaskIndexError`, jeśli numer spoza [1, len],
#     * sprawdzenie zakresu zawsze przed zmianą listy.



class InMemoryTaskRepository:
    """
        Repozytorium w pamięci z opcjonalną kolekcją startowych zadań.
        :param initial: Iterable z obiektami Task do wstępnego załadowania (w tej kolejności).
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(initial or [])

    def _position(self, index: int) -> int:
        """Mapuje numer od 1 na pozycję w liście albo zgłasza `TaskIndexError`."""
        if not 1 <= index <= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    def _flush(self) -> None:
        """Hook wywoływany po każdej udanej zmianie."""

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        self._flush()

    def get(self, index: int) -> Task:
        return self._tasks[self._position(index)]

    def replace(self, index: int, task: Task) -> None:
        """
            Podmienia zadanie na pozycji `index`.

            - Zadanie zostaje na tym samym miejscu; kolejność się nie zmienia.
            - Numer spoza zakresu -> `TaskIndexError`, lista bez zmian.

            :param index: Numer zadania (od 1).
            :param task: Nowa wersja zadania.
            :raises TaskIndexError: Gdy numer jest poza zakresem.
        """
        self._tasks[self._position(index)] = task
        self._flush()

    def remove(self, index: int) -> Task:
        """
            Usuwa zadanie o numerze `index`.

            - Kolejne zadania przesuwają się o jedną pozycję w górę.

            :param index: Numer zadania (od 1).
            :raises TaskIndexError: Gdy numer jest poza zakresem.
            :return: Usunięte zadanie.
        """
        task = self._tasks.pop(self._position(index))
        self._flush()
        return task

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def clear(self) -> None:
        self._tasks.clear()
        self._flush()

    def count_all(self) -> int:
        return len(self._tasks)
