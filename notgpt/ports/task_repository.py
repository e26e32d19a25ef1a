from typing import Protocol
from notgpt.domain.task import Task


### COMMENTS
# ==========================================================
# Kontrakt repozytorium zadań (ports/task_repository.py).
# ==========================================================
# Ten moduł definiuje interfejs (Protocol) dla warstwy trwałości Tasków.
# - Jest niezależny od technologii (pamięć, plik tekstowy).
# - Kolekcja jest uporządkowana: jedyną kolejnością jest kolejność dodania.
# - Numer zadania widoczny dla użytkownika liczony jest od 1 (pozycja i-1 w liście).
# - Numer spoza [1, count_all()] -> TaskIndexError, zanim cokolwiek się zmieni.
# - Adaptery mapują błędy technologiczne na błędy domenowe (OSError -> StorageError).


class TaskRepository(Protocol):
    """Interfejs repozytorium do zapisu i odczytu obiektów `Task`.

    Adaptery (implementacje) muszą:
    - zachować kolejność dodania (bez sortowania),
    - po każdej udanej zmianie utrwalić całą kolekcję,
    - nie wykonywać walidacji biznesowych (te należą do modelu i serwisu).
    """

    def add(self, task: Task) -> None:
        """Dodaje zadanie na koniec kolekcji."""

    def get(self, index: int) -> Task:
        """Zwraca zadanie o numerze `index` (od 1).

        Wyjątki domenowe:
            TaskIndexError: Gdy `index` jest poza zakresem.
        """

    def replace(self, index: int, task: Task) -> None:
        """Podmienia zadanie na pozycji `index` (od 1), np. po zmianie flagi `completed`.

        Wyjątki domenowe:
            TaskIndexError: Gdy `index` jest poza zakresem.
        """

    def remove(self, index: int) -> Task:
        """Usuwa zadanie o numerze `index`; kolejne zadania przesuwają się o jeden w górę.

        Zwraca:
            Task: Usunięte zadanie.

        Wyjątki domenowe:
            TaskIndexError: Gdy `index` jest poza zakresem.
        """

    def list_all(self) -> list[Task]:
        """Zwraca kopię kolekcji w kolejności dodania."""

    def clear(self) -> None:
        """Usuwa wszystkie zadania. Wywołanie na pustym repozytorium nie jest błędem."""

    def count_all(self) -> int:
        """Zwraca liczbę wszystkich zadań."""
