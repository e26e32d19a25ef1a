from notgpt.adapters.memory.task_repo import InMemoryTaskRepository
from notgpt.adapters.textfile.codec import decode_all, encode_all
from notgpt.domain.task import Task
from notgpt.domain.errors import StorageError
from pathlib import Path
from typing import Iterable
import logging
import os

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Adapter plikowy (adapters/textfile/task_repo.py).
# ==========================================================
# - Kolekcja żyje w pamięci (dziedziczona z InMemoryTaskRepository),
#   plik jest wczytywany raz, przy konstrukcji.
# - Po każdej udanej zmianie cały plik jest nadpisywany (_flush -> _atomic_dump):
#   zapis do "<plik>.swap", fsync, os.replace. Kolejny odczyt nigdy nie widzi
#   połowy zapisu.
# - Błędy I/O przy starcie: log ERROR i praca na pustej kolekcji.
# - Błędy I/O przy zapisie: StorageError (zmiana w pamięci już się wykonała).


class TextFileTaskRepository(InMemoryTaskRepository):
    def __init__(self, path: Path) -> None:
        """Inicjalizuje repozytorium plikowe.
        Tworzy katalog nadrzędny i pusty plik, jeśli nie istnieją;
        w przeciwnym razie wczytuje zadania z pliku."""
        super().__init__()
        self.path = Path(path)
        self.created = False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.path.exists():
                self._tasks = self._load_tasks()
                logger.info("Data found and loaded from: %s", self.path.resolve())
            else:
                self.path.touch()
                self.created = True
                logger.info("New data file successfully created at: %s", self.path.resolve())
        except (OSError, UnicodeDecodeError) as e:
            logger.error("An error occurred while opening %s: %s", self.path, e)
            self._tasks = []

    def _load_tasks(self) -> list[Task]:
        with self.path.open("rb") as f:
            return decode_all(f, source=self.path.name)

    def _atomic_dump(self, tasks: Iterable[Task]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                f.write(encode_all(tasks))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
            logger.error("An error occurred while writing %s: %s", self.path, e)
            raise StorageError(str(e))

    def _flush(self) -> None:
        self._atomic_dump(self._tasks)
