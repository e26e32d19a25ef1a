import logging
import sys


def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Konfiguruje root logger z jednym handlerem na stderr.

    Wywołaj raz, przed wczytaniem pierwszego zadania. Ponowne wywołanie
    podmienia poprzedni handler zamiast dodawać duplikat.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    root.addHandler(handler)
