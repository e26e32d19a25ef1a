
### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Model (domain/task.py):
#     * waliduje tekst komendy i rzuca TaskValidationError
#
# - Repozytoria (adaptery):
#     * zgłaszają TaskIndexError dla numeru spoza zakresu
#     * mapują błędy techniczne (OSError) na StorageError
#     * kodek pliku tekstowego rzuca TaskDecodeError dla uszkodzonej linii
#
# - UI (dispatcher, CLI):
#     * łapie DomainError (lub konkretne klasy) i zwraca przyjazny komunikat
#     * nic nie wychodzi poza warstwę UI jako wyjątek


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny (logika aplikacji) od błędów technicznych.
    Nie powinna być rzucana bezpośrednio, używaj klas pochodnych.
    """

class TaskValidationError(DomainError):
    """Rzucany, gdy tekst komendy nie pozwala zbudować zadania.
    Przykłady:
    - opis jest pusty,
    - brak separatora `/by` w deadline,
    - brak `/from` lub `/to` w evencie.
    Zawiera nazwę pola (`field`) oraz komunikat (`message`) z podpowiedzią formatu.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return self.message


class TaskDecodeError(DomainError):
    """Rzucany przez kodek, gdy linii z pliku danych nie da się odczytać jako zadania."""
    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(self.__str__())
    def __str__(self):
        return f"cannot decode {self.line!r}: {self.reason}"


class TaskIndexError(DomainError):
    """Rzucany, gdy numer zadania (liczony od 1) wypada poza zakres `[1, size]`.
    Sprawdzenie odbywa się zawsze przed jakąkolwiek zmianą kolekcji.
    """
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(self.__str__())
    def __str__(self):
        return f"that number isn't a valid task dude...\nit has to be from 1 to {self.size}"


class NotANumberError(DomainError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(self.__str__())
    def __str__(self):
        return "sorry bud that ain't a number\ni don't know which task u're referring to..."


class StorageError(DomainError):
    """Błąd zapisu/odczytu pliku danych (OSError zmapowany na błąd domenowy)."""
