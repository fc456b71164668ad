

### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Adaptery (pliki, SQL):
#     * mapują błędy techniczne (OSError, SQLAlchemyError) na StorageError
#     * linia zapisu, której nie da się odczytać jako zadania → RecordFormatError
#
# - Codec:
#     * zła data → DateFormatError; przy odczycie rekordu pole staje się puste (warning w logu)
#
# - Parser / serwisy:
#     * walidują dane użytkownika i rzucają TaskValidationError
#     * zły numer pozycji → TaskIndexError
#
# - Sesja / CLI:
#     * łapie DomainError i zamienia na stały komunikat dla użytkownika
#     * wszystko inne traktuje jako błąd techniczny


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Służy jako wspólny typ nadrzędny dla wszystkich wyjątków biznesowych w systemie.
    Umożliwia odróżnienie błędów domeny (logika aplikacji) od błędów technicznych
    (np. problemów z dyskiem czy bazą danych).
    Nie powinna być rzucana bezpośrednio - używaj klas pochodnych.
    """

class TaskValidationError(DomainError):
    """Rzucany, gdy dane wejściowe nie spełniają reguł dla zadania lub komendy.
    Przykłady:
    - opis zadania jest pusty,
    - brakuje `/by`, `/from` albo `/to`,
    - data ma zły format,
    - komenda jest nieznana,
    - słowo kluczowe wyszukiwania jest puste.
    `field` wskazuje, czego dotyczy błąd - dla komend dodawania jest to słowo
    kluczowe (`todo`, `deadline`, `event`), co pozwala dobrać komunikat w UI.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Validation error for '{self.field}': {self.message}"


class DateFormatError(DomainError):
    """Rzucany, gdy tekst daty nie jest w formacie `dd/MM/yyyy HHmm`."""
    def __init__(self, value: str):
        self.value = value
        super().__init__(self.__str__())
    def __str__(self):
        return f"Date '{self.value}' is not in dd/MM/yyyy HHmm format."


class RecordFormatError(DomainError):
    """Rzucany, gdy zapisanej linii nie da się odczytać jako żadnego zadania
    (brak opisu albo nieznany znacznik typu).
    """
    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(self.__str__())
    def __str__(self):
        return f"Malformed task record '{self.line}': {self.reason}"


class TaskIndexError(DomainError):
    """Rzucany, gdy numer pozycji nie wskazuje żadnego zadania na liście
    (poza zakresem, brak numeru albo nie jest liczbą).
    Operacja kończy się bez zmian na liście.
    """
    def __init__(self, index: object):
        self.index = index
        super().__init__(self.__str__())
    def __str__(self):
        return f"Task index {self.index!r} is out of range."


class StorageError(DomainError):
    """Rzucany przez adaptery trwałości, gdy pliku/bazy nie da się odczytać
    ani zapisać. Odczyt jest „wszystko albo nic” - przy tym błędzie sesja nie
    dostaje częściowo wczytanej listy.
    """
