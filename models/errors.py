"""Fehlerklassen für Datensätze, Ablage und Nachschlagen."""


class RecordsError(Exception):
    """Basisklasse aller Fehler dieses Pakets."""


class StorageUnavailableError(RecordsError):
    """Satzdatei kann nicht gelesen oder geschrieben werden."""


class CorruptRecordError(RecordsError, ValueError):
    """Satzzeile lässt sich nicht in einen Datensatz umwandeln."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class MalformedLineError(CorruptRecordError):
    """Satzzeile hat zu wenige Felder."""


class RecordNotFoundError(RecordsError, LookupError):
    """Kein Datensatz mit dieser ID vorhanden."""

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} mit ID {record_id} nicht gefunden.")
        self.kind = kind
        self.record_id = record_id
