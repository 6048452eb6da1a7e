"""Generische, einfügegeordnete Liste von Datensätzen mit linearer Suche."""

import logging
from typing import Generic, Iterator, Optional, Protocol, TypeVar

from rich.console import Console
from rich.rule import Rule

logger = logging.getLogger(__name__)


class Record(Protocol):
    id: int

    def display_details(self, console: Optional[Console] = None) -> None: ...


T = TypeVar("T", bound=Record)


class RecordList(Generic[T]):
    """Hält Datensätze in Einfügereihenfolge. Kein Index, kein Entfernen."""

    def __init__(self) -> None:
        self._records: list[T] = []

    def add(self, record: T, notify: bool = True) -> None:
        self._records.append(record)
        if notify:
            logger.info(f"Datensatz {record.id} zur Liste hinzugefügt.")

    def find(self, record_id: int) -> Optional[T]:
        """Erster Datensatz mit dieser ID oder None."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()

    def display_all(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        if not self._records:
            console.print("[dim]Keine Datensätze vorhanden.[/dim]")
            return
        for record in self._records:
            record.display_details(console)
            console.print(Rule(style="dim"))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)
