"""Gemeinsame Basis für Personen-Datensätze (Studierende, Lehrende)."""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from pydantic import BaseModel
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class Person(BaseModel, ABC):
    """Person mit ID und Name.

    Jede Variante muss detail_rows() liefern; display_details() rendert diese
    Zeilen einheitlich als Rich-Tabelle. Person selbst ist nicht instanziierbar.
    """

    kind: ClassVar[str] = "Person"

    id: int
    name: str

    @abstractmethod
    def detail_rows(self) -> list[tuple[str, str]]:
        """(Bezeichnung, Wert)-Paare für die Detailansicht."""

    def display_details(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        table = Table(title=f"{self.kind} – Details", box=box.SIMPLE,
                      show_header=False, title_justify="left")
        table.add_column("Feld", style="bold")
        table.add_column("Wert")
        for label, value in self.detail_rows():
            table.add_row(label, escape(value))
        console.print(table)
