"""Datenmodell für einen Kurs (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator
from rich.console import Console
from rich.markup import escape

from models.enrollment import EnrollmentResult


class Course(BaseModel):
    """Repräsentiert einen Kurs mit begrenzter Platzzahl."""

    id: int = Field(frozen=True)          # Kurs-Code, nach Anlage unveränderlich
    title: str = "Untitled Course"
    capacity: int = Field(30, ge=0)
    enrolled: int = Field(0, ge=0)        # Belegte Plätze

    @model_validator(mode='after')
    def _check_enrolled_bounds(self):
        if self.enrolled > self.capacity:
            raise ValueError(
                f"Belegung ({self.enrolled}) > Kapazität ({self.capacity})"
            )
        return self

    @property
    def is_full(self) -> bool:
        return self.enrolled >= self.capacity

    @property
    def free_seats(self) -> int:
        return self.capacity - self.enrolled

    def increment_enrollment(self) -> EnrollmentResult:
        """Belegt einen Platz. Bei voller Kapazität bleibt der Zähler unverändert."""
        if self.is_full:
            return EnrollmentResult.COURSE_FULL
        self.enrolled += 1
        return EnrollmentResult.ENROLLED

    def display_details(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        console.print("[bold]Kursdetails:[/bold]")
        console.print(escape(str(self)))

    def __str__(self) -> str:
        return (
            f"Code: {self.id} | Title: {self.title} | "
            f"Enrollment: {self.enrolled}/{self.capacity}"
        )
