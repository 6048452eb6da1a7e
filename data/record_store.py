"""Dateiablage für Studierende und Kurse (Pipe-getrennte Satzzeilen).

Zeilenformat:
  Student:  id|name|roll|kurs-id,kurs-id,...   (Kursfeld darf leer sein)
  Kurs:     id|titel|kapazität|eingeschrieben

Trennzeichen werden nicht maskiert: Namen mit '|' oder ',' sind nicht möglich.
Beim Laden werden defekte Zeilen übersprungen, der Rest wird geladen.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from pydantic import BaseModel, ValidationError

from config.schema import StorageConfig
from models.course import Course
from models.errors import (
    CorruptRecordError,
    MalformedLineError,
    StorageUnavailableError,
)
from models.record_list import RecordList
from models.roll_counter import RollCounter
from models.student import Student

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
LIST_SEP = ","


class LoadReport(BaseModel):
    """Ergebnis eines Ladevorgangs."""

    source: str
    source_missing: bool = False
    loaded: int = 0
    malformed: int = 0             # Zeilen mit zu wenigen Feldern (still übersprungen)
    diagnostics: list[str] = []    # Defekte Zeilen mit Grund

    @property
    def skipped(self) -> int:
        return self.malformed + len(self.diagnostics)

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.markup import escape
        from rich.panel import Panel

        console = Console()
        source = escape(self.source)
        if self.source_missing:
            lines = [f"[yellow]Datei nicht gefunden: {source}[/yellow]",
                     "[dim]Leerer Bestand.[/dim]"]
        else:
            lines = [f"[green]✓[/green] {self.loaded} Datensätze geladen aus {source}"]
        if self.malformed:
            lines.append(f"[dim]{self.malformed} unvollständige Zeilen ignoriert.[/dim]")
        if self.diagnostics:
            lines.append("\n[red bold]Übersprungene Zeilen:[/red bold]")
            for d in self.diagnostics:
                lines.append(f"  [red]• {escape(d)}[/red]")

        console.print(Panel("\n".join(lines), title="Laden", border_style="cyan"))


# ─── Kodierung ────────────────────────────────────────────────────────────────

def _parse_int(raw: str, line: str, label: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CorruptRecordError(line, f"{label} ist keine Zahl ({raw!r})") from None


def encode_student(student: Student) -> str:
    courses = LIST_SEP.join(str(cid) for cid in student.course_ids)
    return FIELD_SEP.join(
        [str(student.id), student.name, str(student.roll_number), courses]
    )


def decode_student(line: str, counter: Optional[RollCounter] = None) -> Student:
    """Baut einen Studierenden-Datensatz aus einer Satzzeile.

    Kurs-IDs laufen über Student.enroll() (ohne Kapazitätsprüfung, Duplikate
    werden ignoriert). Der Zähler wird über die gelesene Roll-Nummer gehoben.

    Raises:
        MalformedLineError: weniger als 3 Felder.
        CorruptRecordError: ID, Roll-Nummer oder Kurs-ID keine Zahl.
    """
    parts = line.split(FIELD_SEP)
    if len(parts) < 3:
        raise MalformedLineError(line, f"Nur {len(parts)} Felder")

    student_id = _parse_int(parts[0], line, "ID")
    name = parts[1]
    roll = _parse_int(parts[2], line, "Roll-Nr.")

    course_ids: list[int] = []
    if len(parts) > 3 and parts[3]:
        tokens = parts[3].split(LIST_SEP)
        if tokens[-1] == "":
            tokens.pop()    # "101," wie "101"
        course_ids = [_parse_int(tok, line, "Kurs-ID") for tok in tokens]

    student = Student(id=student_id, name=name, roll_number=roll)
    for cid in course_ids:
        student.enroll(cid)
    if counter is not None:
        counter.observe(roll)
    return student


def encode_course(course: Course) -> str:
    return FIELD_SEP.join(
        [str(course.id), course.title, str(course.capacity), str(course.enrolled)]
    )


def decode_course(line: str) -> Course:
    """Baut einen Kurs aus einer Satzzeile.

    Raises:
        MalformedLineError: weniger als 4 Felder.
        CorruptRecordError: Zahlenfeld ungültig oder Belegung > Kapazität.
    """
    parts = line.split(FIELD_SEP)
    if len(parts) < 4:
        raise MalformedLineError(line, f"Nur {len(parts)} Felder")

    course_id = _parse_int(parts[0], line, "ID")
    capacity = _parse_int(parts[2], line, "Kapazität")
    enrolled = _parse_int(parts[3], line, "Belegung")
    try:
        return Course(id=course_id, title=parts[1], capacity=capacity, enrolled=enrolled)
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise CorruptRecordError(line, reason) from e


# ─── Ablage ───────────────────────────────────────────────────────────────────

class RecordStore:
    """Liest und schreibt die beiden Satzdateien vollständig in einem Aufruf."""

    def __init__(self, student_path: Path, course_path: Path,
                 encoding: str = "utf-8") -> None:
        self.student_path = Path(student_path)
        self.course_path = Path(course_path)
        self.encoding = encoding

    @classmethod
    def from_config(cls, storage: StorageConfig) -> "RecordStore":
        return cls(storage.student_path, storage.course_path, storage.encoding)

    # ─── Speichern ───

    def _write_lines(self, path: Path, lines: Iterable[str]) -> int:
        count = 0
        try:
            with open(path, "w", encoding=self.encoding) as f:
                for line in lines:
                    f.write(line + "\n")
                    count += 1
        except OSError as e:
            raise StorageUnavailableError(
                f"Datei kann nicht geschrieben werden: {path} ({e})"
            ) from e
        return count

    def save_students(self, students: Iterable[Student]) -> None:
        count = self._write_lines(self.student_path, (encode_student(s) for s in students))
        logger.info(f"{count} Studierende gespeichert: {self.student_path}")

    def save_courses(self, courses: Iterable[Course]) -> None:
        count = self._write_lines(self.course_path, (encode_course(c) for c in courses))
        logger.info(f"{count} Kurse gespeichert: {self.course_path}")

    # ─── Laden ───

    def _decode_line(self, raw: bytes) -> str:
        """Dekodiert eine Rohzeile; ungültige Bytes machen nur diese Zeile defekt."""
        try:
            return raw.rstrip(b"\r").decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CorruptRecordError(
                raw.decode(self.encoding, errors="replace"),
                f"nicht als {self.encoding} lesbar ({e.reason})",
            ) from None

    def _load(self, path: Path, destination: RecordList,
              decode: Callable[[str], object]) -> LoadReport:
        destination.clear()
        report = LoadReport(source=str(path))
        if not path.exists():
            logger.info(f"Datei nicht gefunden, leerer Bestand: {path}")
            report.source_missing = True
            return report

        try:
            raw_lines = path.read_bytes().split(b"\n")
        except OSError as e:
            raise StorageUnavailableError(
                f"Datei kann nicht gelesen werden: {path} ({e})"
            ) from e

        for lineno, raw in enumerate(raw_lines, 1):
            if not raw.strip():
                continue
            try:
                line = self._decode_line(raw)
                record = decode(line)
            except MalformedLineError as e:
                logger.debug(f"{path}:{lineno}: übersprungen – {e}")
                report.malformed += 1
                continue
            except CorruptRecordError as e:
                logger.warning(f"{path}:{lineno}: defekte Zeile übersprungen – {e}")
                report.diagnostics.append(f"Zeile {lineno}: {e}")
                continue
            destination.add(record, notify=False)
            report.loaded += 1

        logger.info(f"{report.loaded} Datensätze geladen aus {path}")
        return report

    def load_students(self, destination: RecordList[Student],
                      counter: RollCounter) -> LoadReport:
        """Ersetzt den Inhalt von destination durch die Datei-Inhalte."""
        return self._load(self.student_path, destination,
                          lambda line: decode_student(line, counter))

    def load_courses(self, destination: RecordList[Course]) -> LoadReport:
        return self._load(self.course_path, destination, decode_course)
