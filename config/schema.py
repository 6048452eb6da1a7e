from pathlib import Path

from pydantic import BaseModel, Field, field_validator


# ─── DATEIABLAGE ───

class StorageConfig(BaseModel):
    """Ablage der Satzdateien (eine Zeile pro Datensatz, Pipe-getrennt)."""
    # Verzeichnis, relativ zu dem die Dateinamen aufgelöst werden
    data_dir: str = Field(".", description="Verzeichnis der Satzdateien")
    # Datei für Studierende
    student_file: str = Field("student_records.txt",
        description="Dateiname der Studierenden-Datei")
    # Datei für Kurse
    course_file: str = Field("course_records.txt",
        description="Dateiname der Kurs-Datei")
    # Text-Encoding beim Lesen und Schreiben
    encoding: str = Field("utf-8", description="Text-Encoding der Dateien")

    @field_validator("student_file", "course_file")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Dateiname darf nicht leer sein.")
        return v.strip()

    @property
    def student_path(self) -> Path:
        return Path(self.data_dir) / self.student_file

    @property
    def course_path(self) -> Path:
        return Path(self.data_dir) / self.course_file


# ─── EINSCHREIBUNG ───

class EnrollmentConfig(BaseModel):
    """Defaults für Matrikel-Vergabe und neue Kurse."""
    # Erste automatisch vergebene Roll-Nummer
    first_roll_number: int = Field(1001, ge=1,
        description="Erste automatisch vergebene Roll-Nummer")
    # Kapazität, wenn beim Anlegen keine angegeben wird
    default_capacity: int = Field(30, ge=0,
        description="Standard-Kapazität neuer Kurse")
    # Titel, wenn beim Anlegen keiner angegeben wird
    default_course_title: str = Field("Untitled Course",
        description="Standard-Titel neuer Kurse")


# ─── LOGGING ───

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class LoggingConfig(BaseModel):
    """Log-Ausgabe auf der Konsole."""
    level: str = Field("INFO", description="DEBUG, INFO, WARNING oder ERROR")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(
                f"Unbekanntes Log-Level '{v}'. Erlaubt: {', '.join(_LOG_LEVELS)}"
            )
        return v


# ─── GESAMT-KONFIGURATION ───

class RecordsConfig(BaseModel):
    """Gesamte Konfiguration der Hochschul-Datensätze."""
    storage: StorageConfig = Field(default_factory=StorageConfig)
    enrollment: EnrollmentConfig = Field(default_factory=EnrollmentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
