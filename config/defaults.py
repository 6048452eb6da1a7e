from config.schema import (
    EnrollmentConfig,
    LoggingConfig,
    RecordsConfig,
    StorageConfig,
)


def default_storage() -> StorageConfig:
    """Standard-Ablage: beide Satzdateien im aktuellen Verzeichnis.

    student_records.txt   id|name|roll|kurs-ids
    course_records.txt    id|titel|kapazität|eingeschrieben
    """
    return StorageConfig(
        data_dir=".",
        student_file="student_records.txt",
        course_file="course_records.txt",
        encoding="utf-8",
    )


def default_records_config() -> RecordsConfig:
    """Vollständige Default-Konfiguration."""
    return RecordsConfig(
        storage=default_storage(),
        enrollment=EnrollmentConfig(),
        logging=LoggingConfig(),
    )


# ─── DEMO-DATENSATZ ───
# (id, titel, kapazität); None = Default aus der Konfiguration
DEMO_COURSES = [
    (101, "Advanced Mathematics", 40),
    (201, "Data Structures & Algos", None),
]

# (name, id); Roll-Nummern werden automatisch vergeben
DEMO_STUDENTS = [
    ("Alice Smith", 5001),
    ("Bob Johnson", 5002),
]

# (name, id, fachbereich)
DEMO_FACULTY = [
    ("Dr. Chen", 7001, "Computer Science"),
]
