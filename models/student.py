"""Datenmodell für Studierende (Pydantic v2)."""

import logging
from typing import ClassVar

from pydantic import field_validator

from models.course import Course
from models.enrollment import EnrollmentResult
from models.person import Person
from models.roll_counter import RollCounter

logger = logging.getLogger(__name__)


class Student(Person):
    """Eingeschriebene Person mit Roll-Nummer und Kursliste."""

    kind: ClassVar[str] = "Student"

    roll_number: int
    course_ids: list[int] = []   # Reihenfolge der Einschreibung, keine Duplikate

    @field_validator("course_ids")
    @classmethod
    def _no_duplicate_courses(cls, v: list[int]) -> list[int]:
        dupes = sorted({cid for cid in v if v.count(cid) > 1})
        if dupes:
            raise ValueError(f"Doppelte Kurs-IDs: {dupes}")
        return v

    @classmethod
    def create(cls, name: str, id: int, counter: RollCounter) -> "Student":
        """Legt eine Person mit der nächsten freien Roll-Nummer an."""
        student = cls(id=id, name=name, roll_number=counter.issue())
        logger.info(f"Student {name} angelegt mit Roll-Nr. {student.roll_number}")
        return student

    def is_enrolled(self, course_id: int) -> bool:
        return course_id in self.course_ids

    def enroll(self, course_id: int) -> EnrollmentResult:
        """Einschreibung per Kurs-ID. Ohne Kapazitätsprüfung."""
        if self.is_enrolled(course_id):
            logger.info(f"{self.name} ist bereits in Kurs {course_id} eingeschrieben.")
            return EnrollmentResult.ALREADY_ENROLLED
        self.course_ids.append(course_id)
        logger.info(f"{self.name} in Kurs {course_id} eingeschrieben (per ID).")
        return EnrollmentResult.ENROLLED

    def enroll_in(self, course: Course) -> EnrollmentResult:
        """Einschreibung über das Kurs-Objekt: belegt einen Platz im Kurs.

        Ist der Kurs voll, bleibt die Kursliste unverändert.
        """
        if self.is_enrolled(course.id):
            logger.info(f"{self.name} ist bereits in Kurs {course.id} eingeschrieben.")
            return EnrollmentResult.ALREADY_ENROLLED
        result = course.increment_enrollment()
        if result is EnrollmentResult.COURSE_FULL:
            logger.error(
                f"Einschreibung fehlgeschlagen: Kurs {course.id} ist voll "
                f"({course.enrolled}/{course.capacity})."
            )
            return result
        self.course_ids.append(course.id)
        logger.info(f"{self.name} in Kurs {course.id} eingeschrieben (per Objekt).")
        return result

    def detail_rows(self) -> list[tuple[str, str]]:
        return [
            ("ID", str(self.id)),
            ("Roll-Nr.", str(self.roll_number)),
            ("Name", self.name),
            ("Kurse", str(len(self.course_ids))),
        ]
