"""Datenmodell für Lehrende (Pydantic v2)."""

import logging
from typing import TYPE_CHECKING, ClassVar

from models.course import Course
from models.person import Person

if TYPE_CHECKING:
    from models.record_list import RecordList

logger = logging.getLogger(__name__)


class Faculty(Person):
    """Lehrende Person. Kurse werden nur per ID referenziert."""

    kind: ClassVar[str] = "Faculty"

    department: str
    course_ids: list[int] = []

    def assign_course(self, course: Course) -> None:
        if course.id in self.course_ids:
            return
        self.course_ids.append(course.id)
        logger.info(f"{self.name} übernimmt Kurs {course.id}.")

    def courses_taught(self, courses: "RecordList[Course]") -> list[Course]:
        """Löst die Kurs-IDs gegen die Kursliste auf; unbekannte IDs fallen weg."""
        found = (courses.find(cid) for cid in self.course_ids)
        return [c for c in found if c is not None]

    def detail_rows(self) -> list[tuple[str, str]]:
        return [
            ("ID", str(self.id)),
            ("Name", self.name),
            ("Fachbereich", self.department),
            ("Kurse", str(len(self.course_ids))),
        ]
