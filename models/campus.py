"""Campus: Kurse, Studierende und Lehrende samt Roll-Nummern-Zähler."""

from typing import Optional

from config.schema import EnrollmentConfig
from models.course import Course
from models.enrollment import EnrollmentResult
from models.errors import RecordNotFoundError
from models.faculty import Faculty
from models.record_list import RecordList
from models.roll_counter import RollCounter
from models.student import Student


class Campus:
    """Besitzt alle Datensatz-Listen und den Roll-Nummern-Zähler.

    Die Zähler der Datensätze ergeben sich aus den Listen selbst.
    """

    def __init__(self, settings: Optional[EnrollmentConfig] = None) -> None:
        self.settings = settings or EnrollmentConfig()
        self.courses: RecordList[Course] = RecordList()
        self.students: RecordList[Student] = RecordList()
        self.faculty: RecordList[Faculty] = RecordList()
        self.roll_counter = RollCounter(next_roll=self.settings.first_roll_number)

    # ─── Anlegen ───

    def add_course(self, course_id: int, title: Optional[str] = None,
                   capacity: Optional[int] = None) -> Course:
        course = Course(
            id=course_id,
            title=title if title is not None else self.settings.default_course_title,
            capacity=capacity if capacity is not None else self.settings.default_capacity,
        )
        self.courses.add(course)
        return course

    def admit_student(self, name: str, student_id: int,
                      roll: Optional[int] = None) -> Student:
        """Nimmt eine Person auf. Ohne roll wird die nächste Nummer vergeben."""
        if roll is None:
            student = Student.create(name, student_id, self.roll_counter)
        else:
            student = Student(id=student_id, name=name, roll_number=roll)
            self.roll_counter.observe(roll)
        self.students.add(student)
        return student

    def hire_faculty(self, name: str, faculty_id: int, department: str) -> Faculty:
        member = Faculty(id=faculty_id, name=name, department=department)
        self.faculty.add(member)
        return member

    # ─── Nachschlagen ───

    def course(self, course_id: int) -> Course:
        course = self.courses.find(course_id)
        if course is None:
            raise RecordNotFoundError("Kurs", course_id)
        return course

    def student(self, student_id: int) -> Student:
        student = self.students.find(student_id)
        if student is None:
            raise RecordNotFoundError("Student", student_id)
        return student

    def faculty_member(self, faculty_id: int) -> Faculty:
        member = self.faculty.find(faculty_id)
        if member is None:
            raise RecordNotFoundError("Lehrende", faculty_id)
        return member

    # ─── Einschreibung ───

    def enroll(self, student_id: int, course_id: int) -> EnrollmentResult:
        """Einschreibung über das Kurs-Objekt (mit Kapazitätsprüfung)."""
        return self.student(student_id).enroll_in(self.course(course_id))

    def assign_course(self, faculty_id: int, course_id: int) -> None:
        self.faculty_member(faculty_id).assign_course(self.course(course_id))

    # ─── Übersicht ───

    @property
    def total_courses(self) -> int:
        return self.courses.count()

    @property
    def total_students(self) -> int:
        return self.students.count()

    def summary(self) -> str:
        """Kurze Übersicht über den Bestand."""
        seats_used = sum(c.enrolled for c in self.courses)
        seats_total = sum(c.capacity for c in self.courses)
        lines = [
            f"Kurse: {self.total_courses}",
            f"Studierende: {self.total_students}",
            f"Lehrende: {self.faculty.count()}",
            f"Belegte Plätze: {seats_used}/{seats_total}" if seats_total else "",
            f"Nächste Roll-Nr.: {self.roll_counter.next_roll}",
        ]
        return "\n".join(l for l in lines if l)
