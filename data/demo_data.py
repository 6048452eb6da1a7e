"""Demo-Datensatz: zwei Kurse, zwei Studierende, eine Lehrkraft."""

from config.defaults import DEMO_COURSES, DEMO_FACULTY, DEMO_STUDENTS
from config.schema import RecordsConfig
from models.campus import Campus
from models.course import Course
from models.enrollment import EnrollmentResult


def build_demo_campus(config: RecordsConfig) -> Campus:
    """Legt den Demo-Bestand an. Roll-Nummern ab first_roll_number."""
    campus = Campus(config.enrollment)
    for course_id, title, capacity in DEMO_COURSES:
        campus.add_course(course_id, title, capacity)
    for name, student_id in DEMO_STUDENTS:
        campus.admit_student(name, student_id)
    for name, faculty_id, department in DEMO_FACULTY:
        campus.hire_faculty(name, faculty_id, department)
    return campus


def fill_course(course: Course) -> list[EnrollmentResult]:
    """Belegt alle freien Plätze und versucht danach einen weiteren.

    Das letzte Ergebnis ist immer COURSE_FULL.
    """
    results = [course.increment_enrollment() for _ in range(course.free_seats)]
    results.append(course.increment_enrollment())
    return results
