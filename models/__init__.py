from models.person import Person
from models.student import Student
from models.faculty import Faculty
from models.course import Course
from models.enrollment import EnrollmentResult
from models.roll_counter import RollCounter
from models.record_list import RecordList
from models.campus import Campus

__all__ = [
    "Person",
    "Student",
    "Faculty",
    "Course",
    "EnrollmentResult",
    "RollCounter",
    "RecordList",
    "Campus",
]
