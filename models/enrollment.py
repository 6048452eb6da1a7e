"""Ergebnis einer Einschreibung."""

from enum import Enum


class EnrollmentResult(str, Enum):
    ENROLLED = "enrolled"
    ALREADY_ENROLLED = "already_enrolled"
    COURSE_FULL = "course_full"

    @property
    def ok(self) -> bool:
        """True wenn die Einschreibung besteht (neu oder schon vorher)."""
        return self is not EnrollmentResult.COURSE_FULL
