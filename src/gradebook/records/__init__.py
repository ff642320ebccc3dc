"""Records - Student/attempt model, grading, storage and statistics."""

from gradebook.records.exceptions import (
    DuplicateAttemptError,
    ErrorKind,
    GradebookError,
    NoAttemptsError,
    NotFoundError,
    StorageError,
    StudentNotFoundError,
    ValidationError,
)
from gradebook.records.grading import Grade, GradeResult, Status, evaluate
from gradebook.records.models import SUBJECTS, Attempt, Marks, Student, Subject
from gradebook.records.registry import StudentRegistry
from gradebook.records.statistics import ClassStatistics, compute_statistics
from gradebook.records.store import RecordFormatError, RecordStore

__all__ = [
    "SUBJECTS",
    "Attempt",
    "ClassStatistics",
    "DuplicateAttemptError",
    "ErrorKind",
    "Grade",
    "GradeResult",
    "GradebookError",
    "Marks",
    "NoAttemptsError",
    "NotFoundError",
    "RecordFormatError",
    "RecordStore",
    "Status",
    "StorageError",
    "Student",
    "StudentNotFoundError",
    "StudentRegistry",
    "Subject",
    "ValidationError",
    "compute_statistics",
    "evaluate",
]
