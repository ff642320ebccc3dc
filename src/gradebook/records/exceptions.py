"""Custom exceptions for student records."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a records error, used by the UI to pick a message."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class GradebookError(Exception):
    """Base exception for Gradebook errors."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(GradebookError):
    """Input failed validation (empty name, bad mark, blank query)."""

    kind = ErrorKind.VALIDATION


class DuplicateAttemptError(ValidationError):
    """First-attempt marks requested for a student who already has marks."""


class NoAttemptsError(ValidationError):
    """Operation needs at least one recorded attempt."""


class NotFoundError(GradebookError):
    """Requested record does not exist."""

    kind = ErrorKind.NOT_FOUND


class StudentNotFoundError(NotFoundError):
    """Student with given ID does not exist."""


class StorageError(GradebookError):
    """Reading or writing a file failed."""

    kind = ErrorKind.STORAGE
