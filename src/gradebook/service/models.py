"""Data models returned by the grading service."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, TypeVar

from gradebook.records.exceptions import ErrorKind, GradebookError

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a core operation.

    Attributes:
        value: The operation's result when it succeeded.
        error: The error that stopped the operation, if any.
    """

    value: T | None = None
    error: GradebookError | None = None

    @classmethod
    def success(cls, value: T) -> OperationResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: GradebookError) -> OperationResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Error kind, or None on success."""
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""


@dataclass
class EmailPreview:
    """An email that would be sent to a student (nothing is delivered)."""

    recipient: str
    subject: str
    body: str


@dataclass
class StorageLayout:
    """The three sibling directories the application writes to.

    Attributes:
        records: Student record files.
        marksheets: Generated marksheets.
        transcripts: Generated transcripts.
    """

    records: Path
    marksheets: Path
    transcripts: Path
    errors: list[str] = field(default_factory=list)

    def ensure(self) -> list[str]:
        """Create any missing directories.

        Failures are collected rather than raised; later file operations
        against a missing directory fail and report individually.

        Returns:
            One message per directory that could not be created.
        """
        self.errors = []
        for path in (self.records, self.marksheets, self.transcripts):
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.errors.append(f"Error creating directory {path}: {e}")
        return self.errors
