"""GradingService - the operations the terminal UI calls into."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from gradebook.records import (
    Attempt,
    ClassStatistics,
    GradebookError,
    Marks,
    RecordStore,
    Student,
    StudentRegistry,
    ValidationError,
    compute_statistics,
)
from gradebook.reports import ReportWriter
from gradebook.service.models import EmailPreview, OperationResult, StorageLayout

if TYPE_CHECKING:
    from gradebook.config import GradebookConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GradingService:
    """Core operations for the grading system.

    Every operation returns an OperationResult instead of raising, so the
    UI can decide what to show from ``result.kind``. Errors outside the
    GradebookError hierarchy are not caught here.
    """

    def __init__(
        self,
        registry: StudentRegistry,
        reports: ReportWriter,
        startup_errors: list[str] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            registry: Loaded student registry.
            reports: Writer for marksheets and transcripts.
            startup_errors: Problems found while preparing storage, for display.
        """
        self.registry = registry
        self.reports = reports
        self.startup_errors = list(startup_errors or [])

    @classmethod
    def from_layout(cls, layout: StorageLayout) -> GradingService:
        """Create directories, load every student record and build the service."""
        errors = layout.ensure()
        for message in errors:
            logger.error(message)
        registry = StudentRegistry(RecordStore(layout.records))
        registry.load()
        return cls(
            registry=registry,
            reports=ReportWriter(layout.marksheets, layout.transcripts),
            startup_errors=errors,
        )

    @classmethod
    def from_config(cls, config: GradebookConfig) -> GradingService:
        """Build the service from application configuration."""
        return cls.from_layout(
            StorageLayout(
                records=config.records_path,
                marksheets=config.marksheets_path,
                transcripts=config.transcripts_path,
            )
        )

    def _run(
        self, action: str, operation: Callable[..., T], *args: object
    ) -> OperationResult[T]:
        try:
            return OperationResult.success(operation(*args))
        except GradebookError as e:
            logger.info("%s failed (%s): %s", action, e.kind, e)
            return OperationResult.failure(e)

    # --- Student Operations ---

    def create_student(self, name: str | None, email: str | None = "") -> OperationResult[Student]:
        """Create and save a new student with a generated ID."""
        return self._run("create_student", self.registry.create, name, email)

    def get_student(self, student_id: str | None) -> OperationResult[Student]:
        """Look up a student by ID."""
        return self._run("get_student", self.registry.get, student_id)

    def search_by_name(self, query: str | None) -> OperationResult[list[Student]]:
        """Case-insensitive partial name search. A blank query is an error."""
        return self._run("search_by_name", self.registry.search_by_name, query)

    def list_all_students(self) -> list[Student]:
        """All students, in load/creation order."""
        return self.registry.list_all()

    # --- Attempt Operations ---

    def record_attempt(
        self, student_id: str | None, marks: Marks | Sequence[int], is_resit: bool = False
    ) -> OperationResult[Attempt]:
        """Record first-attempt or resit marks for a student."""
        return self._run(
            "record_attempt", self.registry.record_attempt, student_id, marks, is_resit
        )

    # --- Reports ---

    def generate_marksheet(self, student_id: str | None) -> OperationResult[Path]:
        """Write a marksheet for the student's latest attempt."""
        return self._run("generate_marksheet", self._write_marksheet, student_id)

    def generate_transcript(self, student_id: str | None) -> OperationResult[Path]:
        """Write an academic transcript for the student."""
        return self._run("generate_transcript", self._write_transcript, student_id)

    def _write_marksheet(self, student_id: str | None) -> Path:
        return self.reports.write_marksheet(self.registry.get(student_id))

    def _write_transcript(self, student_id: str | None) -> Path:
        return self.reports.write_transcript(self.registry.get(student_id))

    def get_statistics(self) -> ClassStatistics | None:
        """Statistics over every student's best attempt; None if there are none."""
        return compute_statistics(self.registry.list_all())

    # --- Email ---

    def preview_email(
        self, student_id: str | None, subject: str, body: str
    ) -> OperationResult[EmailPreview]:
        """Build the email that would be sent to a student. Nothing is sent."""
        return self._run("preview_email", self._build_email, student_id, subject, body)

    def _build_email(self, student_id: str | None, subject: str, body: str) -> EmailPreview:
        student = self.registry.get(student_id)
        if not student.email.strip():
            raise ValidationError("No email address on file for this student.")
        return EmailPreview(recipient=student.email, subject=subject, body=body)
