"""ReportWriter - writes marksheet and transcript files."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from gradebook.records.exceptions import NoAttemptsError, StorageError
from gradebook.records.models import Student
from gradebook.reports.renderer import render_marksheet, render_transcript

logger = logging.getLogger(__name__)


def marksheet_filename(student_id: str, when: datetime) -> str:
    return f"Marksheet_{student_id}_{when:%Y%m%d}.txt"


def transcript_filename(student_id: str, when: datetime) -> str:
    return f"Transcript_{student_id}_{when:%Y%m%d}.txt"


class ReportWriter:
    """Writes generated reports into their output directories."""

    def __init__(self, marksheet_dir: str | Path, transcript_dir: str | Path) -> None:
        """Initialize the writer.

        Args:
            marksheet_dir: Directory for Marksheet_*.txt files.
            transcript_dir: Directory for Transcript_*.txt files.
        """
        self.marksheet_dir = Path(marksheet_dir)
        self.transcript_dir = Path(transcript_dir)

    def write_marksheet(self, student: Student, now: datetime | None = None) -> Path:
        """Write a marksheet for the student's latest attempt.

        Args:
            student: Student to report on.
            now: Generation time (defaults to the current local time).

        Returns:
            Path of the written marksheet.

        Raises:
            NoAttemptsError: If the student has no attempts.
            StorageError: If the file cannot be written.
        """
        attempt = student.latest_attempt()
        if attempt is None:
            raise NoAttemptsError("No marks available for this student.")
        now = now or datetime.now().astimezone()
        path = self.marksheet_dir / marksheet_filename(student.id, now)
        self._write(path, render_marksheet(student, attempt, now))
        logger.info("Generated marksheet for %s: %s", student.id, path)
        return path

    def write_transcript(self, student: Student, now: datetime | None = None) -> Path:
        """Write an academic transcript covering every attempt.

        Raises:
            NoAttemptsError: If the student has no attempts.
            StorageError: If the file cannot be written.
        """
        if not student.has_attempts:
            raise NoAttemptsError("No academic records available for this student.")
        now = now or datetime.now().astimezone()
        path = self.transcript_dir / transcript_filename(student.id, now)
        self._write(path, render_transcript(student, now))
        logger.info("Generated transcript for %s: %s", student.id, path)
        return path

    def _write(self, path: Path, content: str) -> None:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error("Failed to write report %s: %s", path, e)
            raise StorageError(f"Failed to write {path.name}: {e}") from e
