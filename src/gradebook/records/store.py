"""RecordStore - one flat text file per student.

File layout (UTF-8, one field per line)::

    <id>
    <name>
    <email, or empty line>
    <attempt count N>
    then N blocks of six lines:
        <marks, comma separated, subject order>
        <average>
        <status>
        <grade>
        <ISO-8601 timestamp with UTC offset>
        <sequence number>
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from pathlib import Path

from gradebook.records.exceptions import StorageError, ValidationError
from gradebook.records.grading import Grade, Status
from gradebook.records.models import Attempt, Marks, Student

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".txt"
HEADER_LINES = 4
ATTEMPT_LINES = 6


class RecordFormatError(StorageError):
    """A record file does not follow the expected layout."""


def serialize_student(student: Student) -> list[str]:
    """Render a student and all attempts as record file lines."""
    lines = [student.id, student.name, student.email or "", str(len(student.attempts))]
    for attempt in student.attempts:
        lines.extend(
            [
                ",".join(str(mark) for mark in attempt.marks),
                str(attempt.average),
                str(attempt.status),
                str(attempt.grade),
                attempt.timestamp.isoformat(),
                str(attempt.sequence_number),
            ]
        )
    return lines


def parse_student(lines: list[str]) -> Student:
    """Parse record file lines into a Student.

    Stored average/grade/status are taken as-is, not recomputed.

    Raises:
        RecordFormatError: If any field is missing or malformed.
    """
    if len(lines) < HEADER_LINES:
        raise RecordFormatError(f"expected at least {HEADER_LINES} lines, got {len(lines)}")

    student_id, name, email = lines[0].strip(), lines[1], lines[2]
    if not student_id:
        raise RecordFormatError("student id is empty")
    if not name.strip():
        raise RecordFormatError("student name is empty")

    count = _parse_int(lines[3], "attempt count")
    if count < 0:
        raise RecordFormatError(f"attempt count cannot be negative: {count}")

    student = Student(id=student_id, name=name, email=email)
    index = HEADER_LINES
    for number in range(1, count + 1):
        block = lines[index : index + ATTEMPT_LINES]
        if len(block) < ATTEMPT_LINES:
            raise RecordFormatError(f"attempt {number} of {count} runs past the end of the file")
        student.add_attempt(_parse_attempt(block))
        index += ATTEMPT_LINES
    return student


def _parse_attempt(block: list[str]) -> Attempt:
    marks_line, average_line, status_line, grade_line, timestamp_line, number_line = block
    try:
        marks = Marks.from_sequence([_parse_int(part, "mark") for part in marks_line.split(",")])
    except ValidationError as e:
        raise RecordFormatError(f"invalid marks {marks_line!r}: {e}") from e

    try:
        average = float(average_line)
    except ValueError as e:
        raise RecordFormatError(f"invalid average {average_line!r}") from e
    if not math.isfinite(average):
        raise RecordFormatError(f"invalid average {average_line!r}")

    try:
        status = Status(status_line.strip())
        grade = Grade(grade_line.strip())
    except ValueError as e:
        raise RecordFormatError(f"invalid status/grade: {e}") from e

    try:
        timestamp = datetime.fromisoformat(timestamp_line.strip())
    except ValueError as e:
        raise RecordFormatError(f"invalid timestamp {timestamp_line!r}") from e
    if timestamp.tzinfo is None:
        # Older files carry local time without an offset
        timestamp = timestamp.astimezone()

    return Attempt(
        marks=marks,
        average=average,
        grade=grade,
        status=status,
        timestamp=timestamp,
        sequence_number=_parse_int(number_line, "attempt number"),
    )


def _parse_int(text: str, label: str) -> int:
    try:
        return int(text.strip())
    except ValueError as e:
        raise RecordFormatError(f"invalid {label} {text!r}") from e


class RecordStore:
    """Reads and writes student record files in a single directory."""

    def __init__(self, directory: str | Path) -> None:
        """Initialize the store.

        Args:
            directory: Directory holding one ``<id>.txt`` file per student.
        """
        self.directory = Path(directory)

    def path_for(self, student_id: str) -> Path:
        """Return the record file path for a student ID."""
        return self.directory / f"{student_id}{RECORD_SUFFIX}"

    def save(self, student: Student) -> Path:
        """Write the full record for a student, replacing any previous file.

        Args:
            student: Student to persist, with all attempts.

        Returns:
            Path of the written file.

        Raises:
            StorageError: If the file cannot be written.
        """
        path = self.path_for(student.id)
        content = "\n".join(serialize_student(student)) + "\n"
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as e:
            logger.error("Failed to save student %s to %s: %s", student.id, path, e)
            raise StorageError(f"Failed to save student file for {student.id}: {e}") from e
        logger.debug("Saved student %s (%d attempts)", student.id, len(student.attempts))
        return path

    def load(self, student_id: str) -> Student:
        """Load a single student by ID.

        Raises:
            StorageError: If the file is missing, unreadable or malformed.
        """
        return self._read(self.path_for(student_id))

    def load_all(self) -> list[Student]:
        """Load every readable record file, in file name order.

        Files that cannot be read or parsed are logged and skipped.

        Returns:
            Successfully parsed students.
        """
        if not self.directory.is_dir():
            logger.info("Record directory %s does not exist, nothing to load", self.directory)
            return []

        students: list[Student] = []
        for path in sorted(self.directory.glob(f"*{RECORD_SUFFIX}")):
            try:
                students.append(self._read(path))
            except StorageError as e:
                logger.warning("Skipping record file %s: %s", path.name, e)
        logger.info("Loaded %d student records from %s", len(students), self.directory)
        return students

    def _read(self, path: Path) -> Student:
        try:
            with open(path, encoding="utf-8") as f:
                lines = [line.rstrip("\r\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path.name}: {e}") from e

        student = parse_student(lines)
        # save() always writes to <id>.txt, so a misnamed file would shadow later saves
        if student.id != path.stem:
            raise RecordFormatError(
                f"student id {student.id!r} does not match file name {path.name!r}"
            )

        numbers = [a.sequence_number for a in student.attempts]
        if numbers != list(range(1, len(numbers) + 1)):
            logger.warning(
                "Attempt numbers for student %s are %s, expected 1..%d; keeping stored values",
                student.id,
                numbers,
                len(numbers),
            )
        for attempt in student.attempts:
            if not attempt.is_consistent():
                logger.warning(
                    "Stored results for student %s attempt %d do not match its marks; "
                    "keeping stored values",
                    student.id,
                    attempt.sequence_number,
                )
        return student
