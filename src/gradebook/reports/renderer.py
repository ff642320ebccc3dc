"""Plain-text marksheet and transcript rendering."""

from __future__ import annotations

from datetime import datetime

from gradebook.records.models import Attempt, Student

INSTITUTION = "UNIVERSITY OF SUNDERLAND"
BOX_WIDTH = 74
RULE = "-" * 60


def _banner(title: str) -> list[str]:
    return [
        "╔" + "═" * BOX_WIDTH + "╗",
        "║" + INSTITUTION.center(BOX_WIDTH) + "║",
        "║" + title.center(BOX_WIDTH) + "║",
        "╚" + "═" * BOX_WIDTH + "╝",
    ]


def format_date(moment: datetime) -> str:
    return moment.strftime("%d/%m/%Y")


def render_marksheet(student: Student, attempt: Attempt, generated_at: datetime) -> str:
    """Render the marksheet for one attempt."""
    lines = _banner("STUDENT MARKSHEET")
    lines += [
        "",
        f"Student ID: {student.id}",
        f"Name: {student.name}",
        f"Date: {format_date(generated_at)}",
        f"Attempt: {attempt.sequence_number}",
        "",
        "Subject Marks:",
    ]
    lines += [f"{subject}: {mark}" for subject, mark in attempt.marks.by_subject().items()]
    lines += [
        "",
        f"Average: {attempt.average:.2f}%",
        f"Grade: {attempt.grade}",
        f"Status: {attempt.status}",
    ]
    return "\n".join(lines) + "\n"


def render_transcript(student: Student, generated_at: datetime) -> str:
    """Render the full academic transcript for a student.

    The caller must make sure the student has at least one attempt.
    """
    best = student.best_attempt()
    if best is None:
        raise ValueError(f"Student {student.id} has no attempts")

    lines = _banner("ACADEMIC TRANSCRIPT")
    lines += [
        "",
        f"Student ID: {student.id}",
        f"Name: {student.name}",
        f"Email: {student.email}",
        f"Generated: {generated_at:%d/%m/%Y %H:%M:%S}",
        "",
        "ACADEMIC RECORD:",
        RULE,
    ]
    for attempt in student.attempts:
        lines += [
            f"Attempt {attempt.sequence_number} - {format_date(attempt.timestamp)}",
            f"Average: {attempt.average:.2f}% | Grade: {attempt.grade} | Status: {attempt.status}",
            "",
        ]
    lines += [
        "FINAL RESULT:",
        f"Best Performance: {best.average:.2f}%",
        f"Final Grade: {best.grade}",
        f"Overall Status: {best.status}",
    ]
    return "\n".join(lines) + "\n"
