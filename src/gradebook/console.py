"""Interactive menu for the grading system.

All prompting, colour and layout lives here; every action calls one
GradingService operation and renders the result.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from gradebook.logging import get_logger
from gradebook.records import SUBJECTS, ErrorKind, Student
from gradebook.records.exceptions import ValidationError
from gradebook.records.models import MAX_MARK, MIN_MARK, validate_mark
from gradebook.service import GradingService, OperationResult

logger = get_logger("console")

MENU_OPTIONS = (
    "Create New Student Record",
    "Enter Marks (First Attempt)",
    "Enter Marks (Resit Attempt)",
    "View Student Record",
    "Search Student by Name",
    "Generate Marksheet",
    "Generate Academic Transcript",
    "View Academic Statistics",
    "Send Email to Student",
    "Display Student Table",
    "Exit Application",
)
EXIT_CHOICE = str(len(MENU_OPTIONS))
NOT_AVAILABLE = "N/A"


def _ask(text: str) -> str:
    """Prompt for a line of text; an empty answer is allowed."""
    return click.prompt(text, default="", show_default=False)


class ConsoleApp:
    """Menu-driven front end over a GradingService."""

    def __init__(self, service: GradingService) -> None:
        self.service = service
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.create_student,
            "2": lambda: self.enter_marks(is_resit=False),
            "3": lambda: self.enter_marks(is_resit=True),
            "4": self.view_student,
            "5": self.search_by_name,
            "6": self.generate_marksheet,
            "7": self.generate_transcript,
            "8": self.show_statistics,
            "9": self.send_email,
            "10": self.show_student_table,
        }

    # --- Output helpers ---

    def _error(self, message: str) -> None:
        click.secho(f"ERROR: {message}", fg="red")

    def _success(self, message: str) -> None:
        click.secho(message, fg="green")

    def _section(self, title: str) -> None:
        click.secho(f"\n==== {title.upper()} ====\n", fg="magenta")

    def _report_failure(self, result: OperationResult) -> None:
        match result.kind:
            case ErrorKind.NOT_FOUND:
                self._error("Student not found.")
            case ErrorKind.STORAGE:
                self._error(f"Storage problem: {result.message}")
            case _:
                self._error(result.message)

    def _lookup(self) -> Student | None:
        result = self.service.get_student(_ask("Enter Student ID"))
        if not result.ok:
            self._report_failure(result)
            return None
        return result.value

    # --- Main loop ---

    def run(self) -> None:
        """Show the menu until the operator chooses Exit."""
        self._welcome()
        for message in self.service.startup_errors:
            self._error(message)

        while True:
            self._menu()
            choice = _ask("\nPlease select an option (1-11)").strip()
            if choice == EXIT_CHOICE:
                click.secho(
                    "\nThank you for using the University Grading System. Goodbye!", fg="yellow"
                )
                logger.info("Operator exited")
                return
            action = self._actions.get(choice)
            if action is None:
                self._error("Invalid selection. Please try again.")
            else:
                logger.debug("Menu choice %s", choice)
                action()
            click.pause("\nPress any key to continue...")

    def _welcome(self) -> None:
        click.secho("UNIVERSITY OF SUNDERLAND", fg="blue", bold=True)
        click.secho("STUDENT GRADING MANAGEMENT SYSTEM", fg="blue")
        click.echo("═" * 78)
        click.secho("Welcome to the Advanced Student Assessment Management System", fg="green")
        click.echo("═" * 78)

    def _menu(self) -> None:
        click.secho("\n  MAIN MENU OPTIONS", fg="cyan", bold=True)
        click.echo()
        for number, label in enumerate(MENU_OPTIONS, start=1):
            click.echo(f"{f'{number}.':<4}{label}")

    # --- Actions ---

    def create_student(self) -> None:
        self._section("Create New Student")
        name = _ask("Enter student name")
        if not name.strip():
            self._error("Student name cannot be empty.")
            return
        email = _ask("Enter student email (optional)")

        result = self.service.create_student(name, email)
        if not result.ok:
            self._report_failure(result)
            return
        student = result.value
        self._success("\nStudent created successfully!")
        self._success(f"Student ID: {student.id}")
        self._success(f"Name: {student.name}")

    def enter_marks(self, is_resit: bool) -> None:
        self._section("Enter Resit Marks" if is_resit else "Enter First Attempt Marks")
        student = self._lookup()
        if student is None:
            return
        click.echo(f"Student: {student.name}")
        if not is_resit and student.has_attempts:
            self._error(
                "Student already has marks entered. Use resit option for additional attempts."
            )
            return

        click.echo(f"\nEnter marks for {len(SUBJECTS)} subjects ({MIN_MARK}-{MAX_MARK}):")
        marks = [self._prompt_mark(subject) for subject in SUBJECTS]

        result = self.service.record_attempt(student.id, marks, is_resit=is_resit)
        if not result.ok:
            self._report_failure(result)
            return
        attempt = result.value
        self._success("\nMarks entered successfully!")
        self._success(f"Average: {attempt.average:.2f}%")
        self._success(f"Grade: {attempt.grade}")
        self._success(f"Status: {attempt.status}")

    def _prompt_mark(self, subject: str) -> int:
        while True:
            raw = _ask(subject).strip()
            try:
                return validate_mark(int(raw), subject)
            except (ValueError, ValidationError):
                self._error(f"Please enter a valid mark between {MIN_MARK} and {MAX_MARK}.")

    def view_student(self) -> None:
        self._section("View Student Record")
        student = self._lookup()
        if student is None:
            return
        click.echo("\nStudent Details:")
        click.echo(f"ID: {student.id}")
        click.echo(f"Name: {student.name}")
        click.echo(f"Email: {student.email}")
        click.echo(f"Total Attempts: {len(student.attempts)}")

        if not student.has_attempts:
            click.echo("\nNo marks entered yet.")
            return
        click.echo("\nAttempt History:")
        for attempt in student.attempts:
            click.echo(f"\nAttempt {attempt.sequence_number} - {attempt.timestamp:%d/%m/%Y}")
            click.echo(f"Marks: {', '.join(str(m) for m in attempt.marks)}")
            click.echo(f"Average: {attempt.average:.2f}%")
            click.echo(f"Grade: {attempt.grade}")
            click.echo(f"Status: {attempt.status}")
        best = student.best_attempt()
        self._success(f"\nBest Performance: {best.average:.2f}% (Grade: {best.grade})")

    def search_by_name(self) -> None:
        self._section("Search Student by Name")
        result = self.service.search_by_name(_ask("Enter student name (partial match allowed)"))
        if not result.ok:
            self._report_failure(result)
            return
        if not result.value:
            click.echo("No students found matching the search criteria.")
            return
        click.echo(f"\nFound {len(result.value)} student(s):")
        for student in result.value:
            click.echo(f"ID: {student.id}, Name: {student.name}, Attempts: {len(student.attempts)}")

    def generate_marksheet(self) -> None:
        self._section("Generate Marksheet")
        result = self.service.generate_marksheet(_ask("Enter Student ID"))
        if not result.ok:
            self._report_failure(result)
            return
        self._success(f"Marksheet generated successfully: {result.value.name}")

    def generate_transcript(self) -> None:
        self._section("Generate Academic Transcript")
        result = self.service.generate_transcript(_ask("Enter Student ID"))
        if not result.ok:
            self._report_failure(result)
            return
        self._success(f"Academic transcript generated successfully: {result.value.name}")

    def show_statistics(self) -> None:
        self._section("Academic Statistics")
        if not self.service.list_all_students():
            click.echo("No students registered yet.")
            return
        stats = self.service.get_statistics()
        if stats is None:
            click.echo("No academic records available yet.")
            return

        click.echo(f"Total Students: {stats.total_students}")
        click.echo(f"Students with Records: {stats.students_with_records}")
        click.echo(f"Passed Students: {stats.passed}")
        click.echo(f"Failed Students: {stats.failed}")
        click.echo(f"Pass Rate: {stats.pass_rate:.1f}%")
        click.echo(f"\nClass Average: {stats.class_average:.2f}%")
        click.echo(f"Highest Score: {stats.highest:.2f}%")
        click.echo(f"Lowest Score: {stats.lowest:.2f}%")
        click.echo("\nGrade Distribution:")
        for grade, count in stats.grade_distribution.items():
            click.echo(f"Grade {grade}: {count} students")

    def send_email(self) -> None:
        self._section("Send Email to Student")
        student = self._lookup()
        if student is None:
            return
        if not student.email.strip():
            self._error("No email address on file for this student.")
            return

        subject = _ask("Enter email subject")
        click.echo("Enter email message (press Enter twice to finish):")
        lines: list[str] = []
        empty_lines = 0
        while empty_lines < 2:
            line = click.prompt("", default="", show_default=False, prompt_suffix="")
            if line:
                empty_lines = 0
                lines.append(line)
            else:
                empty_lines += 1

        result = self.service.preview_email(student.id, subject, "\n".join(lines))
        if not result.ok:
            self._report_failure(result)
            return
        preview = result.value
        click.secho("Email functionality requires SMTP configuration.", fg="yellow")
        click.secho(f"Email would be sent to: {preview.recipient}", fg="yellow")
        click.secho(f"Subject: {preview.subject}", fg="yellow")
        click.secho("Message preview:", fg="yellow")
        click.echo(preview.body)

    def show_student_table(self) -> None:
        students = self.service.list_all_students()
        if not students:
            click.echo("No students registered yet.")
            return

        headers = ("ID", "Name", "Email", "Attempts", "Best Grade", "Best Avg", "Best Status")
        rows = []
        for student in students:
            best = student.best_attempt()
            rows.append(
                (
                    student.id,
                    student.name,
                    student.email,
                    str(len(student.attempts)),
                    str(best.grade) if best else NOT_AVAILABLE,
                    f"{best.average:.2f}" if best else NOT_AVAILABLE,
                    str(best.status) if best else NOT_AVAILABLE,
                )
            )
        widths = [max(len(h), *(len(row[i]) for row in rows)) for i, h in enumerate(headers)]

        def format_row(cells: tuple[str, ...]) -> str:
            return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths, strict=True))

        click.secho(format_row(headers), fg="cyan")
        click.echo("-" * (sum(widths) + 3 * (len(widths) - 1)))
        for row in rows:
            click.echo(format_row(row))
