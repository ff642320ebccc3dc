"""Reports - Marksheets and academic transcripts."""

from gradebook.reports.renderer import render_marksheet, render_transcript
from gradebook.reports.writer import ReportWriter, marksheet_filename, transcript_filename

__all__ = [
    "ReportWriter",
    "marksheet_filename",
    "render_marksheet",
    "render_transcript",
    "transcript_filename",
]
