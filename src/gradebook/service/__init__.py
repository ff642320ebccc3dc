"""Service - Core operations exposed to the terminal UI."""

from gradebook.service.models import EmailPreview, OperationResult, StorageLayout
from gradebook.service.service import GradingService

__all__ = [
    "EmailPreview",
    "GradingService",
    "OperationResult",
    "StorageLayout",
]
