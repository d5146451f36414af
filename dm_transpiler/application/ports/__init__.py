"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import SourceRecordLoaderPort, StudyDataRepositoryPort
from .services import DatasetOutputPort, LoggerPort

__all__ = [
    "DatasetOutputPort",
    "LoggerPort",
    "SourceRecordLoaderPort",
    "StudyDataRepositoryPort",
]
