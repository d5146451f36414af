"""Repository implementations for data access.

This module provides concrete implementations of repository interfaces
for reading raw study data.
"""

from .study_data_repository import StudyDataRepository

__all__ = ["StudyDataRepository"]
