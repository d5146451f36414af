"""Presenters for CLI output formatting.

Presenters format application responses into rich tables for the terminal.
"""

from .summary import SummaryPresenter, SummaryRequest

__all__ = ["SummaryPresenter", "SummaryRequest"]
