"""Infrastructure I/O layer.

This package contains adapters for reading raw source tables and writing
the DM dataset (CSV, XPT).

Architecture note:
- Internal modules import from the defining modules to avoid cycles.
- Application DTOs live in dm_transpiler.application.models.
"""

from .csv_reader import CSVReader, CSVReadOptions
from .csv_writer import CSVWriter
from .dataset_output import DatasetOutputAdapter
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataValidationError,
    DatasetWriteError,
    XportGenerationError,
)
from .record_loader import SourceColumns, SourceRecordLoader
from .xpt_writer import XPTWriter, write_xpt_file

__all__ = [
    "CSVReader",
    "CSVReadOptions",
    "CSVWriter",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataValidationError",
    "DatasetOutputAdapter",
    "DatasetWriteError",
    "SourceColumns",
    "SourceRecordLoader",
    "XPTWriter",
    "XportGenerationError",
    "write_xpt_file",
]
