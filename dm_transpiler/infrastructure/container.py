from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.dm_processing_use_case import (
    DMProcessingDependencies,
    DMProcessingUseCase,
)
from .io.csv_reader import CSVReader
from .io.csv_writer import CSVWriter
from .io.dataset_output import DatasetOutputAdapter
from .io.record_loader import SourceRecordLoader
from .io.xpt_writer import XPTWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.study_data_repository import StudyDataRepository

if TYPE_CHECKING:
    from ..application.ports.repositories import (
        SourceRecordLoaderPort,
        StudyDataRepositoryPort,
    )
    from ..application.ports.services import DatasetOutputPort, LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._dataset_output_instance: DatasetOutputPort | None = None
        self._csv_reader_instance: CSVReader | None = None
        self._study_data_repository_instance: StudyDataRepositoryPort | None = None
        self._record_loader_instance: SourceRecordLoaderPort | None = None
        self._xpt_writer_instance: XPTWriter | None = None
        self._csv_writer_instance: CSVWriter | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_csv_reader(self) -> CSVReader:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_xpt_writer(self) -> XPTWriter:
        if self._xpt_writer_instance is None:
            self._xpt_writer_instance = XPTWriter()
        return self._xpt_writer_instance

    def create_csv_writer(self) -> CSVWriter:
        if self._csv_writer_instance is None:
            self._csv_writer_instance = CSVWriter()
        return self._csv_writer_instance

    def create_dataset_output(self) -> DatasetOutputPort:
        if self._dataset_output_instance is None:
            self._dataset_output_instance = DatasetOutputAdapter(
                csv_writer=self.create_csv_writer(),
                xpt_writer=self.create_xpt_writer(),
            )
        return self._dataset_output_instance

    def create_study_data_repository(self) -> StudyDataRepositoryPort:
        if self._study_data_repository_instance is None:
            self._study_data_repository_instance = StudyDataRepository(
                csv_reader=self.create_csv_reader()
            )
        return self._study_data_repository_instance

    def create_record_loader(self) -> SourceRecordLoaderPort:
        if self._record_loader_instance is None:
            self._record_loader_instance = SourceRecordLoader()
        return self._record_loader_instance

    def create_dm_processing_use_case(self) -> DMProcessingUseCase:
        dependencies = DMProcessingDependencies(
            logger=self.create_logger(),
            study_data_repository=self.create_study_data_repository(),
            record_loader=self.create_record_loader(),
            dataset_output=self.create_dataset_output(),
        )
        return DMProcessingUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._dataset_output_instance = None
        self._csv_reader_instance = None
        self._study_data_repository_instance = None
        self._record_loader_instance = None
        self._xpt_writer_instance = None
        self._csv_writer_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_dataset_output(self, dataset_output: DatasetOutputPort) -> None:
        self._dataset_output_instance = dataset_output

    def override_study_data_repository(
        self, study_data_repository: StudyDataRepositoryPort
    ) -> None:
        self._study_data_repository_instance = study_data_repository


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
