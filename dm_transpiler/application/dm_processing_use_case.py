from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..domain.entities.sdtm_domain import DM_DOMAIN
from ..domain.services.dm_frame_builder import build_dm_frame
from ..domain.services.dm_transformer import DemographicsTransformer, DMTransformError
from .models import DatasetOutputRequest, ProcessDMResponse

if TYPE_CHECKING:
    from .models import ProcessDMRequest
    from .ports.repositories import SourceRecordLoaderPort, StudyDataRepositoryPort
    from .ports.services import DatasetOutputPort, LoggerPort

VERBOSE_TRACEBACK_LEVEL = 2


@dataclass(slots=True)
class DMProcessingDependencies:
    logger: LoggerPort
    study_data_repository: StudyDataRepositoryPort
    record_loader: SourceRecordLoaderPort
    dataset_output: DatasetOutputPort | None = None


class DMProcessingUseCase:
    """Load raw sources, build the DM dataset and hand it to the writers.

    Data-quality diagnostics from the transformer are forwarded to the
    logger and returned on the response. Source I/O failures end the run
    with ``success=False`` and a message in ``error``.
    """

    def __init__(self, dependencies: DMProcessingDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._study_data_repository = dependencies.study_data_repository
        self._record_loader = dependencies.record_loader
        self._dataset_output = dependencies.dataset_output

    def execute(self, request: ProcessDMRequest) -> ProcessDMResponse:
        response = ProcessDMResponse()
        self.logger.log_run_start(
            request.study_id,
            request.demographics_file,
            request.exposure_file,
            sorted(request.output_formats),
        )
        try:
            demographics_frame = self._study_data_repository.read_dataset(
                request.demographics_file
            )
            self.logger.log_file_loaded(
                request.demographics_file.name,
                len(demographics_frame),
                len(demographics_frame.columns),
            )
            exposure_frame = self._study_data_repository.read_dataset(
                request.exposure_file
            )
            self.logger.log_file_loaded(
                request.exposure_file.name,
                len(exposure_frame),
                len(exposure_frame.columns),
            )
            demographics = self._record_loader.demographics_from_frame(
                demographics_frame
            )
            exposures = self._record_loader.exposures_from_frame(exposure_frame)

            transformer = DemographicsTransformer(
                request.study_id,
                request.site_id,
                request.country,
                missing_subject_policy=request.missing_subject_policy,
            )
            result = transformer.transform(demographics, exposures)
        except DMTransformError as exc:
            return self._fail(response, f"{DM_DOMAIN.code}: {exc}")
        except Exception as exc:
            self._fail(response, str(exc))
            if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                self.logger.error(traceback.format_exc())
            return response

        response.records = result.records
        response.diagnostics = result.diagnostics
        for diagnostic in result.diagnostics:
            self.logger.log_diagnostic(diagnostic)

        response.dataframe = build_dm_frame(result.records)
        self.logger.log_dataset_built(
            DM_DOMAIN.code,
            len(response.dataframe),
            len(response.dataframe.columns),
        )

        if request.write_output and self._dataset_output is not None:
            output = self._dataset_output.generate(
                DatasetOutputRequest(
                    dataframe=response.dataframe,
                    domain=DM_DOMAIN,
                    output_dir=request.output_dir,
                    formats=set(request.output_formats),
                )
            )
            response.output = output
            for path in output.written_paths():
                self.logger.success(f"Wrote {path}")
            if not output.success:
                for error in output.errors:
                    self.logger.error(error)
                response.success = False
                response.error = "; ".join(output.errors)

        self.logger.log_final_stats()
        return response

    def _fail(self, response: ProcessDMResponse, message: str) -> ProcessDMResponse:
        self.logger.error(message)
        response.success = False
        response.error = message
        return response
