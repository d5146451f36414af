"""Application layer for the DM transpiler.

This layer contains the use case and the ports (interfaces) it needs from
infrastructure.
"""

from .models import (
    DatasetOutputRequest,
    DatasetOutputResult,
    ProcessDMRequest,
    ProcessDMResponse,
)

# Import DMProcessingUseCase directly when needed:
#   from dm_transpiler.application.dm_processing_use_case import DMProcessingUseCase

__all__ = [
    "DatasetOutputRequest",
    "DatasetOutputResult",
    "ProcessDMRequest",
    "ProcessDMResponse",
]
