"""Domain services.

The Demographics transformation engine and its building blocks.
"""

from .dm_frame_builder import build_dm_frame
from .dm_transformer import (
    DemographicsTransformer,
    DMTransformError,
    DMTransformResult,
    MissingSubjectIdError,
    transform_demographics,
)
from .exposure_aggregator import aggregate_exposures

__all__ = [
    "DMTransformError",
    "DMTransformResult",
    "DemographicsTransformer",
    "MissingSubjectIdError",
    "aggregate_exposures",
    "build_dm_frame",
    "transform_demographics",
]
