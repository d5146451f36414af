from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd
import pyreadstat  # type: ignore[import-untyped]

from ...constants import Constraints
from .exceptions import XportGenerationError

if TYPE_CHECKING:
    from ...domain.entities.sdtm_domain import SDTMDomain


def write_xpt_file(
    dataset: pd.DataFrame,
    domain: SDTMDomain,
    path: str | Path,
    *,
    file_label: str | None = None,
    table_name: str | None = None,
) -> Path:
    """Persist the DataFrame as a SAS v5 transport file."""
    output_path = Path(path)
    output_path = output_path.with_name(output_path.name.lower())
    if len(output_path.stem) > Constraints.XPT_MAX_NAME_LENGTH:
        raise XportGenerationError(
            f"XPT filename stem must be <=8 characters to satisfy SDTM v5: {output_path.name}"
        )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.exists():
        output_path.unlink()
    dataset_name = (table_name or domain.resolved_dataset_name()).upper()[:8]
    label_lookup = {variable.name.upper(): variable.label for variable in domain.variables}
    type_lookup = {variable.name.upper(): variable.type for variable in domain.variables}
    max_label = Constraints.XPT_MAX_COLUMN_LABEL_LENGTH
    column_labels = [
        str(label_lookup.get(str(col).upper(), col))[:max_label]
        for col in dataset.columns
    ]
    default_label = (domain.label or domain.description or dataset_name).strip()
    label = default_label if file_label is None else file_label
    label = (label or "").strip()[:max_label] or None
    export_df = pd.DataFrame(index=dataset.index)
    for column_index, col in enumerate(dataset.columns):
        series = dataset.iloc[:, column_index]
        expected_type = type_lookup.get(str(col).upper(), "")
        values: np.ndarray
        if expected_type == "Num" or (
            not expected_type and pd.api.types.is_numeric_dtype(series.dtype)
        ):
            values = pd.to_numeric(series, errors="coerce").to_numpy(
                dtype="float64", na_value=np.nan
            )
        else:
            normalized = series.astype(object).where(~pd.isna(series), "")
            lengths = normalized.astype("string").str.len()
            if len(normalized) and int(lengths.max()) == 0:
                # Transport files cannot declare zero-width character columns.
                normalized = pd.Series([" "] * len(dataset.index), index=dataset.index)
            values = normalized.to_numpy(dtype=object)
        export_df.insert(column_index, col, values, allow_duplicates=True)
    try:
        pyreadstat.write_xport(
            export_df,
            str(output_path),
            file_label=label,
            column_labels=column_labels,
            table_name=dataset_name,
            file_format_version=5,
        )
    except Exception as exc:
        raise XportGenerationError(f"Failed to write XPT file: {exc}") from exc
    return output_path


class XPTWriter:
    pass

    def write(
        self,
        dataframe: pd.DataFrame,
        domain: SDTMDomain,
        output_path: Path,
        *,
        file_label: str | None = None,
        table_name: str | None = None,
    ) -> Path:
        return write_xpt_file(
            dataframe,
            domain,
            output_path,
            file_label=file_label,
            table_name=table_name,
        )
