from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ..entities.sdtm_domain import DM_DOMAIN

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..entities.records import StandardizedDemographicRecord
    from ..entities.sdtm_domain import SDTMDomain


def build_dm_frame(
    records: Sequence[StandardizedDemographicRecord],
    domain: SDTMDomain = DM_DOMAIN,
) -> pd.DataFrame:
    """Lay DM records out as a DataFrame in dataset variable order.

    Character variables are ``string`` dtype with ``""`` for no value; AGE is
    nullable ``Int64`` so a missing age stays missing instead of becoming a
    float NaN.
    """
    columns = domain.variable_names()
    rows = [record.to_row() for record in records]
    frame = pd.DataFrame(rows, columns=list(columns))
    for variable in domain.variables:
        if variable.type == "Num":
            frame[variable.name] = pd.array(
                [None if pd.isna(v) else int(v) for v in frame[variable.name]],
                dtype=variable.pandas_dtype(),
            )
        else:
            frame[variable.name] = (
                frame[variable.name].astype(variable.pandas_dtype()).fillna("")
            )
    return frame
