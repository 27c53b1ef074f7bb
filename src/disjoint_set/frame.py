"""Turn tabular edge lists into :class:`Edge` tuples."""

from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from .config import ConnectivityConfig
from .graph import Edge


def edges_from_dataframe(dataframe: pd.DataFrame, config: ConnectivityConfig | None = None) -> List[Edge]:
    """Read `dataframe` rows as edges using the columns named in `config`."""

    config = config or ConnectivityConfig()
    for column in (config.source_column, config.target_column):
        if column not in dataframe.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

    weight_column = config.weight_column
    if weight_column is not None and weight_column not in dataframe.columns:
        # the default weight column is optional, an explicitly renamed one is not
        if weight_column != ConnectivityConfig.weight_column:
            raise KeyError(f"Column '{weight_column}' not found in dataframe")
        weight_column = None

    sources = _id_column(dataframe[config.source_column])
    targets = _id_column(dataframe[config.target_column])
    if weight_column is None:
        weights = [1.0] * len(dataframe)
    else:
        weights = pd.to_numeric(dataframe[weight_column], errors="raise").astype(float).tolist()

    if config.verbose:
        print(f"   Loaded {len(dataframe)} edges from dataframe")
    return [Edge(source, target, weight) for source, target, weight in zip(sources, targets, weights)]


def _id_column(series: pd.Series) -> List[int]:
    if pd.api.types.is_bool_dtype(series) or series.map(lambda value: isinstance(value, (bool, np.bool_))).any():
        raise ValueError(f"Column '{series.name}' contains boolean ids")
    if series.isna().any():
        raise ValueError(f"Column '{series.name}' contains missing ids")
    values = pd.to_numeric(series, errors="raise")
    if not np.isfinite(values.to_numpy(dtype=float)).all():
        raise ValueError(f"Column '{series.name}' contains non-finite ids")
    if not (values == values.round()).all():
        raise ValueError(f"Column '{series.name}' contains non-integral ids")
    return [int(value) for value in values]


__all__ = ["edges_from_dataframe"]
