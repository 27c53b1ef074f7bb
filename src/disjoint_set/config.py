"""Configuration for the connectivity helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass
class ConnectivityConfig:
    """Configuration parameters for the graph and dataframe helpers."""

    use_tqdm: bool | None = None
    verbose: bool | None = None
    source_column: str = "source"
    target_column: str = "target"
    weight_column: str | None = "weight"

    def __post_init__(self) -> None:
        if self.verbose is None:
            self.verbose = _env_flag("DISJOINT_SET_VERBOSE")
        if self.use_tqdm is None:
            self.use_tqdm = _env_flag("DISJOINT_SET_PROGRESS")


__all__ = ["ConnectivityConfig"]
