"""
Analysis configuration.
Column/date parsing options and the optional year window for a pipeline run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .schema import SUMMIT_DATE_COLUMN


@dataclass(frozen=True)
class AnalysisConfig:
    # date parsing for tabular input
    date_column: str = SUMMIT_DATE_COLUMN
    date_format: Optional[str] = None  # None lets pandas infer
    dayfirst: bool = False

    # inclusive window on summit year; None leaves that side open
    min_year: Optional[int] = None
    max_year: Optional[int] = None

    # run data_prep.validate_expeditions() on DataFrame input
    validate: bool = True

    def __post_init__(self) -> None:
        if (
            self.min_year is not None
            and self.max_year is not None
            and self.min_year > self.max_year
        ):
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})."
            )

    def year_in_window(self, year: int) -> bool:
        if self.min_year is not None and year < self.min_year:
            return False
        if self.max_year is not None and year > self.max_year:
            return False
        return True
