"""
Core package — schema definitions, configuration, data model, and shared utilities.
No pipeline logic lives here.
"""

from .schema import (
    BUCKET_FIELDS,
    CATEGORIES,
    EXPEDITION_COLUMNS,
    METRICS,
    REQUIRED_COLUMNS,
)
from .config import AnalysisConfig
from .models import (
    ExpeditionRecord,
    MonthlyBucket,
    MonthlyGroup,
    ParticipantTotals,
    YearlyRate,
    dated_records,
    has_summit_date,
)
from .utils import require_columns, coerce_date, count_or_zero, safe_ratio

__all__ = [
    "BUCKET_FIELDS",
    "CATEGORIES",
    "EXPEDITION_COLUMNS",
    "METRICS",
    "REQUIRED_COLUMNS",
    "AnalysisConfig",
    "ExpeditionRecord",
    "MonthlyBucket",
    "MonthlyGroup",
    "ParticipantTotals",
    "YearlyRate",
    "dated_records",
    "has_summit_date",
    "require_columns",
    "coerce_date",
    "count_or_zero",
    "safe_ratio",
]
