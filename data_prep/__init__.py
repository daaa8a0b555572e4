"""
Data preparation — loading raw expedition tables, canonicalizing columns, validation.
"""

from .loader import load_expeditions
from .records import (
    canonicalize_columns,
    parse_summit_dates,
    records_from_frame,
    select_expedition_columns,
)
from .validators import ValidationResult, validate_expeditions

__all__ = [
    "load_expeditions",
    "canonicalize_columns",
    "parse_summit_dates",
    "records_from_frame",
    "select_expedition_columns",
    "ValidationResult",
    "validate_expeditions",
]
