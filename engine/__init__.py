"""
Aggregation engine — dense monthly summit/death series and yearly rates.
"""

from .aggregator import aggregate, complete_monthly, group_by_month, reshape_long
from .rates import rollup_yearly, summarize_rates, summarize_rates_from_groups
from .runner import buckets_to_frame, groups_to_frame, rates_to_frame, run_pipeline

__all__ = [
    "aggregate",
    "complete_monthly",
    "group_by_month",
    "reshape_long",
    "rollup_yearly",
    "summarize_rates",
    "summarize_rates_from_groups",
    "buckets_to_frame",
    "groups_to_frame",
    "rates_to_frame",
    "run_pipeline",
]
