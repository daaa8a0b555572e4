"""
Trend fits over the yearly rate table.
"""

from .regression import RateTrend, fit_rate_trend, trend_table

__all__ = ["RateTrend", "fit_rate_trend", "trend_table"]
