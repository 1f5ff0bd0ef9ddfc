"""Domain services package."""

from .aggregation import (
    aggregate_vehicle,
    month_to_date,
    summarize_categories,
    summarize_period,
)
from .bucketing import bucketize, bucketize_recent
from .investors import (
    build_investor_projection,
    build_investor_summaries,
    build_investor_summary,
    rank_by_net_balance,
)
from .occupancy import fleet_occupancy
from .projection import project_roi, resolve_config
from .validation import validate_record, validate_records

__all__ = [
    "aggregate_vehicle",
    "bucketize",
    "bucketize_recent",
    "build_investor_projection",
    "build_investor_summaries",
    "build_investor_summary",
    "fleet_occupancy",
    "month_to_date",
    "project_roi",
    "rank_by_net_balance",
    "resolve_config",
    "summarize_categories",
    "summarize_period",
    "validate_record",
    "validate_records",
]
