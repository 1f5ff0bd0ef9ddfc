"""Domain package for fleet finance rules and core models."""

from .errors import DataError
from .models import (
    CategoryAmount,
    CategoryBreakdown,
    FeeType,
    FleetOccupancy,
    InvestorDashboard,
    InvestorFinancialSummary,
    InvestorProfile,
    InvestorProjection,
    LedgerRecord,
    MonthlyBucket,
    PeriodSummary,
    RecordKind,
    ROIProjection,
    RoiSettings,
    VehicleFinancialConfig,
    VehicleFinancialSummary,
)
from .services import (
    aggregate_vehicle,
    bucketize,
    bucketize_recent,
    build_investor_projection,
    build_investor_summaries,
    build_investor_summary,
    fleet_occupancy,
    month_to_date,
    project_roi,
    rank_by_net_balance,
    summarize_categories,
    summarize_period,
)

__all__ = [
    "CategoryAmount",
    "CategoryBreakdown",
    "DataError",
    "FeeType",
    "FleetOccupancy",
    "InvestorDashboard",
    "InvestorFinancialSummary",
    "InvestorProfile",
    "InvestorProjection",
    "LedgerRecord",
    "MonthlyBucket",
    "PeriodSummary",
    "RecordKind",
    "ROIProjection",
    "RoiSettings",
    "VehicleFinancialConfig",
    "VehicleFinancialSummary",
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
    "summarize_categories",
    "summarize_period",
]
