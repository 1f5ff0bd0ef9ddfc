"""Domain models package."""

from .finance import (
    CategoryAmount,
    CategoryBreakdown,
    FleetOccupancy,
    InvestorDashboard,
    InvestorFinancialSummary,
    InvestorProfile,
    InvestorProjection,
    MonthlyBucket,
    PeriodSummary,
    VehicleFinancialSummary,
)
from .ledger import LedgerRecord, RecordKind, ValidRecord
from .projection import (
    FeeType,
    ROIProjection,
    RoiSettings,
    VehicleFinancialConfig,
)

__all__ = [
    "CategoryAmount",
    "CategoryBreakdown",
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
    "ValidRecord",
    "VehicleFinancialConfig",
    "VehicleFinancialSummary",
]
