"""Domain models for historical financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fleetledger.domain.models.projection import ROIProjection


@dataclass(frozen=True)
class VehicleFinancialSummary:
    """Historical totals for one vehicle.

    Attributes:
        vehicle_id: Vehicle the totals belong to.
        total_income: Sum of income amounts.
        total_expenses: Sum of expense amounts.
        net_balance: Income minus expenses.
        transaction_count: Number of records considered.
    """

    vehicle_id: str
    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
    transaction_count: int


@dataclass(frozen=True)
class MonthlyBucket:
    """Income and expenses for one calendar month."""

    month_key: str
    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Totals over an explicit date window."""

    start_date: date
    end_date: date | None
    income: Decimal
    expenses: Decimal
    net: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a ledger category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Income and expense totals grouped by category."""

    income: list[CategoryAmount]
    expenses: list[CategoryAmount]


@dataclass(frozen=True)
class InvestorProfile:
    """Identity of an investor owning vehicles."""

    investor_id: str
    name: str | None
    email: str


@dataclass(frozen=True)
class InvestorFinancialSummary:
    """Historical totals for an investor, built from vehicle summaries."""

    investor_id: str
    investor_name: str | None
    investor_email: str
    vehicles: list[VehicleFinancialSummary]
    vehicle_count: int
    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
    last_transaction_date: date | None = None


@dataclass(frozen=True)
class InvestorProjection:
    """Forward-looking totals across an investor's vehicles."""

    investor_id: str
    vehicles: dict[str, ROIProjection]
    gross_income: Decimal
    fee_amount: Decimal
    net_income: Decimal
    purchase_total: Decimal
    roi_percent: Decimal
    basis_defined: bool


@dataclass(frozen=True)
class FleetOccupancy:
    """Share of an investor's vehicles currently out on rental."""

    total_vehicles: int
    rented_vehicles: int
    occupancy_percent: Decimal


@dataclass(frozen=True)
class InvestorDashboard:
    """Summary and detail views for an investor report."""

    summary: InvestorFinancialSummary
    month_to_date: PeriodSummary
    categories: CategoryBreakdown
    monthly: list[MonthlyBucket] = field(default_factory=list)
    occupancy: FleetOccupancy | None = None


__all__ = [
    "VehicleFinancialSummary",
    "MonthlyBucket",
    "PeriodSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "InvestorProfile",
    "InvestorFinancialSummary",
    "InvestorProjection",
    "FleetOccupancy",
    "InvestorDashboard",
]
