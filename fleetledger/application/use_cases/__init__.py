"""Application use cases package."""

from .get_investor_dashboard import GetInvestorDashboardUseCase
from .get_investor_financials import GetInvestorFinancialsUseCase
from .project_investor_roi import ProjectInvestorRoiUseCase

__all__ = [
    "GetInvestorDashboardUseCase",
    "GetInvestorFinancialsUseCase",
    "ProjectInvestorRoiUseCase",
]
