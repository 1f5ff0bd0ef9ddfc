"""Settings helpers for report generation."""

from dataclasses import dataclass
import os

import dotenv

from fleetledger.domain.constants import DEFAULT_RECENT_MONTHS
from fleetledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FleetSettings:
    """Settings for report generation.

    Attributes:
        report_months: Number of months shown in monthly breakdowns.
        max_workers: Thread count for building investor summaries; None
            builds them sequentially.
    """

    report_months: int = DEFAULT_RECENT_MONTHS
    max_workers: int | None = None

    @classmethod
    def from_env(cls) -> "FleetSettings":
        """Build settings from environment variables.

        Returns:
            FleetSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        report_months = cls._read_int(
            "REPORT_MONTHS",
            DEFAULT_RECENT_MONTHS,
            logger=logger,
        )
        max_workers = cls._read_int("REPORT_MAX_WORKERS", None, logger=logger)
        return cls(report_months=report_months, max_workers=max_workers)

    @staticmethod
    def _read_int(name: str, default: int | None, logger) -> int | None:
        """Read a non-negative integer environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int | None: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {name}={value}; using {default}")
            return default
        return value


__all__ = ["FleetSettings"]
