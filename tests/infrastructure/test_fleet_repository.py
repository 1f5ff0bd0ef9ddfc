"""Tests for the SQLAlchemy fleet repository."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from fleetledger.domain.models import FeeType, RoiSettings
from fleetledger.domain.services.aggregation import aggregate_vehicle
from fleetledger.domain.services.projection import resolve_config
from fleetledger.infrastructure.fleet_repository import (
    SqlAlchemyFleetRepository,
)

SCHEMA = [
    """
    CREATE TABLE profiles (
        id TEXT PRIMARY KEY,
        full_name TEXT,
        email TEXT,
        role TEXT
    )
    """,
    """
    CREATE TABLE vehicles (
        id TEXT PRIMARY KEY,
        assigned_investor_id TEXT,
        created_at TEXT,
        purchase_price TEXT,
        daily_rental_price TEXT,
        expected_occupancy_days INTEGER,
        apply_management_fee INTEGER,
        management_fee_type TEXT,
        management_fee_percent TEXT,
        management_fee_fixed_amount TEXT,
        status TEXT
    )
    """,
    """
    CREATE TABLE financial_records (
        id TEXT PRIMARY KEY,
        vehicle_id TEXT,
        type TEXT,
        category TEXT,
        amount TEXT,
        date TEXT,
        description TEXT
    )
    """,
    """
    CREATE TABLE system_settings (
        id TEXT PRIMARY KEY,
        value TEXT
    )
    """,
]

SEED = [
    """
    INSERT INTO profiles VALUES
        ('inv-2', 'Bob', 'bob@example.com', 'investor'),
        ('inv-1', 'Alice', NULL, 'investor'),
        ('adm-1', 'Admin', 'admin@example.com', 'admin')
    """,
    """
    INSERT INTO vehicles VALUES
        ('veh-a', 'inv-1', '2024-01-01', '10000', '100', 240, 1,
         'percentage', '20', NULL, 'rented'),
        ('veh-b', 'inv-1', '2024-03-01', NULL, '50', NULL, NULL,
         NULL, NULL, NULL, 'available'),
        ('veh-c', 'inv-2', '2024-02-01', '8000', '50', 300, 1,
         'fixed', NULL, '2000', NULL)
    """,
    """
    INSERT INTO financial_records VALUES
        ('r1', 'veh-a', 'income', 'Rent', '500.00', '2024-01-10', NULL),
        ('r2', 'veh-a', 'expense', 'Fuel', '120.50', '2024-02-05', 'tank'),
        ('r3', 'veh-b', 'income', 'Rent', '90', '2024-03-01', NULL),
        ('r4', 'veh-c', 'income', 'Rent', '700', '2024-03-02', NULL)
    """,
]


@pytest.fixture
def repository() -> SqlAlchemyFleetRepository:
    """Repository over an in-memory SQLite database."""
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        for statement in SCHEMA + SEED:
            conn.execute(text(statement))
    db_port = MagicMock()
    db_port.get_fleet_engine.return_value = engine
    return SqlAlchemyFleetRepository(db_port, logger=MagicMock())


def _insert_settings(repository, value) -> None:
    engine = repository._db_port.get_fleet_engine()
    with engine.begin() as conn:
        conn.execute(
            text("INSERT INTO system_settings VALUES ('roi_settings', :v)"),
            {"v": value},
        )


def test_fetch_investors_only_returns_investors(repository) -> None:
    """Admins are excluded and investors are sorted by name."""
    investors = repository.fetch_investors()

    assert [inv.investor_id for inv in investors] == ["inv-1", "inv-2"]
    assert investors[0].email == ""
    assert repository.fetch_investors("inv-2")[0].name == "Bob"
    assert repository.fetch_investors("adm-1") == []


def test_fetch_vehicle_ids_newest_first(repository) -> None:
    """Vehicles are ordered by creation date, newest first."""
    assert repository.fetch_vehicle_ids("inv-1") == ["veh-b", "veh-a"]
    assert repository.fetch_vehicle_ids("nobody") == []


def test_fetch_ledger_records_for_vehicles(repository) -> None:
    """Only records of the requested vehicles are returned."""
    records = repository.fetch_ledger_records(["veh-a", "veh-b"])

    assert [record.id for record in records] == ["r3", "r2", "r1"]
    assert records[1].kind == "expense"
    assert records[1].description == "tank"
    summary = aggregate_vehicle("veh-a", records)
    assert summary.total_income == Decimal("500.00")
    assert summary.total_expenses == Decimal("120.50")
    assert summary.net_balance == Decimal("379.50")


def test_fetch_ledger_records_empty_ids_skips_query() -> None:
    """No vehicles means no query."""
    db_port = MagicMock()
    repository = SqlAlchemyFleetRepository(db_port, logger=MagicMock())

    assert repository.fetch_ledger_records([]) == []
    db_port.get_fleet_engine.assert_not_called()


def test_fetch_ledger_records_applies_date_bounds() -> None:
    """Date bounds are added as bound parameters."""
    conn = MagicMock()
    conn.execute.return_value.all.return_value = []
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_fleet_engine.return_value = engine
    repository = SqlAlchemyFleetRepository(db_port, logger=MagicMock())

    repository.fetch_ledger_records(
        ["veh-a"],
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
    )

    query, params = conn.execute.call_args.args
    assert "date >= :start_date" in str(query)
    assert "date <= :end_date" in str(query)
    assert params == {
        "vehicle_ids": ["veh-a"],
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 1, 31),
    }


def test_fetch_vehicle_configs_keeps_requested_order(repository) -> None:
    """Configs are keyed by vehicle id in the requested order."""
    configs = repository.fetch_vehicle_configs(["veh-c", "veh-b", "ghost"])

    assert list(configs) == ["veh-c", "veh-b"]
    assert configs["veh-c"].apply_management_fee == 1
    assert resolve_config(configs["veh-c"]).apply_fee is True
    assert configs["veh-c"].management_fee_type == "fixed"
    assert configs["veh-b"].apply_management_fee is None
    assert configs["veh-b"].purchase_price is None
    assert repository.fetch_vehicle_configs([]) == {}


def test_fetch_roi_settings_defaults_without_row(repository) -> None:
    """A missing settings row yields the built-in defaults."""
    assert repository.fetch_roi_settings() == RoiSettings()


def test_fetch_roi_settings_reads_json(repository) -> None:
    """Stored JSON settings override the defaults."""
    _insert_settings(
        repository,
        '{"default_occupancy_days": 280, "default_fee_type": "fixed"}',
    )

    settings = repository.fetch_roi_settings()

    assert settings.default_occupancy_days == 280
    assert settings.default_fee_type is FeeType.FIXED
    assert settings.default_management_fee == Decimal("20")


def test_fetch_roi_settings_unreadable_json_warns(repository) -> None:
    """Corrupt settings log a warning and fall back to defaults."""
    _insert_settings(repository, "{not json")

    assert repository.fetch_roi_settings() == RoiSettings()
    repository._logger.warning.assert_called_once()


def test_fetch_roi_settings_keeps_readable_keys(repository) -> None:
    """One bad key falls back alone; the other stored keys survive."""
    _insert_settings(
        repository,
        '{"default_occupancy_days": 200, "default_management_fee": 15,'
        ' "default_fee_type": "Weekly"}',
    )

    settings = repository.fetch_roi_settings()

    assert settings.default_occupancy_days == 200
    assert settings.default_management_fee == Decimal("15")
    assert settings.default_fee_type is FeeType.PERCENTAGE
    repository._logger.warning.assert_called_once()
    assert "default_fee_type" in repository._logger.warning.call_args.args[0]


def test_fetch_vehicle_statuses(repository) -> None:
    """Statuses are keyed by vehicle id; unknown ids are absent."""
    statuses = repository.fetch_vehicle_statuses(["veh-a", "veh-c", "ghost"])

    assert statuses == {"veh-a": "rented", "veh-c": None}
    assert repository.fetch_vehicle_statuses([]) == {}
