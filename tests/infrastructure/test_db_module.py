"""Tests for the fleet engine helpers."""

from unittest.mock import MagicMock

import pytest

from fleetledger.infrastructure import db as db_module


@pytest.fixture(autouse=True)
def isolated_engine(monkeypatch):
    """Start every test without a cached engine or .env file."""
    monkeypatch.setattr(db_module, "_fleet_engine", None)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)


def test_missing_url_raises(monkeypatch):
    """An unset FLEET_DB_URL is reported by name."""
    monkeypatch.delenv(db_module.FLEET_DB_URL_VAR, raising=False)

    with pytest.raises(RuntimeError, match="FLEET_DB_URL"):
        db_module.get_fleet_engine()


def test_engine_uses_small_checked_pool(monkeypatch):
    """The engine pools a few connections and pings them before use."""
    create_engine = MagicMock(return_value="engine")
    monkeypatch.setattr(db_module, "create_engine", create_engine)
    monkeypatch.setenv(db_module.FLEET_DB_URL_VAR, "postgresql://fleet")

    assert db_module.get_fleet_engine() == "engine"

    create_engine.assert_called_once_with(
        "postgresql://fleet",
        poolclass=db_module.QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
    )


def test_engine_is_shared_until_disposed(monkeypatch):
    """The engine is built once, then rebuilt after disposal."""
    engines = [MagicMock(name="first"), MagicMock(name="second")]
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: engines.pop(0),
    )
    monkeypatch.setenv(db_module.FLEET_DB_URL_VAR, "sqlite://")
    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    first = adapter.get_fleet_engine()
    assert adapter.get_fleet_engine() is first

    db_module.dispose_fleet_engine()
    first.dispose.assert_called_once_with()
    assert adapter.get_fleet_engine() is not first


def test_dispose_without_engine_is_noop():
    """Disposing before first use does nothing."""
    db_module.dispose_fleet_engine()

    assert db_module._fleet_engine is None
