# -*- coding: utf-8 -*-
"""
backend/tests/shared/config/test_config_loader.py

Selección de settings por PYTHON_ENV y validaciones de coherencia.
"""

from decimal import Decimal

import pytest

from app.shared.config import settings
from app.shared.config.config_loader import get_settings
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_prod import ProdSettings
from app.shared.config.settings_testing import EnvTestingSettings


def test_loader_returns_dev_by_default(monkeypatch):
    monkeypatch.delenv("PYTHON_ENV", raising=False)
    s = get_settings()
    assert isinstance(s, DevSettings)
    assert s.is_dev is True


def test_loader_selects_test(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    s = get_settings()
    assert isinstance(s, EnvTestingSettings)
    assert s.database_url.startswith("sqlite+aiosqlite")


def test_loader_selects_prod(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("DB_SSLMODE", "require")
    s = get_settings()
    assert isinstance(s, ProdSettings)
    assert s.log_format == "json"


@pytest.mark.parametrize(
    "raw,expected",
    [("prod", ProdSettings), ("testing", EnvTestingSettings), ("local", DevSettings), ("staging", DevSettings)],
)
def test_loader_accepts_env_aliases(monkeypatch, raw, expected):
    monkeypatch.setenv("PYTHON_ENV", raw)
    monkeypatch.setenv("DB_SSLMODE", "require")
    s = get_settings()
    assert type(s) is expected
    assert s.python_env in ("development", "test", "production")


def test_notification_sink_defaults(monkeypatch):
    assert get_settings().notification_sink == "database"
    monkeypatch.setenv("PYTHON_ENV", "test")
    get_settings.cache_clear()
    assert get_settings().notification_sink == "logging"


def test_loader_caches_singleton():
    assert get_settings() is get_settings()


def test_proxy_reads_current_settings(monkeypatch):
    monkeypatch.setenv("WITHDRAWAL_MINIMUM_AMOUNT", "250")
    get_settings.cache_clear()
    assert settings.withdrawal_minimum_amount == Decimal("250")


def test_prod_requires_ssl(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("DB_SSLMODE", "disable")
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "DB_SSLMODE" in str(ei.value)


def test_prod_rejects_sqlite(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///./local.db")
    with pytest.raises(ValueError):
        get_settings()


def test_minimum_withdrawal_must_be_positive(monkeypatch):
    monkeypatch.setenv("WITHDRAWAL_MINIMUM_AMOUNT", "0")
    with pytest.raises(ValueError) as ei:
        get_settings()
    assert "WITHDRAWAL_MINIMUM_AMOUNT" in str(ei.value)
# Fin del archivo backend/tests/shared/config/test_config_loader.py
