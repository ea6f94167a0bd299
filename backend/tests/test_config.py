from __future__ import annotations

import pytest

from personacart.config import Settings
from personacart.web.utils.database import engine_options, mask_url, normalize_database_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@localhost/db", "postgresql+asyncpg://u:p@localhost/db"),
        ("postgres://u:p@localhost/db", "postgresql+asyncpg://u:p@localhost/db"),
        ("postgresql+asyncpg://u:p@localhost/db", "postgresql+asyncpg://u:p@localhost/db"),
        ("sqlite:///./local.db", "sqlite+aiosqlite:///./local.db"),
        ("sqlite+aiosqlite:///./local.db", "sqlite+aiosqlite:///./local.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_mask_url_hides_password():
    assert mask_url("postgresql+asyncpg://admin:hunter2@db:5432/app") == "postgresql+asyncpg://admin:***@db:5432/app"
    assert mask_url("sqlite+aiosqlite:///./local.db") == "sqlite+aiosqlite:///./local.db"


def test_sqlite_engine_has_no_pool_options():
    options = engine_options("sqlite+aiosqlite:///./local.db")
    assert "pool_size" not in options
    assert "pool_size" in engine_options("postgresql+asyncpg://u:p@localhost/db")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("SEED_PRODUCTS", "no")
    monkeypatch.setenv("JWT_EXPIRE_MINUTES", "15")
    monkeypatch.setenv("ENVIRONMENT", "Production")

    settings = Settings()
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.seed_products is False
    assert settings.jwt_access_token_expire_minutes == 15
    assert not settings.is_development
