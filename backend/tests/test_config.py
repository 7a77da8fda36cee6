"""Tests for settings parsing."""

import pytest

from ranking_api.core.config import Settings


def test_cors_origins_split_from_string():
    s = Settings(CORS_ORIGINS="https://kenkoooo.com, http://localhost:3000,")
    assert s.CORS_ORIGINS == ["https://kenkoooo.com", "http://localhost:3000"]


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example,https://b.example")
    assert Settings().CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_prod_requires_database_url():
    with pytest.raises(ValueError, match="DATABASE_URL"):
        Settings(ENV="prod")


def test_prod_with_database_url():
    s = Settings(ENV="prod", DATABASE_URL="postgresql+asyncpg://u:p@db:5432/atcoder")
    assert s.ENV == "prod"
