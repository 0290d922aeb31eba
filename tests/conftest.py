"""Pytest fixtures for Smart Farm backend tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from smartfarm.config import Settings
from smartfarm.domain.entities import OriginPolicy

PRODUCTION_FRONTEND = "https://feedin.up.railway.app"
LOCAL_FRONTEND = "http://localhost:4200"


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Settings factory that ignores any local .env file."""

    def _make(**overrides) -> Settings:
        overrides.setdefault("cors_origin", None)
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    """Development settings with no CORS_ORIGIN."""
    return make_settings()


@pytest.fixture
def default_policy() -> OriginPolicy:
    """Policy with only the built-in frontend origins."""
    return OriginPolicy.from_setting(None)


@pytest.fixture
def allow_all_policy() -> OriginPolicy:
    """Policy built from CORS_ORIGIN="*"."""
    return OriginPolicy.from_setting("*")
