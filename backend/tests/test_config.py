"""
Employee List Backend — Configuration Tests
"""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from employee_api.config import PROJECT_ROOT, Settings, database_disabled_reason


class TestDatabaseUrlChecks:

    def test_real_url_is_usable(self):
        assert database_disabled_reason("postgresql+asyncpg://app:secret@db:5432/employees") is None

    @pytest.mark.parametrize("url", [None, "", "  "])
    def test_missing_url(self, url):
        assert database_disabled_reason(url) == "DATABASE_URL not set"

    @pytest.mark.parametrize(
        "url",
        [
            "postgresql+asyncpg://<username>:<password>@localhost/employees",
            "postgresql+asyncpg://app:secret@<host>/employees",
        ],
    )
    def test_placeholder_url(self, url):
        assert database_disabled_reason(url) == "DATABASE_URL appears to contain placeholders"


class TestSettings:

    def test_defaults(self):
        settings = Settings(database_url="")

        assert settings.backend_port == 3000
        assert settings.persistence_disabled_reason == "DATABASE_URL not set"
        assert settings.cors_origins_list == ["*"]

    def test_frontend_dist_default_is_anchored_to_repo_root(self, monkeypatch):
        monkeypatch.delenv("FRONTEND_DIST", raising=False)

        frontend_dist = Path(Settings(_env_file=None).frontend_dist)

        assert frontend_dist.is_absolute()
        assert frontend_dist == PROJECT_ROOT / "dist" / "Frontend"
        assert (PROJECT_ROOT / "backend" / "employee_api" / "config.py").is_file()

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_split(self):
        settings = Settings(cors_origins="http://localhost:4200, https://example.com")

        assert settings.cors_origins_list == ["http://localhost:4200", "https://example.com"]
