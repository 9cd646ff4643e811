"""Settings tests - environment-driven configuration."""

from student_api.config import Settings
from student_api.core.domain_types import Locale


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/students")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/students"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_default_locale_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_LOCALE", "pt-BR")
    assert Settings().default_locale == Locale.PT_BR
