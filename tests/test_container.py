"""Tests for container wiring."""

from fat_method.adapters.supabase_subscriber_repository import (
    SupabaseSubscriberRepository,
)
from fat_method.config import Settings
from fat_method.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.signup_service is not None
    repository = container.signup_service.repository
    assert isinstance(repository, SupabaseSubscriberRepository)
    assert repository.table_name == "email_subscriber"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "header.payload.signature")
    monkeypatch.setenv("SUBSCRIBER_TABLE", "newsletter")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.subscriber_table == "newsletter"
