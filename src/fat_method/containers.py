"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fat_method.adapters.supabase_subscriber_repository import (
    SupabaseSubscriberRepository,
)
from fat_method.config import Settings
from fat_method.services.signups import SignupService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    signup_service: SignupService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_role_key
    )
    subscriber_repository = SupabaseSubscriberRepository(
        supabase_client, table_name=resolved_settings.subscriber_table
    )
    return AppContainer(
        settings=resolved_settings,
        signup_service=SignupService(subscriber_repository),
    )
