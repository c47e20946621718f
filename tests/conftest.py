"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fat_method.config import Settings
from fat_method.containers import AppContainer
from fat_method.domain.signups import DuplicateEmailError
from fat_method.services.signups import SignupService, SubscriberRepository


@dataclass
class InMemorySubscriberRepository(SubscriberRepository):
    """In-memory subscriber repository enforcing email uniqueness."""

    emails: list[str] = field(default_factory=list)
    attempts: list[str] = field(default_factory=list)

    def add_subscriber(self, email: str) -> list[dict[str, object]]:
        self.attempts.append(email)
        if email in self.emails:
            raise DuplicateEmailError(email)
        self.emails.append(email)
        return [{"id": len(self.emails), "email": email}]


@dataclass
class FailingSubscriberRepository(SubscriberRepository):
    """Subscriber repository whose store is unavailable."""

    error: Exception = field(default_factory=lambda: RuntimeError("store down"))

    def add_subscriber(self, email: str) -> list[dict[str, object]]:
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_role_key="header.payload.signature",
    )


@pytest.fixture
def subscriber_repository() -> InMemorySubscriberRepository:
    return InMemorySubscriberRepository()


@pytest.fixture
def container(
    settings: Settings, subscriber_repository: InMemorySubscriberRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        signup_service=SignupService(subscriber_repository),
    )
