"""Tests for the signup service."""

import pytest

from fat_method.domain.signups import InvalidEmailError, SignupPersistenceError
from fat_method.services.signups import SignupService, normalize_email
from tests.conftest import FailingSubscriberRepository, InMemorySubscriberRepository


def test_subscribe_stores_normalized_email() -> None:
    repository = InMemorySubscriberRepository()
    service = SignupService(repository)

    result = service.subscribe("  A@B.com ")

    assert result.email == "a@b.com"
    assert result.created is True
    assert result.data == [{"id": 1, "email": "a@b.com"}]
    assert repository.emails == ["a@b.com"]


def test_subscribe_twice_reports_success_without_data() -> None:
    repository = InMemorySubscriberRepository()
    service = SignupService(repository)
    service.subscribe("a@b.com")

    result = service.subscribe(" A@B.COM")

    assert result.created is False
    assert result.data == []
    assert repository.emails == ["a@b.com"]
    assert repository.attempts == ["a@b.com", "a@b.com"]


@pytest.mark.parametrize("email", [None, "", "not-an-email", 42, ["a@b.com"]])
def test_subscribe_rejects_invalid_email(email) -> None:
    repository = InMemorySubscriberRepository()
    service = SignupService(repository)

    with pytest.raises(InvalidEmailError):
        service.subscribe(email)

    assert repository.attempts == []


def test_subscribe_wraps_store_failures() -> None:
    service = SignupService(FailingSubscriberRepository())

    with pytest.raises(SignupPersistenceError) as exc_info:
        service.subscribe("a@b.com")

    assert str(exc_info.value) == "Failed to save email"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_subscribe_passes_persistence_errors_through() -> None:
    error = SignupPersistenceError("Failed to save email")
    service = SignupService(FailingSubscriberRepository(error=error))

    with pytest.raises(SignupPersistenceError) as exc_info:
        service.subscribe("a@b.com")

    assert exc_info.value is error


def test_normalize_email() -> None:
    assert normalize_email("\tJane.Doe@Example.ORG\n") == "jane.doe@example.org"
