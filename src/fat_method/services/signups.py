"""Email signup business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fat_method.domain.signups import (
    DuplicateEmailError,
    InvalidEmailError,
    SignupPersistenceError,
    SignupResult,
)

_logger = logging.getLogger(__name__)


class SubscriberRepository(Protocol):
    """Persistence interface for email subscribers."""

    def add_subscriber(self, email: str) -> list[dict[str, object]]:
        """Store an email and return the inserted rows.

        Raises DuplicateEmailError when the email is already stored.
        """


def normalize_email(email: object) -> str:
    """Validate a submitted email and return it trimmed and lowercased."""
    if not email or not isinstance(email, str) or "@" not in email:
        raise InvalidEmailError
    return email.strip().lower()


@dataclass
class SignupService:
    """Registers emails without revealing whether they were already known."""

    repository: SubscriberRepository

    def subscribe(self, email: object) -> SignupResult:
        """Validate, normalize and store an email."""
        normalized = normalize_email(email)
        try:
            rows = self.repository.add_subscriber(normalized)
        except DuplicateEmailError:
            return SignupResult(email=normalized, created=False)
        except SignupPersistenceError:
            raise
        except Exception as exc:
            _logger.exception("Failed to store subscriber")
            raise SignupPersistenceError("Failed to save email") from exc
        return SignupResult(email=normalized, data=rows)
