"""Supabase-backed email subscriber repository."""

import logging
from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from fat_method.domain.signups import DuplicateEmailError, SignupPersistenceError
from fat_method.services.signups import SubscriberRepository

UNIQUE_VIOLATION = "23505"

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseSubscriberRepository(SubscriberRepository):
    """Supabase implementation for subscriber persistence."""

    client: Client
    table_name: str = "email_subscriber"

    def add_subscriber(self, email: str) -> list[dict[str, object]]:
        """Insert an email row, relying on the table's unique constraint."""
        try:
            response = (
                self.client.table(self.table_name).insert([{"email": email}]).execute()
            )
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(email) from exc
            _logger.error("Database error: code=%s message=%s", exc.code, exc.message)
            raise SignupPersistenceError("Failed to save email") from exc
        return list(response.data or [])
