"""Domain models and errors for email signups."""

from dataclasses import dataclass, field


class SignupError(Exception):
    """Base error for signup failures reported to the caller."""


class InvalidEmailError(SignupError):
    """The submitted email is missing or malformed."""

    def __init__(self, message: str = "Invalid email") -> None:
        super().__init__(message)


class DuplicateEmailError(SignupError):
    """The email is already registered."""


class SignupPersistenceError(SignupError):
    """The subscriber could not be stored."""


@dataclass(frozen=True)
class SignupResult:
    """Outcome of a signup.

    ``data`` holds the stored rows, empty when the email was already known.
    """

    email: str
    data: list[dict[str, object]] = field(default_factory=list)
    created: bool = True
