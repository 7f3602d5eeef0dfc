"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass

from .constants import MAX_THEATER_NAME_LENGTH
from .exceptions import ValidationError


def validate_theater_fields(name: str | None, location: str | None) -> None:
    """Validate theater fields according to domain business rules.

    Pure domain validation without logging or external dependencies.
    Whitespace-only values count as present; only missing or empty
    strings are rejected.

    Args:
        name: The theater name
        location: The theater location

    Raises:
        ValidationError: If name or location is missing, or name is too long
    """
    if not name or not location:
        raise ValidationError("Theater name and location are required.")

    if len(name) > MAX_THEATER_NAME_LENGTH:
        raise ValidationError("Theater name is too long.")


@dataclass
class Theater:
    """Core business entity representing a theater."""

    id: int | None
    name: str | None
    location: str | None
    notes: str | None = None

    def validate(self) -> None:
        """Validate theater business rules."""
        validate_theater_fields(self.name, self.location)
