"""Validation of inbound theater data with logging for the application layer."""

from typing import TypeVar

from ..domain.constants import MAX_THEATER_NAME_LENGTH
from ..domain.entities import Theater
from ..domain.exceptions import ValidationError
from ..logging_config import get_logger
from ..logging_utils import log_validation_error

logger = get_logger(__name__)

T = TypeVar("T")


def require_theater_data(data: T | None, operation: str) -> T:
    """Reject a request that carries no theater body at all."""
    if data is None:
        logger.warning("Invalid request: theater data is missing", operation=operation)
        raise ValidationError("Theater data is required.")
    return data


def validate_new_theater(theater: Theater) -> None:
    """Validate a theater about to be created.

    Raises:
        ValidationError: If name or location is missing, or name is too long
    """
    try:
        theater.validate()
    except ValidationError as e:
        if not theater.name or not theater.location:
            field = "name" if not theater.name else "location"
            logger.warning(
                "Invalid request: theater name or location is missing",
                name=repr(theater.name),
                location=repr(theater.location),
            )
            log_validation_error(field, getattr(theater, field), str(e))
        elif len(theater.name) > MAX_THEATER_NAME_LENGTH:
            logger.warning(
                "Invalid request: theater name exceeds "
                + f"{MAX_THEATER_NAME_LENGTH} characters",
                name_length=len(theater.name),
            )
            log_validation_error("name", theater.name, str(e))
        raise
