from collections.abc import Sequence
from typing import Final

from ..domain.entities import Theater as DomainTheater
from ..domain.exceptions import (
    TheaterAlreadyDeletedError,
    TheaterNotFoundError,
    ValidationError,
)
from ..infrastructure.database.models import Theater
from ..infrastructure.database.repositories import TheaterRepository
from ..logging_config import get_logger
from ..logging_utils import log_database_operation
from ..metrics import (
    record_theater_created,
    record_theater_deleted,
    record_theater_updated,
)
from .validation import require_theater_data, validate_new_theater

logger: Final = get_logger(__name__)

TABLE: Final = "Theater"


def get_theaters(store: TheaterRepository) -> Sequence[Theater]:
    """Return every theater; an empty store is reported as not found."""
    theaters: Final = store.list_all()
    if not theaters:
        logger.warning("Theater listing failed - store is empty")
        raise TheaterNotFoundError("No theaters found.")
    return theaters


def get_theater(store: TheaterRepository, theater_id: int) -> Theater:
    theater: Final = store.find_by_id(theater_id)
    if theater is None:
        logger.warning("Theater not found", theater_id=theater_id)
        raise TheaterNotFoundError("Theater not found.")
    return theater


def create_theater(store: TheaterRepository, draft: DomainTheater | None) -> Theater:
    """Validate and persist a new theater.

    Validation short-circuits in order: missing body, missing name or
    location, name too long. Any ID on the draft is ignored.

    Args:
        store: Theater store for this request
        draft: Incoming theater data, None when the request had no body

    Returns:
        The persisted theater with its store-assigned ID

    Raises:
        ValidationError: If the draft is missing or invalid
    """
    draft = require_theater_data(draft, "create")
    logger.debug("Creating theater", theater_name=draft.name)

    validate_new_theater(draft)

    theater: Final = Theater.from_domain(draft)
    store.add(theater)
    store.save_changes()
    store.refresh(theater)

    log_database_operation(
        operation="create", table=TABLE, success=True, theater_id=theater.id
    )
    record_theater_created()
    logger.info("Theater created successfully", theater_id=theater.id)
    return theater


def update_theater(
    store: TheaterRepository, theater_id: int, changes: DomainTheater | None
) -> Theater:
    """Overwrite name, location and notes of an existing theater.

    Unlike creation, the new field values are stored as given without
    validation. The body ID must match the path ID, and this is checked
    before looking the theater up.

    Raises:
        ValidationError: If the body is missing or its ID differs from theater_id
        TheaterNotFoundError: If no theater has theater_id
    """
    if changes is None or changes.id != theater_id:
        logger.warning("Invalid update request for theater", theater_id=theater_id)
        require_theater_data(changes, "update")
        raise ValidationError("Theater ID in body does not match ID in path.")

    theater: Final = store.find_by_id(theater_id)
    if theater is None:
        logger.warning("Theater update failed - not found", theater_id=theater_id)
        raise TheaterNotFoundError("Theater not found.")

    theater.name = changes.name  # type: ignore[assignment]
    theater.location = changes.location  # type: ignore[assignment]
    theater.notes = changes.notes
    store.add(theater)
    store.save_changes()

    log_database_operation(
        operation="update", table=TABLE, success=True, theater_id=theater_id
    )
    record_theater_updated()
    logger.info("Theater updated successfully", theater_id=theater_id)
    return theater


def delete_theater(store: TheaterRepository, theater_id: int) -> str:
    """Remove a theater and confirm the removal by reading it back.

    Returns:
        Confirmation message naming the deleted ID

    Raises:
        TheaterNotFoundError: If no theater has theater_id
        TheaterAlreadyDeletedError: If the row is still visible after the commit
    """
    theater: Final = store.find_by_id(theater_id)
    if theater is None:
        logger.warning("Theater deletion failed - not found", theater_id=theater_id)
        raise TheaterNotFoundError("Theater not found.")

    store.remove(theater)
    store.save_changes()

    # Not guarded against a concurrent re-insert of the same ID
    if store.find_by_id(theater_id) is not None:
        log_database_operation(
            operation="delete", table=TABLE, success=False, theater_id=theater_id
        )
        raise TheaterAlreadyDeletedError("Theater was already deleted.")

    log_database_operation(
        operation="delete", table=TABLE, success=True, theater_id=theater_id
    )
    record_theater_deleted()
    logger.info("Theater deleted successfully", theater_id=theater_id)
    return f"Theater with ID {theater_id} was deleted successfully."
