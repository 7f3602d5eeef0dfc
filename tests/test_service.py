import pytest
from sqlmodel import Session

from theaters.application.theater_service import (
    create_theater,
    delete_theater,
    get_theater,
    get_theaters,
    update_theater,
)
from theaters.domain.entities import Theater as DomainTheater
from theaters.domain.exceptions import (
    TheaterAlreadyDeletedError,
    TheaterNotFoundError,
    ValidationError,
)
from theaters.infrastructure.database.models import Theater
from theaters.infrastructure.database.repositories import TheaterRepository


def _draft(**fields) -> DomainTheater:
    values = {"id": None, "name": "Palace", "location": "Main St", "notes": None}
    values.update(fields)
    return DomainTheater(**values)


def test_create_assigns_id(store: TheaterRepository):
    theater = create_theater(store, _draft(notes="Balcony closed"))

    assert theater.id is not None
    assert theater.id > 0
    assert store.find_by_id(theater.id) is theater
    assert theater.notes == "Balcony closed"


def test_create_requires_data(store: TheaterRepository):
    with pytest.raises(ValidationError, match="Theater data is required."):
        create_theater(store, None)


def test_create_validation_order(store: TheaterRepository):
    """Missing fields are reported before an over-long name."""
    with pytest.raises(ValidationError, match="name and location are required"):
        create_theater(store, _draft(name="x" * 101, location=""))

    with pytest.raises(ValidationError, match="too long"):
        create_theater(store, _draft(name="x" * 101))

    assert list(store.list_all()) == []


def test_whitespace_only_fields_are_present(store: TheaterRepository):
    theater = create_theater(store, _draft(name=" ", location=" "))
    assert theater.id is not None


def test_get_theaters_empty_raises(store: TheaterRepository):
    with pytest.raises(TheaterNotFoundError, match="No theaters found."):
        get_theaters(store)


def test_get_theaters_in_id_order(store: TheaterRepository):
    first = create_theater(store, _draft(name="B"))
    second = create_theater(store, _draft(name="A"))

    assert [t.id for t in get_theaters(store)] == [first.id, second.id]


def test_get_theater_missing_raises(store: TheaterRepository):
    with pytest.raises(TheaterNotFoundError):
        get_theater(store, 1)


def test_update_overwrites_fields_but_not_id(store: TheaterRepository):
    theater = create_theater(store, _draft(notes="old"))
    theater_id = theater.id
    assert theater_id is not None

    update_theater(
        store,
        theater_id,
        _draft(id=theater_id, name="Rialto", location="Harbour Rd", notes=None),
    )

    reloaded = get_theater(store, theater_id)
    assert reloaded.id == theater_id
    assert (reloaded.name, reloaded.location, reloaded.notes) == (
        "Rialto",
        "Harbour Rd",
        None,
    )


def test_update_mismatched_id_leaves_row(store: TheaterRepository):
    theater = create_theater(store, _draft())
    assert theater.id is not None

    with pytest.raises(ValidationError):
        update_theater(store, theater.id, _draft(id=theater.id + 1, name="Other"))

    assert get_theater(store, theater.id).name == "Palace"


def test_update_missing_theater_raises(store: TheaterRepository):
    with pytest.raises(TheaterNotFoundError):
        update_theater(store, 5, _draft(id=5))


def test_delete_removes_row(store: TheaterRepository):
    theater = create_theater(store, _draft())
    theater_id = theater.id
    assert theater_id is not None

    message = delete_theater(store, theater_id)

    assert message == f"Theater with ID {theater_id} was deleted successfully."
    assert store.find_by_id(theater_id) is None


def test_delete_missing_raises(store: TheaterRepository):
    with pytest.raises(TheaterNotFoundError, match="Theater not found."):
        delete_theater(store, 3)


class _StickyRepository(TheaterRepository):
    """Repository whose removals never take effect, like a concurrent re-insert."""

    def remove(self, theater: Theater) -> None:
        pass


def test_delete_unconfirmed_reports_already_deleted(session: Session):
    store = _StickyRepository(session)
    theater = create_theater(store, _draft())
    assert theater.id is not None

    with pytest.raises(TheaterAlreadyDeletedError, match="already deleted"):
        delete_theater(store, theater.id)
