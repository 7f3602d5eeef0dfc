from sqlmodel import Field, SQLModel

from ...domain.constants import MAX_THEATER_NAME_LENGTH
from ...domain.entities import Theater as DomainTheater


class Theater(SQLModel, table=True):  # type: ignore[call-arg]
    """A theater row. Only name, location and notes change after insert."""

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=MAX_THEATER_NAME_LENGTH)
    location: str
    notes: str | None = None

    @classmethod
    def from_domain(cls, domain_theater: DomainTheater) -> "Theater":
        """Convert domain entity to persistence model.

        The id is left to the database; a client-supplied id is never stored.
        """
        return cls(
            name=domain_theater.name,
            location=domain_theater.location,
            notes=domain_theater.notes,
        )
