"""Infrastructure layer - Repository implementations."""

from collections.abc import Sequence

from sqlmodel import Session, select

from .models import Theater


class TheaterRepository:
    """Repository for Theater persistence operations.

    Mutations are staged on the session and only become durable on
    ``save_changes``.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, theater_id: int) -> Theater | None:
        """Find theater by ID."""
        return self.session.get(Theater, theater_id)

    def list_all(self) -> Sequence[Theater]:
        """Get all theaters ordered by ID."""
        return self.session.exec(select(Theater).order_by(Theater.id)).all()  # type: ignore[arg-type]

    def add(self, theater: Theater) -> None:
        self.session.add(theater)

    def remove(self, theater: Theater) -> None:
        self.session.delete(theater)

    def save_changes(self) -> None:
        """Commit pending adds, updates and removals."""
        self.session.commit()

    def refresh(self, theater: Theater) -> Theater:
        """Reload store-assigned values (such as the ID) after a commit."""
        self.session.refresh(theater)
        return theater
