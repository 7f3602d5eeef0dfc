from typing import Final

from fastapi import APIRouter, Body, Depends, Path, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Session

from ..application.theater_service import (
    create_theater,
    delete_theater,
    get_theater,
    get_theaters,
    update_theater,
)
from ..domain.entities import Theater as DomainTheater
from ..infrastructure.database.database import get_session
from ..infrastructure.database.repositories import TheaterRepository

api_router: Final = APIRouter(
    prefix="/theater",
    tags=["theaters"],
    responses={
        400: {"description": "Bad Request - Invalid or missing theater data"},
        404: {"description": "Not Found - Theater does not exist"},
    },
)


def get_theater_store(session: Session = Depends(get_session)) -> TheaterRepository:
    """Provide a theater store bound to this request's session."""
    return TheaterRepository(session)


# Request Models
class TheaterCreate(BaseModel):
    """Request model for creating a theater.

    Fields are optional here so that missing values are reported by the
    theater rules with a 400 instead of a schema error.
    """

    id: int | None = Field(None, description="Ignored; the store assigns the ID")
    name: str | None = Field(
        None, description="Theater name (required, max 100 characters)"
    )
    location: str | None = Field(None, description="Theater location (required)")
    notes: str | None = Field(None, description="Free-form notes")

    def to_domain(self) -> DomainTheater:
        return DomainTheater(
            id=self.id, name=self.name, location=self.location, notes=self.notes
        )


class TheaterUpdate(BaseModel):
    """Request model for replacing a theater's fields."""

    id: int | None = Field(None, description="Must equal the ID in the path")
    name: str = Field(description="New theater name")
    location: str = Field(description="New theater location")
    notes: str | None = Field(None, description="New notes")

    def to_domain(self) -> DomainTheater:
        return DomainTheater(
            id=self.id, name=self.name, location=self.location, notes=self.notes
        )


# Response Models
class TheaterResponse(BaseModel):
    """Theater as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique theater identifier")
    name: str = Field(description="Theater name")
    location: str = Field(description="Theater location")
    notes: str | None = Field(description="Free-form notes")


@api_router.get(
    "",
    name="get_all_theaters",
    response_model=list[TheaterResponse],
    summary="List all theaters",
    responses={404: {"description": "No theaters exist yet"}},
)
async def api_list_theaters(
    *, store: TheaterRepository = Depends(get_theater_store)
) -> list[TheaterResponse]:
    """List every theater in ID order. An empty store answers 404."""
    return [TheaterResponse.model_validate(t) for t in get_theaters(store)]


@api_router.get(
    "/{theater_id}",
    name="get_theater_by_id",
    response_model=TheaterResponse,
    summary="Get a theater",
)
async def api_get_theater(
    *,
    store: TheaterRepository = Depends(get_theater_store),
    theater_id: int = Path(description="ID of the theater"),
) -> TheaterResponse:
    return TheaterResponse.model_validate(get_theater(store, theater_id))


@api_router.post(
    "",
    name="create_theater",
    response_model=TheaterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a theater",
    description="""
    Create a theater. Name and location are required and the name may be at
    most 100 characters. The `Location` header points at the new theater.
    """,
    responses={
        201: {
            "description": "Theater created",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "name": "Palace",
                        "location": "Main St",
                        "notes": None,
                    }
                }
            },
        },
    },
)
async def api_create_theater(
    *,
    request: Request,
    response: Response,
    store: TheaterRepository = Depends(get_theater_store),
    theater: TheaterCreate | None = Body(None),
) -> TheaterResponse:
    created = create_theater(store, theater.to_domain() if theater else None)
    response.headers["Location"] = str(
        request.url_for("get_theater_by_id", theater_id=created.id)
    )
    return TheaterResponse.model_validate(created)


@api_router.put(
    "/{theater_id}",
    name="update_theater",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a theater",
    description="""
    Replace name, location and notes of an existing theater. The body `id`
    must equal the path ID. Field values are stored as given.
    """,
)
async def api_update_theater(
    *,
    store: TheaterRepository = Depends(get_theater_store),
    theater_id: int = Path(description="ID of the theater to update"),
    theater: TheaterUpdate | None = Body(None),
) -> Response:
    update_theater(store, theater_id, theater.to_domain() if theater else None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@api_router.delete(
    "/{theater_id}",
    name="delete_theater",
    response_model=str,
    summary="Delete a theater",
    responses={
        200: {
            "description": "Theater deleted",
            "content": {
                "application/json": {
                    "example": "Theater with ID 1 was deleted successfully."
                }
            },
        },
    },
)
async def api_delete_theater(
    *,
    store: TheaterRepository = Depends(get_theater_store),
    theater_id: int = Path(description="ID of the theater to delete"),
) -> str:
    return delete_theater(store, theater_id)
