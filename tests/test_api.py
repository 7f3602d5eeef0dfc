import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from theaters.infrastructure.database.database import get_session
from theaters.infrastructure.database.models import Theater
from theaters.main import app


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def _create(client: TestClient, **fields) -> dict:
    body = {"name": "Palace", "location": "Main St", "notes": None} | fields
    response = client.post("/theater", json=body)
    assert response.status_code == 201
    return response.json()


def _row_count(session: Session) -> int:
    return len(session.exec(select(Theater)).all())


def test_list_empty_store_returns_404(client: TestClient):
    response = client.get("/theater")
    assert response.status_code == 404
    assert response.json()["detail"] == "No theaters found."


def test_list_returns_exactly_stored_theaters(client: TestClient):
    first = _create(client, name="Palace")
    second = _create(client, name="Rialto", location="Harbour Rd", notes="70mm")

    response = client.get("/theater")
    assert response.status_code == 200
    assert response.json() == [first, second]


def test_get_unknown_id_returns_404(client: TestClient):
    response = client.get("/theater/12345")
    assert response.status_code == 404
    assert response.json()["detail"] == "Theater not found."


def test_create_then_get(client: TestClient):
    """A valid theater is created with a positive ID and can be read back."""
    response = client.post(
        "/theater", json={"name": "Palace", "location": "Main St", "notes": None}
    )
    assert response.status_code == 201
    created = response.json()
    assert isinstance(created["id"], int)
    assert created["id"] > 0
    assert response.headers["location"].endswith(f"/theater/{created['id']}")

    response = client.get(f"/theater/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"],
        "name": "Palace",
        "location": "Main St",
        "notes": None,
    }


def test_create_ignores_client_supplied_id(client: TestClient):
    created = _create(client, id=999)
    assert created["id"] != 999


def test_create_without_body_returns_400(client: TestClient, session: Session):
    response = client.post("/theater")
    assert response.status_code == 400
    assert response.json()["detail"] == "Theater data is required."
    assert _row_count(session) == 0


@pytest.mark.parametrize(
    "body",
    [
        {"name": "", "location": "Main St"},
        {"name": "Palace", "location": ""},
        {"location": "Main St"},
        {"name": "Palace"},
    ],
)
def test_create_missing_name_or_location_returns_400(
    client: TestClient, session: Session, body: dict
):
    response = client.post("/theater", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "Theater name and location are required."
    assert _row_count(session) == 0


def test_create_name_too_long_returns_400(client: TestClient, session: Session):
    response = client.post("/theater", json={"name": "x" * 101, "location": "Main St"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Theater name is too long."
    assert _row_count(session) == 0


def test_create_name_at_limit_is_accepted(client: TestClient):
    created = _create(client, name="x" * 100)
    assert len(created["name"]) == 100


def test_update_existing_theater(client: TestClient):
    created = _create(client)
    theater_id = created["id"]

    response = client.put(
        f"/theater/{theater_id}",
        json={
            "id": theater_id,
            "name": "Grand Palace",
            "location": "High St",
            "notes": "Reopened",
        },
    )
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"/theater/{theater_id}")
    assert response.json() == {
        "id": theater_id,
        "name": "Grand Palace",
        "location": "High St",
        "notes": "Reopened",
    }


def test_update_id_mismatch_returns_400_and_keeps_row(client: TestClient):
    created = _create(client)
    theater_id = created["id"]

    response = client.put(
        f"/theater/{theater_id}",
        json={"id": theater_id + 1, "name": "Other", "location": "Elsewhere"},
    )
    assert response.status_code == 400

    assert client.get(f"/theater/{theater_id}").json() == created


def test_update_without_body_returns_400(client: TestClient):
    response = client.put("/theater/1")
    assert response.status_code == 400
    assert response.json()["detail"] == "Theater data is required."


def test_update_checks_id_before_existence(client: TestClient):
    response = client.put(
        "/theater/77", json={"id": 78, "name": "Palace", "location": "Main St"}
    )
    assert response.status_code == 400


def test_update_unknown_theater_returns_404(client: TestClient):
    response = client.put(
        "/theater/77", json={"id": 77, "name": "Palace", "location": "Main St"}
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Theater not found."


def test_update_accepts_empty_fields(client: TestClient):
    """Update stores values as given, unlike create."""
    created = _create(client)
    theater_id = created["id"]

    response = client.put(
        f"/theater/{theater_id}",
        json={"id": theater_id, "name": "", "location": "", "notes": None},
    )
    assert response.status_code == 204

    fetched = client.get(f"/theater/{theater_id}").json()
    assert fetched["name"] == ""
    assert fetched["location"] == ""


def test_delete_existing_theater(client: TestClient):
    created = _create(client)
    theater_id = created["id"]

    response = client.delete(f"/theater/{theater_id}")
    assert response.status_code == 200
    assert response.json() == f"Theater with ID {theater_id} was deleted successfully."

    assert client.get(f"/theater/{theater_id}").status_code == 404


def test_delete_unknown_theater_returns_404(client: TestClient):
    response = client.delete("/theater/4242")
    assert response.status_code == 404
    assert response.json()["detail"] == "Theater not found."


def test_delete_twice_returns_404(client: TestClient):
    theater_id = _create(client)["id"]
    assert client.delete(f"/theater/{theater_id}").status_code == 200
    assert client.delete(f"/theater/{theater_id}").status_code == 404


def test_list_after_deleting_last_theater_returns_404(client: TestClient):
    theater_id = _create(client)["id"]
    client.delete(f"/theater/{theater_id}")
    assert client.get("/theater").status_code == 404


def test_health_endpoints(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "healthy"}}
