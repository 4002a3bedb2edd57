"""
Tests for the todo HTTP endpoints.

Endpoints: GET/POST /api/todos, PUT/DELETE /api/todos/{id}
"""

from unittest.mock import AsyncMock

import pytest

from todo_api.api.dependencies import get_todo_service
from todo_api.core.exceptions import StorageError
from todo_api.main import app
from todo_api.services.todo_service import TodoService


def _create(client, title="Buy milk", completed=False):
    response = client.post("/api/todos", json={"title": title, "completed": completed})
    assert response.status_code == 200
    return response.json()


class TestTodoLifecycle:
    """Create, list, update and delete against a real database."""

    def test_create_returns_assigned_id(self, client):
        response = client.post("/api/todos", json={"title": "Buy milk", "completed": False})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "title": "Buy milk", "completed": False}

    def test_create_defaults_completed_to_false(self, client):
        response = client.post("/api/todos", json={"title": "No flag"})

        assert response.status_code == 200
        assert response.json()["completed"] is False

    def test_create_ignores_id_in_body(self, client):
        _create(client, title="First")

        response = client.post("/api/todos", json={"id": 50, "title": "Second", "completed": True})

        assert response.status_code == 200
        assert response.json() == {"id": 2, "title": "Second", "completed": True}

    def test_list_after_create(self, client):
        created = _create(client)

        response = client.get("/api/todos")

        assert response.status_code == 200
        assert response.json() == [created]

    def test_list_empty(self, client):
        response = client.get("/api/todos")

        assert response.status_code == 200
        assert response.json() == []

    def test_update_existing(self, client):
        created = _create(client)

        response = client.put(
            f"/api/todos/{created['id']}",
            json={"title": "Buy milk", "completed": True}
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "title": "Buy milk", "completed": True}

    def test_update_uses_path_id_not_body_id(self, client):
        first = _create(client, title="First")
        second = _create(client, title="Second")

        response = client.put(
            f"/api/todos/{first['id']}",
            json={"id": second["id"], "title": "Renamed", "completed": False}
        )

        assert response.status_code == 200
        assert response.json()["id"] == first["id"]
        todos = {t["id"]: t for t in client.get("/api/todos").json()}
        assert todos[first["id"]]["title"] == "Renamed"
        assert todos[second["id"]]["title"] == "Second"

    def test_update_missing_returns_404_without_mutation(self, client):
        created = _create(client)

        response = client.put("/api/todos/999", json={"title": "Ghost", "completed": True})

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "TODO_001"
        assert body["details"] == {"id": 999}
        assert client.get("/api/todos").json() == [created]

    def test_delete_returns_204(self, client):
        created = _create(client)

        response = client.delete(f"/api/todos/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/todos").json() == []

    def test_delete_missing_is_idempotent(self, client):
        created = _create(client)

        assert client.delete("/api/todos/999").status_code == 204
        assert client.delete(f"/api/todos/{created['id']}").status_code == 204
        assert client.delete(f"/api/todos/{created['id']}").status_code == 204
        assert client.get("/api/todos").json() == []


class TestMalformedRequests:
    """Malformed input answers 400."""

    def test_invalid_json_body(self, client):
        response = client.post(
            "/api/todos",
            content="{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_missing_title(self, client):
        response = client.post("/api/todos", json={"completed": True})

        assert response.status_code == 400

    def test_wrong_completed_type(self, client):
        response = client.post("/api/todos", json={"title": "X", "completed": "maybe"})

        assert response.status_code == 400

    def test_non_integer_path_id(self, client):
        response = client.put("/api/todos/abc", json={"title": "X", "completed": False})

        assert response.status_code == 400
        assert client.delete("/api/todos/abc").status_code == 400

    def test_path_id_beyond_integer_range(self, client):
        created = _create(client)
        too_large = 2**70

        put = client.put(f"/api/todos/{too_large}", json={"title": "X", "completed": True})
        delete = client.delete(f"/api/todos/{too_large}")

        assert put.status_code == 400
        assert put.json()["error"] == "VALIDATION_ERROR"
        assert delete.status_code == 400
        assert client.get("/api/todos").json() == [created]

    def test_largest_path_id_is_accepted(self, client):
        largest = 2**63 - 1

        assert client.delete(f"/api/todos/{largest}").status_code == 204
        assert client.put(
            f"/api/todos/{largest}", json={"title": "X", "completed": True}
        ).status_code == 404


class TestStorageFailure:
    """Datastore errors surface as 500."""

    @pytest.fixture
    def failing_service(self):
        service = AsyncMock(spec=TodoService)
        service.get_todos.side_effect = StorageError(
            message="Operation failed: get_todos",
            details={"operation": "get_todos", "error": "OperationalError"}
        )
        app.dependency_overrides[get_todo_service] = lambda: service
        yield service
        app.dependency_overrides.pop(get_todo_service, None)

    def test_list_storage_error_returns_500(self, client, failing_service):
        response = client.get("/api/todos")

        assert response.status_code == 500
        assert response.json()["error"] == "DB_001"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Process-Time" in response.headers


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"]["todos"] == "/api/todos"
