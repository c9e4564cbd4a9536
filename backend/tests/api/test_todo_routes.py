"""Todo Routes — status codes, envelopes and ownership rules over HTTP.

Invariants:
    - POST / → 201 {"todo": ...}; missing owner → 400 OWNER_MISSING
    - GET /?owner=<uuid> filters by owner; a non-UUID owner is INVALID_IDENTIFIER
    - PUT with a different ownerId → 400 OWNER_CHANGED, stored row unchanged
    - DELETE → 200 {} even for unknown ids; deleted todos read as 404
"""

from uuid import uuid4

from todo_api.api.dependencies import get_todo_service
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.todo_repository import SqlTodoRepository
from todo_api.main_todo import app as todo_app
from todo_api.services.todo_service import TodoService


async def _create(client, owner_id, title="buy milk", **extra):
    res = await client.post(
        "/", json={"title": title, "owner_id": str(owner_id), **extra},
    )
    assert res.status_code == 201
    return res.json()["todo"]


async def test_status_ok(todo_client):
    res = await todo_client.get("/status")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_status_unavailable(todo_client, tmp_path):
    broken = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'todos.db'}",
    )
    service = TodoService(SqlTodoRepository(broken))
    todo_app.dependency_overrides[get_todo_service] = lambda: service

    res = await todo_client.get("/status")
    await broken.dispose()

    assert res.status_code == 503
    assert res.json()["error"]["code"] == "SERVICE_UNAVAILABLE"


async def test_create_todo(todo_client):
    owner = uuid4()
    res = await todo_client.post(
        "/", json={"title": "buy milk", "description": "2 litres", "owner_id": str(owner)},
    )
    assert res.status_code == 201
    todo = res.json()["todo"]
    assert todo["title"] == "buy milk"
    assert todo["description"] == "2 litres"
    assert todo["owner_id"] == str(owner)
    assert todo["id"]


async def test_create_todo_without_owner(todo_client):
    res = await todo_client.post("/", json={"title": "orphan"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "OWNER_MISSING"
    assert (await todo_client.get("/")).json() == {"todos": []}


async def test_create_todo_with_nil_owner(todo_client):
    res = await todo_client.post(
        "/", json={"title": "orphan", "owner_id": "00000000-0000-0000-0000-000000000000"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "OWNER_MISSING"


async def test_get_todo(todo_client):
    todo = await _create(todo_client, uuid4())
    res = await todo_client.get(f"/{todo['id']}")
    assert res.status_code == 200
    assert res.json()["todo"] == todo


async def test_get_unknown_todo(todo_client):
    res = await todo_client.get(f"/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_todo_invalid_identifier(todo_client):
    res = await todo_client.get("/not-a-uuid")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_IDENTIFIER"


async def test_list_todos_filtered_by_owner(todo_client):
    alice, bob = uuid4(), uuid4()
    a = await _create(todo_client, alice, "a")
    await _create(todo_client, bob, "b")

    everything = (await todo_client.get("/")).json()["todos"]
    assert len(everything) == 2

    owned = (await todo_client.get("/", params={"owner": str(alice)})).json()["todos"]
    assert [t["id"] for t in owned] == [a["id"]]


async def test_list_todos_invalid_owner(todo_client):
    res = await todo_client.get("/", params={"owner": "alice"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_IDENTIFIER"


async def test_update_todo(todo_client):
    owner = uuid4()
    todo = await _create(todo_client, owner, description="2 litres")
    res = await todo_client.put(f"/{todo['id']}", json={"title": "buy oat milk"})
    assert res.status_code == 200
    updated = res.json()["todo"]
    assert updated["title"] == "buy oat milk"
    assert updated["description"] == "2 litres"
    assert updated["owner_id"] == str(owner)


async def test_update_todo_owner_change_rejected(todo_client):
    todo = await _create(todo_client, uuid4())
    res = await todo_client.put(
        f"/{todo['id']}", json={"title": "stolen", "owner_id": str(uuid4())},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "OWNER_CHANGED"

    stored = (await todo_client.get(f"/{todo['id']}")).json()["todo"]
    assert stored["title"] == "buy milk"
    assert stored["owner_id"] == todo["owner_id"]


async def test_update_todo_inconsistent_ids(todo_client):
    todo = await _create(todo_client, uuid4())
    res = await todo_client.put(
        f"/{todo['id']}", json={"id": str(uuid4()), "title": "x"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INCONSISTENT_IDENTIFIER"


async def test_update_unknown_todo(todo_client):
    res = await todo_client.put(f"/{uuid4()}", json={"title": "x"})
    assert res.status_code == 404


async def test_delete_todo(todo_client):
    owner = uuid4()
    todo = await _create(todo_client, owner)
    res = await todo_client.delete(f"/{todo['id']}")
    assert res.status_code == 200
    assert res.json() == {}

    assert (await todo_client.get(f"/{todo['id']}")).status_code == 404
    owned = (await todo_client.get("/", params={"owner": str(owner)})).json()["todos"]
    assert owned == []


async def test_delete_unknown_todo_is_ok(todo_client):
    res = await todo_client.delete(f"/{uuid4()}")
    assert res.status_code == 200
    assert res.json() == {}


async def test_delete_todo_invalid_identifier(todo_client):
    res = await todo_client.delete("/not-a-uuid")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_IDENTIFIER"
