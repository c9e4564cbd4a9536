"""End-to-end flow across both services: register, log in, manage a todo.

The two apps run side by side the way they are deployed; the todo service
only ever sees the user's id, never the identity store.
"""


async def test_alice_buys_milk(identity_client, todo_client):
    res = await identity_client.post(
        "/", json={"username": "alice", "password": "s3cret"},
    )
    assert res.status_code == 201
    alice = res.json()["user"]
    assert alice["id"]
    assert "password_hash" not in alice

    res = await identity_client.post(
        "/login", json={"username": "alice", "password": "s3cret"},
    )
    assert res.json()["user"]["id"] == alice["id"]

    res = await todo_client.post(
        "/", json={"title": "buy milk", "owner_id": alice["id"]},
    )
    assert res.status_code == 201
    todo = res.json()["todo"]

    fetched = (await todo_client.get(f"/{todo['id']}")).json()["todo"]
    assert fetched["title"] == "buy milk"
    assert fetched["owner_id"] == alice["id"]

    res = await todo_client.put(f"/{todo['id']}", json={"title": "buy oat milk"})
    assert res.json()["todo"]["title"] == "buy oat milk"
    assert res.json()["todo"]["owner_id"] == alice["id"]

    owned = (await todo_client.get("/", params={"owner": alice["id"]})).json()["todos"]
    assert [t["id"] for t in owned] == [todo["id"]]

    assert (await todo_client.delete(f"/{todo['id']}")).status_code == 200
    assert (await todo_client.get(f"/{todo['id']}")).status_code == 404
