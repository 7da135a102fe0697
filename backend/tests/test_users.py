import pytest


def test_list_users(client):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "John Doe", "email": "john@example.com"},
        {"id": 2, "name": "Anne Jacqueline Hathaway", "email": "Anne@example.com"},
        {"id": 3, "name": "Robert John Downey Jr.", "email": "Robert@example.com"},
    ]


def test_get_user(client, john):
    response = client.get("/users/1")
    assert response.status_code == 200
    assert response.json() == john


@pytest.mark.parametrize("user_id", ["2", "99", "0", "-1", "100"])
def test_get_unknown_user(client, user_id):
    response = client.get(f"/users/{user_id}")
    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_create_user_assigns_id(client):
    response = client.post("/users", json={"name": "Jane", "email": "jane@example.com"})
    assert response.status_code == 201
    assert response.json() == {"id": 100, "name": "Jane", "email": "jane@example.com"}


@pytest.mark.parametrize("body_id", [7, 100, 101, 0, -1])
def test_create_user_id_differs_from_client_id(client, body_id):
    response = client.post(
        "/users", json={"id": body_id, "name": "Jane", "email": "jane@example.com"}
    )
    assert response.status_code == 201
    assert response.json()["id"] != body_id


def test_create_user_with_placeholder_id(client):
    response = client.post(
        "/users", json={"id": 100, "name": "Jane", "email": "jane@example.com"}
    )
    assert response.status_code == 201
    assert response.json() == {"id": 101, "name": "Jane", "email": "jane@example.com"}


def test_replace_user_uses_path_id(client):
    response = client.put(
        "/users/5", json={"id": 42, "name": "Jane", "email": "jane@example.com"}
    )
    assert response.status_code == 200
    assert response.json() == {"id": 5, "name": "Jane", "email": "jane@example.com"}


def test_replace_user_without_body_id(client):
    response = client.put("/users/3", json={"name": "Jane", "email": "jane@example.com"})
    assert response.status_code == 200
    assert response.json()["id"] == 3


def test_patch_user_merges_sent_fields(client):
    response = client.patch("/users/2", json={"email": "new@example.com"})
    assert response.status_code == 200
    assert response.json() == {
        "id": 2,
        "name": "Anne Jacqueline Hathaway",
        "email": "new@example.com",
    }


def test_patch_user_ignores_body_id(client):
    response = client.patch("/users/1", json={"id": 9, "name": "Jane"})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Jane", "email": "john@example.com"}


def test_patch_unknown_user_fills_blank_fields(client):
    response = client.patch("/users/4", json={"name": "Jane"})
    assert response.status_code == 200
    assert response.json() == {"id": 4, "name": "Jane", "email": ""}


def test_patch_user_empty_body(client, john):
    response = client.patch("/users/1", json={})
    assert response.status_code == 200
    assert response.json() == john


def test_delete_user(client):
    response = client.delete("/users/1")
    assert response.status_code == 200
    assert response.json() == "User deletion successful"


def test_delete_unknown_user(client):
    response = client.delete("/users/2")
    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()
