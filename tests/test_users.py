from backoffice.core.security import verify_password
from backoffice.models.user import User


def test_password_is_hashed_and_never_returned(client, store):
    response = client.post(
        "/api/users",
        json={"username": "jdoe", "password": "s3cret", "email": "jdoe@example.com"},
    )

    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert "hashedPassword" not in body
    assert body["role"] == "user"
    assert body["isActive"] is True

    stored = store.collection(User).get(body["id"])
    assert stored.hashed_password != "s3cret"
    assert verify_password("s3cret", stored.hashed_password)


def test_password_change_rehashes(client, store):
    user = client.post(
        "/api/users",
        json={"username": "jdoe", "password": "old-pass", "email": "jdoe@example.com"},
    ).json()

    response = client.put(f"/api/users/{user['id']}", json={"password": "new-pass"})

    assert response.status_code == 200
    assert "password" not in response.json()
    stored = store.collection(User).get(user["id"])
    assert verify_password("new-pass", stored.hashed_password)
    assert not verify_password("old-pass", stored.hashed_password)


def test_update_without_password_keeps_hash(client, store):
    user = client.post(
        "/api/users",
        json={"username": "jdoe", "password": "keep-me", "email": "jdoe@example.com"},
    ).json()

    client.put(f"/api/users/{user['id']}", json={"role": "admin"})

    stored = store.collection(User).get(user["id"])
    assert stored.role == "admin"
    assert verify_password("keep-me", stored.hashed_password)
