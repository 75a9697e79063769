"""
Integration tests for the HTTP API.

Each test talks to a freshly created application through FastAPI's
TestClient, so ids always start at 1.

Tests cover:
- User and film CRUD
- Friendship and like endpoints
- Popular films
- Mapping of domain errors to 400/404/409
"""

import pytest
from fastapi.testclient import TestClient

from filmorate_api.app.main import create_app


USER = {"email": "mail@yandex.ru", "login": "dolore", "name": "Nick Name", "birthday": "1946-08-20"}
FILM = {"name": "nisi eiusmod", "description": "adipisicing", "releaseDate": "1967-03-25", "duration": 100}


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


def create_user(client, **overrides):
    payload = dict(USER, login="user")
    payload.update(overrides)
    response = client.post("/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def create_film(client, **overrides):
    response = client.post("/films", json=dict(FILM, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestUsersApi:
    """Tests for /users."""

    def test_create_user(self, client):
        response = client.post("/users", json=USER)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["login"] == "dolore"
        assert body["birthday"] == "1946-08-20"
        assert body["friends"] == []

    def test_create_user_without_name(self, client):
        payload = {k: v for k, v in USER.items() if k != "name"}

        response = client.post("/users", json=payload)

        assert response.status_code == 201
        assert response.json()["name"] == "dolore"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("email", "mail.ru"),
            ("login", "dolore ullamco"),
            ("birthday", "2446-08-20"),
        ],
    )
    def test_create_invalid_user(self, client, field, value):
        response = client.post("/users", json=dict(USER, **{field: value}))

        assert response.status_code == 400
        assert client.get("/users").json() == []

    def test_malformed_body_is_bad_request(self, client):
        response = client.post("/users", json={"login": "x"})

        assert response.status_code == 400

    def test_get_user(self, client):
        created = create_user(client)

        response = client.get(f"/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_user(self, client):
        response = client.get("/users/9999")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_update_user(self, client):
        created = create_user(client)

        response = client.put("/users", json=dict(USER, id=created["id"], login="doloreUpdate", name="est adipisicing"))

        assert response.status_code == 200
        assert response.json()["login"] == "doloreUpdate"
        assert client.get(f"/users/{created['id']}").json()["name"] == "est adipisicing"

    def test_update_unknown_user(self, client):
        response = client.put("/users", json=dict(USER, id=9999))

        assert response.status_code == 404

    def test_list_users(self, client):
        create_user(client, login="first")
        create_user(client, login="second")

        response = client.get("/users")

        assert response.status_code == 200
        assert sorted(u["login"] for u in response.json()) == ["first", "second"]


class TestFriendsApi:
    """Tests for /users/{id}/friends."""

    @pytest.fixture
    def users(self, client):
        return [create_user(client, login=f"user{n}")["id"] for n in (1, 2, 3)]

    def test_add_and_list_friends(self, client, users):
        a, b, _ = users

        response = client.put(f"/users/{a}/friends/{b}")

        assert response.status_code == 200
        assert [u["id"] for u in client.get(f"/users/{a}/friends").json()] == [b]
        assert [u["id"] for u in client.get(f"/users/{b}/friends").json()] == [a]
        assert client.get(f"/users/{a}").json()["friends"] == [b]

    def test_add_friend_twice(self, client, users):
        a, b, _ = users
        client.put(f"/users/{a}/friends/{b}")

        response = client.put(f"/users/{b}/friends/{a}")

        assert response.status_code == 409

    def test_add_unknown_friend(self, client, users):
        response = client.put(f"/users/{users[0]}/friends/-1")

        assert response.status_code == 404

    def test_remove_friend(self, client, users):
        a, b, _ = users
        client.put(f"/users/{a}/friends/{b}")

        response = client.delete(f"/users/{a}/friends/{b}")

        assert response.status_code == 204
        assert client.get(f"/users/{b}/friends").json() == []

    def test_remove_absent_friend_is_no_content(self, client, users):
        a, b, _ = users

        response = client.delete(f"/users/{a}/friends/{b}")

        assert response.status_code == 204

    def test_remove_self(self, client, users):
        response = client.delete(f"/users/{users[0]}/friends/{users[0]}")

        assert response.status_code == 400

    def test_common_friends(self, client, users):
        a, b, c = users
        client.put(f"/users/{a}/friends/{b}")
        client.put(f"/users/{a}/friends/{c}")
        client.put(f"/users/{b}/friends/{c}")

        response = client.get(f"/users/{b}/friends/common/{c}")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [a]

    def test_friends_of_unknown_user(self, client):
        assert client.get("/users/9999/friends").status_code == 404
        assert client.get("/users/9999/friends/common/1").status_code == 404


class TestFilmsApi:
    """Tests for /films."""

    def test_create_film(self, client):
        response = client.post("/films", json=FILM)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["releaseDate"] == "1967-03-25"
        assert body["duration"] == 100
        assert body["likes"] == []

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", ""),
            ("description", "A" * 201),
            ("releaseDate", "1890-03-25"),
            ("duration", -200),
        ],
    )
    def test_create_invalid_film(self, client, field, value):
        response = client.post("/films", json=dict(FILM, **{field: value}))

        assert response.status_code == 400
        assert client.get("/films").json() == []

    def test_update_film(self, client):
        created = create_film(client)

        response = client.put("/films", json=dict(FILM, id=created["id"], name="Film Updated", duration=190))

        assert response.status_code == 200
        assert response.json()["name"] == "Film Updated"
        assert response.json()["duration"] == 190

    def test_update_unknown_film(self, client):
        response = client.put("/films", json=dict(FILM, id=9999))

        assert response.status_code == 404

    def test_get_unknown_film(self, client):
        assert client.get("/films/9999").status_code == 404


class TestLikesApi:
    """Tests for likes and /films/popular."""

    def test_like_and_unlike(self, client):
        user = create_user(client)
        film = create_film(client)

        assert client.put(f"/films/{film['id']}/like/{user['id']}").status_code == 200
        assert client.get(f"/films/{film['id']}").json()["likes"] == [user["id"]]

        assert client.delete(f"/films/{film['id']}/like/{user['id']}").status_code == 204
        assert client.get(f"/films/{film['id']}").json()["likes"] == []

    def test_like_twice(self, client):
        user = create_user(client)
        film = create_film(client)
        client.put(f"/films/{film['id']}/like/{user['id']}")

        assert client.put(f"/films/{film['id']}/like/{user['id']}").status_code == 409

    def test_unlike_without_like(self, client):
        user = create_user(client)
        film = create_film(client)

        assert client.delete(f"/films/{film['id']}/like/{user['id']}").status_code == 404

    def test_like_unknown_user(self, client):
        film = create_film(client)

        assert client.put(f"/films/{film['id']}/like/9999").status_code == 404

    def test_update_keeps_likes(self, client):
        user = create_user(client)
        film = create_film(client)
        client.put(f"/films/{film['id']}/like/{user['id']}")

        response = client.put("/films", json=dict(FILM, id=film["id"], description="New"))

        assert response.json()["likes"] == [user["id"]]

    def test_popular(self, client):
        users = [create_user(client, login=f"user{n}")["id"] for n in range(1, 4)]
        films = [create_film(client, name=f"Film {n}")["id"] for n in range(1, 4)]
        for user_id in users:
            client.put(f"/films/{films[2]}/like/{user_id}")
        client.put(f"/films/{films[1]}/like/{users[0]}")

        response = client.get("/films/popular", params={"count": 2})

        assert response.status_code == 200
        assert [f["id"] for f in response.json()] == [films[2], films[1]]

    def test_popular_default_count(self, client):
        for n in range(12):
            create_film(client, name=f"Film {n}")

        response = client.get("/films/popular")

        assert response.status_code == 200
        assert len(response.json()) == 10

    def test_popular_non_positive_count(self, client):
        assert client.get("/films/popular", params={"count": 0}).status_code == 400
