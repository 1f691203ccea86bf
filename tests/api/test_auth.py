"""Tests for auth endpoints: register, sign in, sign out, current user."""

from dataclasses import replace

from httpx import AsyncClient

AUTH = "/api/v1/auth"


def _register_body(email: str = "carol@example.com", **extra) -> dict:
    return {
        "email": email,
        "password": "secret-pass",
        "password_confirmation": "secret-pass",
        **extra,
    }


async def test_register_then_sign_in(client: AsyncClient) -> None:
    created = await client.post(AUTH, json=_register_body(display_name="Carol"))
    assert created.status_code == 201
    user = created.json()["user"]
    assert user["email"] == "carol@example.com"

    response = await client.post(
        f"{AUTH}/sign_in", json={"email": "Carol@Example.com", "password": "secret-pass"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == user["id"]
    assert data["user"]["display_name"] == "Carol"
    assert data["user"]["role"] == "user"
    assert response.headers["Authorization"] == f"Bearer {data['access_token']}"

    me = await client.get(
        f"{AUTH}/me", headers={"Authorization": f"Bearer {data['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "carol@example.com"


async def test_register_duplicate_email_is_409(client: AsyncClient, user) -> None:
    response = await client.post(AUTH, json=_register_body(email="ALICE@example.com"))
    assert response.status_code == 409
    assert response.json()["error"] == "DUPLICATE_EMAIL"


async def test_register_duplicate_username_is_409(client: AsyncClient, user) -> None:
    response = await client.post(AUTH, json=_register_body(username="Alice"))
    assert response.status_code == 409
    assert response.json()["error"] == "USER_ALREADY_EXISTS"


async def test_register_validation(client: AsyncClient) -> None:
    mismatch = _register_body()
    mismatch["password_confirmation"] = "other-pass"
    assert (await client.post(AUTH, json=mismatch)).status_code == 422

    short = _register_body()
    short["password"] = short["password_confirmation"] = "12345"
    assert (await client.post(AUTH, json=short)).status_code == 422

    assert (await client.post(AUTH, json=_register_body(email="not-an-email"))).status_code == 422
    assert (await client.post(AUTH, json=_register_body(username="bad name!"))).status_code == 422


async def test_sign_in_wrong_password_is_401(client: AsyncClient, user) -> None:
    response = await client.post(
        f"{AUTH}/sign_in", json={"email": user.email, "password": "wrong-password"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


async def test_sign_in_unknown_email_has_same_error(client: AsyncClient) -> None:
    response = await client.post(
        f"{AUTH}/sign_in", json={"email": "nobody@example.com", "password": "password123"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


async def test_me_requires_token(client: AsyncClient) -> None:
    assert (await client.get(f"{AUTH}/me")).status_code == 401


async def test_token_for_unknown_user_is_rejected(
    client: AsyncClient, user_factory, headers_for
) -> None:
    dave = await user_factory("dave@example.com")
    assert (await client.get(f"{AUTH}/me", headers=headers_for(dave))).status_code == 200
    ghost = replace(dave, id=dave.id + 1000)
    assert (await client.get(f"{AUTH}/me", headers=headers_for(ghost))).status_code == 401


async def test_sign_out_acknowledges(client: AsyncClient, auth_headers) -> None:
    assert (await client.delete(f"{AUTH}/sign_out", headers=auth_headers)).status_code == 204


async def test_auth_is_rate_limited(client: AsyncClient) -> None:
    body = {"email": "nobody@example.com", "password": "whatever"}
    statuses = [
        (await client.post(f"{AUTH}/sign_in", json=body)).status_code for _ in range(31)
    ]
    assert statuses[:30] == [401] * 30
    assert statuses[30] == 429
