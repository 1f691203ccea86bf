"""Tests for the places endpoints: CRUD, ownership, soft delete and restore."""

from httpx import AsyncClient

PLACES = "/api/v1/places"


async def test_create_requires_auth(client: AsyncClient) -> None:
    response = await client.post(PLACES, json={"name": "Moonhouse"})
    assert response.status_code == 401
    assert response.headers.get("WWW-Authenticate") == "Bearer"
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_invalid_token_is_rejected(client: AsyncClient) -> None:
    response = await client.post(
        PLACES, json={"name": "Moonhouse"}, headers={"Authorization": "Bearer nope"}
    )
    assert response.status_code == 401


async def test_create_and_show(client: AsyncClient, auth_headers, user) -> None:
    response = await client.post(
        PLACES,
        json={
            "name": "  Tokyo Station ",
            "address_line": "1 Chome Marunouchi",
            "city": "Chiyoda",
            "country": "Japan",
            "website_url": "https://www.tokyostationcity.com",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    place_id = response.json()["id"]

    detail = await client.get(f"{PLACES}/{place_id}")
    assert detail.status_code == 200
    data = detail.json()
    assert data["name"] == "Tokyo Station"
    assert data["author_id"] == user.id
    assert data["full_address"] == "1 Chome Marunouchi Chiyoda Japan"
    assert data["latitude"] is None


async def test_create_validation(client: AsyncClient, auth_headers) -> None:
    assert (await client.post(PLACES, json={}, headers=auth_headers)).status_code == 422
    out_of_range = await client.post(
        PLACES, json={"name": "North", "latitude": 91}, headers=auth_headers
    )
    assert out_of_range.status_code == 422
    bad_url = await client.post(
        PLACES, json={"name": "X", "website_url": "ftp://x"}, headers=auth_headers
    )
    assert bad_url.status_code == 422
    blank = await client.post(PLACES, json={"name": "   "}, headers=auth_headers)
    assert blank.status_code == 400
    assert blank.json()["details"] == {"field": "name"}


async def test_show_unknown_place_is_404(client: AsyncClient) -> None:
    response = await client.get(f"{PLACES}/999")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_index_lists_newest_first_with_pagination(
    client: AsyncClient, make_place
) -> None:
    first = await make_place(name="Moonhouse", city="Melbourne")
    second = await make_place(name="Tokyo Station", city="Chiyoda")
    third = await make_place(name="Osaka Castle", city="Osaka")

    response = await client.get(PLACES)
    assert response.status_code == 200
    data = response.json()
    assert [item["id"] for item in data["items"]] == [third, second, first]
    assert data["total"] == 3
    assert set(data["items"][0]) == {
        "id",
        "name",
        "city",
        "description",
        "latitude",
        "longitude",
    }

    page2 = (await client.get(PLACES, params={"page": 2, "per_page": 2})).json()
    assert [item["id"] for item in page2["items"]] == [first]
    assert page2["total_pages"] == 2


async def test_update_by_owner_only(
    client: AsyncClient, make_place, other_headers, admin_headers
) -> None:
    place_id = await make_place(name="Moonhouse", city="Melbourne")

    forbidden = await client.patch(
        f"{PLACES}/{place_id}", json={"name": "Mine now"}, headers=other_headers
    )
    assert forbidden.status_code == 403
    assert forbidden.json()["error"] == "PERMISSION_DENIED"

    by_admin = await client.patch(
        f"{PLACES}/{place_id}", json={"description": "Cafe"}, headers=admin_headers
    )
    assert by_admin.status_code == 200
    assert by_admin.json() == {"ok": True}

    detail = (await client.get(f"{PLACES}/{place_id}")).json()
    assert detail["name"] == "Moonhouse"
    assert detail["description"] == "Cafe"
    assert detail["city"] == "Melbourne"


async def test_partial_update_can_clear_a_field(
    client: AsyncClient, make_place, auth_headers
) -> None:
    place_id = await make_place(name="Moonhouse", city="Melbourne", phone="03 1234")
    response = await client.patch(
        f"{PLACES}/{place_id}", json={"phone": None, "city": " Fitzroy "}, headers=auth_headers
    )
    assert response.status_code == 200
    detail = (await client.get(f"{PLACES}/{place_id}")).json()
    assert detail["phone"] is None
    assert detail["city"] == "Fitzroy"


async def test_soft_delete_and_restore(
    client: AsyncClient, make_place, auth_headers, other_headers, admin_headers
) -> None:
    place_id = await make_place(name="Moonhouse")

    denied = await client.delete(f"{PLACES}/{place_id}", headers=other_headers)
    assert denied.status_code == 403

    deleted = await client.delete(f"{PLACES}/{place_id}", headers=auth_headers)
    assert deleted.status_code == 204
    assert (await client.get(f"{PLACES}/{place_id}")).status_code == 404
    assert (await client.get(PLACES)).json()["total"] == 0

    trash_denied = await client.get(f"{PLACES}/deleted", headers=auth_headers)
    assert trash_denied.status_code == 403
    trash = await client.get(f"{PLACES}/deleted", headers=admin_headers)
    assert [item["id"] for item in trash.json()["items"]] == [place_id]

    restore_denied = await client.post(
        f"{PLACES}/{place_id}/restore", headers=other_headers
    )
    assert restore_denied.status_code == 403
    restored = await client.post(f"{PLACES}/{place_id}/restore", headers=auth_headers)
    assert restored.status_code == 200
    assert restored.json() == {"ok": True}
    assert (await client.get(f"{PLACES}/{place_id}")).status_code == 200


async def test_deleting_a_deleted_place_is_404(
    client: AsyncClient, make_place, auth_headers
) -> None:
    place_id = await make_place(name="Moonhouse")
    await client.delete(f"{PLACES}/{place_id}", headers=auth_headers)
    again = await client.delete(f"{PLACES}/{place_id}", headers=auth_headers)
    assert again.status_code == 404


async def test_mine_lists_only_own_places(
    client: AsyncClient, make_place, auth_headers, other_headers
) -> None:
    mine = await make_place(name="Moonhouse")
    await make_place(headers=other_headers, name="Tokyo Station")

    response = await client.get(f"{PLACES}/mine", headers=auth_headers)
    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == [mine]
    assert (await client.get(f"{PLACES}/mine")).status_code == 401
