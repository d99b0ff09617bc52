"""Wedding, gallery, love story and gift API tests.

Pattern: test_<verb>_<noun>_<scenario>
"""

import pytest

WEDDING = {
    "groom_name": "Bima",
    "bride_name": "Ayu",
    "wedding_date": "2026-06-13",
    "akad_date": "2026-06-13T08:00:00",
    "reception_date": "2026-06-13T11:00:00",
    "location": "Gedung Serbaguna, Bandung",
    "google_maps_link": "https://maps.example.com/?q=gedung-serbaguna",
}


async def _create_wedding(client, headers, **overrides) -> dict:
    r = await client.post("/api/wedding", json={**WEDDING, **overrides}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


# ═══════════════════════════════════════════════════════════
# Weddings
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_register_login_create_and_list_wedding(client):
    """Full flow: register → login → create wedding → list it back."""
    r = await client.post(
        "/api/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "p", "role": "user"},
    )
    assert r.status_code == 201
    user_id = r.json()["id_user"]

    r = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "p"})
    assert r.status_code == 200
    headers = {"Authorization": f"Bearer {r.json()['token']}"}

    r = await client.post(
        "/api/wedding",
        json={"groom_name": "G", "bride_name": "B"},
        headers=headers,
    )
    assert r.status_code == 201
    wedding = r.json()
    assert wedding["id_user"] == user_id

    r = await client.get("/api/wedding", headers=headers)
    assert r.status_code == 200
    assert r.json() == [wedding]


@pytest.mark.asyncio
async def test_create_wedding_round_trips_fields(client, make_user):
    owner = await make_user()
    created = await _create_wedding(client, owner["headers"])

    r = await client.get("/api/wedding", headers=owner["headers"])
    [listed] = r.json()

    assert listed == created
    assert listed == {
        **WEDDING,
        # Naive times are stored and returned as UTC
        "akad_date": "2026-06-13T08:00:00Z",
        "reception_date": "2026-06-13T11:00:00Z",
        "id_wedding": listed["id_wedding"],
        "id_user": owner["id_user"],
    }


@pytest.mark.asyncio
async def test_create_wedding_keeps_offset_times(client, auth_headers):
    """Times posted with an offset come back as the same instant in UTC."""
    created = await _create_wedding(
        client,
        auth_headers,
        akad_date="2026-06-13T08:00:00+07:00",
        reception_date="2026-06-13T19:30:00+07:00",
    )
    assert created["akad_date"] == "2026-06-13T01:00:00Z"
    assert created["reception_date"] == "2026-06-13T12:30:00Z"

    r = await client.get("/api/wedding", headers=auth_headers)
    assert r.json() == [created]


@pytest.mark.asyncio
async def test_create_wedding_ignores_owner_in_body(client, make_user):
    """The owner is always the caller, whatever the body says."""
    owner = await make_user()
    other = await make_user()
    wedding = await _create_wedding(client, owner["headers"], id_user=other["id_user"])
    assert wedding["id_user"] == owner["id_user"]


@pytest.mark.asyncio
async def test_create_wedding_requires_names(client, auth_headers):
    r = await client.post("/api/wedding", json={"groom_name": "G"}, headers=auth_headers)
    assert r.status_code == 400
    assert "bride_name" in r.json()["error"]


@pytest.mark.asyncio
async def test_list_weddings_multiple(client, auth_headers):
    first = await _create_wedding(client, auth_headers, groom_name="One")
    second = await _create_wedding(client, auth_headers, groom_name="Two")

    r = await client.get("/api/wedding", headers=auth_headers)
    ids = {w["id_wedding"] for w in r.json()}
    assert ids == {first["id_wedding"], second["id_wedding"]}


# ═══════════════════════════════════════════════════════════
# Gallery / Love story / Gift
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_create_and_list_gallery(client, auth_headers):
    wedding = await _create_wedding(client, auth_headers)
    r = await client.post(
        "/api/gallery",
        json={
            "id_wedding": wedding["id_wedding"],
            "media_type": "photo",
            "file_url": "https://cdn.example.com/prewed-1.jpg",
            "caption": "Prewedding",
        },
        headers=auth_headers,
    )
    assert r.status_code == 201
    item = r.json()
    assert item["id_wedding"] == wedding["id_wedding"]
    assert item["media_type"] == "photo"

    r = await client.get("/api/gallery", headers=auth_headers)
    assert r.json() == [item]


@pytest.mark.asyncio
async def test_create_and_list_love_story(client, auth_headers):
    wedding = await _create_wedding(client, auth_headers)
    r = await client.post(
        "/api/love-story",
        json={
            "id_wedding": wedding["id_wedding"],
            "title": "First met",
            "description": "Campus library, 2019",
            "story_date": "2019-09-02",
        },
        headers=auth_headers,
    )
    assert r.status_code == 201
    story = r.json()
    assert story["story_date"] == "2019-09-02"

    r = await client.get("/api/love-story", headers=auth_headers)
    assert r.json() == [story]


@pytest.mark.asyncio
async def test_create_and_list_gift(client, auth_headers):
    wedding = await _create_wedding(client, auth_headers)
    r = await client.post(
        "/api/gift",
        json={
            "id_wedding": wedding["id_wedding"],
            "bank_name": "BCA",
            "account_name": "Ayu Lestari",
            "account_number": "1234567890",
        },
        headers=auth_headers,
    )
    assert r.status_code == 201
    gift = r.json()
    assert gift["account_number"] == "1234567890"

    r = await client.get("/api/gift", headers=auth_headers)
    assert r.json() == [gift]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,body",
    [
        ("/api/gallery", {"media_type": "photo", "file_url": "https://cdn.example.com/x.jpg"}),
        ("/api/love-story", {"title": "Stolen"}),
        ("/api/gift", {"bank_name": "BNI", "account_name": "Mallory", "account_number": "666"}),
    ],
)
async def test_create_under_foreign_wedding_is_404(client, make_user, path, body):
    """A wedding owned by someone else looks exactly like a missing one."""
    owner = await make_user()
    intruder = await make_user()
    wedding = await _create_wedding(client, owner["headers"])

    r = await client.post(
        path, json={"id_wedding": wedding["id_wedding"], **body}, headers=intruder["headers"]
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Wedding not found"}

    r = await client.post(
        path, json={"id_wedding": 999999, **body}, headers=intruder["headers"]
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Wedding not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/gallery", "/api/love-story", "/api/gift"])
async def test_wedding_children_require_auth(client, path):
    assert (await client.get(path)).status_code == 401
    assert (await client.post(path, json={})).status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/gallery", "/api/love-story", "/api/gift"])
@pytest.mark.parametrize("bad_id", [0, -1, 2**31, 2**70])
async def test_create_with_out_of_range_wedding_id(client, auth_headers, path, bad_id):
    r = await client.post(path, json={"id_wedding": bad_id}, headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["error"].startswith("id_wedding:")
