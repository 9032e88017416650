"""Exhibition Routes — verifies CRUD over HTTP with artwork-set synchronization.

Tests:
    - Create with artworks sets each artwork's exhibition
    - Update diff: removed artworks released, added artworks linked
    - Delete releases all member artworks
    - /{id}/artworks resolves members and counts dangling references
"""

from uuid import uuid4

from tests.services.payloads import artwork_payload, exhibition_payload


async def _create_artwork(client, title: str) -> dict:
    res = await client.post("/api/v1/artworks", json=artwork_payload(title))
    return res.json()


async def _exhibition_of(client, artwork_id: str):
    return (await client.get(f"/api/v1/artworks/{artwork_id}")).json()["exhibition"]


async def test_create_exhibition_links_artworks(client):
    a = await _create_artwork(client, "A")
    b = await _create_artwork(client, "B")

    res = await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=[a["id"], b["id"]]),
    )

    assert res.status_code == 201
    expo = res.json()
    assert expo["slug"] == "dakart"
    assert expo["artworks"] == [a["id"], b["id"]]
    assert await _exhibition_of(client, a["id"]) == expo["id"]
    assert await _exhibition_of(client, b["id"]) == expo["id"]


async def test_update_exhibition_syncs_added_and_removed(client):
    a = await _create_artwork(client, "A")
    b = await _create_artwork(client, "B")
    c = await _create_artwork(client, "C")
    expo = (await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=[a["id"], b["id"]]),
    )).json()

    res = await client.put(
        f"/api/v1/exhibitions/{expo['id']}",
        json=exhibition_payload(artworks=[b["id"], c["id"]]),
    )

    assert res.status_code == 200
    assert res.json()["artworks"] == [b["id"], c["id"]]
    assert await _exhibition_of(client, a["id"]) is None
    assert await _exhibition_of(client, b["id"]) == expo["id"]
    assert await _exhibition_of(client, c["id"]) == expo["id"]


async def test_delete_exhibition_releases_artworks(client):
    a = await _create_artwork(client, "A")
    expo = (await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=[a["id"]]),
    )).json()

    res = await client.delete(f"/api/v1/exhibitions/{expo['id']}")

    assert res.status_code == 204
    assert await _exhibition_of(client, a["id"]) is None
    assert (await client.get(f"/api/v1/exhibitions/{expo['id']}")).status_code == 404


async def test_malformed_artwork_ids_dropped_in_lenient_mode(client):
    a = await _create_artwork(client, "A")
    res = await client.post(
        "/api/v1/exhibitions",
        json=exhibition_payload(artworks=["bogus", a["id"], a["id"]]),
    )
    assert res.status_code == 201
    assert res.json()["artworks"] == [a["id"]]


async def test_malformed_artwork_ids_rejected_in_strict_mode(client, strict_references):
    res = await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=["bogus"]),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_REFERENCE"


async def test_exhibition_artworks_skips_dangling(client):
    a = await _create_artwork(client, "A")
    missing_id = str(uuid4())
    expo = (await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=[a["id"], missing_id]),
    )).json()

    res = await client.get(f"/api/v1/exhibitions/{expo['id']}/artworks")

    assert res.status_code == 200
    body = res.json()
    assert body["exhibitionId"] == expo["id"]
    assert [art["id"] for art in body["artworks"]] == [a["id"]]
    assert body["missing"] == 1


async def test_duplicate_exhibition_titles_get_numbered_slugs(client):
    first = (await client.post("/api/v1/exhibitions", json=exhibition_payload("Sunset"))).json()
    second = (await client.post("/api/v1/exhibitions", json=exhibition_payload("Sunset"))).json()
    assert (first["slug"], second["slug"]) == ("sunset", "sunset-1")


async def test_list_exhibitions_counts(client):
    await client.post("/api/v1/exhibitions", json=exhibition_payload("One"))
    await client.post("/api/v1/exhibitions", json=exhibition_payload("Two"))
    body = (await client.get("/api/v1/exhibitions")).json()
    assert body["count"] == 2


async def test_non_string_artwork_ids_dropped_in_lenient_mode(client):
    a = await _create_artwork(client, "A")
    res = await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=[a["id"], 42, None]),
    )
    assert res.status_code == 201
    assert res.json()["artworks"] == [a["id"]]
    assert await _exhibition_of(client, a["id"]) == res.json()["id"]


async def test_null_artworks_list_treated_as_empty(client):
    res = await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=None),
    )
    assert res.status_code == 201
    assert res.json()["artworks"] == []


async def test_non_string_artwork_ids_rejected_in_strict_mode(client, strict_references):
    res = await client.post(
        "/api/v1/exhibitions", json=exhibition_payload(artworks=[42]),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_REFERENCE"
