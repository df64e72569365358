import pytest


@pytest.fixture
def new_album():
    return {
        "title": "Test Album",
        "artist": "Test Artist",
        "price": 9.99,
        "image_url": "https://example.com/image.jpg",
    }


# --- GET / ---

def test_welcome_text(api):
    resp = api.get("/")
    assert resp.status_code == 200
    assert resp.text == "Hit the /albums endpoint to retrieve a list of albums!"


# --- GET /albums ---

def test_list_albums(api):
    resp = api.get("/albums")
    assert resp.status_code == 200
    albums = resp.json()
    assert len(albums) == 6
    assert set(albums[0]) == {"id", "title", "artist", "price", "image_url"}
    assert albums[0] == {
        "id": 1,
        "title": "You, Me and an App Id",
        "artist": "Daprize",
        "price": 10.99,
        "image_url": "https://aka.ms/albums-daprlogo",
    }


# --- GET /albums/{id} ---

def test_get_album(api):
    resp = api.get("/albums/1")
    assert resp.status_code == 200
    assert resp.json()["title"] == "You, Me and an App Id"


def test_get_album_not_found(api):
    resp = api.get("/albums/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Album not found"}


def test_get_album_bad_id_is_400(api):
    resp = api.get("/albums/abc")
    assert resp.status_code == 400
    assert "error" in resp.json()


# --- POST /albums ---

def test_create_album(api, new_album):
    resp = api.post("/albums", json=new_album)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == 7
    for k, v in new_album.items():
        assert data[k] == v

    assert api.get("/albums/7").json() == data


def test_create_album_missing_fields(api):
    resp = api.post("/albums", json={"title": "Test Album"})
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("Missing required fields")
    assert len(api.get("/albums").json()) == 6


def test_create_album_without_body(api):
    resp = api.post("/albums")
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_create_album_negative_price(api, new_album):
    resp = api.post("/albums", json={**new_album, "price": -1})
    assert resp.status_code == 400
    assert "price" in resp.json()["error"]


def test_create_album_boolean_price(api, new_album):
    resp = api.post("/albums", json={**new_album, "price": True})
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert len(api.get("/albums").json()) == 6


def test_create_album_numeric_string_price(api, new_album):
    resp = api.post("/albums", json={**new_album, "price": "12.50"})
    assert resp.status_code == 201
    assert resp.json()["price"] == 12.5


def test_create_album_wrong_type(api, new_album):
    resp = api.post("/albums", json={**new_album, "title": ["not", "text"]})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_create_album_malformed_json(api):
    resp = api.post("/albums", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert "error" in resp.json()


# --- PUT /albums/{id} ---

def test_update_album(api):
    resp = api.put("/albums/1", json={"title": "Updated Title", "price": 15.99})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == 1
    assert data["title"] == "Updated Title"
    assert data["price"] == 15.99
    assert data["artist"] == "Daprize"
    assert data["image_url"] == "https://aka.ms/albums-daprlogo"


def test_update_album_empty_body_is_noop(api):
    before = api.get("/albums/2").json()
    resp = api.put("/albums/2", json={})
    assert resp.status_code == 200
    assert resp.json() == before


def test_update_album_not_found(api):
    resp = api.put("/albums/999", json={"title": "Updated"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Album not found"}


def test_update_album_invalid_price(api):
    resp = api.put("/albums/1", json={"price": -3})
    assert resp.status_code == 400
    assert api.get("/albums/1").json()["price"] == 10.99


def test_update_album_boolean_price(api):
    resp = api.put("/albums/1", json={"price": False})
    assert resp.status_code == 400
    assert api.get("/albums/1").json()["price"] == 10.99


# --- DELETE /albums/{id} ---

def test_delete_album(api):
    resp = api.delete("/albums/1")
    assert resp.status_code == 200
    assert resp.json()["id"] == 1
    assert api.get("/albums/1").status_code == 404


def test_delete_album_not_found(api):
    resp = api.delete("/albums/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Album not found"}


def test_delete_leaves_remaining_albums_unchanged(api):
    before = {a["id"]: a for a in api.get("/albums").json()}

    api.delete("/albums/1")
    albums = api.get("/albums").json()

    assert len(albums) == 5
    assert all(a["id"] != 1 for a in albums)
    for a in albums:
        assert a == before[a["id"]]


# --- CORS ---

def test_cors_allows_any_origin(api):
    resp = api.get("/albums", headers={"Origin": "http://localhost:5173"})
    assert resp.headers.get("access-control-allow-origin") == "*"
