from zip_api.db.models.county import County


def test_index_returns_counties(client, make_county):
    make_county("Pest")
    make_county("Baranya")

    r = client.get("/counties")

    assert r.status_code == 200
    names = [c["name"] for c in r.json()["counties"]]
    assert names == ["Pest", "Baranya"]
    assert set(r.json()["counties"][0]) == {"id", "name"}


def test_create_requires_authentication(client, db):
    r = client.post("/counties", json={"name": "NewCounty"})

    assert r.status_code == 401
    assert r.json() == {"message": "Unauthenticated."}
    assert db.query(County).count() == 0


def test_create_rejects_garbage_token(client, db):
    r = client.post("/counties", json={"name": "NewCounty"}, headers={"Authorization": "Bearer nope"})

    assert r.status_code == 401
    assert db.query(County).count() == 0


def test_authenticated_user_can_create_county(client, db, auth_headers):
    r = client.post("/counties", json={"name": "  NewCounty "}, headers=auth_headers)

    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "County created successfully"
    assert body["county"]["name"] == "NewCounty"
    assert db.get(County, body["county"]["id"]).name == "NewCounty"


def test_create_validates_name(client, auth_headers):
    r = client.post("/counties", json={"name": "   "}, headers=auth_headers)

    assert r.status_code == 422
    assert r.json()["message"] == "The given data was invalid."
    assert "name" in r.json()["errors"]


def test_modify_returns_404_when_not_found(client, auth_headers):
    r = client.patch("/counties/9999", json={"name": "X"}, headers=auth_headers)

    assert r.status_code == 404
    assert r.json() == {"message": "County not found"}


def test_modify_requires_authentication(client, db, make_county):
    county = make_county("OldName")

    r = client.patch(f"/counties/{county.id}", json={"name": "NewName"})

    assert r.status_code == 401
    db.expire_all()
    assert db.get(County, county.id).name == "OldName"


def test_authenticated_user_can_modify_county(client, db, auth_headers, make_county):
    county = make_county("OldName")

    r = client.patch(f"/counties/{county.id}", json={"name": "NewName"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json() == {
        "message": "County updated successfully",
        "county": {"id": county.id, "name": "NewName"},
    }
    db.expire_all()
    assert db.get(County, county.id).name == "NewName"


def test_modify_without_fields_keeps_name(client, auth_headers, make_county):
    county = make_county("Somogy")

    r = client.patch(f"/counties/{county.id}", json={"id": 42, "unknown": "x"}, headers=auth_headers)

    assert r.status_code == 200
    assert r.json()["county"] == {"id": county.id, "name": "Somogy"}


def test_delete_returns_404_when_not_found(client, auth_headers):
    r = client.delete("/counties/9999", headers=auth_headers)

    assert r.status_code == 404
    assert r.json() == {"message": "County not found"}


def test_delete_requires_authentication(client, db, make_county):
    county = make_county("Keep")

    r = client.delete(f"/counties/{county.id}")

    assert r.status_code == 401
    assert db.get(County, county.id) is not None


def test_authenticated_user_can_delete_county(client, db, auth_headers, make_county):
    county = make_county("ToDelete")
    county_id = county.id

    r = client.delete(f"/counties/{county_id}", headers=auth_headers)

    assert r.status_code == 200
    assert r.json() == {"message": "County deleted successfully"}
    db.expire_all()
    assert db.get(County, county_id) is None


def test_delete_county_with_cities_is_rejected(client, db, auth_headers, make_county, make_city):
    county = make_county("Heves")
    make_city(county, "Eger", 3300)

    r = client.delete(f"/counties/{county.id}", headers=auth_headers)

    assert r.status_code == 409
    assert r.json() == {"message": "Constraint violation"}
    db.expire_all()
    assert db.get(County, county.id) is not None
    assert client.get(f"/counties/{county.id}/cities").json()["cities"][0]["name"] == "Eger"
