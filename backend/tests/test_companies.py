from jobly.services.company_service import CompanyService

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "logoUrl": "http://new.img",
    "description": "DescNew",
    "numEmployees": 10,
}

C1 = {"handle": "c1", "name": "C1", "description": "Desc1", "numEmployees": 1, "logoUrl": "http://c1.img"}
C2 = {"handle": "c2", "name": "C2", "description": "Desc2", "numEmployees": 2, "logoUrl": "http://c2.img"}
C3 = {"handle": "c3", "name": "C3", "description": "Desc3", "numEmployees": 3, "logoUrl": "http://c3.img"}


# ---- POST /companies ----

def test_create_ok_for_admin(client, admin_headers):
    resp = client.post("/companies", json=NEW_COMPANY, headers=admin_headers)

    assert resp.status_code == 201, resp.text
    assert resp.json() == {"company": NEW_COMPANY}


def test_create_unauthorized_for_non_admin(client, user_headers):
    resp = client.post("/companies", json=NEW_COMPANY, headers=user_headers)

    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "UNAUTHORIZED"


def test_create_unauthorized_for_anon(client):
    assert client.post("/companies", json=NEW_COMPANY).status_code == 401


def test_create_bad_token(client):
    resp = client.post("/companies", json=NEW_COMPANY, headers={"Authorization": "Bearer not-a-jwt"})

    assert resp.status_code == 401


def test_create_missing_data(client, admin_headers):
    resp = client.post("/companies", json={"handle": "new", "numEmployees": 10}, headers=admin_headers)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"]["errors"]


def test_create_invalid_logo_url(client, admin_headers):
    resp = client.post("/companies", json={**NEW_COMPANY, "logoUrl": "not-a-url"}, headers=admin_headers)

    assert resp.status_code == 400


def test_create_negative_employees(client, admin_headers):
    resp = client.post("/companies", json={**NEW_COMPANY, "numEmployees": -1}, headers=admin_headers)

    assert resp.status_code == 400


def test_create_duplicate(client, admin_headers):
    resp = client.post("/companies", json={**NEW_COMPANY, "handle": "c1"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "DUPLICATE"


# ---- GET /companies ----

def test_list_ok_for_anon(client):
    resp = client.get("/companies")

    assert resp.status_code == 200
    assert resp.json() == {"companies": [C1, C2, C3]}


def test_list_filter_name(client):
    assert client.get("/companies", params={"name": "1"}).json() == {"companies": [C1]}


def test_list_filter_min_employees(client):
    assert client.get("/companies", params={"minEmployees": 2}).json() == {"companies": [C2, C3]}


def test_list_filter_max_employees(client):
    assert client.get("/companies", params={"maxEmployees": 2}).json() == {"companies": [C1, C2]}


def test_list_multiple_filters(client, admin_headers):
    c4 = {"handle": "c4", "name": "C4", "description": "Desc1", "numEmployees": 2, "logoUrl": "http://c1.img"}
    client.post("/companies", json=c4, headers=admin_headers)

    resp = client.get("/companies", params={"name": "1", "maxEmployees": 2})

    assert resp.json() == {"companies": [C1]}


def test_list_min_greater_than_max(client):
    resp = client.get("/companies", params={"minEmployees": 2, "maxEmployees": 1})

    assert resp.status_code == 400


def test_list_returns_none(client):
    assert client.get("/companies", params={"name": "invalid_name"}).json() == {"companies": []}


def test_list_unknown_filter(client):
    resp = client.get("/companies", params={"description": "invalid"})

    assert resp.status_code == 400


def test_list_non_numeric_bound(client):
    assert client.get("/companies", params={"minEmployees": "lots"}).status_code == 400


# ---- GET /companies/{handle} ----

def test_get_for_anon(client):
    resp = client.get("/companies/c1")

    assert resp.json() == {"company": C1}


def test_get_not_found(client):
    resp = client.get("/companies/nope")

    assert resp.status_code == 404
    assert resp.json()["error"] == {
        "code": "NOT_FOUND",
        "reason": "Resource not found",
        "message": "No company: nope",
    }


# ---- PATCH /companies/{handle} ----

def test_update_for_admin(client, admin_headers):
    resp = client.patch("/companies/c1", json={"name": "C1-new"}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json() == {"company": {**C1, "name": "C1-new"}}


def test_update_for_non_admin(client, user_headers):
    resp = client.patch("/companies/c1", json={"name": "C1-new"}, headers=user_headers)

    assert resp.status_code == 401


def test_update_for_anon(client):
    assert client.patch("/companies/c1", json={"name": "C1-new"}).status_code == 401


def test_update_not_found(client, admin_headers):
    resp = client.patch("/companies/nope", json={"name": "new nope"}, headers=admin_headers)

    assert resp.status_code == 404


def test_update_handle_change_attempt(client, admin_headers):
    resp = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)

    assert resp.status_code == 400


def test_update_invalid_data(client, admin_headers):
    resp = client.patch("/companies/c1", json={"logoUrl": "not-a-url"}, headers=admin_headers)

    assert resp.status_code == 400


def test_update_null_name(client, admin_headers):
    resp = client.patch("/companies/c1", json={"name": None}, headers=admin_headers)

    assert resp.status_code == 400


def test_update_empty_body(client, admin_headers):
    resp = client.patch("/companies/c1", json={}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "No data"


def test_update_clears_optional_fields(client, admin_headers):
    resp = client.patch("/companies/c1", json={"logoUrl": None}, headers=admin_headers)

    assert resp.json() == {"company": {**C1, "logoUrl": None}}


# ---- DELETE /companies/{handle} ----

def test_delete_for_admin(client, admin_headers):
    resp = client.delete("/companies/c1", headers=admin_headers)

    assert resp.json() == {"deleted": "c1"}
    assert client.get("/companies/c1").status_code == 404


def test_delete_for_non_admin(client, user_headers):
    assert client.delete("/companies/c1", headers=user_headers).status_code == 401


def test_delete_for_anon(client):
    assert client.delete("/companies/c1").status_code == 401


def test_delete_not_found(client, admin_headers):
    assert client.delete("/companies/nope", headers=admin_headers).status_code == 404


# ---- error handler ----

def test_unhandled_error_is_500(db_session, monkeypatch):
    from fastapi.testclient import TestClient

    from jobly.api.deps import get_db
    from jobly.main import app

    def boom(self, filters=None):
        raise RuntimeError("database went away")

    monkeypatch.setattr(CompanyService, "find_all", boom)
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            resp = c.get("/companies")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"
