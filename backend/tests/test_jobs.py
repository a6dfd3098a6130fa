NEW_JOB = {
    "title": "J4",
    "salary": 40000,
    "equity": "0.0004",
    "companyHandle": "c3",
}


# ---- POST /jobs ----

def test_create_ok_for_admin(client, admin_headers):
    resp = client.post("/jobs", json=NEW_JOB, headers=admin_headers)

    assert resp.status_code == 201, resp.text
    job = resp.json()["job"]
    assert job == {"id": job["id"], **NEW_JOB}


def test_create_numeric_equity(client, admin_headers):
    resp = client.post("/jobs", json={**NEW_JOB, "equity": 0.5}, headers=admin_headers)

    assert resp.status_code == 201
    assert resp.json()["job"]["equity"] == "0.5"


def test_create_unauthorized_for_non_admin(client, user_headers):
    assert client.post("/jobs", json=NEW_JOB, headers=user_headers).status_code == 401


def test_create_missing_data(client, admin_headers):
    assert client.post("/jobs", json={}, headers=admin_headers).status_code == 400


def test_create_unknown_company(client, admin_headers):
    resp = client.post("/jobs", json={**NEW_JOB, "companyHandle": "not-a-company"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "No company: not-a-company"


def test_create_equity_out_of_range(client, admin_headers):
    resp = client.post("/jobs", json={**NEW_JOB, "equity": 1.1}, headers=admin_headers)

    assert resp.status_code == 400


# ---- GET /jobs ----

def test_list_ok_for_anon(client):
    resp = client.get("/jobs")

    assert resp.status_code == 200
    jobs = resp.json()["jobs"]
    assert [
        {k: v for k, v in job.items() if k != "id"} for job in jobs
    ] == [
        {"title": "J1", "salary": 100000, "equity": "0.0001", "companyHandle": "c1"},
        {"title": "J2", "salary": 200000, "equity": "0.0002", "companyHandle": "c2"},
        {"title": "J3", "salary": 300000, "equity": "0", "companyHandle": "c2"},
    ]


def test_list_filters(client):
    resp = client.get("/jobs", params={"minSalary": 150000, "hasEquity": "true"})

    assert [job["title"] for job in resp.json()["jobs"]] == ["J2"]


def test_list_unknown_filter(client):
    assert client.get("/jobs", params={"companyHandle": "c1"}).status_code == 400


# ---- GET /jobs/{id} ----

def test_get_for_anon(client, j1_id):
    resp = client.get(f"/jobs/{j1_id}")

    assert resp.json() == {
        "job": {
            "id": j1_id,
            "title": "J1",
            "salary": 100000,
            "equity": "0.0001",
            "companyHandle": "c1",
        }
    }


def test_get_not_found(client):
    assert client.get("/jobs/0").status_code == 404


def test_get_non_numeric_id(client):
    assert client.get("/jobs/nope").status_code == 400


# ---- PATCH /jobs/{id} ----

def test_update_for_admin(client, admin_headers, j1_id):
    resp = client.patch(f"/jobs/{j1_id}", json={"title": "J1-update"}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json() == {
        "job": {
            "id": j1_id,
            "title": "J1-update",
            "salary": 100000,
            "equity": "0.0001",
            "companyHandle": "c1",
        }
    }


def test_update_set_nulls(client, admin_headers, j1_id):
    resp = client.patch(f"/jobs/{j1_id}", json={"salary": None, "equity": None}, headers=admin_headers)

    job = resp.json()["job"]
    assert job["salary"] is None
    assert job["equity"] is None


def test_update_for_non_admin(client, user_headers, j1_id):
    resp = client.patch(f"/jobs/{j1_id}", json={"title": "J1-update"}, headers=user_headers)

    assert resp.status_code == 401


def test_update_for_anon(client, j1_id):
    assert client.patch(f"/jobs/{j1_id}", json={"title": "J1-update"}).status_code == 401


def test_update_not_found(client, admin_headers):
    resp = client.patch("/jobs/0", json={"title": "Will not Update"}, headers=admin_headers)

    assert resp.status_code == 404


def test_update_company_handle_attempt(client, admin_headers, j1_id):
    resp = client.patch(f"/jobs/{j1_id}", json={"companyHandle": "c2"}, headers=admin_headers)

    assert resp.status_code == 400


def test_update_invalid_equity(client, admin_headers, j1_id):
    resp = client.patch(f"/jobs/{j1_id}", json={"equity": 1.1}, headers=admin_headers)

    assert resp.status_code == 400


# ---- DELETE /jobs/{id} ----

def test_delete_for_admin(client, admin_headers, j1_id):
    resp = client.delete(f"/jobs/{j1_id}", headers=admin_headers)

    assert resp.json() == {"deleted": j1_id}
    assert client.get(f"/jobs/{j1_id}").status_code == 404


def test_delete_for_non_admin(client, user_headers, j1_id):
    assert client.delete(f"/jobs/{j1_id}", headers=user_headers).status_code == 401


def test_delete_for_anon(client, j1_id):
    assert client.delete(f"/jobs/{j1_id}").status_code == 401


def test_delete_not_found(client, admin_headers):
    assert client.delete("/jobs/0", headers=admin_headers).status_code == 404
