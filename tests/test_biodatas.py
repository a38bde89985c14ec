from sqlalchemy import event

from models import db
from models.biodata import Biodata


def test_create_then_update_keeps_biodata_id(client, app, login, biodata_body):
    headers = login("a@mail.com")

    created = client.post("/biodatas", json=biodata_body("a@mail.com", biodataType="Male"), headers=headers)
    assert created.status_code == 201
    biodata = created.get_json()["biodata"]
    assert biodata["biodataId"] == 1
    assert biodata["contactEmail"] == "a@mail.com"
    assert created.get_json()["message"] == "Biodata Created Successfully"

    updated = client.post(
        "/biodatas",
        json=biodata_body("a@mail.com", biodataType="Male", occupation="Doctor"),
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.get_json()["message"] == "Biodata Updated Successfully"
    assert updated.get_json()["biodata"]["biodataId"] == 1
    assert updated.get_json()["biodata"]["occupation"] == "Doctor"

    with app.app_context():
        assert Biodata.query.filter_by(user_email="a@mail.com").count() == 1


def test_update_only_overwrites_supplied_fields(client, login, biodata_body):
    headers = login("a@mail.com")
    client.post("/biodatas", json=biodata_body("a@mail.com", age=27), headers=headers)

    resp = client.post(
        "/biodatas",
        json={"userEmail": "a@mail.com", "name": "Nusrat J.", "biodataType": "Female", "occupation": "Teacher"},
        headers=headers,
    )
    biodata = resp.get_json()["biodata"]
    assert biodata["name"] == "Nusrat J."
    assert biodata["occupation"] == "Teacher"
    assert biodata["age"] == 27
    assert biodata["mobileNumber"] == "01700000000"


def test_new_owners_get_sequential_ids(create_biodata):
    ids = [create_biodata(f"user{i}@mail.com")[1]["biodataId"] for i in range(3)]
    assert ids == [1, 2, 3]


def test_cannot_save_someone_elses_biodata(client, login, biodata_body):
    headers = login("mallory@mail.com")
    resp = client.post("/biodatas", json=biodata_body("a@mail.com"), headers=headers)
    assert resp.status_code == 403


def test_admin_can_save_any_biodata(client, admin_headers, biodata_body):
    resp = client.post("/biodatas", json=biodata_body("a@mail.com"), headers=admin_headers)
    assert resp.status_code == 201
    assert resp.get_json()["biodata"]["userEmail"] == "a@mail.com"


def test_save_validates_body(client, login, biodata_body):
    headers = login("a@mail.com")

    body = biodata_body("a@mail.com")
    del body["biodataType"]
    resp = client.post("/biodatas", json=body, headers=headers)
    assert resp.status_code == 400
    assert [e["field"] for e in resp.get_json()["errors"]] == ["biodataType"]

    resp = client.post("/biodatas", json=biodata_body("a@mail.com", biodataType="Other"), headers=headers)
    assert resp.status_code == 400

    resp = client.post("/biodatas", json=biodata_body("a@mail.com", age=12), headers=headers)
    assert resp.status_code == 400


def test_save_requires_token(client, biodata_body):
    assert client.post("/biodatas", json=biodata_body("a@mail.com")).status_code == 401


def _seed_three(create_biodata):
    create_biodata("f1@mail.com", name="Ayesha", biodataType="Female", age=25, permanentDivision="Dhaka")
    create_biodata("m1@mail.com", name="Rahim", biodataType="Male", age=30, permanentDivision="Chattagram")
    create_biodata("f2@mail.com", name="Sadia", biodataType="Female", age=35, permanentDivision="Dhaka")


def test_list_filters(client, create_biodata):
    _seed_three(create_biodata)

    resp = client.get("/biodatas?type=Female")
    assert resp.get_json()["meta"]["total"] == 2
    assert {b["name"] for b in resp.get_json()["data"]} == {"Ayesha", "Sadia"}

    resp = client.get("/biodatas?division=Dhaka&ageMin=30")
    assert [b["name"] for b in resp.get_json()["data"]] == ["Sadia"]

    resp = client.get("/biodatas?ageMin=26&ageMax=34")
    assert [b["name"] for b in resp.get_json()["data"]] == ["Rahim"]


def test_list_sort_and_pagination(client, create_biodata):
    _seed_three(create_biodata)

    resp = client.get("/biodatas?sort=descending")
    assert [b["age"] for b in resp.get_json()["data"]] == [35, 30, 25]

    resp = client.get("/biodatas?sort=ascending&page=2&limit=2")
    body = resp.get_json()
    assert [b["age"] for b in body["data"]] == [35]
    assert body["meta"] == {"total": 3, "page": 2, "limit": 2}


def test_list_defaults(client):
    body = client.get("/biodatas").get_json()
    assert body == {"data": [], "meta": {"total": 0, "page": 1, "limit": 20}}


def test_list_rejects_bad_query(client):
    assert client.get("/biodatas?sort=sideways").status_code == 400
    assert client.get("/biodatas?limit=0").status_code == 400
    assert client.get("/biodatas?ageMin=old").status_code == 400


def test_get_by_id(client, create_biodata):
    create_biodata("a@mail.com", name="Ayesha")
    resp = client.get("/biodatas/1")
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "Ayesha"

    missing = client.get("/biodatas/99")
    assert missing.status_code == 404
    assert missing.get_json() == {"message": "Biodata not found"}


def test_similar_returns_at_most_three(client, create_biodata):
    for i in range(4):
        create_biodata(f"f{i}@mail.com", biodataType="Female")
    create_biodata("m@mail.com", biodataType="Male")

    body = client.get("/biodatas/similar/Female").get_json()
    assert len(body["data"]) == 3
    assert all(b["biodataType"] == "Female" for b in body["data"])
    assert client.get("/biodatas/similar/Other").status_code == 400


def test_get_by_owner_email(client, create_biodata, login):
    headers, biodata = create_biodata("a@mail.com")
    resp = client.get("/biodatas/email/a@mail.com", headers=headers)
    assert resp.get_json()["biodataId"] == biodata["biodataId"]

    other = login("nobody@mail.com")
    resp = client.get("/biodatas/email/nobody@mail.com", headers=other)
    assert resp.status_code == 200
    assert resp.get_json() is None


def test_contact_details_disclosed_by_default(client, create_biodata):
    create_biodata("a@mail.com", mobileNumber="01711111111")
    body = client.get("/biodatas/1").get_json()
    assert body["contactEmail"] == "a@mail.com"
    assert body["mobileNumber"] == "01711111111"


def test_contact_details_redacted_until_request_approved(client, app, create_biodata, login, admin_headers):
    app.config["REDACT_CONTACT_DETAILS"] = True
    owner_headers, _ = create_biodata("a@mail.com", mobileNumber="01711111111")
    bob = login("bob@mail.com")

    anonymous = client.get("/biodatas/1").get_json()
    assert anonymous["contactEmail"] is None
    assert anonymous["mobileNumber"] is None
    assert client.get("/biodatas/1", headers=bob).get_json()["mobileNumber"] is None
    assert client.get("/biodatas?type=Female", headers=bob).get_json()["data"][0]["mobileNumber"] is None

    assert client.get("/biodatas/1", headers=owner_headers).get_json()["mobileNumber"] == "01711111111"
    assert client.get("/biodatas/1", headers=admin_headers).get_json()["mobileNumber"] == "01711111111"

    saved = client.post(
        "/payment/save-info",
        json={"biodataId": 1, "userEmail": "bob@mail.com", "transactionId": "pi_123"},
        headers=bob,
    )
    request_id = saved.get_json()["request"]["id"]
    assert client.get("/biodatas/1", headers=bob).get_json()["mobileNumber"] is None

    client.patch(f"/admin/contact-request/approve/{request_id}", headers=admin_headers)
    body = client.get("/biodatas/1", headers=bob).get_json()
    assert body["mobileNumber"] == "01711111111"
    assert body["contactEmail"] == "a@mail.com"


def test_update_accepts_partial_body(client, create_biodata):
    headers, _ = create_biodata("a@mail.com", name="Ayesha", biodataType="Female")

    resp = client.post("/biodatas", json={"userEmail": "a@mail.com", "occupation": "Architect"}, headers=headers)
    assert resp.status_code == 200
    biodata = resp.get_json()["biodata"]
    assert biodata["occupation"] == "Architect"
    assert biodata["name"] == "Ayesha"
    assert biodata["biodataType"] == "Female"

    nulled = client.post("/biodatas", json={"userEmail": "a@mail.com", "name": None}, headers=headers)
    assert nulled.status_code == 400


def test_create_still_requires_name_and_type(client, login):
    headers = login("a@mail.com")
    resp = client.post("/biodatas", json={"userEmail": "a@mail.com", "occupation": "Architect"}, headers=headers)
    assert resp.status_code == 400
    assert {e["field"] for e in resp.get_json()["errors"]} == {"name", "biodataType"}


def test_redacted_list_reads_contact_requests_once(client, app, create_biodata, login, admin_headers):
    app.config["REDACT_CONTACT_DETAILS"] = True
    for i in range(3):
        create_biodata(f"f{i}@mail.com", mobileNumber=f"0170000000{i}")
    bob = login("bob@mail.com")
    request_id = client.post(
        "/payment/save-info",
        json={"biodataId": 2, "userEmail": "bob@mail.com", "transactionId": "pi_1"},
        headers=bob,
    ).get_json()["request"]["id"]
    client.patch(f"/admin/contact-request/approve/{request_id}", headers=admin_headers)

    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    with app.app_context():
        engine = db.engine
    event.listen(engine, "before_cursor_execute", record)
    try:
        body = client.get("/biodatas", headers=bob).get_json()
    finally:
        event.remove(engine, "before_cursor_execute", record)

    assert [b["mobileNumber"] for b in body["data"]] == [None, "01700000001", None]
    assert sum("contact_requests" in s for s in statements) == 1
