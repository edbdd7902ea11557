from conftest import prescription_body


def create(client, headers, **overrides):
    r = client.post("/api/v1/prescriptions", json=prescription_body(**overrides), headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_scan_lookup_is_public(client, auth_headers):
    created = create(client, auth_headers)

    r = client.get("/api/v1/scan", params={"code": created["prescription_code"]})
    assert r.status_code == 200
    assert r.json() == {
        "prescription_code": created["prescription_code"],
        "date": created["date"],
        "display_date": created["display_date"],
        "doctor_name": "Dr. Gregory House",
        "patient_name": "Jane Doe",
    }


def test_scan_trims_code(client, auth_headers):
    code = create(client, auth_headers)["prescription_code"]
    r = client.get("/api/v1/scan", params={"code": f"  {code} "})
    assert r.status_code == 200


def test_scan_blank_code(client):
    r = client.get("/api/v1/scan", params={"code": "   "})
    assert r.status_code == 400
    assert r.json()["detail"] == "Please enter a prescription code"
    assert client.get("/api/v1/scan").status_code == 400


def test_scan_unknown_code(client):
    r = client.get("/api/v1/scan", params={"code": "NOPE1234"})
    assert r.status_code == 404
    assert r.json()["detail"] == "No prescription found with this code"


def test_dashboard_summary(client, auth_headers):
    for name in ["Ann", "Bob", "ann", "Cleo", "Dev", "Eve"]:
        create(client, auth_headers, patient={"name": name, "age": 40})

    r = client.get("/api/v1/dashboard/summary", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["doctor_name"] == "Dr. Gregory House"
    assert body["total_prescriptions"] == 6
    assert body["patient_count"] == 5
    assert len(body["recent_prescriptions"]) == 5
    assert body["last_prescription_date"] == body["recent_prescriptions"][0]["display_date"]


def test_dashboard_empty(client, auth_headers):
    body = client.get("/api/v1/dashboard/summary", headers=auth_headers).json()
    assert body["total_prescriptions"] == 0
    assert body["patient_count"] == 0
    assert body["last_prescription_date"] is None
    assert body["recent_prescriptions"] == []


def test_dashboard_requires_authentication(client):
    assert client.get("/api/v1/dashboard/summary").status_code == 401


def test_catalog_and_health(client):
    r = client.get("/api/v1/catalog/medications")
    assert r.status_code == 200
    assert [o["value"] for o in r.json()] == ["Aspirin", "Paracetamol", "Naproxen", "Metoprolol", "Dolo"]

    r = client.get("/api/v1/health/health")
    assert r.json() == {"status": "ok", "database": "ok"}


def test_scan_malformed_code(client):
    for code in ["short", "has space", "Ab3_x-Z9!"]:
        r = client.get("/api/v1/scan", params={"code": code})
        assert r.status_code == 404
        assert r.json()["detail"] == "No prescription found with this code"
