def _employee_id(client):
    resp = client.post("/api/employees", json={"full_name": "Kiran", "email": "kiran@example.com"})
    return resp.get_json()["data"]["employee_id"]


def test_create_approve_and_filter(client):
    employee_id = _employee_id(client)
    resp = client.post(
        "/api/leave",
        json={
            "employee_id": employee_id,
            "start_date": "2025-05-05",
            "end_date": "2025-05-07",
            "leave_type": "CASUAL",
            "reason": "Wedding",
        },
    )
    assert resp.status_code == 201
    req = resp.get_json()["data"]
    assert req["days"] == 3
    assert req["status"] == "PENDING"

    resp = client.post(f"/api/leave/{req['request_id']}/approve", json={"admin_note": "Enjoy"})
    assert resp.get_json()["data"]["status"] == "APPROVED"
    assert resp.get_json()["data"]["admin_note"] == "Enjoy"

    approved = client.get("/api/leave?status=approved").get_json()["data"]
    assert [r["request_id"] for r in approved] == [req["request_id"]]
    assert client.get("/api/leave?status=PENDING").get_json()["data"] == []


def test_bad_dates_and_status_are_400(client):
    employee_id = _employee_id(client)

    resp = client.post(
        "/api/leave",
        json={"employee_id": employee_id, "start_date": "05/05/2025", "end_date": "2025-05-07", "leave_type": "SICK", "reason": "x"},
    )
    assert resp.status_code == 400
    assert client.get("/api/leave?status=MAYBE").status_code == 400


def test_overlap_is_409_and_decided_request_cannot_be_rejected(client):
    employee_id = _employee_id(client)
    body = {"employee_id": employee_id, "start_date": "2025-06-01", "end_date": "2025-06-03", "leave_type": "ANNUAL", "reason": "Trip"}

    first = client.post("/api/leave", json=body).get_json()["data"]
    assert client.post("/api/leave", json=body).status_code == 409

    client.post(f"/api/leave/{first['request_id']}/approve")
    assert client.post(f"/api/leave/{first['request_id']}/reject").status_code == 400
    assert client.get("/api/leave/999").status_code == 404
