def _new_employee(client, email="sam@example.com"):
    resp = client.post("/api/employees", json={"full_name": "Sam", "email": email})
    return resp.get_json()["data"]["employee_id"]


def test_checkin_today_and_duplicate(client):
    employee_id = _new_employee(client)

    resp = client.post("/api/attendance/check-in", json={"employee_id": employee_id})
    assert resp.status_code == 201
    assert resp.get_json()["data"]["status"] in {"ON_TIME", "LATE"}

    again = client.post("/api/attendance/check-in", json={"employee_id": employee_id})
    assert again.status_code == 400
    assert again.get_json()["message"] == "Already checked in today"

    today = client.get(f"/api/attendance/today/{employee_id}").get_json()["data"]
    assert today["employee_id"] == employee_id


def test_today_is_null_without_checkin(client):
    employee_id = _new_employee(client)

    resp = client.get(f"/api/attendance/today/{employee_id}")
    assert resp.status_code == 200
    assert resp.get_json()["data"] is None


def test_checkout_without_checkin_is_400(client):
    employee_id = _new_employee(client)

    resp = client.post("/api/attendance/check-out", json={"employee_id": employee_id})
    assert resp.status_code == 400


def test_checkin_requires_employee_id(client):
    resp = client.post("/api/attendance/check-in", json={})
    assert resp.status_code == 400


def test_checkin_unknown_employee_is_404(client):
    resp = client.post("/api/attendance/check-in", json={"employee_id": 4242})
    assert resp.status_code == 404


def test_correction_with_utc_offset_is_400(client):
    employee_id = _new_employee(client)
    record = client.post("/api/attendance/check-in", json={"employee_id": employee_id}).get_json()["data"]
    work_date = record["work_date"]

    resp = client.put(f"/api/attendance/{record['attendance_id']}", json={"check_in_time": f"{work_date}T09:00:00+00:00"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    resp = client.put(f"/api/attendance/{record['attendance_id']}", json={"check_out_time": 1741000000})
    assert resp.status_code == 400
