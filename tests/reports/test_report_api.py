def test_csv_download_headers(client):
    resp = client.get("/api/reports/attendance.csv?start=2025-03-01&end=2025-03-31")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.headers["Content-Disposition"] == "attachment; filename=attendance_20250301_20250331.csv"


def test_attendance_report_json(client):
    resp = client.get("/api/reports/attendance?start=2025-03-01&end=2025-03-31")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["start"] == "2025-03-01"
    assert data["rows"] == []


def test_summary_rejects_bad_input(client):
    assert client.get("/api/reports/summary?period=2025").status_code == 400
    assert client.get("/api/reports/summary?start=2025-03-31&end=2025-03-01").status_code == 400


def test_summary_defaults(client):
    resp = client.get("/api/reports/summary")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["headcount"]["total"] == 0
