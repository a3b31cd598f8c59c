from fastapi.testclient import TestClient

from seat_selector.config import COLS, OCCUPIED, ROWS
from seat_selector.main import app

client = TestClient(app)


def visible_codes(grid):
    return {seat["code"] for row in grid["rows"] for seat in row["seats"]}


def find_rendered(grid, code):
    for row in grid["rows"]:
        for seat in row["seats"]:
            if seat["code"] == code:
                return seat
    return None


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_initial_snapshot():
    response = client.get("/seats")

    assert response.status_code == 200
    data = response.json()
    assert data["sector"] == "all"
    assert len(data["grid"]["rows"]) == ROWS
    assert data["grid"]["rows"][0]["label"] == "Row A"
    assert len(visible_codes(data["grid"])) == ROWS * COLS
    assert data["summary"]["count"] == 0
    assert data["summary"]["items"] == ["No seats selected yet."]
    assert data["booking_step"]["open"] is False
    assert data["last_booking_info"] == ""


def test_rendered_seat_attributes():
    grid = client.get("/seats").json()["grid"]

    occupied = find_rendered(grid, "A-5")
    assert occupied["occupied"] is True
    assert occupied["disabled"] is True
    assert occupied["state"] == "occupied"
    assert occupied["aria_label"] == "Row A, Seat 5 (occupied)"
    assert occupied["title"] == "Row A, Seat 5"

    available = find_rendered(grid, "C-3")
    assert available["disabled"] is False
    assert available["selected"] is False
    assert available["price"] == 11
    assert available["aria_label"] == "Row C, Seat 3 (available)"


def test_select_two_seats():
    first = client.post("/seats/A-1/toggle")
    assert first.status_code == 200
    assert first.json()["patch"] == {"code": "A-1", "selected": True}

    second = client.post("/seats/C-3/toggle")
    summary = second.json()["summary"]
    assert summary["count"] == 2
    assert summary["total"] == 19
    assert summary["mobile"] == {"count": 2, "total": 19}


def test_toggle_returns_patch_not_grid():
    data = client.post("/seats/H-1/toggle").json()

    assert "grid" not in data
    assert data["patch"]["selected"] is True

    data = client.post("/seats/H-1/toggle").json()
    assert data["patch"]["selected"] is False
    assert data["summary"]["count"] == 0


def test_occupied_seat_cannot_be_selected(session):
    client.post("/seats/B-1/toggle")

    response = client.post("/seats/A-5/toggle")

    assert response.status_code == 409
    assert "occupied" in response.json()["detail"]
    assert session.selection.codes() == ["B-1"]


def test_every_occupied_seat_is_rejected(session):
    for code in OCCUPIED:
        assert client.post(f"/seats/{code}/toggle").status_code == 409
    assert len(session.selection) == 0


def test_unknown_seat():
    response = client.post("/seats/Z-99/toggle")
    assert response.status_code == 404


def test_sector_change_keeps_selection():
    client.post("/seats/B-1/toggle")

    response = client.post("/sectors/right")

    assert response.status_code == 200
    data = response.json()
    assert data["rebuilt"] is True
    assert "B-1" not in visible_codes(data["grid"])
    assert {seat["col"] for row in data["grid"]["rows"] for seat in row["seats"]} == {9, 10, 11, 12}
    assert data["summary"]["count"] == 1
    assert data["summary"]["total"] == 8


def test_sector_grid_marks_existing_selection():
    client.post("/seats/E-6/toggle")

    grid = client.post("/sectors/center").json()["grid"]

    assert find_rendered(grid, "E-6")["selected"] is True
    assert find_rendered(grid, "E-6")["state"] == "selected"


def test_same_sector_does_not_rebuild():
    client.post("/sectors/left")

    data = client.post("/sectors/left").json()

    assert data["rebuilt"] is False
    assert data["grid"] is None


def test_unknown_sector_is_rejected(session):
    response = client.post("/sectors/balcony")

    assert response.status_code == 400
    assert session.sector == "all"


def test_clear_resets_selection():
    client.post("/seats/G-1/toggle")
    client.post("/seats/G-2/toggle")

    data = client.post("/seats/clear").json()

    assert data["patches"] == [
        {"code": "G-1", "selected": False},
        {"code": "G-2", "selected": False},
    ]
    assert data["summary"]["count"] == 0
    assert data["summary"]["clear_disabled"] is True
    assert data["summary"]["confirm_disabled"] is True
    assert data["summary"]["mobile_confirm_disabled"] is True


def test_layout_modes():
    assert client.get("/layout", params={"width": 540}).json()["mode"] == "mobile"
    assert client.get("/layout", params={"width": 541}).json()["mode"] == "tablet"
    assert client.get("/layout", params={"width": 900}).json()["mode"] == "tablet"

    desktop = client.get("/layout", params={"width": 1280}).json()
    assert desktop["mode"] == "desktop"
    assert desktop["label"].startswith("Desktop layout")
    assert desktop["hint"].startswith("Click seats to select.")


def test_layout_requires_width():
    assert client.get("/layout").status_code == 422
