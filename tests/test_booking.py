import json

from fastapi.testclient import TestClient

from seat_selector.config import BOOKING_STORAGE_KEY
from seat_selector.main import app

client = TestClient(app)


def test_open_booking_with_no_seats(store):
    response = client.post("/booking/open", json={"context": "desktop"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please select at least one seat."
    assert client.get("/seats").json()["booking_step"]["open"] is False
    assert store.load_last() is None


def test_confirm_without_open_step(store):
    response = client.post("/booking/confirm", json={"name": "Jane"})

    assert response.status_code == 409
    assert store.load_last() is None


def test_open_and_cancel_booking(session):
    client.post("/seats/D-5/toggle")

    step = client.post("/booking/open", json={"context": "desktop"}).json()
    assert step["open"] is True
    assert step["context"] == "Desktop/Tablet"
    assert step["summary"] == "1 seat(s): D-5 · Total $11"

    cancelled = client.post("/booking/cancel").json()
    assert cancelled["open"] is False
    assert session.selection.codes() == ["D-5"]


def test_open_booking_without_body_defaults_to_desktop():
    client.post("/seats/D-5/toggle")

    step = client.post("/booking/open").json()

    assert step["context"] == "Desktop/Tablet"


def test_confirm_booking(store, session):
    client.post("/seats/D-5/toggle")
    client.post("/booking/open", json={"context": "mobile"})

    response = client.post(
        "/booking/confirm", json={"name": "Jane", "email": "jane@example.com"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["notice"] == "Booking completed (fake)! It has been saved in this browser only."
    assert data["saved"] is True
    assert data["booking"]["seats"] == [{"code": "D-5", "row": "D", "col": 5, "price": 11}]
    assert data["booking"]["total"] == 11
    assert data["booking"]["name"] == "Jane"
    assert data["booking"]["email"] == "jane@example.com"
    assert data["patches"] == [{"code": "D-5", "selected": False}]
    assert data["summary"]["count"] == 0
    assert data["last_booking_info"].startswith("Last booking (")
    assert data["last_booking_info"].endswith("): D-5 · $11")

    assert len(session.selection) == 0
    assert list(store.items) == [BOOKING_STORAGE_KEY]
    assert store.load_last().model_dump() == data["booking"]


def test_second_booking_replaces_first(store):
    client.post("/seats/A-1/toggle")
    client.post("/booking/open")
    client.post("/booking/confirm", json={"name": "First"})

    client.post("/seats/H-12/toggle")
    client.post("/seats/H-11/toggle")
    client.post("/booking/open")
    client.post("/booking/confirm", json={"name": "Second"})

    last = client.get("/booking/last").json()
    assert last["booking"]["name"] == "Second"
    assert [seat["code"] for seat in last["booking"]["seats"]] == ["H-12", "H-11"]
    assert last["booking"]["total"] == 20
    assert len(store.items) == 1


def test_confirm_when_store_fails(session, monkeypatch):
    def broken_write(raw):
        raise OSError("quota exceeded")

    monkeypatch.setattr(session.store, "_write", broken_write)
    client.post("/seats/D-5/toggle")
    client.post("/booking/open")

    response = client.post("/booking/confirm", json={"name": "Jane"})

    assert response.status_code == 200
    assert response.json()["saved"] is False
    assert response.json()["last_booking_info"] == ""
    assert len(session.selection) == 0


def test_last_booking_with_corrupt_data(store):
    store.items[BOOKING_STORAGE_KEY] = "{{{"

    response = client.get("/booking/last")

    assert response.status_code == 200
    assert response.json() == {"booking": None, "info": ""}


def test_unknown_checkout_context_is_rejected():
    client.post("/seats/D-5/toggle")

    response = client.post("/booking/open", json={"context": "kiosk"})

    assert response.status_code == 422
    assert client.get("/seats").json()["booking_step"]["open"] is False


def test_seats_locked_while_booking_step_is_open(store, session):
    client.post("/seats/D-5/toggle")
    step = client.post("/booking/open").json()

    assert client.post("/seats/H-1/toggle").status_code == 409
    assert client.post("/seats/clear").status_code == 409
    assert session.selection.codes() == ["D-5"]

    data = client.post("/booking/confirm", json={"name": "Jane"}).json()
    assert step["summary"] == "1 seat(s): D-5 · Total $11"
    assert [seat["code"] for seat in data["booking"]["seats"]] == ["D-5"]
    assert data["booking"]["total"] == 11


def test_seats_unlocked_after_cancel(session):
    client.post("/seats/D-5/toggle")
    client.post("/booking/open")
    client.post("/booking/cancel")

    assert client.post("/seats/H-1/toggle").status_code == 200
    assert client.post("/seats/clear").status_code == 200
    assert len(session.selection) == 0


def test_stored_booking_with_out_of_range_time(store):
    store.items[BOOKING_STORAGE_KEY] = json.dumps({
        "name": "Jane", "email": "",
        "seats": [{"code": "D-5", "row": "D", "col": 5, "price": 11}],
        "total": 11, "time": 10 ** 18,
    })

    seats_response = client.get("/seats")
    assert seats_response.status_code == 200
    assert seats_response.json()["last_booking_info"] == ""

    last_response = client.get("/booking/last")
    assert last_response.status_code == 200
    assert last_response.json() == {"booking": None, "info": ""}
