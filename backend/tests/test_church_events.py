# tests/test_church_events.py


def _event(**overrides):
    data = {
        "name": "Youth Camp",
        "description": "Three days of worship and fellowship.",
        "place": "Tagaytay Retreat House",
        "datetime": "2025-08-09T09:00:00+08:00",
    }
    data.update(overrides)
    return data


def test_event_crud(client, make_church):
    church = make_church()
    r = client.post("/api/church-events", json=_event(churchId=church["id"]))
    assert r.status_code == 201, r.text
    event = r.json()["data"]
    assert event["datetime"].startswith("2025-08-09T01:00:00")

    r = client.get(f"/api/church-events/{event['id']}")
    assert r.status_code == 200, r.text
    assert r.json()["data"]["churchId"] == church["id"]

    r = client.put(f"/api/church-events/{event['id']}", json=_event(name="Youth Camp 2025"))
    assert r.status_code == 200, r.text
    assert r.json()["data"]["name"] == "Youth Camp 2025"

    r = client.delete(f"/api/church-events/{event['id']}")
    assert r.status_code == 200, r.text


def test_event_requires_offset(client):
    r = client.post("/api/church-events", json=_event(datetime="2025-08-09T09:00:00"))
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "datetime"


def test_event_unknown_church(client):
    r = client.post("/api/church-events", json=_event(churchId=999))
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "churchId"


def test_event_blocks_church_delete(client, make_church):
    church = make_church()
    client.post("/api/church-events", json=_event(churchId=church["id"]))
    r = client.delete(f"/api/churches/{church['id']}")
    assert r.status_code == 409, r.text
    assert "1 church events still reference this church" in r.json()["message"]
