# tests/test_ministry_reference.py
from conftest import minister_payload


def test_rank_crud(client):
    r = client.post("/api/ministry-ranks", json={"name": "Pastor", "description": "Leads a congregation"})
    assert r.status_code == 201, r.text
    rank = r.json()["data"]
    assert r.json()["message"] == "Ministry rank created successfully"

    r = client.put(f"/api/ministry-ranks/{rank['id']}", json={"name": "Senior Pastor", "description": ""})
    assert r.status_code == 200, r.text
    assert r.json()["data"]["name"] == "Senior Pastor"
    assert r.json()["data"]["description"] is None

    r = client.get("/api/ministry-ranks", params={"search": "senior"})
    assert r.status_code == 200, r.text
    assert r.json()["pagination"]["total"] == 1


def test_duplicate_skill_name(client):
    r = client.post("/api/ministry-skills", json={"name": "Worship Leading"})
    assert r.status_code == 201, r.text

    r = client.post("/api/ministry-skills", json={"name": "Worship Leading"})
    assert r.status_code == 409, r.text
    assert r.json()["message"] == "A ministry skill with this name already exists."


def test_rename_into_existing_name_is_conflict(client):
    client.post("/api/ministry-ranks", json={"name": "Elder"})
    other = client.post("/api/ministry-ranks", json={"name": "Deacon"}).json()["data"]

    r = client.put(f"/api/ministry-ranks/{other['id']}", json={"name": "Elder"})
    assert r.status_code == 409, r.text
    assert r.json()["message"] == "A ministry rank with this name already exists."


def test_rank_delete_blocked_by_experience(client, make_church):
    church = make_church()
    rank = client.post("/api/ministry-ranks", json={"name": "Evangelist"}).json()["data"]
    payload = minister_payload(
        church["id"],
        ministryExperiences=[{"ministryRankId": rank["id"], "fromYear": "2015"}],
    )
    r = client.post("/api/ministers", json=payload)
    assert r.status_code == 201, r.text

    r = client.delete(f"/api/ministry-ranks/{rank['id']}")
    assert r.status_code == 409, r.text
    assert "1 ministry experiences still reference this ministry rank" in r.json()["message"]


def test_missing_reference_row(client):
    r = client.get("/api/ministry-skills/55")
    assert r.status_code == 404
    assert r.json()["message"] == "Ministry skill 55 not found"
