# tests/test_churches.py
from conftest import church_payload


def test_church_crud_roundtrip(client):
    r = client.post("/api/churches", json=church_payload())
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Church created successfully"
    church = body["data"]
    assert church["name"] == "Grace Fellowship"
    assert church["latitude"] == "14.5764"

    r = client.get(f"/api/churches/{church['id']}")
    assert r.status_code == 200, r.text
    assert r.json()["data"]["email"] == "grace@example.org"

    r = client.put(f"/api/churches/{church['id']}", json=church_payload(name="Grace Fellowship Pasig"))
    assert r.status_code == 200, r.text
    assert r.json()["data"]["name"] == "Grace Fellowship Pasig"

    r = client.delete(f"/api/churches/{church['id']}")
    assert r.status_code == 200, r.text
    assert r.json()["data"] == {"id": church["id"], "name": "Grace Fellowship Pasig", "email": "grace@example.org"}

    r = client.get(f"/api/churches/{church['id']}")
    assert r.status_code == 404
    assert r.json()["success"] is False


def test_duplicate_church_name_is_conflict(client, make_church):
    make_church(name="St. Andrew")
    r = client.post("/api/churches", json=church_payload(name="St. Andrew"))
    assert r.status_code == 409, r.text
    body = r.json()
    assert body["success"] is False
    assert body["message"] == "A church with this name already exists."


def test_church_coordinates_are_range_checked(client):
    r = client.post("/api/churches", json=church_payload(latitude="91"))
    assert r.status_code == 400, r.text
    fields = [d["field"] for d in r.json()["details"]]
    assert fields == ["latitude"]


def test_blank_optional_fields_become_null(client):
    r = client.post("/api/churches", json=church_payload(email="", address="  ", link=""))
    assert r.status_code == 201, r.text
    data = r.json()["data"]
    assert data["email"] is None
    assert data["address"] is None
    assert data["link"] is None


def test_delete_blocked_while_members_reference_church(client, make_church, make_member):
    church = make_church()
    make_member(church["id"])

    r = client.delete(f"/api/churches/{church['id']}")
    assert r.status_code == 409, r.text
    body = r.json()
    assert body["error"] == "Cannot delete"
    assert "1 members still reference this church" in body["message"]

    r = client.get(f"/api/churches/{church['id']}")
    assert r.status_code == 200


def test_church_stats_counts_people(client, make_church, make_member):
    church = make_church(name="Bethel")
    make_member(church["id"], email="a@example.com")
    make_member(church["id"], firstName="Ana", email="b@example.com")

    r = client.get(f"/api/churches/{church['id']}/stats")
    assert r.status_code == 200, r.text
    assert r.json()["data"] == {
        "churchId": church["id"],
        "churchName": "Bethel",
        "memberCount": 2,
        "ministerCount": 0,
        "total": 2,
    }


def test_church_scoped_member_list(client, make_church, make_member):
    a = make_church()
    b = make_church()
    make_member(a["id"])
    make_member(b["id"], firstName="Other")

    r = client.get(f"/api/churches/{a['id']}/members")
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert len(data) == 1
    assert data[0]["churchId"] == a["id"]

    r = client.get("/api/churches/9999/members")
    assert r.status_code == 404
