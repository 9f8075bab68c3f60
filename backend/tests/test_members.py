# tests/test_members.py
from datetime import date, datetime

from conftest import member_payload


def _ts(value):
    return datetime.fromisoformat(value)


def test_member_pagination(client, make_church, make_member):
    church = make_church()
    for i in range(25):
        make_member(church["id"], firstName=f"Person{i:02d}", email=f"p{i}@example.com")

    r = client.get("/api/members", params={"page": 2, "limit": 10})
    assert r.status_code == 200, r.text
    body = r.json()
    assert len(body["data"]) == 10
    assert body["pagination"] == {
        "page": 2,
        "limit": 10,
        "total": 25,
        "totalPages": 3,
        "hasNext": True,
        "hasPrev": True,
    }
    assert body["sort"] == {"by": "createdAt", "order": "desc"}

    r = client.get("/api/members", params={"page": 3, "limit": 10})
    assert len(r.json()["data"]) == 5
    assert r.json()["pagination"]["hasNext"] is False


def test_member_sort_by_name(client, make_church, make_member):
    church = make_church()
    for name in ("Carla", "Ana", "Bea"):
        make_member(church["id"], firstName=name)

    r = client.get("/api/members", params={"sortBy": "firstName", "sortOrder": "asc"})
    assert r.status_code == 200, r.text
    assert [m["firstName"] for m in r.json()["data"]] == ["Ana", "Bea", "Carla"]


def test_list_rejects_bad_params(client):
    r = client.get("/api/members", params={"limit": 101})
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "limit"

    r = client.get("/api/members", params={"page": 0})
    assert r.status_code == 400, r.text

    r = client.get("/api/members", params={"sortBy": "password"})
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "sortBy"


def test_member_search_matches_occupation(client, make_church, make_member):
    church = make_church()
    make_member(church["id"], firstName="Lito", occupation="Carpenter")
    make_member(church["id"], firstName="Nena", occupation="Nurse")

    r = client.get("/api/members", params={"search": "carpen"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert [m["firstName"] for m in body["data"]] == ["Lito"]
    assert body["search"] == "carpen"


def test_member_search_wildcards_are_literal(client, make_church, make_member):
    church = make_church()
    make_member(church["id"], firstName="Ana", occupation="Baker")
    make_member(church["id"], firstName="Rico", occupation="100% volunteer")

    r = client.get("/api/members", params={"search": "%"})
    assert r.status_code == 200, r.text
    assert [m["firstName"] for m in r.json()["data"]] == ["Rico"]

    r = client.get("/api/members", params={"search": "_"})
    assert r.json()["pagination"]["total"] == 0

    r = client.get("/api/members/search", params={"q": "A%"})
    assert r.status_code == 200, r.text
    assert r.json()["count"] == 0


def test_member_filter_by_active(client, make_church, make_member):
    church = make_church()
    make_member(church["id"], firstName="Active")
    make_member(church["id"], firstName="Gone", isActive=False)

    r = client.get("/api/members", params={"isActive": "false"})
    assert [m["firstName"] for m in r.json()["data"]] == ["Gone"]


def test_member_roundtrip_and_timestamps(client, make_church, make_member):
    church = make_church()
    created = make_member(church["id"], middleName="Reyes", mobileNumber="09171234567")

    r = client.get(f"/api/members/{created['id']}")
    assert r.status_code == 200, r.text
    fetched = r.json()["data"]
    assert fetched == created
    assert fetched["gender"] == "male"
    assert fetched["maritalStatus"] == "single"
    assert fetched["birthdate"] == "1990-05-01"

    payload = member_payload(church["id"], occupation="Engineer")
    r = client.put(f"/api/members/{created['id']}", json=payload)
    assert r.status_code == 200, r.text
    updated = r.json()["data"]
    assert updated["occupation"] == "Engineer"
    assert updated["middleName"] is None
    assert updated["createdAt"] == created["createdAt"]
    assert _ts(updated["updatedAt"]) > _ts(created["updatedAt"])


def test_update_missing_member_is_404_and_changes_nothing(client, make_church, make_member):
    church = make_church()
    make_member(church["id"])

    r = client.put("/api/members/9999", json=member_payload(church["id"]))
    assert r.status_code == 404, r.text
    assert r.json()["message"] == "Member 9999 not found"

    r = client.get("/api/members")
    assert r.json()["pagination"]["total"] == 1


def test_missing_fields_are_reported(client, make_church):
    church = make_church()
    payload = member_payload(church["id"])
    del payload["firstName"]
    payload["yearJoined"] = 1850

    r = client.post("/api/members", json=payload)
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["error"] == "Validation failed"
    fields = [d["field"] for d in body["details"]]
    assert "firstName" in fields
    assert "yearJoined" in fields


def test_update_validates_after_existence(client, make_church, make_member):
    church = make_church()
    member = make_member(church["id"])

    r = client.put(f"/api/members/{member['id']}", json={"firstName": ""})
    assert r.status_code == 400, r.text
    assert r.json()["error"] == "Validation failed"


def test_future_birthdate_rejected(client, make_church):
    church = make_church()
    payload = member_payload(church["id"], birthdate=date(date.today().year + 1, 1, 1).isoformat())
    r = client.post("/api/members", json=payload)
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["message"] == "Birthdate cannot be in the future"


def test_unknown_church_reference(client):
    r = client.post("/api/members", json=member_payload(424242))
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["error"] == "Invalid reference"
    assert body["details"] == [{"field": "churchId", "message": "Church 424242 does not exist"}]


def test_lifegroup_leader_links(client, make_church, make_member):
    church = make_church()
    leader = make_member(church["id"], firstName="Leader", isLifegroupLeader=True)
    follower = make_member(church["id"], firstName="Follower", lifegroupLeaderId=leader["id"])
    assert follower["lifegroupLeaderId"] == leader["id"]

    r = client.put(
        f"/api/members/{leader['id']}",
        json=member_payload(church["id"], lifegroupLeaderId=leader["id"]),
    )
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "lifegroupLeaderId"

    r = client.delete(f"/api/members/{leader['id']}")
    assert r.status_code == 409, r.text
    assert "1 lifegroup members still reference this member" in r.json()["message"]

    r = client.delete(f"/api/members/{follower['id']}")
    assert r.status_code == 200, r.text
    r = client.delete(f"/api/members/{leader['id']}")
    assert r.status_code == 200, r.text


def test_quick_search(client, make_church, make_member):
    church = make_church(name="Victory")
    make_member(church["id"], firstName="Maria", lastName="Clara", middleName="Santos")
    make_member(church["id"], firstName="Jose", lastName="Rizal")

    r = client.get("/api/members/search", params={"q": "maria clara"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["count"] == 1
    assert body["data"][0]["firstName"] == "Maria"
    assert body["data"][0]["churchName"] == "Victory"

    r = client.get("/api/members/search", params={"q": "Rizal, Jose"})
    assert [h["lastName"] for h in r.json()["data"]] == ["Rizal"]

    r = client.get("/api/members/search", params={"q": "m"})
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "q"


def test_recent_members(client, make_church, make_member):
    church = make_church(name="Jesus Is Lord")
    make_member(church["id"], firstName="Newbie")

    r = client.get("/api/members/recent")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["count"] == 1
    assert body["data"][0]["churchName"] == "Jesus Is Lord"
