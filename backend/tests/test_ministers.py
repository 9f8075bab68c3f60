# tests/test_ministers.py
from datetime import datetime

import pytest
from sqlalchemy import func, select

from conftest import minister_payload
from ministry_admin.models import (
    Minister,
    MinisterChild,
    MinisterMinistryExperience,
    MinisterMinistrySkill,
    MinistryRank,
    MinistrySkill,
)
from ministry_admin.schemas.minister import MinisterCreate
from ministry_admin.services import ministers as svc


def _make_rank(client, name="Elder"):
    r = client.post("/api/ministry-ranks", json={"name": name})
    assert r.status_code == 201, r.text
    return r.json()["data"]


def _make_skill(client, name="Preaching"):
    r = client.post("/api/ministry-skills", json={"name": name, "description": "Sermons"})
    assert r.status_code == 201, r.text
    return r.json()["data"]


def _full_payload(church_id, rank_id, skill_id):
    return minister_payload(
        church_id,
        children=[
            {"name": "Ana Santos", "placeOfBirth": "Cebu City", "dateOfBirth": "2005-06-01", "gender": "female"},
            {"name": "Ben Santos", "placeOfBirth": "Cebu City", "dateOfBirth": "2008-09-12", "gender": "male"},
        ],
        emergencyContacts=[
            {"name": "Maria Santos", "relationship": "Spouse", "address": "12 Bonifacio St", "contactNumber": "0917"},
        ],
        ministryExperiences=[
            {"ministryRankId": rank_id, "fromYear": "2001", "toYear": "2010", "description": "Youth pastor"},
        ],
        ministrySkills=[{"ministrySkillId": skill_id}],
        ministryRecords=[{"churchLocationId": church_id, "fromYear": "2011", "toYear": ""}],
        seminarsConferences=[{"title": "Leadership Summit", "year": "2019", "numberOfHours": 16}],
    )


def _count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_create_minister_with_collections(client, make_church):
    church = make_church()
    rank = _make_rank(client)
    skill = _make_skill(client)

    r = client.post("/api/ministers", json=_full_payload(church["id"], rank["id"], skill["id"]))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["message"] == "Minister created successfully"
    data = body["data"]
    assert data["firstName"] == "Pedro"
    assert data["civilStatus"] == "married"
    assert len(data["children"]) == 2
    assert len(data["emergencyContacts"]) == 1
    assert data["ministryExperiences"][0]["ministryRankId"] == rank["id"]
    assert data["ministrySkills"][0]["ministrySkillId"] == skill["id"]
    assert data["ministryRecords"][0]["toYear"] is None
    assert data["seminarsConferences"][0]["numberOfHours"] == 16
    assert data["caseReports"] == []
    for row in data["children"]:
        assert row["ministerId"] == data["id"]

    r = client.get(f"/api/ministers/{data['id']}/details")
    assert r.status_code == 200, r.text
    assert r.json()["data"] == data


def test_minister_bad_reference_rejects_whole_payload(client, make_church, db_session):
    church = make_church()
    skill = _make_skill(client)

    r = client.post("/api/ministers", json=_full_payload(church["id"], 777, skill["id"]))
    assert r.status_code == 400, r.text
    body = r.json()
    assert body["error"] == "Invalid reference"
    assert body["details"] == [
        {"field": "ministryExperiences.0.ministryRankId", "message": "Ministry rank 777 does not exist"},
    ]
    assert _count(db_session, Minister) == 0
    assert _count(db_session, MinisterChild) == 0


def test_nested_validation_paths(client, make_church):
    church = make_church()
    payload = minister_payload(
        church["id"],
        children=[{"name": "Ana", "placeOfBirth": "Cebu", "dateOfBirth": "2005-06-01", "gender": "unknown"}],
    )
    r = client.post("/api/ministers", json=payload)
    assert r.status_code == 400, r.text
    assert [d["field"] for d in r.json()["details"]] == ["children.0.gender"]


def test_create_rolls_back_when_collection_insert_fails(db_session, monkeypatch):
    from ministry_admin.models import Church

    church = Church(name="Rollback Chapel")
    rank = MinistryRank(name="Deacon")
    skill = MinistrySkill(name="Music")
    db_session.add_all([church, rank, skill])
    db_session.commit()

    real_insert = svc._insert_collection

    def _failing_insert(db, coll, minister_id, items):
        if coll.key == "ministry_skills":
            raise RuntimeError("disk full")
        return real_insert(db, coll, minister_id, items)

    monkeypatch.setattr(svc, "_insert_collection", _failing_insert)
    payload = MinisterCreate.model_validate(_full_payload(church.id, rank.id, skill.id))

    with pytest.raises(RuntimeError):
        svc.create_minister(db_session, payload)

    assert _count(db_session, Minister) == 0
    assert _count(db_session, MinisterChild) == 0
    assert _count(db_session, MinisterMinistryExperience) == 0
    assert _count(db_session, MinisterMinistrySkill) == 0


def test_minister_list_and_search(client, make_church):
    church = make_church(name="Cornerstone")
    client.post("/api/ministers", json=minister_payload(church["id"]))
    client.post("/api/ministers", json=minister_payload(church["id"], firstName="Lorna", nickname="Ning"))

    r = client.get("/api/ministers", params={"sortBy": "firstName", "sortOrder": "asc"})
    assert r.status_code == 200, r.text
    assert [m["firstName"] for m in r.json()["data"]] == ["Lorna", "Pedro"]

    r = client.get("/api/ministers/search", params={"q": "ning"})
    assert r.status_code == 200, r.text
    hits = r.json()["data"]
    assert [h["firstName"] for h in hits] == ["Lorna"]
    assert hits[0]["churchName"] == "Cornerstone"


def test_minister_update_replaces_scalars(client, make_church):
    church = make_church()
    r = client.post("/api/ministers", json=minister_payload(church["id"]))
    created = r.json()["data"]

    r = client.put(f"/api/ministers/{created['id']}", json=minister_payload(church["id"], civilStatus="widowed"))
    assert r.status_code == 200, r.text
    updated = r.json()["data"]
    assert updated["civilStatus"] == "widowed"
    assert updated["createdAt"] == created["createdAt"]
    assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(created["updatedAt"])

    r = client.put("/api/ministers/9999", json=minister_payload(church["id"]))
    assert r.status_code == 404


def test_collection_endpoints(client, make_church):
    church = make_church()
    created = client.post("/api/ministers", json=minister_payload(church["id"])).json()["data"]
    mid = created["id"]

    r = client.post(f"/api/ministers/{mid}/awards-recognitions", json={"year": "2020", "description": "Faithful service"})
    assert r.status_code == 201, r.text
    award = r.json()["data"]
    assert award["ministerId"] == mid

    r = client.get(f"/api/ministers/{mid}")
    assert datetime.fromisoformat(r.json()["data"]["updatedAt"]) > datetime.fromisoformat(created["updatedAt"])

    r = client.put(
        f"/api/ministers/{mid}/awards-recognitions/{award['id']}",
        json={"year": "2021", "description": "Faithful service, renewed"},
    )
    assert r.status_code == 200, r.text
    assert r.json()["data"]["year"] == "2021"

    r = client.get(f"/api/ministers/{mid}/awards-recognitions")
    assert r.status_code == 200, r.text
    assert r.json()["count"] == 1

    r = client.post(f"/api/ministers/{mid}/awards-recognitions", json={"year": "20", "description": "x"})
    assert r.status_code == 400, r.text
    assert r.json()["details"][0]["field"] == "year"

    r = client.delete(f"/api/ministers/{mid}/awards-recognitions/{award['id']}")
    assert r.status_code == 200, r.text
    assert client.get(f"/api/ministers/{mid}/awards-recognitions").json()["count"] == 0

    r = client.get(f"/api/ministers/{mid}/not-a-collection")
    assert r.status_code == 404


def test_collection_row_needs_existing_minister(client, db_session):
    r = client.post(
        "/api/ministers/9999/children",
        json={"name": "Ana", "placeOfBirth": "Cebu", "dateOfBirth": "2005-06-01", "gender": "female"},
    )
    assert r.status_code == 404, r.text
    assert r.json()["message"] == "Minister 9999 not found"
    assert _count(db_session, MinisterChild) == 0


def test_collection_row_must_belong_to_minister(client, make_church):
    church = make_church()
    a = client.post("/api/ministers", json=minister_payload(church["id"])).json()["data"]
    b = client.post("/api/ministers", json=minister_payload(church["id"], firstName="Other")).json()["data"]
    r = client.post(f"/api/ministers/{a['id']}/case-reports", json={"year": "2022", "description": "Report"})
    row = r.json()["data"]

    r = client.delete(f"/api/ministers/{b['id']}/case-reports/{row['id']}")
    assert r.status_code == 404, r.text


def test_delete_minister_cascades(client, make_church, db_session):
    church = make_church()
    rank = _make_rank(client)
    skill = _make_skill(client)
    created = client.post("/api/ministers", json=_full_payload(church["id"], rank["id"], skill["id"])).json()["data"]

    r = client.delete(f"/api/ministers/{created['id']}")
    assert r.status_code == 200, r.text
    assert r.json()["data"]["name"] == "Pedro Santos"

    assert _count(db_session, Minister) == 0
    assert _count(db_session, MinisterChild) == 0
    assert _count(db_session, MinisterMinistryExperience) == 0

    # nothing references the rank any more
    r = client.delete(f"/api/ministry-ranks/{rank['id']}")
    assert r.status_code == 200, r.text
