# tests/conftest.py
import os

# Must be set before ministry_admin.db is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_ENFORCE"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import ministry_admin.models  # noqa: E402,F401
from ministry_admin.db import Base, get_db, make_engine  # noqa: E402
from ministry_admin.main import app  # noqa: E402


@pytest.fixture()
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---- Payload builders -----------------------------------------------------------

def church_payload(**overrides):
    data = {
        "name": "Grace Fellowship",
        "address": "45 Mabini Street, Pasig City",
        "email": "grace@example.org",
        "latitude": "14.5764",
        "longitude": "121.0851",
        "description": "Sunday services at 9 AM and 5 PM.",
    }
    data.update(overrides)
    return data


def member_payload(church_id, **overrides):
    data = {
        "churchId": church_id,
        "firstName": "Juan",
        "lastName": "Dela Cruz",
        "gender": "male",
        "birthdate": "1990-05-01",
        "yearJoined": 2015,
        "email": "juan@example.com",
        "occupation": "Teacher",
    }
    data.update(overrides)
    return data


def minister_payload(church_id, **overrides):
    data = {
        "churchId": church_id,
        "firstName": "Pedro",
        "lastName": "Santos",
        "dateOfBirth": "1975-02-14",
        "placeOfBirth": "Cebu City",
        "gender": "male",
        "heightFeet": "5.7",
        "weightKg": "70",
        "civilStatus": "married",
        "email": "pedro@example.com",
        "address": "12 Bonifacio St, Cebu City",
        "presentAddress": "12 Bonifacio St, Cebu City",
        "fatherName": "Jose Santos",
        "fatherProvince": "Cebu",
        "fatherBirthday": "1950-01-01",
        "fatherOccupation": "Farmer",
        "motherName": "Maria Santos",
        "motherProvince": "Cebu",
        "motherBirthday": "1952-03-03",
        "motherOccupation": "Teacher",
    }
    data.update(overrides)
    return data


@pytest.fixture()
def make_church(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        overrides.setdefault("name", f"Church {counter['n']}")
        r = client.post("/api/churches", json=church_payload(**overrides))
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make


@pytest.fixture()
def make_member(client):
    def _make(church_id, **overrides):
        r = client.post("/api/members", json=member_payload(church_id, **overrides))
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make
