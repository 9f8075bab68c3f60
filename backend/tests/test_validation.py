# tests/test_validation.py
import pytest

from ministry_admin.errors import ValidationFailed
from ministry_admin.schemas.ministry_reference import MinistryRankCreate
from ministry_admin.schemas.minister import SeminarConferenceCreate
from ministry_admin.validation import validate_record


def test_valid_record_is_typed():
    rank = validate_record(MinistryRankCreate, {"name": "  Elder  ", "description": ""})
    assert rank.name == "Elder"
    assert rank.description is None


def test_every_failing_field_is_listed_in_order():
    with pytest.raises(ValidationFailed) as exc:
        validate_record(SeminarConferenceCreate, {"title": "", "year": "19", "numberOfHours": -1})
    err = exc.value
    assert err.status_code == 400
    assert [d.field for d in err.details] == ["title", "year", "numberOfHours"]


def test_non_object_body():
    with pytest.raises(ValidationFailed) as exc:
        validate_record(MinistryRankCreate, ["not", "a", "record"])
    assert exc.value.details[0].message == "Request body must be a JSON object"
