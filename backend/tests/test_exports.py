# tests/test_exports.py
import io
import re
from datetime import date

from openpyxl import load_workbook

from ministry_admin.services import exports

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _sheet(content):
    return load_workbook(io.BytesIO(content)).active


def test_member_export(client, make_church, make_member):
    church = make_church(name="Victory Ortigas")
    make_member(church["id"], middleName="Reyes", notes="Joined via outreach")

    r = client.get("/api/members/export")
    assert r.status_code == 200, r.text
    assert r.headers["content-type"] == XLSX
    assert re.fullmatch(
        r'attachment; filename="members-\d{4}-\d{2}-\d{2}\.xlsx"', r.headers["content-disposition"]
    )

    ws = _sheet(r.content)
    assert ws["A1"].value == "ID"
    assert ws["A1"].font.bold
    assert ws.freeze_panes == "A2"
    headers = [c.value for c in ws[1]]
    row = dict(zip(headers, [c.value for c in ws[2]]))
    assert row["Church"] == "Victory Ortigas"
    assert row["Full Name"] == "Juan Reyes Dela Cruz"
    assert row["Gender"] == "male"
    assert row["Notes"] == "Joined via outreach"


def test_export_drops_control_characters(client, make_church, make_member):
    church = make_church()
    make_member(church["id"], notes="line one\x07bell from pasted text")

    r = client.get("/api/members/export")
    assert r.status_code == 200, r.text
    ws = _sheet(r.content)
    headers = [c.value for c in ws[1]]
    row = dict(zip(headers, [c.value for c in ws[2]]))
    assert row["Notes"] == "line onebell from pasted text"


def test_church_scoped_export_filename(client, make_church):
    church = make_church()
    r = client.get(f"/api/churches/{church['id']}/ministers/export")
    assert r.status_code == 200, r.text
    assert f'filename="church-{church["id"]}-ministers-' in r.headers["content-disposition"]
    ws = _sheet(r.content)
    assert ws.max_row == 1


def test_reference_and_contact_exports(client):
    client.post("/api/ministry-skills", json={"name": "Media"})
    r = client.get("/api/ministry-skills/export")
    assert r.status_code == 200, r.text
    ws = _sheet(r.content)
    assert ws["B2"].value == "Media"

    r = client.get("/api/contact/export")
    assert r.status_code == 200, r.text
    assert 'filename="contact-' in r.headers["content-disposition"]


def test_truncate_text():
    assert exports.truncate_text(None) == ""
    assert exports.truncate_text("short") == "short"
    assert exports.truncate_text("a\x00b\x1fc") == "abc"
    cut = exports.truncate_text("x" * 300)
    assert len(cut) == 255
    assert cut.endswith("...")
    assert len(exports.truncate_text("a" * 40000, limit=100000)) == exports.EXCEL_CELL_LIMIT


def test_export_filename():
    assert exports.export_filename("churches", date(2025, 1, 31)) == "churches-2025-01-31.xlsx"
