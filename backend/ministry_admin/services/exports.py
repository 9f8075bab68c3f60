# ministry_admin/services/exports.py
"""
Spreadsheet exports.

Each export is a list of ``Column`` specs applied to row objects; the builder
writes a bold shaded header, one row per record, and sizes each column to its
content. Text cells are cut to the column's ceiling (and never past Excel's
per-cell limit) so a long note cannot corrupt the sheet.
"""
from __future__ import annotations

import enum
import io
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from ministry_admin.db import utcnow

EXCEL_CELL_LIMIT = 32767
DEFAULT_TEXT_LIMIT = 255
MAX_COLUMN_WIDTH = 50

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def truncate_text(value: Optional[str], limit: int = DEFAULT_TEXT_LIMIT) -> str:
    if not value:
        return ""
    # control characters are not valid in worksheet XML
    value = ILLEGAL_CHARACTERS_RE.sub("", value)
    limit = min(limit, EXCEL_CELL_LIMIT)
    if len(value) <= limit:
        return value
    return value[: max(limit - 3, 0)] + "..."


@dataclass(frozen=True)
class Column:
    header: str
    get: Callable[[Any], Any]
    limit: int = DEFAULT_TEXT_LIMIT


def attr(name: str) -> Callable[[Any], Any]:
    return lambda row: getattr(row, name, None)


def _cell_value(raw: Any, limit: int) -> Any:
    if raw is None:
        return ""
    if isinstance(raw, enum.Enum):
        raw = raw.value
    if isinstance(raw, datetime):
        # openpyxl rejects tz-aware datetimes; cells hold UTC
        if raw.tzinfo is not None:
            raw = raw.astimezone(timezone.utc).replace(tzinfo=None)
        return raw
    if isinstance(raw, (date, bool, int, float)):
        return raw
    return truncate_text(str(raw), limit)


def build_workbook(title: str, columns: Sequence[Column], rows: Iterable[Any]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = title[:31]  # sheet title limit

    header_fill = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")
    header_font = Font(bold=True)
    widths: List[int] = []
    for col_num, col in enumerate(columns, 1):
        cell = ws.cell(row=1, column=col_num, value=col.header)
        cell.fill = header_fill
        cell.font = header_font
        widths.append(len(col.header))

    for row_num, row in enumerate(rows, 2):
        for col_num, col in enumerate(columns, 1):
            value = _cell_value(col.get(row), col.limit)
            ws.cell(row=row_num, column=col_num, value=value)
            widths[col_num - 1] = max(widths[col_num - 1], len(str(value)))

    for col_num, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(col_num)].width = min(width + 2, MAX_COLUMN_WIDTH)
    ws.freeze_panes = "A2"

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def export_filename(entity: str, today: Optional[date] = None) -> str:
    day = today or utcnow().date()
    return f"{entity}-{day.isoformat()}.xlsx"


# ---- Column sets ----------------------------------------------------------------

def _full_name(row: Any) -> str:
    parts = [row.first_name, row.middle_name, row.last_name]
    return " ".join(p for p in parts if p)


CHURCH_COLUMNS = [
    Column("ID", attr("id")),
    Column("Name", attr("name"), 100),
    Column("Address", attr("address"), 500),
    Column("Email", attr("email")),
    Column("Latitude", attr("latitude")),
    Column("Longitude", attr("longitude")),
    Column("Description", attr("description"), 1000),
    Column("Link", attr("link")),
    Column("Created", attr("created_at")),
    Column("Last Updated", attr("updated_at")),
]

# Person rows arrive as (record, church_name) pairs
MEMBER_COLUMNS = [
    Column("ID", lambda r: r[0].id),
    Column("Church", lambda r: r[1] or "Unknown", 100),
    Column("Full Name", lambda r: _full_name(r[0])),
    Column("First Name", lambda r: r[0].first_name, 100),
    Column("Middle Name", lambda r: r[0].middle_name, 100),
    Column("Last Name", lambda r: r[0].last_name, 100),
    Column("Gender", lambda r: r[0].gender),
    Column("Birthdate", lambda r: r[0].birthdate),
    Column("Year Joined", lambda r: r[0].year_joined),
    Column("Marital Status", lambda r: r[0].marital_status),
    Column("Ministry Involvement", lambda r: r[0].ministry_involvement, 1000),
    Column("Occupation", lambda r: r[0].occupation, 100),
    Column("Organization", lambda r: r[0].organization, 100),
    Column("Educational Attainment", lambda r: r[0].educational_attainment, 100),
    Column("School", lambda r: r[0].school, 100),
    Column("Degree", lambda r: r[0].degree, 100),
    Column("Mobile Number", lambda r: r[0].mobile_number, 50),
    Column("Email", lambda r: r[0].email),
    Column("Home Address", lambda r: r[0].home_address, 500),
    Column("Facebook Link", lambda r: r[0].facebook_link),
    Column("X Link", lambda r: r[0].x_link),
    Column("Instagram Link", lambda r: r[0].instagram_link),
    Column("TikTok Link", lambda r: r[0].tiktok_link),
    Column("Notes", lambda r: r[0].notes, 1000),
    Column("Active", lambda r: r[0].is_active),
    Column("Registered", lambda r: r[0].created_at),
    Column("Last Updated", lambda r: r[0].updated_at),
]

MINISTER_COLUMNS = [
    Column("ID", lambda r: r[0].id),
    Column("Church", lambda r: r[1] or "Unknown", 100),
    Column("Full Name", lambda r: _full_name(r[0])),
    Column("Suffix", lambda r: r[0].suffix, 20),
    Column("Nickname", lambda r: r[0].nickname, 100),
    Column("Date of Birth", lambda r: r[0].date_of_birth),
    Column("Place of Birth", lambda r: r[0].place_of_birth, 500),
    Column("Gender", lambda r: r[0].gender),
    Column("Civil Status", lambda r: r[0].civil_status),
    Column("Height (ft)", lambda r: r[0].height_feet, 20),
    Column("Weight (kg)", lambda r: r[0].weight_kg, 20),
    Column("Email", lambda r: r[0].email),
    Column("Telephone", lambda r: r[0].telephone, 50),
    Column("Address", lambda r: r[0].address, 500),
    Column("Present Address", lambda r: r[0].present_address, 500),
    Column("Permanent Address", lambda r: r[0].permanent_address, 500),
    Column("Passport No.", lambda r: r[0].passport_number, 50),
    Column("SSS No.", lambda r: r[0].sss_number, 50),
    Column("PhilHealth", lambda r: r[0].philhealth, 50),
    Column("TIN", lambda r: r[0].tin, 50),
    Column("Father", lambda r: r[0].father_name, 100),
    Column("Mother", lambda r: r[0].mother_name, 100),
    Column("Spouse", lambda r: r[0].spouse_name, 100),
    Column("Wedding Date", lambda r: r[0].wedding_date),
    Column("Skills", lambda r: r[0].skills, 1000),
    Column("Hobbies", lambda r: r[0].hobbies, 1000),
    Column("Sports", lambda r: r[0].sports, 1000),
    Column("Other Training", lambda r: r[0].other_religious_secular_training, 1000),
    Column("Certified By", lambda r: r[0].certified_by, 100),
    Column("Active", lambda r: r[0].is_active),
    Column("Registered", lambda r: r[0].created_at),
    Column("Last Updated", lambda r: r[0].updated_at),
]

REFERENCE_COLUMNS = [
    Column("ID", attr("id")),
    Column("Name", attr("name"), 100),
    Column("Description", attr("description"), 500),
    Column("Created", attr("created_at")),
    Column("Last Updated", attr("updated_at")),
]

CONTACT_COLUMNS = [
    Column("ID", attr("id")),
    Column("Name", attr("name"), 100),
    Column("Email", attr("email")),
    Column("Subject", attr("subject"), 200),
    Column("Message", attr("description"), 1000),
    Column("Prayer Request", attr("prayer_request"), 1000),
    Column("Support Email", attr("support_email")),
    Column("Received", attr("created_at")),
]
