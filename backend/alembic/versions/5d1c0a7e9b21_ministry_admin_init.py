"""ministry admin init

Revision ID: 5d1c0a7e9b21
Revises:
Create Date: 2025-09-02 10:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "5d1c0a7e9b21"
down_revision = None
branch_labels = None
depends_on = None

GENDER = sa.Enum("male", "female", name="gender", native_enum=False, length=20)
CIVIL_STATUS = sa.Enum(
    "single", "married", "widowed", "separated", "divorced",
    name="civil_status", native_enum=False, length=20,
)


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    ]


def _owned(table, *columns):
    """Create a minister-owned collection table."""
    op.create_table(
        table,
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("minister_id", sa.Integer(), sa.ForeignKey("ministers.id"), nullable=False),
        *columns,
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(f"ix_{table}_minister_id", table, ["minister_id"])


def upgrade() -> None:
    op.create_table(
        "churches",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("longitude", sa.String(length=32), nullable=True),
        sa.Column("latitude", sa.String(length=32), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("link", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_churches_id", "churches", ["id"])

    for table in ("ministry_ranks", "ministry_skills"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("description", sa.String(length=500), nullable=True),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
        )
        op.create_index(f"ix_{table}_id", table, ["id"])

    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("church_id", sa.Integer(), sa.ForeignKey("churches.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("profile_picture", sa.Text(), nullable=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("middle_name", sa.String(length=100), nullable=True),
        sa.Column("gender", GENDER, nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=False),
        sa.Column("year_joined", sa.Integer(), nullable=False),
        sa.Column("marital_status", CIVIL_STATUS, nullable=False, server_default="single"),
        sa.Column("ministry_involvement", sa.String(length=1000), nullable=True),
        sa.Column("occupation", sa.String(length=100), nullable=True),
        sa.Column("organization", sa.String(length=100), nullable=True),
        sa.Column("is_lifegroup_leader", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("lifegroup_leader_id", sa.Integer(), sa.ForeignKey("members.id", ondelete="RESTRICT"), nullable=True),
        sa.Column("educational_attainment", sa.String(length=100), nullable=True),
        sa.Column("school", sa.String(length=100), nullable=True),
        sa.Column("degree", sa.String(length=100), nullable=True),
        sa.Column("mobile_number", sa.String(length=50), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("home_address", sa.String(length=500), nullable=True),
        sa.Column("facebook_link", sa.String(length=255), nullable=True),
        sa.Column("x_link", sa.String(length=255), nullable=True),
        sa.Column("instagram_link", sa.String(length=255), nullable=True),
        sa.Column("tiktok_link", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.String(length=1000), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_members_id", "members", ["id"])
    op.create_index("ix_members_church_id", "members", ["church_id"])

    op.create_table(
        "ministers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("church_id", sa.Integer(), sa.ForeignKey("churches.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("middle_name", sa.String(length=100), nullable=True),
        sa.Column("suffix", sa.String(length=20), nullable=True),
        sa.Column("nickname", sa.String(length=100), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("place_of_birth", sa.String(length=500), nullable=False),
        sa.Column("gender", GENDER, nullable=False),
        sa.Column("height_feet", sa.String(length=20), nullable=False),
        sa.Column("weight_kg", sa.String(length=20), nullable=False),
        sa.Column("civil_status", CIVIL_STATUS, nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("telephone", sa.String(length=50), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("present_address", sa.String(length=500), nullable=False),
        sa.Column("permanent_address", sa.String(length=500), nullable=True),
        sa.Column("passport_number", sa.String(length=50), nullable=True),
        sa.Column("sss_number", sa.String(length=50), nullable=True),
        sa.Column("philhealth", sa.String(length=50), nullable=True),
        sa.Column("tin", sa.String(length=50), nullable=True),
        sa.Column("father_name", sa.String(length=100), nullable=False),
        sa.Column("father_province", sa.String(length=100), nullable=False),
        sa.Column("father_birthday", sa.Date(), nullable=False),
        sa.Column("father_occupation", sa.String(length=100), nullable=False),
        sa.Column("mother_name", sa.String(length=100), nullable=False),
        sa.Column("mother_province", sa.String(length=100), nullable=False),
        sa.Column("mother_birthday", sa.Date(), nullable=False),
        sa.Column("mother_occupation", sa.String(length=100), nullable=False),
        sa.Column("spouse_name", sa.String(length=100), nullable=True),
        sa.Column("spouse_province", sa.String(length=100), nullable=True),
        sa.Column("spouse_birthday", sa.Date(), nullable=True),
        sa.Column("spouse_occupation", sa.String(length=100), nullable=True),
        sa.Column("wedding_date", sa.Date(), nullable=True),
        sa.Column("skills", sa.String(length=1000), nullable=True),
        sa.Column("hobbies", sa.String(length=1000), nullable=True),
        sa.Column("sports", sa.String(length=1000), nullable=True),
        sa.Column("other_religious_secular_training", sa.String(length=1000), nullable=True),
        sa.Column("certified_by", sa.String(length=100), nullable=True),
        sa.Column("signature_image_url", sa.Text(), nullable=True),
        sa.Column("signature_by_certified_image_url", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ministers_id", "ministers", ["id"])
    op.create_index("ix_ministers_church_id", "ministers", ["church_id"])

    _owned(
        "minister_children",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("place_of_birth", sa.String(length=500), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("gender", GENDER, nullable=False),
    )
    _owned(
        "minister_emergency_contacts",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("relationship", sa.String(length=100), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("contact_number", sa.String(length=50), nullable=False),
    )
    _owned(
        "minister_education_backgrounds",
        sa.Column("school_name", sa.String(length=200), nullable=False),
        sa.Column("educational_attainment", sa.String(length=100), nullable=False),
        sa.Column("date_graduated", sa.Date(), nullable=True),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("course", sa.String(length=200), nullable=True),
    )
    _owned(
        "minister_ministry_experiences",
        sa.Column(
            "ministry_rank_id", sa.Integer(),
            sa.ForeignKey("ministry_ranks.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("from_year", sa.String(length=4), nullable=False),
        sa.Column("to_year", sa.String(length=4), nullable=True),
    )
    op.create_index(
        "ix_minister_ministry_experiences_ministry_rank_id",
        "minister_ministry_experiences", ["ministry_rank_id"],
    )
    _owned(
        "minister_ministry_skills",
        sa.Column(
            "ministry_skill_id", sa.Integer(),
            sa.ForeignKey("ministry_skills.id", ondelete="RESTRICT"), nullable=False,
        ),
    )
    op.create_index(
        "ix_minister_ministry_skills_ministry_skill_id",
        "minister_ministry_skills", ["ministry_skill_id"],
    )
    _owned(
        "minister_ministry_records",
        sa.Column(
            "church_location_id", sa.Integer(),
            sa.ForeignKey("churches.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column("from_year", sa.String(length=4), nullable=False),
        sa.Column("to_year", sa.String(length=4), nullable=True),
        sa.Column("contribution", sa.String(length=1000), nullable=True),
    )
    op.create_index(
        "ix_minister_ministry_records_church_location_id",
        "minister_ministry_records", ["church_location_id"],
    )
    _owned(
        "minister_awards_recognitions",
        sa.Column("year", sa.String(length=4), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False),
    )
    _owned(
        "minister_employment_records",
        sa.Column("company_name", sa.String(length=200), nullable=False),
        sa.Column("position", sa.String(length=100), nullable=False),
        sa.Column("from_year", sa.String(length=4), nullable=False),
        sa.Column("to_year", sa.String(length=4), nullable=True),
    )
    _owned(
        "minister_seminars_conferences",
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("place", sa.String(length=500), nullable=True),
        sa.Column("year", sa.String(length=4), nullable=False),
        sa.Column("number_of_hours", sa.Integer(), nullable=False),
    )
    _owned(
        "minister_case_reports",
        sa.Column("year", sa.String(length=4), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False),
    )

    op.create_table(
        "church_events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False),
        sa.Column("place", sa.String(length=500), nullable=False),
        sa.Column("datetime", sa.DateTime(timezone=True), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("church_id", sa.Integer(), sa.ForeignKey("churches.id", ondelete="RESTRICT"), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_church_events_id", "church_events", ["id"])
    op.create_index("ix_church_events_datetime", "church_events", ["datetime"])
    op.create_index("ix_church_events_church_id", "church_events", ["church_id"])

    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False),
        sa.Column("prayer_request", sa.String(length=1000), nullable=True),
        sa.Column("support_email", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_contact_submissions_id", "contact_submissions", ["id"])


def downgrade() -> None:
    op.drop_table("contact_submissions")
    op.drop_table("church_events")
    for table in (
        "minister_case_reports",
        "minister_seminars_conferences",
        "minister_employment_records",
        "minister_awards_recognitions",
        "minister_ministry_records",
        "minister_ministry_skills",
        "minister_ministry_experiences",
        "minister_education_backgrounds",
        "minister_emergency_contacts",
        "minister_children",
    ):
        op.drop_table(table)
    op.drop_table("ministers")
    op.drop_table("members")
    op.drop_table("ministry_skills")
    op.drop_table("ministry_ranks")
    op.drop_table("churches")
