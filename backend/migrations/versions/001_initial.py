"""initial schema : genius factor v1

Revision ID: 001_initial
Create Date: 19/10/2026
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = '001_initial'
down_revision = None

# Valeurs des Enums
USER_ROLE = ('employee', 'hr', 'admin')
NOTIFICATION_STATUS = ('unread', 'read')

def upgrade() -> None:
    # ── 1. CREATION MANUELLE DES TYPES ENUM (SÉCURISÉE) ──
    enums = {
        "userrole": USER_ROLE,
        "notificationstatus": NOTIFICATION_STATUS,
    }

    for name, values in enums.items():
        vals_str = ", ".join([f"'{v}'" for v in values])
        op.execute(f"""
            DO $$ 
            BEGIN 
                IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = '{name}') THEN
                    CREATE TYPE {name} AS ENUM ({vals_str});
                END IF;
            END $$;
        """)

    # ── 2. CREATION DES TABLES ──
    # postgresql.ENUM(..., create_type=False) : types déjà créés ci-dessus

    op.create_table("users",
        sa.Column("id", sa.String, primary_key=True),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("name", sa.String, nullable=False),
        sa.Column("role", postgresql.ENUM(*USER_ROLE, name='userrole', create_type=False), nullable=False, server_default="employee"),
        sa.Column("hr_id", sa.String, sa.ForeignKey("users.id"), nullable=True),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("paid", sa.Boolean, server_default=sa.false()),
        sa.Column("department", sa.JSON, nullable=True),
        sa.Column("position", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"])
    op.create_index("ix_users_hr_id", "users", ["hr_id"])

    op.create_table("employee_profiles",
        sa.Column("user_id", sa.String, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("skills", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table("assessment_progress",
        sa.Column("user_id", sa.String, sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("answers", sa.JSON, nullable=False),
        sa.Column("current_part_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("current_question_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("time_spent_seconds", sa.Integer, nullable=False, server_default="0"),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table("individual_employee_reports",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.String, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("hr_id", sa.String, nullable=True),
        sa.Column("departement", sa.String, nullable=True),
        sa.Column("executive_summary", sa.Text, nullable=True),
        sa.Column("genius_factor_score", sa.Float, nullable=True),
        sa.Column("genius_factor_profile", sa.JSON, nullable=True),
        sa.Column("current_role_alignment_analysis", sa.JSON, nullable=True),
        sa.Column("internal_career_opportunities", sa.JSON, nullable=True),
        sa.Column("retention_and_mobility_strategies", sa.JSON, nullable=True),
        sa.Column("development_action_plan", sa.JSON, nullable=True),
        sa.Column("personalized_resources", sa.JSON, nullable=True),
        sa.Column("data_sources_and_methodology", sa.JSON, nullable=True),
        sa.Column("risk_analysis", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_individual_employee_reports_user_id", "individual_employee_reports", ["user_id"])
    op.create_index("ix_individual_employee_reports_hr_id", "individual_employee_reports", ["hr_id"])
    op.create_index("ix_individual_employee_reports_created_at", "individual_employee_reports", ["created_at"])

    op.create_table("notifications",
        sa.Column("id", sa.String, primary_key=True),
        sa.Column("hr_id", sa.String, nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("employee_name", sa.String, nullable=True),
        sa.Column("employee_email", sa.String, nullable=True),
        sa.Column("type", sa.String, nullable=True),
        sa.Column("data", sa.JSON, nullable=True),
        sa.Column("status", postgresql.ENUM(*NOTIFICATION_STATUS, name='notificationstatus', create_type=False), nullable=False, server_default="unread"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_notifications_hr_id", "notifications", ["hr_id"])
    op.create_index("ix_notifications_status", "notifications", ["status"])
    op.create_index("ix_notifications_created_at", "notifications", ["created_at"])

def downgrade() -> None:
    tables = [
        "notifications", "individual_employee_reports",
        "assessment_progress", "employee_profiles", "users",
    ]
    for table in tables:
        op.drop_table(table)

    for e in ["userrole", "notificationstatus"]:
        op.execute(f"DROP TYPE IF EXISTS {e}")
