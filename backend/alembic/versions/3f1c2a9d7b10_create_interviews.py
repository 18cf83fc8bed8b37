from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f1c2a9d7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "interviews",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("call_id", sa.String(length=255), nullable=False),
        sa.Column("participant_id", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="0"),
        # free-form string, known values are mapped when reading
        sa.Column("completion_status", sa.String(length=32), nullable=False, server_default="in_progress"),
        sa.Column("transcript", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("extracted_variables", sa.JSON(), nullable=True),
    )
    op.create_index("ix_interviews_call_id", "interviews", ["call_id"], unique=True)
    op.create_index("ix_interviews_created_at", "interviews", ["created_at"], unique=False)


def downgrade():
    op.drop_index("ix_interviews_created_at", table_name="interviews")
    op.drop_index("ix_interviews_call_id", table_name="interviews")
    op.drop_table("interviews")
