"""Add commits table for webhook-ingested pushes

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19 12:00:00.000000

One row per commit SHA. Rows are written only by the push webhook and are
overwritten in full when a SHA is delivered again.
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "1a2b3c4d5e6f"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "commits",
        sa.Column("sha", sa.String(64), nullable=False),
        sa.Column("repository", sa.Text(), nullable=False),
        sa.Column("branch", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("message_short", sa.Text(), nullable=False),
        sa.Column("message_full", sa.Text(), nullable=False),
        sa.Column("commit_url", sa.String(1000), nullable=False),
        sa.Column("pull_request_url", sa.String(1000), nullable=True),
        sa.Column("commit_type", sa.String(20), server_default="other", nullable=False),
        sa.Column("files_changed_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("insertions", sa.Integer(), server_default="0", nullable=False),
        sa.Column("deletions", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_merge_commit", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("committed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("sha"),
    )

    # Reporting filters and the window predicate
    op.create_index("ix_commits_committed_at", "commits", ["committed_at"])
    op.create_index("ix_commits_repository", "commits", ["repository"])
    op.create_index("ix_commits_branch", "commits", ["branch"])
    op.create_index("ix_commits_author", "commits", ["author"])


def downgrade() -> None:
    op.drop_index("ix_commits_author", table_name="commits")
    op.drop_index("ix_commits_branch", table_name="commits")
    op.drop_index("ix_commits_repository", table_name="commits")
    op.drop_index("ix_commits_committed_at", table_name="commits")
    op.drop_table("commits")
