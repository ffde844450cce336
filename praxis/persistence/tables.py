"""SQLAlchemy table definitions for Praxis.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# AUTH IDENTITIES TABLE (identity store)
# ============================================================================
auth_identities_table = Table(
    "auth_identities",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column(
        "id",
        UUID,
        ForeignKey("auth_identities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("intra_id", Integer, nullable=True, unique=True),
    Column("login", String(64), nullable=False, unique=True),  # Case-sensitive
    Column("display_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("email", String(255), nullable=True),
    Column("campus", String(255), nullable=True),
    Column("role", String(16), nullable=False, server_default="USER"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('USER', 'ADMIN')", name="account_role_valid"),
)

Index("idx_accounts_email", accounts_table.c.email)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("slug", String(200), nullable=False, unique=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("forty_two_project_id", Integer, nullable=True, unique=True),
    Column("category", String(16), nullable=False, server_default="OTHER"),
    Column("circle", SmallInteger, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "category IN ('NEW_CORE', 'OLD_CORE', 'PISCINE', 'OTHER')",
        name="project_category_valid",
    ),
)

Index("idx_projects_category", projects_table.c.category)
Index("idx_projects_title", projects_table.c.title)

# ============================================================================
# POSTS TABLE (READMEs)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("author_id", "project_id", name="uq_post_author_project"),
)

Index("idx_posts_project_id", posts_table.c.project_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_project_id", comments_table.c.project_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("target_type", String(16), nullable=False),
    Column("target_id", UUID, nullable=False),  # Post or comment, no FK
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_id", name="uq_vote_user_target"),
    CheckConstraint("value IN (-1, 1)", name="vote_value_valid"),
    CheckConstraint("target_type IN ('POST', 'COMMENT')", name="vote_target_type_valid"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
