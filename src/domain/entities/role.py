"""
Role and Permission Entities

Per-tenant role bundles and the global permission catalog.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel, UniqueConstraint

from .enums import RoleType


class Permission(SQLModel, table=True):
    """Global permission catalog entry, e.g. ``members.invite``"""

    __tablename__ = "permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(max_length=100, unique=True, index=True)
    name: str = Field(max_length=255)
    category: str = Field(max_length=50)
    description: Optional[str] = None


class Role(SQLModel, table=True):
    """
    Role entity - a named permission bundle scoped to a tenant.

    Business Rules:
    - (tenant_id, type) is unique
    - Seeded at club registration, never cascade-deleted while in use
    """

    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    name: str = Field(max_length=100)
    type: RoleType = Field(nullable=False)
    description: Optional[str] = None
    is_system: bool = Field(default=False)

    __table_args__ = (
        UniqueConstraint("tenant_id", "type", name="uq_role_tenant_type"),
    )


class RolePermission(SQLModel, table=True):
    __tablename__ = "role_permissions"

    role_id: UUID = Field(foreign_key="roles.id", primary_key=True, ondelete="CASCADE")
    permission_id: UUID = Field(
        foreign_key="permissions.id", primary_key=True, ondelete="CASCADE"
    )

    __table_args__ = (Index("idx_role_permission_role", "role_id"),)
