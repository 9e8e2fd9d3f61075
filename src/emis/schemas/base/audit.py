# schemas/base/audit.py
from __future__ import annotations

from pydantic import Field

from .common_validators import ISODateTime, NonNegativeInt, UUIDStr
from .model import EMISModel


class AuditFields(EMISModel):
    """Change-tracking fields. ``version`` supports optimistic locking."""
    created_at: ISODateTime
    created_by: UUIDStr
    updated_at: ISODateTime
    updated_by: UUIDStr
    version: NonNegativeInt


class BaseEntity(AuditFields):
    """Tenant-scoped identity plus audit fields; every top-level entity extends this."""
    tenant_id: UUIDStr
    entity_id: UUIDStr
    entity_type: str = Field(..., min_length=1)
