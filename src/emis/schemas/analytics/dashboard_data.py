# schemas/analytics/dashboard_data.py
from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..base import EMISModel, UUIDStr


class DashboardData(EMISModel):
    """Envelope shared by dashboard payloads: scope plus freshness."""
    school_id: Optional[UUIDStr] = None
    academic_year_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    last_updated: str
