# schemas/accountability/relationships.py
"""
The accountability triangle.

A relationship ties a client (stakeholder) to a provider, optionally through
the EMIS itself, and carries the five kinds of sub-record that make the
relationship accountable: delegation, financing, performance, information and
enforcement.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..base import EMISModel, ISODate, NonNegativeInt, NonNegativeNumber, Percentage, UUIDStr
from .delegating import Delegation
from .enforcing import EnforcementAction
from .financing import FinancingRelationship
from .informing import InformationDissemination
from .performing import PerformanceAccountability

AccountabilityRelationshipType = Literal[
    "emis_to_providers",
    "clients_to_emis",
    "clients_to_providers",
]


class AccountabilityRelationship(EMISModel):
    relationship_id: UUIDStr
    relationship_type: AccountabilityRelationshipType
    emis_id: Optional[UUIDStr] = None
    client_id: UUIDStr
    provider_id: UUIDStr
    delegations: Optional[list[Delegation]] = None
    financing: Optional[list[FinancingRelationship]] = None
    performance: Optional[list[PerformanceAccountability]] = None
    information: Optional[list[InformationDissemination]] = None
    enforcement: Optional[list[EnforcementAction]] = None
    accountability_score: Optional[Percentage] = None
    last_updated: ISODate


class DelegationCounts(EMISModel):
    total: NonNegativeInt
    active: NonNegativeInt


class FinancingTotals(EMISModel):
    total_amount: NonNegativeNumber
    disbursed_amount: NonNegativeNumber


class PerformanceCounts(EMISModel):
    metrics_tracked: NonNegativeInt
    targets_met: NonNegativeInt


class InformationCounts(EMISModel):
    total_disseminations: NonNegativeInt
    public_access_count: NonNegativeInt


class EnforcementCounts(EMISModel):
    total_actions: NonNegativeInt
    resolved_actions: NonNegativeInt


class AccountabilityAnalytics(EMISModel):
    school_id: Optional[UUIDStr] = None
    period: str = Field(..., min_length=1)
    overall_accountability_score: Percentage
    relationship_scores: dict[str, Percentage]
    delegations: DelegationCounts
    financing: FinancingTotals
    performance: PerformanceCounts
    information: InformationCounts
    enforcement: EnforcementCounts
