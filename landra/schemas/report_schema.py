from pydantic import BaseModel, Field
from typing import List

from landra.enums.lease_status import LeaseStatus
from .money import Money


class LeaseStatusStats(BaseModel):
    status: LeaseStatus
    count: int = 0
    # sum of monthly rent across leases in this status, not collected revenue
    total_revenue: Money


class LeaseAnalyticsResponse(BaseModel):
    """Response model for the owner dashboard"""

    lease_stats_by_status: List[LeaseStatusStats] = []
    total_monthly_revenue: Money
    occupancy_rate: float = Field(ge=0, le=100)
    total_units: int = 0
    occupied_units: int = 0
