from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import date, datetime

from landra.enums.lease_status import LeaseStatus
from .money import Money
from .validators import reject_nulls
from .property_response import PropertyMinimumResponse, UnitMinimumResponse
from .tenant_schema import TenantMinimumResponse


class LeaseCreate(BaseModel):
    unit_id: int
    tenant_id: int
    start_date: date
    end_date: date
    monthly_rent: Money
    deposit_paid: Money
    advance_paid: Money
    due_date: int = Field(ge=1, le=31)
    status: LeaseStatus = LeaseStatus.ACTIVE

    @model_validator(mode="after")
    def check_date_order(self):
        if self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self


class LeaseUpdate(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    monthly_rent: Optional[Money] = None
    deposit_paid: Optional[Money] = None
    advance_paid: Optional[Money] = None
    due_date: Optional[int] = Field(default=None, ge=1, le=31)
    status: Optional[LeaseStatus] = None

    @model_validator(mode="after")
    def check_fields(self):
        reject_nulls(self, self.model_fields_set)
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self


class LeaseTerminate(BaseModel):
    termination_date: Optional[date] = None


class LeaseResponse(BaseModel):
    id: int
    unit_id: int
    tenant_id: int
    start_date: date
    end_date: date
    monthly_rent: Money
    deposit_paid: Money
    advance_paid: Money
    due_date: int
    status: LeaseStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LeaseListItem(LeaseResponse):
    unit_number: str
    tenant_first_name: str
    tenant_last_name: str
    property_id: int
    property_name: str


class ExpiringLeaseItem(LeaseListItem):
    days_until_expiry: int


class LeaseDetailResponse(LeaseResponse):
    unit: UnitMinimumResponse
    tenant: TenantMinimumResponse
    property: PropertyMinimumResponse


class NextDueDateResponse(BaseModel):
    lease_id: int
    due_date: int
    reference_date: date
    next_due_date: date
