from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from landra.enums.payment_method import PaymentMethod
from landra.enums.payment_status import PaymentStatus
from .money import Money


class PaymentCreate(BaseModel):
    lease_id: int
    amount: Money
    payment_method: PaymentMethod
    payment_date: date
    # defaults to the lease's next due date on or after payment_date
    due_date: Optional[date] = None
    reference_number: Optional[str] = Field(default=None, max_length=100)
    status: PaymentStatus = PaymentStatus.PENDING
    notes: Optional[str] = None


class PaymentResponse(BaseModel):
    id: int
    lease_id: int
    amount: Money
    payment_method: PaymentMethod
    payment_date: date
    due_date: date
    reference_number: Optional[str] = None
    status: PaymentStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
