from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from typing import Optional
from datetime import datetime

from .validators import reject_nulls


class EmergencyContact(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    relationship: str = Field(min_length=1)


class TenantBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=50)
    emergency_contact: Optional[EmergencyContact] = None


class TenantCreate(TenantBase):
    property_id: int


class TenantUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=1, max_length=50)
    emergency_contact: Optional[EmergencyContact] = None

    @model_validator(mode="after")
    def check_required(self):
        reject_nulls(self, ("first_name", "last_name", "email", "phone"))
        return self


class TenantMinimumResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str

    model_config = ConfigDict(from_attributes=True)


class TenantResponse(TenantMinimumResponse):
    property_id: int
    emergency_contact: Optional[EmergencyContact] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TenantListItem(TenantResponse):
    property_name: str
    active_lease_count: int = 0
