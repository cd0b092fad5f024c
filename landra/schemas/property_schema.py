from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

from .money import Money
from .validators import reject_nulls


class UnitBase(BaseModel):
    unit_number: str = Field(min_length=1, max_length=50)
    monthly_rent: Money
    deposit_required: Money
    advance_required: Money
    size_sqm: Optional[Money] = None
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: int = Field(default=0, ge=0)
    images: Optional[List[str]] = None


class UnitCreate(UnitBase):
    pass


class UnitUpdate(BaseModel):
    unit_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    monthly_rent: Optional[Money] = None
    deposit_required: Optional[Money] = None
    advance_required: Optional[Money] = None
    size_sqm: Optional[Money] = None
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    images: Optional[List[str]] = None

    @model_validator(mode="after")
    def check_required(self):
        reject_nulls(
            self, ("unit_number", "monthly_rent", "deposit_required", "advance_required")
        )
        return self


class PropertyBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1)
    description: Optional[str] = None
    total_units: Optional[int] = Field(default=None, ge=0)
    amenities: Optional[List[str]] = None
    rules: Optional[str] = None


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    address: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    total_units: Optional[int] = Field(default=None, ge=0)
    amenities: Optional[List[str]] = None
    rules: Optional[str] = None

    @model_validator(mode="after")
    def check_required(self):
        reject_nulls(self, ("name", "address"))
        return self
