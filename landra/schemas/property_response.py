from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from datetime import datetime

from .money import Money
from .image_response import PropertyImageResponse


class UnitMinimumResponse(BaseModel):
    id: int
    unit_number: str
    monthly_rent: Money
    is_available: bool

    model_config = ConfigDict(from_attributes=True)


class PropertyMinimumResponse(BaseModel):
    id: int
    name: str
    address: str

    model_config = ConfigDict(from_attributes=True)


class UnitResponse(BaseModel):
    id: int
    property_id: int
    unit_number: str
    monthly_rent: Money
    deposit_required: Money
    advance_required: Money
    size_sqm: Optional[Money] = None
    bedrooms: Optional[int] = 0
    bathrooms: Optional[int] = 0
    is_available: bool
    images: Optional[List[str]] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PropertyResponse(BaseModel):
    id: int
    owner_id: int
    name: str
    address: str
    description: Optional[str] = None
    total_units: Optional[int] = 0
    amenities: Optional[List[str]] = []
    rules: Optional[str] = None
    images: List[PropertyImageResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PropertyDetailResponse(PropertyResponse):
    units: List[UnitResponse] = []
