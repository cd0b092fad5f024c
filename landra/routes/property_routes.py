import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.schemas.property_schema import (
    PropertyCreate,
    PropertyUpdate,
    UnitCreate,
)
from landra.schemas.property_response import (
    PropertyDetailResponse,
    PropertyResponse,
    UnitResponse,
)
from landra.services.errors import LandraError
from landra.services.property_service import PropertyService
from landra.services.unit_service import UnitService
from landra.utils.dependencies import get_current_user
from landra.responses.success import created_response, data_response, empty_response
from landra.responses.error import error_response, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])

property_service = PropertyService()
unit_service = UnitService()


@router.post("", response_model=PropertyResponse, status_code=201)
def create_property(
    property_in: PropertyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        property_obj = property_service.create_property(db, current_user.id, property_in)
        return created_response(PropertyResponse.model_validate(property_obj))
    except Exception:
        db.rollback()
        logger.exception("Failed to create property")
        return internal_server_error("Failed to create property")


@router.get("", response_model=List[PropertyResponse])
def get_properties(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        properties = property_service.get_properties(db, current_user.id, skip, limit)
        return data_response([PropertyResponse.model_validate(p) for p in properties])
    except Exception:
        logger.exception("Failed to fetch properties")
        return internal_server_error("Failed to fetch properties")


@router.get("/{property_id}", response_model=PropertyDetailResponse)
def get_property(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        property_obj = property_service.get_property(db, property_id, current_user.id)
        return data_response(PropertyDetailResponse.model_validate(property_obj))
    except LandraError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch property %s", property_id)
        return internal_server_error("Failed to fetch property")


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: int,
    property_in: PropertyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        property_obj = property_service.update_property(
            db, property_id, current_user.id, property_in
        )
        return data_response(PropertyResponse.model_validate(property_obj))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to update property %s", property_id)
        return internal_server_error("Failed to update property")


@router.delete("/{property_id}")
def delete_property(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        property_service.delete_property(db, property_id, current_user.id)
        return empty_response()
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to delete property %s", property_id)
        return internal_server_error("Failed to delete property")


# Unit routes scoped to a property


@router.post("/{property_id}/units", response_model=UnitResponse, status_code=201)
def create_unit(
    property_id: int,
    unit_in: UnitCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        unit = unit_service.create_unit(db, property_id, current_user.id, unit_in)
        return created_response(UnitResponse.model_validate(unit))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to create unit for property %s", property_id)
        return internal_server_error("Failed to create unit")


@router.get("/{property_id}/units", response_model=List[UnitResponse])
def get_units(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        units = unit_service.get_units(db, property_id, current_user.id)
        return data_response([UnitResponse.model_validate(u) for u in units])
    except LandraError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch units for property %s", property_id)
        return internal_server_error("Failed to fetch units")
