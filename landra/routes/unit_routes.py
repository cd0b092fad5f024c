import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.schemas.property_schema import UnitUpdate
from landra.schemas.property_response import UnitResponse
from landra.services.errors import LandraError
from landra.services.unit_service import UnitService
from landra.utils.dependencies import get_current_user
from landra.responses.success import data_response, empty_response
from landra.responses.error import error_response, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/units", tags=["Units"])

unit_service = UnitService()


@router.get("", response_model=List[UnitResponse])
def get_all_units(
    is_available: Optional[bool] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """All units across the owner's properties, optionally only vacant or occupied ones"""
    try:
        units = unit_service.get_all_units(db, current_user.id, is_available)
        return data_response([UnitResponse.model_validate(u) for u in units])
    except Exception:
        logger.exception("Failed to fetch units")
        return internal_server_error("Failed to fetch units")


@router.get("/{unit_id}", response_model=UnitResponse)
def get_unit(
    unit_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        unit = unit_service.get_unit(db, unit_id, current_user.id)
        return data_response(UnitResponse.model_validate(unit))
    except LandraError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch unit %s", unit_id)
        return internal_server_error("Failed to fetch unit")


@router.put("/{unit_id}", response_model=UnitResponse)
def update_unit(
    unit_id: int,
    unit_in: UnitUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        unit = unit_service.update_unit(db, unit_id, current_user.id, unit_in)
        return data_response(UnitResponse.model_validate(unit))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to update unit %s", unit_id)
        return internal_server_error("Failed to update unit")


@router.delete("/{unit_id}")
def delete_unit(
    unit_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        unit_service.delete_unit(db, unit_id, current_user.id)
        return empty_response()
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to delete unit %s", unit_id)
        return internal_server_error("Failed to delete unit")
