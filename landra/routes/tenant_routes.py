import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.schemas.tenant_schema import (
    TenantCreate,
    TenantListItem,
    TenantResponse,
    TenantUpdate,
)
from landra.services import tenant_service
from landra.services.errors import LandraError
from landra.utils.dependencies import get_current_user
from landra.responses.success import created_response, data_response, empty_response
from landra.responses.error import error_response, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tenants", tags=["Tenants"])


@router.post("", response_model=TenantResponse, status_code=201)
def create_tenant(
    tenant: TenantCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        db_tenant = tenant_service.create_tenant(db, tenant, current_user.id)
        return created_response(TenantResponse.model_validate(db_tenant))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to create tenant")
        return internal_server_error("Failed to create tenant")


@router.get("", response_model=List[TenantListItem])
def get_tenants(
    property_id: Optional[int] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tenants = tenant_service.get_tenants_by_owner(
            db, current_user.id, property_id=property_id, search=search
        )
        return data_response([TenantListItem.model_validate(t) for t in tenants])
    except Exception:
        logger.exception("Failed to fetch tenants")
        return internal_server_error("Failed to fetch tenants")


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tenant = tenant_service.get_tenant(db, tenant_id, current_user.id)
        return data_response(TenantResponse.model_validate(tenant))
    except LandraError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch tenant %s", tenant_id)
        return internal_server_error("Failed to fetch tenant")


@router.put("/{tenant_id}", response_model=TenantResponse)
def update_tenant(
    tenant_id: int,
    payload: TenantUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tenant = tenant_service.update_tenant(db, tenant_id, payload, current_user.id)
        return data_response(TenantResponse.model_validate(tenant))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to update tenant %s", tenant_id)
        return internal_server_error("Failed to update tenant")


@router.delete("/{tenant_id}")
def delete_tenant(
    tenant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        tenant_service.delete_tenant(db, tenant_id, current_user.id)
        return empty_response()
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to delete tenant %s", tenant_id)
        return internal_server_error("Failed to delete tenant")
