import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from landra.config import EXPIRING_LEASE_WINDOW_DAYS
from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.enums.lease_status import LeaseStatus
from landra.schemas.lease_schema import (
    ExpiringLeaseItem,
    LeaseCreate,
    LeaseDetailResponse,
    LeaseListItem,
    LeaseResponse,
    LeaseTerminate,
    LeaseUpdate,
    NextDueDateResponse,
)
from landra.schemas.payment_schema import PaymentResponse
from landra.schemas.report_schema import LeaseAnalyticsResponse
from landra.services.errors import LandraError
from landra.services.lease_service import LeaseService
from landra.services.payment_service import PaymentService
from landra.services.result import ServiceResult
from landra.utils.dependencies import get_current_user
from landra.responses.success import created_response, data_response
from landra.responses.error import error_response, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leases", tags=["Leases"])

lease_service = LeaseService()
payment_service = PaymentService()


def render(result: ServiceResult, schema, many: bool = False, created: bool = False):
    if not result.ok:
        return error_response(result.error)
    if many:
        payload = [schema.model_validate(item) for item in result.value]
    else:
        payload = schema.model_validate(result.value)
    return created_response(payload) if created else data_response(payload)


@router.get("", response_model=List[LeaseListItem])
def get_leases(
    property_id: Optional[int] = None,
    unit_id: Optional[int] = None,
    tenant_id: Optional[int] = None,
    status: Optional[LeaseStatus] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Owner's leases, newest first, with unit, tenant and property names"""
    result = lease_service.list_leases(
        db,
        current_user.id,
        property_id=property_id,
        unit_id=unit_id,
        tenant_id=tenant_id,
        status=status,
    )
    return render(result, LeaseListItem, many=True)


@router.get("/active", response_model=List[LeaseListItem])
def get_active_leases(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return render(lease_service.list_active_leases(db, current_user.id), LeaseListItem, many=True)


@router.get("/expiring", response_model=List[ExpiringLeaseItem])
def get_expiring_leases(
    days: int = Query(EXPIRING_LEASE_WINDOW_DAYS, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Active leases ending within the next ``days`` days, soonest first"""
    result = lease_service.list_expiring_leases(db, current_user.id, days=days)
    return render(result, ExpiringLeaseItem, many=True)


@router.get("/analytics", response_model=LeaseAnalyticsResponse)
def get_lease_analytics(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Dashboard figures: lease counts and rent per status, active monthly
    revenue, and unit occupancy for the signed-in owner.
    """
    result = lease_service.get_lease_analytics(db, current_user.id)
    return render(result, LeaseAnalyticsResponse)


@router.post("", response_model=LeaseResponse, status_code=201)
def create_lease(
    lease_in: LeaseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = lease_service.create_lease(db, current_user.id, lease_in)
    return render(result, LeaseResponse, created=True)


@router.get("/{lease_id}", response_model=LeaseDetailResponse)
def get_lease(
    lease_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = lease_service.get_lease_details(db, current_user.id, lease_id)
    return render(result, LeaseDetailResponse)


@router.put("/{lease_id}", response_model=LeaseResponse)
def update_lease(
    lease_id: int,
    lease_in: LeaseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = lease_service.update_lease(db, current_user.id, lease_id, lease_in)
    return render(result, LeaseResponse)


@router.post("/{lease_id}/terminate", response_model=LeaseResponse)
def terminate_lease(
    lease_id: int,
    body: Optional[LeaseTerminate] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Terminate a lease, ending it on the given date (today by default) and freeing its unit"""
    termination_date = body.termination_date if body else None
    result = lease_service.terminate_lease(
        db, current_user.id, lease_id, termination_date
    )
    return render(result, LeaseResponse)


@router.get("/{lease_id}/next-due-date", response_model=NextDueDateResponse)
def get_next_due_date(
    lease_id: int,
    reference_date: Optional[date] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    result = lease_service.get_next_due_date(
        db, current_user.id, lease_id, reference_date
    )
    return render(result, NextDueDateResponse)


@router.get("/{lease_id}/payments", response_model=List[PaymentResponse])
def get_lease_payments(
    lease_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        payments = payment_service.get_payments_for_lease(db, lease_id, current_user.id)
        return data_response([PaymentResponse.model_validate(p) for p in payments])
    except LandraError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch payments for lease %s", lease_id)
        return internal_server_error("Failed to fetch payments")
