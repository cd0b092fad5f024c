import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.schemas.payment_schema import PaymentCreate, PaymentResponse
from landra.services.errors import LandraError
from landra.services.payment_service import PaymentService
from landra.utils.dependencies import get_current_user
from landra.responses.success import created_response, data_response
from landra.responses.error import error_response, internal_server_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["Payments"])
payment_service = PaymentService()


@router.post("", response_model=PaymentResponse, status_code=201)
def create_payment(
    payment_in: PaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        payment = payment_service.create_payment(db, payment_in, current_user.id)
        logger.info("Payment %s recorded for lease %s", payment.id, payment.lease_id)
        return created_response(PaymentResponse.model_validate(payment))
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Failed to create payment")
        return internal_server_error("Failed to create payment")


@router.get("", response_model=List[PaymentResponse])
def get_payments(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        payments = payment_service.get_payments(db, current_user.id, page, limit)
        return data_response([PaymentResponse.model_validate(p) for p in payments])
    except LandraError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch payments")
        return internal_server_error("Failed to fetch payments")
