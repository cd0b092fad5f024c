from sqlalchemy.orm import Session
from typing import List

from landra.database.models import Lease, Payment, Property, Unit
from landra.schemas.payment_schema import PaymentCreate
from landra.services.errors import NotFoundError, ValidationError
from landra.utils.dates import next_due_date


class PaymentService:
    def _owned_lease(self, db: Session, lease_id: int, owner_id: int) -> Lease:
        lease = (
            db.query(Lease)
            .join(Unit, Lease.unit_id == Unit.id)
            .join(Property, Unit.property_id == Property.id)
            .filter(Lease.id == lease_id, Property.owner_id == owner_id)
            .first()
        )
        if not lease:
            raise NotFoundError("Lease not found or unauthorized")
        return lease

    def create_payment(
        self, db: Session, payment_in: PaymentCreate, owner_id: int
    ) -> Payment:
        lease = self._owned_lease(db, payment_in.lease_id, owner_id)

        due_date = payment_in.due_date or next_due_date(
            lease.due_date, payment_in.payment_date
        )

        db_payment = Payment(
            lease_id=lease.id,
            amount=payment_in.amount,
            payment_method=payment_in.payment_method.value,
            payment_date=payment_in.payment_date,
            due_date=due_date,
            reference_number=payment_in.reference_number or None,
            status=payment_in.status.value,
            notes=payment_in.notes or None,
        )
        db.add(db_payment)
        db.commit()
        db.refresh(db_payment)
        return db_payment

    def get_payments_for_lease(
        self, db: Session, lease_id: int, owner_id: int
    ) -> List[Payment]:
        lease = self._owned_lease(db, lease_id, owner_id)
        return (
            db.query(Payment)
            .filter(Payment.lease_id == lease.id)
            .order_by(Payment.payment_date, Payment.id)
            .all()
        )

    def get_payments(
        self, db: Session, owner_id: int, page: int = 1, limit: int = 10
    ) -> List[Payment]:
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be at least 1")
        offset = (page - 1) * limit
        return (
            db.query(Payment)
            .join(Lease, Payment.lease_id == Lease.id)
            .join(Unit, Lease.unit_id == Unit.id)
            .join(Property, Unit.property_id == Property.id)
            .filter(Property.owner_id == owner_id)
            .order_by(Payment.payment_date.desc(), Payment.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
