import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from landra.config import EXPIRING_LEASE_WINDOW_DAYS
from landra.database.models import Lease, Property, Tenant, Unit
from landra.enums.lease_status import LeaseStatus
from landra.schemas.lease_schema import LeaseCreate, LeaseTerminate, LeaseUpdate
from landra.services.errors import ConflictError, NotFoundError, ValidationError
from landra.services.report_service import ReportService
from landra.services.result import ServiceResult, service_operation
from landra.utils.dates import days_between, next_due_date

logger = logging.getLogger(__name__)


class LeaseService:
    """
    Lease lifecycle: creation with overlap detection, edits, termination and
    the occupancy figures derived from them.

    Every public operation takes the session and the caller's owner id and
    returns a ServiceResult. Writes that touch both a lease and its unit are
    committed together.
    """

    # Ownership-scoped lookups

    def find_unit_owned_by(
        self, db: Session, unit_id: int, owner_id: int, lock: bool = False
    ) -> Optional[Unit]:
        query = (
            db.query(Unit)
            .join(Property, Unit.property_id == Property.id)
            .filter(Unit.id == unit_id, Property.owner_id == owner_id)
        )
        if lock:
            query = query.with_for_update()
        return query.first()

    def find_tenant_owned_by(
        self, db: Session, tenant_id: int, owner_id: int
    ) -> Optional[Tenant]:
        return (
            db.query(Tenant)
            .join(Property, Tenant.property_id == Property.id)
            .filter(Tenant.id == tenant_id, Property.owner_id == owner_id)
            .first()
        )

    def find_lease_owned_by(
        self, db: Session, lease_id: int, owner_id: int
    ) -> Optional[Lease]:
        return (
            db.query(Lease)
            .join(Unit, Lease.unit_id == Unit.id)
            .join(Property, Unit.property_id == Property.id)
            .filter(Lease.id == lease_id, Property.owner_id == owner_id)
            .first()
        )

    def find_active_leases_for_unit(
        self,
        db: Session,
        unit_id: int,
        start_date: date,
        end_date: date,
        exclude_lease_id: Optional[int] = None,
    ) -> List[Lease]:
        """Active leases on the unit whose inclusive range meets [start_date, end_date]."""
        query = db.query(Lease).filter(
            Lease.unit_id == unit_id,
            Lease.status == LeaseStatus.ACTIVE.value,
            Lease.start_date <= end_date,
            Lease.end_date >= start_date,
        )
        if exclude_lease_id is not None:
            query = query.filter(Lease.id != exclude_lease_id)
        return query.all()

    def lock_unit(self, db: Session, unit_id: int) -> Unit:
        return db.query(Unit).filter(Unit.id == unit_id).with_for_update().one()

    def set_unit_availability(self, db: Session, unit: Unit, is_available: bool):
        # flushed with the lease write; the caller commits
        unit.is_available = is_available
        db.add(unit)

    # Lifecycle

    @service_operation
    def create_lease(
        self, db: Session, owner_id: int, lease_in: Union[LeaseCreate, dict]
    ) -> Lease:
        lease_in = self._validate(LeaseCreate, lease_in)

        # the row lock serialises concurrent creations for the same unit
        unit = self.find_unit_owned_by(db, lease_in.unit_id, owner_id, lock=True)
        if not unit:
            raise NotFoundError("Unit not found or unauthorized")

        tenant = self.find_tenant_owned_by(db, lease_in.tenant_id, owner_id)
        if not tenant:
            raise NotFoundError("Tenant not found or unauthorized")

        self._ensure_no_overlap(db, unit.id, lease_in.start_date, lease_in.end_date)

        lease = Lease(
            unit_id=unit.id,
            tenant_id=tenant.id,
            start_date=lease_in.start_date,
            end_date=lease_in.end_date,
            monthly_rent=lease_in.monthly_rent,
            deposit_paid=lease_in.deposit_paid,
            advance_paid=lease_in.advance_paid,
            due_date=lease_in.due_date,
            status=lease_in.status.value,
        )
        db.add(lease)

        if lease_in.status == LeaseStatus.ACTIVE:
            self.set_unit_availability(db, unit, False)

        db.commit()
        db.refresh(lease)
        logger.info(
            "Lease %s created on unit %s (%s)", lease.id, unit.id, lease.status
        )
        return lease

    @service_operation
    def update_lease(
        self,
        db: Session,
        owner_id: int,
        lease_id: int,
        lease_in: Union[LeaseUpdate, dict],
    ) -> Lease:
        lease_in = self._validate(LeaseUpdate, lease_in)

        lease = self.find_lease_owned_by(db, lease_id, owner_id)
        if not lease:
            raise NotFoundError("Lease not found or unauthorized")

        unit = self.lock_unit(db, lease.unit_id)
        update_data = lease_in.model_dump(exclude_unset=True)

        previous_status = LeaseStatus(lease.status)
        new_status = update_data.get("status", previous_status)
        new_start = update_data.get("start_date", lease.start_date)
        new_end = update_data.get("end_date", lease.end_date)

        if new_end < new_start:
            raise ValidationError("End date must not be before start date")

        dates_changed = new_start != lease.start_date or new_end != lease.end_date
        if new_status == LeaseStatus.ACTIVE and (
            dates_changed or previous_status != LeaseStatus.ACTIVE
        ):
            self._ensure_no_overlap(
                db, lease.unit_id, new_start, new_end, exclude_lease_id=lease.id
            )

        for field, value in update_data.items():
            if isinstance(value, LeaseStatus):
                value = value.value
            setattr(lease, field, value)

        # availability only moves when the lease enters or leaves "active"
        if "status" in update_data and LeaseStatus.ACTIVE in (
            previous_status,
            new_status,
        ):
            self.set_unit_availability(
                db,
                unit,
                new_status != LeaseStatus.ACTIVE
                and not self._has_other_active_lease(db, unit.id, lease.id),
            )

        db.commit()
        db.refresh(lease)
        logger.info(
            "Lease %s updated (%s -> %s)", lease.id, previous_status.value, lease.status
        )
        return lease

    @service_operation
    def terminate_lease(
        self,
        db: Session,
        owner_id: int,
        lease_id: int,
        termination_date: Optional[date] = None,
    ) -> Lease:
        termination_date = self._termination_date(termination_date)

        lease = self.find_lease_owned_by(db, lease_id, owner_id)
        if not lease:
            raise NotFoundError("Lease not found or unauthorized")

        if termination_date < lease.start_date:
            raise ValidationError(
                "Termination date must not be before the lease start date"
            )

        unit = self.lock_unit(db, lease.unit_id)

        lease.status = LeaseStatus.TERMINATED.value
        lease.end_date = termination_date
        # another active lease on the unit keeps it occupied
        self.set_unit_availability(
            db, unit, not self._has_other_active_lease(db, unit.id, lease.id)
        )

        db.commit()
        db.refresh(lease)
        logger.info("Lease %s terminated on %s", lease.id, termination_date)
        return lease

    @service_operation
    def get_lease_analytics(self, db: Session, owner_id: int) -> dict:
        return ReportService(db).get_lease_analytics(owner_id)

    # Queries

    @service_operation
    def list_leases(
        self,
        db: Session,
        owner_id: int,
        property_id: Optional[int] = None,
        unit_id: Optional[int] = None,
        tenant_id: Optional[int] = None,
        status: Optional[LeaseStatus] = None,
    ) -> List[dict]:
        query = self._owner_lease_query(db, owner_id)
        if property_id is not None:
            query = query.filter(Property.id == property_id)
        if unit_id is not None:
            query = query.filter(Lease.unit_id == unit_id)
        if tenant_id is not None:
            query = query.filter(Lease.tenant_id == tenant_id)
        if status is not None:
            query = query.filter(Lease.status == LeaseStatus(status).value)

        rows = query.order_by(Lease.created_at.desc(), Lease.id.desc()).all()
        return [self._list_row(*row) for row in rows]

    @service_operation
    def list_active_leases(self, db: Session, owner_id: int) -> List[dict]:
        rows = (
            self._owner_lease_query(db, owner_id)
            .filter(Lease.status == LeaseStatus.ACTIVE.value)
            .order_by(Lease.created_at.desc(), Lease.id.desc())
            .all()
        )
        return [self._list_row(*row) for row in rows]

    @service_operation
    def list_expiring_leases(
        self,
        db: Session,
        owner_id: int,
        days: int = EXPIRING_LEASE_WINDOW_DAYS,
        today: Optional[date] = None,
    ) -> List[dict]:
        if days < 0:
            raise ValidationError("days: Input should be greater than or equal to 0")

        today = today or date.today()
        horizon = today + timedelta(days=days)
        rows = (
            self._owner_lease_query(db, owner_id)
            .filter(
                Lease.status == LeaseStatus.ACTIVE.value,
                Lease.end_date >= today,
                Lease.end_date <= horizon,
            )
            .order_by(Lease.end_date.asc(), Lease.id.asc())
            .all()
        )
        expiring = []
        for row in rows:
            item = self._list_row(*row)
            item["days_until_expiry"] = days_between(today, item["end_date"])
            expiring.append(item)
        return expiring

    @service_operation
    def get_lease_details(self, db: Session, owner_id: int, lease_id: int) -> dict:
        row = (
            self._owner_lease_query(db, owner_id)
            .filter(Lease.id == lease_id)
            .first()
        )
        if not row:
            raise NotFoundError("Lease not found")

        lease, unit, tenant, property_obj = row
        details = self._lease_fields(lease)
        details["unit"] = unit
        details["tenant"] = tenant
        details["property"] = property_obj
        return details

    @service_operation
    def get_next_due_date(
        self,
        db: Session,
        owner_id: int,
        lease_id: int,
        reference: Optional[date] = None,
    ) -> dict:
        lease = self.find_lease_owned_by(db, lease_id, owner_id)
        if not lease:
            raise NotFoundError("Lease not found")

        reference = reference or date.today()
        return {
            "lease_id": lease.id,
            "due_date": lease.due_date,
            "reference_date": reference,
            "next_due_date": next_due_date(lease.due_date, reference),
        }

    # Helpers

    def _ensure_no_overlap(
        self,
        db: Session,
        unit_id: int,
        start_date: date,
        end_date: date,
        exclude_lease_id: Optional[int] = None,
    ):
        overlapping = self.find_active_leases_for_unit(
            db, unit_id, start_date, end_date, exclude_lease_id
        )
        if overlapping:
            logger.info(
                "Unit %s already leased by %s between %s and %s",
                unit_id,
                [lease.id for lease in overlapping],
                start_date,
                end_date,
            )
            raise ConflictError(
                "Unit has an overlapping active lease for the specified period"
            )

    def _has_other_active_lease(self, db: Session, unit_id: int, lease_id: int) -> bool:
        return (
            db.query(Lease.id)
            .filter(
                Lease.unit_id == unit_id,
                Lease.id != lease_id,
                Lease.status == LeaseStatus.ACTIVE.value,
            )
            .first()
            is not None
        )

    def _validate(self, schema, data) -> BaseModel:
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

    def _termination_date(self, value) -> date:
        if value is None:
            return date.today()
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return self._validate(LeaseTerminate, {"termination_date": value}).termination_date

    def _owner_lease_query(self, db: Session, owner_id: int):
        return (
            db.query(Lease, Unit, Tenant, Property)
            .join(Unit, Lease.unit_id == Unit.id)
            .join(Tenant, Lease.tenant_id == Tenant.id)
            .join(Property, Unit.property_id == Property.id)
            .filter(Property.owner_id == owner_id)
        )

    def _lease_fields(self, lease: Lease) -> dict:
        return {
            "id": lease.id,
            "unit_id": lease.unit_id,
            "tenant_id": lease.tenant_id,
            "start_date": lease.start_date,
            "end_date": lease.end_date,
            "monthly_rent": lease.monthly_rent,
            "deposit_paid": lease.deposit_paid,
            "advance_paid": lease.advance_paid,
            "due_date": lease.due_date,
            "status": lease.status,
            "created_at": lease.created_at,
            "updated_at": lease.updated_at,
        }

    def _list_row(
        self, lease: Lease, unit: Unit, tenant: Tenant, property_obj: Property
    ) -> dict:
        row = self._lease_fields(lease)
        row.update(
            {
                "unit_number": unit.unit_number,
                "tenant_first_name": tenant.first_name,
                "tenant_last_name": tenant.last_name,
                "property_id": property_obj.id,
                "property_name": property_obj.name,
            }
        )
        return row
