import logging
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from landra.database.models import Lease, Property, Tenant
from landra.enums.lease_status import LeaseStatus
from landra.schemas.tenant_schema import TenantCreate, TenantUpdate
from landra.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A tenant with this email already exists in your properties"


def _owned_query(db: Session, owner_id: int):
    return (
        db.query(Tenant)
        .join(Property, Tenant.property_id == Property.id)
        .filter(Property.owner_id == owner_id)
    )


def get_owned_tenant(db: Session, tenant_id: int, owner_id: int) -> Optional[Tenant]:
    return _owned_query(db, owner_id).filter(Tenant.id == tenant_id).first()


def email_taken(
    db: Session, owner_id: int, email: str, exclude_tenant_id: Optional[int] = None
) -> bool:
    query = _owned_query(db, owner_id).filter(
        func.lower(Tenant.email) == email.lower()
    )
    if exclude_tenant_id is not None:
        query = query.filter(Tenant.id != exclude_tenant_id)
    return query.first() is not None


def create_tenant(db: Session, tenant: TenantCreate, owner_id: int) -> Tenant:
    property_obj = (
        db.query(Property)
        .filter(Property.id == tenant.property_id, Property.owner_id == owner_id)
        .first()
    )
    if not property_obj:
        raise NotFoundError("Property not found or unauthorized")

    if email_taken(db, owner_id, tenant.email):
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    db_tenant = Tenant(
        property_id=property_obj.id,
        first_name=tenant.first_name,
        last_name=tenant.last_name,
        email=tenant.email,
        phone=tenant.phone,
        emergency_contact=(
            tenant.emergency_contact.model_dump() if tenant.emergency_contact else None
        ),
    )
    db.add(db_tenant)
    db.commit()
    db.refresh(db_tenant)
    logger.info("Tenant %s added to property %s", db_tenant.id, property_obj.id)
    return db_tenant


def get_tenant(db: Session, tenant_id: int, owner_id: int) -> Tenant:
    tenant = get_owned_tenant(db, tenant_id, owner_id)
    if not tenant:
        raise NotFoundError("Tenant not found or unauthorized")
    return tenant


def get_tenants_by_owner(
    db: Session,
    owner_id: int,
    property_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[dict]:
    """Owner's tenants with their property name and active lease count"""
    active_leases = (
        db.query(Lease.tenant_id, func.count(Lease.id).label("active_count"))
        .filter(Lease.status == LeaseStatus.ACTIVE.value)
        .group_by(Lease.tenant_id)
        .subquery()
    )
    query = (
        db.query(Tenant, Property.name, active_leases.c.active_count)
        .join(Property, Tenant.property_id == Property.id)
        .outerjoin(active_leases, active_leases.c.tenant_id == Tenant.id)
        .filter(Property.owner_id == owner_id)
    )
    if property_id is not None:
        query = query.filter(Tenant.property_id == property_id)
    if search:
        pattern = f"%{search.lower()}%"
        query = query.filter(
            or_(
                func.lower(Tenant.first_name).like(pattern),
                func.lower(Tenant.last_name).like(pattern),
                func.lower(Tenant.email).like(pattern),
            )
        )

    rows = query.order_by(Tenant.last_name, Tenant.first_name, Tenant.id).all()
    results = []
    for tenant, property_name, active_count in rows:
        results.append(
            {
                "id": tenant.id,
                "property_id": tenant.property_id,
                "first_name": tenant.first_name,
                "last_name": tenant.last_name,
                "email": tenant.email,
                "phone": tenant.phone,
                "emergency_contact": tenant.emergency_contact,
                "created_at": tenant.created_at,
                "updated_at": tenant.updated_at,
                "property_name": property_name,
                "active_lease_count": active_count or 0,
            }
        )
    return results


def update_tenant(
    db: Session, tenant_id: int, payload: TenantUpdate, owner_id: int
) -> Tenant:
    tenant = get_tenant(db, tenant_id, owner_id)
    update_data = payload.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email and new_email.lower() != tenant.email.lower():
        if email_taken(db, owner_id, new_email, exclude_tenant_id=tenant.id):
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    for field, value in update_data.items():
        setattr(tenant, field, value)

    db.commit()
    db.refresh(tenant)
    return tenant


def delete_tenant(db: Session, tenant_id: int, owner_id: int) -> bool:
    tenant = get_tenant(db, tenant_id, owner_id)

    has_active_lease = (
        db.query(Lease)
        .filter(Lease.tenant_id == tenant.id, Lease.status == LeaseStatus.ACTIVE.value)
        .first()
    )
    if has_active_lease:
        raise ConflictError("Terminate the tenant's active lease before deleting them")

    db.delete(tenant)
    db.commit()
    logger.info("Tenant %s deleted by owner %s", tenant_id, owner_id)
    return True
