import os
from datetime import date
from decimal import Decimal

# must be set before landra.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from landra.database.init import Base, SessionLocal, engine
from landra.database.models import Lease, Property, Tenant, Unit, User
from landra.main import app
from landra.utils.dependencies import hash_password


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    SessionLocal.remove()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.rollback()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def make_owner(db, email="owner@example.com", name="Olivia Owner"):
    owner = User(name=name, email=email, hashed_password=hash_password("secret123"))
    db.add(owner)
    db.commit()
    db.refresh(owner)
    return owner


def make_property(db, owner, name="Sunset Residences"):
    property_obj = Property(owner_id=owner.id, name=name, address="12 Mango St, Cebu")
    db.add(property_obj)
    db.commit()
    db.refresh(property_obj)
    return property_obj


def make_unit(db, property_obj, unit_number="101", rent="15000.00", is_available=True):
    unit = Unit(
        property_id=property_obj.id,
        unit_number=unit_number,
        monthly_rent=Decimal(rent),
        deposit_required=Decimal(rent),
        advance_required=Decimal(rent),
        is_available=is_available,
    )
    db.add(unit)
    db.commit()
    db.refresh(unit)
    return unit


def make_tenant(db, property_obj, email="maria@example.com", first_name="Maria", last_name="Santos"):
    tenant = Tenant(
        property_id=property_obj.id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone="09171234567",
    )
    db.add(tenant)
    db.commit()
    db.refresh(tenant)
    return tenant


def make_lease(db, unit, tenant, start, end, rent="15000.00", status="active", due_date=5):
    lease = Lease(
        unit_id=unit.id,
        tenant_id=tenant.id,
        start_date=start,
        end_date=end,
        monthly_rent=Decimal(rent),
        deposit_paid=Decimal(rent),
        advance_paid=Decimal(rent),
        due_date=due_date,
        status=status,
    )
    db.add(lease)
    db.commit()
    db.refresh(lease)
    return lease


def lease_payload(unit_id, tenant_id, start=date(2024, 1, 1), end=date(2024, 12, 31), **overrides):
    payload = {
        "unit_id": unit_id,
        "tenant_id": tenant_id,
        "start_date": start,
        "end_date": end,
        "monthly_rent": "15000.00",
        "deposit_paid": "15000.00",
        "advance_paid": "15000.00",
        "due_date": 5,
        "status": "active",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def owner(db):
    return make_owner(db)


@pytest.fixture
def other_owner(db):
    return make_owner(db, email="rival@example.com", name="Rita Rival")


@pytest.fixture
def property_obj(db, owner):
    return make_property(db, owner)


@pytest.fixture
def unit(db, property_obj):
    return make_unit(db, property_obj)


@pytest.fixture
def tenant(db, property_obj):
    return make_tenant(db, property_obj)


def signup(client, email="owner@example.com", name="Olivia Owner", password="secret123"):
    response = client.post(
        "/auth/signup", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]["user"]
