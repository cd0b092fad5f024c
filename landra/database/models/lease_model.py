from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from landra.database.init import Base
from landra.enums.lease_status import LeaseStatus


class Lease(Base):
    __tablename__ = "leases"
    __table_args__ = (Index("ix_leases_unit_status", "unit_id", "status"),)

    id = Column(Integer, primary_key=True, index=True)
    unit_id = Column(Integer, ForeignKey("units.id", ondelete="CASCADE"), nullable=False)
    tenant_id = Column(Integer, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    monthly_rent = Column(Numeric(10, 2), nullable=False)
    deposit_paid = Column(Numeric(10, 2), nullable=False)
    advance_paid = Column(Numeric(10, 2), nullable=False)
    due_date = Column(Integer, nullable=False)  # day of month, 1-31
    status = Column(String(20), default=LeaseStatus.ACTIVE.value, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    unit = relationship("Unit", back_populates="leases")
    tenant = relationship("Tenant", back_populates="leases")
    payments = relationship("Payment", back_populates="lease", cascade="all, delete-orphan")
