from sqlalchemy.orm import Session
from sqlalchemy import func, case, false
from typing import Dict, Any, List

from landra.database.models.lease_model import Lease
from landra.database.models.property_model import Property, Unit
from landra.enums.lease_status import LeaseStatus
from landra.schemas.money import as_money


class ReportService:
    def __init__(self, db: Session):
        self.db = db

    def get_lease_analytics(self, owner_id: int) -> Dict[str, Any]:
        """
        Generate the lease dashboard figures for a property owner.

        Args:
            owner_id: ID of the property owner

        Returns:
            Dict containing per-status lease stats, active monthly revenue
            and unit occupancy
        """
        lease_stats = self._get_lease_stats(owner_id)

        # Revenue comes from the same grouped read as the stats
        total_monthly_revenue = sum(
            (row["total_revenue"] for row in lease_stats if row["status"] == LeaseStatus.ACTIVE.value),
            as_money(0),
        )

        occupancy = self._get_occupancy_stats(owner_id)

        return {
            "lease_stats_by_status": lease_stats,
            "total_monthly_revenue": as_money(total_monthly_revenue),
            **occupancy,
        }

    def _get_lease_stats(self, owner_id: int) -> List[Dict[str, Any]]:
        """
        Count leases and sum their monthly rent, grouped by status.

        Args:
            owner_id: ID of the property owner

        Returns:
            List of dicts with status, count and total_revenue
        """
        rows = (
            self.db.query(
                Lease.status,
                func.count(Lease.id),
                func.sum(Lease.monthly_rent),
            )
            .join(Unit, Lease.unit_id == Unit.id)
            .join(Property, Unit.property_id == Property.id)
            .filter(Property.owner_id == owner_id)
            .group_by(Lease.status)
            .order_by(Lease.status)
            .all()
        )

        return [
            {
                "status": status,
                "count": int(count or 0),
                "total_revenue": as_money(total),
            }
            for status, count, total in rows
        ]

    def _get_occupancy_stats(self, owner_id: int) -> Dict[str, Any]:
        """
        Get unit occupancy for an owner's properties.

        Args:
            owner_id: ID of the property owner

        Returns:
            Dict containing total_units, occupied_units and occupancy_rate
        """
        total_units, occupied_units = (
            self.db.query(
                func.count(Unit.id),
                func.sum(case((Unit.is_available == false(), 1), else_=0)),
            )
            .join(Property, Unit.property_id == Property.id)
            .filter(Property.owner_id == owner_id)
            .one()
        )

        total_units = int(total_units or 0)
        occupied_units = int(occupied_units or 0)
        occupancy_rate = (
            round(occupied_units / total_units * 100, 2) if total_units > 0 else 0.0
        )

        return {
            "total_units": total_units,
            "occupied_units": occupied_units,
            "occupancy_rate": occupancy_rate,
        }
