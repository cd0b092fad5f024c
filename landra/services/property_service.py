import logging
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from landra.database.models import Property as PropertyModel
from landra.schemas.property_schema import PropertyCreate, PropertyUpdate
from landra.services.base_service import BaseService
from landra.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class PropertyService(BaseService):
    def __init__(self):
        super().__init__(PropertyModel)

    def create_property(
        self, db: Session, owner_id: int, property_in: PropertyCreate
    ) -> PropertyModel:
        property_obj = self.create(db, property_in, owner_id=owner_id)
        logger.info("Property %s created for owner %s", property_obj.id, owner_id)
        return property_obj

    def get_owned(self, db: Session, property_id: int, owner_id: int) -> Optional[PropertyModel]:
        return (
            db.query(self.model)
            .filter(self.model.id == property_id, self.model.owner_id == owner_id)
            .first()
        )

    def get_property(self, db: Session, property_id: int, owner_id: int) -> PropertyModel:
        property_obj = (
            db.query(self.model)
            .options(selectinload(self.model.units), selectinload(self.model.images))
            .filter(self.model.id == property_id, self.model.owner_id == owner_id)
            .first()
        )
        if not property_obj:
            raise NotFoundError("Property not found or unauthorized")
        return property_obj

    def get_properties(
        self, db: Session, owner_id: int, skip: int = 0, limit: int = 100
    ) -> List[PropertyModel]:
        query = (
            db.query(self.model)
            .options(selectinload(self.model.images))
            .filter(self.model.owner_id == owner_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
        )
        return self.list(query, skip, limit)

    def update_property(
        self, db: Session, property_id: int, owner_id: int, property_in: PropertyUpdate
    ) -> PropertyModel:
        db_obj = self.get_owned(db, property_id, owner_id)
        if not db_obj:
            raise NotFoundError("Property not found or unauthorized")
        return self.update(db, db_obj, property_in)

    def delete_property(self, db: Session, property_id: int, owner_id: int) -> bool:
        db_obj = self.get_owned(db, property_id, owner_id)
        if not db_obj:
            raise NotFoundError("Property not found or unauthorized")
        # units, tenants, leases, payments and images cascade
        self.delete_obj(db, db_obj)
        logger.info("Property %s deleted by owner %s", property_id, owner_id)
        return True
