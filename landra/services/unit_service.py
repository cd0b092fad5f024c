from typing import List, Optional
from sqlalchemy.orm import Session

from landra.database.models.property_model import Property, Unit as UnitModel
from landra.schemas.property_schema import UnitCreate, UnitUpdate
from landra.services.base_service import BaseService
from landra.services.errors import NotFoundError
from landra.services.property_service import PropertyService


class UnitService(BaseService):
    def __init__(self):
        super().__init__(UnitModel)
        self.property_service = PropertyService()

    def get_owned(self, db: Session, unit_id: int, owner_id: int) -> Optional[UnitModel]:
        return (
            db.query(self.model)
            .join(Property, self.model.property_id == Property.id)
            .filter(self.model.id == unit_id, Property.owner_id == owner_id)
            .first()
        )

    def create_unit(
        self, db: Session, property_id: int, owner_id: int, unit_in: UnitCreate
    ) -> UnitModel:
        if not self.property_service.get_owned(db, property_id, owner_id):
            raise NotFoundError("Property not found or unauthorized")
        # new units are vacant until a lease says otherwise
        return self.create(db, unit_in, property_id=property_id, is_available=True)

    def get_unit(self, db: Session, unit_id: int, owner_id: int) -> UnitModel:
        unit = self.get_owned(db, unit_id, owner_id)
        if not unit:
            raise NotFoundError("Unit not found or unauthorized")
        return unit

    def get_units(self, db: Session, property_id: int, owner_id: int) -> List[UnitModel]:
        if not self.property_service.get_owned(db, property_id, owner_id):
            raise NotFoundError("Property not found or unauthorized")
        return (
            db.query(self.model)
            .filter(self.model.property_id == property_id)
            .order_by(self.model.unit_number)
            .all()
        )

    def get_all_units(
        self, db: Session, owner_id: int, is_available: Optional[bool] = None
    ) -> List[UnitModel]:
        query = (
            db.query(self.model)
            .join(Property, self.model.property_id == Property.id)
            .filter(Property.owner_id == owner_id)
        )
        if is_available is not None:
            query = query.filter(self.model.is_available == is_available)
        return query.order_by(Property.name, self.model.unit_number).all()

    def update_unit(
        self, db: Session, unit_id: int, owner_id: int, unit_in: UnitUpdate
    ) -> UnitModel:
        db_obj = self.get_unit(db, unit_id, owner_id)
        return self.update(db, db_obj, unit_in)

    def delete_unit(self, db: Session, unit_id: int, owner_id: int) -> bool:
        db_obj = self.get_unit(db, unit_id, owner_id)
        return self.delete_obj(db, db_obj)
