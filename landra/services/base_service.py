from typing import Generic, List, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Query, Session

from landra.database.init import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseService(Generic[ModelType]):
    """Plain CRUD on one model; callers handle ownership checks first."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def create(self, db: Session, obj_in: Union[BaseModel, dict], **extra) -> ModelType:
        """
        Insert a row built from a schema or dict

        Args:
            db: Database session
            obj_in: Pydantic schema or dict of column values
            extra: Column values the schema does not carry (e.g. owner_id)

        Returns:
            The refreshed model instance
        """
        values = obj_in.model_dump() if isinstance(obj_in, BaseModel) else dict(obj_in)
        values.update(extra)
        db_obj = self.model(**values)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, db_obj: ModelType, obj_in: Union[BaseModel, dict]) -> ModelType:
        # only fields the caller actually sent
        if isinstance(obj_in, BaseModel):
            changes = obj_in.model_dump(exclude_unset=True)
        else:
            changes = obj_in
        for field, value in changes.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete_obj(self, db: Session, db_obj: ModelType) -> bool:
        db.delete(db_obj)
        db.commit()
        return True

    def list(self, query: Query, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return query.offset(skip).limit(limit).all()
