from sqlalchemy import func
from sqlalchemy.orm import Session

from landra.database.models import User
from landra.schemas.auth_schema import UserCreate
from landra.services.errors import ConflictError
from landra.utils.dependencies import hash_password, verify_password


def get_user_by_email(email: str, db: Session):
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def get_user_by_id(user_id: int, db: Session):
    return db.query(User).filter(User.id == user_id).first()


def create_user(payload: UserCreate, db: Session) -> User:
    if get_user_by_email(payload.email, db):
        raise ConflictError("User with this email already exists")

    user = User(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        hashed_password=hash_password(payload.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate_user(email: str, password: str, db: Session):
    user = get_user_by_email(email, db)
    if not user or not user.hashed_password:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user
