import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from landra.database.init import get_db
from landra.database.models.user_model import User
from landra.schemas.auth_schema import LoginRequest, UserCreate, UserResponse
from landra.services.auth_service import authenticate_user, create_user
from landra.services.errors import LandraError
from landra.utils.dependencies import (
    clear_session_cookie,
    create_session_token,
    get_current_user,
    set_session_cookie,
)
from landra.responses.success import data_response, success_response
from landra.responses.error import (
    error_response,
    internal_server_error,
    unauthorized_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_response(user: User):
    response = data_response({"user": UserResponse.model_validate(user)})
    set_session_cookie(response, create_session_token(user))
    return response


@router.post("/signup")
def signup(payload: UserCreate, db: Session = Depends(get_db)):
    try:
        user = create_user(payload, db)
        logger.info("Owner %s signed up", user.id)
        return _session_response(user)
    except LandraError as e:
        db.rollback()
        return error_response(e)
    except Exception:
        db.rollback()
        logger.exception("Sign up failed")
        return internal_server_error()


@router.post("/signin")
def signin(credentials: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = authenticate_user(credentials.email, credentials.password, db)
        if not user:
            return unauthorized_error("Invalid email or password")
        return _session_response(user)
    except Exception:
        logger.exception("Sign in failed")
        return internal_server_error()


@router.post("/signout")
def signout():
    response = success_response("Signed out")
    clear_session_cookie(response)
    return response


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    return data_response(UserResponse.model_validate(current_user))
