import logging
from datetime import datetime, timezone
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.exceptions import AuthError, ConflictError, NotFoundError, StorageError
from shared.core.schemas import UserToken
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from ..schemas import authschemas

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str):
    return db.query(Users).filter(
        func.lower(Users.email) == email.lower(),
        Users.is_deleted == False
    ).first()


def _token_response(user: Users) -> authschemas.AuthenticationResponse:
    return authschemas.AuthenticationResponse(
        access_token=auth.create_user_token(user),
        user=authschemas.UserOut.model_validate(user),
    )


def signup(db: Session, request: authschemas.SignupRequest) -> authschemas.AuthenticationResponse:
    if get_user_by_email(db, request.email):
        raise ConflictError(f"Email '{request.email}' is already registered")

    user = Users(full_name=request.full_name, email=request.email.lower())
    user.set_password(request.password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Email '{request.email}' is already registered")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to create user %s: %s", request.email, e)
        raise StorageError("Failed to create user")
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return _token_response(user)


def login(db: Session, request: authschemas.LoginRequest) -> authschemas.AuthenticationResponse:
    user = get_user_by_email(db, request.email)
    if not user or not user.verify_password(request.password):
        error = AuthError("Invalid email or password")
        error.status_code = AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID
        raise error

    if user.status.lower() != "active":
        error = AuthError("User is not active. Access denied")
        error.status_code = AppStatusCode.AUTHENTICATION_USER_INACTIVE
        raise error

    return _token_response(user)


def get_current_user(db: Session, current_user: UserToken) -> Users:
    user = db.query(Users).filter(
        Users.id == current_user.user_id,
        Users.is_deleted == False
    ).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def change_password(db: Session, current_user: UserToken, request: authschemas.ChangePasswordRequest):
    user = get_current_user(db, current_user)
    if not user.verify_password(request.current_password):
        error = AuthError("Current password is incorrect")
        error.status_code = AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID
        raise error

    user.set_password(request.new_password)
    user.updated_at = datetime.now(timezone.utc)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to change password for user %s: %s", user.id, e)
        raise StorageError("Failed to change password")

    return {"message": "Password changed successfully"}
