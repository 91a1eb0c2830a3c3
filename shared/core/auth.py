from datetime import datetime, timedelta, timezone
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import get_db
from shared.core.exceptions import AuthError
from shared.core.schemas import UserToken
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode

security = HTTPBearer(auto_error=False)


def create_access_token(data: dict) -> str:
    payload = data.copy()
    expires = datetime.now(timezone.utc) + \
        timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload['exp'] = expires

    # Ensure "name" exists for display in transaction history
    if 'name' not in payload and 'full_name' in payload:
        payload['name'] = payload.pop('full_name')

    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def create_user_token(user: Users) -> str:
    return create_access_token({
        "user_id": str(user.id),
        "full_name": user.full_name,
        "email": user.email,
    })


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        return UserToken(**payload)
    except JWTError:
        raise AuthError("Invalid or expired token")
    except PydanticValidationError:
        raise AuthError("Invalid token structure")


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    if credentials is None or not credentials.credentials:
        raise AuthError("Authentication required")

    user_data = verify_token(credentials.credentials)

    user = db.query(Users).filter(
        Users.id == user_data.user_id,
        Users.is_deleted == False
    ).first()

    if not user:
        error = AuthError("User not found")
        error.status_code = AppStatusCode.AUTHENTICATION_USER_INVALID
        raise error

    if user.status.lower() != "active":
        error = AuthError("User is not active. Access denied")
        error.status_code = AppStatusCode.AUTHENTICATION_USER_INACTIVE
        raise error

    user_data.name = user.full_name
    return user_data
