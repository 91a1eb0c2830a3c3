from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.database import get_db
from shared.core.schemas import UserToken
from ..schemas import authschemas
from ..services import authservices

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/signup", response_model=authschemas.AuthenticationResponse, status_code=status.HTTP_201_CREATED)
def signup(
        request: authschemas.SignupRequest,
        db: Session = Depends(get_db)):
    return authservices.signup(db, request)


@router.post("/login", response_model=authschemas.AuthenticationResponse)
def login(
        request: authschemas.LoginRequest,
        db: Session = Depends(get_db)):
    return authservices.login(db, request)


@router.get("/me", response_model=authschemas.UserOut)
def read_current_user(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(auth.validate_current_token)):
    return authservices.get_current_user(db, current_user)


@router.post("/change-password")
def change_password(
        request: authschemas.ChangePasswordRequest,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(auth.validate_current_token)):
    return authservices.change_password(db, current_user, request)
