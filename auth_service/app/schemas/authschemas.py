from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Optional
from uuid import UUID
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


# -------- Requests --------

class SignupRequest(EmptyStringModel):
    full_name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)


class LoginRequest(EmptyStringModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ChangePasswordRequest(EmptyStringModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8, max_length=128)

    @model_validator(mode="after")
    def passwords_differ(self):
        if self.current_password == self.new_password:
            raise ValueError("New password must differ from the current password")
        return self


# -------- Responses --------

class UserOut(BaseModel):
    id: UUID
    full_name: str
    email: EmailStr
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AuthenticationResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
