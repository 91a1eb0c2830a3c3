import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Uuid, func
from passlib.context import CryptContext

from shared.core.database import Base

bcrypt_context = CryptContext(schemes=['bcrypt'], deprecated='auto')


class Users(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    full_name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    status = Column(String(16), nullable=False, default="active")
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    def set_password(self, password: str):
        self.password = bcrypt_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return bcrypt_context.verify(password, self.password)
