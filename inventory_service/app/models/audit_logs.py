# app/models/audit_logs.py
from sqlalchemy import JSON, Column, DateTime, Integer, String, Uuid, func
from shared.core.database import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Uuid)
    action = Column(String(40), nullable=False)
    entity = Column(String(64), nullable=False)
    entity_id = Column(String(64))
    details = Column(JSON)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())
