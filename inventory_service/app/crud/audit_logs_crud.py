# app/crud/audit_logs_crud.py
from typing import Any, Dict, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from ..enum.inventory_enum import AuditAction
from ..models.audit_logs import AuditLog


def record_audit(
    db: Session,
    user_id: Optional[UUID],
    action: AuditAction,
    entity_id: Any,
    details: Optional[Dict[str, Any]] = None,
    entity: str = "InventoryItems",
) -> AuditLog:
    """Stage an audit row in the caller's session; it commits with the change it describes."""
    entry = AuditLog(
        user_id=user_id,
        action=action.value,
        entity=entity,
        entity_id=str(entity_id) if entity_id is not None else None,
        details=details,
    )
    db.add(entry)
    return entry
