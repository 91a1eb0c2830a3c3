from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_db
from ..crud import dashboard_crud as crud
from ..schemas.dashboard_schemas import DashboardSummary

router = APIRouter(prefix="/api/dashboard",
                   tags=["dashboard"], dependencies=[Depends(validate_current_token)])


@router.get("/summary", response_model=DashboardSummary)
def read_dashboard_summary(db: Session = Depends(get_db)):
    return crud.get_dashboard_summary(db)
