from pydantic import BaseModel


class DashboardSummary(BaseModel):
    total_items: int
    low_stock_items: int
    out_of_stock_items: int
    total_stock_value: float
    currency_code: str
