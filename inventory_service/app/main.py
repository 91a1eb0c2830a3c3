from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.core.logging_config import configure_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.models import users
from .models import audit_logs, categories, inventory_items, settings as settings_models, stock_transactions
from .router import (
    categories_router,
    dashboard_router,
    inventory_items_router,
    settings_router,
    stock_transactions_router,
)

configure_logging()

# Create all tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Inventory Service API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(inventory_items_router.router)
app.include_router(stock_transactions_router.router)
app.include_router(categories_router.router)
app.include_router(settings_router.router)
app.include_router(dashboard_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}
