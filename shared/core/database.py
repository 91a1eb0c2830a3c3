from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from shared.core.config import DATABASE_URL

Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2


def create_db_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # In-memory databases must share one connection across threads
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,      # max temporary extra connections
        pool_timeout=30       # wait time before failing
    )


engine = create_db_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
