"""Database Configuration.

SQLAlchemy async engine and session setup. PostgreSQL runs on asyncpg;
SQLite URLs run on aiosqlite.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from ..core.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """Create the async engine for a database URL.

    Pool sizing only applies to server databases; SQLite uses its own pool.
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=settings.DEBUG)

    return create_async_engine(
        database_url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW
    )


engine = build_engine(settings.async_database_url)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

Base = declarative_base()


async def get_db():
    """Dependency to get database session.

    Yields:
        AsyncSession: Database session for the request

    Usage in FastAPI:
        @app.get("/items")
        async def read_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
