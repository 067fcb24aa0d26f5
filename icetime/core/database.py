"""Database engine, sessions and store error translation."""
import functools
import logging
from typing import AsyncIterator

from sqlalchemy.exc import InterfaceError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from icetime.core.config import settings
from icetime.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)

AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

Base = declarative_base()


async def init_db():
    """Create tables that don't exist yet."""
    # Register models on Base.metadata
    import icetime.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a request-scoped session."""
    async with AsyncSessionLocal() as session:
        yield session


def translate_store_errors(func):
    """
    Wrap an async service method so connectivity failures surface as
    StoreUnavailableError.
    """

    @functools.wraps(func)
    async def wrapper(self, db: AsyncSession, *args, **kwargs):
        try:
            return await func(self, db, *args, **kwargs)
        except (OperationalError, InterfaceError, PoolTimeoutError) as e:
            logger.error(f"Store failure in {func.__qualname__}: {e}", exc_info=True)
            raise StoreUnavailableError("The booking store is temporarily unavailable") from e

    return wrapper
