import importlib
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from ..shared.utils.logger import get_logger
from .config import Environment, settings

logger = get_logger(__name__)


Base = declarative_base()

# Modules that declare tables; imported before create_all and by alembic.
MODEL_MODULES = [
    "base_counter.domains.auth.models",
    "base_counter.domains.counter.models",
    "base_counter.domains.social_graph.models",
    "base_counter.domains.game.models",
    "base_counter.domains.mints.models",
    "base_counter.domains.gift_box.models",
    "base_counter.domains.faucet.models",
    "base_counter.domains.social.models",
]


def load_models() -> None:
    for module in MODEL_MODULES:
        importlib.import_module(module)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # in-memory sqlite must share one connection
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 20,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 3600,
    }


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Session that commits on success and rolls back on error."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db():
    if settings.ENVIRONMENT in (Environment.LOCAL, Environment.DEV):
        load_models()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    else:
        # staging and prod rely on alembic migrations
        logger.info("Skipping auto table creation in %s", settings.ENVIRONMENT.value)


async def check_connection() -> bool:
    try:
        async with engine.connect():
            return True
    except Exception:
        return False
