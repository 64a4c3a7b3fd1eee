from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.platform.config import settings
from app.platform.db.base import Base


def _engine_options(database_url: str) -> dict:
    options = {
        "echo": False,
        "future": True,
        "pool_pre_ping": True,
    }
    # SQLite (local dev and tests) opens a connection per session
    if database_url.startswith("sqlite"):
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_recycle=1800,
            pool_size=20,
            max_overflow=30,  # (burst capacity)
            pool_timeout=30,
        )
    return options


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, autoflush=False, autocommit=False)


async def get_db():
    async with SessionLocal() as session:
        yield session


async def init_db(bind=None):
    """
    Create all tables that don't exist yet.

    Models are imported here so they register on Base.metadata.
    """
    from app.features.stores.models.store import Store  # noqa: F401
    from app.features.seo.models.seo_scan import SEOScan  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
