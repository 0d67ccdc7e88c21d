"""Database configuration and session management."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from vhsa.config.settings import get_settings
from vhsa.config.logging_config import get_logger

logger = get_logger(__name__)

# Engine and session factory (initialized lazily)
_engine = None
_async_session_factory = None


def resolve_database_url() -> str:
    """Pick the configured URL and map plain PostgreSQL schemes to asyncpg."""
    settings = get_settings()
    db_url = settings.external_database_url or settings.database_url
    if db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return db_url


def _connect_args(db_url: str) -> tuple:
    """Strip libpq-only query params asyncpg rejects; return (url, connect_args)."""
    if not db_url.startswith("postgresql+asyncpg://"):
        return db_url, {}
    connect_args = {}
    if "sslmode=" in db_url or "channel_binding=" in db_url:
        from urllib.parse import urlparse, parse_qs, urlencode, urlunparse
        parsed = urlparse(db_url)
        params = parse_qs(parsed.query)
        ssl_mode = params.pop("sslmode", ["disable"])[0]
        params.pop("channel_binding", None)
        db_url = urlunparse(parsed._replace(query=urlencode(params, doseq=True)))
        connect_args["ssl"] = None if ssl_mode == "disable" else "require"
    # Pooled poolers (pgbouncer, supabase) break prepared statement caching
    connect_args["statement_cache_size"] = 0
    return db_url, connect_args


def get_engine():
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        db_url, connect_args = _connect_args(resolve_database_url())
        engine_kwargs = {}
        if db_url.startswith("postgresql"):
            engine_kwargs.update(pool_size=10, max_overflow=20)
        elif db_url.startswith("sqlite"):
            from pathlib import Path
            db_path = db_url.split(":///", 1)[-1]
            if db_path and db_path != ":memory:":
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        _engine = create_async_engine(
            db_url,
            echo=settings.app_env == "development" and settings.log_level.upper() == "DEBUG",
            connect_args=connect_args,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        db_type = db_url.split("://")[0] if "://" in db_url else "unknown"
        logger.info("Database engine created", db_type=db_type)
    return _engine


def get_session_factory():
    """Get or create the session factory."""
    global _async_session_factory
    if _async_session_factory is None:
        engine = get_engine()
        _async_session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )
    return _async_session_factory


async def init_db() -> None:
    """Initialize the database, creating all tables."""
    from vhsa.storage.models import Base as ModelsBase

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(ModelsBase.metadata.create_all)
    logger.info("Database initialized")


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine (reconnects lazily)."""
    global _engine, _async_session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _async_session_factory = None


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for database sessions.

    Usage:
        async with get_db() as db:
            result = await db.execute(query)
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Database session error", error=str(e))
            raise
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
