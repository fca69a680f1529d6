from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool
from .config import Settings
from .base import Base

def build_engine(settings: Settings) -> AsyncEngine:
    if settings.DATABASE_DSN.startswith("sqlite"):
        # one shared connection so in-memory databases survive across sessions
        return create_async_engine(
            settings.DATABASE_DSN,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(settings.DATABASE_DSN, pool_pre_ping=True)

def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

async def init_models(engine: AsyncEngine, settings: Settings):
    ## In dev-only "create_all" mode, create tables; otherwise, migrations own the schema.
    if settings.DB_MANAGE.lower() == "create_all":
        # make sure every model is registered on Base.metadata
        from smartbin.modules.bins import models as _bins  # noqa: F401
        from smartbin.modules.assets import models as _assets  # noqa: F401
        from smartbin.modules.waste import models as _waste  # noqa: F401
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

async def get_session(request: Request):
    async with request.app.state.sessionmaker() as session:
        yield session
