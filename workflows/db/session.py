from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from workflows.core import get_settings

# Render and local: support both postgres:// and postgresql+asyncpg://
database_url = get_settings().async_database_url

engine = create_async_engine(
    database_url,
    echo=get_settings().sql_echo,
    poolclass=NullPool if "render.com" in database_url else None,
)

async_session = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)
Base = declarative_base()
