"""
Database connection utilities for async SQLAlchemy.
"""
import logging
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from personacart.config import settings

logger = logging.getLogger(__name__)


def normalize_database_url(url: str) -> str:
    """
    Chuẩn hóa database URL:
    - Convert postgresql:// và postgres:// -> postgresql+asyncpg://
    - Convert sqlite:// -> sqlite+aiosqlite://
    """
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)

    if url.startswith("sqlite://"):
        url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)

    return url


def mask_url(url: str) -> str:
    """Mask password trong database URL để log."""
    if '@' in url:
        parts = url.split('@')
        user_pass = parts[0].split('//')[1] if '//' in parts[0] else parts[0]
        if ':' in user_pass:
            user = user_pass.split(':')[0]
            return url.replace(user_pass, f"{user}:***")
    return url


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def engine_options(url: str) -> dict:
    """
    Options cho create_async_engine theo loại database.

    SQLite (aiosqlite) không dùng connection pool: mỗi session mở connection
    riêng, tránh chia sẻ connection giữa các event loop.
    """
    if is_sqlite_url(url):
        return {
            "echo": False,
            "poolclass": NullPool,
        }

    return {
        "echo": False,
        "pool_pre_ping": True,  # Kiểm tra connection trước khi dùng
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,  # Recycle connections sau 1 giờ để tránh stale connections
        "pool_timeout": 30,
        "connect_args": {
            "command_timeout": 60,
            "server_settings": {
                "application_name": "personacart_api"
            }
        },
    }


# Normalize database URL
normalized_db_url = normalize_database_url(settings.database_url)

logger.info(f"Database URL: {mask_url(normalized_db_url)}")

# Create async engine
engine = create_async_engine(normalized_db_url, **engine_options(normalized_db_url))

# Create session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)


async def get_db() -> AsyncSession:
    """
    Dependency để lấy database session.
    Sử dụng trong FastAPI routes.

    Commit khi request thành công, rollback và raise lại nếu có exception.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
