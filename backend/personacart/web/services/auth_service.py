"""
Authentication service - xử lý logic đăng ký và đăng nhập.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from personacart.web.schemas.auth import RegisterRequest, LoginRequest, UserResponse
from personacart.web.utils.password import hash_password, verify_password
from personacart.web.utils.jwt import create_access_token

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username already exists"
INVALID_CREDENTIALS = "Invalid username or password"


class AuthService:
    """Service xử lý authentication."""

    @staticmethod
    async def get_user_by_id(
        db: AsyncSession,
        user_id: str
    ) -> Optional[UserResponse]:
        """Lấy user theo ID, None nếu không tồn tại."""
        result = await db.execute(
            text("""
                SELECT id, username, created_at, last_login
                FROM users
                WHERE id = :user_id
            """),
            {"user_id": user_id}
        )

        user_row = result.fetchone()
        if not user_row:
            return None

        return UserResponse(
            id=user_row.id,
            username=user_row.username,
            created_at=user_row.created_at,
            last_login=user_row.last_login
        )

    @staticmethod
    async def register(
        db: AsyncSession,
        register_data: RegisterRequest
    ) -> tuple[Optional[UserResponse], Optional[str]]:
        """
        Đăng ký user mới.

        Args:
            db: Database session
            register_data: Thông tin đăng ký

        Returns:
            Tuple (UserResponse, error_message)
            - Nếu thành công: (UserResponse, None)
            - Nếu username đã tồn tại: (None, USERNAME_TAKEN)
        """
        result = await db.execute(
            text("SELECT id FROM users WHERE username = :username"),
            {"username": register_data.username}
        )
        if result.fetchone():
            return None, USERNAME_TAKEN

        user_id = uuid.uuid4().hex
        created_at = datetime.now(timezone.utc).isoformat()

        try:
            await db.execute(
                text("""
                    INSERT INTO users (id, username, password_hash, created_at)
                    VALUES (:id, :username, :password_hash, :created_at)
                """),
                {
                    "id": user_id,
                    "username": register_data.username,
                    "password_hash": hash_password(register_data.password),
                    "created_at": created_at
                }
            )
            await db.commit()
        except IntegrityError:
            # Đăng ký đồng thời cùng username
            await db.rollback()
            return None, USERNAME_TAKEN

        logger.info(f"Registered user {register_data.username} ({user_id})")

        user = UserResponse(
            id=user_id,
            username=register_data.username,
            created_at=created_at,
            last_login=None
        )
        return user, None

    @staticmethod
    async def login(
        db: AsyncSession,
        login_data: LoginRequest
    ) -> tuple[Optional[UserResponse], Optional[str]]:
        """
        Đăng nhập user.

        Returns:
            Tuple (UserResponse, error_message)
        """
        result = await db.execute(
            text("""
                SELECT id, username, password_hash, created_at
                FROM users
                WHERE username = :username
            """),
            {"username": login_data.username.strip().lower()}
        )

        user_row = result.fetchone()

        if not user_row:
            return None, INVALID_CREDENTIALS

        if not verify_password(login_data.password, user_row.password_hash):
            logger.info(f"Failed login for user {user_row.username}")
            return None, INVALID_CREDENTIALS

        last_login = datetime.now(timezone.utc).isoformat()
        await db.execute(
            text("""
                UPDATE users
                SET last_login = :last_login
                WHERE id = :user_id
            """),
            {"user_id": user_row.id, "last_login": last_login}
        )
        await db.commit()

        user = UserResponse(
            id=user_row.id,
            username=user_row.username,
            created_at=user_row.created_at,
            last_login=last_login
        )

        return user, None

    @staticmethod
    def create_token(user: UserResponse) -> str:
        """
        Tạo JWT token cho user.

        Args:
            user: UserResponse object

        Returns:
            JWT token string
        """
        return create_access_token(user.id, user.username)
