"""
Authentication dependencies cho FastAPI.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.web.utils.database import get_db
from personacart.web.utils.jwt import get_token_user_id
from personacart.web.schemas.auth import UserResponse
from personacart.web.services.auth_service import AuthService

security = HTTPBearer()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> UserResponse:
    """
    Dependency để lấy current user từ JWT token.

    Args:
        credentials: HTTP Bearer token từ header
        db: Database session

    Returns:
        UserResponse object

    Raises:
        HTTPException: 401 nếu token không hợp lệ hoặc user không tồn tại
    """
    user_id = get_token_user_id(credentials.credentials)

    if not user_id:
        raise _unauthorized("Invalid or expired token")

    user = await AuthService.get_user_by_id(db, user_id)

    if not user:
        raise _unauthorized("User not found")

    return user
