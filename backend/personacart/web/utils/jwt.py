"""
JWT token utilities cho PersonaCart.

Claims của access token:
    sub       user id (uuid4 hex, cột users.id)
    username  username đã lower-case, chỉ để hiển thị; không dùng để xác thực
    iss       luôn là TOKEN_ISSUER
    iat, exp  thời điểm tạo / hết hạn (UTC)
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from personacart.config import settings

TOKEN_ISSUER = "personacart"


def create_access_token(
    user_id: str,
    username: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Tạo access token cho một user.

    Args:
        user_id: users.id (uuid4 hex), ghi vào claim sub
        username: Username của user
        expires_delta: Thời gian sống của token, mặc định JWT_EXPIRE_MINUTES

    Returns:
        Encoded JWT token string
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    claims = {
        "sub": user_id,
        "username": username,
        "iss": TOKEN_ISSUER,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode và verify token: chữ ký, exp, iss và sub không rỗng.

    Returns:
        Claims nếu token hợp lệ, None nếu không
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=TOKEN_ISSUER
        )
    except JWTError:
        return None

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return claims


def get_token_user_id(token: str) -> Optional[str]:
    """Trả về user id (claim sub) của token hợp lệ."""
    claims = decode_access_token(token)
    return claims["sub"] if claims else None
