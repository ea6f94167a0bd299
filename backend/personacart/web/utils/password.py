"""
Password hashing với bcrypt.
"""
import bcrypt


def hash_password(password: str) -> str:
    """Hash password, trả về chuỗi bcrypt để lưu vào database."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Kiểm tra password với hash đã lưu."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Hash không đúng định dạng bcrypt
        return False
