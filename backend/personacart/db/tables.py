"""
Định nghĩa tables cho PersonaCart bằng SQLAlchemy Core.

Schema giữ đơn giản để chạy được trên cả PostgreSQL (asyncpg) và SQLite
(aiosqlite, dùng cho test):
- ID dạng text (uuid) thay vì SERIAL
- sizes / preferences lưu JSON text
- timestamps lưu ISO-8601 text
"""

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()


users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("created_at", String(40), nullable=False),
    Column("last_login", String(40), nullable=True),
)


profiles = Table(
    "profiles",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("name", Text, nullable=False),
    Column("age_group", String(16), nullable=False),
    Column("gender", String(16), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("preferences", Text, nullable=True),
    # Thứ tự tạo, để list profiles ổn định
    Column("sort_order", Integer, nullable=False, default=0),
)


products = Table(
    "products",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("category", String(32), nullable=False),
    Column("price", Float, nullable=False),
    Column("sizes", Text, nullable=True),
    Column("gender", String(16), nullable=False),
    Column("brand", Text, nullable=True),
    Column("sort_order", Integer, nullable=False, default=0),
)


cart_items = Table(
    "cart_items",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("product_id", String(36), ForeignKey("products.id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("sort_order", Integer, nullable=False, default=0),
    UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
)
