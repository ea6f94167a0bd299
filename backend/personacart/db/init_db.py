"""
Module khởi tạo database cho PersonaCart.

Chức năng:
- Tạo tables (idempotent, metadata.create_all)
- Seed sample products nếu bảng products đang rỗng

Chạy trực tiếp:
    python backend/scripts/setup_database.py
"""

import json
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from personacart.db.seed import SAMPLE_PRODUCTS
from personacart.db.tables import metadata

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Tạo tất cả tables nếu chưa tồn tại."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database tables ready")


async def drop_tables(engine: AsyncEngine) -> None:
    """Xóa tất cả tables (dùng cho reset / test)."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    logger.info("Database tables dropped")


async def seed_products(engine: AsyncEngine) -> int:
    """
    Seed sample products nếu bảng products rỗng.

    Args:
        engine: Async engine

    Returns:
        Số products đã insert (0 nếu bảng đã có dữ liệu)
    """
    async with engine.begin() as conn:
        result = await conn.execute(text("SELECT COUNT(*) AS count FROM products"))
        count = result.scalar()

        if count:
            logger.info(f"Products table already has {count} rows, skipping seed")
            return 0

        for sort_order, (product_id, name, category, price, sizes, gender, brand) in enumerate(SAMPLE_PRODUCTS):
            await conn.execute(
                text("""
                    INSERT INTO products (id, name, category, price, sizes, gender, brand, sort_order)
                    VALUES (:id, :name, :category, :price, :sizes, :gender, :brand, :sort_order)
                """),
                {
                    "id": product_id,
                    "name": name,
                    "category": category,
                    "price": price,
                    "sizes": json.dumps(sizes) if sizes is not None else None,
                    "gender": gender,
                    "brand": brand,
                    "sort_order": sort_order,
                }
            )

    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)


async def initialize_database(engine: AsyncEngine, seed: bool = True) -> None:
    """Tạo tables và seed products (nếu được bật)."""
    await create_tables(engine)
    if seed:
        await seed_products(engine)
