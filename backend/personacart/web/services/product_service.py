"""
Product Service
===============

Service để lấy catalog products từ database. Catalog nhỏ nên được load toàn
bộ rồi lọc trong memory bằng personalization filter.
"""

import json
import logging
from typing import Optional, List
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.personalization import filter_catalog
from personacart.web.schemas.product import ProductResponse
from personacart.web.schemas.profile import ProfileResponse

logger = logging.getLogger(__name__)


def _load_sizes(raw) -> Optional[List[str]]:
    """Parse cột sizes (JSON text) thành list, None nếu không có."""
    if raw is None:
        return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning(f"Invalid sizes JSON: {raw!r}")
            return None
    if not isinstance(raw, list):
        return None
    return [str(size) for size in raw]


def row_to_product(row) -> ProductResponse:
    return ProductResponse(
        id=row.id,
        name=row.name,
        category=row.category,
        price=float(row.price),
        sizes=_load_sizes(row.sizes),
        gender=row.gender,
        brand=row.brand
    )


class ProductService:
    """Service xử lý product catalog."""

    @staticmethod
    async def get_all_products(db: AsyncSession) -> List[ProductResponse]:
        """Lấy toàn bộ catalog theo thứ tự seed."""
        result = await db.execute(
            text("""
                SELECT id, name, category, price, sizes, gender, brand
                FROM products
                ORDER BY sort_order, id
            """)
        )
        return [row_to_product(row) for row in result.fetchall()]

    @staticmethod
    async def get_product(
        db: AsyncSession,
        product_id: str
    ) -> Optional[ProductResponse]:
        """
        Lấy product theo ID.

        Returns:
            ProductResponse hoặc None nếu không tìm thấy
        """
        result = await db.execute(
            text("""
                SELECT id, name, category, price, sizes, gender, brand
                FROM products
                WHERE id = :product_id
            """),
            {"product_id": product_id}
        )
        row = result.fetchone()
        return row_to_product(row) if row else None

    @staticmethod
    async def list_products(
        db: AsyncSession,
        profile: Optional[ProfileResponse] = None,
        category: Optional[str] = None,
        query: Optional[str] = None
    ) -> List[ProductResponse]:
        """
        Lấy catalog, lọc theo search query, category và profile (nếu có).

        Args:
            db: Database session
            profile: Active profile, None thì không cá nhân hóa
            category: Category filter
            query: Search query (tìm trong name/brand)

        Returns:
            List of ProductResponse
        """
        products = await ProductService.get_all_products(db)
        return filter_catalog(products, profile=profile, category=category, query=query)
