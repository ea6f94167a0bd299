"""
Shopping cart service - xử lý logic giỏ hàng.

Mỗi user có một cart; mỗi (user, product) chỉ có một dòng cart_items.
"""
import logging
import uuid
from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.web.schemas.cart import AddToCartRequest, UpdateCartItemRequest, CartItemResponse, CartResponse
from personacart.web.services.product_service import row_to_product

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
ITEM_NOT_IN_CART = "Item not found in cart"


class CartService:
    """Service xử lý shopping cart."""

    @staticmethod
    async def get_cart(
        db: AsyncSession,
        user_id: str
    ) -> CartResponse:
        """
        Lấy cart với tất cả items và thông tin product.

        Args:
            db: Database session
            user_id: User ID

        Returns:
            CartResponse (rỗng nếu user chưa có item nào)
        """
        result = await db.execute(
            text("""
                SELECT
                    ci.id AS item_id,
                    ci.quantity,
                    p.id,
                    p.name,
                    p.category,
                    p.price,
                    p.sizes,
                    p.gender,
                    p.brand
                FROM cart_items ci
                JOIN products p ON ci.product_id = p.id
                WHERE ci.user_id = :user_id
                ORDER BY ci.sort_order
            """),
            {"user_id": user_id}
        )

        items = []
        total_items = 0
        total_price = 0.0

        for row in result.fetchall():
            product = row_to_product(row)
            subtotal = round(product.price * row.quantity, 2)
            items.append(CartItemResponse(
                id=row.item_id,
                product_id=product.id,
                quantity=row.quantity,
                product=product,
                subtotal=subtotal
            ))
            total_items += row.quantity
            total_price += subtotal

        return CartResponse(
            owner_id=user_id,
            items=items,
            total_items=total_items,
            total_price=round(total_price, 2)
        )

    @staticmethod
    async def add_item(
        db: AsyncSession,
        user_id: str,
        item_data: AddToCartRequest
    ) -> tuple[bool, Optional[str]]:
        """
        Thêm product vào cart hoặc tăng quantity nếu đã có.

        Args:
            db: Database session
            user_id: User ID
            item_data: Thông tin item cần thêm

        Returns:
            Tuple (success, error_message)
        """
        # Kiểm tra product có tồn tại không
        result = await db.execute(
            text("SELECT id FROM products WHERE id = :product_id"),
            {"product_id": item_data.product_id}
        )

        if not result.fetchone():
            return False, PRODUCT_NOT_FOUND

        # Upsert trên uq_cart_items_user_product, kể cả khi hai request add song song
        await db.execute(
            text("""
                INSERT INTO cart_items (id, user_id, product_id, quantity, sort_order)
                VALUES (
                    :id, :user_id, :product_id, :quantity,
                    (SELECT COALESCE(MAX(sort_order), 0) + 1 FROM cart_items WHERE user_id = :user_id)
                )
                ON CONFLICT (user_id, product_id)
                DO UPDATE SET quantity = cart_items.quantity + excluded.quantity
            """),
            {
                "id": uuid.uuid4().hex,
                "user_id": user_id,
                "product_id": item_data.product_id,
                "quantity": item_data.quantity
            }
        )
        logger.debug(f"Cart {user_id}: added {item_data.quantity} x product {item_data.product_id}")

        await db.commit()
        return True, None

    @staticmethod
    async def update_item(
        db: AsyncSession,
        user_id: str,
        item_id: str,
        item_data: UpdateCartItemRequest
    ) -> tuple[bool, Optional[str]]:
        """
        Cập nhật quantity của item trong cart.

        Returns:
            Tuple (success, error_message)
        """
        result = await db.execute(
            text("""
                UPDATE cart_items
                SET quantity = :quantity
                WHERE user_id = :user_id AND id = :item_id
            """),
            {"user_id": user_id, "item_id": item_id, "quantity": item_data.quantity}
        )
        await db.commit()

        if result.rowcount == 0:
            return False, ITEM_NOT_IN_CART

        return True, None

    @staticmethod
    async def remove_item(
        db: AsyncSession,
        user_id: str,
        item_id: str
    ) -> tuple[bool, Optional[str]]:
        """
        Xóa item khỏi cart.

        Returns:
            Tuple (success, error_message)
        """
        result = await db.execute(
            text("DELETE FROM cart_items WHERE user_id = :user_id AND id = :item_id"),
            {"user_id": user_id, "item_id": item_id}
        )
        await db.commit()

        if result.rowcount == 0:
            return False, ITEM_NOT_IN_CART

        return True, None

    @staticmethod
    async def clear_cart(
        db: AsyncSession,
        user_id: str
    ) -> int:
        """
        Xóa tất cả items khỏi cart.

        Returns:
            Số items đã xóa
        """
        result = await db.execute(
            text("DELETE FROM cart_items WHERE user_id = :user_id"),
            {"user_id": user_id}
        )
        await db.commit()

        logger.debug(f"Cart {user_id}: cleared {result.rowcount} items")
        return result.rowcount
