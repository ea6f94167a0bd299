"""
Pydantic schemas cho shopping cart.
"""
from typing import Optional
from pydantic import BaseModel, Field

from personacart.web.schemas.product import ProductResponse


class AddToCartRequest(BaseModel):
    """Schema cho request thêm product vào cart."""
    product_id: str = Field(..., alias="productId", min_length=1, description="Product ID")
    quantity: int = Field(1, ge=1, description="Số lượng (tối thiểu 1)")

    class Config:
        populate_by_name = True


class UpdateCartItemRequest(BaseModel):
    """Schema cho request cập nhật quantity của item."""
    quantity: int = Field(..., ge=1, description="Số lượng mới (tối thiểu 1)")


class CartItemResponse(BaseModel):
    """Schema cho response cart item kèm thông tin product."""
    id: str
    product_id: str = Field(..., alias="productId")
    quantity: int
    product: Optional[ProductResponse] = None
    subtotal: float = 0.0

    class Config:
        populate_by_name = True
        from_attributes = True


class CartResponse(BaseModel):
    """Schema cho response cart."""
    owner_id: str = Field(..., alias="ownerId")
    items: list[CartItemResponse] = []
    total_items: int = Field(0, alias="totalItems")
    total_price: float = Field(0.0, alias="totalPrice")

    class Config:
        populate_by_name = True
        from_attributes = True
