"""
Shopping cart routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.web.utils.database import get_db
from personacart.web.utils.auth_middleware import get_current_user
from personacart.web.schemas.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from personacart.web.schemas.auth import UserResponse, ErrorResponse
from personacart.web.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["Shopping Cart"])


@router.get(
    "",
    response_model=CartResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"}
    }
)
async def get_cart(
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Lấy cart của user hiện tại.

    Yêu cầu authentication token trong header:
    ```
    Authorization: Bearer <token>
    ```

    Trả về cart với tất cả items và thông tin product; cart rỗng nếu chưa có item.
    """
    return await CartService.get_cart(db, current_user.id)


@router.post(
    "/items",
    response_model=CartResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Bad request"},
        401: {"model": ErrorResponse, "description": "Unauthorized"}
    }
)
async def add_to_cart(
    item_data: AddToCartRequest,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Thêm product vào cart.

    - **productId**: Product ID
    - **quantity**: Số lượng (tối thiểu 1, mặc định 1)

    Nếu product đã có trong cart, sẽ tăng quantity.
    """
    success, error = await CartService.add_item(db, current_user.id, item_data)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error or "Could not add item to cart"
        )

    return await CartService.get_cart(db, current_user.id)


@router.put(
    "/items/{item_id}",
    response_model=CartResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Item not found in cart"}
    }
)
async def update_cart_item(
    item_id: str,
    item_data: UpdateCartItemRequest,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Cập nhật quantity của item trong cart.

    - **item_id**: Cart item ID (path parameter)
    - **quantity**: Số lượng mới (tối thiểu 1)
    """
    success, error = await CartService.update_item(db, current_user.id, item_id, item_data)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error
        )

    return await CartService.get_cart(db, current_user.id)


@router.delete(
    "/items/{item_id}",
    response_model=CartResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Item not found in cart"}
    }
)
async def remove_from_cart(
    item_id: str,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Xóa item khỏi cart.

    - **item_id**: Cart item ID (path parameter)
    """
    success, error = await CartService.remove_item(db, current_user.id, item_id)

    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error
        )

    return await CartService.get_cart(db, current_user.id)


@router.delete(
    "",
    response_model=CartResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"}
    }
)
async def clear_cart(
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Xóa tất cả items khỏi cart.
    """
    await CartService.clear_cart(db, current_user.id)
    return await CartService.get_cart(db, current_user.id)
