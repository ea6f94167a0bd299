"""
Product API routes
==================

API endpoints để lấy catalog, có thể cá nhân hóa theo profile.
"""

import logging
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.web.schemas.auth import UserResponse, ErrorResponse
from personacart.web.schemas.product import Category, ProductResponse
from personacart.web.services.product_service import ProductService
from personacart.web.services.profile_service import ProfileService
from personacart.web.utils.auth_middleware import get_current_user
from personacart.web.utils.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List products",
    description="Lấy catalog, lọc theo category/query và preferences của profile",
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Profile not found"}
    }
)
async def list_products(
    profile_id: Optional[str] = Query(None, description="Active profile ID để cá nhân hóa"),
    category: Optional[Category] = Query(None, description="Filter by category"),
    query: Optional[str] = Query(None, description="Search trong name/brand"),
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Lấy danh sách products.

    Không có profile_id: trả về toàn bộ catalog (sau category/query).
    Có profile_id: chỉ trả về products khớp gender, size và brand
    preferences của profile.
    """
    profile = None
    if profile_id:
        profile = await ProfileService.get_profile(db, current_user.id, profile_id)
        if not profile:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found"
            )

    return await ProductService.list_products(
        db,
        profile=profile,
        category=category,
        query=query
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID",
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Product not found"}
    }
)
async def get_product(
    product_id: str,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Lấy thông tin product theo ID."""
    product = await ProductService.get_product(db, product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product not found: {product_id}"
        )

    return product
