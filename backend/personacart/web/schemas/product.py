"""
Product schemas cho Product API.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field


class Category(str, Enum):
    """Danh mục sản phẩm."""
    CLOTHING = "clothing"
    FOOTWEAR = "footwear"
    PERSONAL_CARE = "personal-care"


class ProductGender(str, Enum):
    """Giới tính mục tiêu của sản phẩm; Unisex khớp với mọi profile."""
    MALE = "Male"
    FEMALE = "Female"
    UNISEX = "Unisex"


class ProductResponse(BaseModel):
    """
    Response schema cho product.
    """
    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Tên sản phẩm")
    category: Category = Field(..., description="Danh mục")
    price: float = Field(..., ge=0, description="Giá")
    sizes: Optional[List[str]] = Field(None, description="Danh sách size (chỉ clothing/footwear)")
    gender: ProductGender = Field(..., description="Giới tính mục tiêu")
    brand: Optional[str] = Field(None, description="Brand")

    class Config:
        from_attributes = True
