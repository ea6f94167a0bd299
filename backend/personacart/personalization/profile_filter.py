"""
Profile Filter
==============

Lọc product catalog theo preferences của một profile.

Input: profile (hoặc None), danh sách products
Output: danh sách products thỏa mãn, giữ nguyên thứ tự ban đầu

Gates (tất cả phải pass):
1. Gender: product Unisex hoặc cùng gender với profile
2. Clothing size: shirtSize phải có trong product.sizes
3. Footwear size: shoeSize phải có trong product.sizes
4. Personal care: personalCare text (lower-case) phải chứa brand (lower-case)

Preference không có / rỗng, hoặc product không có sizes/brand, thì gate
tương ứng không ràng buộc. Các hàm ở đây là pure function, không I/O.
"""

import logging
from typing import Any, Iterable, List, Optional

logger = logging.getLogger(__name__)

UNISEX = "Unisex"
ALL_CATEGORIES = "all"

CLOTHING = "clothing"
FOOTWEAR = "footwear"
PERSONAL_CARE = "personal-care"


def _value(field: Any) -> Any:
    """Lấy giá trị thô của Enum (str Enum) hoặc trả về nguyên giá trị."""
    return getattr(field, "value", field)


def _preference(profile: Any, name: str) -> Optional[str]:
    preferences = getattr(profile, "preferences", None)
    if preferences is None:
        return None
    value = getattr(preferences, name, None)
    return value or None


def passes_gender_gate(profile: Any, product: Any) -> bool:
    product_gender = _value(product.gender)
    return product_gender == UNISEX or product_gender == _value(profile.gender)


def passes_size_gate(profile: Any, product: Any) -> bool:
    category = _value(product.category)
    if category == CLOTHING:
        preferred = _preference(profile, "shirt_size")
    elif category == FOOTWEAR:
        preferred = _preference(profile, "shoe_size")
    else:
        return True

    sizes = getattr(product, "sizes", None)
    # List sizes rỗng vẫn là có dữ liệu size
    if not preferred or sizes is None:
        return True
    return preferred in sizes


def passes_brand_gate(profile: Any, product: Any) -> bool:
    if _value(product.category) != PERSONAL_CARE:
        return True

    personal_care = _preference(profile, "personal_care")
    brand = getattr(product, "brand", None)
    if not personal_care or not brand:
        return True
    # Brand nằm trong text preference, không phải ngược lại
    return brand.lower() in personal_care.lower()


def matches_profile(profile: Any, product: Any) -> bool:
    """True nếu product pass tất cả gates cho profile."""
    return (
        passes_gender_gate(profile, product)
        and passes_size_gate(profile, product)
        and passes_brand_gate(profile, product)
    )


def filter_products(profile: Optional[Any], products: Iterable[Any]) -> List[Any]:
    """
    Lọc products theo profile.

    Args:
        profile: Profile có gender và preferences (shirt_size, shoe_size,
            personal_care); None thì không lọc
        products: Danh sách products (id, category, sizes, gender, brand)

    Returns:
        List products thỏa mãn, cùng thứ tự với input
    """
    products = list(products)
    if profile is None:
        return products

    filtered = [product for product in products if matches_profile(profile, product)]
    logger.debug(
        f"Profile filter kept {len(filtered)}/{len(products)} products "
        f"for profile {getattr(profile, 'id', None)}"
    )
    return filtered


def matches_query(product: Any, query: Optional[str]) -> bool:
    """Tìm kiếm substring không phân biệt hoa thường trong name hoặc brand."""
    if not query:
        return True
    needle = query.strip().lower()
    if not needle:
        return True
    name = (getattr(product, "name", None) or "").lower()
    brand = (getattr(product, "brand", None) or "").lower()
    return needle in name or needle in brand


def filter_catalog(
    products: Iterable[Any],
    profile: Optional[Any] = None,
    category: Optional[str] = None,
    query: Optional[str] = None
) -> List[Any]:
    """
    Lọc catalog theo search query, category rồi profile.

    Args:
        products: Danh sách products
        profile: Active profile (optional)
        category: Category cần lấy; None hoặc "all" là tất cả
        query: Search text (optional)

    Returns:
        List products thỏa mãn, giữ nguyên thứ tự
    """
    category = _value(category)
    selected = [
        product for product in products
        if matches_query(product, query)
        and (not category or category == ALL_CATEGORIES or _value(product.category) == category)
    ]
    return filter_products(profile, selected)
