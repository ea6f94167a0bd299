"""
Personalization module cho PersonaCart.

Components:
- profile_filter: Lọc catalog theo gender/size/brand preferences của profile
"""

from personacart.personalization.profile_filter import (
    filter_catalog,
    filter_products,
    matches_profile,
    matches_query,
)

__all__ = [
    "filter_catalog",
    "filter_products",
    "matches_profile",
    "matches_query",
]
