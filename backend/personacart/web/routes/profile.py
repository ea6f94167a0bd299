"""
Family profile routes.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.web.utils.database import get_db
from personacart.web.utils.auth_middleware import get_current_user
from personacart.web.schemas.auth import UserResponse, ErrorResponse
from personacart.web.schemas.profile import (
    ProfileCreateRequest,
    ProfileDeleteResponse,
    ProfileResponse,
    ProfileUpdateRequest,
)
from personacart.web.services.profile_service import ProfileService

router = APIRouter(prefix="/api/profiles", tags=["Profiles"])

PROFILE_NOT_FOUND = "Profile not found"


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=PROFILE_NOT_FOUND
    )


@router.get(
    "",
    response_model=List[ProfileResponse],
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"}
    }
)
async def list_profiles(
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Lấy tất cả profiles của user hiện tại."""
    return await ProfileService.list_profiles(db, current_user.id)


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Profile not found"}
    }
)
async def get_profile(
    profile_id: str,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Lấy một profile theo ID (chỉ profile của user hiện tại)."""
    profile = await ProfileService.get_profile(db, current_user.id, profile_id)

    if not profile:
        raise _not_found()

    return profile


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"}
    }
)
async def create_profile(
    profile_data: ProfileCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Tạo profile mới.

    - **name**: Tên hiển thị
    - **ageGroup**: Child | Teen | Adult | Senior
    - **gender**: Male | Female | Other
    - **avatar**: Emoji (optional)
    - **preferences**: shirtSize, shoeSize, personalCare (đều optional)
    """
    return await ProfileService.create_profile(db, current_user.id, profile_data)


@router.put(
    "/{profile_id}",
    response_model=ProfileResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Profile not found"}
    }
)
async def update_profile(
    profile_id: str,
    profile_data: ProfileUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Cập nhật profile (thay thế toàn bộ các field)."""
    profile = await ProfileService.update_profile(db, current_user.id, profile_id, profile_data)

    if not profile:
        raise _not_found()

    return profile


@router.delete(
    "/{profile_id}",
    response_model=ProfileDeleteResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        404: {"model": ErrorResponse, "description": "Profile not found"}
    }
)
async def delete_profile(
    profile_id: str,
    current_user: UserResponse = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Xóa profile, trả về profile đã xóa."""
    profile = await ProfileService.delete_profile(db, current_user.id, profile_id)

    if not profile:
        raise _not_found()

    return ProfileDeleteResponse(success=True, deleted=profile)
