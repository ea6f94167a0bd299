"""
Profile service - CRUD family profiles của một account.

Mọi query đều lọc theo user_id: profile chỉ owner mới thấy và sửa được.
"""
import json
import logging
import uuid
from typing import Optional, List
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from personacart.web.schemas.profile import (
    Preferences,
    ProfileCreateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
)

logger = logging.getLogger(__name__)


def _load_preferences(raw) -> Preferences:
    """Parse cột preferences (JSON text) thành Preferences."""
    if not raw:
        return Preferences()
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Invalid preferences JSON in profiles table, ignoring")
            return Preferences()
    if not isinstance(raw, dict):
        return Preferences()
    return Preferences.model_validate(raw)


def _dump_preferences(preferences: Preferences) -> str:
    return json.dumps(preferences.model_dump(by_alias=True, exclude_none=True))


def _row_to_profile(row) -> ProfileResponse:
    return ProfileResponse(
        id=row.id,
        owner_id=row.user_id,
        name=row.name,
        age_group=row.age_group,
        gender=row.gender,
        avatar=row.avatar,
        preferences=_load_preferences(row.preferences)
    )


class ProfileService:
    """Service xử lý family profiles."""

    @staticmethod
    async def list_profiles(
        db: AsyncSession,
        user_id: str
    ) -> List[ProfileResponse]:
        """Lấy tất cả profiles của user, theo thứ tự tạo."""
        result = await db.execute(
            text("""
                SELECT id, user_id, name, age_group, gender, avatar, preferences
                FROM profiles
                WHERE user_id = :user_id
                ORDER BY sort_order
            """),
            {"user_id": user_id}
        )
        return [_row_to_profile(row) for row in result.fetchall()]

    @staticmethod
    async def get_profile(
        db: AsyncSession,
        user_id: str,
        profile_id: str
    ) -> Optional[ProfileResponse]:
        """
        Lấy một profile của user.

        Returns:
            ProfileResponse hoặc None nếu không tồn tại / thuộc user khác
        """
        result = await db.execute(
            text("""
                SELECT id, user_id, name, age_group, gender, avatar, preferences
                FROM profiles
                WHERE user_id = :user_id AND id = :profile_id
            """),
            {"user_id": user_id, "profile_id": profile_id}
        )
        row = result.fetchone()
        return _row_to_profile(row) if row else None

    @staticmethod
    async def create_profile(
        db: AsyncSession,
        user_id: str,
        profile_data: ProfileCreateRequest
    ) -> ProfileResponse:
        """
        Tạo profile mới với ID sinh tự động.

        Args:
            db: Database session
            user_id: Owner ID
            profile_data: Thông tin profile

        Returns:
            ProfileResponse vừa tạo
        """
        profile_id = uuid.uuid4().hex

        await db.execute(
            text("""
                INSERT INTO profiles (id, user_id, name, age_group, gender, avatar, preferences, sort_order)
                VALUES (
                    :id, :user_id, :name, :age_group, :gender, :avatar, :preferences,
                    (SELECT COALESCE(MAX(sort_order), 0) + 1 FROM profiles WHERE user_id = :user_id)
                )
            """),
            {
                "id": profile_id,
                "user_id": user_id,
                "name": profile_data.name,
                "age_group": profile_data.age_group.value,
                "gender": profile_data.gender.value,
                "avatar": profile_data.avatar,
                "preferences": _dump_preferences(profile_data.preferences)
            }
        )
        await db.commit()

        logger.info(f"Created profile {profile_id} for user {user_id}")

        return ProfileResponse(
            id=profile_id,
            owner_id=user_id,
            name=profile_data.name,
            age_group=profile_data.age_group,
            gender=profile_data.gender,
            avatar=profile_data.avatar,
            preferences=profile_data.preferences
        )

    @staticmethod
    async def update_profile(
        db: AsyncSession,
        user_id: str,
        profile_id: str,
        profile_data: ProfileUpdateRequest
    ) -> Optional[ProfileResponse]:
        """
        Cập nhật profile (thay thế toàn bộ các field).

        Returns:
            ProfileResponse sau khi cập nhật, None nếu không tìm thấy
        """
        result = await db.execute(
            text("""
                UPDATE profiles
                SET name = :name,
                    age_group = :age_group,
                    gender = :gender,
                    avatar = :avatar,
                    preferences = :preferences
                WHERE user_id = :user_id AND id = :profile_id
            """),
            {
                "name": profile_data.name,
                "age_group": profile_data.age_group.value,
                "gender": profile_data.gender.value,
                "avatar": profile_data.avatar,
                "preferences": _dump_preferences(profile_data.preferences),
                "user_id": user_id,
                "profile_id": profile_id
            }
        )
        await db.commit()

        if result.rowcount == 0:
            return None

        logger.info(f"Updated profile {profile_id} for user {user_id}")
        return await ProfileService.get_profile(db, user_id, profile_id)

    @staticmethod
    async def delete_profile(
        db: AsyncSession,
        user_id: str,
        profile_id: str
    ) -> Optional[ProfileResponse]:
        """
        Xóa profile.

        Returns:
            Profile đã xóa, None nếu không tìm thấy
        """
        profile = await ProfileService.get_profile(db, user_id, profile_id)
        if not profile:
            return None

        await db.execute(
            text("DELETE FROM profiles WHERE user_id = :user_id AND id = :profile_id"),
            {"user_id": user_id, "profile_id": profile_id}
        )
        await db.commit()

        logger.info(f"Deleted profile {profile_id} for user {user_id}")
        return profile
