"""
Pydantic schemas cho family profiles.

Field names trên JSON là camelCase (ageGroup, shirtSize, ...) để khớp với
frontend; attribute Python là snake_case.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class AgeGroup(str, Enum):
    """Nhóm tuổi của profile."""
    CHILD = "Child"
    TEEN = "Teen"
    ADULT = "Adult"
    SENIOR = "Senior"


class Gender(str, Enum):
    """Giới tính của profile."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Preferences(BaseModel):
    """
    Shopping preferences của một profile.

    Mỗi field đều optional; field rỗng/không có nghĩa là không ràng buộc.
    """
    shirt_size: Optional[str] = Field(None, alias="shirtSize", description="Size áo, ví dụ 'M'")
    shoe_size: Optional[str] = Field(None, alias="shoeSize", description="Size giày, ví dụ '9'")
    personal_care: Optional[str] = Field(
        None,
        alias="personalCare",
        description="Free text các brand personal-care yêu thích"
    )

    @field_validator('shirt_size', 'shoe_size', 'personal_care', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """Size dạng số (9) được chuyển thành "9"; chuỗi rỗng thành None."""
        if v is None:
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    class Config:
        populate_by_name = True
        from_attributes = True


class ProfileBase(BaseModel):
    """Các field chung cho create/update."""
    name: str = Field(..., min_length=1, max_length=100, description="Tên hiển thị")
    age_group: AgeGroup = Field(..., alias="ageGroup", description="Nhóm tuổi")
    gender: Gender = Field(..., description="Giới tính")
    avatar: Optional[str] = Field(None, max_length=16, description="Avatar glyph (emoji)")
    preferences: Preferences = Field(default_factory=Preferences)

    class Config:
        populate_by_name = True


class ProfileCreateRequest(ProfileBase):
    """Schema cho request tạo profile."""
    pass


class ProfileUpdateRequest(ProfileBase):
    """Schema cho request cập nhật profile (thay thế toàn bộ)."""
    pass


class ProfileResponse(ProfileBase):
    """Schema cho response profile."""
    id: str
    owner_id: str = Field(..., alias="ownerId")

    class Config:
        populate_by_name = True
        from_attributes = True


class ProfileDeleteResponse(BaseModel):
    """Schema cho response sau khi xóa profile."""
    success: bool = True
    deleted: ProfileResponse
