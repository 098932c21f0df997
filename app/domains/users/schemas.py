"""Users 도메인 스키마 정의"""

from datetime import date
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_AGE = 14


class UserView(BaseModel):
    """사용자 요청 스키마 (생성/수정 공용)

    id와 created_at은 응답과 같은 모양을 유지하기 위해 받기만 하며,
    서버에서 무시됩니다.
    """

    id: Optional[int] = Field(
        None, description="사용자 ID (무시됨, null 권장)"
    )
    name: str = Field(
        ..., min_length=1, max_length=255, description="이름", examples=["Vasya"]
    )
    email: str = Field(
        ..., max_length=320, description="이메일", examples=["user@example.com"]
    )
    age: int = Field(..., ge=MIN_AGE, description=f"나이 (최소 {MIN_AGE}세)")
    created_at: Optional[date] = Field(None, description="생성일 (무시됨)")

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("이름은 비어 있을 수 없습니다.")
        return v

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        """형식만 검사하고 입력값은 그대로 보존 (정규화하지 않음)"""
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        return v


class UserResponse(BaseModel):
    """사용자 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int
    created_at: date


class UserListItem(UserResponse):
    """목록 응답 항목 (항목별 self 링크 포함)"""

    links: dict[str, str] = Field(default_factory=dict)
