"""User 엔티티 ↔ 스키마 변환

복사 대상 필드를 명시적으로 나열합니다. id는 저장소가, created_at은
생성 시점이 결정하므로 요청 데이터에서 복사하지 않습니다.
"""

from app.domains.users.models import User
from app.domains.users.schemas import UserResponse, UserView

WRITABLE_FIELDS = ("name", "email", "age")


def to_view(user: User) -> UserResponse:
    """엔티티를 응답 스키마로 변환"""
    return UserResponse.model_validate(user)


def to_record(view: UserView) -> User:
    """요청 스키마로 새 엔티티 생성 (id 미지정)"""
    return User(**{field: getattr(view, field) for field in WRITABLE_FIELDS})


def apply_update(view: UserView, user: User) -> User:
    """요청 스키마의 값을 기존 엔티티에 덮어쓰기 (id, created_at 제외)"""
    for field in WRITABLE_FIELDS:
        setattr(user, field, getattr(view, field))
    return user
