"""Users 도메인 모듈

사용자 CRUD와 생성/삭제 액션 알림을 담당하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (UserView, UserResponse, UserListItem)
    - mapper.py: 엔티티 ↔ 스키마 변환
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (생성, 조회, 수정, 삭제)
    - router.py: API 엔드포인트 (생성/삭제 알림 포함)
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import UserErrorCode, UserNotFoundException
from app.domains.users.models import User
from app.domains.users.router import router
from app.domains.users.schemas import UserListItem, UserResponse, UserView
from app.domains.users.service import UserService

__all__ = [
    "User",
    "UserService",
    "UserView",
    "UserResponse",
    "UserListItem",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
]
