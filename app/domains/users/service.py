"""Users 도메인 서비스

사용자 CRUD 비즈니스 로직 계층입니다. 트랜잭션은 요청 단위 세션
(get_db)이 관리합니다.
"""

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.users import mapper
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserResponse, UserView

logger = get_logger(__name__)


class UserService:
    """사용자 서비스"""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def _get_existing(self, user_id: int) -> User:
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id=user_id)
        return user

    async def create_user(self, user_data: UserView) -> UserResponse:
        """사용자 생성

        요청에 포함된 id는 무시하고 저장소가 발급한 id를 사용합니다.

        Args:
            user_data: 사용자 데이터

        Returns:
            생성된 사용자 (id, created_at 포함)

        Raises:
            IntegrityError: email이 이미 사용 중인 경우
        """
        user = await self.repository.save(mapper.to_record(user_data))

        logger.info(
            "User created",
            extra={
                "request_id": get_request_id(),
                "user_id": user.id,
                "action": "created",
            },
        )
        return mapper.to_view(user)

    async def get_user(self, user_id: int) -> UserResponse:
        """사용자 조회

        Args:
            user_id: 사용자 ID

        Returns:
            사용자

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        return mapper.to_view(await self._get_existing(user_id))

    async def get_users(self) -> list[UserResponse]:
        """전체 사용자 목록 조회"""
        users = await self.repository.get_list()
        return [mapper.to_view(user) for user in users]

    async def update_user(
        self, user_id: int, user_data: UserView
    ) -> UserResponse:
        """사용자 수정

        name, email, age만 갱신합니다. id와 created_at은 유지됩니다.

        Args:
            user_id: 사용자 ID
            user_data: 수정할 데이터

        Returns:
            수정된 사용자

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self._get_existing(user_id)
        mapper.apply_update(user_data, user)
        user = await self.repository.save(user)

        logger.info(
            "User updated",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "action": "updated",
            },
        )
        return mapper.to_view(user)

    async def delete_user(self, user_id: int) -> None:
        """사용자 삭제

        존재하지 않는 사용자여도 예외 없이 종료합니다.

        Args:
            user_id: 삭제할 사용자 ID
        """
        await self.repository.delete_by_id(user_id)

        logger.info(
            "User deleted",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "action": "deleted",
            },
        )
