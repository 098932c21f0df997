"""Users 도메인 리포지토리

users 테이블에 대한 데이터 접근 계층입니다. email 유일성 위반은
IntegrityError 그대로 올라갑니다.
"""

from typing import Optional, Sequence, cast

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.users.models import User


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """ID로 사용자 조회

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 객체 또는 None
        """
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_list(self) -> Sequence[User]:
        """전체 사용자 목록 조회 (ID 오름차순)"""
        result = await self.session.execute(select(User).order_by(User.id))
        return cast(Sequence[User], result.scalars().all())

    async def save(self, user: User) -> User:
        """사용자 저장 (신규/수정 공용)

        flush 후 refresh하여 DB가 발급한 id와 기본값을 반영합니다.

        Args:
            user: 저장할 사용자 객체

        Returns:
            저장된 사용자 객체

        Raises:
            IntegrityError: email이 중복된 경우
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete_by_id(self, user_id: int) -> None:
        """ID로 사용자 삭제 (없는 ID여도 오류 없음)

        Args:
            user_id: 삭제할 사용자 ID
        """
        await self.session.execute(delete(User).where(User.id == user_id))
