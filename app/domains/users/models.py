"""Users 도메인 모델 정의"""

from datetime import date

from sqlalchemy import BigInteger, Date, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.core.utils.datetime import today_utc


class User(Base):
    """사용자 모델

    ID는 데이터베이스가 발급하며, email은 전체 사용자 사이에서 유일합니다.
    created_at은 생성 시 한 번만 기록됩니다.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=True,
        comment="사용자 ID",
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="이름"
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, comment="이메일"
    )
    age: Mapped[int] = mapped_column(Integer, nullable=False, comment="나이")
    created_at: Mapped[date] = mapped_column(
        Date,
        default=today_utc,
        server_default=func.current_date(),
        nullable=False,
        comment="생성일",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
