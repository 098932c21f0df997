"""단위 테스트 설정 (DB 없이 라우터 검증)"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.messaging import get_notifier
from app.domains.users.router import get_user_service
from app.domains.users.schemas import UserResponse
from app.main import app


def _make_user_response(
    user_id: int = 1,
    name: str = "Vasya",
    email: str = "vasya@gmail.com",
    age: int = 20,
) -> UserResponse:
    return UserResponse(
        id=user_id, name=name, email=email, age=age, created_at=date.today()
    )


@pytest.fixture
def make_user_response():
    """UserResponse 팩토리"""
    return _make_user_response


@pytest.fixture
def mock_user_service() -> MagicMock:
    """UserService Mock (모든 메서드 AsyncMock)"""
    service = MagicMock()
    service.create_user = AsyncMock()
    service.get_user = AsyncMock()
    service.get_users = AsyncMock(return_value=[])
    service.update_user = AsyncMock()
    service.delete_user = AsyncMock(return_value=None)
    return service


@pytest.fixture
def override_dependencies(mock_user_service, mock_notifier):
    """서비스/알림 의존성을 Mock으로 교체"""
    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    app.dependency_overrides[get_notifier] = lambda: mock_notifier
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(override_dependencies):
    """Mock 의존성 테스트 클라이언트"""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def lenient_api_client(override_dependencies):
    """처리되지 않은 예외를 500 응답으로 받는 테스트 클라이언트"""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client
