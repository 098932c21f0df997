"""Users 도메인 라우터

사용자 CRUD API 엔드포인트입니다. 생성/삭제 시 액션 토픽으로 알림을 보냅니다.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.logging import get_logger
from app.core.messaging import Notifier, get_notifier
from app.core.middlewares.context import get_request_id
from app.core.schemas import (
    APIResponse,
    ErrorResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserListItem, UserResponse, UserView
from app.domains.users.service import UserService

logger = get_logger(__name__)

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "요청 데이터 오류"},
    }
)

NOT_FOUND_RESPONSE = {
    404: {"model": ErrorResponse, "description": "사용자를 찾을 수 없음"}
}


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성"""
    return UserService(UserRepository(session))


# users.id는 BIGINT
MAX_USER_ID = 2**63 - 1

UserId = Annotated[
    int,
    Path(ge=1, le=MAX_USER_ID, description="사용자 ID (BIGINT 범위)"),
]


def build_user_links(request: Request, user_id: int) -> dict[str, str]:
    """사용자 리소스 링크 (self, all-users)"""
    return {
        "self": str(request.url_for("get_user", user_id=user_id)),
        "all-users": str(request.url_for("get_all_users")),
    }


@router.get("", response_model=APIResponse[dict[str, str]], tags=["Info"])
async def get_api_info(request: Request):
    """API 정보 (조회 엔드포인트 링크)"""
    base_url = str(request.url_for("get_api_info"))
    return create_response(
        data={
            "find_user_by_id": f"{base_url}/{{id}}",
            "find_all_users": str(request.url_for("get_all_users")),
        },
        message="사용자 API 정보입니다.",
    )


@router.post("", response_model=APIResponse[UserResponse], status_code=201)
async def create_user(
    request: Request,
    user_data: UserView,
    service: UserService = Depends(get_user_service),
    notifier: Notifier = Depends(get_notifier),
):
    """사용자 생성"""
    user = await service.create_user(user_data)
    await notifier.publish(settings.kafka_topic, f"CREATE {user.email}")
    return create_response(
        data=user,
        message="사용자가 생성되었습니다.",
        links=build_user_links(request, user.id),
    )


@router.get("/all", response_model=ListAPIResponse[UserListItem])
async def get_all_users(
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """전체 사용자 목록 조회"""
    users = await service.get_users()
    items = [
        UserListItem(
            **user.model_dump(),
            links={
                "self": str(request.url_for("get_user", user_id=user.id))
            },
        )
        for user in users
    ]
    return create_list_response(
        data=items,
        message="사용자 목록을 조회했습니다.",
        links={"all-users": str(request.url_for("get_all_users"))},
    )


@router.get(
    "/{user_id}",
    response_model=APIResponse[UserResponse],
    responses=NOT_FOUND_RESPONSE,
)
async def get_user(
    request: Request,
    user_id: UserId,
    service: UserService = Depends(get_user_service),
):
    """사용자 상세 조회"""
    user = await service.get_user(user_id)
    return create_response(
        data=user,
        message="사용자 정보를 조회했습니다.",
        links=build_user_links(request, user.id),
    )


@router.put(
    "/{user_id}",
    response_model=APIResponse[UserResponse],
    responses=NOT_FOUND_RESPONSE,
)
async def update_user(
    request: Request,
    user_data: UserView,
    user_id: UserId,
    service: UserService = Depends(get_user_service),
):
    """사용자 수정"""
    user = await service.update_user(user_id, user_data)
    return create_response(
        data=user,
        message="사용자 정보가 수정되었습니다.",
        links=build_user_links(request, user.id),
    )


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: UserId,
    service: UserService = Depends(get_user_service),
    notifier: Notifier = Depends(get_notifier),
):
    """사용자 삭제

    삭제 전 사용자를 조회해 알림을 보내고, 없으면 알림 없이 삭제만 진행합니다.
    """
    try:
        user = await service.get_user(user_id)
    except UserNotFoundException:
        logger.info(
            "User not found; delete notification skipped",
            extra={"request_id": get_request_id(), "user_id": user_id},
        )
    else:
        await notifier.publish(settings.kafka_topic, f"DELETE {user.email}")

    await service.delete_user(user_id)
    return None
