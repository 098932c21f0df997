"""공통 API 응답 스키마

이 모듈은 API 응답의 일관된 구조를 정의합니다.

Usage::

    # 단일 데이터 응답
    from app.core.schemas import APIResponse, create_response
    return create_response(data=user, message="사용자 조회 성공")

    # 목록 데이터 응답
    from app.core.schemas import ListAPIResponse, create_list_response
    return create_list_response(data=users)

Note:
    ``links``는 관련 리소스 URL(rel → href)을 담는 선택 항목입니다.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

DEFAULT_MESSAGE = "요청이 성공적으로 처리되었습니다."


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        {
            "success": true,
            "message": "사용자 정보를 조회했습니다.",
            "data": {"id": 1, "name": "Vasya", ...},
            "links": {"self": "http://.../users/1", "all-users": "..."}
        }
    """

    success: bool = True
    message: str = DEFAULT_MESSAGE
    data: Optional[DataT] = None
    links: dict[str, str] = Field(default_factory=dict)


class ListAPIResponse(BaseModel, Generic[DataT]):
    """목록 데이터 API 응답"""

    success: bool = True
    message: str = DEFAULT_MESSAGE
    data: list[DataT] = Field(default_factory=list)
    total: int = Field(0, description="전체 아이템 수")
    links: dict[str, str] = Field(default_factory=dict)


def create_response(
    data: Optional[DataT] = None,
    message: str = DEFAULT_MESSAGE,
    links: Optional[dict[str, str]] = None,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수

    Args:
        data: 응답 데이터
        message: 응답 메시지
        links: 관련 리소스 링크

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=True, message=message, data=data, links=links or {})


def create_list_response(
    data: list[DataT],
    message: str = DEFAULT_MESSAGE,
    links: Optional[dict[str, str]] = None,
) -> ListAPIResponse[DataT]:
    """목록 API 응답 생성 팩토리 함수"""
    return ListAPIResponse(
        success=True,
        message=message,
        data=data,
        total=len(data),
        links=links or {},
    )


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "요청 데이터가 올바르지 않습니다.",
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "요청 데이터가 올바르지 않습니다.",
                "detail": {
                    "violations": [
                        {"field_name": "age", "message": "..."}
                    ]
                }
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail
