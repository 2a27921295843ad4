"""Users 도메인 라우터

사용자 조회 API와 신뢰된 호출자 전용 Clerk 동기화 API입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_identity, verify_internal_api_key
from app.core.identity import UserIdentity
from app.core.schemas import APIResponse, ErrorResponse, create_response
from app.domains.users.dependencies import get_user_service
from app.domains.users.schemas import (
    ClerkUserData,
    UserDeleteResponse,
    UserResponse,
)
from app.domains.users.service import UserService

router = APIRouter()


@router.get("", response_model=APIResponse[list[UserResponse]])
async def get_users(service: UserService = Depends(get_user_service)):
    """전체 사용자 목록 조회"""
    users = await service.get_users()
    return create_response(
        data=[UserResponse.model_validate(user) for user in users],
        message="사용자 목록을 조회했습니다.",
    )


@router.get("/recent", response_model=APIResponse[list[UserResponse]])
async def get_recent_users(service: UserService = Depends(get_user_service)):
    """최근 가입 사용자 5명 조회"""
    users = await service.get_recent_users()
    return create_response(
        data=[UserResponse.model_validate(user) for user in users],
        message="최근 사용자 목록을 조회했습니다.",
    )


@router.get("/me", response_model=APIResponse[UserResponse])
async def get_current_user(
    identity: Optional[UserIdentity] = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
):
    """현재 로그인한 사용자 조회 (비로그인/미동기화면 data = null)"""
    user = await service.get_current_user(identity)
    return create_response(
        data=UserResponse.model_validate(user) if user else None,
        message="현재 사용자를 조회했습니다.",
    )


@router.get(
    "/clerk/{clerk_user_id}",
    response_model=APIResponse[UserResponse],
    dependencies=[Depends(verify_internal_api_key)],
)
async def get_user_by_clerk_user_id(
    clerk_user_id: str,
    service: UserService = Depends(get_user_service),
):
    """Clerk 사용자 ID로 사용자 조회 (없으면 data = null)"""
    user = await service.get_user_by_clerk_user_id(clerk_user_id)
    return create_response(
        data=UserResponse.model_validate(user) if user else None,
        message="사용자 정보를 조회했습니다.",
    )


@router.post(
    "/sync",
    response_model=APIResponse[UserResponse],
    responses={401: {"model": ErrorResponse}},
    dependencies=[Depends(verify_internal_api_key)],
)
async def upsert_from_clerk(
    data: ClerkUserData,
    service: UserService = Depends(get_user_service),
):
    """Clerk 사용자 동기화 (Upsert)"""
    user = await service.upsert_from_clerk(data)
    return create_response(
        data=UserResponse.model_validate(user),
        message="사용자가 동기화되었습니다.",
    )


@router.delete(
    "/sync/{clerk_user_id}",
    response_model=APIResponse[UserDeleteResponse],
    responses={401: {"model": ErrorResponse}},
    dependencies=[Depends(verify_internal_api_key)],
)
async def delete_from_clerk(
    clerk_user_id: str,
    service: UserService = Depends(get_user_service),
):
    """Clerk 사용자 삭제 (없는 사용자면 아무것도 하지 않음)"""
    deleted = await service.delete_from_clerk(clerk_user_id)
    return create_response(
        data=UserDeleteResponse(clerk_user_id=clerk_user_id, deleted=deleted),
        message="사용자 삭제 동기화가 완료되었습니다.",
    )
