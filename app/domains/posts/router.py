"""Posts 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.schemas import (
    APIResponse,
    ErrorResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import PageParams
from app.domains.posts.schemas import PostCreate, PostResponse
from app.domains.posts.service import PostService
from app.domains.users.dependencies import get_current_user_or_raise
from app.domains.users.models import User

router = APIRouter()


def get_post_service(session: AsyncSession = Depends(get_db)) -> PostService:
    """PostService 의존성"""
    return PostService(session)


@router.get("", response_model=ListAPIResponse[PostResponse])
async def get_posts(
    page_params: PageParams = Depends(),
    service: PostService = Depends(get_post_service),
):
    """게시글 목록 조회 (최신순)"""
    posts, total = await service.get_posts(
        skip=page_params.skip, limit=page_params.limit
    )
    return create_list_response(
        data=[PostResponse.model_validate(post) for post in posts],
        total=total,
        page=page_params.page,
        size=page_params.size,
        message="게시글 목록을 조회했습니다.",
    )


@router.get(
    "/authors/{author_id}", response_model=APIResponse[list[PostResponse]]
)
async def get_posts_by_author(
    author_id: int,
    service: PostService = Depends(get_post_service),
):
    """작성자별 게시글 조회"""
    posts = await service.get_posts_by_author(author_id)
    return create_response(
        data=[PostResponse.model_validate(post) for post in posts],
        message="작성자 게시글을 조회했습니다.",
    )


@router.get(
    "/{slug}",
    response_model=APIResponse[PostResponse],
    responses={404: {"model": ErrorResponse}},
)
async def get_post(slug: str, service: PostService = Depends(get_post_service)):
    """슬러그로 게시글 조회"""
    post = await service.get_post(slug)
    return create_response(
        data=PostResponse.model_validate(post),
        message="게시글을 조회했습니다.",
    )


@router.post(
    "",
    response_model=APIResponse[PostResponse],
    status_code=201,
    responses={401: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_post(
    data: PostCreate,
    author: User = Depends(get_current_user_or_raise),
    service: PostService = Depends(get_post_service),
):
    """게시글 작성 (로그인 필요)"""
    post = await service.create_post(author, data)
    return create_response(
        data=PostResponse.model_validate(post),
        message="게시글이 작성되었습니다.",
    )


@router.post(
    "/{slug}/like",
    response_model=APIResponse[PostResponse],
    responses={404: {"model": ErrorResponse}},
)
async def like_post(slug: str, service: PostService = Depends(get_post_service)):
    """게시글 좋아요"""
    post = await service.like_post(slug)
    return create_response(
        data=PostResponse.model_validate(post),
        message="좋아요를 반영했습니다.",
    )


@router.delete(
    "/{slug}",
    status_code=204,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_post(
    slug: str,
    author: User = Depends(get_current_user_or_raise),
    service: PostService = Depends(get_post_service),
):
    """게시글 삭제 (작성자만 가능)"""
    await service.delete_post(author, slug)
    return None
