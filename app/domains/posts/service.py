"""Posts 도메인 서비스"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import log_context
from app.domains.posts.exceptions import (
    PostForbiddenException,
    PostNotFoundException,
    PostSlugAlreadyExistsException,
)
from app.domains.posts.models import Post
from app.domains.posts.repository import PostRepository
from app.domains.posts.schemas import PostCreate
from app.domains.users.models import User
from app.domains.users.repository import UserRepository

logger = get_logger(__name__)


class PostService:
    """게시글 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = PostRepository(session)
        self.user_repository = UserRepository(session)

    async def get_post(self, slug: str) -> Post:
        """슬러그로 게시글 조회

        Raises:
            PostNotFoundException: 게시글을 찾을 수 없는 경우
        """
        post = await self.repository.get_by_slug(slug)
        if post is None:
            raise PostNotFoundException(slug=slug)
        return post

    async def get_posts(
        self, skip: int = 0, limit: int = 20
    ) -> tuple[list[Post], int]:
        """게시글 목록 조회

        Args:
            skip: 건너뛸 레코드 수
            limit: 조회할 최대 레코드 수

        Returns:
            (게시글 목록, 전체 게시글 수) 튜플
        """
        posts = await self.repository.get_list(skip=skip, limit=limit)
        total = await self.repository.count()
        return list(posts), total

    async def get_posts_by_author(self, author_id: int) -> list[Post]:
        return list(await self.repository.get_by_author(author_id))

    async def create_post(self, author: User, data: PostCreate) -> Post:
        """게시글 생성

        슬러그 중복을 먼저 확인하고, 생성된 게시글 ID를 작성자의
        post_ids 끝에 추가합니다.

        Raises:
            PostSlugAlreadyExistsException: 슬러그가 이미 사용 중인 경우
        """
        if await self.repository.get_by_slug(data.slug) is not None:
            raise PostSlugAlreadyExistsException(slug=data.slug)

        post = await self.repository.create(data, author_id=author.id)
        await self.user_repository.patch(
            author, {"post_ids": [*(author.post_ids or []), post.id]}
        )

        logger.info(
            f"Post created: {post.slug}",
            extra=log_context(
                clerk_user_id=author.clerk_user_id, action="created"
            ),
        )
        return post

    async def like_post(self, slug: str) -> Post:
        """게시글 좋아요"""
        post = await self.get_post(slug)
        return await self.repository.increment_likes(post)

    async def delete_post(self, author: User, slug: str) -> None:
        """게시글 삭제 (작성자만 가능)

        Raises:
            PostNotFoundException: 게시글을 찾을 수 없는 경우
            PostForbiddenException: 작성자가 아닌 경우
        """
        post = await self.get_post(slug)
        if post.author_id != author.id:
            raise PostForbiddenException(slug=slug)

        post_id = post.id
        await self.repository.delete(post)
        if author.post_ids:
            await self.user_repository.patch(
                author,
                {"post_ids": [pid for pid in author.post_ids if pid != post_id]},
            )

        logger.info(
            f"Post deleted: {slug}",
            extra=log_context(
                clerk_user_id=author.clerk_user_id, action="deleted"
            ),
        )
