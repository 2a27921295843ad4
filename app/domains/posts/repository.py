"""Posts 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.posts.models import Post
from app.domains.posts.schemas import PostCreate


class PostRepository:
    """게시글 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_slug(self, slug: str) -> Optional[Post]:
        """슬러그로 게시글 조회 (유니크 인덱스)

        Raises:
            MultipleResultsFound: 같은 슬러그의 게시글이 둘 이상인 경우
        """
        query = select(Post).where(Post.slug == slug)
        result = await self.session.execute(query)
        return cast(Optional[Post], result.scalar_one_or_none())

    async def get_list(self, skip: int = 0, limit: int = 20) -> Sequence[Post]:
        """게시글 목록 조회 (최신순)"""
        query = select(Post).order_by(Post.id.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return cast(Sequence[Post], result.scalars().all())

    async def count(self) -> int:
        """게시글 수 조회"""
        result = await self.session.execute(select(func.count(Post.id)))
        return int(result.scalar_one())

    async def get_by_author(self, author_id: int) -> Sequence[Post]:
        """작성자별 게시글 조회 (최신순)"""
        query = (
            select(Post)
            .where(Post.author_id == author_id)
            .order_by(Post.id.desc())
        )
        result = await self.session.execute(query)
        return cast(Sequence[Post], result.scalars().all())

    async def create(self, data: PostCreate, author_id: int) -> Post:
        """게시글 생성"""
        post = Post(**data.model_dump(), author_id=author_id, likes=0)
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def increment_likes(self, post: Post) -> Post:
        """좋아요 수 1 증가 (DB에서 원자적으로 증가)"""
        await self.session.execute(
            update(Post)
            .where(Post.id == post.id)
            .values(likes=Post.likes + 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        """게시글 삭제"""
        await self.session.delete(post)
        await self.session.flush()
