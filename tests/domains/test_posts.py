"""Posts 도메인 테스트 - 예외 및 스키마"""

import pytest
from pydantic import ValidationError

from app.domains.posts.exceptions import (
    PostForbiddenException,
    PostNotFoundException,
    PostSlugAlreadyExistsException,
)
from app.domains.posts.schemas import PostCreate


class TestPostExceptions:
    """게시글 예외 테스트"""

    def test_post_not_found_exception(self):
        exc = PostNotFoundException(slug="hello")
        assert exc.error_code == "POST_NOT_FOUND"
        assert exc.status_code == 404
        assert exc.detail_info == {"slug": "hello"}

    def test_slug_already_exists_exception(self):
        exc = PostSlugAlreadyExistsException(slug="hello")
        assert exc.error_code == "POST_SLUG_ALREADY_EXISTS"
        assert exc.status_code == 409

    def test_post_forbidden_exception(self):
        exc = PostForbiddenException()
        assert exc.status_code == 403
        assert exc.detail_info == {}


class TestPostCreate:
    """PostCreate 스키마 테스트"""

    def test_valid_post(self):
        post = PostCreate(
            title="Hello World",
            slug="hello-world-2",
            excerpt="short",
            content="long",
        )
        assert post.cover_image_id is None

    @pytest.mark.parametrize(
        "slug", ["Hello", "hello world", "-hello", "hello-", "hello--world", ""]
    )
    def test_invalid_slug(self, slug):
        with pytest.raises(ValidationError):
            PostCreate(title="t", slug=slug, excerpt="e", content="c")

    def test_title_required(self):
        with pytest.raises(ValidationError):
            PostCreate(title="", slug="hello", excerpt="e", content="c")
