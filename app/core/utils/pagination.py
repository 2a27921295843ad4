"""페이지네이션 유틸리티"""

from fastapi import Query


class PageParams:
    """페이지네이션 파라미터 의존성

    Example::

        @router.get("", response_model=ListAPIResponse[PostResponse])
        async def get_posts(page_params: PageParams = Depends()):
            posts, total = await service.get_posts(
                skip=page_params.skip, limit=page_params.limit
            )
    """

    def __init__(
        self,
        page: int = Query(1, ge=1, description="페이지 번호"),
        size: int = Query(20, ge=1, le=100, description="페이지 크기"),
    ):
        self.page = page
        self.size = size

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size
