from fastapi import Query

from blog_api.config import settings


class PaginationParams:
    """
    Reusable FastAPI dependency that parses the paging / sorting query
    parameters of the post listing.

    Usage in a router::

        @router.get("/posts")
        async def list_posts(pagination: PaginationParams = Depends()):
            ...

    Attributes
    ----------
    page_no:
        Zero-based page index.
    page_size:
        Number of posts per page (minimum 1, no upper clamp).
    sort_by:
        Post field to order by.  Unknown names are handled by the service.
    sort_dir:
        Free text; only ``"desc"`` (any case) selects descending order.
    """

    def __init__(
        self,
        page_no: int = Query(
            settings.DEFAULT_PAGE_NO,
            ge=0,
            description="Page number (0-based).",
        ),
        page_size: int = Query(
            settings.DEFAULT_PAGE_SIZE,
            ge=1,
            description="Number of posts returned per page.",
        ),
        sort_by: str = Query(
            settings.DEFAULT_SORT_BY,
            description="Post field to sort results by.",
        ),
        sort_dir: str = Query(
            settings.DEFAULT_SORT_DIR,
            description="'desc' for descending order; anything else is ascending.",
        ),
    ) -> None:
        self.page_no = page_no
        self.page_size = page_size
        self.sort_by = sort_by
        self.sort_dir = sort_dir
