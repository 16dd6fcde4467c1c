"""
Post service: business logic for the Post resource.

Design notes
------------
- Every post references exactly one existing category.  ``create_post``
  and ``update_post`` resolve ``category_id`` through the category store
  first and raise ``ResourceNotFoundError`` when it is missing.
- ``created_at`` is stamped once in ``create_post``; updates never touch
  it.
- Listings are zero-based.  Sorting is ascending unless ``sort_dir`` is
  ``"desc"`` in any letter case; the page envelope is computed here from
  the row count returned by the store.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
import logging
import math
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import ResourceNotFoundError
from blog_api.models import Category, Post
from blog_api.repositories import category_repository, comment_repository, post_repository
from blog_api.schemas import PaginatedResponse, PostCreate, PostResponse, PostUpdate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def is_descending(sort_dir: str | None) -> bool:
    """Return True only for ``"desc"`` (case-insensitive)."""
    return sort_dir is not None and sort_dir.lower() == "desc"


def _check_page_request(page_no: int, page_size: int) -> None:
    if page_no < 0:
        raise ValueError(f"page_no must not be negative, got {page_no}")
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")


def build_page(
    posts: list[PostResponse], page_no: int, page_size: int, total: int
) -> PaginatedResponse:
    """
    Wrap one page of posts in the listing envelope.

    ``total_pages`` is ``ceil(total / page_size)`` and ``last`` is true when
    no page follows *page_no*, which includes any page past the end.
    Raises ``ValueError`` for a negative *page_no* or a *page_size* below 1.
    """
    _check_page_request(page_no, page_size)
    total_pages = math.ceil(total / page_size)
    return PaginatedResponse(
        content=posts,
        page_no=page_no,
        page_size=page_size,
        total_elements=total,
        total_pages=total_pages,
        last=page_no + 1 >= total_pages,
    )


def _to_response(post: Post) -> PostResponse:
    return PostResponse.model_validate(post)


def _apply_update(post: Post, data: PostUpdate, category: Category) -> Post:
    """Overwrite the editable fields of *post*; ``created_at`` is kept."""
    post.title = data.title
    post.description = data.description
    post.content = data.content
    post.category_id = category.id
    return post


async def _get_post_or_raise(db: AsyncSession, post_id: int) -> Post:
    post = await post_repository.find_by_id(db, post_id)
    if post is None:
        raise ResourceNotFoundError("Post", "id", post_id)
    return post


async def _get_category_or_raise(db: AsyncSession, category_id: int) -> Category:
    category = await category_repository.find_by_id(db, category_id)
    if category is None:
        raise ResourceNotFoundError("Category", "id", category_id)
    return category


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def create_post(db: AsyncSession, data: PostCreate) -> PostResponse:
    category = await _get_category_or_raise(db, data.category_id)

    post = Post(
        title=data.title,
        description=data.description,
        content=data.content,
        category_id=category.id,
        created_at=datetime.now(timezone.utc),
    )
    post = await post_repository.save(db, post)
    logger.info("Created post id=%s in category id=%s", post.id, category.id)
    return _to_response(post)


async def get_all_posts(
    db: AsyncSession,
    page_no: int = 0,
    page_size: int = 10,
    sort_by: str = "id",
    sort_dir: str = "asc",
) -> PaginatedResponse:
    """
    Return page *page_no* (zero-based) of all posts ordered by *sort_by*.

    Unknown *sort_by* values fall back to ``id``.  Pages past the end come
    back with empty ``content`` and the real totals.  A negative *page_no*
    or a *page_size* below 1 raises ``ValueError`` before the store is hit.
    """
    _check_page_request(page_no, page_size)
    posts, total = await post_repository.find_page(
        db, page_no, page_size, sort_by, descending=is_descending(sort_dir)
    )
    return build_page([_to_response(p) for p in posts], page_no, page_size, total)


async def get_post_by_id(db: AsyncSession, post_id: int) -> PostResponse:
    return _to_response(await _get_post_or_raise(db, post_id))


async def update_post(db: AsyncSession, post_id: int, data: PostUpdate) -> PostResponse:
    """
    Replace title, description, content and category of *post_id*.

    The post is resolved before the category, so a missing post is
    reported even when the new category is missing too.
    """
    post = await _get_post_or_raise(db, post_id)
    category = await _get_category_or_raise(db, data.category_id)

    post = await post_repository.save(db, _apply_update(post, data, category))
    logger.info("Updated post id=%s", post_id)
    return _to_response(post)


async def delete_post_by_id(db: AsyncSession, post_id: int) -> None:
    """Delete *post_id* together with its comments."""
    post = await _get_post_or_raise(db, post_id)

    removed = await comment_repository.delete_by_post_id(db, post_id)
    await post_repository.delete(db, post)
    logger.info("Deleted post id=%s (%d comment(s) removed)", post_id, removed)


async def get_posts_by_category(db: AsyncSession, category_id: int) -> list[PostResponse]:
    category = await _get_category_or_raise(db, category_id)
    return [_to_response(p) for p in await post_repository.find_by_category_id(db, category.id)]
