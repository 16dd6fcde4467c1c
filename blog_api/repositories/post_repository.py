"""Store adapter for Post rows."""
from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models import Post

# Columns that are safe to sort by; guards against arbitrary attribute access.
SORTABLE_COLUMNS: frozenset[str] = frozenset(
    {"id", "title", "description", "content", "created_at", "category_id"}
)


def _resolve_sort_column(sort_field: str):
    """
    Return the SQLAlchemy column expression for *sort_field*.

    Falls back to ``Post.id`` for any unrecognised column name.
    """
    if sort_field in SORTABLE_COLUMNS:
        return getattr(Post, sort_field)
    return Post.id


async def find_by_id(db: AsyncSession, post_id: int) -> Post | None:
    result = await db.execute(select(Post).where(Post.id == post_id))
    return result.scalar_one_or_none()


async def find_all(db: AsyncSession) -> list[Post]:
    result = await db.execute(select(Post).order_by(Post.id))
    return list(result.scalars().all())


async def find_page(
    db: AsyncSession,
    page_no: int,
    page_size: int,
    sort_field: str,
    descending: bool = False,
) -> tuple[list[Post], int]:
    """
    Return one zero-based page of posts and the total row count.

    Two SQL statements are issued:
    1. COUNT over all posts.
    2. SELECT ordered by *sort_field* with LIMIT/OFFSET.  ``id`` is the
       tie-breaker so pages never overlap when the sort key repeats.
    """
    total: int = (await db.execute(select(func.count()).select_from(Post))).scalar_one()

    sort_col = _resolve_sort_column(sort_field)
    direction = desc if descending else asc
    order = [direction(sort_col)]
    if sort_col.key != "id":
        order.append(direction(Post.id))

    q = (
        select(Post)
        .order_by(*order)
        .offset(page_no * page_size)
        .limit(page_size)
    )
    result = await db.execute(q)
    return list(result.scalars().all()), total


async def find_by_category_id(db: AsyncSession, category_id: int) -> list[Post]:
    result = await db.execute(
        select(Post).where(Post.category_id == category_id).order_by(Post.id)
    )
    return list(result.scalars().all())


async def save(db: AsyncSession, post: Post) -> Post:
    db.add(post)
    await db.flush()
    return post


async def delete(db: AsyncSession, post: Post) -> None:
    await db.delete(post)
    await db.flush()
