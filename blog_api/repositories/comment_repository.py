"""Store adapter for Comment rows."""
from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models import Comment


async def find_by_id(db: AsyncSession, comment_id: int) -> Comment | None:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    return result.scalar_one_or_none()


async def find_all(db: AsyncSession) -> list[Comment]:
    result = await db.execute(select(Comment).order_by(Comment.id))
    return list(result.scalars().all())


async def find_by_post_id(db: AsyncSession, post_id: int) -> list[Comment]:
    """Return the comments of *post_id* in store (id) order."""
    result = await db.execute(
        select(Comment).where(Comment.post_id == post_id).order_by(Comment.id)
    )
    return list(result.scalars().all())


async def save(db: AsyncSession, comment: Comment) -> Comment:
    db.add(comment)
    await db.flush()
    return comment


async def delete(db: AsyncSession, comment: Comment) -> None:
    await db.delete(comment)
    await db.flush()


async def delete_by_post_id(db: AsyncSession, post_id: int) -> int:
    """
    Bulk-delete every comment of *post_id* and return the number removed.

    Run before the post itself is deleted; SQLite ignores ``ON DELETE
    CASCADE`` unless foreign keys are switched on.
    """
    result = await db.execute(
        sql_delete(Comment)
        .where(Comment.post_id == post_id)
        .execution_options(synchronize_session="fetch")
    )
    return result.rowcount
