"""Store adapter for Category rows."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models import Category


async def find_by_id(db: AsyncSession, category_id: int) -> Category | None:
    result = await db.execute(select(Category).where(Category.id == category_id))
    return result.scalar_one_or_none()


async def find_all(db: AsyncSession) -> list[Category]:
    result = await db.execute(select(Category).order_by(Category.id))
    return list(result.scalars().all())


async def save(db: AsyncSession, category: Category) -> Category:
    """Insert *category* if it is new, otherwise flush its pending changes."""
    db.add(category)
    await db.flush()
    return category


async def delete(db: AsyncSession, category: Category) -> None:
    await db.delete(category)
    await db.flush()
