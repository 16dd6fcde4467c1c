"""
Category service: CRUD for the Category resource.

Categories carry no relational rules of their own.  Deleting a category
does not touch the posts that reference it; whether that succeeds is up
to the store (Postgres rejects it through the foreign key, which the HTTP
layer reports as 409).
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import ResourceNotFoundError
from blog_api.models import Category
from blog_api.repositories import category_repository
from blog_api.schemas import CategoryCreate, CategoryResponse, CategoryUpdate

logger = logging.getLogger(__name__)


def _to_response(category: Category) -> CategoryResponse:
    return CategoryResponse.model_validate(category)


async def _get_or_raise(db: AsyncSession, category_id: int) -> Category:
    category = await category_repository.find_by_id(db, category_id)
    if category is None:
        raise ResourceNotFoundError("Category", "id", category_id)
    return category


async def add_category(db: AsyncSession, data: CategoryCreate) -> CategoryResponse:
    category = Category(name=data.name, description=data.description)
    category = await category_repository.save(db, category)
    logger.info("Created category id=%s", category.id)
    return _to_response(category)


async def get_category(db: AsyncSession, category_id: int) -> CategoryResponse:
    return _to_response(await _get_or_raise(db, category_id))


async def get_all_categories(db: AsyncSession) -> list[CategoryResponse]:
    return [_to_response(c) for c in await category_repository.find_all(db)]


async def update_category(
    db: AsyncSession, category_id: int, data: CategoryUpdate
) -> CategoryResponse:
    category = await _get_or_raise(db, category_id)
    category.name = data.name
    category.description = data.description
    category = await category_repository.save(db, category)
    logger.info("Updated category id=%s", category_id)
    return _to_response(category)


async def delete_category(db: AsyncSession, category_id: int) -> None:
    category = await _get_or_raise(db, category_id)
    await category_repository.delete(db, category)
    logger.info("Deleted category id=%s", category_id)
