from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db
from blog_api.schemas import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_api.services import category_service

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.post("", status_code=201, response_model=CategoryResponse)
async def add_category(data: CategoryCreate, db: AsyncSession = Depends(get_db)):
    return await category_service.add_category(db, data)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return await category_service.get_category(db, category_id)


@router.get("", response_model=list[CategoryResponse])
async def get_categories(db: AsyncSession = Depends(get_db)):
    return await category_service.get_all_categories(db)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int, data: CategoryUpdate, db: AsyncSession = Depends(get_db)
):
    return await category_service.update_category(db, category_id, data)


@router.delete("/{category_id}")
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)) -> str:
    await category_service.delete_category(db, category_id)
    return "Category deleted successfully!."
