from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db
from blog_api.dependencies import PaginationParams
from blog_api.schemas import PaginatedResponse, PostCreate, PostResponse, PostUpdate
from blog_api.services import post_service

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


@router.post("", status_code=201, response_model=PostResponse)
async def create_post(data: PostCreate, db: AsyncSession = Depends(get_db)):
    return await post_service.create_post(db, data)


@router.get("", response_model=PaginatedResponse)
async def get_all_posts(
    pagination: PaginationParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    return await post_service.get_all_posts(
        db, pagination.page_no, pagination.page_size, pagination.sort_by, pagination.sort_dir
    )


@router.get("/category/{category_id}", response_model=list[PostResponse])
async def get_posts_by_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return await post_service.get_posts_by_category(db, category_id)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post_by_id(post_id: int, db: AsyncSession = Depends(get_db)):
    return await post_service.get_post_by_id(db, post_id)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(post_id: int, data: PostUpdate, db: AsyncSession = Depends(get_db)):
    return await post_service.update_post(db, post_id, data)


@router.delete("/{post_id}")
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)) -> str:
    await post_service.delete_post_by_id(db, post_id)
    return "Post entity deleted successfully."
