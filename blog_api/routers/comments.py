from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.database import get_db
from blog_api.schemas import CommentCreate, CommentResponse, CommentUpdate
from blog_api.services import comment_service

router = APIRouter(prefix="/api/v1/posts/{post_id}/comments", tags=["comments"])


@router.post("", status_code=201, response_model=CommentResponse)
async def create_comment(post_id: int, data: CommentCreate, db: AsyncSession = Depends(get_db)):
    return await comment_service.create_comment(db, post_id, data)


@router.get("", response_model=list[CommentResponse])
async def get_comments_by_post_id(post_id: int, db: AsyncSession = Depends(get_db)):
    return await comment_service.get_comments_by_post_id(db, post_id)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment_by_id(post_id: int, comment_id: int, db: AsyncSession = Depends(get_db)):
    return await comment_service.get_comment_by_id(db, post_id, comment_id)


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    post_id: int,
    comment_id: int,
    data: CommentUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await comment_service.update_comment(db, post_id, comment_id, data)


@router.delete("/{comment_id}")
async def delete_comment(post_id: int, comment_id: int, db: AsyncSession = Depends(get_db)) -> str:
    await comment_service.delete_comment(db, post_id, comment_id)
    return "Comment deleted successfully"
