"""
Comment service: CRUD for comments, always addressed through a post.

Every operation keyed by ``(post_id, comment_id)`` resolves in a fixed
order and stops at the first failure:

1. the post must exist (``ResourceNotFoundError``); the comment store is
   not queried otherwise,
2. the comment must exist (``ResourceNotFoundError``),
3. the comment's ``post_id`` must equal the requested post
   (``ConflictError``).

``get_comments_by_post_id`` is the exception: it never checks the post and
simply returns an empty list for unknown ids.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import ConflictError, ResourceNotFoundError
from blog_api.models import Comment
from blog_api.repositories import comment_repository, post_repository
from blog_api.schemas import CommentCreate, CommentResponse, CommentUpdate

logger = logging.getLogger(__name__)

COMMENT_NOT_IN_POST = "Comment does not belong to post"


def _to_response(comment: Comment) -> CommentResponse:
    return CommentResponse.model_validate(comment)


def _ensure_belongs_to_post(comment: Comment, post_id: int) -> Comment:
    if comment.post_id != post_id:
        logger.warning(
            "Comment id=%s belongs to post id=%s, not post id=%s",
            comment.id,
            comment.post_id,
            post_id,
        )
        raise ConflictError(COMMENT_NOT_IN_POST)
    return comment


async def _resolve_comment(db: AsyncSession, post_id: int, comment_id: int) -> Comment:
    """Apply the post → comment → parentage checks and return the comment."""
    post = await post_repository.find_by_id(db, post_id)
    if post is None:
        raise ResourceNotFoundError("Post", "id", post_id)

    comment = await comment_repository.find_by_id(db, comment_id)
    if comment is None:
        raise ResourceNotFoundError("Comment", "id", comment_id)

    return _ensure_belongs_to_post(comment, post.id)


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def create_comment(
    db: AsyncSession, post_id: int, data: CommentCreate
) -> CommentResponse:
    post = await post_repository.find_by_id(db, post_id)
    if post is None:
        raise ResourceNotFoundError("Post", "id", post_id)

    comment = Comment(
        name=data.name,
        email=data.email,
        body=data.body,
        post_id=post.id,
    )
    comment = await comment_repository.save(db, comment)
    logger.info("Created comment id=%s on post id=%s", comment.id, post_id)
    return _to_response(comment)


async def get_comments_by_post_id(db: AsyncSession, post_id: int) -> list[CommentResponse]:
    return [_to_response(c) for c in await comment_repository.find_by_post_id(db, post_id)]


async def get_comment_by_id(
    db: AsyncSession, post_id: int, comment_id: int
) -> CommentResponse:
    return _to_response(await _resolve_comment(db, post_id, comment_id))


async def update_comment(
    db: AsyncSession, post_id: int, comment_id: int, data: CommentUpdate
) -> CommentResponse:
    comment = await _resolve_comment(db, post_id, comment_id)

    comment.name = data.name
    comment.email = data.email
    comment.body = data.body
    comment = await comment_repository.save(db, comment)
    logger.info("Updated comment id=%s on post id=%s", comment_id, post_id)
    return _to_response(comment)


async def delete_comment(db: AsyncSession, post_id: int, comment_id: int) -> None:
    comment = await _resolve_comment(db, post_id, comment_id)
    await comment_repository.delete(db, comment)
    logger.info("Deleted comment id=%s from post id=%s", comment_id, post_id)
