from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


# --- Category ---

class CategoryBase(BaseModel):
    name: str = Field(min_length=1, max_length=150)
    description: str | None = None


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class CategoryResponse(CategoryBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# --- Post ---

class PostBase(BaseModel):
    title: str = Field(min_length=2, max_length=300)
    description: str = Field(min_length=10, max_length=1000)
    content: str = Field(min_length=1)
    category_id: int


class PostCreate(PostBase):
    pass


class PostUpdate(PostBase):
    pass


class PostResponse(PostBase):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Comment ---

class CommentBase(BaseModel):
    name: str = Field(min_length=1, max_length=150)
    email: str = Field(max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    body: str = Field(min_length=10)


class CommentCreate(CommentBase):
    pass


class CommentUpdate(CommentBase):
    pass


class CommentResponse(CommentBase):
    id: int
    post_id: int
    model_config = ConfigDict(from_attributes=True)


# --- Pagination ---

class PaginatedResponse(BaseModel):
    """Page envelope returned by the post listing."""

    content: list[PostResponse]
    page_no: int
    page_size: int
    total_elements: int
    total_pages: int
    last: bool


# --- Errors ---

class ErrorDetails(BaseModel):
    timestamp: datetime
    message: str
    details: str
