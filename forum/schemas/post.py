from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class PostCreateDTO(BaseModel):
    """DTO for creating a post"""
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")


class CommentCreateDTO(BaseModel):
    """DTO for commenting on a post"""
    post_id: int = Field(..., description="Commented post ID")
    content: str = Field(..., description="Comment text")


class CommentResponseDTO(BaseModel):
    content: str
    username: str
    created_at: datetime


class PostResponseDTO(BaseModel):
    """A post as shown on the forum page, with reaction counts and comments"""
    id: int
    title: str
    content: str
    username: str
    created_at: datetime
    likes: int = 0
    dislikes: int = 0
    comments: List[CommentResponseDTO] = Field(default_factory=list)


class PostListResponseDTO(BaseModel):
    posts: List[PostResponseDTO]


class ReactionResponseDTO(BaseModel):
    """Reaction state of one user on one post after a like/dislike"""
    post_id: int
    user_id: int
    liked: bool
    disliked: bool
