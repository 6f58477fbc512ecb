from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from . import Base
from forum.schemas.user import UserSignUpDTO

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


class User(Base):
    __tablename__ = "Users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    username: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    # Stored and compared as plaintext; kept for parity with existing accounts.
    password: Mapped[str] = mapped_column(String, nullable=False)

    # Relationships
    posts: Mapped[list["Post"]] = relationship("Post", back_populates="user")
    comments: Mapped[list["Comment"]] = relationship("Comment", back_populates="user")

    def check_password(self, raw_password: str) -> bool:
        return raw_password == self.password

    @staticmethod
    def create_user(user_data: UserSignUpDTO) -> "User":
        return User(
            email=user_data.email,
            username=user_data.username,
            password=user_data.password,
        )
