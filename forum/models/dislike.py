from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class Dislike(Base):
    __tablename__ = "Dislikes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("Users.id"),
        nullable=False
    )

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("Posts.id"),
        nullable=False
    )

    __table_args__ = (
        UniqueConstraint('user_id', 'post_id', name='_user_post_dislike_uc'),
    )
