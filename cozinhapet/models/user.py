from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cozinhapet.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    hashed_password: Mapped[str] = mapped_column("password", String(255))
    first_name: Mapped[Optional[str]] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))

    # Location
    state: Mapped[Optional[str]] = mapped_column(String(100))
    city: Mapped[Optional[str]] = mapped_column(String(100))

    profile_image_url: Mapped[Optional[str]] = mapped_column(String(500))

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships (rows are removed by ON DELETE CASCADE)
    pets: Mapped[list["Pet"]] = relationship(back_populates="user", passive_deletes=True)
    recipes: Mapped[list["Recipe"]] = relationship(back_populates="user", passive_deletes=True)
    comments: Mapped[list["Comment"]] = relationship(back_populates="user", passive_deletes=True)
    favorites: Mapped[list["Favorite"]] = relationship(back_populates="user", passive_deletes=True)
    sessions: Mapped[list["UserSession"]] = relationship(back_populates="user", passive_deletes=True)
    following_links: Mapped[list["Follower"]] = relationship(
        foreign_keys="Follower.follower_id", back_populates="follower", passive_deletes=True
    )
    follower_links: Mapped[list["Follower"]] = relationship(
        foreign_keys="Follower.following_id", back_populates="following", passive_deletes=True
    )
