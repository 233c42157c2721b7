from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cozinhapet.db.base import Base
from cozinhapet.models.enums import COOKING_TYPES, PET_TYPES, RECIPE_CATEGORIES


class Recipe(Base):
    __tablename__ = "recipes"
    __table_args__ = (
        CheckConstraint("prep_time > 0", name="prep_time_positive"),
        CheckConstraint("cook_count >= 0", name="cook_count_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    ingredients: Mapped[str] = mapped_column(Text)
    instructions: Mapped[str] = mapped_column(Text)
    pet_type: Mapped[str] = mapped_column(Enum(*PET_TYPES, name="pet_type"), index=True)
    category: Mapped[str] = mapped_column(Enum(*RECIPE_CATEGORIES, name="recipe_category"), index=True)
    cooking_type: Mapped[str] = mapped_column(Enum(*COOKING_TYPES, name="cooking_type"))
    prep_time: Mapped[int] = mapped_column(Integer)  # minutes
    image_url: Mapped[Optional[str]] = mapped_column(String(500))
    youtube_url: Mapped[Optional[str]] = mapped_column(String(500))
    cook_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship(back_populates="recipes")
    comments: Mapped[list["Comment"]] = relationship(back_populates="recipe", passive_deletes=True)
    favorites: Mapped[list["Favorite"]] = relationship(back_populates="recipe", passive_deletes=True)
