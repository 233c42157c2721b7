import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.exceptions import NotFoundError
from cozinhapet.db.integrity import commit_or_raise
from cozinhapet.models.pet import Pet
from cozinhapet.schemas.pet import PetCreate, PetUpdate

logger = logging.getLogger(__name__)


async def get_pet(db: AsyncSession, pet_id: int) -> Optional[Pet]:
    result = await db.execute(select(Pet).where(Pet.id == pet_id))
    return result.scalar_one_or_none()


async def get_pets_by_user(db: AsyncSession, user_id: int) -> list[Pet]:
    result = await db.execute(select(Pet).where(Pet.user_id == user_id).order_by(Pet.id))
    return list(result.scalars().all())


async def create_pet(db: AsyncSession, user_id: int, data: PetCreate) -> Pet:
    pet = Pet(**data.model_dump(), user_id=user_id)
    db.add(pet)
    await commit_or_raise(db)
    await db.refresh(pet)
    logger.info("created pet %d for user %d", pet.id, user_id)
    return pet


async def update_pet(db: AsyncSession, pet_id: int, data: PetUpdate) -> Pet:
    pet = await get_pet(db, pet_id)
    if not pet:
        raise NotFoundError("Pet not found")
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(pet, field, value)
    pet.updated_at = datetime.now(timezone.utc)
    await commit_or_raise(db)
    await db.refresh(pet)
    return pet


async def delete_pet(db: AsyncSession, pet_id: int) -> bool:
    result = await db.execute(delete(Pet).where(Pet.id == pet_id))
    await db.commit()
    deleted = result.rowcount > 0
    if deleted:
        logger.info("deleted pet %d", pet_id)
    return deleted
