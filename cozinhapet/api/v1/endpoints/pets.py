from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.deps import CurrentUser, get_db
from cozinhapet.core.exceptions import ForbiddenError, NotFoundError
from cozinhapet.models.pet import Pet
from cozinhapet.schemas.auth import MessageResponse
from cozinhapet.schemas.pet import PetCreate, PetRead, PetUpdate
from cozinhapet.services import pet_service

router = APIRouter(prefix="/pets", tags=["pets"])


@router.get("", response_model=list[PetRead])
async def list_pets(current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    return await pet_service.get_pets_by_user(db, current_user.id)


@router.get("/{pet_id}", response_model=PetRead)
async def get_pet(pet_id: int, db: AsyncSession = Depends(get_db)):
    pet = await pet_service.get_pet(db, pet_id)
    if not pet:
        raise NotFoundError("Pet not found")
    return pet


@router.post("", response_model=PetRead, status_code=status.HTTP_201_CREATED)
async def create_pet(data: PetCreate, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    return await pet_service.create_pet(db, current_user.id, data)


@router.put("/{pet_id}", response_model=PetRead)
async def update_pet(
    pet_id: int, data: PetUpdate, current_user: CurrentUser, db: AsyncSession = Depends(get_db)
):
    await _get_owned_pet(db, pet_id, current_user.id)
    return await pet_service.update_pet(db, pet_id, data)


@router.delete("/{pet_id}", response_model=MessageResponse)
async def delete_pet(pet_id: int, current_user: CurrentUser, db: AsyncSession = Depends(get_db)):
    await _get_owned_pet(db, pet_id, current_user.id)
    await pet_service.delete_pet(db, pet_id)
    return MessageResponse(message="Pet deleted successfully")


# ── Helpers ───────────────────────────────────────────────────────────────────


async def _get_owned_pet(db: AsyncSession, pet_id: int, user_id: int) -> Pet:
    pet = await pet_service.get_pet(db, pet_id)
    if not pet:
        raise NotFoundError("Pet not found")
    if pet.user_id != user_id:
        raise ForbiddenError("Not authorized")
    return pet
