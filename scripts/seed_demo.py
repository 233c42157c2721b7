#!/usr/bin/env python3
"""
Seed a development database with a small demo: two users, a pet, a recipe
and a favorite.

Usage (after `alembic upgrade head`):
    python scripts/seed_demo.py
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from cozinhapet.db.session import AsyncSessionLocal, engine
from cozinhapet.schemas.pet import PetCreate
from cozinhapet.schemas.recipe import RecipeCreate
from cozinhapet.schemas.user import UserCreate
from cozinhapet.services import favorite_service, pet_service, recipe_service, user_service


async def main() -> None:
    async with AsyncSessionLocal() as db:
        ana = await user_service.create_user(
            db, UserCreate(username="ana", email="ana@x.com", password="ana-password")
        )
        bob = await user_service.create_user(
            db, UserCreate(username="bob", email="bob@x.com", password="bob-password")
        )
        await pet_service.create_pet(db, ana.id, PetCreate(name="Rex", type="dog"))
        recipe = await recipe_service.create_recipe(
            db,
            ana.id,
            RecipeCreate(
                title="Frango Assado",
                ingredients="chicken thighs, sweet potato, carrots",
                instructions="Bake everything at 180C for 40 minutes and let it cool.",
                pet_type="dog",
                category="poultry",
                cooking_type="baked",
                prep_time=40,
            ),
        )
        await favorite_service.add_favorite(db, bob.id, recipe.id)

        favorites = await favorite_service.get_favorites(db, bob.id)
        print(f"\nbob's favorites: {[r.title for r in favorites]}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
