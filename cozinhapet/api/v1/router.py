from fastapi import APIRouter

from cozinhapet.api.v1.endpoints import auth, comments, pets, recipes, users

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(pets.router)
api_router.include_router(recipes.router)
api_router.include_router(comments.router)
api_router.include_router(users.router)
