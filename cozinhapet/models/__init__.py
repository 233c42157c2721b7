from cozinhapet.models.user import User
from cozinhapet.models.pet import Pet
from cozinhapet.models.recipe import Recipe
from cozinhapet.models.comment import Comment
from cozinhapet.models.favorite import Favorite
from cozinhapet.models.follower import Follower
from cozinhapet.models.session import UserSession

__all__ = [
    "User",
    "Pet",
    "Recipe",
    "Comment",
    "Favorite",
    "Follower",
    "UserSession",
]
