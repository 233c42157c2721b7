import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from cozinhapet.core.config import settings
from cozinhapet.core.exceptions import NotFoundError, ValidationError
from cozinhapet.schemas.recipe import RecipeCreate, RecipeUpdate
from cozinhapet.services import recipe_service


async def test_create_recipe_starts_uncooked(db: AsyncSession, make_user):
    ana = await make_user("ana")
    data = RecipeCreate.model_validate({
        "title": "Frango Assado",
        "ingredients": "chicken",
        "instructions": "Bake it.",
        "pet_type": "dog",
        "category": "poultry",
        "cooking_type": "baked",
        "prep_time": 40,
        "cook_count": 99,
        "id": 12345,
    })
    recipe = await recipe_service.create_recipe(db, ana.id, data)
    assert recipe.cook_count == 0
    assert recipe.id != 12345
    assert recipe.user_id == ana.id


async def test_filter_by_pet_type_category_and_search(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    await make_recipe(ana.id, "chicken jerky", category="treats", ingredients="chicken breast")
    await make_recipe(ana.id, "Beef bites", category="treats", ingredients="beef liver")
    await make_recipe(ana.id, "Tuna drops", category="treats", ingredients="tuna, chicken broth")
    await make_recipe(ana.id, "Chicken Chips", category="treats", ingredients="Chicken skin")
    await make_recipe(ana.id, "chicken stew", category="poultry")
    await make_recipe(ana.id, "chicken crunch", pet_type="cat", category="treats")

    treats = await recipe_service.get_recipes(db, pet_type="dog", category="treats")
    assert {r.title for r in treats} == {"chicken jerky", "Beef bites", "Tuna drops", "Chicken Chips"}
    assert all(r.pet_type == "dog" and r.category == "treats" for r in treats)

    # title OR ingredients, case-sensitive
    chicken = await recipe_service.get_recipes(db, pet_type="dog", category="treats", search="chicken")
    assert {r.title for r in chicken} == {"chicken jerky", "Tuna drops"}


async def test_search_treats_wildcards_literally(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    await make_recipe(ana.id, "Plain rice", ingredients="rice")
    await make_recipe(ana.id, "100% fish", category="fish", ingredients="salmon")

    result = await recipe_service.get_recipes(db, search="100%")
    assert [r.title for r in result] == ["100% fish"]
    assert await recipe_service.get_recipes(db, search="_") == []


async def test_newest_first_and_pagination(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    for title in ("first", "second", "third"):
        await make_recipe(ana.id, title)

    page_one = await recipe_service.get_recipes(db, page=1, limit=2)
    page_two = await recipe_service.get_recipes(db, page=2, limit=2)
    assert [r.title for r in page_one] == ["third", "second"]
    assert [r.title for r in page_two] == ["first"]
    assert await recipe_service.get_recipes(db, page=3, limit=2) == []


async def test_default_limit_is_ten(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    for i in range(12):
        await make_recipe(ana.id, f"recipe {i}")
    assert len(await recipe_service.get_recipes(db)) == 10


@pytest.mark.parametrize(
    "kwargs",
    [
        {"page": 0},
        {"limit": 0},
        {"limit": settings.RECIPES_MAX_PAGE_SIZE + 1},
        {"pet_type": "fish"},
        {"category": "veggie"},
    ],
)
async def test_get_recipes_rejects_bad_input(db: AsyncSession, kwargs):
    with pytest.raises(ValidationError):
        await recipe_service.get_recipes(db, **kwargs)


async def test_recipes_by_user(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    bob = await make_user("bob")
    await make_recipe(ana.id, "ana one")
    await make_recipe(bob.id, "bob one")
    await make_recipe(ana.id, "ana two")

    recipes = await recipe_service.get_recipes_by_user(db, ana.id)
    assert [r.title for r in recipes] == ["ana two", "ana one"]


async def test_update_recipe_is_partial(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    recipe = await make_recipe(ana.id, "Frango Assado")
    before = recipe.updated_at

    updated = await recipe_service.update_recipe(db, recipe.id, RecipeUpdate(prep_time=55))
    assert updated.prep_time == 55
    assert updated.title == "Frango Assado"
    assert updated.updated_at > before


async def test_update_missing_recipe(db: AsyncSession):
    with pytest.raises(NotFoundError):
        await recipe_service.update_recipe(db, 999_999, RecipeUpdate(title="Nope"))


async def test_delete_recipe_reports_whether_a_row_went(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    recipe = await make_recipe(ana.id)
    recipe_id = recipe.id

    assert await recipe_service.delete_recipe(db, recipe_id) is True
    assert await recipe_service.get_recipe(db, recipe_id) is None
    assert await recipe_service.delete_recipe(db, recipe_id) is False


async def test_increment_cook_count_sequential(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    recipe = await make_recipe(ana.id)
    before = recipe.updated_at

    for _ in range(5):
        result = await recipe_service.increment_cook_count(db, recipe.id)

    assert result.cook_count == 5
    assert result.updated_at > before


async def test_increment_cook_count_concurrent(db: AsyncSession, session_factory, make_user, make_recipe):
    ana = await make_user("ana")
    recipe = await make_recipe(ana.id)

    async def cook():
        async with session_factory() as session:
            await recipe_service.increment_cook_count(session, recipe.id)

    await asyncio.gather(*(cook() for _ in range(10)))

    await db.refresh(recipe)
    assert recipe.cook_count == 10


async def test_increment_cook_count_missing_recipe(db: AsyncSession):
    assert await recipe_service.increment_cook_count(db, 999_999) is None


async def test_get_recipes_accepts_max_page_size(db: AsyncSession, make_user, make_recipe):
    ana = await make_user("ana")
    await make_recipe(ana.id)
    recipes = await recipe_service.get_recipes(db, limit=settings.RECIPES_MAX_PAGE_SIZE)
    assert len(recipes) == 1
