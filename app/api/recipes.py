"""
Recipe endpoints
"""
from typing import List

from fastapi import APIRouter

from app.database.schemas import CreatedResponse, Recipe, RecipeCreate, RecipeUpdate, SuccessResponse
from app.database import storage as database
from app.services.utils import new_id
from app.api.utils import get_or_404

router = APIRouter()

# Fields that must stay strings in storage; an explicit null leaves them unchanged
_TEXT_FIELDS = ("title", "ingredients", "instructions")


@router.get("/recipes", response_model=List[Recipe])
async def list_recipes():
    return database.load_db().recipes


@router.post("/recipes", response_model=CreatedResponse, status_code=201)
async def create_recipe(recipe: RecipeCreate):
    """
    Add a recipe (title required)
    """
    recipe_id = new_id()
    with database.transaction() as db:
        db.recipes.append(Recipe(
            id=recipe_id,
            title=recipe.title,
            ingredients=recipe.ingredients or "",
            instructions=recipe.instructions or "",
            image=recipe.image or None,
        ))
    return CreatedResponse(id=recipe_id)


@router.put("/recipes/{recipe_id}", response_model=SuccessResponse)
async def update_recipe(recipe_id: str, updates: RecipeUpdate):
    """
    Update a recipe

    Only fields present in the request body are applied.
    """
    changes = updates.model_dump(exclude_unset=True)
    with database.transaction() as db:
        recipe = get_or_404(db.recipes, recipe_id)
        for field, value in changes.items():
            if value is None and field in _TEXT_FIELDS:
                continue
            setattr(recipe, field, value)
    return SuccessResponse(success=True)


@router.delete("/recipes/{recipe_id}", response_model=SuccessResponse)
async def delete_recipe(recipe_id: str):
    """
    Delete a recipe; 404 if no recipe has this id
    """
    with database.transaction() as db:
        recipe = get_or_404(db.recipes, recipe_id)
        db.recipes.remove(recipe)
    return SuccessResponse(success=True)
