"""Recipes, the recipe book that holds them, and their text renderings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from receitario.ingredients import (
    EmptyListError,
    IngredientList,
    format_ingredient_list,
)


@dataclass
class Recipe:
    """A named recipe with its preparation and its own ingredients."""

    name: str
    instructions: str
    ingredients: IngredientList = field(default_factory=IngredientList)
    favorite: bool = False


class RecipeNotFoundError(LookupError):
    """Raised when no recipe has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Receita '{name}' nao encontrada.")
        self.name = name


class DuplicateIngredientError(ValueError):
    """Raised when a recipe already has an ingredient of that name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Ingrediente '{name}' ja existe na receita.")
        self.name = name


_EMPTY_BOOK = "Lista de receitas vazia."


class RecipeBook:
    """An ordered collection of recipes, looked up by exact name."""

    def __init__(self) -> None:
        self._recipes: list[Recipe] = []

    def _require_recipes(self) -> None:
        if not self._recipes:
            raise EmptyListError(_EMPTY_BOOK)

    def _index_of(self, name: str) -> int:
        for position, recipe in enumerate(self._recipes):
            if recipe.name == name:
                return position
        raise RecipeNotFoundError(name)

    def add(self, name: str, instructions: str) -> Recipe:
        """Append a new, non-favorite recipe with no ingredients."""
        recipe = Recipe(name, instructions)
        self._recipes.append(recipe)
        return recipe

    def remove(self, name: str) -> Recipe:
        """Remove the first recipe with this name, with its ingredients."""
        self._require_recipes()
        return self._recipes.pop(self._index_of(name))

    def find(self, name: str) -> Recipe:
        """Return the first recipe with this name."""
        return self._recipes[self._index_of(name)]

    def toggle_favorite(self, name: str) -> bool:
        """Flip the favorite mark of a recipe; return the new mark."""
        self._require_recipes()
        recipe = self.find(name)
        recipe.favorite = not recipe.favorite
        return recipe.favorite

    def favorites(self) -> list[Recipe]:
        """Recipes marked favorite, in book order."""
        return [recipe for recipe in self._recipes if recipe.favorite]

    def add_ingredient(
        self,
        recipe_name: str,
        ingredient_name: str,
        unit: str,
        quantity: float,
        essential: bool,
    ):
        """Add an ingredient to a recipe, refusing a name it already has."""
        self._require_recipes()
        recipe = self.find(recipe_name)
        if ingredient_name in recipe.ingredients:
            raise DuplicateIngredientError(ingredient_name)
        return recipe.ingredients.add(ingredient_name, unit, quantity, essential)

    def remove_ingredient(self, recipe_name: str, ingredient_name: str):
        """Remove an ingredient from a recipe and return it."""
        self._require_recipes()
        return self.find(recipe_name).ingredients.remove(ingredient_name)

    def ingredients_of(self, recipe_name: str) -> IngredientList:
        """The ingredient list of a recipe."""
        self._require_recipes()
        return self.find(recipe_name).ingredients

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)


def format_recipe(recipe: Recipe) -> str:
    """Full description of a recipe, as shown when it is looked up."""
    return "\n".join(
        [
            f"Receita encontrada: {recipe.name}",
            f"Modo de preparo: {recipe.instructions}",
            "Ingredientes:",
            format_ingredient_list(recipe.ingredients),
            f"Favorita: {'Sim' if recipe.favorite else 'Nao'}",
        ]
    )


def format_recipe_list(recipes: Iterable[Recipe]) -> str:
    """Numbered list of recipe names, favorites starred, with a total."""
    items = list(recipes)
    if not items:
        return "Nenhuma receita cadastrada."
    lines = [
        f"{number}. * {recipe.name}" if recipe.favorite else f"{number}.   {recipe.name}"
        for number, recipe in enumerate(items, start=1)
    ]
    lines.append("-----------------------")
    lines.append(f"Total: {len(items)} receitas")
    return "\n".join(lines)


def format_favorites(recipes: Iterable[Recipe]) -> str:
    """Details of every favorite recipe, or a note that there are none."""
    blocks = [
        "\n".join(
            [
                f"Receita: {recipe.name}",
                f"Modo de preparo: {recipe.instructions}",
                "Ingredientes:",
                format_ingredient_list(recipe.ingredients),
            ]
        )
        for recipe in recipes
        if recipe.favorite
    ]
    if not blocks:
        return "Nenhuma receita favoritada"
    return "\n\n".join(blocks)