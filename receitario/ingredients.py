"""Ingredients and ordered ingredient lists, with their text renderings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Ingredient:
    """A named quantity of something, in a given unit."""

    name: str
    unit: str
    quantity: float
    essential: bool = False


class EmptyListError(LookupError):
    """Raised when an operation needs a non-empty list."""

    def __init__(self, message: str = "Lista vazia.") -> None:
        super().__init__(message)


class IngredientNotFoundError(LookupError):
    """Raised when no ingredient has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Ingrediente '{name}' nao encontrado.")
        self.name = name


class IngredientList:
    """An ordered collection of ingredients, looked up by exact name."""

    def __init__(self) -> None:
        self._items: list[Ingredient] = []

    def add(self, name: str, unit: str, quantity: float, essential: bool) -> Ingredient:
        """Append a new ingredient at the end and return it."""
        ingredient = Ingredient(name, unit, float(quantity), bool(essential))
        self._items.append(ingredient)
        return ingredient

    def _index_of(self, name: str) -> int:
        for position, ingredient in enumerate(self._items):
            if ingredient.name == name:
                return position
        raise IngredientNotFoundError(name)

    def remove(self, name: str) -> Ingredient:
        """Remove the first ingredient with this name and return it."""
        if not self._items:
            raise EmptyListError()
        return self._items.pop(self._index_of(name))

    def find(self, name: str) -> Ingredient:
        """Return the first ingredient with this name."""
        return self._items[self._index_of(name)]

    def toggle_essential(self, name: str) -> bool:
        """Flip the essential mark of an ingredient; return the new mark."""
        ingredient = self.find(name)
        ingredient.essential = not ingredient.essential
        return ingredient.essential

    def essentials(self) -> list[Ingredient]:
        """Ingredients marked essential, in list order."""
        return [ingredient for ingredient in self._items if ingredient.essential]

    def sort_by_name(self) -> None:
        """Sort the list alphabetically by name, keeping ties in order."""
        self._items.sort(key=lambda ingredient: ingredient.name)

    def rename(self, name: str, new_name: str) -> Ingredient:
        """Give the first ingredient with this name a new name."""
        ingredient = self.find(name)
        ingredient.name = new_name
        return ingredient

    def names(self) -> list[str]:
        return [ingredient.name for ingredient in self._items]

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return any(ingredient.name == name for ingredient in self._items)


def _yes_no(flag: bool) -> str:
    return "Sim" if flag else "Nao"


def format_ingredient(ingredient: Ingredient) -> str:
    """One-line description of an ingredient, without a number."""
    return (
        f"{ingredient.name} | Unidade: {ingredient.unit} | "
        f"Quantidade: {ingredient.quantity:.2f} | "
        f"Essencial: {_yes_no(ingredient.essential)}"
    )


def format_ingredient_list(ingredients: Iterable[Ingredient]) -> str:
    """Numbered listing of ingredients, or a note that there are none."""
    items = list(ingredients)
    if not items:
        return "Lista vazia."
    lines = ["Lista de Ingredientes:"]
    lines.extend(
        f"{number}. {format_ingredient(ingredient)}"
        for number, ingredient in enumerate(items, start=1)
    )
    return "\n".join(lines)


def format_essentials(ingredients: Iterable[Ingredient]) -> str:
    """Listing of the essential ingredients among those given."""
    lines = ["Ingredientes Essenciais:"]
    found = [ingredient for ingredient in ingredients if ingredient.essential]
    if found:
        lines.extend(
            f"Nome: {ingredient.name} | Unidade: {ingredient.unit} | "
            f"Quantidade: {ingredient.quantity:.2f}"
            for ingredient in found
        )
    else:
        lines.append("Nenhum ingrediente essencial encontrado.")
    return "\n".join(lines)