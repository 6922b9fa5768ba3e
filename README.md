# receitario

A small recipe book library. It keeps an ordered list of recipes, each with
preparation instructions, a favourite mark and its own ingredients, and a
separate pantry of ingredients. All messages and renderings are in
Portuguese.

## Installation

```
pip install .
```

## Modules

- `receitario.ingredients`: `Ingredient` (name, unit, quantity, essential),
  `IngredientList` with `add`, `remove`, `find`, `toggle_essential`,
  `essentials`, `sort_by_name`, `rename` and `names`, plus `len()`,
  iteration and `name in pantry`. The text renderings are `format_ingredient`,
  `format_ingredient_list` and `format_essentials`.
- `receitario.recipes`: `Recipe` (name, instructions, ingredients, favorite),
  `RecipeBook` with `add`, `remove`, `find`, `toggle_favorite`, `favorites`,
  `add_ingredient`, `remove_ingredient` and `ingredients_of`, plus `len()` and
  iteration. The text renderings are `format_recipe`, `format_recipe_list` and
  `format_favorites`.
- `receitario.sample_data`: `populate_sample_data(book, pantry)` adds ten
  basic pantry ingredients and three recipes (Bolo Simples, Panquecas,
  Chocolate Quente) with their ingredients.
- `receitario.menu`: the fixed screens as strings: `credits_text()`,
  `header_text()`, `menu_text()` and `cake_art()`.

## Example

```python
from receitario.recipes import RecipeBook, format_recipe
from receitario.ingredients import IngredientList, format_ingredient_list

book = RecipeBook()
book.add("Panquecas", "Misture os liquidos. Frite em frigideira quente.")
book.add_ingredient("Panquecas", "Ovos", "unidade", 2.0, True)
book.toggle_favorite("Panquecas")
print(format_recipe(book.find("Panquecas")))

pantry = IngredientList()
pantry.add("Sal", "pitada", 0.5, False)
pantry.add("Acucar", "xicara", 1.0, True)
pantry.sort_by_name()
print(format_ingredient_list(pantry))
```

## Errors

- A missing name raises `RecipeNotFoundError` or `IngredientNotFoundError`.
- Removing from an empty ingredient list, or removing, favouriting or
  changing ingredients in an empty recipe book, raises `EmptyListError`.
- Adding an ingredient a recipe already has raises `DuplicateIngredientError`.

All of these are `LookupError` subclasses except `DuplicateIngredientError`,
which is a `ValueError`.

## What it does not do

The package has no command to run and no interactive menu loop: it provides
the recipe book, the pantry, the sample data and the screen texts, but
nothing reads menu choices from the keyboard. Data is kept in memory only;
nothing is saved to disk.

## Tests

```
pip install ".[test]"
pytest
```