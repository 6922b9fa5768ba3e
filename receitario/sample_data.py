"""Sample pantry and recipes loaded when the application starts."""

from __future__ import annotations

from receitario.ingredients import IngredientList
from receitario.recipes import RecipeBook

_PANTRY = (
    ("Farinha de trigo", "xicara", 2.0, True),
    ("Acucar", "xicara", 1.0, True),
    ("Ovos", "unidade", 3.0, True),
    ("Leite", "ml", 200.0, True),
    ("Fermento", "colher de cha", 1.0, True),
    ("Sal", "pitada", 0.5, False),
    ("Manteiga", "colher de sopa", 2.0, True),
    ("Chocolate em po", "colher de sopa", 3.0, False),
    ("Oleo", "colher de sopa", 2.0, True),
    ("Canela", "colher de cha", 0.5, False),
)

_RECIPES = (
    (
        "Bolo Simples",
        "Misture os secos. Adicione os liquidos. Asse por 40min.",
        (
            ("Farinha de trigo", "xicara", 2.0, True),
            ("Acucar", "xicara", 1.0, True),
            ("Ovos", "unidade", 3.0, True),
            ("Leite", "ml", 200.0, True),
            ("Fermento", "colher de cha", 1.0, True),
        ),
    ),
    (
        "Panquecas",
        "Misture liquidos primeiro. Frite em frigideira quente.",
        (
            ("Farinha de trigo", "xicara", 1.5, True),
            ("Ovos", "unidade", 2.0, True),
            ("Leite", "ml", 300.0, True),
            ("Manteiga", "colher de sopa", 1.0, True),
        ),
    ),
    (
        "Chocolate Quente",
        "Aqueca o leite. Misture o chocolate. Adoce a gosto.",
        (
            ("Leite", "ml", 300.0, True),
            ("Chocolate em po", "colher de sopa", 3.0, False),
            ("Acucar", "colher de sopa", 2.0, True),
        ),
    ),
)


def populate_sample_data(book: RecipeBook, pantry: IngredientList) -> None:
    """Fill the pantry with basic ingredients and add three sample recipes.

    Each recipe is appended to the book and its ingredients go to the first
    recipe in the book carrying that name.
    """
    for name, unit, quantity, essential in _PANTRY:
        pantry.add(name, unit, quantity, essential)

    for name, instructions, ingredients in _RECIPES:
        book.add(name, instructions)
        target = book.find(name)
        for ingredient_name, unit, quantity, essential in ingredients:
            target.ingredients.add(ingredient_name, unit, quantity, essential)