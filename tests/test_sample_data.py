from receitario.ingredients import IngredientList
from receitario.recipes import RecipeBook
from receitario.sample_data import populate_sample_data


def _loaded():
    book = RecipeBook()
    pantry = IngredientList()
    populate_sample_data(book, pantry)
    return book, pantry


def test_pantry_has_ten_basic_ingredients_in_order():
    _, pantry = _loaded()
    assert pantry.names() == [
        "Farinha de trigo",
        "Acucar",
        "Ovos",
        "Leite",
        "Fermento",
        "Sal",
        "Manteiga",
        "Chocolate em po",
        "Oleo",
        "Canela",
    ]


def test_pantry_non_essentials():
    _, pantry = _loaded()
    non_essential = [item.name for item in pantry if not item.essential]
    assert non_essential == ["Sal", "Chocolate em po", "Canela"]
    assert pantry.find("Sal").unit == "pitada"
    assert pantry.find("Sal").quantity == 0.5


def test_recipes_in_order_and_not_favorite():
    book, _ = _loaded()
    assert [recipe.name for recipe in book] == [
        "Bolo Simples",
        "Panquecas",
        "Chocolate Quente",
    ]
    assert book.favorites() == []


def test_recipe_ingredients():
    book, _ = _loaded()
    assert book.find("Bolo Simples").ingredients.names() == [
        "Farinha de trigo",
        "Acucar",
        "Ovos",
        "Leite",
        "Fermento",
    ]
    assert len(book.find("Panquecas").ingredients) == 4
    assert book.find("Panquecas").ingredients.find("Leite").quantity == 300.0
    sugar = book.find("Chocolate Quente").ingredients.find("Acucar")
    assert sugar.unit == "colher de sopa"
    assert sugar.quantity == 2.0


def test_instructions_kept():
    book, _ = _loaded()
    assert (
        book.find("Panquecas").instructions
        == "Misture liquidos primeiro. Frite em frigideira quente."
    )


def test_ingredients_go_to_first_recipe_with_that_name():
    book = RecipeBook()
    book.add("Panquecas", "Receita antiga.")
    populate_sample_data(book, IngredientList())
    matching = [recipe for recipe in book if recipe.name == "Panquecas"]
    assert len(matching) == 2
    assert matching[0].instructions == "Receita antiga."
    assert "Manteiga" in matching[0].ingredients
    assert len(matching[1].ingredients) == 0


def test_appends_to_existing_contents():
    book = RecipeBook()
    pantry = IngredientList()
    pantry.add("Mel", "colher", 1.0, False)
    book.add("Sopa", "Ferva.")
    populate_sample_data(book, pantry)
    assert pantry.names()[0] == "Mel"
    assert len(pantry) == 11
    assert [recipe.name for recipe in book][0] == "Sopa"
    assert len(book) == 4