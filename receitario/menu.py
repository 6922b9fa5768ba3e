"""Fixed screens of the application: credits, header and menu."""

from __future__ import annotations

_CAKE_LINES = (
    "      *                                             *",
    "                                               *",
    "                    *",
    "                                  *",
    "                                                            *",
    "         *",
    "                                                  *",
    "             *",
    "                           *             *",
    "                                                     *",
    "      *                                                               *",
    "               *",
    "                               (             )",
    "                       )      (*)           (*)      (",
    "              *       (*)      |             |      (*)",
    "                       |      |~|           |~|      |          *",
    "                      |~|     | |           | |     |~|",
    "                      | |     | |           | |     | |",
    "                     ,| |a@@@@| |@@@@@@@@@@@| |@@@@a| |.",
    "                .,a@@@| |@@@@@| |@@@@@@@@@@@| |@@@@@| |@@@@a,.",
    "              ,a@@@@@@| |@@@@@@@@@@@@.@@@@@@@@@@@@@@| |@@@@@@@a,",
    "             a@@@@@@@@@@@@@@@@@@@@@' . `@@@@@@@@@@@@@@@@@@@@@@@@a",
    "             ;`@@@@@@@@@@@@@@@@@@'   .   `@@@@@@@@@@@@@@@@@@@@@';",
    "             ;@@@`@@@@@@@@@@@@@'     .     `@@@@@@@@@@@@@@@@'@@@;",
    "             ;@@@;,.aaaaaaaaaa       .       aaaaa,,aaaaaaa,;@@@;",
    "             ;;@;;;;@@@@@@@@;@      @.@      ;@@@;;;@@@@@@;;;;@@;",
    "             ;;;;;;;@@@@;@@;;@    @@ . @@    ;;@;;;;@@;@@@;;;;;;;",
    "             ;;;;;;;;@@;;;;;;;  @@   .   @@  ;;;;;;;;;;;@@;;;;@;;",
    "             ;;;;;;;;;;;;;;;;;@@     .     @@;;;;;;;;;;;;;;;;@@@;",
    "         ,%%%;;;;;;;;@;;;;;;;;       .       ;;;;;;;;;;;;;;;;@@;;%%%,",
    "      .%%%%%%;;;;;;;@@;;;;;;;;     ,%%%,     ;;;;;;;;;;;;;;;;;;;;%%%%%%,",
    "     .%%%%%%%;;;;;;;@@;;;;;;;;   ,%%%%%%%,   ;;;;;;;;;;;;;;;;;;;;%%%%%%%,",
    "     %%%%%%%%`;;;;;;;;;;;;;;;;  %%%%%%%%%%%  ;;;;;;;;;;;;;;;;;;;'%%%%%%%%",
    "     %%%%%%%%%%%%`;;;;;;;;;;;;,%%%%%%%%%%%%%,;;;;;;;;;;;;;;;'%%%%%%%%%%%%",
    "     `%%%%%%%%%%%%%%%%%,,,,,,,%%%%%%%%%%%%%%%,,,,,,,%%%%%%%%%%%%%%%%%%'",
    "       `%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%'",
    "           `%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%'",
    '                  """""""""""""""`,,,,,,,,,\'""""""""""""""""',
    "                                 `%%%%%%%'",
    "                                  `%%%%%'",
    "                                    %%%",
    "                                   %%%%",
    "                                .,%%%%%%%,.",
    "                           ,%%%%%%%%%%%%%%%%%%%,",
)

_MENU_LINES = (
    "",
    "=== Gerenciar Receitas ===",
    "01 - Adicionar receita",
    "02 - Remover receita",
    "03 - Buscar receita",
    "04 - Exibir receitas",
    "05 - Favoritar receita",
    "06 - Listar receitas favoritas",
    "07 - Adicionar ingrediente a receita",
    "08 - Remover ingrediente de receita",
    "09 - Exibir ingredientes da receita",
    "",
    "=== Gerenciar Dispensa de Ingredientes ===",
    "10 - Adicionar ingrediente",
    "11 - Remover ingrediente",
    "12 - Buscar ingrediente",
    "13 - Exibir ingredientes",
    "14 - Marcar ingrediente como essencial",
    "15 - Listar ingredientes essenciais",
    "16 - Reordenar ingredientes",
    "17 - Renomear ingrediente",
    "",
    "0 - Sair",
)

_HEADER_LINES = (
    "###############################################",
    "###   Bem-vindo ao seu Livro de Receitas!   ###",
    "###############################################",
)

_CREDITS_LINES = (
    "                #################################################",
    "                ## Trabalho de Algoritmos e Estrutura de Dados ##",
    "                #################################################",
    "",
)


def cake_art() -> str:
    """The cake drawing shown on the opening screen."""
    return "\n".join(_CAKE_LINES)


def credits_text() -> str:
    """The opening screen: title box followed by the cake drawing."""
    return "\n".join(_CREDITS_LINES) + "\n" + cake_art()


def menu_text() -> str:
    """The list of menu commands, starting with a blank line."""
    return "\n".join(_MENU_LINES)


def header_text() -> str:
    """The banner printed above the menu."""
    return "\n".join(_HEADER_LINES)