"""The kinds of pokemon that can be put in a team."""

from __future__ import annotations

import enum


class Species(enum.Enum):
    """A pokemon kind with its display name and front sprite path."""

    INFERNAPE = (0, "Infernape", ":assets/pokemons/front/infernape.png")
    DARKRAI = (1, "Darkrai", ":assets/pokemons/front/darkrai.png")
    GIRATINA = (2, "Giratina", ":assets/pokemons/front/giratina.png")
    PIKACHU = (3, "Pikachu", ":assets/pokemons/front/pikachu.png")
    CHARIZARD = (4, "Charizard", ":assets/pokemons/front/charizard.png")

    def __new__(cls, code: int, display_name: str, sprite: str):
        member = object.__new__(cls)
        member._value_ = code
        member.display_name = display_name
        member.sprite = sprite
        return member


def all_species() -> list[Species]:
    """Every species, in the order they are offered for selection."""
    return list(Species)