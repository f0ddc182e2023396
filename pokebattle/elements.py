"""Elemental types and the effectiveness and resistance tables between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ElementType(enum.Enum):
    """The eighteen elements a pokemon or an attack can belong to."""

    NORMAL = 0
    FIRE = 1
    WATER = 2
    ELECTRIC = 3
    GRASS = 4
    ICE = 5
    FIGHTING = 6
    POISON = 7
    GROUND = 8
    FLYING = 9
    PSYCHIC = 10
    BUG = 11
    ROCK = 12
    GHOST = 13
    DRAGON = 14
    DARK = 15
    STEEL = 16
    FAIRY = 17


_E = ElementType

# For each element handed to the check, the elements of the type that make it true.
_EFFECTIVE: dict[ElementType, frozenset[ElementType]] = {
    _E.NORMAL: frozenset(),
    _E.FIRE: frozenset({_E.GRASS, _E.ICE, _E.BUG, _E.STEEL}),
    _E.WATER: frozenset({_E.FIRE, _E.GROUND, _E.ROCK}),
    _E.ELECTRIC: frozenset({_E.WATER, _E.FLYING}),
    _E.GRASS: frozenset({_E.WATER, _E.GROUND, _E.ROCK}),
    _E.ICE: frozenset({_E.GRASS, _E.GROUND, _E.FLYING, _E.DRAGON}),
    _E.FIGHTING: frozenset({_E.NORMAL, _E.ICE, _E.ROCK, _E.DARK, _E.STEEL}),
    _E.POISON: frozenset({_E.GRASS, _E.FAIRY}),
    _E.GROUND: frozenset({_E.FIRE, _E.ELECTRIC, _E.POISON, _E.ROCK, _E.STEEL}),
    _E.FLYING: frozenset({_E.GRASS, _E.FIGHTING, _E.BUG}),
    _E.PSYCHIC: frozenset({_E.FIGHTING, _E.POISON}),
    _E.BUG: frozenset({_E.GRASS, _E.PSYCHIC, _E.DARK}),
    _E.ROCK: frozenset({_E.FIRE, _E.ICE, _E.FLYING, _E.BUG}),
    _E.GHOST: frozenset({_E.PSYCHIC, _E.GHOST}),
    _E.DRAGON: frozenset({_E.DRAGON}),
    _E.DARK: frozenset({_E.PSYCHIC, _E.GHOST}),
    _E.STEEL: frozenset({_E.ICE, _E.ROCK, _E.FAIRY}),
}

_RESISTANT: dict[ElementType, frozenset[ElementType]] = {
    _E.NORMAL: frozenset({_E.ROCK, _E.STEEL}),
    _E.FIRE: frozenset({_E.FIRE, _E.GRASS, _E.ICE, _E.BUG, _E.STEEL}),
    _E.WATER: frozenset({_E.WATER, _E.ELECTRIC, _E.STEEL}),
    _E.ELECTRIC: frozenset({_E.ELECTRIC, _E.FLYING, _E.STEEL}),
    _E.GRASS: frozenset({_E.WATER, _E.GROUND, _E.ROCK}),
    _E.ICE: frozenset({_E.ICE, _E.GRASS, _E.GROUND, _E.FLYING}),
    _E.FIGHTING: frozenset({_E.BUG, _E.ROCK, _E.DARK}),
    _E.POISON: frozenset({_E.GRASS, _E.FAIRY}),
    _E.GROUND: frozenset({_E.WATER, _E.GRASS, _E.ICE}),
    _E.FLYING: frozenset({_E.ELECTRIC, _E.ROCK, _E.STEEL}),
    _E.PSYCHIC: frozenset({_E.FIGHTING, _E.POISON}),
    _E.BUG: frozenset({_E.GRASS, _E.PSYCHIC, _E.DARK}),
    _E.ROCK: frozenset({_E.FIRE, _E.ICE, _E.FLYING, _E.BUG}),
    _E.GHOST: frozenset({_E.GHOST, _E.PSYCHIC}),
    _E.DRAGON: frozenset({_E.DRAGON}),
    _E.DARK: frozenset({_E.FIGHTING, _E.DARK, _E.FAIRY}),
    _E.STEEL: frozenset(
        {
            _E.FIRE, _E.FIGHTING, _E.GROUND, _E.BUG, _E.NORMAL, _E.FLYING,
            _E.GRASS, _E.PSYCHIC, _E.ICE, _E.ROCK, _E.DRAGON, _E.STEEL,
        }
    ),
    _E.FAIRY: frozenset({_E.FIGHTING, _E.DRAGON, _E.DARK}),
}


@dataclass(frozen=True)
class PokemonType:
    """An element together with its display name."""

    element: ElementType
    name: str

    def is_effective_against(self, element: ElementType) -> bool:
        """Whether this type counts as effective for the given element."""
        return self.element in _EFFECTIVE.get(element, frozenset())

    def is_resistant_to(self, element: ElementType) -> bool:
        """Whether this type counts as resistant for the given element."""
        return self.element in _RESISTANT.get(element, frozenset())


NORMAL_TYPE = PokemonType(ElementType.NORMAL, "Normal")
FIRE_TYPE = PokemonType(ElementType.FIRE, "Fire")
WATER_TYPE = PokemonType(ElementType.WATER, "Water")
ELECTRIC_TYPE = PokemonType(ElementType.ELECTRIC, "Electric")
GRASS_TYPE = PokemonType(ElementType.GRASS, "Grass")
ICE_TYPE = PokemonType(ElementType.ICE, "Ice")
FIGHTING_TYPE = PokemonType(ElementType.FIGHTING, "Fighting")
POISON_TYPE = PokemonType(ElementType.POISON, "Poison")
GROUND_TYPE = PokemonType(ElementType.GROUND, "Ground")
FLYING_TYPE = PokemonType(ElementType.FLYING, "Flying")
PSYCHIC_TYPE = PokemonType(ElementType.PSYCHIC, "Psychic")
BUG_TYPE = PokemonType(ElementType.BUG, "Bug")
ROCK_TYPE = PokemonType(ElementType.ROCK, "Rock")
GHOST_TYPE = PokemonType(ElementType.GHOST, "Ghost")
DRAGON_TYPE = PokemonType(ElementType.DRAGON, "Dragon")
DARK_TYPE = PokemonType(ElementType.DARK, "Dark")
STEEL_TYPE = PokemonType(ElementType.STEEL, "Steel")
FAIRY_TYPE = PokemonType(ElementType.FAIRY, "Fairy")

_TYPES: dict[ElementType, PokemonType] = {
    t.element: t
    for t in (
        NORMAL_TYPE, FIRE_TYPE, WATER_TYPE, ELECTRIC_TYPE, GRASS_TYPE, ICE_TYPE,
        FIGHTING_TYPE, POISON_TYPE, GROUND_TYPE, FLYING_TYPE, PSYCHIC_TYPE,
        BUG_TYPE, ROCK_TYPE, GHOST_TYPE, DRAGON_TYPE, DARK_TYPE, STEEL_TYPE,
        FAIRY_TYPE,
    )
}


def type_of(element: ElementType) -> PokemonType:
    """Return the predefined type for an element."""
    return _TYPES[ElementType(element)]