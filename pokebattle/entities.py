"""Trainers on either side of a battle, and the battle that pits them together."""

from __future__ import annotations

import copy as _copy
import random
from abc import ABC, abstractmethod
from typing import Iterable

from pokebattle.attacks import Attack
from pokebattle.pokemon import Pokemon, create_pokemon
from pokebattle.species import Species


class EntityVisitor(ABC):
    """Operation that behaves differently for the player and the enemy."""

    @abstractmethod
    def visit_player(self, player: "Player") -> None:
        """Handle the player."""

    @abstractmethod
    def visit_enemy(self, enemy: "Enemy") -> None:
        """Handle the enemy."""


class Entity(ABC):
    """A trainer with a team of pokemon and one of them in the field."""

    def __init__(self, name: str, pokemons: Iterable[Pokemon]) -> None:
        self.name = name
        self.pokemons: list[Pokemon] = list(pokemons)
        self.current_pokemon: Pokemon | None = self.pokemons[0] if self.pokemons else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, pokemons={self.pokemons!r})"

    def has_pokemon_alive(self) -> bool:
        """Whether any pokemon of the team has not fainted."""
        return any(not p.is_fainted() for p in self.pokemons)

    @abstractmethod
    def accept(self, visitor: EntityVisitor) -> None:
        """Dispatch to the visitor method for this kind of trainer."""

    def copy(self) -> "Entity":
        """Return a copy with its own team; the first pokemon is put in the field."""
        clone = _copy.copy(self)
        clone.pokemons = [p.copy() for p in self.pokemons]
        clone.current_pokemon = clone.pokemons[0] if clone.pokemons else None
        return clone


class Player(Entity):
    """The human trainer, who picks which pokemon is in the field."""

    def accept(self, visitor: EntityVisitor) -> None:
        visitor.visit_player(self)

    def set_current_pokemon(self, index: int) -> Pokemon:
        """Put the pokemon at the given position in the field and return it."""
        if not 0 <= index < len(self.pokemons):
            raise IndexError(f"no pokemon at position {index}")
        self.current_pokemon = self.pokemons[index]
        return self.current_pokemon


class Enemy(Entity):
    """The computer trainer, with a fixed team sent out in order."""

    def __init__(self, name: str) -> None:
        super().__init__(
            name,
            [
                create_pokemon(Species.GIRATINA, 300, 100, 100, 100, "Destructor"),
                create_pokemon(Species.DARKRAI, 300, 120, 120, 120, "Nightmare"),
                create_pokemon(Species.INFERNAPE, 500, 250, 250, 250, "Allfire"),
            ],
        )
        self.index = 0

    def accept(self, visitor: EntityVisitor) -> None:
        visitor.visit_enemy(self)

    def change_pokemon(self) -> Pokemon:
        """Send out the next pokemon of the team and return it."""
        if self.index + 1 >= len(self.pokemons):
            raise IndexError("no more pokemon to send out")
        self.index += 1
        self.current_pokemon = self.pokemons[self.index]
        return self.current_pokemon

    def copy(self) -> "Enemy":
        clone = super().copy()
        clone.index = 0
        return clone


class Battle:
    """A battle between a player and an enemy, each holding its own team copy."""

    def __init__(self, player: Player, enemy: Enemy) -> None:
        self.player = player.copy()
        self.enemy = enemy.copy()

    def player_attack(self, index: int) -> Attack:
        """The move at the given position of the player's pokemon in the field."""
        return self.player.current_pokemon.attacks[index]

    def enemy_attack(self, rng=None) -> Attack:
        """A randomly chosen move of the enemy's pokemon in the field."""
        rng = random if rng is None else rng
        return self.enemy.current_pokemon.attacks[rng.randrange(4)]