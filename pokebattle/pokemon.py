"""Pokemon in battle: their stats, moves, status and the species that build them."""

from __future__ import annotations

from dataclasses import dataclass

from pokebattle import attacks as _moves
from pokebattle.attacks import Attack
from pokebattle.elements import (
    DARK_TYPE,
    DRAGON_TYPE,
    ELECTRIC_TYPE,
    FIRE_TYPE,
    PokemonType,
)
from pokebattle.species import Species
from pokebattle.status import Status


@dataclass(frozen=True)
class _Template:
    pokemon_type: PokemonType
    sprite: str
    default_name: str
    moves: tuple[Attack, ...]


_TEMPLATES: dict[Species, _Template] = {
    Species.CHARIZARD: _Template(
        FIRE_TYPE,
        "charizard.png",
        "Charizard",
        (_moves.FIRE_BLAST, _moves.FLAMETHROWER, _moves.FLAME_WHEEL, _moves.EMBER),
    ),
    Species.DARKRAI: _Template(
        DARK_TYPE,
        "darkrai.png",
        "Darkrai",
        (_moves.DIG, _moves.NIGHT_SHADE, _moves.DARK_PULSE, _moves.SHADOW_BALL),
    ),
    Species.GIRATINA: _Template(
        DRAGON_TYPE,
        "giratina.png",
        "Giratina",
        (_moves.SHADOW_BALL, _moves.NIGHT_SHADE, _moves.ENERGY_BALL, _moves.BITE),
    ),
    Species.INFERNAPE: _Template(
        FIRE_TYPE,
        "infernape.png",
        "Infernape",
        (_moves.FIRE_BLAST, _moves.FLAMETHROWER, _moves.FLAME_WHEEL, _moves.EMBER),
    ),
    Species.PIKACHU: _Template(
        ELECTRIC_TYPE,
        "pikachu.png",
        "Pikachua",
        (
            _moves.THUNDER_SHOCK,
            _moves.THUNDERBOLT,
            _moves.THUNDER_SHOCK,
            _moves.QUICK_ATTACK,
        ),
    ),
}


class Pokemon:
    """A battling pokemon of a given species with its own stats and moves."""

    def __init__(
        self,
        species: Species,
        health: int,
        attack: int,
        defense: int,
        speed: int,
        name: str | None = None,
    ) -> None:
        self.species = Species(species)
        template = _TEMPLATES[self.species]
        self.pokemon_type = template.pokemon_type
        self.sprite = template.sprite
        self.name = template.default_name if name is None else name
        self.max_health = health
        self.health = health
        self.attack = attack
        self.defense = defense
        self.speed = speed
        self.status: Status | None = None
        self.attacks: list[Attack] = [move.copy() for move in template.moves]

    def __repr__(self) -> str:
        return (
            f"Pokemon({self.species.name}, name={self.name!r}, "
            f"health={self.health}/{self.max_health}, attack={self.attack}, "
            f"defense={self.defense}, speed={self.speed})"
        )

    def is_fainted(self) -> bool:
        """True once health has dropped to zero or below."""
        return self.health <= 0

    def has_status(self) -> bool:
        """Whether a status currently afflicts this pokemon."""
        return self.status is not None

    def set_status(self, status: Status) -> None:
        """Afflict this pokemon with a copy of the given status."""
        self.status = status.copy()

    def remove_status(self) -> None:
        """Clear any status."""
        self.status = None

    def apply_status_effect(self, rng=None) -> None:
        """Spend a turn of the current status and take its damage."""
        if self.status is None:
            raise ValueError(f"{self.name} has no status")
        damage = self.status.apply_effect(rng)
        self.health = self.health - damage if self.health > damage else 0

    def do_attack(self, enemy: "Pokemon", attack: Attack, rng=None) -> None:
        """Hit the enemy with the given move, adjusting for type matchups."""
        damage = attack.calculate_damage(self.attack, enemy.defense, rng)
        enemy_element = enemy.pokemon_type.element
        if self.pokemon_type.is_resistant_to(enemy_element):
            damage = int(damage * 0.5)
        elif self.pokemon_type.is_effective_against(enemy_element):
            damage = int(damage * 1.5)
        enemy.health = enemy.health - damage if enemy.health > damage else 0

    def copy(self) -> "Pokemon":
        """Return an independent copy, moves and status included."""
        clone = Pokemon(
            self.species, self.max_health, self.attack, self.defense, self.speed, self.name
        )
        clone.health = self.health
        clone.attacks = [move.copy() for move in self.attacks]
        clone.status = self.status.copy() if self.status is not None else None
        return clone


def create_pokemon(
    species: Species,
    health: int,
    attack: int,
    defense: int,
    speed: int,
    name: str | None = None,
) -> Pokemon:
    """Build a fresh pokemon of the given species."""
    return Pokemon(species, health, attack, defense, speed, name)