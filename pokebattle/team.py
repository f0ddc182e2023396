"""Building a team of up to six pokemon and saving it to a team file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from pokebattle.pokemon import Pokemon, create_pokemon
from pokebattle.savefile import load_team, save_team
from pokebattle.species import Species

MAX_TEAM_SIZE = 6
SAVE_SUFFIX = ".pokemon"

HEALTH_RANGE = (10, 90000)
STAT_RANGE = (1, 10000)


class TeamError(Exception):
    """An operation on the team cannot be carried out."""


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


@dataclass
class PokemonDraft:
    """The choices for a pokemon about to be added to a team."""

    species: Species = Species.INFERNAPE
    health: int = 250
    attack: int = 1
    defense: int = 1
    speed: int = 1
    name: str | None = None

    def __post_init__(self) -> None:
        self.species = Species(self.species)
        if self.name is None:
            self.name = self.species.display_name
        checks = (
            ("health", self.health, HEALTH_RANGE),
            ("attack", self.attack, STAT_RANGE),
            ("defense", self.defense, STAT_RANGE),
            ("speed", self.speed, STAT_RANGE),
        )
        for label, value, (low, high) in checks:
            if not low <= value <= high:
                raise ValueError(f"{label} must be between {low} and {high}, got {value}")

    def build(self) -> Pokemon:
        """Create the pokemon described by this draft."""
        return create_pokemon(
            self.species, self.health, self.attack, self.defense, self.speed, self.name
        )

    @classmethod
    def from_pokemon(cls, pokemon: Pokemon) -> "PokemonDraft":
        """A draft holding the stats of an existing pokemon, clamped to the allowed ranges."""
        return cls(
            species=pokemon.species,
            health=_clamp(pokemon.health, HEALTH_RANGE),
            attack=_clamp(pokemon.attack, STAT_RANGE),
            defense=_clamp(pokemon.defense, STAT_RANGE),
            speed=_clamp(pokemon.speed, STAT_RANGE),
            name=pokemon.name,
        )


PokemonLike = Union[Pokemon, PokemonDraft]


def _as_pokemon(pokemon: PokemonLike) -> Pokemon:
    return pokemon.build() if isinstance(pokemon, PokemonDraft) else pokemon


class TeamEditor:
    """A team being edited: pokemon can be added, looked up, changed and removed."""

    def __init__(self) -> None:
        self.pokemons: list[Pokemon] = []
        self.path: Path | None = None
        self._selected: int | None = None

    def __len__(self) -> int:
        return len(self.pokemons)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self.pokemons)

    @property
    def selected(self) -> Pokemon | None:
        """The pokemon found by the last search, if it can still be modified or removed."""
        return None if self._selected is None else self.pokemons[self._selected]

    def load(self, path) -> None:
        """Replace the team with the one stored at path; an empty path starts an empty team."""
        self.pokemons = []
        self._selected = None
        if not path:
            self.path = None
            return
        self.path = Path(path)
        try:
            self.pokemons = load_team(self.path)
        except OSError as exc:
            raise TeamError(f"cannot open {self.path}") from exc

    def add(self, pokemon: PokemonLike) -> Pokemon:
        """Append a pokemon to the team and return it."""
        if len(self.pokemons) >= MAX_TEAM_SIZE:
            raise TeamError(f"the team already holds {MAX_TEAM_SIZE} pokemon")
        built = _as_pokemon(pokemon)
        self.pokemons.append(built)
        self._selected = None
        return built

    def find(self, name: str) -> Pokemon | None:
        """Select and return the first pokemon with the given name, or None."""
        self._selected = next(
            (index for index, p in enumerate(self.pokemons) if p.name == name), None
        )
        return self.selected

    def _require_selection(self) -> int:
        if self._selected is None:
            raise TeamError("no pokemon selected")
        return self._selected

    def modify(self, pokemon: PokemonLike) -> Pokemon:
        """Replace the selected pokemon and return the new one."""
        index = self._require_selection()
        built = _as_pokemon(pokemon)
        self.pokemons[index] = built
        self._selected = None
        return built

    def remove(self) -> Pokemon:
        """Remove the selected pokemon from the team and return it."""
        index = self._require_selection()
        self._selected = None
        return self.pokemons.pop(index)

    def save(self, path) -> Path:
        """Write the team to path, adding the save suffix if there is none."""
        if not self.pokemons:
            raise TeamError("add a pokemon before saving")
        if not path or not os.fspath(path):
            raise TeamError("no save path given")
        target = Path(path)
        if not target.suffix:
            target = target.with_suffix(SAVE_SUFFIX)
        self.path = target
        try:
            save_team(target, self.pokemons)
        except OSError as exc:
            raise TeamError(f"cannot write {target}") from exc
        return target