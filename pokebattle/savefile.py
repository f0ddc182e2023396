"""Binary team save files: a sequence of serialised pokemon."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterable

from pokebattle.pokemon import Pokemon, create_pokemon
from pokebattle.species import Species

_INT = struct.Struct(">i")
_UINT = struct.Struct(">I")
_STATS = struct.Struct(">iiii")
_NULL_STRING = 0xFFFFFFFF


def _encode(pokemon: Pokemon) -> bytes:
    name = pokemon.name.encode("utf-16-be")
    return b"".join(
        (
            _INT.pack(pokemon.species.value),
            _UINT.pack(len(name)),
            name,
            _STATS.pack(pokemon.max_health, pokemon.attack, pokemon.defense, pokemon.speed),
        )
    )


def write_team(stream: BinaryIO, pokemons: Iterable[Pokemon]) -> None:
    """Serialise each pokemon to a binary stream."""
    for pokemon in pokemons:
        stream.write(_encode(pokemon))


def _take(data: bytes, offset: int, size: int) -> tuple[bytes, int]:
    end = offset + size
    if end > len(data):
        raise ValueError("truncated team data")
    return data[offset:end], end


def read_team(stream: BinaryIO) -> list[Pokemon]:
    """Read every pokemon from a binary stream until it is exhausted."""
    data = stream.read()
    team: list[Pokemon] = []
    offset = 0
    while offset < len(data):
        chunk, offset = _take(data, offset, _INT.size)
        (code,) = _INT.unpack(chunk)
        chunk, offset = _take(data, offset, _UINT.size)
        (length,) = _UINT.unpack(chunk)
        if length == _NULL_STRING:
            name = ""
        else:
            if length % 2:
                raise ValueError("malformed name in team data")
            chunk, offset = _take(data, offset, length)
            name = chunk.decode("utf-16-be")
        chunk, offset = _take(data, offset, _STATS.size)
        health, attack, defense, speed = _STATS.unpack(chunk)
        try:
            species = Species(code)
        except ValueError:
            raise ValueError(f"unknown species code {code}") from None
        team.append(create_pokemon(species, health, attack, defense, speed, name))
    return team


def save_team(path, pokemons: Iterable[Pokemon]) -> None:
    """Write a team to a file."""
    with open(path, "wb") as stream:
        write_team(stream, pokemons)


def load_team(path) -> list[Pokemon]:
    """Read a team from a file."""
    with open(path, "rb") as stream:
        return read_team(stream)