import io

import pytest

from pokebattle.pokemon import create_pokemon
from pokebattle.savefile import load_team, read_team, save_team, write_team
from pokebattle.species import Species


def test_wire_format_of_single_pokemon():
    buffer = io.BytesIO()
    write_team(buffer, [create_pokemon(Species.PIKACHU, 1, 2, 3, 4, "Pi")])
    assert buffer.getvalue() == (
        b"\x00\x00\x00\x03"
        b"\x00\x00\x00\x04\x00P\x00i"
        b"\x00\x00\x00\x01\x00\x00\x00\x02\x00\x00\x00\x03\x00\x00\x00\x04"
    )


def test_round_trip_preserves_team():
    team = [
        create_pokemon(Species.INFERNAPE, 250, 10, 20, 30, "Fiamma"),
        create_pokemon(Species.DARKRAI, 300, 40, 50, 60, "Notte è"),
        create_pokemon(Species.CHARIZARD, 90, 7, 8, 9, ""),
    ]
    buffer = io.BytesIO()
    write_team(buffer, team)
    buffer.seek(0)
    loaded = read_team(buffer)
    assert [(p.species, p.name, p.max_health, p.attack, p.defense, p.speed) for p in loaded] == [
        (p.species, p.name, p.max_health, p.attack, p.defense, p.speed) for p in team
    ]


def test_loaded_health_is_full():
    p = create_pokemon(Species.GIRATINA, 300, 1, 1, 1, "G")
    p.health = 10
    buffer = io.BytesIO()
    write_team(buffer, [p])
    buffer.seek(0)
    (loaded,) = read_team(buffer)
    assert loaded.health == loaded.max_health == 300


def test_empty_stream_gives_empty_team():
    assert read_team(io.BytesIO(b"")) == []


def test_null_string_reads_as_empty_name():
    data = b"\x00\x00\x00\x00" + b"\xff\xff\xff\xff" + b"\x00\x00\x00\x01" * 4
    (loaded,) = read_team(io.BytesIO(data))
    assert loaded.name == ""
    assert loaded.species is Species.INFERNAPE


def test_truncated_data_raises():
    buffer = io.BytesIO()
    write_team(buffer, [create_pokemon(Species.PIKACHU, 1, 2, 3, 4, "Pi")])
    with pytest.raises(ValueError):
        read_team(io.BytesIO(buffer.getvalue()[:-1]))


def test_unknown_species_raises():
    data = b"\x00\x00\x00\x09" + b"\x00\x00\x00\x00" + b"\x00\x00\x00\x01" * 4
    with pytest.raises(ValueError):
        read_team(io.BytesIO(data))


def test_file_round_trip(tmp_path):
    path = tmp_path / "team.pokemon"
    team = [create_pokemon(Species.PIKACHU, 70, 5, 6, 7, "Sparky")]
    save_team(path, team)
    loaded = load_team(path)
    assert [(p.name, p.species, p.speed) for p in loaded] == [("Sparky", Species.PIKACHU, 7)]