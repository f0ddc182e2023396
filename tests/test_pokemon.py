import pytest

from pokebattle.attacks import EMBER
from pokebattle.elements import DARK_TYPE, FIRE_TYPE
from pokebattle.pokemon import Pokemon, create_pokemon
from pokebattle.species import Species
from pokebattle.status import BurnedStatus, FreezedStatus


class FixedRng:
    def __init__(self, value=1.0, index=0):
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def randrange(self, n):
        return min(self.index, n - 1)


def test_species_moves_and_type():
    charizard = create_pokemon(Species.CHARIZARD, 100, 10, 10, 10, "Zard")
    assert [a.name for a in charizard.attacks] == [
        "Fuocobomba", "Lanciafiamme", "Ruotafuoco", "Braciere"
    ]
    assert charizard.pokemon_type == FIRE_TYPE
    assert charizard.sprite == "charizard.png"
    assert charizard.name == "Zard"
    darkrai = create_pokemon(Species.DARKRAI, 100, 10, 10, 10)
    assert darkrai.pokemon_type == DARK_TYPE
    assert darkrai.name == "Darkrai"


def test_pikachu_default_name_and_moves():
    pikachu = Pokemon(Species.PIKACHU, 50, 1, 1, 1)
    assert pikachu.name == "Pikachua"
    assert [a.name for a in pikachu.attacks] == [
        "Tuonoshock", "Fulmincolpo", "Tuonoshock", "Attacco Rapido"
    ]


def test_stats_start_full():
    p = create_pokemon(Species.GIRATINA, 300, 100, 90, 80, "G")
    assert (p.max_health, p.health, p.attack, p.defense, p.speed) == (300, 300, 100, 90, 80)
    assert not p.is_fainted()
    assert not p.has_status()


def test_attacks_are_independent_of_catalogue():
    p = create_pokemon(Species.CHARIZARD, 100, 10, 10, 10, "Z")
    p.attacks[3].consume()
    assert p.attacks[3].current_usage == EMBER.current_usage - 1


def test_do_attack_neutral_matches_damage_formula():
    attacker = create_pokemon(Species.CHARIZARD, 100, 100, 100, 100, "A")
    defender = create_pokemon(Species.DARKRAI, 100, 100, 100, 100, "D")
    move = attacker.attacks[3]
    expected = move.calculate_damage(100, 100, FixedRng(1.0))
    attacker.do_attack(defender, move, FixedRng(1.0))
    assert defender.health == 100 - expected


def test_do_attack_resisted_halves():
    attacker = create_pokemon(Species.CHARIZARD, 100, 100, 100, 100, "A")
    defender = create_pokemon(Species.INFERNAPE, 100, 100, 100, 100, "D")
    attacker.do_attack(defender, attacker.attacks[3], FixedRng(1.0))
    assert defender.health == 80


def test_do_attack_floors_at_zero():
    attacker = create_pokemon(Species.DARKRAI, 100, 1000, 100, 100, "A")
    defender = create_pokemon(Species.CHARIZARD, 5, 100, 1, 100, "D")
    attacker.do_attack(defender, attacker.attacks[0], FixedRng(1.0))
    assert defender.health == 0
    assert defender.is_fainted()


def test_set_status_copies():
    p = create_pokemon(Species.PIKACHU, 100, 1, 1, 1, "P")
    burn = BurnedStatus()
    p.set_status(burn)
    assert p.has_status()
    p.apply_status_effect(FixedRng(index=1))
    assert p.health == 100 - burn.damage
    assert burn.duration == 3
    assert p.status.duration == 2


def test_remove_status():
    p = create_pokemon(Species.PIKACHU, 100, 1, 1, 1, "P")
    p.set_status(FreezedStatus(50))
    p.remove_status()
    assert not p.has_status()


def test_status_effect_without_status_raises():
    p = create_pokemon(Species.PIKACHU, 100, 1, 1, 1, "P")
    with pytest.raises(ValueError):
        p.apply_status_effect()


def test_copy_is_independent():
    p = create_pokemon(Species.INFERNAPE, 100, 1, 1, 1, "I")
    p.set_status(BurnedStatus())
    p.health = 40
    clone = p.copy()
    assert clone.health == 40 and clone.name == "I"
    clone.attacks[0].consume()
    clone.status.duration = 0
    assert p.attacks[0].current_usage == clone.attacks[0].current_usage + 1
    assert p.status.duration == 3