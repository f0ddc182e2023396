import pytest

from pokebattle.entities import Battle, Enemy, EntityVisitor, Player
from pokebattle.pokemon import create_pokemon
from pokebattle.species import Species


class FixedRng:
    def __init__(self, index=0):
        self.index = index

    def random(self):
        return 1.0

    def randrange(self, n):
        return min(self.index, n - 1)


class RecordingVisitor(EntityVisitor):
    def __init__(self):
        self.seen = []

    def visit_player(self, player):
        self.seen.append(("player", player.name))

    def visit_enemy(self, enemy):
        self.seen.append(("enemy", enemy.name))


def make_player():
    return Player(
        "Ash",
        [
            create_pokemon(Species.PIKACHU, 100, 10, 10, 10, "Pika"),
            create_pokemon(Species.CHARIZARD, 200, 20, 20, 20, "Zard"),
        ],
    )


def test_enemy_team_and_first_pokemon():
    enemy = Enemy("Rival")
    assert [p.name for p in enemy.pokemons] == ["Destructor", "Nightmare", "Allfire"]
    assert enemy.current_pokemon is enemy.pokemons[0]
    assert enemy.pokemons[2].max_health == 500


def test_enemy_change_pokemon_advances_then_raises():
    enemy = Enemy("Rival")
    assert enemy.change_pokemon().name == "Nightmare"
    assert enemy.change_pokemon().name == "Allfire"
    with pytest.raises(IndexError):
        enemy.change_pokemon()
    assert enemy.current_pokemon.name == "Allfire"


def test_player_set_current_pokemon():
    player = make_player()
    assert player.current_pokemon.name == "Pika"
    assert player.set_current_pokemon(1).name == "Zard"
    assert player.current_pokemon is player.pokemons[1]
    with pytest.raises(IndexError):
        player.set_current_pokemon(2)


def test_empty_team_has_no_current_pokemon():
    player = Player("Nobody", [])
    assert player.current_pokemon is None
    assert player.has_pokemon_alive() is False


def test_has_pokemon_alive():
    player = make_player()
    assert player.has_pokemon_alive()
    player.pokemons[0].health = 0
    assert player.has_pokemon_alive()
    player.pokemons[1].health = 0
    assert not player.has_pokemon_alive()


def test_accept_dispatches_by_kind():
    visitor = RecordingVisitor()
    make_player().accept(visitor)
    Enemy("Rival").accept(visitor)
    assert visitor.seen == [("player", "Ash"), ("enemy", "Rival")]


def test_copy_is_independent_and_resets_field():
    player = make_player()
    player.set_current_pokemon(1)
    clone = player.copy()
    assert clone.current_pokemon is clone.pokemons[0]
    clone.pokemons[0].health = 0
    assert player.pokemons[0].health == 100
    assert clone.name == player.name


def test_enemy_copy_starts_from_first():
    enemy = Enemy("Rival")
    enemy.change_pokemon()
    clone = enemy.copy()
    assert clone.current_pokemon.name == "Destructor"
    assert clone.change_pokemon().name == "Nightmare"


def test_battle_holds_own_copies():
    player = make_player()
    enemy = Enemy("Rival")
    battle = Battle(player, enemy)
    player.pokemons[0].health = 0
    assert battle.player.pokemons[0].health == 100
    assert battle.enemy.current_pokemon is not enemy.current_pokemon
    assert battle.enemy.current_pokemon.name == enemy.current_pokemon.name


def test_battle_player_attack():
    battle = Battle(make_player(), Enemy("Rival"))
    assert battle.player_attack(1) is battle.player.current_pokemon.attacks[1]
    assert battle.player_attack(1).name == "Fulmincolpo"


def test_battle_enemy_attack_uses_rng():
    battle = Battle(make_player(), Enemy("Rival"))
    move = battle.enemy_attack(FixedRng(2))
    assert move is battle.enemy.current_pokemon.attacks[2]
    assert move.name == "Energipalla"
    assert battle.enemy_attack() in battle.enemy.current_pokemon.attacks