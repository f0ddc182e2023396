"""A battle played turn by turn: move order, status effects, fainting and victory."""

from __future__ import annotations

from typing import Callable

from pokebattle.attacks import Attack
from pokebattle.entities import Battle, Enemy, EntityVisitor, Player
from pokebattle.pokemon import Pokemon

_BACK_SPRITES = ":assets/pokemons/back/"
_FRONT_SPRITES = ":assets/pokemons/front/"


class SpriteVisitor(EntityVisitor):
    """Pick the sprite of the pokemon in the field: seen from behind for the player."""

    def __init__(self) -> None:
        self.path: str | None = None

    def visit_player(self, player: Player) -> None:
        self.path = _BACK_SPRITES + player.current_pokemon.sprite

    def visit_enemy(self, enemy: Enemy) -> None:
        self.path = _FRONT_SPRITES + enemy.current_pokemon.sprite


def format_attack(attack: Attack) -> str:
    """Label of a move: its name and remaining uses."""
    return f"{attack.name}\n{attack.current_usage} / {attack.max_usage}"


def format_health(pokemon: Pokemon) -> str:
    """Current and maximum health of a pokemon."""
    return f"{pokemon.health} / {pokemon.max_health}"


def describe_pokemon(pokemon: Pokemon) -> str:
    """Name, type, health and status of a pokemon, one per line."""
    lines = [pokemon.name, f"Tipo: {pokemon.pokemon_type.name}", format_health(pokemon)]
    if pokemon.status is not None:
        lines.append(pokemon.status.name)
    return "\n".join(lines)


class BattleSession:
    """Drives a battle: the player picks moves and switches, the enemy answers."""

    def __init__(
        self,
        battle: Battle,
        rng=None,
        notifier: Callable[[str], None] | None = None,
    ) -> None:
        self.battle = battle
        self.rng = rng
        self.notifier = notifier
        self.log: list[str] = []
        self.index_pokemon = 0
        self.attacks_enabled = True
        self.disabled_pokemons: set[int] = set()
        self.winner: str | None = None
        self._turn_messages: list[str] = []

    @property
    def finished(self) -> bool:
        """Whether someone has won."""
        return self.winner is not None

    def _notify(self, text: str) -> None:
        self.log.append(text)
        self._turn_messages.append(text)
        if self.notifier is not None:
            self.notifier(text)

    def _start(self) -> None:
        self._turn_messages = []

    def attack_options(self) -> list[tuple[str, bool]]:
        """Label of each move of the player's pokemon and whether it can be used."""
        return [
            (format_attack(attack), attack.current_usage > 0)
            for attack in self.battle.player.current_pokemon.attacks
        ]

    def _turn(self, attacker: Pokemon, defender: Pokemon, attack: Attack) -> None:
        if attacker.status is None or attacker.status.can_attack(self.rng):
            self._notify(f"{attacker.name} usa {attack.name}")
            attacker.do_attack(defender, attack, self.rng)
            if defender.status is None and attack.rolls_status(self.rng):
                defender.set_status(attack.status)
                self._notify(f"{defender.name} è stato {defender.status.name}")
        else:
            self._notify(f"{attacker.name} non può attaccare!")

    def _player_pokemon_fainted(self) -> None:
        self.disabled_pokemons.add(self.index_pokemon)
        if self.battle.player.has_pokemon_alive():
            self._notify("Cambia pokemon!!!")
        else:
            self._enemy_wins()

    def _enemy_pokemon_fainted(self) -> None:
        enemy = self.battle.enemy
        if enemy.has_pokemon_alive():
            enemy.change_pokemon()
            self._notify(f"{enemy.name} entra in campo {enemy.current_pokemon.name}!")
            self.attacks_enabled = True
        else:
            self._player_wins()

    def _status_step(self, pokemon: Pokemon) -> None:
        if pokemon.status is None:
            return
        if pokemon.status.is_finished():
            self._notify(
                f"{pokemon.name} non è più affetto dallo stato {pokemon.status.name}"
            )
            pokemon.remove_status()
        else:
            pokemon.apply_status_effect(self.rng)
            self._notify(
                f"{pokemon.name} è ancora effetto dallo stato {pokemon.status.name}"
            )

    def play_turn(self, attack_index: int) -> list[str]:
        """Use a move of the player's pokemon, let the enemy answer, return the messages."""
        if self.finished:
            raise RuntimeError("the battle is over")
        if not self.attacks_enabled:
            raise RuntimeError("attacks are not available now")
        player_attack = self.battle.player_attack(attack_index)
        if player_attack.current_usage <= 0:
            raise ValueError(f"{player_attack.name} has no uses left")
        self._start()
        player_attack.consume()
        self.attacks_enabled = False
        enemy_attack = self.battle.enemy_attack(self.rng)
        self._notify(f"Hai selezionato: {player_attack.name}")
        player_pokemon = self.battle.player.current_pokemon
        enemy_pokemon = self.battle.enemy.current_pokemon

        if player_pokemon.speed >= enemy_pokemon.speed:
            order = (
                (player_pokemon, enemy_pokemon, player_attack, self._enemy_pokemon_fainted),
                (enemy_pokemon, player_pokemon, enemy_attack, self._player_pokemon_fainted),
            )
        else:
            order = (
                (enemy_pokemon, player_pokemon, enemy_attack, self._player_pokemon_fainted),
                (player_pokemon, enemy_pokemon, player_attack, self._enemy_pokemon_fainted),
            )
        for attacker, defender, attack, on_faint in order:
            self._turn(attacker, defender, attack)
            if defender.is_fainted():
                on_faint()
                return list(self._turn_messages)

        self._status_step(enemy_pokemon)
        if enemy_pokemon.is_fainted():
            self._enemy_pokemon_fainted()
            return list(self._turn_messages)
        self._status_step(player_pokemon)
        if player_pokemon.is_fainted():
            self._player_pokemon_fainted()
            return list(self._turn_messages)
        self.attacks_enabled = True
        return list(self._turn_messages)

    def switch_pokemon(self, index: int) -> list[str]:
        """Send the player's pokemon at the given position into the field."""
        if self.finished:
            raise RuntimeError("the battle is over")
        if index in self.disabled_pokemons:
            raise RuntimeError(f"pokemon at position {index} cannot battle")
        self._start()
        if index == self.index_pokemon:
            return []
        pokemon = self.battle.player.set_current_pokemon(index)
        self.index_pokemon = index
        self.attacks_enabled = True
        self._notify(f"Entra in campo {pokemon.name}")
        return list(self._turn_messages)

    def _end(self, winner: str) -> None:
        self.disabled_pokemons.update(range(len(self.battle.player.pokemons)))
        self.attacks_enabled = False
        self.winner = winner
        self._notify(f"{winner} ha vinto!!!")

    def _player_wins(self) -> None:
        self._end(self.battle.player.name)

    def _enemy_wins(self) -> None:
        self._end(self.battle.enemy.name)

    def player_win(self) -> list[str]:
        """Declare the player the winner."""
        self._start()
        self._player_wins()
        return list(self._turn_messages)

    def enemy_win(self) -> list[str]:
        """Declare the enemy the winner."""
        self._start()
        self._enemy_wins()
        return list(self._turn_messages)