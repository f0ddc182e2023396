"""Command-line front end: play a battle with a saved team or edit a team file."""

from __future__ import annotations

import argparse
import random
import sys

from pokebattle.arena import BattleSession, describe_pokemon, format_attack, format_health
from pokebattle.entities import Battle, Enemy, Player
from pokebattle.savefile import load_team
from pokebattle.species import Species
from pokebattle.team import MAX_TEAM_SIZE, PokemonDraft, TeamEditor, TeamError

_PLAY_HELP = """Comandi:
  1-4            usa l'attacco indicato
  switch N       manda in campo il pokemon N
  win / lose     termina la battaglia
  back / quit    ritorna al menu"""

_TEAM_HELP = """Comandi:
  list                                        mostra il team
  add SPECIE [VITA ATT DIF VEL [NOME]]        aggiunge un pokemon
  find NOME                                   cerca un pokemon
  modify SPECIE [VITA ATT DIF VEL [NOME]]     modifica il pokemon trovato
  remove                                      rimuove il pokemon trovato
  save [PERCORSO]                             salva il team su file
  back / quit                                 ritorna al menu"""

_QUIT = {"quit", "back", "q", "exit"}


def _say(text: str = "") -> None:
    print(text, file=sys.stdout)


def _read(prompt: str) -> str | None:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        _say()
        return None
    return line.strip()


def _show_field(session: BattleSession) -> None:
    battle = session.battle
    _say(f"--- {battle.enemy.name} ---")
    _say(describe_pokemon(battle.enemy.current_pokemon))
    _say(f"--- {battle.player.name} ---")
    _say(describe_pokemon(battle.player.current_pokemon))
    if session.attacks_enabled:
        _say("Seleziona un attacco:")
        for number, (label, usable) in enumerate(session.attack_options(), start=1):
            mark = "" if usable else " (esaurito)"
            _say(f"  {number}) {label.replace(chr(10), ' ')}{mark}")
    _say("Squadra:")
    for number, pokemon in enumerate(battle.player.pokemons, start=1):
        flags = []
        if number - 1 == session.index_pokemon:
            flags.append("in campo")
        if number - 1 in session.disabled_pokemons:
            flags.append("esausto")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        _say(f"  {number}) {pokemon.name} {format_health(pokemon)}{suffix}")


def _play_command(session: BattleSession, command: str, args: list[str]) -> None:
    if command.isdigit():
        index = int(command) - 1
        count = len(session.battle.player.current_pokemon.attacks)
        if not 0 <= index < count:
            raise ValueError(f"scegli un attacco tra 1 e {count}")
        session.play_turn(index)
    elif command in ("switch", "s", "cambia"):
        if len(args) != 1 or not args[0].isdigit():
            raise ValueError("indica il numero del pokemon")
        index = int(args[0]) - 1
        if index < 0:
            raise ValueError("indica il numero del pokemon")
        session.switch_pokemon(index)
    elif command == "win":
        session.player_win()
    elif command == "lose":
        session.enemy_win()
    elif command in ("help", "?"):
        _say(_PLAY_HELP)
    else:
        _say(f"Comando non valido: {command}")


def _play(team_file: str | None, player_name: str, enemy_name: str, seed: int | None) -> int:
    if not team_file:
        _say("Seleziona il salvataggio!")
        return 1
    try:
        team = load_team(team_file)
    except (OSError, ValueError):
        _say("Errore nell'apertura del file")
        return 1
    if not team:
        _say("Il salvataggio non contiene pokemon")
        return 1

    battle = Battle(Player(player_name, team), Enemy(enemy_name))
    rng = random.Random(seed) if seed is not None else None
    session = BattleSession(battle, rng=rng, notifier=_say)
    _say(_PLAY_HELP)
    while not session.finished:
        _show_field(session)
        line = _read("> ")
        if line is None:
            return 0
        if not line:
            continue
        command, *args = line.split()
        command = command.lower()
        if command in _QUIT:
            return 0
        try:
            _play_command(session, command, args)
        except (RuntimeError, ValueError, IndexError) as exc:
            _say(f"Errore: {exc}")
    return 0


def _parse_species(token: str) -> Species:
    if token.isdigit():
        try:
            return Species(int(token))
        except ValueError:
            pass
    wanted = token.lower()
    for species in Species:
        if wanted in (species.name.lower(), species.display_name.lower()):
            return species
    raise ValueError(f"Specie sconosciuta: {token}")


def _parse_draft(args: list[str]) -> PokemonDraft:
    if not args:
        raise ValueError("indica la specie del pokemon")
    species = _parse_species(args[0])
    if len(args) == 1:
        return PokemonDraft(species=species)
    if len(args) < 5:
        raise ValueError("indica vita, attacco, difesa e velocità")
    try:
        health, attack, defense, speed = (int(value) for value in args[1:5])
    except ValueError:
        raise ValueError("le statistiche devono essere numeri interi") from None
    name = " ".join(args[5:]) or None
    return PokemonDraft(species, health, attack, defense, speed, name)


def _list_team(editor: TeamEditor) -> None:
    if not len(editor):
        _say("Il team è vuoto")
        return
    for number, pokemon in enumerate(editor, start=1):
        _say(
            f"  {number}) {pokemon.name} ({pokemon.species.display_name}) "
            f"vita {pokemon.max_health} attacco {pokemon.attack} "
            f"difesa {pokemon.defense} velocità {pokemon.speed}"
        )


def _team_command(editor: TeamEditor, command: str, args: list[str]) -> None:
    if command == "list":
        _list_team(editor)
    elif command == "add":
        if len(editor) >= MAX_TEAM_SIZE:
            _say("Hai aggiunto già sei pokemon!")
            return
        editor.add(_parse_draft(args))
        _say("Pokemon aggiunto")
    elif command == "find":
        found = editor.find(" ".join(args))
        if found is None:
            _say("Pokemon non trovato")
        else:
            _say("Pokemon trovato.")
            _say(describe_pokemon(found))
    elif command == "modify":
        editor.modify(_parse_draft(args))
        _say("Pokemon modificato")
    elif command == "remove":
        editor.remove()
        _say("Pokemon eliminato")
    elif command == "save":
        if not len(editor):
            _say("Per poter salvare devi prima aggiungere un pokemon!")
            return
        path = " ".join(args) or editor.path
        if not path:
            _say("Seleziona un percorso di salvataggio valido!")
            return
        target = editor.save(path)
        _say(f"File salvato! ({target})")
    elif command in ("help", "?"):
        _say(_TEAM_HELP)
    else:
        _say(f"Comando non valido: {command}")


def _team(team_file: str | None) -> int:
    editor = TeamEditor()
    if team_file:
        try:
            editor.load(team_file)
        except (TeamError, ValueError):
            _say("Impossibile aprire il file")
    _say(_TEAM_HELP)
    while True:
        line = _read("team> ")
        if line is None:
            return 0
        if not line:
            continue
        command, *args = line.split()
        command = command.lower()
        if command in _QUIT:
            return 0
        try:
            _team_command(editor, command, args)
        except (TeamError, ValueError) as exc:
            _say(f"Errore: {exc}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokebattle", description="Pokemon simulator battle"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    play = commands.add_parser("play", help="combatti con il team salvato")
    play.add_argument("team_file", nargs="?", help="file del team (*.pokemon)")
    play.add_argument("--player", default="Player", help="il tuo nickname")
    play.add_argument("--enemy", default="Enemy", help="il tuo avversario")
    play.add_argument("--seed", type=int, default=None, help="seme per i numeri casuali")

    team = commands.add_parser("team", help="crea o modifica un team")
    team.add_argument("team_file", nargs="?", help="file del team da caricare")
    return parser


def main(argv=None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)
    if args.command == "play":
        return _play(args.team_file, args.player, args.enemy, args.seed)
    return _team(args.team_file)


if __name__ == "__main__":
    sys.exit(main())