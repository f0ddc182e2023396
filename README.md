# pokebattle

A small turn-based battle simulator played in the terminal. Build a team
of up to six monsters, save it to a `.pokemon` file, and fight a computer
opponent whose team is Giratina ("Destructor"), Darkrai ("Nightmare") and
Infernape ("Allfire"), sent out in that order.

The messages shown during play are in Italian.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command

The `pokebattle` command has two subcommands.

### Editing a team

```
pokebattle team [TEAM_FILE]
```

Starts an empty team, or loads `TEAM_FILE` if given. At the `team>`
prompt:

| command | effect |
| --- | --- |
| `list` | show the team |
| `add SPECIES [HEALTH ATTACK DEFENSE SPEED [NAME]]` | add a monster (at most six) |
| `find NAME` | look up a monster by name and select it |
| `modify SPECIES [HEALTH ATTACK DEFENSE SPEED [NAME]]` | replace the selected monster |
| `remove` | remove the selected monster |
| `save [PATH]` | save the team; without a path, to the file it was loaded from |
| `help` / `?` | show the commands |
| `back` / `quit` / `q` / `exit` | leave |

`SPECIES` is a species name (`infernape`, `darkrai`, `giratina`,
`pikachu`, `charizard`) or its number (0 to 4). With only a species, the
monster gets 250 health, 1 attack, 1 defense, 1 speed and the species
name. Health must lie between 10 and 90000, the other stats between 1
and 10000. A save path without a suffix gets `.pokemon` added. `modify`
and `remove` work only right after a successful `find`.

### Playing a battle

```
pokebattle play TEAM_FILE [--player NAME] [--enemy NAME] [--seed N]
```

`--player` and `--enemy` default to `Player` and `Enemy`; `--seed` makes
the random rolls repeatable. At the `>` prompt:

| command | effect |
| --- | --- |
| `1`–`4` | use that move of the monster in the field |
| `switch N` (or `s N`, `cambia N`) | send monster N into the field |
| `win` / `lose` | end the battle with a winner |
| `help` / `?` | show the commands |
| `back` / `quit` / `q` / `exit` | leave |

## Battle rules

- Each move has limited uses; a move with none left cannot be chosen.
- The enemy picks one of its four moves at random each turn.
- The faster monster strikes first (ties go to the player).
- Damage is `power × (attack ÷ defense, rounded toward zero) × a random
  roll in [0, 1) × accuracy / 100`, then halved or multiplied by 1.5
  according to the element tables in `pokebattle.elements`.
- Some moves may inflict a status on a monster that has none:
  - **Bruciato** (burned): may take 10 damage at the end of a turn;
  - **Congelato** (frozen): cannot attack;
  - **Paralizzato** (paralyzed): may fail to attack;
  - **Impaurito** (scared): takes 5–19 damage at the end of a turn and
    may fail to attack.
  A status lasts a set number of turns and is then removed.
- When your monster faints, switch to another one. The battle ends when
  one side has no monster left standing.

## Team files

A `.pokemon` file is a sequence of records, each one: a big-endian 32-bit
species code, a 32-bit byte length followed by the name in UTF-16BE, and
four big-endian 32-bit integers for maximum health, attack, defense and
speed.

## Using it as a library

```python
import random

from pokebattle.species import Species
from pokebattle.pokemon import create_pokemon
from pokebattle.savefile import save_team, load_team
from pokebattle.entities import Battle, Enemy, Player
from pokebattle.arena import BattleSession

mon = create_pokemon(Species.INFERNAPE, 250, 50, 40, 60, "Blaze")
save_team("team.pokemon", [mon])
team = load_team("team.pokemon")

session = BattleSession(Battle(Player("Ash", team), Enemy("Rival")),
                        rng=random.Random(1))
for message in session.play_turn(0):
    print(message)
```

Modules:

- `pokebattle.elements`: `ElementType`, `PokemonType` and `type_of`;
- `pokebattle.status`: `BurnedStatus`, `FreezedStatus`,
  `ParalyzedStatus`, `ScaredStatus`;
- `pokebattle.attacks`: `Attack`, the predefined moves and `all_attacks()`;
- `pokebattle.species`: `Species` and `all_species()`;
- `pokebattle.pokemon`: `Pokemon` and `create_pokemon`;
- `pokebattle.savefile`: `read_team`, `write_team`, `load_team`, `save_team`;
- `pokebattle.entities`: `Player`, `Enemy`, `Battle`, `EntityVisitor`;
- `pokebattle.arena`: `BattleSession`, `SpriteVisitor` and text helpers;
- `pokebattle.team`: `TeamEditor`, `PokemonDraft`, `TeamError`.

## What it does not do

There is no graphical interface: battles and team editing run only as
text in the terminal. Sprite paths are kept on each monster and
`SpriteVisitor` picks one, but no images are shipped or shown.