"""Attack moves, their damage formula and the catalogue of predefined moves."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from pokebattle.elements import ElementType
from pokebattle.status import (
    BurnedStatus,
    FreezedStatus,
    ParalyzedStatus,
    ScaredStatus,
    Status,
)


def _rng(rng):
    return random if rng is None else rng


def _truncating_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class Attack:
    """A move with limited uses, a power, an accuracy and an optional status."""

    element: ElementType
    name: str = "none"
    max_usage: int = 0
    power: int = 0
    accuracy: int = 0
    status: Status | None = None
    current_usage: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.current_usage < 0:
            self.current_usage = self.max_usage
        if self.status is not None:
            self.status = self.status.copy()

    def consume(self) -> None:
        """Spend one use of the move."""
        if self.current_usage <= 0:
            raise ValueError(f"{self.name} has no uses left")
        self.current_usage -= 1

    def calculate_damage(self, attack: int, defense: int, rng=None) -> int:
        """Damage dealt by an attacker with the given attack stat against a defense stat."""
        damage = self.power * float(_truncating_div(attack, defense))
        roll = _rng(rng).random()
        accuracy = self.accuracy / 100
        return int(damage * roll * accuracy)

    def rolls_status(self, rng=None) -> bool:
        """Whether this use of the move inflicts its status."""
        if self.status is None:
            return False
        return _rng(rng).randrange(100) < self.status.probability

    def copy(self) -> "Attack":
        """Return an independent copy, status included."""
        return replace(self)


_E = ElementType

TACKLE = Attack(_E.NORMAL, "Tackle", 35, 40, 100)
HEADBUTT = Attack(_E.NORMAL, "Testata", 15, 70, 100)
QUICK_ATTACK = Attack(_E.NORMAL, "Attacco Rapido", 30, 40, 100)
RETURN = Attack(_E.NORMAL, "Ritorno", 20, 0, 100)

EMBER = Attack(_E.FIRE, "Braciere", 25, 40, 100, BurnedStatus(100))
FLAMETHROWER = Attack(_E.FIRE, "Lanciafiamme", 15, 90, 100, BurnedStatus(70))
FIRE_BLAST = Attack(_E.FIRE, "Fuocobomba", 5, 110, 85, BurnedStatus(75))
FLAME_WHEEL = Attack(_E.FIRE, "Ruotafuoco", 25, 60, 100, BurnedStatus(90))

WATER_GUN = Attack(_E.WATER, "Pistolacqua", 25, 40, 100)
SURF = Attack(_E.WATER, "Surf", 15, 90, 100)
HYDRO_PUMP = Attack(_E.WATER, "Idropompa", 5, 110, 80)
AQUA_TAIL = Attack(_E.WATER, "Idrondata", 10, 90, 90)

RAZOR_LEAF = Attack(_E.GRASS, "Foglielama", 25, 55, 95)
GRASS_KNOT = Attack(_E.GRASS, "Groffiltiro", 20, 0, 100)
LEAF_STORM = Attack(_E.GRASS, "Tempesta Verde", 5, 130, 90)
ENERGY_BALL = Attack(_E.GRASS, "Energipalla", 10, 90, 100)

THUNDER_SHOCK = Attack(_E.ELECTRIC, "Tuonoshock", 30, 40, 100, ParalyzedStatus(20))
THUNDERBOLT = Attack(_E.ELECTRIC, "Fulmincolpo", 15, 90, 100, ParalyzedStatus(40))
THUNDER = Attack(_E.ELECTRIC, "Tuono", 10, 110, 70, ParalyzedStatus(80))
VOLT_TACKLE = Attack(_E.ELECTRIC, "Locomovolt", 10, 120, 100, ParalyzedStatus(90))

GUST = Attack(_E.FLYING, "Raffica", 35, 40, 100)
AERIAL_ACE = Attack(_E.FLYING, "Asso Aereo", 20, 60, 0)
FLY = Attack(_E.FLYING, "Volo", 15, 90, 95)
AIR_SLASH = Attack(_E.FLYING, "Eterelama", 15, 75, 95)

BITE = Attack(_E.DARK, "Morso", 25, 60, 100, ScaredStatus(40))
CRUNCH = Attack(_E.DARK, "Sgranocchio", 15, 80, 100, ScaredStatus(30))
PURSUIT = Attack(_E.DARK, "Inseguimento", 20, 40, 100, ScaredStatus(50))
DARK_PULSE = Attack(_E.DARK, "Neropulsar", 15, 80, 100, ScaredStatus(90))

SHADOW_BALL = Attack(_E.GHOST, "Palla Ombra", 15, 80, 100)
NIGHT_SHADE = Attack(_E.GHOST, "Ombra Notturna", 15, 0, 100)
SHADOW_CLAW = Attack(_E.GHOST, "Ombrartiglio", 15, 70, 100)
SHADOW_SNEAK = Attack(_E.GHOST, "Furtivombra", 30, 40, 100)

EARTHQUAKE = Attack(_E.GROUND, "Terremoto", 10, 100, 100)
DIG = Attack(_E.GROUND, "Fossa", 10, 80, 100)
EARTH_POWER = Attack(_E.GROUND, "Geoforza", 10, 90, 100)
SANDSTORM = Attack(_E.GROUND, "Terrempesta", 10, 0, 0)

ROCK_SLIDE = Attack(_E.ROCK, "Frana", 10, 75, 90)
STONE_EDGE = Attack(_E.ROCK, "Pietrataglio", 5, 100, 80)
ROCK_TOMB = Attack(_E.ROCK, "Rocciotomba", 15, 60, 95)
ROCK_POLISH = Attack(_E.ROCK, "Lucidatura", 20, 0, 0)

ICE_BEAM = Attack(_E.ICE, "Geloraggio", 10, 90, 100, FreezedStatus(90))
AVALANCHE = Attack(_E.ICE, "Slavina", 10, 60, 100, FreezedStatus(80))
ICE_SHARD = Attack(_E.ICE, "Geloscheggia", 30, 40, 100, FreezedStatus(50))
BLIZZARD = Attack(_E.ICE, "Bora", 5, 110, 70, FreezedStatus(95))

_ALL_ATTACKS: tuple[Attack, ...] = (
    TACKLE, HEADBUTT, QUICK_ATTACK, RETURN,
    EMBER, FLAMETHROWER, FIRE_BLAST, FLAME_WHEEL,
    WATER_GUN, SURF, HYDRO_PUMP, AQUA_TAIL,
    RAZOR_LEAF, GRASS_KNOT, LEAF_STORM, ENERGY_BALL,
    THUNDER_SHOCK, THUNDERBOLT, THUNDER, VOLT_TACKLE,
    GUST, AERIAL_ACE, FLY, AIR_SLASH,
    BITE, CRUNCH, PURSUIT, DARK_PULSE,
    SHADOW_BALL, NIGHT_SHADE, SHADOW_CLAW, SHADOW_SNEAK,
    EARTHQUAKE, DIG, EARTH_POWER, SANDSTORM,
    ROCK_SLIDE, STONE_EDGE, ROCK_TOMB, ROCK_POLISH,
    ICE_BEAM, AVALANCHE, ICE_SHARD, BLIZZARD,
)


def all_attacks() -> list[Attack]:
    """Every predefined attack, grouped by element."""
    return list(_ALL_ATTACKS)