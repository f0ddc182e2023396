"""Status conditions that can afflict a pokemon during a battle."""

from __future__ import annotations

import copy as _copy
import random
from abc import ABC, abstractmethod


def _rng(rng):
    return random if rng is None else rng


class Status(ABC):
    """A timed condition with a chance of being inflicted by an attack."""

    def __init__(self, name: str, probability: int, duration: int) -> None:
        self.name = name
        self.probability = probability
        self.duration = duration

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"probability={self.probability}, duration={self.duration})"
        )

    def is_finished(self) -> bool:
        """True once the remaining duration has run out."""
        return self.duration <= 0

    @abstractmethod
    def apply_effect(self, rng=None) -> int:
        """Spend one turn of the status and return the damage it deals."""

    @abstractmethod
    def can_attack(self, rng=None) -> bool:
        """Whether the afflicted pokemon may attack this turn."""

    def copy(self) -> "Status":
        """Return an independent copy of this status."""
        return _copy.copy(self)


class BurnedStatus(Status):
    """Burn: deals fixed damage on about half of the turns."""

    def __init__(self, probability: int = 75, damage: int = 10, duration: int = 3) -> None:
        super().__init__("Bruciato", probability, duration)
        self.damage = damage

    def apply_effect(self, rng=None) -> int:
        self.duration -= 1
        return self.damage * _rng(rng).randrange(2)

    def can_attack(self, rng=None) -> bool:
        return True


class FreezedStatus(Status):
    """Freeze: no damage, but the pokemon cannot attack."""

    def __init__(self, probability: int, duration: int = 1) -> None:
        super().__init__("Congelato", probability, duration)

    def apply_effect(self, rng=None) -> int:
        self.duration -= 1
        return 0

    def can_attack(self, rng=None) -> bool:
        return False


class ParalyzedStatus(Status):
    """Paralysis: no damage, attacks may be stunned."""

    def __init__(self, probability: int, duration: int = 3, stun_probability: int = 50) -> None:
        super().__init__("Paralizzato", probability, duration)
        self.stun_probability = stun_probability

    def apply_effect(self, rng=None) -> int:
        self.duration -= 1
        return 0

    def can_attack(self, rng=None) -> bool:
        return _rng(rng).randrange(100) > self.stun_probability


class ScaredStatus(Status):
    """Fear: deals varying damage and may stun attacks."""

    def __init__(
        self,
        probability: int,
        duration: int = 2,
        damage: int = 5,
        stun_probability: int = 30,
    ) -> None:
        super().__init__("Impaurito", probability, duration)
        self.damage = damage
        self.stun_probability = stun_probability

    def apply_effect(self, rng=None) -> int:
        self.duration -= 1
        return _rng(rng).randrange(15) + self.damage

    def can_attack(self, rng=None) -> bool:
        return _rng(rng).randrange(100) > self.stun_probability