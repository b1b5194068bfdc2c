"""
Night actions: Doctor heal, Mafia attack, Police investigation.

Each action draws its target from the registry as it is at call time, using
the random generator it is handed.
"""

import random
from typing import Callable, Dict, Optional

from .registry import PlayerRegistry
from .roles import RoleType


def heal(registry: PlayerRegistry, rng: random.Random) -> Optional[int]:
    """
    Revive a random dead player.

    Returns the revived player's id, or None when nobody is dead.
    """
    dead_players = registry.dead()
    if not dead_players:
        return None

    target = rng.choice(dead_players)
    target.revive()
    return target.player_id


def attack(registry: PlayerRegistry, rng: random.Random) -> Optional[int]:
    """
    Kill a random alive non-mafia player.

    Returns the killed player's id, or None when no one can be attacked.
    """
    candidates = registry.filter(lambda p: p.is_alive and p.role != RoleType.MAFIA)
    if not candidates:
        return None

    target = rng.choice(candidates)
    target.eliminate()
    return target.player_id


def investigate(registry: PlayerRegistry, rng: random.Random) -> Optional[int]:
    """
    Reveal a random alive mafia player. Does not change the registry.

    Returns the found player's id, or None when no mafia is left to find.
    """
    suspects = registry.filter(lambda p: p.is_alive and p.role != RoleType.POLICE)
    mafia_players = [p for p in suspects if p.role == RoleType.MAFIA]
    if not mafia_players:
        return None

    return rng.choice(mafia_players).player_id


NIGHT_ACTIONS: Dict[RoleType, Callable[[PlayerRegistry, random.Random], Optional[int]]] = {
    RoleType.DOCTOR: heal,
    RoleType.MAFIA: attack,
    RoleType.POLICE: investigate,
}


def perform_night_action(role_type: RoleType, registry: PlayerRegistry,
                         rng: random.Random) -> Optional[int]:
    """Run the night action belonging to a role."""
    action = NIGHT_ACTIONS.get(role_type)
    if action is None:
        raise ValueError(f"Role {role_type.value} has no night action")
    return action(registry, rng)
