"""
Win condition evaluation.
"""

from typing import Optional

from .registry import PlayerRegistry
from .roles import RoleType, Team


def evaluate_winner(registry: Optional[PlayerRegistry]) -> Optional[Team]:
    """
    Check if the game has ended and return the winning side.

    Mafia win once no alive civilian remains; civilians win once no alive
    mafia remains. Mafia reaching parity with civilians does not end the game.
    Returns None while the game continues or when there is no roster.
    """
    if registry is None:
        return None

    alive_civilians = registry.alive_with_role(RoleType.CIVILIAN)
    alive_mafia = registry.alive_with_role(RoleType.MAFIA)

    if not alive_civilians:
        return Team.MAFIA
    if not alive_mafia:
        return Team.CIVILIANS
    return None
