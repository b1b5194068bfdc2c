"""
Role definitions and night actors for the Mafia game.
"""

from enum import Enum
from typing import Dict, List, Optional, Union
from dataclasses import dataclass


class Team(Enum):
    """Winning side of a finished game."""
    CIVILIANS = "civilians"
    MAFIA = "mafia"


class RoleType(Enum):
    """Player role types."""
    CIVILIAN = "civilian"
    MAFIA = "mafia"
    DOCTOR = "doctor"
    POLICE = "police"


@dataclass
class DoctorActor:
    """Doctor's night seat. Holds the player revived by the last heal."""
    saved_player: Optional[int] = None
    role_type: RoleType = RoleType.DOCTOR

    @property
    def outcome(self) -> Optional[int]:
        return self.saved_player

    @outcome.setter
    def outcome(self, player_id: Optional[int]) -> None:
        self.saved_player = player_id


@dataclass
class MafiaActor:
    """Mafia's night seat. Holds the player killed by the last attack."""
    killed_player: Optional[int] = None
    role_type: RoleType = RoleType.MAFIA

    @property
    def outcome(self) -> Optional[int]:
        return self.killed_player

    @outcome.setter
    def outcome(self, player_id: Optional[int]) -> None:
        self.killed_player = player_id


@dataclass
class PoliceActor:
    """Police's night seat. Holds the mafia found by the last investigation."""
    found_mafia: Optional[int] = None
    role_type: RoleType = RoleType.POLICE

    @property
    def outcome(self) -> Optional[int]:
        return self.found_mafia

    @outcome.setter
    def outcome(self, player_id: Optional[int]) -> None:
        self.found_mafia = player_id


NightActor = Union[DoctorActor, MafiaActor, PoliceActor]

_ACTOR_TYPES = {
    RoleType.DOCTOR: DoctorActor,
    RoleType.MAFIA: MafiaActor,
    RoleType.POLICE: PoliceActor,
}


def team_for_role(role_type: RoleType) -> Team:
    """Get the side a role plays for."""
    return Team.MAFIA if role_type == RoleType.MAFIA else Team.CIVILIANS


def create_actor(role_type: RoleType) -> NightActor:
    """Create a fresh night actor for a role that acts at night."""
    if role_type not in _ACTOR_TYPES:
        raise ValueError(f"Role {role_type.value} has no night action")
    return _ACTOR_TYPES[role_type]()


def create_night_actors() -> Dict[RoleType, NightActor]:
    """Create one actor per night role, in the order they are called at night."""
    return {role_type: create_actor(role_type) for role_type in night_roles()}


def night_roles() -> List[RoleType]:
    """Roles with a night action, in the order they wake up."""
    return [RoleType.DOCTOR, RoleType.MAFIA, RoleType.POLICE]
