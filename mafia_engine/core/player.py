"""
Player class representing a seat at the table.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from .roles import RoleType, Team, team_for_role


class PlayerStatus(Enum):
    """Player status in the game."""
    ALIVE = "alive"
    DEAD = "dead"


@dataclass
class Player:
    """Represents a player in the game."""
    player_id: int
    role: RoleType = RoleType.CIVILIAN
    status: PlayerStatus = PlayerStatus.ALIVE

    # Current round only
    vote: Optional[int] = None  # id of the player this player voted for
    vote_count: int = 0  # votes received

    def __str__(self) -> str:
        return f"Player {self.player_id} ({self.role.value})"

    @property
    def is_alive(self) -> bool:
        """Check if player is alive."""
        return self.status == PlayerStatus.ALIVE

    @property
    def team(self) -> Team:
        return team_for_role(self.role)

    @property
    def is_mafia(self) -> bool:
        """Check if player holds the mafia role."""
        return self.role == RoleType.MAFIA

    @property
    def is_civilian(self) -> bool:
        """Check if player holds the plain civilian role."""
        return self.role == RoleType.CIVILIAN

    def receive_vote(self) -> None:
        """Count one more vote against this player."""
        self.vote_count += 1

    def withdraw_vote(self) -> None:
        """Remove one previously counted vote."""
        if self.vote_count > 0:
            self.vote_count -= 1

    def clear_votes(self) -> None:
        """Forget this round's vote and tally."""
        self.vote = None
        self.vote_count = 0

    def eliminate(self) -> None:
        """Mark player as dead."""
        self.status = PlayerStatus.DEAD

    def revive(self) -> None:
        """Bring a dead player back. Only the Doctor's heal does this."""
        self.status = PlayerStatus.ALIVE
