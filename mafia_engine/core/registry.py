"""
Player registry: the fixed roster of a game, keyed by player id.
"""

from typing import Callable, Dict, Iterator, List, Optional

from .player import Player
from .roles import RoleType


class PlayerRegistry:
    """
    Roster of players created at game start.

    Players are never added or removed once the registry is built; death is
    recorded on the player itself. Iteration always follows seat order.
    """

    def __init__(self, players: List[Player]):
        self._players: Dict[int, Player] = {}
        for player in sorted(players, key=lambda p: p.player_id):
            if player.player_id in self._players:
                raise ValueError(f"Duplicate player id: {player.player_id}")
            self._players[player.player_id] = player

    @classmethod
    def create(cls, player_count: int, mafia_seat: Optional[int] = 3) -> "PlayerRegistry":
        """
        Build a roster of civilians with ids 1..player_count.

        The player sitting at ``mafia_seat`` is switched to Mafia when that
        seat exists at the table.
        """
        if player_count < 1:
            raise ValueError(f"A game needs at least one player, got {player_count}")

        players = [Player(player_id=i, role=RoleType.CIVILIAN) for i in range(1, player_count + 1)]
        registry = cls(players)

        if mafia_seat is not None:
            seat = registry.by_id(mafia_seat)
            if seat:
                seat.role = RoleType.MAFIA
        return registry

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players.values())

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: int) -> bool:
        return player_id in self._players

    @property
    def players(self) -> List[Player]:
        """All players in seat order."""
        return list(self._players.values())

    def by_id(self, player_id: int) -> Optional[Player]:
        """Get player by id."""
        return self._players.get(player_id)

    def filter(self, predicate: Callable[[Player], bool]) -> List[Player]:
        """Get players matching a predicate, in seat order."""
        return [p for p in self._players.values() if predicate(p)]

    def all_alive(self) -> List[Player]:
        """Get all alive players."""
        return self.filter(lambda p: p.is_alive)

    def dead(self) -> List[Player]:
        """Get all dead players."""
        return self.filter(lambda p: not p.is_alive)

    def alive_with_role(self, role: RoleType) -> List[Player]:
        """Get alive players holding a role."""
        return self.filter(lambda p: p.is_alive and p.role == role)

    def clear_votes(self) -> None:
        """Reset vote and vote tally for every player."""
        for player in self._players.values():
            player.clear_votes()
