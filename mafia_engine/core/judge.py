"""
Judge/Moderator system for rule enforcement and game announcements.
"""

from typing import List, Optional, Dict

from .game_engine import GameState, GamePhase
from .registry import PlayerRegistry
from .roles import RoleType, Team
from .voting import VoteResult, get_vote_counts
from ..config.game_config import GameConfig, default_config


# Announcements for each night action: (with a target, without one)
NIGHT_MESSAGES = {
    RoleType.DOCTOR: (
        "Player {target} was saved by Doctor!",
        "Doctor tried to save a life but there was no one to save.",
    ),
    RoleType.MAFIA: (
        "Player {target} was killed by Mafia!",
        "The mafia found no one to attack.",
    ),
    RoleType.POLICE: (
        "Police found Mafia: Player {target}",
        "Police couldn't find Mafia.",
    ),
}

WINNER_MESSAGES = {
    Team.CIVILIANS: "Civilians win! The mafia has been eliminated.",
    Team.MAFIA: "Mafia wins! All civilians have died.",
}


class Judge:
    """Judge/Moderator that runs game operations and announces what happened."""

    def __init__(self, game_state: GameState, config: GameConfig = default_config):
        self.game_state = game_state
        self.config = config
        self.announcements: List[str] = []

    def announce(self, message: str) -> None:
        """Make a judge announcement."""
        self.announcements.append(message)
        if self.config.use_judge_announcements:
            print(f"[JUDGE] {message}")

    def start_game(self, player_count: Optional[int] = None) -> PlayerRegistry:
        """Seat the players and open the first round."""
        if player_count is None:
            player_count = self.config.total_players

        registry = self.game_state.start_game(player_count)
        seats = [p.player_id for p in registry]
        self.announce(f"The city goes to sleep. Players at the table: {seats}")
        self._announce_if_over()
        return registry

    def run_night_action(self, role_type: RoleType) -> Optional[int]:
        """Let one night role act and announce the outcome."""
        target = self.game_state.run_night_action(role_type)

        with_target, without_target = NIGHT_MESSAGES[role_type]
        if target is not None:
            self.announce(with_target.format(target=target))
        else:
            self.announce(without_target)

        self._announce_if_over()
        return target

    def process_vote(self, voter_id: int, target_id: int) -> VoteResult:
        """
        Process a vote from a player.
        Returns the VoteResult; rejected votes are announced.
        """
        result = self.game_state.cast_vote(voter_id, target_id)
        if not result.success:
            self.announce(f"Vote from Player {voter_id} rejected: {result.message}")
        return result

    def get_vote_counts(self) -> Dict[int, int]:
        """Get vote counts for the current round."""
        if self.game_state.registry is None:
            return {}
        return get_vote_counts(self.game_state.registry)

    def count_votes_and_eliminate(self) -> Optional[int]:
        """Close the round's vote, announcing the elimination if there is one."""
        counts = self.get_vote_counts()
        if counts:
            self.announce(f"Votes: {counts}")

        eliminated = self.game_state.resolve_votes_and_eliminate()
        if eliminated is not None:
            self.announce(f"Player {eliminated} has been eliminated!")
        else:
            self.announce("Nobody received a vote. Nobody is eliminated.")

        if not self._announce_if_over():
            alive = [p.player_id for p in self.game_state.get_alive_players()]
            self.announce(f"Round {self.game_state.round_number} begins. Players alive: {alive}")
        return eliminated

    def _announce_if_over(self) -> bool:
        if self.game_state.phase != GamePhase.GAME_OVER:
            return False
        self.announce("Game Over!")
        self.announce(WINNER_MESSAGES[self.game_state.winner])
        return True
