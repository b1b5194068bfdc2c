"""
Core game engine managing game state and round transitions.
"""

import random
from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field

from .roles import RoleType, Team, NightActor, create_night_actors
from .player import Player
from .registry import PlayerRegistry
from .exceptions import IllegalStateTransitionError
from .voting import VoteError, VoteResult, record_vote, find_elimination_target, get_voters
from .win_condition import evaluate_winner
from . import night_actions


class GamePhase(Enum):
    """Current game phase."""
    AWAITING_START = "awaiting_start"
    IN_ROUND = "in_round"
    ROUND_RESOLVED = "round_resolved"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Complete game state and the operations that advance it."""
    phase: GamePhase = GamePhase.AWAITING_START
    round_number: int = 0
    registry: Optional[PlayerRegistry] = None
    mafia_seat: Optional[int] = 3

    # Night actors, each holding the outcome of its latest action
    actors: Dict[RoleType, NightActor] = field(default_factory=create_night_actors)

    # Game history (in memory only)
    action_log: List[Dict[str, Any]] = field(default_factory=list)

    # Win condition
    winner: Optional[Team] = None
    random_seed: Optional[int] = None  # Seed for the default random generator
    rng: Optional[random.Random] = None

    def __post_init__(self):
        """Initialize the random generator."""
        if self.rng is None:
            self.rng = random.Random(self.random_seed)

    def start_game(self, player_count: int) -> PlayerRegistry:
        """
        Build a fresh roster and open round 1.

        Allowed before the first game and after a game is over; the previous
        roster is discarded.
        """
        if self.phase not in (GamePhase.AWAITING_START, GamePhase.GAME_OVER):
            raise IllegalStateTransitionError("start a game", self.phase.value)

        self.registry = PlayerRegistry.create(player_count, self.mafia_seat)
        self.actors = create_night_actors()
        self.winner = None
        self.action_log = []
        self.round_number = 1
        self.phase = GamePhase.IN_ROUND
        self._log_action("game_start", {
            "players": len(self.registry),
            "mafia": [p.player_id for p in self.registry.alive_with_role(RoleType.MAFIA)],
        })

        self._end_game_if_won()
        return self.registry

    def get_players(self) -> List[Player]:
        """Get all players in seat order."""
        return self.registry.players if self.registry else []

    def get_alive_players(self) -> List[Player]:
        """Get all alive players."""
        return self.registry.all_alive() if self.registry else []

    def get_player(self, player_id: int) -> Optional[Player]:
        """Get player by id."""
        return self.registry.by_id(player_id) if self.registry else None

    def get_mafia_players(self) -> List[Player]:
        """Get all alive mafia players."""
        return self.registry.alive_with_role(RoleType.MAFIA) if self.registry else []

    def get_civilian_players(self) -> List[Player]:
        """Get all alive civilian players."""
        return self.registry.alive_with_role(RoleType.CIVILIAN) if self.registry else []

    @property
    def saved_player(self) -> Optional[int]:
        return self.actors[RoleType.DOCTOR].outcome

    @property
    def killed_player(self) -> Optional[int]:
        return self.actors[RoleType.MAFIA].outcome

    @property
    def found_mafia(self) -> Optional[int]:
        return self.actors[RoleType.POLICE].outcome

    def heal(self, rng: Optional[random.Random] = None) -> Optional[int]:
        """Doctor revives a random dead player. Returns the revived id or None."""
        return self.run_night_action(RoleType.DOCTOR, rng)

    def attack(self, rng: Optional[random.Random] = None) -> Optional[int]:
        """Mafia kill a random alive non-mafia player. Returns the killed id or None."""
        return self.run_night_action(RoleType.MAFIA, rng)

    def investigate(self, rng: Optional[random.Random] = None) -> Optional[int]:
        """Police look for a random alive mafia. Returns the found id or None."""
        return self.run_night_action(RoleType.POLICE, rng)

    def run_night_action(self, role_type: RoleType,
                         rng: Optional[random.Random] = None) -> Optional[int]:
        """
        Run a role's night action and store the outcome for this round.

        Raises ValueError for roles that do not act at night.
        """
        self._require_phase(f"run the {role_type.value} night action", GamePhase.IN_ROUND)

        if rng is None:
            rng = self.rng
        outcome = night_actions.perform_night_action(role_type, self.registry, rng)
        self.actors[role_type].outcome = outcome
        self._log_action(night_actions.NIGHT_ACTIONS[role_type].__name__, {
            "role": role_type.value,
            "target": outcome,
        })

        # Investigation only observes
        if outcome is not None and role_type != RoleType.POLICE:
            self._end_game_if_won()
        return outcome

    def cast_vote(self, voter_id: int, target_id: int) -> VoteResult:
        """
        Record a vote for the current round.

        Returns a VoteResult; a rejected vote leaves the state untouched.
        """
        if self.phase != GamePhase.IN_ROUND:
            return VoteResult(
                success=False, voter=voter_id, target=target_id,
                error=VoteError.ILLEGAL_STATE_TRANSITION,
                message=f"Voting is closed (phase: {self.phase.value})"
            )

        result = record_vote(self.registry, voter_id, target_id)
        if result.success:
            self._log_action("vote", {
                "voter": voter_id,
                "target": target_id,
                "previous_target": result.previous_target,
            })
        return result

    def resolve_votes_and_eliminate(self) -> Optional[int]:
        """
        Count votes, eliminate the leader and close the round.

        Returns the eliminated player's id, or None when nobody received a
        vote. Afterwards the game is either over or in the next round.
        """
        self._require_phase("resolve votes", GamePhase.IN_ROUND)

        target_id = find_elimination_target(self.registry)
        if target_id is not None:
            player = self.registry.by_id(target_id)
            voters = get_voters(self.registry, target_id)
            votes = player.vote_count
            player.eliminate()
            player.vote_count = 0
            self._log_action("player_eliminated", {
                "player": target_id,
                "reason": "vote",
                "votes": votes,
                "voters": voters,
            })

        self.phase = GamePhase.ROUND_RESOLVED
        self._log_action("round_resolved", {"eliminated": target_id})

        if not self._end_game_if_won():
            self._start_next_round()
        return target_id

    def check_winner(self) -> Optional[Team]:
        """
        Check if game has ended and return winning side.
        Returns None if game continues.
        """
        return evaluate_winner(self.registry)

    def end_game(self, winner: Team) -> None:
        """End the game with a winner."""
        self.phase = GamePhase.GAME_OVER
        self.winner = winner
        self._log_action("game_over", {
            "winner": winner.value,
            "round_number": self.round_number,
        })

    def _end_game_if_won(self) -> bool:
        winner = self.check_winner()
        if winner:
            self.end_game(winner)
            return True
        return False

    def _start_next_round(self) -> None:
        self.registry.clear_votes()
        # Night outcomes only hold for the round that produced them
        self.actors = create_night_actors()
        self.round_number += 1
        self.phase = GamePhase.IN_ROUND
        self._log_action("round_start", {"round_number": self.round_number})

    def _require_phase(self, operation: str, *phases: GamePhase) -> None:
        if self.phase not in phases:
            raise IllegalStateTransitionError(operation, self.phase.value)

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a game action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.value,
            "round": self.round_number,
            "data": data
        })

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "phase": self.phase.value,
            "round": self.round_number,
            "alive_players": len(self.get_alive_players()),
            "alive_mafia": len(self.get_mafia_players()),
            "alive_civilians": len(self.get_civilian_players()),
            "saved_player": self.saved_player,
            "killed_player": self.killed_player,
            "found_mafia": self.found_mafia,
            "winner": self.winner.value if self.winner else None,
        }
