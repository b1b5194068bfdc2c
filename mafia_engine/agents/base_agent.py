"""
Base agent interface for Mafia game players.
"""

from typing import Dict, List, Any, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core import Player, GameState, GamePhase
from ..config.game_config import GameConfig, default_config


@dataclass
class AgentContext:
    """Context information provided to an agent."""
    player: Player
    game_state: GameState
    eligible_targets: List[int]
    public_history: List[Dict[str, Any]]
    current_phase: GamePhase
    round_number: int


class BaseAgent(ABC):
    """
    Abstract base class for all player agents.

    An agent decides who its player votes for during the day.
    """

    def __init__(self, player: Player, config: GameConfig = default_config):
        """
        Initialize the agent.

        Args:
            player: The player this agent represents
            config: Game configuration
        """
        self.player = player
        self.config = config

    @abstractmethod
    def get_vote_choice(self, context: AgentContext) -> Optional[int]:
        """
        Get voting choice.

        Args:
            context: Current game context

        Returns:
            Player id to vote against, or None to abstain
        """
        pass

    def build_context(self, game_state: GameState) -> AgentContext:
        """
        Build context for the agent.

        Args:
            game_state: Current game state

        Returns:
            AgentContext with all relevant information
        """
        eligible_targets = [
            p.player_id for p in game_state.get_alive_players()
            if p.player_id != self.player.player_id
        ]

        return AgentContext(
            player=self.player,
            game_state=game_state,
            eligible_targets=eligible_targets,
            public_history=self._get_public_history(game_state),
            current_phase=game_state.phase,
            round_number=game_state.round_number
        )

    def _get_public_history(self, game_state: GameState) -> List[Dict[str, Any]]:
        """
        Extract public game history: deaths, revivals and vote eliminations.

        Roles and investigation results stay private.
        """
        history = []
        for action in game_state.action_log:
            target = action["data"].get("target")
            if action["type"] == "attack" and target is not None:
                history.append({"type": "killed", "round": action["round"], "player": target})
            elif action["type"] == "heal" and target is not None:
                history.append({"type": "saved", "round": action["round"], "player": target})
            elif action["type"] == "player_eliminated":
                history.append({
                    "type": "elimination",
                    "round": action["round"],
                    "player": action["data"]["player"],
                    "voters": action["data"].get("voters", []),
                })
        return history
