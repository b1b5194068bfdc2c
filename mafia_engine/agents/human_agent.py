"""
Human agent: a person at the terminal picks the vote.
"""

from typing import Callable, Optional

from .base_agent import BaseAgent, AgentContext
from ..core import Player
from ..config.game_config import GameConfig, default_config


class HumanAgent(BaseAgent):
    """Agent that asks a person for each vote."""

    def __init__(self, player: Player, config: GameConfig = default_config,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        super().__init__(player, config)
        self.input_func = input_func
        self.output_func = output_func

    def get_vote_choice(self, context: AgentContext) -> Optional[int]:
        """
        Prompt until the person enters an eligible player id or abstains.

        An empty answer abstains.
        """
        if not context.eligible_targets:
            return None

        prompt = (
            f"Player {self.player.player_id}, round {context.round_number}. "
            f"Vote for one of {context.eligible_targets} (empty to abstain): "
        )
        while True:
            answer = self.input_func(prompt).strip()
            if not answer:
                return None
            try:
                target = int(answer)
            except ValueError:
                self.output_func(f"'{answer}' is not a player number.")
                continue
            if target in context.eligible_targets:
                return target
            self.output_func(f"Player {target} cannot be voted for.")
