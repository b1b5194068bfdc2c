"""
Random Agent implementation: votes for a random alive player.
"""

import random
from typing import Optional

from .base_agent import BaseAgent, AgentContext
from ..core import Player
from ..config.game_config import GameConfig, default_config


class RandomAgent(BaseAgent):
    """
    Agent that votes for a random alive player other than itself.

    Reproducible when the config carries a random seed.
    """

    def __init__(self, player: Player, config: GameConfig = default_config,
                 rng: Optional[random.Random] = None):
        super().__init__(player, config)
        if rng is not None:
            self.random = rng
        elif config.random_seed is not None:
            # Combine seed with player id so each seat votes differently but reproducibly
            self.random = random.Random(config.random_seed + self.player.player_id)
        else:
            self.random = random.Random()

    def get_vote_choice(self, context: AgentContext) -> Optional[int]:
        """
        Pick a random eligible target.

        Args:
            context: Current game context

        Returns:
            Player id to vote against, or None when nobody else is alive
        """
        if not context.eligible_targets:
            return None
        return self.random.choice(context.eligible_targets)
