"""
Night phase handler for doctor heals, mafia attacks and police investigations.
"""

from typing import Dict, List, Optional

from ..core import GameState, GamePhase, Judge, RoleType, night_roles


class NightPhaseHandler:
    """Handles night phase operations: heal, attack, investigate."""

    def __init__(self, game_state: GameState, judge: Judge):
        self.game_state = game_state
        self.judge = judge

    def run_night_phase(self, order: Optional[List[RoleType]] = None) -> Dict[RoleType, Optional[int]]:
        """
        Run the night actions in order and return each role's outcome.

        Defaults to Doctor, Mafia, Police. Stops early once the game is over.
        """
        outcomes = {}
        for role_type in order or night_roles():
            if self.game_state.phase == GamePhase.GAME_OVER:
                break
            outcomes[role_type] = self.judge.run_night_action(role_type)
        return outcomes
