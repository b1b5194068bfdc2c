"""
Voting phase: collect votes from agents and eliminate the leader.
"""

from typing import Dict, Optional

from ..core import GameState, GamePhase, Judge
from ..agents import BaseAgent


class VotingHandler:
    """Handles the day vote."""

    def __init__(self, game_state: GameState, judge: Judge):
        self.game_state = game_state
        self.judge = judge

    def collect_votes(self, agents: Dict[int, BaseAgent]) -> Dict[int, int]:
        """
        Ask every alive player's agent for a vote, in seat order.

        Returns the accepted votes as {voter: target}.
        """
        accepted = {}
        for player in self.game_state.get_alive_players():
            agent = agents.get(player.player_id)
            if agent is None:
                continue

            context = agent.build_context(self.game_state)
            vote_choice = agent.get_vote_choice(context)
            if vote_choice is None:
                continue

            result = self.judge.process_vote(player.player_id, vote_choice)
            if result.success:
                accepted[player.player_id] = vote_choice
        return accepted

    def run_voting_phase(self, agents: Dict[int, BaseAgent]) -> Optional[int]:
        """
        Collect votes, then count them and eliminate.
        Returns eliminated player id, or None.
        """
        if self.game_state.phase != GamePhase.IN_ROUND:
            return None

        self.judge.announce("It is voting time.")
        self.collect_votes(agents)
        return self.judge.count_votes_and_eliminate()
