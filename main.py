"""
Main game loop for a Mafia game played by agents.
"""

import argparse
import os
import random
from dataclasses import replace
from typing import Dict, Optional

from dotenv import load_dotenv

from mafia_engine.core import GameState, GamePhase, Judge, Player, IllegalStateTransitionError
from mafia_engine.agents import BaseAgent, RandomAgent, HumanAgent
from mafia_engine.phases import NightPhaseHandler, VotingHandler
from mafia_engine.config.game_config import GameConfig
from mafia_engine.config.config_loader import load_config


class MafiaGame:
    """Main game controller."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or load_config()

        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)

        self.game_state = GameState(
            mafia_seat=self.config.mafia_seat,
            random_seed=self.config.random_seed
        )
        self.judge = Judge(self.game_state, self.config)
        self.agents: Dict[int, BaseAgent] = {}

        self.night_handler = NightPhaseHandler(self.game_state, self.judge)
        self.voting_handler = VotingHandler(self.game_state, self.judge)

        self.judge.start_game(self.config.total_players)
        self._initialize_agents()

    def _initialize_agents(self):
        """Initialize agents for all players based on config."""
        agent_types = self.config.agent_types or {}
        for player in self.game_state.get_players():
            agent_type = agent_types.get(player.player_id, self.config.agent_type).lower()
            self.agents[player.player_id] = self._create_agent(player, agent_type)

    def _create_agent(self, player: Player, agent_type: str) -> BaseAgent:
        """Create an agent of the specified type for a player."""
        if agent_type == "random_agent":
            return RandomAgent(player, self.config)
        elif agent_type == "human_agent":
            return HumanAgent(player, self.config)
        else:
            raise ValueError(
                f"Unknown agent_type: {agent_type}. "
                f"Must be 'random_agent' or 'human_agent'"
            )

    def run_game(self) -> str:
        """
        Run rounds until someone wins or the round limit is reached.
        Returns winning side name, or "Draw".
        """
        players = [p.player_id for p in self.game_state.get_players()]
        mafia = [p.player_id for p in self.game_state.get_mafia_players()]

        print("=" * 60)
        print("MAFIA GAME - Starting")
        print("=" * 60)
        print(f"Players: {players}")
        print(f"Mafia: {mafia}")
        print("=" * 60)

        try:
            while (self.game_state.phase != GamePhase.GAME_OVER and
                   self.game_state.round_number <= self.config.max_rounds):
                print(f"\n--- NIGHT {self.game_state.round_number} ---")
                self.night_handler.run_night_phase()
                if self.game_state.phase == GamePhase.GAME_OVER:
                    break

                print(f"\n--- DAY {self.game_state.round_number} ---")
                self.voting_handler.run_voting_phase(self.agents)
        except IllegalStateTransitionError as e:
            print(f"\nGame stopped: {e.message}")

        winner = self.game_state.winner
        print("\n" + "=" * 60)
        if winner:
            winner_name = "Civilians" if winner.value == "civilians" else "Mafia"
            print(f"GAME OVER - {winner_name} WIN!")
        else:
            winner_name = "Draw"
            print(f"GAME OVER - Draw after {self.config.max_rounds} rounds")
        print("=" * 60)
        self._print_game_summary()
        return winner_name

    def _print_game_summary(self) -> None:
        """Print a formatted game summary."""
        summary = self.game_state.get_game_summary()

        print("\nGAME SUMMARY")
        print("-" * 60)
        print(f"Rounds played: {min(summary['round'], self.config.max_rounds)}")
        print(f"Random Seed: {self.config.random_seed}")
        print(f"Alive: {summary['alive_players']} "
              f"(mafia {summary['alive_mafia']}, civilians {summary['alive_civilians']})")

        for player in self.game_state.get_players():
            status = "alive" if player.is_alive else "eliminated"
            print(f"  - Player {player.player_id}: {player.role.value.title()} ({status})")

    def get_game_summary(self) -> Dict:
        """Get final game summary as dictionary."""
        return {
            "winner": self.game_state.winner.value if self.game_state.winner else None,
            "rounds": self.game_state.round_number,
            "final_state": self.game_state.get_game_summary(),
            "action_log": self.game_state.action_log[-10:],  # Last 10 actions
        }


def main():
    """Entry point for running a game."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run a Mafia game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                              # Use default config
  python main.py --config configs/default.yaml
  python main.py --seed 42 --players 8        # Reproducible 8-player game
  python main.py --interactive 1              # You vote for player 1
        """
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=os.environ.get("MAFIA_CONFIG"),
        help="Path to YAML configuration file (default: $MAFIA_CONFIG or built-in defaults)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=int(os.environ["MAFIA_SEED"]) if os.environ.get("MAFIA_SEED") else None,
        help="Random seed for reproducible games (default: $MAFIA_SEED or a generated seed)"
    )
    parser.add_argument(
        "--players", "-p",
        type=int,
        default=None,
        help="Number of players at the table. Overrides config file setting."
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="Rounds to play before the game is called a draw. Overrides config file setting."
    )
    parser.add_argument(
        "--interactive", "-i",
        type=int,
        default=None,
        metavar="SEAT",
        help="Let a person at the terminal vote for this seat"
    )

    args = parser.parse_args()

    config = load_config(args.config)
    if args.config:
        print(f"Using config: {args.config}")

    overrides = {}
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.players is not None:
        overrides["total_players"] = args.players
    if args.max_rounds is not None:
        overrides["max_rounds"] = args.max_rounds
    if args.interactive is not None:
        agent_types = dict(config.agent_types or {})
        agent_types[args.interactive] = "human_agent"
        overrides["agent_types"] = agent_types

    # replace() re-runs the config checks on the overridden values
    try:
        config = replace(config, **overrides)
    except ValueError as e:
        parser.error(str(e))

    game = MafiaGame(config=config)
    game.run_game()


if __name__ == "__main__":
    main()
