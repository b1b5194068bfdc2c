"""
Game configuration and constants.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Table
    total_players: int = 6
    mafia_seat: int = 3  # Seat switched to Mafia at game start

    # Game settings
    max_rounds: int = 20  # Rounds the driver plays before calling a draw
    random_seed: Optional[int] = None  # Seed for night actions and random agents

    # Judge announcements
    use_judge_announcements: bool = True

    # Agent settings
    agent_type: str = "random_agent"  # Options: "random_agent" or "human_agent" (used if agent_types not specified)
    agent_types: Optional[Dict[int, str]] = field(default=None)  # Per-seat agent types: {player_id: "agent_type"}

    def __post_init__(self):
        if self.total_players < 1:
            raise ValueError(f"total_players must be at least 1, got {self.total_players}")
        if self.mafia_seat < 1:
            raise ValueError(f"mafia_seat must be at least 1, got {self.mafia_seat}")
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {self.max_rounds}")


# Default configuration instance
default_config = GameConfig()
