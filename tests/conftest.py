"""
Pytest fixtures for Mafia round engine tests.
"""

import pytest

from mafia_engine.core import GameState, Judge, Player, PlayerRegistry, RoleType
from mafia_engine.config.game_config import GameConfig


class FirstChoiceRng:
    """Stand-in for random.Random that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class LastChoiceRng:
    """Stand-in for random.Random that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def first_rng():
    return FirstChoiceRng()


@pytest.fixture
def last_rng():
    return LastChoiceRng()


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        random_seed=1234,
        use_judge_announcements=False  # Disable for cleaner test output
    )


@pytest.fixture
def registry():
    """Six seats, seat 3 is Mafia."""
    return PlayerRegistry.create(6, mafia_seat=3)


@pytest.fixture
def new_game_state():
    """A game state before start_game."""
    return GameState(random_seed=1234)


@pytest.fixture
def game_state(new_game_state):
    """A started six-player game in round 1."""
    new_game_state.start_game(6)
    return new_game_state


@pytest.fixture
def judge(new_game_state, game_config):
    """Create a judge over a game that has not started yet."""
    return Judge(new_game_state, game_config)


@pytest.fixture
def mafia_player(game_state) -> Player:
    """Get the mafia player."""
    return game_state.get_mafia_players()[0]


@pytest.fixture
def civilian_player(game_state) -> Player:
    """Get the first civilian."""
    return game_state.get_civilian_players()[0]


@pytest.fixture
def doctor_police_registry():
    """Five seats with a Doctor at 1, Police at 2 and Mafia at 5."""
    return PlayerRegistry([
        Player(player_id=1, role=RoleType.DOCTOR),
        Player(player_id=2, role=RoleType.POLICE),
        Player(player_id=3, role=RoleType.CIVILIAN),
        Player(player_id=4, role=RoleType.CIVILIAN),
        Player(player_id=5, role=RoleType.MAFIA),
    ])
