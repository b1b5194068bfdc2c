"""
Core game engine components: roster, roles, night actions, voting and rule enforcement.
"""

from .game_engine import GameState, GamePhase
from .player import Player, PlayerStatus
from .registry import PlayerRegistry
from .roles import (
    RoleType, Team, DoctorActor, MafiaActor, PoliceActor, NightActor,
    create_actor, create_night_actors, night_roles, team_for_role,
)
from .night_actions import heal, attack, investigate, perform_night_action, NIGHT_ACTIONS
from .voting import VoteError, VoteResult, find_elimination_target
from .win_condition import evaluate_winner
from .exceptions import IllegalStateTransitionError
from .judge import Judge

__all__ = [
    'GameState',
    'GamePhase',
    'Player',
    'PlayerStatus',
    'PlayerRegistry',
    'RoleType',
    'Team',
    'DoctorActor',
    'MafiaActor',
    'PoliceActor',
    'NightActor',
    'create_actor',
    'create_night_actors',
    'night_roles',
    'team_for_role',
    'heal',
    'attack',
    'investigate',
    'perform_night_action',
    'NIGHT_ACTIONS',
    'VoteError',
    'VoteResult',
    'find_elimination_target',
    'evaluate_winner',
    'IllegalStateTransitionError',
    'Judge',
]
