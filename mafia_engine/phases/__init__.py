"""
Phase handlers for night and voting phases.
"""

from .night_phase import NightPhaseHandler
from .voting import VotingHandler

__all__ = ['NightPhaseHandler', 'VotingHandler']
