"""
Agent implementations for Mafia game players.
"""

from .base_agent import BaseAgent, AgentContext
from .random_agent import RandomAgent
from .human_agent import HumanAgent

__all__ = ['BaseAgent', 'AgentContext', 'RandomAgent', 'HumanAgent']
