"""
Round engine for the Mafia party game.
"""

__version__ = "0.1.0"
